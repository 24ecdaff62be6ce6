"""Streamlit interface adapter."""

__all__: list[str] = []
