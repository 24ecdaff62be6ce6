"""Adapters: CLI entry points and user interfaces."""
