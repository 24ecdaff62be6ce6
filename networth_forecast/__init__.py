"""Net worth forecasting and aggregation engine."""
