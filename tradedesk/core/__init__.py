"""Core league models and the trade engine."""
