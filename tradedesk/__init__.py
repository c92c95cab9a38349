"""Tradedesk - trade negotiation engine for a football league manager."""

__version__ = "0.1.0"
