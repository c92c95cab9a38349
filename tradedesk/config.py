"""
Trade engine configuration.

Realism toggles that change how trades are evaluated, plus the default
negotiation round limit. Every setting can be overridden via environment
variables; the evaluator only ever sees the TradeSettings value it is
passed.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class TradeSettings:
    """Feature toggles for trade evaluation."""

    # Contract burden and salary retention count towards a deal's value
    salary_dump_trades_enabled: bool = field(
        default_factory=lambda: _env_flag("TRADEDESK_SALARY_DUMP_TRADES")
    )

    # Unhappy players can feature in trade rumours, not just expiring ones
    trade_requests_enabled: bool = field(
        default_factory=lambda: _env_flag("TRADEDESK_TRADE_REQUESTS")
    )

    # Default cap on propose/counter rounds in a negotiation
    max_negotiation_rounds: int = field(
        default_factory=lambda: _env_int("TRADEDESK_MAX_NEGOTIATION_ROUNDS", 3)
    )

    @classmethod
    def from_env(cls) -> "TradeSettings":
        """Create settings from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate settings, return list of errors."""
        errors = []
        if self.max_negotiation_rounds < 1:
            errors.append("max_negotiation_rounds must be at least 1")
        return errors


# Singleton settings instance
_settings: Optional[TradeSettings] = None


def get_settings() -> TradeSettings:
    """Get the global trade settings."""
    global _settings
    if _settings is None:
        _settings = TradeSettings.from_env()
    return _settings


def set_settings(settings: Optional[TradeSettings]) -> None:
    """
    Replace the global settings.

    Passing None resets to environment defaults on next access.
    """
    global _settings
    _settings = settings
