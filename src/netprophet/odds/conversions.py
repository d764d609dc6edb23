"""Odds format conversions and value helpers."""

from __future__ import annotations


def _check_decimal(odds: float) -> None:
    if odds <= 1.0:
        raise ValueError(f"Decimal odds must be greater than 1.0, got {odds}")


def american_to_decimal(odds: int) -> float:
    if odds == 0:
        raise ValueError("American odds cannot be 0")
    return 1 + (odds / 100) if odds > 0 else 1 + (100 / abs(odds))


def format_american(odds: float) -> str:
    """Render decimal odds the way US books quote them, e.g. ``+150``."""

    _check_decimal(odds)
    if odds >= 2.0:
        return f"+{round((odds - 1) * 100)}"
    return f"-{round(100 / (odds - 1))}"


def implied_probability(odds: float) -> float:
    _check_decimal(odds)
    return 1 / odds


def expected_value(odds: float, stake: float, probability: float) -> float:
    return (odds - 1) * stake * probability - stake * (1 - probability)
