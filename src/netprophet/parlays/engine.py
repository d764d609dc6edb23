"""Parlay odds, bonus and streak arithmetic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from netprophet.parlays.types import ParlayCalculation, ParlayRules, WagerLeg, WagerValidation

logger = logging.getLogger(__name__)


def _rules(rules: ParlayRules | None) -> ParlayRules:
    return rules or ParlayRules.from_settings()


def combine_odds(legs: Sequence[WagerLeg]) -> float:
    decimal = 1.0
    for leg in legs:
        decimal *= leg.decimal_odds
    return decimal


def streak_booster(streak_count: int, rules: ParlayRules | None = None) -> float:
    """Payout multiplier earned by a run of consecutive winning wagers."""

    rules = _rules(rules)
    if streak_count < rules.streak_threshold:
        return 1.0
    boost = min(
        (streak_count - rules.streak_threshold + 1) * rules.streak_percentage,
        rules.max_streak_booster,
    )
    return 1 + boost


def safe_wager_cost(leg_count: int, rules: ParlayRules | None = None) -> int:
    if leg_count < 0:
        raise ValueError(f"leg_count must be non-negative, got {leg_count}")
    return _rules(rules).safe_wager_cost * leg_count


def compute_parlay(
    legs: Sequence[WagerLeg],
    stake: float,
    streak_count: int = 0,
    is_safe_wager: bool = False,
    *,
    rules: ParlayRules | None = None,
) -> ParlayCalculation:
    """Combine leg odds with the leg-count bonus and streak booster."""

    rules = _rules(rules)
    if not legs:
        return ParlayCalculation(
            base_odds=1.0,
            bonus_multiplier=1.0,
            streak_booster=1.0,
            final_odds=1.0,
            potential_payout=0.0,
            bonus_percentage=0.0,
            is_eligible_for_bonus=False,
        )

    base_odds = combine_odds(legs)
    eligible = len(legs) >= rules.bonus_threshold
    bonus_multiplier = 1 + rules.bonus_percentage if eligible else 1.0
    booster = streak_booster(streak_count, rules)
    final_odds = base_odds * bonus_multiplier * booster
    return ParlayCalculation(
        base_odds=base_odds,
        bonus_multiplier=bonus_multiplier,
        streak_booster=booster,
        final_odds=final_odds,
        potential_payout=stake * final_odds,
        bonus_percentage=rules.bonus_percentage * 100 if eligible else 0.0,
        is_eligible_for_bonus=eligible,
        safe_wager_cost=safe_wager_cost(len(legs), rules) if is_safe_wager else 0,
    )


def validate_wager(
    legs: Sequence[WagerLeg],
    stake: float,
    balance: float,
    *,
    rules: ParlayRules | None = None,
) -> WagerValidation:
    """Check whether a parlay can be placed; never raises for business rules."""

    rules = _rules(rules)
    reason: str | None = None
    if len(legs) < rules.min_legs:
        reason = f"Parlay requires at least {rules.min_legs} legs"
    elif stake <= 0:
        reason = "Stake must be greater than 0"
    elif stake > balance:
        reason = "Insufficient balance"
    elif any(leg.is_locked for leg in legs):
        reason = "Some matches are already locked"

    if reason:
        logger.info("Rejected parlay with %d legs: %s", len(legs), reason)
        return WagerValidation(is_valid=False, reason=reason)
    return WagerValidation(is_valid=True)


def selection_odds(
    selection: str,
    player1_name: str,
    player1_odds: float,
    player2_name: str,
    player2_odds: float,
) -> float:
    """Odds for whichever competitor the selection text names by surname.

    Falls back to the average price when neither surname appears.
    """

    text = selection.lower()
    for name, odds in ((player1_name, player1_odds), (player2_name, player2_odds)):
        parts = name.split()
        if len(parts) > 1 and parts[-1].lower() in text:
            return odds
    return (player1_odds + player2_odds) / 2


def bonus_descriptions(
    leg_count: int,
    streak_count: int,
    rules: ParlayRules | None = None,
) -> list[str]:
    rules = _rules(rules)
    descriptions: list[str] = []
    if leg_count >= rules.bonus_threshold:
        descriptions.append(f"{rules.bonus_percentage:.0%} Bonus for {leg_count}+ picks")
    if streak_count >= rules.streak_threshold:
        boost = streak_booster(streak_count, rules) - 1
        descriptions.append(f"+{boost * 100:.1f}% Streak Booster ({streak_count} wins)")
    return descriptions


def format_parlay_odds(odds: float) -> str:
    return f"{odds:.2f}"


def format_payout(payout: float) -> str:
    return f"{payout:.0f}"
