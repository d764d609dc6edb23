"""Win probability and decimal odds for a single match."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from netprophet.odds.factors import compute_factors, rating_gap
from netprophet.odds.insights import generate_recommendations
from netprophet.odds.schemas import (
    CompetitorProfile,
    FactorBreakdown,
    HeadToHeadRecord,
    MatchContext,
    OddsResult,
)
from netprophet.odds.tuning import Bounds, OddsTuning

logger = logging.getLogger(__name__)

SECONDARY_FACTORS = (
    "form_advantage",
    "surface_advantage",
    "experience_advantage",
    "momentum_advantage",
)


def _meetings(h2h: HeadToHeadRecord | None) -> int:
    return h2h.meetings if h2h else 0


def is_even_matchup(gap: float, h2h: HeadToHeadRecord | None, tuning: OddsTuning) -> bool:
    return gap < tuning.even_gap and _meetings(h2h) == 0


def allocate_weights(
    p1: CompetitorProfile,
    p2: CompetitorProfile,
    h2h: HeadToHeadRecord | None,
    tuning: OddsTuning,
) -> dict[str, float]:
    """Split ``tuning.total_weight`` across the six factors."""

    gap = rating_gap(p1, p2)
    weaker_rating = min(p1.ntrp_rating, p2.ntrp_rating)

    ntrp_weight = tuning.ntrp_base_weight
    for threshold, weight in tuning.ntrp_weight_brackets:
        if gap >= threshold:
            ntrp_weight = weight
            if weaker_rating >= tuning.high_skill_rating:
                ntrp_weight += tuning.high_skill_weight_bonus
            break

    h2h_weight = min(
        tuning.h2h_weight_per_meeting * _meetings(h2h),
        tuning.h2h_weight_cap,
        max(tuning.total_weight - ntrp_weight, 0.0),
    )
    remaining = max(tuning.total_weight - ntrp_weight - h2h_weight, 0.0)
    if is_even_matchup(gap, h2h, tuning):
        remaining *= tuning.even_compression
    secondary_weight = remaining / len(SECONDARY_FACTORS)

    weights = {"ntrp_advantage": ntrp_weight, "head_to_head_advantage": h2h_weight}
    weights.update({name: secondary_weight for name in SECONDARY_FACTORS})
    return weights


def weighted_score(factors: FactorBreakdown, weights: Mapping[str, float]) -> float:
    score = 0.5
    for name, weight in weights.items():
        score += getattr(factors, name) * weight
    return score


def blend_head_to_head(
    score: float,
    h2h: HeadToHeadRecord | None,
    gap: float,
    tuning: OddsTuning,
) -> float:
    """Pull the score toward the raw head-to-head win rate.

    History counts for more between closely rated players.
    """

    if _meetings(h2h) < tuning.h2h_min_meetings:
        return score
    strength = min(
        tuning.h2h_blend_per_meeting * h2h.meetings / (1 + tuning.h2h_blend_gap_slope * gap),
        tuning.h2h_blend_cap,
    )
    return score * (1 - strength) + h2h.win_rate * strength


def apply_dominance_floor(score: float, h2h: HeadToHeadRecord | None, tuning: OddsTuning) -> float:
    if _meetings(h2h) < tuning.h2h_min_meetings or h2h.wins == h2h.losses:
        return score
    dominant_rate = max(h2h.wins, h2h.losses) / h2h.meetings
    tilt = min((dominant_rate - 0.5) * tuning.dominance_scale, tuning.dominance_cap)
    if h2h.wins > h2h.losses:
        return max(score, 0.5 + tilt)
    return min(score, 0.5 - tilt)


def probability_bounds(gap: float, h2h: HeadToHeadRecord | None, tuning: OddsTuning) -> Bounds:
    if is_even_matchup(gap, h2h, tuning):
        return tuning.even_bounds
    for threshold, bounds in tuning.bound_brackets:
        if gap >= threshold:
            return bounds
    return tuning.default_bounds


def to_decimal_odds(probability: float, margin: float, ceiling: float) -> float:
    return min(round((1 / probability) * (1 + margin), 2), ceiling)


def compute_confidence(
    p1: CompetitorProfile,
    p2: CompetitorProfile,
    factors: FactorBreakdown,
    h2h: HeadToHeadRecord | None,
    tuning: OddsTuning,
) -> float:
    confidence = tuning.base_confidence

    depth = min(p1.total_matches, p2.total_matches)
    for min_matches, bonus in tuning.depth_bonuses:
        if depth >= min_matches:
            confidence += bonus

    if p1.surface_win_rates is not None and p2.surface_win_rates is not None:
        confidence += tuning.surface_data_bonus
    if _meetings(h2h) > 0:
        confidence += tuning.h2h_data_bonus

    magnitude = factors.magnitude()
    for threshold, bonus in tuning.magnitude_bonuses:
        if magnitude > threshold:
            confidence += bonus

    return max(tuning.min_confidence, min(tuning.max_confidence, confidence))


def compute_odds(
    player1: CompetitorProfile | Mapping[str, Any],
    player2: CompetitorProfile | Mapping[str, Any],
    context: MatchContext | Mapping[str, Any],
    h2h: HeadToHeadRecord | Mapping[str, Any] | None = None,
    *,
    tuning: OddsTuning | None = None,
    random_fn: Callable[[], float] | None = None,
    as_of: date | None = None,
) -> OddsResult:
    """Calculate win probabilities and decimal odds for player 1 vs player 2.

    Inputs are validated before any arithmetic and a ``pydantic.ValidationError``
    is raised for out-of-contract data. The result carries a small random
    perturbation; pass ``random_fn=lambda: 0.5`` for an exact, repeatable call.
    """

    p1 = CompetitorProfile.model_validate(player1)
    p2 = CompetitorProfile.model_validate(player2)
    match = MatchContext.model_validate(context)
    record = HeadToHeadRecord.model_validate(h2h) if h2h is not None else None

    tuning = tuning or OddsTuning.from_settings()
    random_fn = random_fn or random.random
    as_of = as_of or date.today()

    factors = compute_factors(p1, p2, match, record, tuning, as_of)
    gap = rating_gap(p1, p2)
    weights = allocate_weights(p1, p2, record, tuning)

    score = weighted_score(factors, weights)
    score = blend_head_to_head(score, record, gap, tuning)
    score += (random_fn() - 0.5) * tuning.perturbation
    score = apply_dominance_floor(score, record, tuning)

    min_bound, max_bound = probability_bounds(gap, record, tuning)
    score = max(min_bound, min(max_bound, score))
    logger.debug(
        "odds %s vs %s: weights=%s bounds=(%.2f, %.2f) score=%.4f",
        p1.id,
        p2.id,
        weights,
        min_bound,
        max_bound,
        score,
    )

    player2_score = 1 - score
    return OddsResult(
        player1_win_probability=score,
        player2_win_probability=player2_score,
        player1_odds=to_decimal_odds(score, tuning.margin, tuning.max_decimal_odds),
        player2_odds=to_decimal_odds(player2_score, tuning.margin, tuning.max_decimal_odds),
        confidence=compute_confidence(p1, p2, factors, record, tuning),
        factors=factors,
        recommendations=generate_recommendations(p1, p2, factors, match, record, tuning),
        probability_bounds=(min_bound, max_bound),
    )
