"""Per-factor advantage scores, each saturated into [-1, 1] with tanh.

Every function returns the advantage of player 1 over player 2: positive
values favour player 1, negative values favour player 2.
"""

from __future__ import annotations

import math
from datetime import date

from netprophet.odds.schemas import (
    CompetitorProfile,
    FactorBreakdown,
    HeadToHeadRecord,
    MatchContext,
    Surface,
)
from netprophet.odds.tuning import OddsTuning


RATING_PRECISION = 6


def rating_difference(p1: CompetitorProfile, p2: CompetitorProfile) -> float:
    """Signed NTRP difference, rounded so decimal ratings land on their bracket."""

    return round(p1.ntrp_rating - p2.ntrp_rating, RATING_PRECISION)


def rating_gap(p1: CompetitorProfile, p2: CompetitorProfile) -> float:
    return abs(rating_difference(p1, p2))


def ntrp_advantage(p1: CompetitorProfile, p2: CompetitorProfile, tuning: OddsTuning) -> float:
    diff = rating_difference(p1, p2)
    if abs(diff) >= tuning.ntrp_significant_gap:
        return math.tanh(diff * tuning.ntrp_significant_multiplier)

    base_rating = min(p1.ntrp_rating, p2.ntrp_rating)
    scaling = tuning.ntrp_top_tier_scaling
    for ceiling, tier_scaling in tuning.ntrp_tier_scaling:
        if base_rating < ceiling:
            scaling = tier_scaling
            break
    return math.tanh(diff * scaling * tuning.ntrp_small_gap_slope)


def shrunk_win_rate(player: CompetitorProfile, tuning: OddsTuning) -> float:
    """Win rate pulled toward 0.5 for players with few matches."""

    matches = player.total_matches
    if matches >= tuning.bayes_min_matches:
        return player.wins / matches
    return (player.wins + tuning.bayes_prior_wins) / (matches + tuning.bayes_prior_matches)


def recent_form(player: CompetitorProfile, tuning: OddsTuning) -> float:
    return sum(
        weight
        for result, weight in zip(player.last5, tuning.recency_weights)
        if result == "W"
    )


def form_advantage(p1: CompetitorProfile, p2: CompetitorProfile, tuning: OddsTuning) -> float:
    combined = p1.total_matches + p2.total_matches
    recent_share = min(
        tuning.recent_share_max,
        max(tuning.recent_share_min, combined / tuning.recent_share_divisor),
    )
    overall_share = 1 - recent_share

    p1_form = recent_form(p1, tuning) * recent_share + shrunk_win_rate(p1, tuning) * overall_share
    p2_form = recent_form(p2, tuning) * recent_share + shrunk_win_rate(p2, tuning) * overall_share
    return math.tanh((p1_form - p2_form) * tuning.form_scale)


def surface_win_rate(player: CompetitorProfile, surface: Surface, tuning: OddsTuning) -> float:
    if player.surface_win_rates is None:
        if player.surface_preference == surface:
            return tuning.preferred_surface_rate
        return tuning.other_surface_rate
    rate = player.surface_win_rates.for_surface(surface)
    return tuning.unknown_surface_rate if rate is None else rate


def surface_advantage(
    p1: CompetitorProfile,
    p2: CompetitorProfile,
    surface: Surface,
    tuning: OddsTuning,
) -> float:
    diff = surface_win_rate(p1, surface, tuning) - surface_win_rate(p2, surface, tuning)
    return math.tanh(diff * tuning.surface_scale)


def experience_advantage(p1: CompetitorProfile, p2: CompetitorProfile, tuning: OddsTuning) -> float:
    def experience(player: CompetitorProfile) -> float:
        return (
            player.age * tuning.experience_age_weight
            + player.total_matches * tuning.experience_match_weight
        )

    return math.tanh((experience(p1) - experience(p2)) * tuning.experience_scale)


def momentum(player: CompetitorProfile) -> float:
    """Square-root damped streak, negative for losing streaks."""

    value = math.sqrt(player.current_streak)
    return value if player.streak_type == "W" else -value


def momentum_advantage(p1: CompetitorProfile, p2: CompetitorProfile, tuning: OddsTuning) -> float:
    return math.tanh((momentum(p1) - momentum(p2)) * tuning.momentum_scale)


def head_to_head_advantage(
    h2h: HeadToHeadRecord | None,
    tuning: OddsTuning,
    as_of: date,
) -> float:
    if h2h is None or h2h.meetings == 0:
        return 0.0

    volume = min(1 + tuning.h2h_volume_step * h2h.meetings, tuning.h2h_volume_cap)
    recency = 0.0
    if h2h.last_match_result and h2h.last_match_date:
        days_since = (as_of - h2h.last_match_date).days
        if days_since < tuning.h2h_recency_days:
            recency = tuning.h2h_recency_bonus if h2h.last_match_result == "W" else -tuning.h2h_recency_bonus
    return math.tanh((h2h.win_rate - 0.5) * tuning.h2h_scale * volume + recency)


def compute_factors(
    p1: CompetitorProfile,
    p2: CompetitorProfile,
    context: MatchContext,
    h2h: HeadToHeadRecord | None,
    tuning: OddsTuning,
    as_of: date,
) -> FactorBreakdown:
    return FactorBreakdown(
        ntrp_advantage=ntrp_advantage(p1, p2, tuning),
        form_advantage=form_advantage(p1, p2, tuning),
        surface_advantage=surface_advantage(p1, p2, context.surface, tuning),
        experience_advantage=experience_advantage(p1, p2, tuning),
        momentum_advantage=momentum_advantage(p1, p2, tuning),
        head_to_head_advantage=head_to_head_advantage(h2h, tuning, as_of),
    )
