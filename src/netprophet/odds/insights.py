"""Short human-readable insights attached to an odds result."""

from __future__ import annotations

from netprophet.odds.schemas import (
    CompetitorProfile,
    FactorBreakdown,
    HeadToHeadRecord,
    MatchContext,
)
from netprophet.odds.tuning import OddsTuning


def _pick(
    value: float,
    p1: CompetitorProfile,
    p2: CompetitorProfile,
) -> tuple[CompetitorProfile, CompetitorProfile]:
    return (p1, p2) if value > 0 else (p2, p1)


def generate_recommendations(
    p1: CompetitorProfile,
    p2: CompetitorProfile,
    factors: FactorBreakdown,
    context: MatchContext,
    h2h: HeadToHeadRecord | None,
    tuning: OddsTuning,
) -> list[str]:
    """Return up to ``tuning.max_recommendations`` insights in priority order."""

    recommendations: list[str] = []

    h2h_value = factors.head_to_head_advantage
    if abs(h2h_value) > tuning.h2h_report_threshold and h2h and h2h.meetings:
        leader, trailer = _pick(h2h_value, p1, p2)
        wins, losses = (h2h.wins, h2h.losses) if h2h_value > 0 else (h2h.losses, h2h.wins)
        if wins > losses:
            recommendations.append(
                f"{leader.first_name} leads H2H vs {trailer.first_name} "
                f"{wins}-{losses} ({wins / h2h.meetings:.0%} win rate)"
            )

    if abs(factors.ntrp_advantage) > tuning.ntrp_report_threshold:
        stronger, _ = _pick(factors.ntrp_advantage, p1, p2)
        recommendations.append(f"{stronger.first_name} has NTRP advantage ({stronger.ntrp_rating})")

    if abs(factors.surface_advantage) > tuning.surface_report_threshold:
        specialist, _ = _pick(factors.surface_advantage, p1, p2)
        rate = None
        if specialist.surface_win_rates is not None:
            rate = specialist.surface_win_rates.for_surface(context.surface)
        if rate is not None:
            recommendations.append(
                f"{specialist.first_name} excels on {context.surface.value} ({rate:.0%} win rate)"
            )
        elif specialist.surface_preference == context.surface:
            recommendations.append(f"{specialist.first_name} prefers {context.surface.value}")
        else:
            recommendations.append(f"{specialist.first_name} has the edge on {context.surface.value}")

    if abs(factors.form_advantage) > tuning.form_report_threshold:
        in_form, _ = _pick(factors.form_advantage, p1, p2)
        recent_wins = in_form.last5.count("W")
        recommendations.append(
            f"{in_form.first_name} in good form ({recent_wins}/{len(in_form.last5)} recent wins)"
        )

    return recommendations[: tuning.max_recommendations]
