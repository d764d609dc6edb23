"""Numeric constants for the odds calculator."""

from __future__ import annotations

from dataclasses import dataclass, replace

from netprophet.config import Settings, get_settings

Bounds = tuple[float, float]


@dataclass(frozen=True)
class OddsTuning:
    """Every weight, threshold and cap used by the calculator.

    Bracket tables are ordered from the widest rating gap down; the first
    entry whose threshold the gap reaches wins.
    """

    # NTRP factor
    ntrp_significant_gap: float = 0.5
    ntrp_significant_multiplier: float = 1.5
    ntrp_tier_scaling: tuple[tuple[float, float], ...] = ((4.0, 1.2), (5.0, 1.0))
    ntrp_top_tier_scaling: float = 0.8
    ntrp_small_gap_slope: float = 0.8

    # form factor
    bayes_min_matches: int = 10
    bayes_prior_wins: float = 5.0
    bayes_prior_matches: float = 10.0
    recency_weights: tuple[float, ...] = (0.4, 0.25, 0.2, 0.1, 0.05)
    recent_share_min: float = 0.5
    recent_share_max: float = 0.8
    recent_share_divisor: float = 40.0
    form_scale: float = 1.5

    # surface factor
    preferred_surface_rate: float = 0.65
    other_surface_rate: float = 0.35
    unknown_surface_rate: float = 0.5
    surface_scale: float = 0.3

    # experience and momentum factors
    experience_age_weight: float = 0.3
    experience_match_weight: float = 0.7
    experience_scale: float = 0.005
    momentum_scale: float = 0.15

    # head-to-head factor
    h2h_scale: float = 1.5
    h2h_volume_step: float = 0.1
    h2h_volume_cap: float = 2.0
    h2h_recency_days: int = 180
    h2h_recency_bonus: float = 0.05

    # weight allocation
    total_weight: float = 0.75
    ntrp_base_weight: float = 0.30
    ntrp_weight_brackets: tuple[tuple[float, float], ...] = ((1.5, 0.60), (1.0, 0.50), (0.5, 0.40))
    high_skill_rating: float = 4.5
    high_skill_weight_bonus: float = 0.05
    h2h_weight_per_meeting: float = 0.04
    h2h_weight_cap: float = 0.20
    even_gap: float = 0.1
    even_compression: float = 0.3

    # head-to-head blending and dominance floor
    h2h_min_meetings: int = 2
    h2h_blend_per_meeting: float = 0.1
    h2h_blend_gap_slope: float = 2.0
    h2h_blend_cap: float = 0.85
    dominance_scale: float = 0.5
    dominance_cap: float = 0.2

    # perturbation, bounds, pricing
    perturbation: float = 0.05
    even_bounds: Bounds = (0.42, 0.58)
    default_bounds: Bounds = (0.35, 0.65)
    bound_brackets: tuple[tuple[float, Bounds], ...] = (
        (1.5, (0.05, 0.95)),
        (1.0, (0.10, 0.90)),
        (0.5, (0.15, 0.85)),
        (0.35, (0.25, 0.75)),
        (0.2, (0.30, 0.70)),
    )
    margin: float = 0.05
    max_decimal_odds: float = 19.99

    # confidence
    base_confidence: float = 0.6
    depth_bonuses: tuple[tuple[int, float], ...] = ((15, 0.15), (30, 0.10))
    surface_data_bonus: float = 0.05
    h2h_data_bonus: float = 0.10
    magnitude_bonuses: tuple[tuple[float, float], ...] = ((0.6, 0.10), (1.0, 0.05))
    min_confidence: float = 0.3
    max_confidence: float = 0.95

    # recommendation thresholds
    h2h_report_threshold: float = 0.1
    ntrp_report_threshold: float = 0.15
    surface_report_threshold: float = 0.1
    form_report_threshold: float = 0.1
    max_recommendations: int = 3

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> OddsTuning:
        settings = settings or get_settings()
        return replace(cls(), margin=settings.odds_margin, perturbation=settings.odds_perturbation)
