"""Pydantic schemas for competitor profiles and odds results."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Outcome = Literal["W", "L"]


class Surface(str, Enum):
    HARD_COURT = "Hard Court"
    CLAY_COURT = "Clay Court"
    GRASS_COURT = "Grass Court"
    INDOOR = "Indoor"


class _EngineInput(BaseModel):
    """Immutable input record; re-validated every time it enters the engine."""

    model_config = ConfigDict(frozen=True, revalidate_instances="always")


class SurfaceWinRates(_EngineInput):
    hard_court: float | None = Field(default=None, ge=0.0, le=1.0)
    clay_court: float | None = Field(default=None, ge=0.0, le=1.0)
    grass_court: float | None = Field(default=None, ge=0.0, le=1.0)
    indoor: float | None = Field(default=None, ge=0.0, le=1.0)

    def for_surface(self, surface: Surface) -> float | None:
        return {
            Surface.HARD_COURT: self.hard_court,
            Surface.CLAY_COURT: self.clay_court,
            Surface.GRASS_COURT: self.grass_court,
            Surface.INDOOR: self.indoor,
        }[surface]


class CompetitorProfile(_EngineInput):
    """Player data consumed by the odds calculator."""

    id: str
    first_name: str
    last_name: str
    ntrp_rating: float = Field(ge=1.0, le=7.0)
    wins: int = Field(ge=0)
    losses: int = Field(ge=0)
    last5: list[Outcome] = Field(min_length=5, max_length=5, description="most recent first")
    current_streak: int = Field(ge=0)
    streak_type: Outcome
    surface_preference: Surface
    surface_win_rates: SurfaceWinRates | None = None
    aggressiveness: int = Field(ge=1, le=10)
    stamina: int = Field(ge=1, le=10)
    consistency: int = Field(ge=1, le=10)
    age: int = Field(ge=16, le=80)
    hand: Literal["left", "right"]
    club: str = ""
    notes: str | None = None
    last_match_date: date | None = None
    injury_status: Literal["healthy", "minor", "major"] | None = None
    seasonal_form: float | None = Field(default=None, ge=0.0, le=1.0)

    @property
    def total_matches(self) -> int:
        return self.wins + self.losses

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class MatchContext(_EngineInput):
    surface: Surface


class HeadToHeadRecord(_EngineInput):
    """Aggregate meetings between two competitors, from player 1's side."""

    wins: int = Field(ge=0)
    losses: int = Field(ge=0)
    last_match_result: Outcome | None = None
    last_match_date: date | None = None

    @property
    def meetings(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        return self.wins / self.meetings if self.meetings else 0.5


class FactorBreakdown(BaseModel):
    ntrp_advantage: float
    form_advantage: float
    surface_advantage: float
    experience_advantage: float
    momentum_advantage: float
    head_to_head_advantage: float

    def magnitude(self) -> float:
        """Sum of the absolute factors that drive confidence."""

        return (
            abs(self.ntrp_advantage)
            + abs(self.form_advantage)
            + abs(self.surface_advantage)
            + abs(self.head_to_head_advantage)
        )


class OddsResult(BaseModel):
    player1_win_probability: float
    player2_win_probability: float
    player1_odds: float
    player2_odds: float
    confidence: float
    factors: FactorBreakdown
    recommendations: list[str] = Field(default_factory=list)
    probability_bounds: tuple[float, float] = (0.05, 0.95)
