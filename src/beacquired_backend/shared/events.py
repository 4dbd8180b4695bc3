"""Score and placement journal primitives shared across the backend."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from beacquired_backend.shared.value_objects import (  # noqa: TC001
    CellCoordinate,
    PlacementKind,
)


class ScoreAward(BaseModel):
    """Points paid to one shareholder of a company absorbed in a merge."""

    model_config = ConfigDict(frozen=True)

    player_id: int = Field(..., ge=1)
    company: str = Field(..., min_length=1)
    shares: int = Field(..., ge=1)
    points: int = Field(..., ge=0)


class PlacementEvent(BaseModel):
    """Immutable journal entry recorded for every resolved card play.

    ``sequence`` is unique per entry. ``turn_index`` counts successful plays
    only, so a rejected play and its retry share the same turn.
    """

    model_config = ConfigDict(frozen=True)

    sequence: int = Field(..., ge=0)
    turn_index: int = Field(..., ge=0)
    player_id: int = Field(..., ge=1)
    cell: CellCoordinate
    kind: PlacementKind
    company: str | None = None
    absorbed: tuple[str, ...] = Field(default_factory=tuple)
    awards: tuple[ScoreAward, ...] = Field(default_factory=tuple)
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))

    @model_validator(mode="after")
    def _ensure_awards_follow_merges(self) -> PlacementEvent:
        """Only merges pay out, and only for the companies they absorbed."""
        if self.awards and self.kind is not PlacementKind.MERGED:
            msg = "Score awards are only recorded for merges."
            raise ValueError(msg)
        for award in self.awards:
            if award.company not in self.absorbed:
                msg = f"Award references non-absorbed company '{award.company}'."
                raise ValueError(msg)
        return self


__all__ = ["PlacementEvent", "ScoreAward"]
