"""Data models for structured screenplays."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

TimeOfDay = Literal["INT", "EXT", "INT/EXT"]
TimePeriod = Literal["DAY", "NIGHT", "DAWN", "DUSK", "CONTINUOUS"]

DEFAULT_SCENE_DESCRIPTION = "Scene description"
MAX_DESCRIPTION_LENGTH = 500
MIN_DURATION = 3
MAX_DURATION = 10


class DialogueEntry(BaseModel):
    """One dialogue turn: consecutive lines spoken by a single character."""

    model_config = ConfigDict(frozen=True)

    character: str = Field(..., min_length=1)
    lines: tuple[str, ...] = Field(..., min_length=1)


class Act(BaseModel):
    """A document-level act marker."""

    model_config = ConfigDict(frozen=True)

    act_number: int = Field(..., ge=1, le=5)
    title: str
    description: str = ""


class Scene(BaseModel):
    """A single scene with its heading components and extracted content."""

    model_config = ConfigDict(frozen=True)

    scene_id: str
    scene_number: int = Field(..., ge=1)
    time_of_day: TimeOfDay
    location: str
    time_period: TimePeriod
    description: str = Field(
        default=DEFAULT_SCENE_DESCRIPTION,
        min_length=1,
        max_length=MAX_DESCRIPTION_LENGTH,
    )
    action: tuple[str, ...] = ()
    dialogue: tuple[DialogueEntry, ...] = ()
    characters: tuple[str, ...] = ()
    duration_estimate: int = Field(default=MIN_DURATION, ge=MIN_DURATION, le=MAX_DURATION)

    @model_validator(mode="after")
    def check_consistency(self) -> Scene:
        """Check the scene id and the speaker/character correspondence."""
        if self.scene_id != f"scene_{self.scene_number}":
            raise ValueError(
                f"scene_id {self.scene_id!r} does not match "
                f"scene_number {self.scene_number}"
            )
        if len(set(self.characters)) != len(self.characters):
            raise ValueError("characters must be unique")
        speakers = {entry.character for entry in self.dialogue}
        if speakers != set(self.characters):
            raise ValueError("characters must be exactly the dialogue speakers")
        return self


class Screenplay(BaseModel):
    """A parsed screenplay: acts plus at least one scene."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    logline: str = ""
    acts: tuple[Act, ...] = ()
    scenes: tuple[Scene, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_numbering(self) -> Screenplay:
        """Scenes must be numbered 1..N in order."""
        numbers = [scene.scene_number for scene in self.scenes]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"scene numbers must be contiguous from 1, got {numbers}")
        return self

    @property
    def characters(self) -> tuple[str, ...]:
        """All speaking characters, in order of first appearance."""
        seen: dict[str, None] = {}
        for scene in self.scenes:
            for name in scene.characters:
                seen.setdefault(name, None)
        return tuple(seen)

    @property
    def total_duration(self) -> int:
        """Sum of the per-scene duration estimates."""
        return sum(scene.duration_estimate for scene in self.scenes)
