from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic

from rosterforge.models.failure import InvalidConfigError
from rosterforge.models.snapshot import StateT


class RunPhase(str, Enum):
    """Stage of the run loop."""

    DRAFT = "draft"
    BATTLE = "battle"
    SHOP = "shop"
    EVENT = "event"
    BOSS = "boss"
    REST = "rest"


class RunStatus(str, Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class RunEventType(str, Enum):
    WIN = "win"
    LOSS = "loss"
    PHASE_CHANGE = "phase_change"
    DRAFT = "draft"
    SHOP = "shop"


@dataclass(frozen=True)
class RunConfig:
    """
    Run length and phase loop.

    Attributes:
        wins_to_complete: Wins that end the run as won
        max_losses: Losses that end the run as lost
        phases: Phase cycle, repeated until the run ends
        track_streaks: Maintain win/lose streak counters
    """

    wins_to_complete: int
    max_losses: int
    phases: tuple[RunPhase, ...]
    track_streaks: bool = True

    def __post_init__(self) -> None:
        if self.wins_to_complete < 1:
            raise InvalidConfigError("RunConfig", "wins_to_complete must be at least 1")
        if self.max_losses < 1:
            raise InvalidConfigError("RunConfig", "max_losses must be at least 1")
        if not self.phases:
            raise InvalidConfigError("RunConfig", "phases must not be empty")
        try:
            phases = tuple(RunPhase(phase) for phase in self.phases)
        except ValueError as e:
            raise InvalidConfigError("RunConfig", f"unknown phase in {self.phases!r}") from e
        object.__setattr__(self, "phases", phases)


@dataclass(frozen=True)
class RunEvent:
    type: RunEventType
    timestamp: int
    data: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Run(Generic[StateT]):
    """
    One player's run: progress, streaks, phase and game state.

    Satisfies RunSummary, so a Run can be passed to create_snapshot directly.

    INVARIANT: status is ACTIVE iff wins < wins_to_complete and
    losses < max_losses.
    INVARIANT: history is append-only across operations.
    """

    id: str
    config: RunConfig
    wins: int
    losses: int
    current_phase_index: int
    win_streak: int
    lose_streak: int
    status: RunStatus
    state: StateT
    history: tuple[RunEvent, ...] = ()


@dataclass(frozen=True)
class RunStats:
    """Summary statistics of a run."""

    wins: int
    losses: int
    win_rate: float
    longest_win_streak: int
