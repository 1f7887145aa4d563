from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from rosterforge.models.failure import InvalidConfigError

StateT = TypeVar("StateT")

DEFAULT_CLEANUP_FRACTION = 0.1


class CleanupStrategy(str, Enum):
    """Eviction policy applied once the pool reaches capacity."""

    OLDEST = "oldest"
    LOWEST_RATING = "lowest-rating"
    RANDOM = "random"


class RunSummary(Protocol[StateT]):
    """Read-only view of a run, as supplied by the run orchestrator."""

    @property
    def id(self) -> str: ...

    @property
    def wins(self) -> int: ...

    @property
    def losses(self) -> int: ...

    @property
    def state(self) -> StateT: ...


@dataclass(frozen=True)
class SnapshotConfig:
    """
    Snapshot pool behavior.

    Attributes:
        expiry_ms: Snapshot lifetime in milliseconds
        max_snapshots_per_player: Live snapshots kept per player
        include_full_state: Copy run state into the snapshot (else empty)
        max_total_snapshots: Pool capacity (0 = unlimited)
        cleanup_strategy: Eviction policy at capacity
        cleanup_fraction: Share of the pool removed per cleanup (at least one)
    """

    expiry_ms: int
    max_snapshots_per_player: int
    include_full_state: bool = False
    max_total_snapshots: int = 0
    cleanup_strategy: CleanupStrategy = CleanupStrategy.OLDEST
    cleanup_fraction: float = DEFAULT_CLEANUP_FRACTION

    def __post_init__(self) -> None:
        if self.expiry_ms < 0:
            raise InvalidConfigError("SnapshotConfig", "expiry_ms must be >= 0")
        if self.max_snapshots_per_player < 1:
            raise InvalidConfigError("SnapshotConfig", "max_snapshots_per_player must be >= 1")
        if self.max_total_snapshots < 0:
            raise InvalidConfigError("SnapshotConfig", "max_total_snapshots must be >= 0")
        if not 0.0 < self.cleanup_fraction <= 1.0:
            raise InvalidConfigError(
                "SnapshotConfig",
                f"cleanup_fraction must be in (0, 1], got {self.cleanup_fraction}",
            )
        if not isinstance(self.cleanup_strategy, CleanupStrategy):
            try:
                object.__setattr__(
                    self, "cleanup_strategy", CleanupStrategy(self.cleanup_strategy)
                )
            except ValueError as e:
                raise InvalidConfigError(
                    "SnapshotConfig", f"unknown cleanup strategy {self.cleanup_strategy!r}"
                ) from e


@dataclass(frozen=True)
class Snapshot(Generic[StateT]):
    """
    Point-in-time, matchable summary of one player's run.

    Attributes:
        id: Unique snapshot identifier
        player_id: Owner of the run
        run_id: Run this snapshot was taken from
        wins: Wins at snapshot time
        losses: Losses at snapshot time
        rating: Player rating at snapshot time
        state: Game state (team composition), or {} when elided
        created_at: Creation time in epoch milliseconds
        size_bytes: Optional payload size for monitoring
    """

    id: str
    player_id: str
    run_id: str
    wins: int
    losses: int
    rating: float
    state: StateT | Mapping[str, Any]
    created_at: int
    size_bytes: int | None = None


@dataclass(frozen=True)
class SnapshotPoolStats:
    """Aggregate view of a snapshot pool."""

    total_count: int
    total_size_bytes: int
    oldest_timestamp: int
    by_wins: dict[int, int] = field(default_factory=dict)
