"""
Snapshot pool lifecycle.

A snapshot pool is a tuple of Snapshot values threaded by value between
calls: every operation takes a pool and returns a new pool. The caller owns
the pool and must serialize read-modify-write cycles when requests race.

Limit enforcement (before adding a new snapshot):
1. Drop expired snapshots
2. If the new snapshot's player already holds max_snapshots_per_player live
   snapshots, evict that player's single oldest one
3. If the pool still holds >= max_total_snapshots (when nonzero), apply the
   cleanup strategy

INVARIANT: Cleanup removes max(1, ceil(len(pool) * cleanup_fraction))
snapshots from a non-empty pool.
"""

import logging
import math
from collections import Counter
from collections.abc import Iterable
from typing import Any

from rosterforge.models.snapshot import (
    CleanupStrategy,
    RunSummary,
    Snapshot,
    SnapshotConfig,
    SnapshotPoolStats,
    StateT,
)
from rosterforge.rng import RandomFactory, SeededRandom, generate_id, now_ms, resolve_seed

logger = logging.getLogger(__name__)

SnapshotPool = tuple[Snapshot[Any], ...]


def generate_snapshot_id(timestamp_ms: int | None = None) -> str:
    """Unique snapshot id: snap_<base36 timestamp>_<6 random chars>."""
    return generate_id("snap", timestamp_ms)


def create_snapshot(
    run: RunSummary[StateT],
    player_id: str,
    rating: float,
    config: SnapshotConfig,
    *,
    now: int | None = None,
    snapshot_id: str | None = None,
    size_bytes: int | None = None,
) -> Snapshot[StateT]:
    """
    Capture a matchable summary of a run.

    The run state is included only when config.include_full_state is set;
    otherwise an empty payload keeps large pools small.

    Args:
        run: Run being summarized (id, wins, losses, state)
        player_id: Owner of the run
        rating: Player's current rating
        config: Snapshot configuration
        now: Creation time in epoch ms (defaults to current time)
        snapshot_id: Explicit id (defaults to a generated one)
        size_bytes: Optional payload size for monitoring

    Returns:
        New Snapshot
    """
    created_at = now_ms() if now is None else now
    state: Any = run.state if config.include_full_state else {}

    return Snapshot(
        id=snapshot_id or generate_snapshot_id(created_at),
        player_id=player_id,
        run_id=run.id,
        wins=run.wins,
        losses=run.losses,
        rating=rating,
        state=state,
        created_at=created_at,
        size_bytes=size_bytes,
    )


def is_snapshot_expired(
    snapshot: Snapshot[Any],
    config: SnapshotConfig,
    now: int | None = None,
) -> bool:
    """True when the snapshot is older than expiry_ms."""
    current = now_ms() if now is None else now
    return current - snapshot.created_at > config.expiry_ms


def filter_expired_snapshots(
    pool: Iterable[Snapshot[Any]],
    config: SnapshotConfig,
    now: int | None = None,
) -> SnapshotPool:
    """Return only the live (non-expired) snapshots."""
    current = now_ms() if now is None else now
    return tuple(s for s in pool if not is_snapshot_expired(s, config, current))


def _removal_count(pool_size: int, fraction: float) -> int:
    # round() absorbs float noise such as 70 * 0.1 == 7.000000000000001
    return max(1, math.ceil(round(pool_size * fraction, 9)))


def apply_cleanup_strategy(
    pool: Iterable[Snapshot[Any]],
    config: SnapshotConfig,
    seed: int | None = None,
    rng_factory: RandomFactory = SeededRandom,
) -> SnapshotPool:
    """
    Shrink the pool according to config.cleanup_strategy.

    - oldest: earliest created_at removed first
    - lowest-rating: lowest rating removed first
    - random: seeded shuffle, then truncate

    Returns:
        Reduced pool (an empty pool is returned unchanged)
    """
    snapshots = tuple(pool)
    if not snapshots:
        return snapshots

    keep = len(snapshots) - _removal_count(len(snapshots), config.cleanup_fraction)
    strategy = config.cleanup_strategy

    if strategy is CleanupStrategy.OLDEST:
        survivors = sorted(snapshots, key=lambda s: s.created_at, reverse=True)[:keep]
    elif strategy is CleanupStrategy.LOWEST_RATING:
        survivors = sorted(snapshots, key=lambda s: s.rating, reverse=True)[:keep]
    else:
        rng = rng_factory(resolve_seed(seed))
        survivors = rng.shuffle(snapshots)[:keep]

    logger.info(
        "Snapshot pool cleanup (%s): %d -> %d",
        strategy.value,
        len(snapshots),
        len(survivors),
    )
    return tuple(survivors)


def enforce_snapshot_limits(
    pool: Iterable[Snapshot[Any]],
    new_snapshot: Snapshot[Any],
    config: SnapshotConfig,
    seed: int | None = None,
    now: int | None = None,
    rng_factory: RandomFactory = SeededRandom,
) -> SnapshotPool:
    """
    Make room for new_snapshot. The new snapshot itself is not added.

    Args:
        pool: Current pool
        new_snapshot: Snapshot about to be added (its player_id is used)
        config: Snapshot configuration
        seed: Seed for the random cleanup strategy
        now: Current time in epoch ms for expiry checks

    Returns:
        Pool with limits enforced
    """
    result = filter_expired_snapshots(pool, config, now)

    player_snapshots = [s for s in result if s.player_id == new_snapshot.player_id]
    if len(player_snapshots) >= config.max_snapshots_per_player:
        oldest = min(player_snapshots, key=lambda s: s.created_at)
        result = tuple(s for s in result if s.id != oldest.id)
        logger.debug(
            "Evicted snapshot %s: player %s at limit %d",
            oldest.id,
            new_snapshot.player_id,
            config.max_snapshots_per_player,
        )

    if config.max_total_snapshots > 0 and len(result) >= config.max_total_snapshots:
        result = apply_cleanup_strategy(result, config, seed, rng_factory)

    return result


def add_snapshot(
    pool: Iterable[Snapshot[Any]],
    snapshot: Snapshot[Any],
    config: SnapshotConfig,
    seed: int | None = None,
    now: int | None = None,
    rng_factory: RandomFactory = SeededRandom,
) -> SnapshotPool:
    """Enforce limits for the snapshot, then append it to the pool."""
    trimmed = enforce_snapshot_limits(pool, snapshot, config, seed, now, rng_factory)
    return (*trimmed, snapshot)


def get_snapshot_pool_stats(pool: Iterable[Snapshot[Any]]) -> SnapshotPoolStats:
    """
    Summarize a pool.

    oldest_timestamp is 0 for an empty pool.
    """
    snapshots = tuple(pool)
    if not snapshots:
        return SnapshotPoolStats(total_count=0, total_size_bytes=0, oldest_timestamp=0)

    return SnapshotPoolStats(
        total_count=len(snapshots),
        total_size_bytes=sum(s.size_bytes or 0 for s in snapshots),
        oldest_timestamp=min(s.created_at for s in snapshots),
        by_wins=dict(Counter(s.wins for s in snapshots)),
    )
