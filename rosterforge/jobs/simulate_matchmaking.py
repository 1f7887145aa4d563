"""
Matchmaking simulation job.

Publishes snapshots for a batch of synthetic players into an in-memory pool
and matches each of them, the way a run orchestrator would between battles.
Useful for sanity-checking preset ranges against a realistic population.

Can be run as a standalone script:
    python -m rosterforge.jobs.simulate_matchmaking --players 200 --seed 7
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Any

from rosterforge.config import settings, setup_logging
from rosterforge.models.card import Card
from rosterforge.models.matchmaking import BotConfig, MatchmakingConfig
from rosterforge.models.run import Run, RunConfig
from rosterforge.models.snapshot import SnapshotConfig
from rosterforge.rng import SeededRandom
from rosterforge.services.matchmaker import find_match
from rosterforge.services.run import create_run, record_loss, record_win
from rosterforge.services.snapshot_pool import (
    SnapshotPool,
    add_snapshot,
    create_snapshot,
    get_snapshot_pool_stats,
)

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = 100
DEFAULT_CARD_POOL_SIZE = 40
BASE_RATING = 1000
RATING_SPREAD = 400
SNAPSHOT_INTERVAL_MS = 60_000


@dataclass
class SimulationReport:
    players: int
    live_matches: int = 0
    bot_matches: int = 0
    pool: SnapshotPool = ()

    @property
    def live_ratio(self) -> float:
        return self.live_matches / self.players if self.players else 0.0


def build_card_pool(size: int = DEFAULT_CARD_POOL_SIZE) -> list[Card]:
    """Synthetic cards spread evenly over tiers 1-3."""
    return [
        Card(id=f"unit_{i:03d}", name=f"Unit {i}", base_cost=1 + i % 5, tier=1 + i % 3)
        for i in range(size)
    ]


def play_run(
    config: RunConfig,
    run_id: str,
    wins: int,
    losses: int,
    now: int,
) -> Run[dict[str, Any]]:
    """Build a run that has recorded the given losses, then the given wins."""
    run: Run[dict[str, Any]] = create_run(config, {}, run_id=run_id, now=now)
    for _ in range(losses):
        run = record_loss(run, timestamp=now)
    for _ in range(wins):
        run = record_win(run, timestamp=now)
    return run


def run_simulation(
    players: int = DEFAULT_PLAYERS,
    seed: int = 0,
    snapshot_config: SnapshotConfig | None = None,
    matchmaking_config: MatchmakingConfig | None = None,
    bot_config: BotConfig | None = None,
    run_config: RunConfig | None = None,
    start_ms: int = 0,
) -> SimulationReport:
    """
    Simulate one matchmaking round for a population of players.

    Args:
        players: Number of synthetic players
        seed: Master seed; identical seeds give identical reports
        snapshot_config: Defaults to the configured snapshot preset
        matchmaking_config: Defaults to the configured matchmaking preset
        bot_config: Defaults to the configured bot preset
        run_config: Defaults to the configured run preset
        start_ms: Clock value for the first snapshot

    Returns:
        SimulationReport with match counts and the final pool
    """
    snapshot_config = snapshot_config or settings.snapshot_config()
    matchmaking_config = matchmaking_config or settings.matchmaking_config()
    bot_config = bot_config or settings.bot_config()
    run_config = run_config or settings.run_config()

    rng = SeededRandom(seed)
    cards = build_card_pool()
    report = SimulationReport(players=players)
    pool: SnapshotPool = ()

    for index in range(players):
        player_id = f"player_{index:04d}"
        now = start_ms + index * SNAPSHOT_INTERVAL_MS
        # Mid-run players, still below both wins_to_complete and max_losses
        wins = rng.next_int(run_config.wins_to_complete)
        losses = rng.next_int(run_config.max_losses)
        run = play_run(run_config, f"run_{index:04d}", wins, losses, now)
        rating = BASE_RATING + (rng.next() - 0.5) * RATING_SPREAD

        snapshot = create_snapshot(
            run,
            player_id,
            rating,
            snapshot_config,
            now=now,
            snapshot_id=f"snap_{index:04d}",
        )

        result = find_match(
            wins,
            rating,
            pool,
            cards,
            matchmaking_config,
            bot_config,
            seed + index,
            player_id=player_id,
            deck_size=settings.default_bot_deck_size,
        )
        if result.is_bot:
            report.bot_matches += 1
        else:
            report.live_matches += 1

        pool = add_snapshot(pool, snapshot, snapshot_config, seed=seed + index, now=now)

    report.pool = pool
    stats = get_snapshot_pool_stats(pool)
    logger.info(
        "Simulation complete: players=%d, live=%d, bots=%d, pool=%d",
        players,
        report.live_matches,
        report.bot_matches,
        stats.total_count,
    )
    return report


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the matchmaking simulation."""
    parser = argparse.ArgumentParser(description="Simulate snapshot matchmaking")
    parser.add_argument("--players", type=int, default=DEFAULT_PLAYERS)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    report = run_simulation(players=args.players, seed=args.seed)
    print(
        f"players={report.players} live={report.live_matches} "
        f"bots={report.bot_matches} live_ratio={report.live_ratio:.2f}"
    )


if __name__ == "__main__":
    main()
