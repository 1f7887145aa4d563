"""
Matchmaker.

Finds an asynchronous opponent in a snapshot pool and falls back to a
generated bot when nothing qualifies.

INVARIANT: Any snapshot returned by find_opponent() satisfies both
|wins - current_wins| <= wins_range and
|rating - current_rating| <= rating_range.
"""

import logging
from collections.abc import Iterable
from typing import Any

from rosterforge.models.card import CardT
from rosterforge.models.failure import NoOpponentFoundError
from rosterforge.models.matchmaking import (
    BotConfig,
    DifficultyLabel,
    MatchmakingConfig,
    MatchResult,
)
from rosterforge.models.snapshot import Snapshot
from rosterforge.rng import RandomFactory, SeededRandom, resolve_seed
from rosterforge.services.bot_generator import (
    DEFAULT_BOT_DECK_SIZE,
    generate_bot,
    get_bot_difficulty,
)

logger = logging.getLogger(__name__)

# Rating gap beyond which a live opponent counts as easy/hard
RATING_DIFFICULTY_MARGIN = 100

# Bot difficulty thresholds for the easy/hard labels
BOT_EASY_BELOW = 0.5
BOT_HARD_ABOVE = 0.75


def find_opponent(
    current_wins: int,
    current_rating: float,
    pool: Iterable[Snapshot[Any]],
    config: MatchmakingConfig,
    seed: int | None = None,
    *,
    exclude_player_id: str | None = None,
    rng_factory: RandomFactory = SeededRandom,
) -> Snapshot[Any] | None:
    """
    Pick a random snapshot within the wins and rating ranges.

    Args:
        current_wins: Searching player's wins
        current_rating: Searching player's rating
        pool: Candidate snapshots
        config: Matchmaking ranges
        seed: Seed for the uniform choice (defaults to current time)
        exclude_player_id: Drop this player's own snapshots

    Returns:
        A qualifying snapshot, or None
    """
    candidates = [
        s
        for s in pool
        if abs(s.wins - current_wins) <= config.wins_range
        and abs(s.rating - current_rating) <= config.rating_range
        and (exclude_player_id is None or s.player_id != exclude_player_id)
    ]

    if not candidates:
        return None

    rng = rng_factory(resolve_seed(seed))
    index = min(int(rng.next() * len(candidates)), len(candidates) - 1)
    return candidates[index]


def classify_match_difficulty(player_rating: float, opponent_rating: float) -> DifficultyLabel:
    diff = opponent_rating - player_rating
    if diff < -RATING_DIFFICULTY_MARGIN:
        return DifficultyLabel.EASY
    if diff > RATING_DIFFICULTY_MARGIN:
        return DifficultyLabel.HARD
    return DifficultyLabel.MEDIUM


def classify_bot_difficulty(difficulty: float) -> DifficultyLabel:
    if difficulty < BOT_EASY_BELOW:
        return DifficultyLabel.EASY
    if difficulty > BOT_HARD_ABOVE:
        return DifficultyLabel.HARD
    return DifficultyLabel.MEDIUM


def find_match(
    current_wins: int,
    current_rating: float,
    pool: Iterable[Snapshot[Any]],
    card_pool: Iterable[CardT],
    config: MatchmakingConfig,
    bot_config: BotConfig,
    seed: int,
    *,
    player_id: str | None = None,
    deck_size: int = DEFAULT_BOT_DECK_SIZE,
    rng_factory: RandomFactory = SeededRandom,
) -> MatchResult[CardT]:
    """
    Find a live opponent, or fall back to a bot.

    When config.bot_difficulty_scale is set it overrides the bot difficulty,
    capped at bot_config.max_difficulty.

    Raises:
        NoOpponentFoundError: No snapshot qualifies and bot_fallback is off
    """
    opponent = find_opponent(
        current_wins,
        current_rating,
        pool,
        config,
        seed,
        exclude_player_id=player_id,
        rng_factory=rng_factory,
    )

    if opponent is not None:
        label = classify_match_difficulty(current_rating, opponent.rating)
        logger.info(
            "Found live opponent %s (wins=%d, rating=%s, difficulty=%s)",
            opponent.player_id,
            opponent.wins,
            opponent.rating,
            label.value,
        )
        return MatchResult(opponent=opponent, is_bot=False, difficulty=label)

    if not config.bot_fallback:
        logger.warning(
            "No opponent found: wins=%d, rating=%s",
            current_wins,
            current_rating,
        )
        raise NoOpponentFoundError(current_wins, current_rating)

    if config.bot_difficulty_scale is not None:
        difficulty = min(config.bot_difficulty_scale(current_wins), bot_config.max_difficulty)
    else:
        difficulty = get_bot_difficulty(current_wins, bot_config)

    bot = generate_bot(
        current_wins,
        card_pool,
        bot_config,
        seed,
        deck_size,
        difficulty=difficulty,
        rng_factory=rng_factory,
    )
    logger.info("No live opponent for wins=%d, generated bot %s", current_wins, bot.name)
    return MatchResult(
        opponent=bot,
        is_bot=True,
        difficulty=classify_bot_difficulty(bot.difficulty),
    )
