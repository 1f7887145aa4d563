"""
Bot generator.

Synthesizes a simulated opponent when no live snapshot qualifies. Difficulty
grows with the player's wins and saturates at max_difficulty; higher
difficulty shifts card selection toward higher tiers.

Tier weights at difficulty d:
    tier 1: 1 - d
    tier 2: d * 0.6
    tier 3: d * 0.4
    tier 4+: d * 0.3

INVARIANT: Every card keeps a weight of at least MIN_CARD_WEIGHT, so every
tier stays selectable at any difficulty.
"""

import logging
from collections.abc import Iterable

from rosterforge.models.card import CardT
from rosterforge.models.matchmaking import BotConfig, BotTeam
from rosterforge.rng import RandomFactory, SeededRandom

logger = logging.getLogger(__name__)

MIN_CARD_WEIGHT = 0.01
DEFAULT_BOT_DECK_SIZE = 12


def default_bot_name(wins: int) -> str:
    return f"Bot_{wins}W"


def get_bot_difficulty(wins: int, config: BotConfig) -> float:
    """min(base + wins * per_win, max). Non-decreasing in wins."""
    return min(config.base_difficulty + wins * config.difficulty_per_win, config.max_difficulty)


def get_tier_weight(tier: int, difficulty: float) -> float:
    """Unnormalized selection weight for a card tier."""
    if tier == 1:
        return 1 - difficulty
    if tier == 2:
        return difficulty * 0.6
    if tier == 3:
        return difficulty * 0.4
    return difficulty * 0.3


def get_bot_tier_distribution(difficulty: float) -> dict[int, float]:
    """
    Expected share of tiers 1-3 at a difficulty.

    Example:
        get_bot_tier_distribution(0.8) == {1: 0.2, 2: 0.48, 3: 0.32}
    """
    weights = {tier: get_tier_weight(tier, difficulty) for tier in (1, 2, 3)}
    total = sum(weights.values())
    return {tier: weight / total for tier, weight in weights.items()}


def select_bot_cards(
    pool: Iterable[CardT],
    difficulty: float,
    seed: int,
    max_cards: int,
    rng_factory: RandomFactory = SeededRandom,
) -> list[CardT]:
    """
    Weighted sampling without replacement.

    Each round picks one remaining card with probability proportional to
    max(MIN_CARD_WEIGHT, tier weight), then removes it. Stops early when
    the pool runs out.
    """
    available = list(pool)
    if not available:
        return []

    rng = rng_factory(seed)
    selected: list[CardT] = []

    while len(selected) < max_cards and available:
        weights = [max(MIN_CARD_WEIGHT, get_tier_weight(card.tier, difficulty)) for card in available]
        target = rng.next() * sum(weights)

        chosen = len(available) - 1
        for index, weight in enumerate(weights):
            target -= weight
            if target <= 0:
                chosen = index
                break

        selected.append(available.pop(chosen))

    return selected


def generate_bot(
    wins: int,
    pool: Iterable[CardT],
    config: BotConfig,
    seed: int,
    deck_size: int = DEFAULT_BOT_DECK_SIZE,
    *,
    difficulty: float | None = None,
    rng_factory: RandomFactory = SeededRandom,
) -> BotTeam[CardT]:
    """
    Build a bot opponent.

    Args:
        wins: Player's current win count
        pool: Cards the bot may use
        config: Bot configuration
        seed: Seed for card selection
        deck_size: Cards in the bot roster
        difficulty: Explicit difficulty (defaults to get_bot_difficulty)

    Returns:
        BotTeam with name, cards and difficulty
    """
    if difficulty is None:
        difficulty = get_bot_difficulty(wins, config)

    name = config.name_generator(wins) if config.name_generator else default_bot_name(wins)
    cards = select_bot_cards(pool, difficulty, seed, deck_size, rng_factory)

    logger.debug(
        "Generated bot %s: difficulty=%.2f, cards=%d",
        name,
        difficulty,
        len(cards),
    )
    return BotTeam(name=name, cards=tuple(cards), difficulty=difficulty)
