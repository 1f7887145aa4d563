"""
Tests for bot generation.

INVARIANT: get_bot_difficulty is min(base + wins * per_win, max),
non-decreasing in wins.
INVARIANT: Every tier keeps a nonzero chance of selection.
"""

import pytest

from rosterforge.models.card import Card
from rosterforge.models.failure import InvalidConfigError
from rosterforge.models.matchmaking import BotConfig
from rosterforge.presets import EASY_BOT_CONFIG, HARD_BOT_CONFIG, ROGUELIKE_BOT_CONFIG
from rosterforge.services.bot_generator import (
    MIN_CARD_WEIGHT,
    generate_bot,
    get_bot_difficulty,
    get_bot_tier_distribution,
    get_tier_weight,
    select_bot_cards,
)


class TestBotDifficulty:
    """Difficulty grows linearly with wins up to the cap."""

    def test_base_at_zero_wins(self) -> None:
        """With no wins the bot plays at base difficulty."""
        assert get_bot_difficulty(0, ROGUELIKE_BOT_CONFIG) == pytest.approx(0.5)

    def test_scales_per_win(self) -> None:
        """Each win adds difficulty_per_win."""
        assert get_bot_difficulty(4, ROGUELIKE_BOT_CONFIG) == pytest.approx(0.7)

    def test_saturates(self) -> None:
        """Difficulty never exceeds max_difficulty."""
        assert get_bot_difficulty(50, ROGUELIKE_BOT_CONFIG) == pytest.approx(0.95)

    def test_non_decreasing(self) -> None:
        """More wins never make a preset bot easier."""
        for config in (ROGUELIKE_BOT_CONFIG, EASY_BOT_CONFIG, HARD_BOT_CONFIG):
            values = [get_bot_difficulty(wins, config) for wins in range(30)]
            assert values == sorted(values)
            assert max(values) <= config.max_difficulty

    def test_config_rejects_out_of_range(self) -> None:
        """Difficulties outside [0, 1] are invalid."""
        with pytest.raises(InvalidConfigError):
            BotConfig(base_difficulty=1.5, difficulty_per_win=0.1, max_difficulty=1.0)


class TestTierDistribution:
    """Tier weights shift toward high tiers as difficulty rises."""

    def test_distribution_at_point_eight(self) -> None:
        """Difficulty 0.8 splits tiers 0.2 / 0.48 / 0.32."""
        dist = get_bot_tier_distribution(0.8)

        assert dist[1] == pytest.approx(0.2)
        assert dist[2] == pytest.approx(0.48)
        assert dist[3] == pytest.approx(0.32)

    def test_distribution_sums_to_one(self) -> None:
        """The three base tiers always share a total weight of 1."""
        for difficulty in (0.0, 0.25, 0.5, 0.95, 1.0):
            assert sum(get_bot_tier_distribution(difficulty).values()) == pytest.approx(1.0)

    def test_zero_difficulty_is_all_tier_one(self) -> None:
        """A zero-difficulty bot only weighs tier 1."""
        assert get_bot_tier_distribution(0.0) == {1: 1.0, 2: 0.0, 3: 0.0}

    def test_high_tier_weight(self) -> None:
        """Tiers above 3 weigh 0.3 * difficulty."""
        assert get_tier_weight(4, 0.5) == pytest.approx(0.15)
        assert get_tier_weight(7, 1.0) == pytest.approx(0.3)


class TestSelectBotCards:
    """Weighted selection without replacement."""

    def test_selects_requested_count(self, tiered_cards: list[Card]) -> None:
        """Selection returns count distinct cards."""
        selected = select_bot_cards(tiered_cards, 0.5, 12345, 12)

        assert len(selected) == 12
        assert len({c.id for c in selected}) == 12

    def test_stops_when_pool_empties(self, tiered_cards: list[Card]) -> None:
        """A small pool is returned in full."""
        selected = select_bot_cards(tiered_cards[:5], 0.5, 1, 12)

        assert sorted(c.id for c in selected) == sorted(c.id for c in tiered_cards[:5])

    def test_empty_pool(self) -> None:
        """An empty pool selects nothing."""
        assert select_bot_cards([], 0.5, 1, 12) == []

    def test_deterministic(self, tiered_cards: list[Card]) -> None:
        """The same seed selects the same cards."""
        assert select_bot_cards(tiered_cards, 0.7, 9, 12) == select_bot_cards(
            tiered_cards, 0.7, 9, 12
        )

    def test_input_pool_untouched(self, tiered_cards: list[Card]) -> None:
        """Selection does not consume the caller's list."""
        before = list(tiered_cards)
        select_bot_cards(tiered_cards, 0.7, 9, 12)

        assert tiered_cards == before

    def test_floor_keeps_tier_one_selectable(self) -> None:
        """At difficulty 1.0 tier 1 weighs zero, but the floor still lets it through."""
        pool = [Card(id="only-t1", name="Peasant", tier=1)]

        assert select_bot_cards(pool, 1.0, 3, 1) == pool
        assert max(MIN_CARD_WEIGHT, get_tier_weight(1, 1.0)) == MIN_CARD_WEIGHT

    def test_high_difficulty_prefers_high_tiers(self, tiered_cards: list[Card]) -> None:
        """Harder bots field higher tiers on average."""
        low_tiers = []
        high_tiers = []
        for seed in range(30):
            low_tiers.append(sum(c.tier for c in select_bot_cards(tiered_cards, 0.05, seed, 8)))
            high_tiers.append(sum(c.tier for c in select_bot_cards(tiered_cards, 0.95, seed, 8)))

        assert sum(high_tiers) > sum(low_tiers)


class TestGenerateBot:
    """Bots combine difficulty, name and a selected deck."""

    def test_default_name(self, tiered_cards: list[Card]) -> None:
        """Without a name generator the bot is named after its wins."""
        config = BotConfig(base_difficulty=0.5, difficulty_per_win=0.05, max_difficulty=0.95)

        bot = generate_bot(3, tiered_cards, config, 42)

        assert bot.name == "Bot_3W"
        assert bot.difficulty == pytest.approx(0.65)
        assert len(bot.cards) == 12

    def test_name_generator(self, tiered_cards: list[Card]) -> None:
        """A preset's name generator names the bot."""
        bot = generate_bot(2, tiered_cards, HARD_BOT_CONFIG, 42)

        assert bot.name == "Champion_2"

    def test_custom_deck_size(self, tiered_cards: list[Card]) -> None:
        """deck_size overrides the default of 12."""
        bot = generate_bot(0, tiered_cards, EASY_BOT_CONFIG, 1, deck_size=6)

        assert len(bot.cards) == 6

    def test_explicit_difficulty(self, tiered_cards: list[Card]) -> None:
        """An explicit difficulty overrides the win curve."""
        bot = generate_bot(0, tiered_cards, EASY_BOT_CONFIG, 1, difficulty=0.9)

        assert bot.difficulty == 0.9

    def test_deterministic(self, tiered_cards: list[Card]) -> None:
        """The same seed generates the same bot."""
        first = generate_bot(5, tiered_cards, ROGUELIKE_BOT_CONFIG, 12345)
        second = generate_bot(5, tiered_cards, ROGUELIKE_BOT_CONFIG, 12345)

        assert first == second
