"""
Tests for in-run currency.

INVARIANT: With max_amount > 0, add_currency never raises the balance above
max_amount.
INVARIANT: spend_currency never leaves a negative balance.
"""

import math

import pytest

from rosterforge.models.economy import EconomyConfig, Wallet
from rosterforge.models.failure import (
    FailureCategory,
    InsufficientFundsError,
    InvalidConfigError,
)
from rosterforge.presets import (
    ARENA_ECONOMY_CONFIG,
    AUTOBATTLER_ECONOMY_CONFIG,
    CARD_GAME_ECONOMY_CONFIG,
    ROGUELIKE_ECONOMY_CONFIG,
    get_economy_preset,
)
from rosterforge.services.economy import (
    add_currency,
    apply_interest,
    can_afford,
    create_wallet,
    get_balance,
    get_currency_name,
    get_reward,
    is_at_max_capacity,
    spend_currency,
)


def _wallet(config: EconomyConfig, amount: int) -> Wallet:
    return Wallet(amount=amount, config=config)


class TestWallet:
    """Creating and reading wallets."""

    def test_starting_amount(self) -> None:
        """A fresh wallet holds the configured starting amount."""
        wallet = create_wallet(ROGUELIKE_ECONOMY_CONFIG)

        assert get_balance(wallet) == 10
        assert get_currency_name(wallet) == "Gold"

    def test_config_rejects_negative_values(self) -> None:
        """Negative amounts and rates are invalid."""
        with pytest.raises(InvalidConfigError, match="interest_rate"):
            EconomyConfig(
                starting_amount=0,
                currency_name="Gold",
                win_reward=lambda streak, _context: 1,
                lose_reward=lambda streak, _context: 1,
                interest_rate=-0.1,
            )


class TestAddAndSpend:
    """Credits respect the cap, debits respect the balance."""

    def test_add_uncapped(self) -> None:
        """Roguelike gold has no ceiling."""
        wallet = add_currency(_wallet(ROGUELIKE_ECONOMY_CONFIG, 10), 5000)

        assert wallet.amount == 5010
        assert not is_at_max_capacity(wallet)

    def test_add_clamps_to_max(self) -> None:
        """Autobattler gold stops at 100."""
        wallet = add_currency(_wallet(AUTOBATTLER_ECONOMY_CONFIG, 95), 10)

        assert wallet.amount == 100
        assert is_at_max_capacity(wallet)

    def test_add_returns_new_wallet(self) -> None:
        """The input wallet keeps its balance."""
        wallet = create_wallet(CARD_GAME_ECONOMY_CONFIG)
        add_currency(wallet, 25)

        assert wallet.amount == 100

    def test_spend(self) -> None:
        """Spending deducts from the balance."""
        wallet = spend_currency(_wallet(ROGUELIKE_ECONOMY_CONFIG, 10), 4)

        assert wallet.amount == 6

    def test_spend_entire_balance(self) -> None:
        """Spending exactly the balance leaves zero."""
        assert spend_currency(_wallet(ROGUELIKE_ECONOMY_CONFIG, 10), 10).amount == 0

    def test_insufficient_funds(self) -> None:
        """Overspending raises a capacity failure naming the currency."""
        wallet = _wallet(ROGUELIKE_ECONOMY_CONFIG, 10)

        with pytest.raises(
            InsufficientFundsError, match="Insufficient Gold: have 10, need 11"
        ) as exc_info:
            spend_currency(wallet, 11)

        assert exc_info.value.category == FailureCategory.CAPACITY
        assert wallet.amount == 10

    def test_infinite_cost_unaffordable(self) -> None:
        """A maxed card's infinite upgrade cost is never affordable."""
        wallet = _wallet(CARD_GAME_ECONOMY_CONFIG, 9999)

        assert not can_afford(wallet, math.inf)
        with pytest.raises(InsufficientFundsError):
            spend_currency(wallet, math.inf)


class TestInterest:
    """interest = min(floor(amount * rate), cap)."""

    @pytest.mark.parametrize(
        ("balance", "expected"),
        [
            (50, 55),
            (23, 25),
            (9, 9),
            (99, 100),
        ],
    )
    def test_autobattler_interest(self, balance: int, expected: int) -> None:
        """10% interest, capped at 5, and the balance cap still applies."""
        wallet = apply_interest(_wallet(AUTOBATTLER_ECONOMY_CONFIG, balance))

        assert wallet.amount == expected

    def test_no_interest_returns_same_wallet(self) -> None:
        """A zero rate leaves the wallet as is."""
        wallet = _wallet(ROGUELIKE_ECONOMY_CONFIG, 50)

        assert apply_interest(wallet) is wallet


class TestRewards:
    """Battle rewards follow each preset's streak curve."""

    @pytest.mark.parametrize(
        ("streak", "expected"),
        [
            (0, 7),
            (2, 7),
            (3, 9),
            (5, 13),
        ],
    )
    def test_roguelike_win_streak_bonus(self, streak: int, expected: int) -> None:
        """Roguelike wins pay 7 plus 2 per win beyond a 2-win streak."""
        assert get_reward(True, streak, ROGUELIKE_ECONOMY_CONFIG) == expected

    def test_roguelike_consolation(self) -> None:
        """Roguelike losses pay a flat 9."""
        assert get_reward(False, 4, ROGUELIKE_ECONOMY_CONFIG) == 9

    def test_arena_rewards(self) -> None:
        """Arena pays 10 + 5 per streak for wins and nothing for losses."""
        assert get_reward(True, 2, ARENA_ECONOMY_CONFIG) == 20
        assert get_reward(False, 2, ARENA_ECONOMY_CONFIG) == 0

    def test_autobattler_streak_capped(self) -> None:
        """Autobattler streak bonuses stop growing at 5."""
        assert get_reward(True, 9, AUTOBATTLER_ECONOMY_CONFIG) == 6
        assert get_reward(False, 2, AUTOBATTLER_ECONOMY_CONFIG) == 3

    def test_context_passed_through(self) -> None:
        """The optional context reaches the reward function."""
        config = EconomyConfig(
            starting_amount=0,
            currency_name="Gems",
            win_reward=lambda streak, context: context["round"],
            lose_reward=lambda streak, context: 0,
        )

        assert get_reward(True, 0, config, {"round": 4}) == 4

    def test_preset_lookup(self) -> None:
        """Economy presets resolve by name."""
        assert get_economy_preset("card_game") is CARD_GAME_ECONOMY_CONFIG
