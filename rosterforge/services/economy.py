"""
In-run currency.

A Wallet is an immutable balance plus its EconomyConfig. Rewards are
computed from streaks (see Run.win_streak / Run.lose_streak) and credited
with add_currency.

INVARIANT: With max_amount > 0, add_currency never raises the balance above
max_amount.
INVARIANT: spend_currency never leaves a negative balance.
"""

import logging
import math
from typing import Any

from rosterforge.models.economy import EconomyConfig, Wallet
from rosterforge.models.failure import InsufficientFundsError

logger = logging.getLogger(__name__)


def create_wallet(config: EconomyConfig) -> Wallet:
    return Wallet(amount=config.starting_amount, config=config)


def add_currency(wallet: Wallet, amount: int) -> Wallet:
    """Credit amount, clamped to max_amount when a cap is set."""
    new_amount = wallet.amount + amount
    if wallet.config.max_amount > 0:
        new_amount = min(new_amount, wallet.config.max_amount)
    return Wallet(amount=new_amount, config=wallet.config)


def spend_currency(wallet: Wallet, amount: float) -> Wallet:
    """
    Debit amount.

    Raises:
        InsufficientFundsError: Balance is below amount
    """
    if not can_afford(wallet, amount):
        raise InsufficientFundsError(wallet.config.currency_name, wallet.amount, amount)
    return Wallet(amount=wallet.amount - int(amount), config=wallet.config)


def can_afford(wallet: Wallet, amount: float) -> bool:
    """Accepts math.inf (a maxed card's upgrade cost), which is never affordable."""
    return wallet.amount >= amount


def apply_interest(wallet: Wallet) -> Wallet:
    """
    Pay one round of interest.

    interest = min(floor(amount * interest_rate), interest_cap)
    """
    config = wallet.config
    if config.interest_rate == 0:
        return wallet

    interest = min(math.floor(wallet.amount * config.interest_rate), config.interest_cap)
    logger.debug("Interest: %d %s on %d", interest, config.currency_name, wallet.amount)
    return add_currency(wallet, interest)


def get_reward(won: bool, streak: int, config: EconomyConfig, context: Any = None) -> int:
    """Battle reward for the current streak, from the win or lose curve."""
    if won:
        return config.win_reward(streak, context)
    return config.lose_reward(streak, context)


def get_balance(wallet: Wallet) -> int:
    return wallet.amount


def get_currency_name(wallet: Wallet) -> str:
    return wallet.config.currency_name


def is_at_max_capacity(wallet: Wallet) -> bool:
    """False when the economy is uncapped."""
    if wallet.config.max_amount == 0:
        return False
    return wallet.amount >= wallet.config.max_amount
