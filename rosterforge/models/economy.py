from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from rosterforge.models.failure import InvalidConfigError

# (streak, context) -> currency awarded
RewardFunction = Callable[[int, Any], int]


@dataclass(frozen=True)
class EconomyConfig:
    """
    In-run currency rules.

    Attributes:
        starting_amount: Balance of a fresh wallet
        currency_name: Display name ("Gold", "Tokens", ...)
        max_amount: Balance cap (0 = unlimited)
        win_reward: Reward after a win, given the current win streak
        lose_reward: Reward after a loss, given the current lose streak
        interest_rate: Share of the balance paid as interest per round (0 = none)
        interest_cap: Most interest paid in one round
    """

    starting_amount: int
    currency_name: str
    win_reward: RewardFunction = field(compare=False)
    lose_reward: RewardFunction = field(compare=False)
    max_amount: int = 0
    interest_rate: float = 0.0
    interest_cap: int = 0

    def __post_init__(self) -> None:
        for name in ("starting_amount", "max_amount", "interest_cap"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidConfigError("EconomyConfig", f"{name} must be >= 0, got {value}")
        if self.interest_rate < 0:
            raise InvalidConfigError(
                "EconomyConfig", f"interest_rate must be >= 0, got {self.interest_rate}"
            )


@dataclass(frozen=True)
class Wallet:
    """A currency balance and the rules that govern it."""

    amount: int
    config: EconomyConfig
