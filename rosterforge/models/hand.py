from dataclasses import dataclass
from typing import Generic

from rosterforge.models.card import CardT
from rosterforge.models.failure import InvalidHandConfigError


@dataclass(frozen=True)
class HandConfig:
    """
    Hand behavior.

    Attributes:
        max_size: Maximum cards in hand
        starting_size: Cards drawn for the opening hand
        auto_discard: Discard overflow instead of failing
    """

    max_size: int
    starting_size: int = 0
    auto_discard: bool = True

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise InvalidHandConfigError(f"max_size must be >= 0, got {self.max_size}")
        if self.starting_size < 0:
            raise InvalidHandConfigError(
                f"starting_size must be >= 0, got {self.starting_size}"
            )
        if self.starting_size > self.max_size:
            raise InvalidHandConfigError(
                f"starting_size {self.starting_size} exceeds max_size {self.max_size}"
            )


@dataclass(frozen=True)
class Hand(Generic[CardT]):
    """Cards currently held, oldest first."""

    cards: tuple[CardT, ...]
    config: HandConfig

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class AddToHandResult(Generic[CardT]):
    """Updated hand plus any cards discarded due to overflow."""

    hand: Hand[CardT]
    discarded: tuple[CardT, ...] = ()
