from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic

from rosterforge.models.card import CardT
from rosterforge.models.failure import InvalidConfigError


@dataclass(frozen=True)
class DeckConfig(Generic[CardT]):
    """
    Rules a deck must satisfy.

    Attributes:
        max_size: Maximum cards in deck
        min_size: Minimum cards in deck (checked at construction)
        allow_duplicates: Whether the same card id may appear twice
        max_copies: Copy cap when duplicates are allowed (0 = unlimited)
        validate_card: Optional per-card admission rule
    """

    max_size: int
    min_size: int = 0
    allow_duplicates: bool = False
    max_copies: int = 1
    validate_card: Callable[[CardT], bool] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise InvalidConfigError("DeckConfig", f"max_size must be >= 0, got {self.max_size}")
        if self.min_size < 0:
            raise InvalidConfigError("DeckConfig", f"min_size must be >= 0, got {self.min_size}")
        if self.min_size > self.max_size:
            raise InvalidConfigError(
                "DeckConfig",
                f"min_size {self.min_size} exceeds max_size {self.max_size}",
            )
        if self.max_copies < 0:
            raise InvalidConfigError(
                "DeckConfig", f"max_copies must be >= 0, got {self.max_copies}"
            )


@dataclass(frozen=True)
class Deck(Generic[CardT]):
    """
    An ordered, immutable deck. Index 0 is the top card.

    Build through create_deck() so the configuration is enforced.
    """

    cards: tuple[CardT, ...]
    config: DeckConfig[CardT]

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card_id: object) -> bool:
        return any(card.id == card_id for card in self.cards)

    def card_ids(self) -> list[str]:
        return [card.id for card in self.cards]


@dataclass(frozen=True)
class DeckValidationResult:
    """Outcome of checking a deck against its configuration."""

    valid: bool
    errors: tuple[str, ...] = ()
