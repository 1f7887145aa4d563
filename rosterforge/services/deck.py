"""
Deck operations.

Pure functions over immutable Deck values. Every transforming operation
returns a new Deck; the input is never modified.

INVARIANT: A Deck built through create_deck() satisfies its configuration.
INVARIANT: shuffle_deck() with the same seed always yields the same order.
"""

from collections import Counter
from collections.abc import Iterable

from rosterforge.models.card import CardT
from rosterforge.models.deck import Deck, DeckConfig, DeckValidationResult
from rosterforge.models.failure import (
    CardNotFoundError,
    CardRejectedError,
    DeckFullError,
    DuplicateNotAllowedError,
    InvalidDeckError,
    MaxCopiesExceededError,
)
from rosterforge.rng import RandomFactory, SeededRandom


def create_deck(cards: Iterable[CardT], config: DeckConfig[CardT]) -> Deck[CardT]:
    """
    Create a deck from initial cards.

    Args:
        cards: Initial cards, top of deck first
        config: Deck rules

    Returns:
        New Deck

    Raises:
        InvalidDeckError: If the cards violate the configuration
    """
    deck = Deck(cards=tuple(cards), config=config)
    result = validate_deck(deck)
    if not result.valid:
        raise InvalidDeckError(list(result.errors))
    return deck


def validate_deck(deck: Deck[CardT]) -> DeckValidationResult:
    """
    Check a deck against its configuration, collecting every violation.

    Returns:
        DeckValidationResult with valid=False and the error list on failure
    """
    config = deck.config
    size = len(deck.cards)
    errors: list[str] = []

    if size < config.min_size:
        errors.append(f"Deck has {size} cards, minimum is {config.min_size}")
    if size > config.max_size:
        errors.append(f"Deck has {size} cards, maximum is {config.max_size}")

    counts = Counter(card.id for card in deck.cards)
    if not config.allow_duplicates:
        duplicates = [card_id for card_id, count in counts.items() if count > 1]
        if duplicates:
            errors.append(f"Duplicate cards found: {', '.join(duplicates)}")
    elif config.max_copies > 0:
        for card_id, count in counts.items():
            if count > config.max_copies:
                errors.append(f"Card {card_id} has {count} copies, max is {config.max_copies}")

    if config.validate_card is not None:
        for card in deck.cards:
            if not config.validate_card(card):
                errors.append(f"Card {card.id} failed custom validation")

    return DeckValidationResult(valid=not errors, errors=tuple(errors))


def add_card(deck: Deck[CardT], card: CardT) -> Deck[CardT]:
    """
    Append a card to the bottom of the deck.

    Raises:
        DeckFullError: Deck already holds max_size cards
        CardRejectedError: validate_card refused the card
        DuplicateNotAllowedError: Card id already present, duplicates off
        MaxCopiesExceededError: Card already at max_copies
    """
    config = deck.config
    if len(deck.cards) >= config.max_size:
        raise DeckFullError(config.max_size)

    if config.validate_card is not None and not config.validate_card(card):
        raise CardRejectedError(card.id)

    if not config.allow_duplicates:
        if card.id in deck:
            raise DuplicateNotAllowedError(card.id)
    elif config.max_copies > 0:
        copies = sum(1 for existing in deck.cards if existing.id == card.id)
        if copies >= config.max_copies:
            raise MaxCopiesExceededError(card.id, config.max_copies)

    return Deck(cards=(*deck.cards, card), config=config)


def remove_card(deck: Deck[CardT], card_id: str) -> Deck[CardT]:
    """
    Remove the first card with the given id.

    Raises:
        CardNotFoundError: No card with that id
    """
    for index, card in enumerate(deck.cards):
        if card.id == card_id:
            return Deck(cards=deck.cards[:index] + deck.cards[index + 1 :], config=deck.config)
    raise CardNotFoundError(card_id, "deck")


def shuffle_deck(
    deck: Deck[CardT],
    seed: int,
    rng_factory: RandomFactory = SeededRandom,
) -> Deck[CardT]:
    """Return the deck in a seeded Fisher–Yates order."""
    rng = rng_factory(seed)
    return Deck(cards=tuple(rng.shuffle(deck.cards)), config=deck.config)


def draw_cards(deck: Deck[CardT], count: int) -> tuple[tuple[CardT, ...], Deck[CardT]]:
    """
    Draw from the top of the deck.

    Drawing more cards than remain draws the whole deck; drawing from an
    empty deck yields an empty tuple.

    Returns:
        (drawn cards, remaining deck)
    """
    actual = max(0, min(count, len(deck.cards)))
    return deck.cards[:actual], Deck(cards=deck.cards[actual:], config=deck.config)


def get_deck_size(deck: Deck[CardT]) -> int:
    return len(deck.cards)
