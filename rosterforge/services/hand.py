"""
Hand operations.

Pure functions over immutable Hand values.

INVARIANT: With auto_discard enabled, a hand never exceeds max_size after
add_to_hand(). With it disabled, an overflowing add raises HandOverflowError
and the input hand stays as it was.
"""

from collections.abc import Iterable

from rosterforge.models.card import CardT
from rosterforge.models.failure import CardNotFoundError, HandOverflowError
from rosterforge.models.hand import AddToHandResult, Hand, HandConfig


def create_hand(config: HandConfig) -> Hand[CardT]:
    """Create an empty hand."""
    return Hand(cards=(), config=config)


def add_to_hand(hand: Hand[CardT], cards: Iterable[CardT]) -> AddToHandResult[CardT]:
    """
    Add cards to the hand in arrival order.

    On overflow with auto_discard, the first max_size cards are kept and
    the surplus tail (newest cards) is discarded.

    Raises:
        HandOverflowError: Overflow with auto_discard disabled
    """
    combined = (*hand.cards, *cards)
    max_size = hand.config.max_size

    if len(combined) <= max_size:
        return AddToHandResult(hand=Hand(cards=combined, config=hand.config))

    if hand.config.auto_discard:
        return AddToHandResult(
            hand=Hand(cards=combined[:max_size], config=hand.config),
            discarded=combined[max_size:],
        )

    raise HandOverflowError(len(combined), max_size)


def remove_from_hand(hand: Hand[CardT], card_id: str) -> Hand[CardT]:
    """
    Remove the first card with the given id.

    Raises:
        CardNotFoundError: No card with that id in hand
    """
    for index, card in enumerate(hand.cards):
        if card.id == card_id:
            return Hand(cards=hand.cards[:index] + hand.cards[index + 1 :], config=hand.config)
    raise CardNotFoundError(card_id, "hand")


def get_hand_size(hand: Hand[CardT]) -> int:
    return len(hand.cards)


def is_hand_full(hand: Hand[CardT]) -> bool:
    """True if the hand is at max capacity."""
    return len(hand.cards) >= hand.config.max_size


def get_hand_space(hand: Hand[CardT]) -> int:
    """Number of cards that can still be added without overflow."""
    return max(0, hand.config.max_size - len(hand.cards))


def discard_excess(hand: Hand[CardT]) -> AddToHandResult[CardT]:
    """
    Trim an over-full hand back to max_size, keeping the oldest cards.

    Only an over-full hand can reach this (e.g. built directly by the caller).
    """
    max_size = hand.config.max_size
    if len(hand.cards) <= max_size:
        return AddToHandResult(hand=hand)

    return AddToHandResult(
        hand=Hand(cards=hand.cards[:max_size], config=hand.config),
        discarded=hand.cards[max_size:],
    )
