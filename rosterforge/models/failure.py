"""
Failure taxonomy: the closed set of progression failures.

Every fallible progression operation (deck, hand, draft, upgrade, economy,
run, snapshot, matchmaking) either returns a new value or raises
one of the errors defined here. Nothing retries, times out, or escalates.

Categories:
- Validation: construction from caller data failed (caller must fix input)
- Capacity: operation currently inapplicable (check predicates first)
- Lookup: caller/UI desynchronization (unknown card id)
- Policy: a game-design rule refused the action (player-facing)
- Availability: no opponent could be produced

INVARIANT: A raised failure never leaves prior state modified.
All operations are pure, so the input value is always still valid.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureCategory(str, Enum):
    """How the orchestrator should treat a failure."""

    VALIDATION = "validation"
    CAPACITY = "capacity"
    LOOKUP = "lookup"
    POLICY = "policy"
    AVAILABILITY = "availability"


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Validation
    INVALID_DECK = "invalid_deck"
    INVALID_HAND_CONFIG = "invalid_hand_config"
    INVALID_CONFIG = "invalid_config"

    # Capacity
    DECK_FULL = "deck_full"
    HAND_OVERFLOW = "hand_overflow"
    PICK_LIMIT_REACHED = "pick_limit_reached"
    NO_REROLLS_REMAINING = "no_rerolls_remaining"
    MAX_TIER_REACHED = "max_tier_reached"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    RUN_COMPLETE = "run_complete"

    # Lookup
    CARD_NOT_FOUND = "card_not_found"
    CARD_NOT_IN_OPTIONS = "card_not_in_options"

    # Policy
    DUPLICATE_NOT_ALLOWED = "duplicate_not_allowed"
    MAX_COPIES_EXCEEDED = "max_copies_exceeded"
    CARD_REJECTED = "card_rejected"
    BANNING_NOT_ALLOWED = "banning_not_allowed"
    SKIP_NOT_ALLOWED = "skip_not_allowed"
    UPGRADE_REJECTED = "upgrade_rejected"

    # Availability
    NO_OPPONENT_FOUND = "no_opponent_found"


FAILURE_CATEGORIES: dict[FailureKind, FailureCategory] = {
    FailureKind.INVALID_DECK: FailureCategory.VALIDATION,
    FailureKind.INVALID_HAND_CONFIG: FailureCategory.VALIDATION,
    FailureKind.INVALID_CONFIG: FailureCategory.VALIDATION,
    FailureKind.DECK_FULL: FailureCategory.CAPACITY,
    FailureKind.HAND_OVERFLOW: FailureCategory.CAPACITY,
    FailureKind.PICK_LIMIT_REACHED: FailureCategory.CAPACITY,
    FailureKind.NO_REROLLS_REMAINING: FailureCategory.CAPACITY,
    FailureKind.MAX_TIER_REACHED: FailureCategory.CAPACITY,
    FailureKind.INSUFFICIENT_FUNDS: FailureCategory.CAPACITY,
    FailureKind.RUN_COMPLETE: FailureCategory.CAPACITY,
    FailureKind.CARD_NOT_FOUND: FailureCategory.LOOKUP,
    FailureKind.CARD_NOT_IN_OPTIONS: FailureCategory.LOOKUP,
    FailureKind.DUPLICATE_NOT_ALLOWED: FailureCategory.POLICY,
    FailureKind.MAX_COPIES_EXCEEDED: FailureCategory.POLICY,
    FailureKind.CARD_REJECTED: FailureCategory.POLICY,
    FailureKind.BANNING_NOT_ALLOWED: FailureCategory.POLICY,
    FailureKind.SKIP_NOT_ALLOWED: FailureCategory.POLICY,
    FailureKind.UPGRADE_REJECTED: FailureCategory.POLICY,
    FailureKind.NO_OPPONENT_FOUND: FailureCategory.AVAILABILITY,
}


class FailureDetail(BaseModel):
    """Serializable description of a failure for the orchestrator."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    category: FailureCategory = Field(
        ...,
        description="Handling category (validation, capacity, ...)",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the caller",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    @property
    def category(self) -> FailureCategory:
        return FAILURE_CATEGORIES[self.kind]

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            category=self.category,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class ProgressionError(KnownError):
    """Base class for every deck, hand, draft and matchmaking failure."""


# =============================================================================
# VALIDATION
# =============================================================================


class InvalidDeckError(ProgressionError):
    """Raised when initial deck contents violate the deck configuration."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(
            kind=FailureKind.INVALID_DECK,
            message=f"Invalid deck: {', '.join(self.errors)}",
            detail="; ".join(self.errors),
            suggestion="Fix the deck contents or relax the deck configuration.",
        )


class InvalidHandConfigError(ProgressionError):
    """Raised when a hand configuration is self-contradictory."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            kind=FailureKind.INVALID_HAND_CONFIG,
            message=f"Invalid hand configuration: {reason}",
        )


class InvalidConfigError(ProgressionError):
    """Raised when a configuration record or preset name is invalid."""

    def __init__(self, config_name: str, reason: str):
        self.config_name = config_name
        self.reason = reason
        super().__init__(
            kind=FailureKind.INVALID_CONFIG,
            message=f"Invalid {config_name}: {reason}",
        )


# =============================================================================
# CAPACITY
# =============================================================================


class DeckFullError(ProgressionError):
    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(
            kind=FailureKind.DECK_FULL,
            message="Deck is full",
            detail=f"max_size={max_size}",
            suggestion="Remove a card before adding another.",
        )


class HandOverflowError(ProgressionError):
    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(
            kind=FailureKind.HAND_OVERFLOW,
            message=f"Hand overflow: {size} cards, max is {max_size}",
            suggestion="Check is_hand_full() or enable auto_discard.",
        )


class PickLimitReachedError(ProgressionError):
    def __init__(self, picks_count: int):
        self.picks_count = picks_count
        super().__init__(
            kind=FailureKind.PICK_LIMIT_REACHED,
            message="Already picked maximum cards",
            detail=f"picks_count={picks_count}",
            suggestion="Check is_draft_complete() before picking.",
        )


class NoRerollsRemainingError(ProgressionError):
    def __init__(self, rerolls_allowed: int):
        self.rerolls_allowed = rerolls_allowed
        super().__init__(
            kind=FailureKind.NO_REROLLS_REMAINING,
            message="No rerolls remaining",
            detail=f"rerolls_allowed={rerolls_allowed}",
        )


class MaxTierReachedError(ProgressionError):
    def __init__(self, card_id: str, max_tier: int):
        self.card_id = card_id
        self.max_tier = max_tier
        super().__init__(
            kind=FailureKind.MAX_TIER_REACHED,
            message=f"Card {card_id} is already at max tier {max_tier}",
            suggestion="Check can_upgrade() before upgrading.",
        )


class InsufficientFundsError(ProgressionError):
    def __init__(self, currency_name: str, balance: int, amount: int):
        self.currency_name = currency_name
        self.balance = balance
        self.amount = amount
        super().__init__(
            kind=FailureKind.INSUFFICIENT_FUNDS,
            message=f"Insufficient {currency_name}: have {balance}, need {amount}",
            suggestion="Check can_afford() before spending.",
        )


class RunCompleteError(ProgressionError):
    """Raised when a finished run is asked to record or advance."""

    def __init__(self, action: str, status: str):
        self.action = action
        self.status = status
        super().__init__(
            kind=FailureKind.RUN_COMPLETE,
            message=f"Cannot {action}: run is {status}",
            suggestion="Check is_run_complete() first.",
        )


# =============================================================================
# LOOKUP
# =============================================================================


class CardNotFoundError(ProgressionError):
    def __init__(self, card_id: str, container: str):
        self.card_id = card_id
        self.container = container
        super().__init__(
            kind=FailureKind.CARD_NOT_FOUND,
            message=f"Card {card_id} not found in {container}",
        )


class CardNotInOptionsError(ProgressionError):
    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.CARD_NOT_IN_OPTIONS,
            message=f"Card {card_id} not in options",
            suggestion="Refresh the draft options and try again.",
        )


# =============================================================================
# POLICY
# =============================================================================


class DuplicateNotAllowedError(ProgressionError):
    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.DUPLICATE_NOT_ALLOWED,
            message="Duplicates not allowed",
            detail=f"card_id={card_id}",
        )


class MaxCopiesExceededError(ProgressionError):
    def __init__(self, card_id: str, max_copies: int):
        self.card_id = card_id
        self.max_copies = max_copies
        super().__init__(
            kind=FailureKind.MAX_COPIES_EXCEEDED,
            message=f"Max {max_copies} copies allowed",
            detail=f"card_id={card_id}",
        )


class CardRejectedError(ProgressionError):
    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.CARD_REJECTED,
            message="Card failed validation",
            detail=f"card_id={card_id}",
        )


class BanningNotAllowedError(ProgressionError):
    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.BANNING_NOT_ALLOWED,
            message="Banning not allowed in pick-only draft",
        )


class SkipNotAllowedError(ProgressionError):
    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.SKIP_NOT_ALLOWED,
            message="Skipping not allowed in this draft",
        )


class UpgradeRejectedError(ProgressionError):
    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.UPGRADE_REJECTED,
            message="Card cannot be upgraded",
            detail=f"card_id={card_id}",
        )


# =============================================================================
# AVAILABILITY
# =============================================================================


class NoOpponentFoundError(ProgressionError):
    """Raised when no live opponent qualifies and bot fallback is disabled."""

    def __init__(self, wins: int, rating: float):
        self.wins = wins
        self.rating = rating
        super().__init__(
            kind=FailureKind.NO_OPPONENT_FOUND,
            message="No opponent found",
            detail=f"wins={wins}, rating={rating}",
            suggestion="Widen the matchmaking ranges or enable bot fallback.",
        )
