"""
Tests for failure classification.

Every failure kind maps to exactly one handling category, and every error
converts to a serializable FailureDetail.
"""

import pytest

from rosterforge.models.failure import (
    FAILURE_CATEGORIES,
    BanningNotAllowedError,
    CardNotFoundError,
    DeckFullError,
    FailureCategory,
    FailureDetail,
    FailureKind,
    HandOverflowError,
    InsufficientFundsError,
    InvalidDeckError,
    KnownError,
    MaxTierReachedError,
    NoOpponentFoundError,
    ProgressionError,
    RunCompleteError,
    UpgradeRejectedError,
)


class TestCategoryMapping:
    """Every failure kind maps to one category."""

    def test_every_kind_categorized(self) -> None:
        """No kind is missing from the category map."""
        assert set(FAILURE_CATEGORIES) == set(FailureKind)

    @pytest.mark.parametrize(
        ("error", "category"),
        [
            (InvalidDeckError(["too big"]), FailureCategory.VALIDATION),
            (DeckFullError(12), FailureCategory.CAPACITY),
            (HandOverflowError(8, 7), FailureCategory.CAPACITY),
            (CardNotFoundError("x", "deck"), FailureCategory.LOOKUP),
            (BanningNotAllowedError(), FailureCategory.POLICY),
            (NoOpponentFoundError(3, 1000), FailureCategory.AVAILABILITY),
            (MaxTierReachedError("knight", 3), FailureCategory.CAPACITY),
            (InsufficientFundsError("Gold", 2, 5), FailureCategory.CAPACITY),
            (RunCompleteError("record win", "won"), FailureCategory.CAPACITY),
            (UpgradeRejectedError("knight"), FailureCategory.POLICY),
        ],
    )
    def test_category(self, error: ProgressionError, category: FailureCategory) -> None:
        """Each error reports its kind's category."""
        assert error.category == category


class TestFailureDetail:
    """Errors convert to a serializable pydantic detail."""

    def test_to_detail(self) -> None:
        """to_detail carries kind, category, message and suggestion."""
        detail = HandOverflowError(9, 7).to_detail()

        assert isinstance(detail, FailureDetail)
        assert detail.kind == FailureKind.HAND_OVERFLOW
        assert detail.category == FailureCategory.CAPACITY
        assert detail.message == "Hand overflow: 9 cards, max is 7"
        assert detail.suggestion is not None

    def test_detail_serializes(self) -> None:
        """Details dump to JSON-safe values."""
        payload = DeckFullError(12).to_detail().model_dump(mode="json")

        assert payload["kind"] == "deck_full"
        assert payload["category"] == "capacity"
        assert payload["detail"] == "max_size=12"

    def test_hierarchy(self) -> None:
        """Errors are ProgressionError and KnownError subclasses."""
        error = InvalidDeckError(["a", "b"])

        assert isinstance(error, ProgressionError)
        assert isinstance(error, KnownError)
        assert str(error) == "Invalid deck: a, b"
