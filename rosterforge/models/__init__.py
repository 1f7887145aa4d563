from rosterforge.models.card import BaseCard, Card, CardT
from rosterforge.models.deck import Deck, DeckConfig, DeckValidationResult
from rosterforge.models.draft import Draft, DraftConfig, DraftResult, DraftType
from rosterforge.models.economy import EconomyConfig, RewardFunction, Wallet
from rosterforge.models.failure import (
    FAILURE_CATEGORIES,
    BanningNotAllowedError,
    CardNotFoundError,
    CardNotInOptionsError,
    CardRejectedError,
    DeckFullError,
    DuplicateNotAllowedError,
    FailureCategory,
    FailureDetail,
    FailureKind,
    HandOverflowError,
    InsufficientFundsError,
    InvalidConfigError,
    InvalidDeckError,
    InvalidHandConfigError,
    KnownError,
    MaxCopiesExceededError,
    MaxTierReachedError,
    NoOpponentFoundError,
    NoRerollsRemainingError,
    PickLimitReachedError,
    ProgressionError,
    RunCompleteError,
    SkipNotAllowedError,
    UpgradeRejectedError,
)
from rosterforge.models.hand import AddToHandResult, Hand, HandConfig
from rosterforge.models.matchmaking import (
    BotConfig,
    BotTeam,
    DifficultyLabel,
    MatchmakingConfig,
    MatchResult,
)
from rosterforge.models.run import (
    Run,
    RunConfig,
    RunEvent,
    RunEventType,
    RunPhase,
    RunStats,
    RunStatus,
)
from rosterforge.models.snapshot import (
    DEFAULT_CLEANUP_FRACTION,
    CleanupStrategy,
    RunSummary,
    Snapshot,
    SnapshotConfig,
    SnapshotPoolStats,
)
from rosterforge.models.upgrade import UpgradeConfig

__all__ = [
    "AddToHandResult",
    "BanningNotAllowedError",
    "BaseCard",
    "BotConfig",
    "BotTeam",
    "Card",
    "CardNotFoundError",
    "CardNotInOptionsError",
    "CardRejectedError",
    "CardT",
    "CleanupStrategy",
    "Deck",
    "DeckConfig",
    "DeckFullError",
    "DeckValidationResult",
    "DEFAULT_CLEANUP_FRACTION",
    "DifficultyLabel",
    "Draft",
    "DraftConfig",
    "DraftResult",
    "DraftType",
    "DuplicateNotAllowedError",
    "EconomyConfig",
    "FailureCategory",
    "FailureDetail",
    "FailureKind",
    "FAILURE_CATEGORIES",
    "Hand",
    "HandConfig",
    "HandOverflowError",
    "InsufficientFundsError",
    "InvalidConfigError",
    "InvalidDeckError",
    "InvalidHandConfigError",
    "KnownError",
    "MatchmakingConfig",
    "MatchResult",
    "MaxCopiesExceededError",
    "MaxTierReachedError",
    "NoOpponentFoundError",
    "NoRerollsRemainingError",
    "PickLimitReachedError",
    "ProgressionError",
    "RewardFunction",
    "Run",
    "RunCompleteError",
    "RunConfig",
    "RunEvent",
    "RunEventType",
    "RunPhase",
    "RunStats",
    "RunStatus",
    "RunSummary",
    "SkipNotAllowedError",
    "Snapshot",
    "SnapshotConfig",
    "SnapshotPoolStats",
    "UpgradeConfig",
    "UpgradeRejectedError",
    "Wallet",
]
