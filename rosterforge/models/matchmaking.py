from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic

from rosterforge.models.card import CardT
from rosterforge.models.failure import InvalidConfigError
from rosterforge.models.snapshot import Snapshot


class DifficultyLabel(str, Enum):
    """Coarse difficulty shown to the player before a battle."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class MatchmakingConfig:
    """
    Opponent search behavior.

    Attributes:
        rating_range: Max absolute rating difference (inclusive)
        wins_range: Max absolute wins difference (inclusive)
        bot_fallback: Generate a bot when no snapshot qualifies
        bot_difficulty_scale: Optional wins -> difficulty override for bots
    """

    rating_range: float
    wins_range: int
    bot_fallback: bool = True
    bot_difficulty_scale: Callable[[int], float] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.rating_range < 0:
            raise InvalidConfigError("MatchmakingConfig", "rating_range must be >= 0")
        if self.wins_range < 0:
            raise InvalidConfigError("MatchmakingConfig", "wins_range must be >= 0")


@dataclass(frozen=True)
class BotConfig:
    """
    Bot generation behavior.

    Attributes:
        base_difficulty: Difficulty at zero wins (0.0 - 1.0)
        difficulty_per_win: Difficulty added per win
        max_difficulty: Saturation cap
        name_generator: Optional wins -> display name
    """

    base_difficulty: float
    difficulty_per_win: float
    max_difficulty: float
    name_generator: Callable[[int], str] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for name in ("base_difficulty", "max_difficulty"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError("BotConfig", f"{name} must be in [0, 1], got {value}")
        if self.difficulty_per_win < 0:
            raise InvalidConfigError("BotConfig", "difficulty_per_win must be >= 0")


@dataclass(frozen=True)
class BotTeam(Generic[CardT]):
    """Simulated opponent roster. Built on demand, never persisted."""

    name: str
    cards: tuple[CardT, ...]
    difficulty: float


@dataclass(frozen=True)
class MatchResult(Generic[CardT]):
    """Opponent chosen for the next battle."""

    opponent: Snapshot[Any] | BotTeam[CardT]
    is_bot: bool
    difficulty: DifficultyLabel
