from dataclasses import dataclass
from enum import Enum
from typing import Generic

from rosterforge.models.card import CardT
from rosterforge.models.failure import InvalidConfigError


class DraftType(str, Enum):
    """Which actions a draft permits."""

    PICK = "pick"
    BAN = "ban"
    PICK_AND_BAN = "pick-and-ban"


@dataclass(frozen=True)
class DraftConfig:
    """
    Draft behavior.

    Attributes:
        options_count: Cards shown at once
        picks_count: Cards to pick before the draft completes
        type: Permitted actions
        allow_skip: Whether the player may skip the whole draft
        rerolls_allowed: Number of option rerolls
    """

    options_count: int
    picks_count: int
    type: DraftType = DraftType.PICK
    allow_skip: bool = False
    rerolls_allowed: int = 0

    def __post_init__(self) -> None:
        for name in ("options_count", "picks_count", "rerolls_allowed"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidConfigError("DraftConfig", f"{name} must be >= 0, got {value}")
        # Accept plain strings ("pick-and-ban") from presets and callers
        if not isinstance(self.type, DraftType):
            try:
                object.__setattr__(self, "type", DraftType(self.type))
            except ValueError as e:
                raise InvalidConfigError("DraftConfig", f"unknown draft type {self.type!r}") from e


@dataclass(frozen=True)
class Draft(Generic[CardT]):
    """
    A draft session.

    INVARIANT: options and pool are disjoint.
    INVARIANT: picked and banned cards never reappear in options.
    """

    pool: tuple[CardT, ...]
    options: tuple[CardT, ...]
    picked: tuple[CardT, ...]
    banned: tuple[CardT, ...]
    config: DraftConfig
    rerolls_used: int
    seed: int

    @property
    def rerolls_remaining(self) -> int:
        return max(0, self.config.rerolls_allowed - self.rerolls_used)


@dataclass(frozen=True)
class DraftResult(Generic[CardT]):
    """Outcome of a finished draft."""

    picked: tuple[CardT, ...]
    banned: tuple[CardT, ...]
    skipped: bool
