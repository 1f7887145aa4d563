from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic

from rosterforge.models.card import CardT
from rosterforge.models.failure import InvalidConfigError


@dataclass(frozen=True)
class UpgradeConfig(Generic[CardT]):
    """
    Card tier progression.

    Tiers are 1-based: a fresh card is tier 1 and an upgrade moves it to
    tier + 1 until max_tier.

    Attributes:
        max_tier: Highest reachable tier
        tier_names: Display names for tiers 1..n (missing tiers fall back to "Tier N")
        calculate_cost: (card, target_tier) -> cost of reaching target_tier
        stat_multiplier: tier -> stat scale factor
        can_upgrade: Optional per-card upgrade rule
    """

    max_tier: int
    tier_names: tuple[str, ...]
    calculate_cost: Callable[[CardT, int], int] = field(compare=False)
    stat_multiplier: Callable[[int], float] = field(compare=False)
    can_upgrade: Callable[[CardT], bool] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.max_tier < 1:
            raise InvalidConfigError("UpgradeConfig", f"max_tier must be >= 1, got {self.max_tier}")
        if not isinstance(self.tier_names, tuple):
            object.__setattr__(self, "tier_names", tuple(self.tier_names))
