from dataclasses import dataclass
from typing import Protocol, TypeVar


class BaseCard(Protocol):
    """
    Capability every card-like entity must expose.

    Deck, hand, draft and bot operations depend only on these four
    attributes, so games can bring their own card records.

    Attributes:
        id: Stable identifier (duplicate checks compare this)
        name: Display name
        base_cost: Base cost used by the economy layer
        tier: Upgrade tier, starts at 1 and never decreases
    """

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def base_cost(self) -> int: ...

    @property
    def tier(self) -> int: ...


CardT = TypeVar("CardT", bound=BaseCard)


@dataclass(frozen=True, slots=True)
class Card:
    """
    Minimal concrete card.

    Attributes:
        id: Stable identifier
        name: Display name
        base_cost: Base cost (gold, mana, ...)
        tier: Upgrade tier (1 = base)
    """

    id: str
    name: str
    base_cost: int = 0
    tier: int = 1
