"""
Card tier upgrades.

Upgrading replaces a card with a copy one tier higher; the original card is
untouched. Card records must be dataclasses so the copy keeps their type.

INVARIANT: A card's tier starts at 1 and never decreases.
INVARIANT: upgrade_card succeeds iff can_upgrade is True.
"""

import math
from dataclasses import replace

from rosterforge.models.card import CardT
from rosterforge.models.failure import MaxTierReachedError, UpgradeRejectedError
from rosterforge.models.upgrade import UpgradeConfig


def get_upgrade_cost(card: CardT, config: UpgradeConfig[CardT]) -> float:
    """
    Cost of moving the card to its next tier.

    Returns math.inf at max tier, so can_afford() is False for any balance.
    """
    if card.tier >= config.max_tier:
        return math.inf
    return config.calculate_cost(card, card.tier + 1)


def can_upgrade(card: CardT, config: UpgradeConfig[CardT]) -> bool:
    if card.tier >= config.max_tier:
        return False
    if config.can_upgrade is not None and not config.can_upgrade(card):
        return False
    return True


def upgrade_card(card: CardT, config: UpgradeConfig[CardT]) -> CardT:
    """
    Return a copy of the card at the next tier.

    Does not charge the cost; pair with spend_currency().

    Raises:
        MaxTierReachedError: Card is already at max_tier
        UpgradeRejectedError: The config's can_upgrade rule refused the card
    """
    if card.tier >= config.max_tier:
        raise MaxTierReachedError(card.id, config.max_tier)
    if config.can_upgrade is not None and not config.can_upgrade(card):
        raise UpgradeRejectedError(card.id)

    return replace(card, tier=card.tier + 1)


def get_stat_multiplier(tier: int, config: UpgradeConfig[CardT]) -> float:
    return config.stat_multiplier(tier)


def get_tier_name(tier: int, config: UpgradeConfig[CardT]) -> str:
    """Display name for a 1-based tier, or "Tier N" when unnamed."""
    if 1 <= tier <= len(config.tier_names):
        return config.tier_names[tier - 1]
    return f"Tier {tier}"


def get_max_tier(config: UpgradeConfig[CardT]) -> int:
    return config.max_tier


def is_max_tier(card: CardT, config: UpgradeConfig[CardT]) -> bool:
    return card.tier >= config.max_tier
