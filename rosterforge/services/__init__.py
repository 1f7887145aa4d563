"""
RosterForge services.

Pure progression operations: decks, hands, drafts, upgrades, economy,
runs, snapshot pools, matchmaking and bot generation.
"""

from rosterforge.services.bot_generator import (
    DEFAULT_BOT_DECK_SIZE,
    MIN_CARD_WEIGHT,
    default_bot_name,
    generate_bot,
    get_bot_difficulty,
    get_bot_tier_distribution,
    get_tier_weight,
    select_bot_cards,
)
from rosterforge.services.deck import (
    add_card,
    create_deck,
    draw_cards,
    get_deck_size,
    remove_card,
    shuffle_deck,
    validate_deck,
)
from rosterforge.services.draft import (
    ban_card,
    create_draft,
    get_draft_options,
    get_draft_result,
    is_draft_complete,
    pick_card,
    reroll_options,
    skip_draft,
)
from rosterforge.services.economy import (
    add_currency,
    apply_interest,
    can_afford,
    create_wallet,
    get_balance,
    get_currency_name,
    get_reward,
    is_at_max_capacity,
    spend_currency,
)
from rosterforge.services.hand import (
    add_to_hand,
    create_hand,
    discard_excess,
    get_hand_size,
    get_hand_space,
    is_hand_full,
    remove_from_hand,
)
from rosterforge.services.matchmaker import (
    classify_bot_difficulty,
    classify_match_difficulty,
    find_match,
    find_opponent,
)
from rosterforge.services.run import (
    advance_phase,
    create_run,
    generate_run_id,
    get_current_phase,
    get_run_result,
    get_run_stats,
    is_run_complete,
    record_loss,
    record_win,
    update_run_state,
)
from rosterforge.services.snapshot_pool import (
    SnapshotPool,
    add_snapshot,
    apply_cleanup_strategy,
    create_snapshot,
    enforce_snapshot_limits,
    filter_expired_snapshots,
    generate_snapshot_id,
    get_snapshot_pool_stats,
    is_snapshot_expired,
)
from rosterforge.services.upgrade import (
    can_upgrade,
    get_max_tier,
    get_stat_multiplier,
    get_tier_name,
    get_upgrade_cost,
    is_max_tier,
    upgrade_card,
)

__all__ = [
    "DEFAULT_BOT_DECK_SIZE",
    "MIN_CARD_WEIGHT",
    "SnapshotPool",
    "add_card",
    "add_currency",
    "add_snapshot",
    "add_to_hand",
    "advance_phase",
    "apply_cleanup_strategy",
    "apply_interest",
    "ban_card",
    "can_afford",
    "can_upgrade",
    "classify_bot_difficulty",
    "classify_match_difficulty",
    "create_deck",
    "create_draft",
    "create_hand",
    "create_run",
    "create_snapshot",
    "create_wallet",
    "default_bot_name",
    "discard_excess",
    "draw_cards",
    "enforce_snapshot_limits",
    "filter_expired_snapshots",
    "find_match",
    "find_opponent",
    "generate_bot",
    "generate_run_id",
    "generate_snapshot_id",
    "get_balance",
    "get_bot_difficulty",
    "get_bot_tier_distribution",
    "get_currency_name",
    "get_current_phase",
    "get_deck_size",
    "get_draft_options",
    "get_draft_result",
    "get_hand_size",
    "get_hand_space",
    "get_max_tier",
    "get_reward",
    "get_run_result",
    "get_run_stats",
    "get_snapshot_pool_stats",
    "get_stat_multiplier",
    "get_tier_name",
    "get_tier_weight",
    "get_upgrade_cost",
    "is_at_max_capacity",
    "is_draft_complete",
    "is_hand_full",
    "is_max_tier",
    "is_run_complete",
    "is_snapshot_expired",
    "pick_card",
    "record_loss",
    "record_win",
    "remove_card",
    "remove_from_hand",
    "reroll_options",
    "select_bot_cards",
    "shuffle_deck",
    "skip_draft",
    "spend_currency",
    "update_run_state",
    "upgrade_card",
    "validate_deck",
]
