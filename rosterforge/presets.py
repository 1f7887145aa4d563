"""
Named configuration presets.

The embedding application picks a preset by name (see config.Settings) or
passes a config record directly.
"""

from typing import TypeVar

from rosterforge.models.card import BaseCard
from rosterforge.models.draft import DraftConfig, DraftType
from rosterforge.models.economy import EconomyConfig
from rosterforge.models.failure import InvalidConfigError
from rosterforge.models.matchmaking import BotConfig, MatchmakingConfig
from rosterforge.models.run import RunConfig, RunPhase
from rosterforge.models.snapshot import CleanupStrategy, SnapshotConfig
from rosterforge.models.upgrade import UpgradeConfig

PresetT = TypeVar("PresetT")

HOUR_MS = 60 * 60 * 1000

# =============================================================================
# DRAFT
# =============================================================================

# Start of run: choose 3 of 5
INITIAL_DRAFT_CONFIG = DraftConfig(
    options_count=5,
    picks_count=3,
    type=DraftType.PICK,
    allow_skip=False,
    rerolls_allowed=0,
)

# After a win: choose 1 of 3, skippable, one reroll
POST_BATTLE_DRAFT_CONFIG = DraftConfig(
    options_count=3,
    picks_count=1,
    type=DraftType.PICK,
    allow_skip=True,
    rerolls_allowed=1,
)

ARENA_DRAFT_CONFIG = DraftConfig(
    options_count=5,
    picks_count=2,
    type=DraftType.PICK_AND_BAN,
    allow_skip=False,
    rerolls_allowed=0,
)

# =============================================================================
# SNAPSHOT POOL
# =============================================================================

# Summary-only snapshots (~2 KB), ~20 MB at capacity
ROGUELIKE_SNAPSHOT_CONFIG = SnapshotConfig(
    expiry_ms=24 * HOUR_MS,
    max_snapshots_per_player=10,
    include_full_state=False,
    max_total_snapshots=10_000,
    cleanup_strategy=CleanupStrategy.OLDEST,
)

ARENA_SNAPSHOT_CONFIG = SnapshotConfig(
    expiry_ms=12 * HOUR_MS,
    max_snapshots_per_player=20,
    include_full_state=False,
    max_total_snapshots=50_000,
    cleanup_strategy=CleanupStrategy.LOWEST_RATING,
)

CASUAL_SNAPSHOT_CONFIG = SnapshotConfig(
    expiry_ms=48 * HOUR_MS,
    max_snapshots_per_player=5,
    include_full_state=True,
    max_total_snapshots=5_000,
    cleanup_strategy=CleanupStrategy.RANDOM,
)

# =============================================================================
# MATCHMAKING
# =============================================================================

ROGUELIKE_MATCHMAKING_CONFIG = MatchmakingConfig(
    rating_range=200,
    wins_range=1,
    bot_fallback=True,
    bot_difficulty_scale=lambda wins: 0.5 + wins * 0.1,
)

# Exact wins match
ARENA_MATCHMAKING_CONFIG = MatchmakingConfig(
    rating_range=300,
    wins_range=0,
    bot_fallback=True,
    bot_difficulty_scale=lambda wins: 0.6 + wins * 0.05,
)

CASUAL_MATCHMAKING_CONFIG = MatchmakingConfig(
    rating_range=500,
    wins_range=3,
    bot_fallback=True,
    bot_difficulty_scale=lambda wins: 0.4 + wins * 0.05,
)

# =============================================================================
# BOTS
# =============================================================================

ROGUELIKE_BOT_CONFIG = BotConfig(
    base_difficulty=0.5,
    difficulty_per_win=0.05,
    max_difficulty=0.95,
    name_generator=lambda wins: f"Bot_{wins}W",
)

EASY_BOT_CONFIG = BotConfig(
    base_difficulty=0.3,
    difficulty_per_win=0.03,
    max_difficulty=0.7,
    name_generator=lambda wins: f"Trainee_{wins}",
)

HARD_BOT_CONFIG = BotConfig(
    base_difficulty=0.7,
    difficulty_per_win=0.05,
    max_difficulty=0.99,
    name_generator=lambda wins: f"Champion_{wins}",
)

# =============================================================================
# UPGRADES
# =============================================================================

# Costs: base_cost * target_tier * 10; stats 100% / 150% / 200%
STANDARD_TIERS: UpgradeConfig[BaseCard] = UpgradeConfig(
    max_tier=3,
    tier_names=("T1", "T2", "T3"),
    calculate_cost=lambda card, target_tier: card.base_cost * target_tier * 10,
    stat_multiplier=lambda tier: {1: 1.0, 2: 1.5, 3: 2.0}.get(tier, 1.0),
)

# +0 to +4, flat cost, +25% per tier
SIMPLE_TIERS: UpgradeConfig[BaseCard] = UpgradeConfig(
    max_tier=5,
    tier_names=("+0", "+1", "+2", "+3", "+4"),
    calculate_cost=lambda card, target_tier: 50 * target_tier,
    stat_multiplier=lambda tier: 1.0 + (tier - 1) * 0.25,
)

# Cost doubles per tier: base_cost * 20 * 2^(target_tier - 1)
LEGENDARY_TIERS: UpgradeConfig[BaseCard] = UpgradeConfig(
    max_tier=4,
    tier_names=("Common", "Rare", "Epic", "Legendary"),
    calculate_cost=lambda card, target_tier: card.base_cost * 20 * 2 ** (target_tier - 1),
    stat_multiplier=lambda tier: {1: 1.0, 2: 1.3, 3: 1.7, 4: 2.5}.get(tier, 1.0),
)

# T1->T2 costs base_cost * 3, T2->T3 costs base_cost * 5
ROGUELIKE_TIERS: UpgradeConfig[BaseCard] = UpgradeConfig(
    max_tier=3,
    tier_names=("Bronze", "Silver", "Gold"),
    calculate_cost=lambda card, target_tier: card.base_cost * (3 if target_tier == 2 else 5),
    stat_multiplier=lambda tier: {1: 1.0, 2: 1.5, 3: 2.0}.get(tier, 1.0),
)

# =============================================================================
# ECONOMY
# =============================================================================

# No interest; 7 per win plus 2 per win beyond a 2-win streak, 9 per loss
ROGUELIKE_ECONOMY_CONFIG = EconomyConfig(
    starting_amount=10,
    currency_name="Gold",
    win_reward=lambda streak, _context: 7 + ((streak - 2) * 2 if streak >= 3 else 0),
    lose_reward=lambda streak, _context: 9,
    max_amount=0,
)

# Streak rewards both ways, 10% interest capped at 5
AUTOBATTLER_ECONOMY_CONFIG = EconomyConfig(
    starting_amount=5,
    currency_name="Gold",
    win_reward=lambda streak, _context: 1 + min(streak, 5),
    lose_reward=lambda streak, _context: 1 + min(streak, 5),
    max_amount=100,
    interest_rate=0.1,
    interest_cap=5,
)

CARD_GAME_ECONOMY_CONFIG = EconomyConfig(
    starting_amount=100,
    currency_name="Coins",
    win_reward=lambda streak, _context: 25,
    lose_reward=lambda streak, _context: 10,
    max_amount=9999,
)

# No consolation for losses
ARENA_ECONOMY_CONFIG = EconomyConfig(
    starting_amount=0,
    currency_name="Tokens",
    win_reward=lambda streak, _context: 10 + streak * 5,
    lose_reward=lambda streak, _context: 0,
)

# =============================================================================
# RUNS
# =============================================================================

ROGUELIKE_RUN_CONFIG = RunConfig(
    wins_to_complete=9,
    max_losses=4,
    phases=(RunPhase.DRAFT, RunPhase.BATTLE, RunPhase.SHOP),
)

BOSS_RUSH_RUN_CONFIG = RunConfig(
    wins_to_complete=5,
    max_losses=1,
    phases=(RunPhase.BATTLE, RunPhase.REST),
)

# Effectively unbounded
ENDLESS_RUN_CONFIG = RunConfig(
    wins_to_complete=999,
    max_losses=3,
    phases=(RunPhase.BATTLE, RunPhase.SHOP, RunPhase.EVENT),
)

ARENA_RUN_CONFIG = RunConfig(
    wins_to_complete=12,
    max_losses=3,
    phases=(RunPhase.DRAFT, RunPhase.BATTLE),
)

TUTORIAL_RUN_CONFIG = RunConfig(
    wins_to_complete=3,
    max_losses=5,
    phases=(RunPhase.BATTLE,),
    track_streaks=False,
)

# =============================================================================
# LOOKUP BY NAME
# =============================================================================

DRAFT_PRESETS: dict[str, DraftConfig] = {
    "initial": INITIAL_DRAFT_CONFIG,
    "post_battle": POST_BATTLE_DRAFT_CONFIG,
    "arena": ARENA_DRAFT_CONFIG,
}

SNAPSHOT_PRESETS: dict[str, SnapshotConfig] = {
    "roguelike": ROGUELIKE_SNAPSHOT_CONFIG,
    "arena": ARENA_SNAPSHOT_CONFIG,
    "casual": CASUAL_SNAPSHOT_CONFIG,
}

MATCHMAKING_PRESETS: dict[str, MatchmakingConfig] = {
    "roguelike": ROGUELIKE_MATCHMAKING_CONFIG,
    "arena": ARENA_MATCHMAKING_CONFIG,
    "casual": CASUAL_MATCHMAKING_CONFIG,
}

BOT_PRESETS: dict[str, BotConfig] = {
    "roguelike": ROGUELIKE_BOT_CONFIG,
    "easy": EASY_BOT_CONFIG,
    "hard": HARD_BOT_CONFIG,
}

UPGRADE_PRESETS: dict[str, UpgradeConfig[BaseCard]] = {
    "standard": STANDARD_TIERS,
    "simple": SIMPLE_TIERS,
    "legendary": LEGENDARY_TIERS,
    "roguelike": ROGUELIKE_TIERS,
}

ECONOMY_PRESETS: dict[str, EconomyConfig] = {
    "roguelike": ROGUELIKE_ECONOMY_CONFIG,
    "autobattler": AUTOBATTLER_ECONOMY_CONFIG,
    "card_game": CARD_GAME_ECONOMY_CONFIG,
    "arena": ARENA_ECONOMY_CONFIG,
}

RUN_PRESETS: dict[str, RunConfig] = {
    "roguelike": ROGUELIKE_RUN_CONFIG,
    "boss_rush": BOSS_RUSH_RUN_CONFIG,
    "endless": ENDLESS_RUN_CONFIG,
    "arena": ARENA_RUN_CONFIG,
    "tutorial": TUTORIAL_RUN_CONFIG,
}


def _lookup(presets: dict[str, PresetT], kind: str, name: str) -> PresetT:
    try:
        return presets[name.lower()]
    except KeyError:
        valid = ", ".join(sorted(presets))
        raise InvalidConfigError(
            f"{kind} preset", f"unknown preset {name!r} (valid: {valid})"
        ) from None


def get_draft_preset(name: str) -> DraftConfig:
    return _lookup(DRAFT_PRESETS, "draft", name)


def get_snapshot_preset(name: str) -> SnapshotConfig:
    return _lookup(SNAPSHOT_PRESETS, "snapshot", name)


def get_matchmaking_preset(name: str) -> MatchmakingConfig:
    return _lookup(MATCHMAKING_PRESETS, "matchmaking", name)


def get_bot_preset(name: str) -> BotConfig:
    return _lookup(BOT_PRESETS, "bot", name)


def get_upgrade_preset(name: str) -> UpgradeConfig[BaseCard]:
    return _lookup(UPGRADE_PRESETS, "upgrade", name)


def get_economy_preset(name: str) -> EconomyConfig:
    return _lookup(ECONOMY_PRESETS, "economy", name)


def get_run_preset(name: str) -> RunConfig:
    return _lookup(RUN_PRESETS, "run", name)
