import pytest

from rosterforge.models.card import Card
from rosterforge.models.deck import DeckConfig
from rosterforge.models.snapshot import Snapshot


@pytest.fixture
def unique_cards() -> list[Card]:
    """Ten distinct tier-1 cards."""
    return [Card(id=f"card-{i}", name=f"Card {i}", base_cost=i, tier=1) for i in range(10)]


@pytest.fixture
def tiered_cards() -> list[Card]:
    """Thirty cards, ten per tier 1-3."""
    return [
        Card(id=f"t{tier}-{i}", name=f"Tier {tier} Unit {i}", base_cost=tier * 2, tier=tier)
        for tier in (1, 2, 3)
        for i in range(10)
    ]


@pytest.fixture
def roguelike_deck_config() -> DeckConfig[Card]:
    """Max 12, min 0, no duplicates."""
    return DeckConfig(max_size=12, min_size=0, allow_duplicates=False, max_copies=1)


def _make_snapshot(
    snapshot_id: str,
    player_id: str = "player-1",
    wins: int = 0,
    rating: float = 1000,
    created_at: int = 0,
    size_bytes: int | None = None,
) -> Snapshot[dict]:
    return Snapshot(
        id=snapshot_id,
        player_id=player_id,
        run_id=f"run-{snapshot_id}",
        wins=wins,
        losses=0,
        rating=rating,
        state={},
        created_at=created_at,
        size_bytes=size_bytes,
    )


@pytest.fixture
def make_snapshot():
    """Factory for pool snapshots with sensible defaults."""
    return _make_snapshot
