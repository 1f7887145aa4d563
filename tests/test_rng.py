"""
Tests for seeded randomness.

INVARIANT: Same seed + same call sequence ⇒ identical outputs.
"""

from rosterforge.rng import ID_SUFFIX_LENGTH, SeededRandom, generate_id, resolve_seed, to_base36


class TestSequenceDeterminism:
    """SeededRandom replays the same sequence for a seed."""

    def test_same_seed_same_sequence(self) -> None:
        """Two sources with one seed agree value for value."""
        rng1 = SeededRandom(12345)
        rng2 = SeededRandom(12345)

        assert [rng1.next() for _ in range(10)] == [rng2.next() for _ in range(10)]

    def test_values_in_unit_interval(self) -> None:
        """next() stays in [0, 1) for any seed."""
        for seed in (0, 1, 100, 999_999, -1, -12345):
            value = SeededRandom(seed).next()
            assert 0.0 <= value < 1.0

    def test_different_seeds_spread(self) -> None:
        """First outputs for 100 seeds are nearly all distinct."""
        values = {SeededRandom(seed).next() for seed in range(100)}
        assert len(values) > 90


class TestShuffle:
    """Seeded shuffles return new permutations."""

    def test_shuffle_is_permutation(self) -> None:
        """Shuffling keeps every item."""
        items = list(range(20))
        shuffled = SeededRandom(7).shuffle(items)

        assert sorted(shuffled) == items

    def test_shuffle_does_not_mutate_input(self) -> None:
        """The input list keeps its order."""
        items = [1, 2, 3, 4, 5]
        SeededRandom(7).shuffle(items)

        assert items == [1, 2, 3, 4, 5]

    def test_shuffle_deterministic(self) -> None:
        """The same seed gives the same order."""
        items = list("abcdefgh")
        assert SeededRandom(42).shuffle(items) == SeededRandom(42).shuffle(items)

    def test_shuffle_empty_and_single(self) -> None:
        """Trivial inputs come back unchanged."""
        assert SeededRandom(1).shuffle([]) == []
        assert SeededRandom(1).shuffle(["x"]) == ["x"]

    def test_next_int_bounds(self) -> None:
        """next_int(n) stays in [0, n)."""
        rng = SeededRandom(3)
        values = [rng.next_int(5) for _ in range(200)]

        assert min(values) >= 0
        assert max(values) <= 4


class TestResolveSeed:
    """Missing seeds fall back to the clock."""

    def test_explicit_seed_kept(self) -> None:
        """An explicit seed, including 0, is used as is."""
        assert resolve_seed(99) == 99
        assert resolve_seed(0) == 0

    def test_missing_seed_uses_clock(self) -> None:
        """None resolves to a positive clock value."""
        assert resolve_seed(None) > 0


class TestGenerateId:
    """Ids combine a prefix, a base-36 clock and a random suffix."""

    def test_base36(self) -> None:
        """Integers render in lowercase base 36."""
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"

    def test_format(self) -> None:
        """prefix_timestamp_suffix, with a fixed-length suffix."""
        prefix, timestamp, suffix = generate_id("run", 36).split("_")

        assert prefix == "run"
        assert timestamp == "10"
        assert len(suffix) == ID_SUFFIX_LENGTH

    def test_unique_for_same_timestamp(self) -> None:
        """The random suffix separates ids minted in the same millisecond."""
        assert len({generate_id("snap", 0) for _ in range(50)}) == 50
