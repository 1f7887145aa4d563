"""
Draft engine.

A draft shows a bounded set of options drawn from a shuffled pool. The
player picks (or bans) from the options, may reroll them a limited number of
times, and may skip the draft when the configuration allows it.

INVARIANT: options and pool never share a card.
INVARIANT: len(options) at creation == min(options_count, len(pool)).
INVARIANT: A pick or ban moves exactly one card, so pool + options +
picked + banned is conserved.
"""

import logging
from collections.abc import Iterable

from rosterforge.models.card import CardT
from rosterforge.models.draft import Draft, DraftConfig, DraftResult, DraftType
from rosterforge.models.failure import (
    BanningNotAllowedError,
    CardNotInOptionsError,
    NoRerollsRemainingError,
    PickLimitReachedError,
    SkipNotAllowedError,
)
from rosterforge.rng import RandomFactory, SeededRandom

logger = logging.getLogger(__name__)


def _deal(
    cards: Iterable[CardT],
    options_count: int,
    seed: int,
    rng_factory: RandomFactory,
) -> tuple[tuple[CardT, ...], tuple[CardT, ...]]:
    """Shuffle cards and split into (options, remaining pool)."""
    shuffled = rng_factory(seed).shuffle(list(cards))
    count = min(options_count, len(shuffled))
    return tuple(shuffled[:count]), tuple(shuffled[count:])


def _find_option(draft: Draft[CardT], card_id: str) -> CardT:
    for card in draft.options:
        if card.id == card_id:
            return card
    raise CardNotInOptionsError(card_id)


def _without(options: tuple[CardT, ...], card_id: str) -> tuple[CardT, ...]:
    """Drop the first option with card_id; duplicate copies stay."""
    for index, card in enumerate(options):
        if card.id == card_id:
            return options[:index] + options[index + 1 :]
    return options


def create_draft(
    pool: Iterable[CardT],
    config: DraftConfig,
    seed: int,
    rng_factory: RandomFactory = SeededRandom,
) -> Draft[CardT]:
    """
    Start a draft from a card pool.

    The pool is shuffled with the seed and the first options_count cards
    become the options; the rest remain in the pool.
    """
    options, remaining = _deal(pool, config.options_count, seed, rng_factory)
    return Draft(
        pool=remaining,
        options=options,
        picked=(),
        banned=(),
        config=config,
        rerolls_used=0,
        seed=seed,
    )


def get_draft_options(draft: Draft[CardT]) -> list[CardT]:
    """Current options, as a fresh list."""
    return list(draft.options)


def pick_card(draft: Draft[CardT], card_id: str) -> Draft[CardT]:
    """
    Move a card from options to picked.

    Raises:
        CardNotInOptionsError: card_id is not a current option
        PickLimitReachedError: picks_count already reached
    """
    card = _find_option(draft, card_id)

    if len(draft.picked) >= draft.config.picks_count:
        raise PickLimitReachedError(draft.config.picks_count)

    return Draft(
        pool=draft.pool,
        options=_without(draft.options, card_id),
        picked=(*draft.picked, card),
        banned=draft.banned,
        config=draft.config,
        rerolls_used=draft.rerolls_used,
        seed=draft.seed,
    )


def ban_card(draft: Draft[CardT], card_id: str) -> Draft[CardT]:
    """
    Move a card from options to banned.

    Raises:
        BanningNotAllowedError: Draft type is pick-only
        CardNotInOptionsError: card_id is not a current option
    """
    if draft.config.type is DraftType.PICK:
        raise BanningNotAllowedError()

    card = _find_option(draft, card_id)

    return Draft(
        pool=draft.pool,
        options=_without(draft.options, card_id),
        picked=draft.picked,
        banned=(*draft.banned, card),
        config=draft.config,
        rerolls_used=draft.rerolls_used,
        seed=draft.seed,
    )


def reroll_options(
    draft: Draft[CardT],
    new_seed: int,
    rng_factory: RandomFactory = SeededRandom,
) -> Draft[CardT]:
    """
    Return the current options to the pool and deal a fresh set.

    Raises:
        NoRerollsRemainingError: rerolls_allowed already used
    """
    if draft.rerolls_used >= draft.config.rerolls_allowed:
        raise NoRerollsRemainingError(draft.config.rerolls_allowed)

    options, remaining = _deal(
        (*draft.pool, *draft.options), draft.config.options_count, new_seed, rng_factory
    )
    logger.debug(
        "Draft reroll %d/%d with seed %d",
        draft.rerolls_used + 1,
        draft.config.rerolls_allowed,
        new_seed,
    )

    return Draft(
        pool=remaining,
        options=options,
        picked=draft.picked,
        banned=draft.banned,
        config=draft.config,
        rerolls_used=draft.rerolls_used + 1,
        seed=new_seed,
    )


def skip_draft(draft: Draft[CardT]) -> Draft[CardT]:
    """
    Skip the draft by clearing the options.

    Raises:
        SkipNotAllowedError: allow_skip is off
    """
    if not draft.config.allow_skip:
        raise SkipNotAllowedError()

    return Draft(
        pool=draft.pool,
        options=(),
        picked=draft.picked,
        banned=draft.banned,
        config=draft.config,
        rerolls_used=draft.rerolls_used,
        seed=draft.seed,
    )


def is_draft_complete(draft: Draft[CardT]) -> bool:
    """
    A draft is complete when enough cards were picked, it was skipped,
    or both options and pool are exhausted.
    """
    if len(draft.picked) >= draft.config.picks_count:
        return True
    if not draft.options:
        return draft.config.allow_skip or not draft.pool
    return False


def get_draft_result(draft: Draft[CardT]) -> DraftResult[CardT]:
    skipped = not draft.picked and not draft.options and draft.config.allow_skip
    return DraftResult(picked=draft.picked, banned=draft.banned, skipped=skipped)
