"""
Run lifecycle.

A run accumulates wins and losses until it reaches wins_to_complete (won)
or max_losses (lost). Between battles the orchestrator cycles through the
configured phases. Every operation returns a new Run with an event appended
to its history.

INVARIANT: Once status leaves ACTIVE, record_win, record_loss and
advance_phase raise RunCompleteError.
INVARIANT: win_streak and lose_streak are never both nonzero.
"""

import logging
from collections.abc import Callable
from dataclasses import replace

from rosterforge.models.failure import RunCompleteError
from rosterforge.models.run import (
    Run,
    RunConfig,
    RunEvent,
    RunEventType,
    RunPhase,
    RunStats,
    RunStatus,
)
from rosterforge.models.snapshot import StateT
from rosterforge.rng import generate_id, now_ms

logger = logging.getLogger(__name__)


def generate_run_id(timestamp_ms: int | None = None) -> str:
    """Unique run id: run_<base36 timestamp>_<6 random chars>."""
    return generate_id("run", timestamp_ms)


def _stamp(timestamp: int | None) -> int:
    return now_ms() if timestamp is None else timestamp


def _require_active(run: Run[StateT], action: str) -> None:
    if run.status is not RunStatus.ACTIVE:
        raise RunCompleteError(action, run.status.value)


def create_run(
    config: RunConfig,
    initial_state: StateT,
    *,
    run_id: str | None = None,
    now: int | None = None,
) -> Run[StateT]:
    """
    Start a run in its first phase with no wins, losses or history.

    Args:
        config: Run configuration (validated on construction)
        initial_state: Game-specific state carried by the run
        run_id: Explicit id (defaults to a generated one)
        now: Clock for the generated id, in epoch ms
    """
    return Run(
        id=run_id or generate_run_id(now),
        config=config,
        wins=0,
        losses=0,
        current_phase_index=0,
        win_streak=0,
        lose_streak=0,
        status=RunStatus.ACTIVE,
        state=initial_state,
        history=(),
    )


def record_win(run: Run[StateT], timestamp: int | None = None) -> Run[StateT]:
    """
    Count a win, extend the win streak and reset the lose streak.

    Raises:
        RunCompleteError: Run is already won or lost
    """
    _require_active(run, "record win")

    wins = run.wins + 1
    status = RunStatus.WON if wins >= run.config.wins_to_complete else RunStatus.ACTIVE
    event = RunEvent(type=RunEventType.WIN, timestamp=_stamp(timestamp))
    if status is RunStatus.WON:
        logger.info("Run %s won with %d wins, %d losses", run.id, wins, run.losses)

    return replace(
        run,
        wins=wins,
        win_streak=run.win_streak + 1 if run.config.track_streaks else 0,
        lose_streak=0,
        status=status,
        history=(*run.history, event),
    )


def record_loss(run: Run[StateT], timestamp: int | None = None) -> Run[StateT]:
    """
    Count a loss, extend the lose streak and reset the win streak.

    Raises:
        RunCompleteError: Run is already won or lost
    """
    _require_active(run, "record loss")

    losses = run.losses + 1
    status = RunStatus.LOST if losses >= run.config.max_losses else RunStatus.ACTIVE
    event = RunEvent(type=RunEventType.LOSS, timestamp=_stamp(timestamp))
    if status is RunStatus.LOST:
        logger.info("Run %s lost with %d wins, %d losses", run.id, run.wins, losses)

    return replace(
        run,
        losses=losses,
        lose_streak=run.lose_streak + 1 if run.config.track_streaks else 0,
        win_streak=0,
        status=status,
        history=(*run.history, event),
    )


def advance_phase(run: Run[StateT], timestamp: int | None = None) -> Run[StateT]:
    """
    Move to the next phase, wrapping to the first after the last.

    Raises:
        RunCompleteError: Run is already won or lost
    """
    _require_active(run, "advance phase")

    phases = run.config.phases
    next_index = (run.current_phase_index + 1) % len(phases)
    event = RunEvent(
        type=RunEventType.PHASE_CHANGE,
        timestamp=_stamp(timestamp),
        data={"phase": phases[next_index].value},
    )

    return replace(run, current_phase_index=next_index, history=(*run.history, event))


def get_current_phase(run: Run[StateT]) -> RunPhase:
    return run.config.phases[run.current_phase_index]


def is_run_complete(run: Run[StateT]) -> bool:
    return run.status is not RunStatus.ACTIVE


def get_run_result(run: Run[StateT]) -> RunStatus:
    return run.status


def get_run_stats(run: Run[StateT]) -> RunStats:
    """
    Win rate and longest win streak.

    The streak is recomputed from history, so it is available even when
    track_streaks is off.
    """
    total = run.wins + run.losses

    longest = 0
    current = 0
    for event in run.history:
        if event.type is RunEventType.WIN:
            current += 1
            longest = max(longest, current)
        elif event.type is RunEventType.LOSS:
            current = 0

    return RunStats(
        wins=run.wins,
        losses=run.losses,
        win_rate=run.wins / total if total else 0.0,
        longest_win_streak=longest,
    )


def update_run_state(
    run: Run[StateT],
    new_state: StateT | Callable[[StateT], StateT],
) -> Run[StateT]:
    """
    Replace the game state, or derive it from the current state.

    A callable new_state is applied to the current state. Allowed on
    finished runs, so post-run bookkeeping can still be stored.
    """
    state = new_state(run.state) if callable(new_state) else new_state
    return replace(run, state=state)
