from enum import Enum

from knapevo.exceptions import EvolutionError


class RunState(str, Enum):
    INITIALIZING = "initializing"
    EVOLVING = "evolving"
    DONE = "done"


VALID_TRANSITIONS: dict[RunState, set[RunState]] = {
    RunState.INITIALIZING: {RunState.EVOLVING},
    RunState.EVOLVING: {RunState.DONE},
    RunState.DONE: set(),
}


def is_valid_transition(current: RunState, new: RunState) -> bool:
    return new in VALID_TRANSITIONS.get(current, set())


def validate_transition(current: RunState, new: RunState) -> None:
    if not is_valid_transition(current, new):
        valid_next = VALID_TRANSITIONS.get(current, set())
        raise EvolutionError(
            f"Invalid run state transition: {current.value} -> {new.value}. "
            f"Valid transitions from {current.value}: {[s.value for s in valid_next]}"
        )
