"""
Animation State Projection

Maps a driver's raw AnimationStatus onto the public AnimationState.
AnimationState.IDLE exists for callers that track "not started yet" on their
own; this projection never produces it.
"""

from models.enums import AnimationState, AnimationStatus

_STATUS_TO_STATE = {
    AnimationStatus.DISMISSED: AnimationState.DISMISSED,
    AnimationStatus.FORWARD: AnimationState.FORWARD,
    AnimationStatus.REVERSE: AnimationState.REVERSE,
    AnimationStatus.COMPLETED: AnimationState.COMPLETED,
}


def status_to_state(status: AnimationStatus) -> AnimationState:
    """Project a raw driver status onto the public state enum"""
    return _STATUS_TO_STATE[status]
