"""
Animation errors

Invalid-state and range errors are raised at the point of misuse.
Degenerate numeric input (zero-width intervals, heavy stagger) is clamped
instead and never ends up here.
"""


class AnimationError(Exception):
    """Base class for all animation engine errors"""


class InvalidStateError(AnimationError, RuntimeError):
    """Operation not allowed in the object's current lifecycle state"""


class ChainDisposedError(InvalidStateError):
    """Mutating or playing an AnimationChain after dispose()"""


class DriverDisposedError(InvalidStateError):
    """Using an AnimationDriver after dispose()"""


class StaggerIndexError(AnimationError, IndexError):
    """Requested item index is outside a stagger plan"""

    def __init__(self, index: int, item_count: int):
        self.index = index
        self.item_count = item_count
        super().__init__(f"Item index {index} out of range for {item_count} staggered items")
