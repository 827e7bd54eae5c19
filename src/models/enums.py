"""
Enums for the animation timeline engine
"""

from enum import Enum, auto


class AnimationStatus(Enum):
    """
    Raw phase reported by a time driver

    DISMISSED: stopped at the lower bound
    FORWARD: running towards the upper bound
    REVERSE: running towards the lower bound
    COMPLETED: stopped at the upper bound
    """
    DISMISSED = auto()
    FORWARD = auto()
    REVERSE = auto()
    COMPLETED = auto()


class AnimationState(Enum):
    """Public animation state handed to status callbacks"""
    IDLE = auto()        # Not started (never produced by status projection)
    FORWARD = auto()
    REVERSE = auto()
    COMPLETED = auto()
    DISMISSED = auto()


class ChainState(Enum):
    """
    Lifecycle of an AnimationChain

    NOT_STARTED → PLAYING → COMPLETED
    PLAYING → STOPPED (reset() returns to NOT_STARTED)
    any → DISPOSED (terminal)
    """
    NOT_STARTED = auto()
    PLAYING = auto()
    STOPPED = auto()
    COMPLETED = auto()
    DISPOSED = auto()


class SlideDirection(Enum):
    """Direction an element slides in from"""
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class RotationDirection(Enum):
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class AnimationTrigger(Enum):
    """When an animation is started"""
    AUTOMATIC = auto()   # As soon as it is created
    ON_VISIBLE = auto()  # When the host reports it visible
    MANUAL = auto()      # Caller drives it


class ShimmerDirection(Enum):
    LEFT_TO_RIGHT = auto()
    RIGHT_TO_LEFT = auto()
    TOP_TO_BOTTOM = auto()
    BOTTOM_TO_TOP = auto()
    DIAGONAL = auto()


class StaggeredListAnimationType(Enum):
    """How a staggered list item is revealed"""
    FADE = auto()
    SLIDE = auto()
    SCALE = auto()
    FADE_SLIDE = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATION = auto()   # Generic animation lifecycle
    CURVE = auto()       # Curve registry lookups
    STAGGER = auto()     # Stagger plans and controllers
    CHAIN = auto()       # Chain scheduling
    DRIVER = auto()      # Driver ticks and status changes
    TASK = auto()        # asyncio task tracking
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
