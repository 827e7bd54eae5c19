"""
Models package - Enums and value types for the animation engine
"""

from .enums import (
    AnimationStatus,
    AnimationState,
    ChainState,
    SlideDirection,
    RotationDirection,
    AnimationTrigger,
    ShimmerDirection,
    StaggeredListAnimationType,
    LogLevel,
    LogCategory,
)
from .offset import Offset

__all__ = [
    'AnimationStatus',
    'AnimationState',
    'ChainState',
    'SlideDirection',
    'RotationDirection',
    'AnimationTrigger',
    'ShimmerDirection',
    'StaggeredListAnimationType',
    'LogLevel',
    'LogCategory',
    'Offset',
]
