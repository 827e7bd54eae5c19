"""
Animation timeline engine

Modules:
- curves: Easing curves and the curve registry
- interval: Sub-range remapping of a master progress value
- stagger: Per-item intervals for staggered groups
- chain: Sequential step scheduler
- driver: asyncio time driver feeding progress values
- driver_helpers, playback: Composite motions on top of a driver
- animation_utils: Slide / rotation / shimmer helpers
"""

__all__ = [
    "curves",
    "interval",
    "stagger",
    "chain",
    "state",
    "driver",
    "driver_helpers",
    "playback",
    "animation_utils",
    "errors",
]
