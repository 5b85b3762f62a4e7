"""Enemy data types, context steering, slime behaviours, spawning and enemy management."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "environment",
    "steering",
    "slime_behaviors",
    "spawning",
    "state",
    "slime",
]