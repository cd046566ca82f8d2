"""Vector, quaternion and matrix math, easing curves, tunable JSON-backed variables and scene management."""

__version__ = "0.1.0"
__all__ = ["easing", "global_variables", "matrix", "quaternion", "scene", "transform", "vector"]