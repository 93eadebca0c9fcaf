"""
Vector and quaternion algebra.

Value types фиксированной размерности поверх скалярного ядра:
Vector2, Vector3, Vector4, Quaternion.
"""

from engine_utilities.core.algebra.base import ComponentModel, VectorModel
from engine_utilities.core.algebra.quaternion import SLERP_DOT_THRESHOLD, Quaternion
from engine_utilities.core.algebra.vector2 import Vector2
from engine_utilities.core.algebra.vector3 import Vector3
from engine_utilities.core.algebra.vector4 import Vector4

__all__ = [
    # Base models
    "ComponentModel",
    "VectorModel",
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    # Quaternion
    "Quaternion",
    "SLERP_DOT_THRESHOLD",
]
