"""
Vector3 — 3D Vector
"""

from pydantic import Field

from engine_utilities.core.algebra.base import VectorModel


class Vector3(VectorModel):
    """
    Вектор (x, y, z).

    Examples:
        >>> Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)
        True
    """

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")
    z: float = Field(0.0, description="Компонента Z")

    def cross(self, other: "Vector3") -> "Vector3":
        """Векторное произведение (правая система координат)."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
