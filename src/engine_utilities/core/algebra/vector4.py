"""
Vector4 — 4D Vector

Векторное произведение для 4D не определено.
"""

from pydantic import Field

from engine_utilities.core.algebra.base import VectorModel


class Vector4(VectorModel):
    """Вектор (x, y, z, w)."""

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")
    z: float = Field(0.0, description="Компонента Z")
    w: float = Field(0.0, description="Компонента W")
