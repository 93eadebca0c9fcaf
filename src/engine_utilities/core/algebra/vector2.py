"""
Vector2 — 2D Vector

Вектор на плоскости: общая векторная алгебра плюс скалярное "2D cross"
и операции позиционирования (set_position, move, scale).
"""

from pydantic import Field

from engine_utilities.core.algebra.base import VectorModel


class Vector2(VectorModel):
    """
    Вектор (x, y).

    Examples:
        >>> Vector2(3, 4).length()
        5.0
        >>> str(Vector2(1, 0.5))
        'Vector2(1, 0.5)'
    """

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")

    def cross(self, other: "Vector2") -> float:
        """Скалярное векторное произведение (z-компонента): x1 * y2 - y1 * x2."""
        return self.x * other.y - self.y * other.x

    def set_position(self, position: "Vector2") -> None:
        """Присваивает компоненты position."""
        self.x = position.x
        self.y = position.y

    def move(self, offset: "Vector2") -> None:
        """Смещает вектор на offset."""
        self += offset

    def scale(self, factors: "Vector2") -> None:
        """Покомпонентное умножение на factors."""
        self.x *= factors.x
        self.y *= factors.y
