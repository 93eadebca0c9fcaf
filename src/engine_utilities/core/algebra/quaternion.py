"""
Quaternion — Rotations, Composition and SLERP

Кватернион (x, y, z, w), w — скалярная часть. Как поворот имеет смысл
только при единичной норме; тип её не навязывает — после сложения,
умножения на скаляр и линейной ветки SLERP вызывающий код
нормализует сам.

ОТЛИЧИЕ ОТ ВЕКТОРОВ:
    normalize()/normalized() НЕ защищены от нулевой нормы: нулевой
    кватернион даёт NaN-компоненты (IEEE 0/0), исключения нет.

SLERP:
    1. dot = a · b (как 4-векторов)
    2. dot < 0 → b = -b, dot = -dot (кратчайшая дуга)
    3. dot > SLERP_DOT_THRESHOLD → normalize(a + (b - a) * t)
    4. иначе θ0 = acos(dot), θ = θ0 * t,
       s0 = cos θ - dot * sin θ / sin θ0,  s1 = sin θ / sin θ0,
       normalize(a * s0 + b * s1)
"""

import logging
from numbers import Real
from typing import Final

from pydantic import Field

from engine_utilities.core.algebra.base import ComponentModel
from engine_utilities.core.algebra.vector3 import Vector3
from engine_utilities.core.math.numerical_safeguards import ieee_divide
from engine_utilities.core.math.scalar_kernel import acos, cos, sin, sqrt

logger = logging.getLogger(__name__)

# Выше этого dot acos численно неустойчив → линейная смесь
SLERP_DOT_THRESHOLD: Final[float] = 0.9995


class Quaternion(ComponentModel):
    """
    Кватернион поворота (x, y, z, w).

    По умолчанию — тождественный поворот (0, 0, 0, 1).
    """

    x: float = Field(0.0, description="Векторная часть, i")
    y: float = Field(0.0, description="Векторная часть, j")
    z: float = Field(0.0, description="Векторная часть, k")
    w: float = Field(1.0, description="Скалярная часть")

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    # --- Арифметика ---

    def __mul__(self, other: "Quaternion | float") -> "Quaternion":
        """
        Произведение Гамильтона (q1 * q2) или умножение на скаляр (q * s).

        Композиция поворотов: (q1 * q2).rotate(v) == q1.rotate(q2.rotate(v)).
        """
        if isinstance(other, Quaternion):
            return Quaternion(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Real):
            return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Quaternion":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Quaternion":
        return self * -1.0

    def dot(self, other: "Quaternion") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length(self) -> float:
        return sqrt(self.dot(self))

    # --- Нормализация ---

    def normalize(self) -> None:
        """
        Нормализация на месте делением на 4-норму.

        Без защиты от нуля: нулевой кватернион становится (nan, nan, nan, nan).
        """
        magnitude = self.length()
        self.x = ieee_divide(self.x, magnitude)
        self.y = ieee_divide(self.y, magnitude)
        self.z = ieee_divide(self.z, magnitude)
        self.w = ieee_divide(self.w, magnitude)

    def normalized(self) -> "Quaternion":
        result = Quaternion(*self.components())
        result.normalize()
        return result

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    # --- Повороты ---

    def rotate(self, v: Vector3) -> Vector3:
        """
        Поворот вектора сэндвич-произведением q * (v, 0) * conjugate(q).

        Args:
            v: Вектор для поворота

        Returns:
            Векторная часть результата
        """
        pure = Quaternion(v.x, v.y, v.z, 0.0)
        result = self * pure * self.conjugate()
        return Vector3(result.x, result.y, result.z)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle_rad: float) -> "Quaternion":
        """
        Кватернион поворота на angle_rad вокруг axis.

        Ось должна быть уже единичной — внутри она не нормализуется.

        Examples:
            >>> q = Quaternion.from_axis_angle(Vector3(0, 0, 1), 1.5707963267948966)
            >>> q.rotate(Vector3(1, 0, 0)) == Vector3(0, 1, 0)
            True
        """
        half_angle = angle_rad * 0.5
        s = sin(half_angle)
        c = cos(half_angle)
        return cls(axis.x * s, axis.y * s, axis.z * s, c)

    @staticmethod
    def slerp(a: "Quaternion", b: "Quaternion", t: float) -> "Quaternion":
        """
        Сферическая линейная интерполяция по кратчайшей дуге.

        Args:
            a: Начальный поворот (t = 0)
            b: Конечный поворот (t = 1); может вернуться как -b
            t: Параметр интерполяции

        Returns:
            Нормализованный промежуточный поворот
        """
        dot = a.dot(b)

        if dot < 0.0:
            dot = -dot
            b = -b

        if dot > SLERP_DOT_THRESHOLD:
            logger.debug("slerp: dot=%.6f above %.4f, linear blend", dot, SLERP_DOT_THRESHOLD)
            return (a + (b - a) * t).normalized()

        theta_0 = acos(dot)
        theta = theta_0 * t

        sin_theta = sin(theta)
        sin_theta_0 = sin(theta_0)

        s0 = cos(theta) - dot * sin_theta / sin_theta_0
        s1 = sin_theta / sin_theta_0

        return (a * s0 + b * s1).normalized()
