"""
Component Models — Base Classes for Fixed-size Value Types

Общая основа Vector2/Vector3/Vector4 и Quaternion: Pydantic модели с
позиционным конструктором, доступом по индексу, приближённым равенством
и текстовым форматом "Type(x, y, ...)".

Порядок компонент = порядок объявления полей модели.

ИНВАРИАНТЫ:
1. Операции, порождающие значение, возвращают новый экземпляр и никогда
   не возвращают операнд
2. Составные присваивания (+=, -=, *=, /=) изменяют получателя и
   возвращают его же
3. Равенство — покомпонентное approx_equal, не битовое
4. Индекс вне [0, N) — ошибка программиста (IndexError) для всех размерностей
"""

from collections.abc import Iterator
from numbers import Real
from typing import Self

from pydantic import BaseModel

from engine_utilities.core.math.numerical_safeguards import approx_equal, ieee_divide
from engine_utilities.core.math.scalar_kernel import sqrt


# =============================================================================
# COMPONENT MODEL
# =============================================================================


class ComponentModel(BaseModel):
    """
    Базовая модель с N float-компонентами.

    Конструктор принимает компоненты позиционно и/или по имени:
        Vector3(1, 2, 3) == Vector3(x=1, y=2, z=3)

    Компоненты без значения берут default поля.
    """

    model_config = {"extra": "forbid"}

    def __init__(self, *components: float, **data: float):
        names = type(self).axes()
        if len(components) > len(names):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(names)} components, "
                f"got {len(components)}"
            )

        for name, value in zip(names, components):
            if name in data:
                raise TypeError(f"{type(self).__name__} got multiple values for '{name}'")
            data[name] = value

        super().__init__(**data)

    @classmethod
    def axes(cls) -> tuple[str, ...]:
        """Имена компонент в порядке индексов."""
        return tuple(cls.model_fields)

    def components(self) -> tuple[float, ...]:
        """Значения компонент в порядке индексов."""
        return tuple(getattr(self, name) for name in self.axes())

    def _axis_name(self, index: int) -> str:
        names = self.axes()
        if not 0 <= index < len(names):
            raise IndexError(
                f"{type(self).__name__} index out of range: {index} "
                f"(valid: 0..{len(names) - 1})"
            )
        return names[index]

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        # компоненты, а не пары (имя, значение) BaseModel
        return iter(self.components())

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._axis_name(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._axis_name(index), float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(
            approx_equal(a, b) for a, b in zip(self.components(), other.components())
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        # формат %g: 3.0 → "3", 0.5 → "0.5"
        body = ", ".join(f"{value:g}" for value in self.components())
        return f"{type(self).__name__}({body})"


# =============================================================================
# VECTOR MODEL
# =============================================================================


class VectorModel(ComponentModel):
    """
    Общая алгебра векторов фиксированной размерности.

    Подклассы объявляют только поля и специфичные операции (cross).
    """

    def _map(self, other: Self, op) -> Self:
        return type(self)(*(op(a, b) for a, b in zip(self.components(), other.components())))

    def _assign(self, values) -> Self:
        for name, value in zip(self.axes(), values):
            setattr(self, name, value)
        return self

    # --- Арифметика ---

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._map(other, lambda a, b: a + b)

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._map(other, lambda a, b: a - b)

    def __mul__(self, scalar: float) -> Self:
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(value * scalar for value in self.components()))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Self:
        """Деление на скаляр; деление на ноль даёт ±inf / NaN покомпонентно."""
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(ieee_divide(value, scalar) for value in self.components()))

    def __neg__(self) -> Self:
        return self * -1.0

    # --- Составные присваивания ---

    def __iadd__(self, other: Self) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._assign(a + b for a, b in zip(self.components(), other.components()))

    def __isub__(self, other: Self) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._assign(a - b for a, b in zip(self.components(), other.components()))

    def __imul__(self, scalar: float) -> Self:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._assign(value * scalar for value in self.components())

    def __itruediv__(self, scalar: float) -> Self:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._assign(ieee_divide(value, scalar) for value in self.components())

    # --- Магнитуда ---

    def length_squared(self) -> float:
        return sum(value * value for value in self.components())

    def length(self) -> float:
        return sqrt(self.length_squared())

    def dot(self, other: Self) -> float:
        return sum(a * b for a, b in zip(self.components(), other.components()))

    def normalized(self) -> Self:
        """
        Единичная копия вектора.

        Returns:
            self / length(); нулевой вектор, если length() == 0
        """
        magnitude = self.length()
        if magnitude == 0.0:
            return type(self).zero()
        return self / magnitude

    def normalize(self) -> None:
        """Нормализация на месте; нулевой вектор остаётся нулевым."""
        magnitude = self.length()
        if magnitude == 0.0:
            return
        self /= magnitude

    # --- Статические конструкторы ---

    @classmethod
    def zero(cls) -> Self:
        return cls(*([0.0] * len(cls.axes())))

    @classmethod
    def one(cls) -> Self:
        return cls(*([1.0] * len(cls.axes())))

    @staticmethod
    def lerp(a: "VectorModel", b: "VectorModel", t: float) -> "VectorModel":
        """Линейная интерполяция a + (b - a) * t; t вне [0, 1] экстраполирует."""
        return a + (b - a) * t

    @staticmethod
    def distance(a: "VectorModel", b: "VectorModel") -> float:
        return (b - a).length()
