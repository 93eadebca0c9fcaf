"""
Geometry — Elementary Plane Formulas

Прямые формулы площадей и периметров поверх скалярного ядра.
"""

from engine_utilities.core.math.scalar_kernel import PI, sqrt


def circle_area(radius: float) -> float:
    return PI * radius * radius


def circle_perimeter(radius: float) -> float:
    return 2.0 * PI * radius


def rectangle_area(width: float, height: float) -> float:
    return width * height


def rectangle_perimeter(width: float, height: float) -> float:
    return 2.0 * (width + height)


def triangle_area(base: float, height: float) -> float:
    return 0.5 * base * height


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Евклидово расстояние между точками (x1, y1) и (x2, y2) через sqrt ядра."""
    dx = x2 - x1
    dy = y2 - y1
    return sqrt(dx * dx + dy * dy)
