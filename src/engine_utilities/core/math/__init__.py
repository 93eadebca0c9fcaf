"""
Core math modules для engine_utilities

Скалярное ядро без платформенной math-библиотеки: корень, экспонента,
логарифмы, тригонометрия, степень, плюс sentinel-соглашение об ошибках домена.
"""

# Numerical Safeguards
from engine_utilities.core.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    NEGATIVE_INFINITY,
    NOT_A_NUMBER,
    POSITIVE_INFINITY,
    # Exceptions
    DomainError,
    # Sentinel checks
    is_domain_error,
    is_valid_float,
    require_finite,
    # Division and comparison
    approx_equal,
    ieee_divide,
    # Validation
    validate_eps,
    validate_max_iterations,
)

# Scalar Kernel
from engine_utilities.core.math.scalar_kernel import (
    EULER,
    HALF_PI,
    LN2,
    LN10,
    PI,
    SERIES_MAX_ITERATIONS,
    SQRT_ITERATIONS,
    TWO_PI,
    absolute,
    acos,
    asin,
    atan,
    ceil_int,
    cos,
    cosh,
    cube,
    exp,
    factorial,
    floor_int,
    interpolate,
    ln,
    log10,
    maximum,
    minimum,
    modulo,
    power,
    power_exact,
    round_half_away,
    sin,
    sinh,
    sqrt,
    square,
    tan,
    tanh,
    to_degrees,
    to_radians,
)

# Geometry
from engine_utilities.core.math.geometry import (
    circle_area,
    circle_perimeter,
    distance,
    rectangle_area,
    rectangle_perimeter,
    triangle_area,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EPSILON",
    "NEGATIVE_INFINITY",
    "NOT_A_NUMBER",
    "POSITIVE_INFINITY",
    # Numerical Safeguards — Exceptions
    "DomainError",
    # Numerical Safeguards — Functions
    "approx_equal",
    "ieee_divide",
    "is_domain_error",
    "is_valid_float",
    "require_finite",
    # Numerical Safeguards — Validation
    "validate_eps",
    "validate_max_iterations",
    # Scalar Kernel — Constants
    "EULER",
    "HALF_PI",
    "LN2",
    "LN10",
    "PI",
    "SERIES_MAX_ITERATIONS",
    "SQRT_ITERATIONS",
    "TWO_PI",
    # Scalar Kernel — Basic
    "absolute",
    "ceil_int",
    "cube",
    "factorial",
    "floor_int",
    "interpolate",
    "maximum",
    "minimum",
    "modulo",
    "round_half_away",
    "square",
    # Scalar Kernel — Roots, powers, logarithms
    "exp",
    "ln",
    "log10",
    "power",
    "power_exact",
    "sqrt",
    # Scalar Kernel — Trigonometry
    "acos",
    "asin",
    "atan",
    "cos",
    "sin",
    "tan",
    "to_degrees",
    "to_radians",
    # Scalar Kernel — Hyperbolic
    "cosh",
    "sinh",
    "tanh",
    # Geometry
    "circle_area",
    "circle_perimeter",
    "distance",
    "rectangle_area",
    "rectangle_perimeter",
    "triangle_area",
]
