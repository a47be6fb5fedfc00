"""
Core math modules для fractalcomplex

Комплексная арифметика, фрактальные шаги итерации и численные защиты.
"""

# Numerical Safeguards
from fractalcomplex.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COMPLEX_ZERO,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Validation
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    is_close,
    is_near_zero,
    # Saturating and total transcendental functions
    cos_total,
    cosh_saturating,
    exp_saturating,
    sin_total,
    sinh_saturating,
)

# Complex Number
from fractalcomplex.core.math.complex_number import (
    ComplexArithmeticError,
    ComplexNumber,
    DivisionByZero,
    LogarithmOfZero,
)

# Fractal Equations
from fractalcomplex.core.math.fractal_equations import (
    FRACTAL_EQUATIONS,
    FractalEquation,
    apply_fractal_equation,
    resolve_fractal_equation,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_COMPLEX_ZERO",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_near_zero",
    # Numerical Safeguards — Saturating and total functions
    "cos_total",
    "cosh_saturating",
    "exp_saturating",
    "sin_total",
    "sinh_saturating",
    # Complex Number — Exceptions
    "ComplexArithmeticError",
    "DivisionByZero",
    "LogarithmOfZero",
    # Complex Number — Types
    "ComplexNumber",
    # Fractal Equations
    "FRACTAL_EQUATIONS",
    "FractalEquation",
    "apply_fractal_equation",
    "resolve_fractal_equation",
]
