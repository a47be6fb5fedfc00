"""
fractalcomplex — complex-number value type for escape-time fractal iteration.

Arithmetic, transcendental functions and named fractal update steps
(z ↦ g(z, c)), plus serializable models and JSON contracts for them.
"""

from fractalcomplex.core.math import (
    ComplexArithmeticError,
    ComplexNumber,
    DivisionByZero,
    FractalEquation,
    LogarithmOfZero,
    apply_fractal_equation,
)

__all__ = [
    "ComplexArithmeticError",
    "ComplexNumber",
    "DivisionByZero",
    "FractalEquation",
    "LogarithmOfZero",
    "apply_fractal_equation",
]
