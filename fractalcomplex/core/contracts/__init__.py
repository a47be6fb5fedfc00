"""
Contract Validation Module

Модуль для валидации JSON контрактов fractalcomplex.
"""

from .validators import (
    ComplexValueValidator,
    ContractValidator,
    FractalStepValidator,
    SchemaLoader,
    validate_complex_value,
    validate_fractal_step,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    "FractalStepValidator",
    # Functions
    "validate_complex_value",
    "validate_fractal_step",
]
