"""
Domain models and value objects.

Contains serializable models for complex values and fractal iteration steps.
"""

from fractalcomplex.core.domain.complex_value import ComplexValue, FractalStep

__all__ = [
    "ComplexValue",
    "FractalStep",
]
