"""
Fractal Equations — именованные шаги итерации z ↦ g(z, c)

Реестр фрактальных уравнений ComplexNumber с выбором по имени, чтобы внешний
рендерер мог хранить выбранное уравнение в конфигурации или JSON контракте.

Каждое уравнение описывает один дискретный шаг: принимает текущее z и константу c,
возвращает новое z. Ошибки вырожденных входов (DivisionByZero,
LogarithmOfZero) пробрасываются без изменений.
"""

from enum import Enum
from typing import Callable, Dict, Final, Union

from fractalcomplex.core.math.complex_number import ComplexNumber


# =============================================================================
# ENUMS
# =============================================================================


class FractalEquation(str, Enum):
    """Имя фрактального уравнения"""

    FRACTAL_EQUATION = "fractal_equation"  # z³ + c, исходное имя
    CUBIC_MANDELBROT = "cubic_mandelbrot"  # z³ + c
    MANDELBROT = "mandelbrot"  # z² + c
    QUARTIC_MANDELBROT = "quartic_mandelbrot"  # z⁴ + c
    EXPONENTIAL = "exponential_fractal"  # e^z + c
    SINE = "sine_fractal"  # sin(z) + c
    COSINE = "cosine_fractal"  # cos(z) + c
    LOGARITHMIC = "logarithmic_fractal"  # ln(z) + c
    RECIPROCAL = "reciprocal_fractal"  # 1/z + c
    COMBINED_1 = "combined_fractal_1"  # z²·c + z
    COMBINED_2 = "combined_fractal_2"  # sin(z²) + cos(z)·c


StepFunction = Callable[[ComplexNumber, ComplexNumber], ComplexNumber]


# Значение enum совпадает с именем метода ComplexNumber
FRACTAL_EQUATIONS: Final[Dict[FractalEquation, StepFunction]] = {
    equation: getattr(ComplexNumber, equation.value) for equation in FractalEquation
}


# =============================================================================
# DISPATCH
# =============================================================================


def resolve_fractal_equation(equation: Union[FractalEquation, str]) -> StepFunction:
    """
    Функция шага по имени уравнения.

    Args:
        equation: FractalEquation или его строковое значение

    Returns:
        Несвязанный метод ComplexNumber с сигнатурой (z, c) -> z

    Raises:
        ValueError: Если имя уравнения неизвестно
    """
    try:
        key = FractalEquation(equation)
    except ValueError:
        known = ", ".join(e.value for e in FractalEquation)
        raise ValueError(f"Unknown fractal equation {equation!r}; expected one of: {known}") from None
    return FRACTAL_EQUATIONS[key]


def apply_fractal_equation(
    equation: Union[FractalEquation, str],
    z: ComplexNumber,
    c: ComplexNumber,
) -> ComplexNumber:
    """
    Один шаг итерации выбранного уравнения.

    Examples:
        >>> str(apply_fractal_equation("mandelbrot", ComplexNumber(3, 4), ComplexNumber(1, 2)))
        '-6 + 26i'
    """
    return resolve_fractal_equation(equation)(z, c)
