"""
Numerical Safeguards — Safe Math Primitives для комплексной арифметики

Модуль обеспечивает численную устойчивость операций ComplexNumber:
- Epsilon-порог вырожденных входов (деление, reciprocal, логарифм)
- Проверка валидности float (не NaN, не Inf)
- Epsilon-сравнения float с учётом машинной точности
- Насыщающие exp/sinh/cosh: переполнение даёт ±inf вместо OverflowError
- Тотальные sin/cos: ±inf на входе даёт NaN вместо ValueError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EPS_COMPLEX_ZERO фиксирован (1e-15) и не конфигурируется
2. Насыщающие и тотальные функции никогда не бросают исключений на IEEE-754 входах
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог "почти нуля" для комплексных операций.
# Для деления и reciprocal сравнивается с квадратом модуля |z|²,
# для логарифма с каждой компонентой независимо.
EPS_COMPLEX_ZERO: Final[float] = 1e-15

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")
    return value


def is_near_zero(value: float, eps: float = EPS_COMPLEX_ZERO) -> bool:
    """
    Строгая проверка abs(value) < eps.

    Граница исключена: ровно eps уже не "ноль".
    """
    return abs(value) < eps


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# НАСЫЩАЮЩИЕ И ТОТАЛЬНЫЕ ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def exp_saturating(x: float) -> float:
    """
    e^x с насыщением до +inf при переполнении.

    math.exp бросает OverflowError там, где IEEE-754 даёт +inf.

    Examples:
        >>> exp_saturating(0.0)
        1.0
        >>> exp_saturating(1000.0)
        inf
        >>> exp_saturating(-1000.0)
        0.0
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def cosh_saturating(x: float) -> float:
    """
    cosh(x) с насыщением до +inf при переполнении.

    Examples:
        >>> cosh_saturating(0.0)
        1.0
        >>> cosh_saturating(-1000.0)
        inf
    """
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def sinh_saturating(x: float) -> float:
    """
    sinh(x) с насыщением до ±inf при переполнении (знак сохраняется).

    Examples:
        >>> sinh_saturating(0.0)
        0.0
        >>> sinh_saturating(-1000.0)
        -inf
    """
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def sin_total(x: float) -> float:
    """
    sin(x), для ±inf возвращает NaN.

    math.sin бросает ValueError (math domain error) на ±inf, IEEE-754 даёт NaN.

    Examples:
        >>> sin_total(0.0)
        0.0
        >>> sin_total(float("inf"))
        nan
    """
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def cos_total(x: float) -> float:
    """
    cos(x), для ±inf возвращает NaN.

    Examples:
        >>> cos_total(0.0)
        1.0
        >>> cos_total(float("-inf"))
        nan
    """
    if math.isinf(x):
        return math.nan
    return math.cos(x)
