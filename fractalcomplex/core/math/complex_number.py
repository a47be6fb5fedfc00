"""
ComplexNumber — Комплексное число для итераций фракталов

Значение вида real + imag·i с арифметикой, трансцендентными функциями и
набором "фрактальных" шагов итерации z ↦ g(z, c).

Модуль обеспечивает:
- Арифметику: plus, minus, times, divided_by, reciprocal, conjugate
- Степени: square, cube, pow4
- Трансцендентные функции: exp, sin, cos, ln
- Геометрию: length_sq, length, angle
- Фрактальные шаги: mandelbrot, cubic_mandelbrot, quartic_mandelbrot, ...

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable: каждая операция возвращает новый экземпляр, receiver не меняется
2. |b|² < EPS_COMPLEX_ZERO при делении/reciprocal → DivisionByZero
3. |re| < EPS_COMPLEX_ZERO и |im| < EPS_COMPLEX_ZERO при ln → LogarithmOfZero
4. Остальные операции тотальны: ±inf/NaN на входе дают ±inf/NaN, но не исключение

ФОРМУЛЫ:
    (a + bi)²  = (a² - b²) + 2ab·i
    (a + bi)³  = (a³ - 3ab²) + (3a²b - b³)·i
    (a + bi)⁴  = (a⁴ - 6a²b² + b⁴) + (4a³b - 4ab³)·i
    e^(a + bi) = e^a·cos(b) + e^a·sin(b)·i
    ln(z)      = ln|z| + atan2(b, a)·i
"""

import math
from dataclasses import dataclass
from typing import Union

from fractalcomplex.core.math.numerical_safeguards import (
    EPS_COMPLEX_ZERO,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    cos_total,
    cosh_saturating,
    exp_saturating,
    is_close,
    is_near_zero,
    sin_total,
    sinh_saturating,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComplexArithmeticError(ArithmeticError):
    """Базовое исключение для вырожденных комплексных операций."""


class DivisionByZero(ComplexArithmeticError, ZeroDivisionError):
    """
    Деление на (почти) ноль: |b|² < EPS_COMPLEX_ZERO.

    Бросается divided_by (для делителя) и reciprocal (для самого числа).
    """


class LogarithmOfZero(ComplexArithmeticError, ValueError):
    """
    Логарифм (почти) нуля: обе компоненты по модулю < EPS_COMPLEX_ZERO.
    """


# =============================================================================
# COMPLEX NUMBER
# =============================================================================


Operand = Union["ComplexNumber", complex, float, int]


@dataclass(frozen=True)
class ComplexNumber:
    """
    Комплексное число real + imag·i.

    Immutable значение (frozen=True): два экземпляра с равными полями
    взаимозаменяемы. Методы возвращают новые экземпляры, поэтому цепочки
    вида z.square().plus(c) читаются так же, как мутирующий API.
    """

    real: float
    imag: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    # ---------- конструкторы ----------

    @classmethod
    def from_complex(cls, z: complex) -> "ComplexNumber":
        """Конверсия из встроенного complex."""
        return cls(z.real, z.imag)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "ComplexNumber":
        """
        Конструктор из полярной формы r·e^(iθ).

        Args:
            r: Модуль
            theta: Аргумент (радианы)
        """
        return cls(r * cos_total(theta), r * sin_total(theta))

    def copy(self) -> "ComplexNumber":
        """Независимая копия с теми же полями."""
        return ComplexNumber(self.real, self.imag)

    # ---------- арифметика ----------

    def plus(self, b: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real + b.real, self.imag + b.imag)

    def minus(self, b: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real - b.real, self.imag - b.imag)

    def times(self, b: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            self.real * b.real - self.imag * b.imag,
            self.real * b.imag + self.imag * b.real,
        )

    def divided_by(self, b: "ComplexNumber") -> "ComplexNumber":
        """
        Деление через сопряжённое: self·conj(b) / |b|².

        Args:
            b: Делитель

        Returns:
            self / b

        Raises:
            DivisionByZero: если |b|² < EPS_COMPLEX_ZERO

        Examples:
            >>> str(ComplexNumber(3, 4).divided_by(ComplexNumber(1, 2)))
            '2.2 - 0.4i'
        """
        denominator = b.length_sq()
        if denominator < EPS_COMPLEX_ZERO:
            raise DivisionByZero(f"Division by zero: divisor {b} has |b|^2={denominator:.3e}")

        return ComplexNumber(
            (self.real * b.real + self.imag * b.imag) / denominator,
            (self.imag * b.real - self.real * b.imag) / denominator,
        )

    def reciprocal(self) -> "ComplexNumber":
        """
        1/z = conj(z) / |z|².

        Raises:
            DivisionByZero: если |z|² < EPS_COMPLEX_ZERO
        """
        scale = self.length_sq()
        if scale < EPS_COMPLEX_ZERO:
            raise DivisionByZero(f"Reciprocal of zero: {self} has |z|^2={scale:.3e}")

        return ComplexNumber(self.real / scale, -self.imag / scale)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(self.real, -self.imag)

    # ---------- степени ----------

    def square(self) -> "ComplexNumber":
        re, im = self.real, self.imag
        return ComplexNumber(re * re - im * im, 2 * re * im)

    def cube(self) -> "ComplexNumber":
        re, im = self.real, self.imag
        return ComplexNumber(
            re * re * re - 3 * re * im * im,
            3 * re * re * im - im * im * im,
        )

    def pow4(self) -> "ComplexNumber":
        re, im = self.real, self.imag
        re2 = re * re
        im2 = im * im
        return ComplexNumber(
            re2 * re2 - 6 * re2 * im2 + im2 * im2,
            4 * re2 * re * im - 4 * re * im2 * im,
        )

    # ---------- трансцендентные функции ----------

    def exp(self) -> "ComplexNumber":
        scale = exp_saturating(self.real)
        return ComplexNumber(scale * cos_total(self.imag), scale * sin_total(self.imag))

    def sin(self) -> "ComplexNumber":
        return ComplexNumber(
            sin_total(self.real) * cosh_saturating(self.imag),
            cos_total(self.real) * sinh_saturating(self.imag),
        )

    def cos(self) -> "ComplexNumber":
        return ComplexNumber(
            cos_total(self.real) * cosh_saturating(self.imag),
            -sin_total(self.real) * sinh_saturating(self.imag),
        )

    def ln(self) -> "ComplexNumber":
        """
        Главная ветвь логарифма: ln|z| + atan2(im, re)·i.

        Разрез ветви по отрицательной вещественной оси, мнимая часть в (-π, π].

        Raises:
            LogarithmOfZero: если |re| < EPS_COMPLEX_ZERO и |im| < EPS_COMPLEX_ZERO
        """
        if is_near_zero(self.real) and is_near_zero(self.imag):
            raise LogarithmOfZero(f"Logarithm of zero: {self}")

        return ComplexNumber(math.log(self.length()), self.angle())

    # ---------- геометрия ----------

    def length_sq(self) -> float:
        """
        Квадрат модуля re² + im².

        Используется вместо length() в escape-тестах, чтобы избежать sqrt.
        """
        return self.real * self.real + self.imag * self.imag

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def angle(self) -> float:
        """Аргумент atan2(im, re); в начале координат 0.0."""
        return math.atan2(self.imag, self.real)

    def is_close(
        self,
        other: "ComplexNumber",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью."""
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imag, other.imag, rel_tol, abs_tol
        )

    # ---------- фрактальные шаги ----------

    def fractal_equation(self, c: "ComplexNumber") -> "ComplexNumber":
        """Исходное уравнение фрактала: z³ + c."""
        return self.cube().plus(c)

    def cubic_mandelbrot(self, c: "ComplexNumber") -> "ComplexNumber":
        return self.cube().plus(c)

    def mandelbrot(self, c: "ComplexNumber") -> "ComplexNumber":
        """Классический шаг Мандельброта: z² + c."""
        return self.square().plus(c)

    def quartic_mandelbrot(self, c: "ComplexNumber") -> "ComplexNumber":
        return self.pow4().plus(c)

    def exponential_fractal(self, c: "ComplexNumber") -> "ComplexNumber":
        return self.exp().plus(c)

    def sine_fractal(self, c: "ComplexNumber") -> "ComplexNumber":
        return self.sin().plus(c)

    def cosine_fractal(self, c: "ComplexNumber") -> "ComplexNumber":
        return self.cos().plus(c)

    def logarithmic_fractal(self, c: "ComplexNumber") -> "ComplexNumber":
        """ln(z) + c; LogarithmOfZero пробрасывается без изменений."""
        return self.ln().plus(c)

    def reciprocal_fractal(self, c: "ComplexNumber") -> "ComplexNumber":
        """1/z + c; DivisionByZero пробрасывается без изменений."""
        return self.reciprocal().plus(c)

    def combined_fractal_1(self, c: "ComplexNumber") -> "ComplexNumber":
        """
        z²·c + z.

        К произведению прибавляется исходный z, а не z².
        """
        return self.square().times(c).plus(self)

    def combined_fractal_2(self, c: "ComplexNumber") -> "ComplexNumber":
        """
        sin(z²) + cos(z)·c.

        Обе ветви считаются от исходного z.
        """
        sine_branch = self.square().sin()
        cosine_branch = self.cos().times(c)
        return sine_branch.plus(cosine_branch)

    # ---------- Python protocol ----------

    def __add__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.plus(b)

    def __radd__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return b.plus(self)

    def __sub__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.minus(b)

    def __rsub__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return b.minus(self)

    def __mul__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.times(b)

    def __rmul__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return b.times(self)

    def __truediv__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.divided_by(b)

    def __rtruediv__(self, other: Operand) -> "ComplexNumber":
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return b.divided_by(self)

    def __neg__(self) -> "ComplexNumber":
        return ComplexNumber(-self.real, -self.imag)

    def __abs__(self) -> float:
        return self.length()

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        if self.imag < 0:
            return f"{_format_part(self.real)} - {_format_part(abs(self.imag))}i"
        # abs() убирает знак у -0.0
        return f"{_format_part(self.real)} + {_format_part(abs(self.imag))}i"


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> "ComplexNumber | None":
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, complex):
        return ComplexNumber.from_complex(value)
    if isinstance(value, (int, float)):
        return ComplexNumber(value, 0.0)
    return None


def _format_part(value: float) -> str:
    # 15 значащих цифр: 3.0 → "3", 2.2 → "2.2"
    return f"{value:.15g}"
