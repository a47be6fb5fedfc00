"""
ComplexValue / FractalStep — Модели сериализации комплексных значений

Immutable Pydantic модели для обмена комплексными числами и отдельными шагами
фрактальной итерации через JSON.
Полная совместимость с JSON Schema (contracts/schema/complex_value.json,
contracts/schema/fractal_step.json).

В отличие от ComplexNumber, модели принимают только конечные значения:
NaN/Inf на входе дают ошибку валидации.
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from fractalcomplex.core.math.complex_number import ComplexNumber
from fractalcomplex.core.math.fractal_equations import FractalEquation, apply_fractal_equation
from fractalcomplex.core.math.numerical_safeguards import validate_finite


# =============================================================================
# COMPLEX VALUE MODEL
# =============================================================================


class ComplexValue(BaseModel):
    """
    Комплексное число real + imag·i в сериализуемой форме.

    Immutable модель (frozen=True).
    """

    real: float = Field(..., description="Вещественная часть")
    imag: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    @field_validator("real", "imag")
    @classmethod
    def validate_finite_component(cls, v: float, info: ValidationInfo) -> float:
        """NaN/Inf не допускаются в контракте."""
        return validate_finite(v, info.field_name)

    @classmethod
    def from_complex_number(cls, z: ComplexNumber) -> "ComplexValue":
        return cls(real=z.real, imag=z.imag)

    def to_complex_number(self) -> ComplexNumber:
        return ComplexNumber(self.real, self.imag)


# =============================================================================
# FRACTAL STEP MODEL
# =============================================================================


class FractalStep(BaseModel):
    """
    Один шаг итерации z ↦ g(z, c) выбранного уравнения.

    Immutable модель (frozen=True).
    """

    equation: FractalEquation = Field(..., description="Имя фрактального уравнения")
    z: ComplexValue = Field(..., description="Текущее значение орбиты")
    c: ComplexValue = Field(..., description="Константа уравнения")

    model_config = {"frozen": True}

    def evaluate(self) -> ComplexValue:
        """
        Применение уравнения к (z, c).

        Returns:
            Новое z

        Raises:
            DivisionByZero: reciprocal_fractal при z ≈ 0
            LogarithmOfZero: logarithmic_fractal при z ≈ 0
            ValidationError: если результат не конечен (переполнение)
        """
        result = apply_fractal_equation(
            self.equation, self.z.to_complex_number(), self.c.to_complex_number()
        )
        return ComplexValue.from_complex_number(result)

    def next_step(self) -> "FractalStep":
        """Следующий шаг той же орбиты: z заменён результатом evaluate()."""
        return FractalStep(equation=self.equation, z=self.evaluate(), c=self.c)
