"""
Тесты для моделей ComplexValue и FractalStep

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Отклонение NaN/Inf
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON
5. Конверсию в/из ComplexNumber
6. Вычисление шага итерации и проброс ошибок
"""

import json
import math

import pytest
from pydantic import ValidationError

from fractalcomplex.core.domain import ComplexValue, FractalStep
from fractalcomplex.core.math import (
    ComplexNumber,
    DivisionByZero,
    FractalEquation,
    LogarithmOfZero,
)


# =============================================================================
# COMPLEX VALUE TESTS
# =============================================================================


class TestComplexValue:
    """Тесты для модели ComplexValue"""

    def test_valid(self):
        value = ComplexValue(real=3.0, imag=-4.0)
        assert value.real == 3.0
        assert value.imag == -4.0

    def test_int_coerced_to_float(self):
        value = ComplexValue(real=1, imag=2)
        assert isinstance(value.real, float)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValidationError, match="must be a valid float"):
            ComplexValue(real=bad, imag=0.0)
        with pytest.raises(ValidationError, match="must be a valid float"):
            ComplexValue(real=0.0, imag=bad)

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            ComplexValue(real=1.0)

    def test_frozen(self):
        value = ComplexValue(real=1.0, imag=2.0)
        with pytest.raises(ValidationError):
            value.real = 5.0

    def test_roundtrip_with_complex_number(self):
        z = ComplexNumber(0.25, -1.5)
        value = ComplexValue.from_complex_number(z)
        assert value.to_complex_number() == z

    def test_json_roundtrip(self):
        value = ComplexValue(real=2.2, imag=-0.4)
        payload = value.model_dump_json()
        assert json.loads(payload) == {"real": 2.2, "imag": -0.4}
        assert ComplexValue.model_validate_json(payload) == value


# =============================================================================
# FRACTAL STEP TESTS
# =============================================================================


class TestFractalStep:
    """Тесты для модели FractalStep"""

    @pytest.fixture
    def mandelbrot_step(self) -> FractalStep:
        return FractalStep(
            equation="mandelbrot",
            z=ComplexValue(real=3.0, imag=4.0),
            c=ComplexValue(real=1.0, imag=2.0),
        )

    def test_equation_parsed_to_enum(self, mandelbrot_step):
        assert mandelbrot_step.equation is FractalEquation.MANDELBROT

    def test_unknown_equation_rejected(self):
        with pytest.raises(ValidationError):
            FractalStep(
                equation="burning_ship",
                z=ComplexValue(real=0.0, imag=0.0),
                c=ComplexValue(real=0.0, imag=0.0),
            )

    def test_nested_dict_input(self):
        step = FractalStep.model_validate(
            {"equation": "cubic_mandelbrot", "z": {"real": 1, "imag": 2}, "c": {"real": 1, "imag": 2}}
        )
        assert step.evaluate() == ComplexValue(real=-10.0, imag=0.0)

    def test_evaluate(self, mandelbrot_step):
        assert mandelbrot_step.evaluate() == ComplexValue(real=-6.0, imag=26.0)

    def test_next_step_keeps_equation_and_constant(self, mandelbrot_step):
        step = mandelbrot_step.next_step()
        assert step.equation is FractalEquation.MANDELBROT
        assert step.c == mandelbrot_step.c
        assert step.z == ComplexValue(real=-6.0, imag=26.0)

    def test_evaluate_does_not_mutate(self, mandelbrot_step):
        mandelbrot_step.evaluate()
        assert mandelbrot_step.z == ComplexValue(real=3.0, imag=4.0)

    def test_reciprocal_at_zero_propagates(self):
        step = FractalStep(
            equation=FractalEquation.RECIPROCAL,
            z=ComplexValue(real=0.0, imag=0.0),
            c=ComplexValue(real=1.0, imag=0.0),
        )
        with pytest.raises(DivisionByZero):
            step.evaluate()

    def test_logarithmic_at_zero_propagates(self):
        step = FractalStep(
            equation=FractalEquation.LOGARITHMIC,
            z=ComplexValue(real=0.0, imag=0.0),
            c=ComplexValue(real=1.0, imag=0.0),
        )
        with pytest.raises(LogarithmOfZero):
            step.evaluate()

    def test_overflow_result_rejected(self):
        """Переполнение exp не попадает в контракт как inf"""
        step = FractalStep(
            equation=FractalEquation.EXPONENTIAL,
            z=ComplexValue(real=1000.0, imag=0.0),
            c=ComplexValue(real=0.0, imag=0.0),
        )
        assert math.isinf(step.z.to_complex_number().exp().real)
        with pytest.raises(ValidationError):
            step.evaluate()

    def test_json_dump(self, mandelbrot_step):
        data = mandelbrot_step.model_dump(mode="json")
        assert data == {
            "equation": "mandelbrot",
            "z": {"real": 3.0, "imag": 4.0},
            "c": {"real": 1.0, "imag": 2.0},
        }
