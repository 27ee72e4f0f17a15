"""
Decimal Arithmetic — Arbitrary-Precision Backends

Инжектируемая арифметика произвольной точности для ядра конвертера.

Ядро никогда не работает с двоичным float: все значения строятся из строк,
умножаются и делятся как десятичные (или точные рациональные) числа и
форматируются обратно в строку.

Реализации:
- ContextDecimalBackend: decimal.Decimal в приватном decimal.Context
  (по умолчанию, точность DEFAULT_PRECISION значащих цифр)
- RationalBackend: fractions.Fraction, точная рациональная арифметика

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глобальный decimal-контекст процесса не изменяется
2. to_fixed округляет half-up (от нуля) и не выдаёт экспоненциальную запись
3. to_fraction возвращает несократимую пару (numerator, denominator), denominator > 0
4. construct не округляет ввод; сложение и умножение точные
5. Точность деления не ниже MIN_PRECISION цифр сверх разрядности операндов
"""

import decimal
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Final

from measureconv.core.errors import InvalidMeasurementError

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество значащих цифр для деления (mm / 25.4 даёт бесконечную дробь)
DEFAULT_PRECISION: Final[int] = 64

# Минимальная точность (по умолчанию decimal.js)
MIN_PRECISION: Final[int] = 20


def validate_precision(precision: int) -> None:
    """
    Проверка рабочей точности деления.

    Raises:
        ValueError: Если precision меньше MIN_PRECISION
    """
    if precision < MIN_PRECISION:
        raise ValueError(
            f"precision must be at least {MIN_PRECISION} digits, got {precision}"
        )


def _span(value: decimal.Decimal) -> int:
    """Число разрядов от старшей цифры (или единиц) до младшей цифры (или единиц)."""
    return max(value.adjusted(), 0) - min(value.as_tuple().exponent, 0) + 1


# =============================================================================
# ИНТЕРФЕЙС
# =============================================================================


class DecimalBackend(ABC):
    """
    Интерфейс арифметики произвольной точности.

    Значения непрозрачны для ядра: ядро получает их только через construct()
    и передаёт обратно в методы того же бэкенда.
    """

    @abstractmethod
    def construct(self, value: str | int) -> Any:
        """
        Построение значения из десятичной строки или целого.

        Raises:
            InvalidMeasurementError: Если строка не является конечным числом
        """

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any: ...

    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any: ...

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any: ...

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any: ...

    @abstractmethod
    def equals(self, a: Any, b: Any) -> bool: ...

    @abstractmethod
    def is_integer(self, value: Any) -> bool: ...

    @abstractmethod
    def round_half_up(self, value: Any) -> Any:
        """Округление до целого, половины от нуля."""

    @abstractmethod
    def to_int(self, value: Any) -> int:
        """Целая часть значения (усечение к нулю)."""

    @abstractmethod
    def to_fixed(self, value: Any, places: int) -> str:
        """
        Форматирование с фиксированным числом знаков после точки.

        Хвостовые нули сохраняются: to_fixed(1, 3) == "1.000".
        """

    @abstractmethod
    def to_fraction(self, value: Any) -> tuple[int, int]:
        """Точное разложение в несократимую дробь (numerator, denominator)."""


# =============================================================================
# DECIMAL
# =============================================================================


class ContextDecimalBackend(DecimalBackend):
    """
    Бэкенд на decimal.Decimal.

    Значения строятся точно (без округления до precision). Каждая операция
    выполняется в свежей копии приватного контекста с точностью,
    рассчитанной по операндам: сложение и умножение точные, деление
    сохраняет не меньше precision цифр сверх разрядности операндов.
    Настройки decimal.getcontext() вызывающего кода не влияют на результат,
    флаги операций между вызовами не накапливаются.
    """

    def __init__(self, precision: int = DEFAULT_PRECISION):
        validate_precision(precision)

        self.precision = precision
        # Шаблон контекста; операции выполняются только в его копиях
        self._context = decimal.Context(
            prec=precision,
            rounding=decimal.ROUND_HALF_UP,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )

    def _operation_context(self, digits: int) -> decimal.Context:
        context = self._context.copy()
        context.prec = max(self.precision, digits)
        return context

    def construct(self, value: str | int) -> decimal.Decimal:
        try:
            result = decimal.Decimal(value.strip() if isinstance(value, str) else value)
        except (decimal.InvalidOperation, ValueError, TypeError):
            raise InvalidMeasurementError(f"Not a decimal number: {value!r}")

        if not result.is_finite():
            raise InvalidMeasurementError(f"Measurement must be finite: {value!r}")

        return result

    def add(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        return self._operation_context(_span(a) + _span(b) + 1).add(a, b)

    def subtract(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        return self._operation_context(_span(a) + _span(b) + 1).subtract(a, b)

    def multiply(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        return self._operation_context(_span(a) + _span(b)).multiply(a, b)

    def divide(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        digits = self.precision + _span(a) + _span(b)
        return self._operation_context(digits).divide(a, b)

    def equals(self, a: decimal.Decimal, b: decimal.Decimal) -> bool:
        return a == b

    def is_integer(self, value: decimal.Decimal) -> bool:
        return value == value.to_integral_value(context=self._operation_context(_span(value)))

    def round_half_up(self, value: decimal.Decimal) -> decimal.Decimal:
        return value.to_integral_value(
            rounding=decimal.ROUND_HALF_UP,
            context=self._operation_context(_span(value)),
        )

    def to_int(self, value: decimal.Decimal) -> int:
        return int(value)

    def to_fixed(self, value: decimal.Decimal, places: int) -> str:
        if places < 0:
            raise ValueError(f"places must be non-negative, got {places}")

        # Точность quantize должна вмещать целую часть плюс places знаков
        context = self._operation_context(max(value.adjusted(), 0) + places + 2)

        quantum = decimal.Decimal(1).scaleb(-places, context=context)
        fixed = value.quantize(quantum, rounding=decimal.ROUND_HALF_UP, context=context)
        return f"{fixed:f}"

    def to_fraction(self, value: decimal.Decimal) -> tuple[int, int]:
        return value.as_integer_ratio()


# =============================================================================
# RATIONAL
# =============================================================================


class RationalBackend(DecimalBackend):
    """
    Бэкенд на fractions.Fraction: точная арифметика без ограничения точности.

    Деление на 25.4 остаётся точной дробью (например, 50 / 25.4 == 250/127),
    округление происходит только в to_fixed().
    """

    def construct(self, value: str | int) -> Fraction:
        try:
            result = Fraction(value.strip() if isinstance(value, str) else value)
        except (ValueError, TypeError):
            raise InvalidMeasurementError(f"Not a decimal number: {value!r}")
        return result

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def subtract(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def multiply(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def divide(self, a: Fraction, b: Fraction) -> Fraction:
        return a / b

    def equals(self, a: Fraction, b: Fraction) -> bool:
        return a == b

    def is_integer(self, value: Fraction) -> bool:
        return value.denominator == 1

    def round_half_up(self, value: Fraction) -> Fraction:
        magnitude = abs(value)
        whole, remainder = divmod(magnitude.numerator, magnitude.denominator)
        if 2 * remainder >= magnitude.denominator:
            whole += 1
        return Fraction(-whole if value < 0 else whole)

    def to_int(self, value: Fraction) -> int:
        return int(value)

    def to_fixed(self, value: Fraction, places: int) -> str:
        if places < 0:
            raise ValueError(f"places must be non-negative, got {places}")

        scaled = self.round_half_up(value * 10**places)
        digits = str(abs(scaled.numerator)).rjust(places + 1, "0")
        sign = "-" if scaled < 0 else ""

        if places == 0:
            return f"{sign}{digits}"
        return f"{sign}{digits[:-places]}.{digits[-places:]}"

    def to_fraction(self, value: Fraction) -> tuple[int, int]:
        return value.numerator, value.denominator


# Бэкенд по умолчанию для функций ядра
DEFAULT_BACKEND: Final[DecimalBackend] = ContextDecimalBackend()
