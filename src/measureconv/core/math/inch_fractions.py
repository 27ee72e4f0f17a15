"""
Inch Fractions — GCD, Fractional Inches & Mixed Numbers

Модуль переводит миллиметры в дробные дюймы:
- gcd: алгоритм Евклида для сокращения дробей
- to_inch_fraction: мм → целое число дюймов или дробь n/d, d = 2^k <= 128
- split_mixed / to_mixed: дробь → смешанное число ("1 31/32")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика над значениями через DecimalBackend, без float
2. Знаменатель дроби: степень двойки, не больше max_denominator
3. Возвращаемые дроби несократимы
4. Нулевой знаменатель в to_mixed → InvalidFractionError

ФОРМУЛЫ:
    raw = mm / 25.4
    rounded_parts = round_half_up(raw × 128)
    fraction = (rounded_parts / g) / (128 / g),  g = gcd(rounded_parts, 128)
"""

from measureconv.core.domain.measurement import InchFraction, MixedNumber
from measureconv.core.domain.units import MAX_DENOMINATOR, MM_PER_INCH, validate_max_denominator
from measureconv.core.errors import InvalidFractionError
from measureconv.core.math.decimal_arithmetic import DEFAULT_BACKEND, DecimalBackend


# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Неотрицательное целое
        b: Неотрицательное целое

    Returns:
        НОД(a, b); gcd(a, 0) == a, gcd(0, b) == b

    Examples:
        >>> gcd(124, 128)
        4
        >>> gcd(7, 0)
        7
        >>> gcd(0, 128)
        128
    """
    while b != 0:
        a, b = b, a % b
    return a


def reduce_fraction(numerator: int, denominator: int) -> InchFraction:
    """
    Сокращение дроби до несократимой.

    Raises:
        InvalidFractionError: Если denominator == 0
    """
    if denominator == 0:
        raise InvalidFractionError(f"Denominator must not be zero: {numerator}/{denominator}")

    divisor = gcd(numerator, denominator)
    return InchFraction(numerator=numerator // divisor, denominator=denominator // divisor)


# =============================================================================
# FRACTION FINDER
# =============================================================================


def to_inch_fraction(
    mm_value: str,
    backend: DecimalBackend | None = None,
    max_denominator: int = MAX_DENOMINATOR,
) -> int | InchFraction:
    """
    Конверсия мм → дробные дюймы.

    Если значение в дюймах целое, возвращается целое число. Иначе значение
    квантуется до ближайшей 1/max_denominator дюйма (половины от нуля)
    и сокращается по НОД.

    Args:
        mm_value: Значение в миллиметрах (десятичная строка)
        backend: Арифметика произвольной точности (default: DEFAULT_BACKEND)
        max_denominator: Шаг квантования, степень двойки (default: 128)

    Returns:
        int: целое число дюймов (включая случай, когда квантованное значение
        целое), InchFraction: несократимая дробь

    Raises:
        InvalidMeasurementError: Если mm_value не разбирается бэкендом
        ValueError: Если max_denominator не степень двойки

    Examples:
        >>> to_inch_fraction("25.4")
        1
        >>> str(to_inch_fraction("12.7"))
        '1/2'
        >>> str(to_inch_fraction("50"))
        '63/32'
    """
    validate_max_denominator(max_denominator)
    backend = backend or DEFAULT_BACKEND

    raw = backend.divide(backend.construct(mm_value), backend.construct(MM_PER_INCH))

    if backend.is_integer(raw):
        return backend.to_int(raw)

    scale = backend.construct(max_denominator)
    parts = backend.to_int(backend.round_half_up(backend.multiply(raw, scale)))

    fraction = reduce_fraction(parts, max_denominator)

    # Квантованное значение оказалось целым (0 или n/1)
    if fraction.numerator == 0 or fraction.denominator == 1:
        return fraction.numerator

    return fraction


# =============================================================================
# MIXED NUMBER FORMATTER
# =============================================================================


def split_mixed(numerator: int, denominator: int) -> MixedNumber:
    """
    Разложение дроби на целую часть и правильную дробь.

    Args:
        numerator: Числитель (неотрицательный)
        denominator: Знаменатель

    Returns:
        MixedNumber (tagged variant)

    Raises:
        InvalidFractionError: Если denominator == 0 или дробь отрицательная
    """
    if denominator == 0:
        raise InvalidFractionError(f"Denominator must not be zero: {numerator}/{denominator}")

    if numerator < 0 or denominator < 0:
        raise InvalidFractionError(f"Fraction must be non-negative: {numerator}/{denominator}")

    if denominator == 1:
        return MixedNumber(whole=numerator)

    # Для неотрицательных значений divmod совпадает с усечением к нулю
    quotient, remainder = divmod(numerator, denominator)

    if remainder == 0:
        return MixedNumber(whole=quotient)

    fraction = reduce_fraction(remainder, denominator)
    return MixedNumber(whole=quotient or None, fraction=fraction)


def to_mixed(numerator: int, denominator: int) -> int | str:
    """
    Форматирование дроби как смешанного числа.

    Вызывающий код гейтит вызов условием denominator != 0 and
    numerator > denominator (см. needs_mixed).

    Returns:
        int, если дробь целая; "q r/d" для смешанного числа; "r/d" при q == 0

    Raises:
        InvalidFractionError: Если denominator == 0

    Examples:
        >>> to_mixed(9, 2)
        '4 1/2'
        >>> to_mixed(4, 2)
        2
        >>> to_mixed(1, 2)
        '1/2'
    """
    return split_mixed(numerator, denominator).display()


def needs_mixed(fraction: InchFraction) -> bool:
    """Смешанное число показывается только для дробей больше единицы."""
    return fraction.denominator != 0 and fraction.numerator > fraction.denominator
