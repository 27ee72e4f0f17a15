"""Input Gate — валидация пользовательского ввода.

Фильтрует сырой ввод числового поля до вызова ядра:
- пустой ввод и незаконченный ввод ("", ".", "1e") подавляются
- нечисловой ввод ("abc", "1.2.3", "nan", "inf") подавляется
- отрицательные значения подавляются (измерения неотрицательны)

Подавление не является ошибкой: результат просто не показывается.
"""

import re
from dataclasses import dataclass
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

# Неотрицательное десятичное число: "12", "12.", ".5", "12.5", "1e3", "2.5E-2"
# Порядок ограничен тремя цифрами, чтобы форматирование оставалось конечным
NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"^\+?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]{1,3})?$"
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class InputCheck:
    """Результат проверки ввода."""

    accepted: bool
    block_reason: str

    # Нормализованный ввод (без пробелов по краям)
    value: str


# =============================================================================
# GATE
# =============================================================================


def check_input(raw: str | None) -> InputCheck:
    """Проверка сырого ввода.

    Args:
        raw: строка из числового поля (может быть None до первого ввода)

    Returns:
        InputCheck с решением о допуске и причиной блокировки
    """
    if raw is None:
        return InputCheck(accepted=False, block_reason="empty_input", value="")

    value = raw.strip()

    if not value:
        return InputCheck(accepted=False, block_reason="empty_input", value=value)

    if value.startswith("-"):
        return InputCheck(accepted=False, block_reason="negative_value", value=value)

    if not NUMBER_PATTERN.match(value):
        return InputCheck(accepted=False, block_reason="not_a_number", value=value)

    return InputCheck(accepted=True, block_reason="", value=value)


def is_number(raw: str | None) -> bool:
    """Предикат синтаксически корректного неотрицательного числа."""
    return check_input(raw).accepted
