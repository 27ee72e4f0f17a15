"""
Исключения measureconv.

Все ошибки ядра наследуются от MeasureConvError. Ошибки аргументов
дополнительно наследуются от ValueError, чтобы вызывающий код мог
обрабатывать их как обычный invalid-argument.
"""


class MeasureConvError(Exception):
    """Базовое исключение measureconv."""
    pass


class InvalidFractionError(MeasureConvError, ValueError):
    """
    Недопустимая дробь (знаменатель равен нулю).

    Ошибка контракта вызывающего кода: при корректном гейтинге
    (denominator != 0 and numerator > denominator) не возникает.
    """
    pass


class InvalidMeasurementError(MeasureConvError, ValueError):
    """
    Строка измерения не разбирается как десятичное число.

    Ядро предполагает валидированный ввод; пользовательский ввод
    фильтруется на уровне converter.input_gate.
    """
    pass
