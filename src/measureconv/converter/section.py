"""Conversion Section — секция ввода и отображения результата.

Секция привязана к целевой единице и хранит последний сырой ввод.
Каждое обновление ввода пересчитывает результат; подавленный ввод
даёт пустое отображение.

Отображение:
- Unit.INCH: таблица Fraction / Decimal / Mixed fraction
- Unit.MILLIMETER: одна строка
Каждое значение сопровождается тегом единицы.
"""

from typing import Optional

from measureconv.core.domain.measurement import InchConversion, MillimeterConversion
from measureconv.core.domain.units import Unit
from measureconv.converter.converter import MeasurementConverter


# Заголовки секций
SECTION_TITLES = {
    Unit.INCH: "Convert millimeters into inches:",
    Unit.MILLIMETER: "Convert inches into millimeters:",
}

# Заголовки колонок таблицы дюймов
INCH_TABLE_HEADERS = ("Fraction", "Decimal", "Mixed fraction")


class ConversionSection:
    """Секция конверсии с последним введённым значением."""

    def __init__(self, unit: Unit | str, converter: Optional[MeasurementConverter] = None):
        self.unit = Unit(unit)
        self.converter = converter or MeasurementConverter()

        self.latest_input: Optional[str] = None
        self.result: InchConversion | MillimeterConversion | None = None

    @property
    def title(self) -> str:
        return SECTION_TITLES[self.unit]

    def update(self, raw: Optional[str]) -> InchConversion | MillimeterConversion | None:
        """Обновление ввода и пересчёт результата.

        Returns:
            Результат конверсии или None, если ввод подавлен
        """
        self.latest_input = raw
        self.result = self.converter.convert(raw, self.unit)
        return self.result

    def render(self) -> str:
        """Текстовое отображение результата (пустая строка при подавлении)."""
        if self.result is None:
            return ""

        if isinstance(self.result, MillimeterConversion):
            return f"{self.result.decimal} {self.unit.value}"

        return render_inch_table(self.result, self.unit)


def render_inch_table(result: InchConversion, unit: Unit = Unit.INCH) -> str:
    """Таблица Fraction / Decimal / Mixed fraction.

    Колонка Mixed fraction для значений без смешанного числа повторяет
    целое число или остаётся пустой для правильной дроби.
    """
    if result.mixed is not None:
        mixed = result.mixed
    elif result.whole is not None:
        mixed = str(result.whole)
    else:
        mixed = None

    cells = (
        f"{result.fraction_display()} {unit.value}",
        f"{result.decimal} {unit.value}",
        f"{mixed} {unit.value}" if mixed is not None else "",
    )

    widths = [max(len(header), len(cell)) for header, cell in zip(INCH_TABLE_HEADERS, cells)]
    header_row = " | ".join(h.ljust(w) for h, w in zip(INCH_TABLE_HEADERS, widths))
    rule_row = "-+-".join("-" * w for w in widths)
    value_row = " | ".join(c.ljust(w) for c, w in zip(cells, widths))

    return "\n".join(row.rstrip() for row in (header_row, rule_row, value_row))
