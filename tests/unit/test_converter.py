"""Тесты для MeasurementConverter, ConversionSection и CLI

Покрытие:
- Сценарии конверсии мм → дюймы и дюймы → мм
- Подавление невалидного ввода
- Конфигурация и инжекция бэкенда
- Состояние и отображение секций
- Командная строка
"""

import json
import logging

import pytest

from measureconv.cli import EXIT_SUPPRESSED, main
from measureconv.core.domain import InchConversion, InchFraction, MillimeterConversion, Unit
from measureconv.core.math.decimal_arithmetic import RationalBackend
from measureconv.converter import (
    ConversionSection,
    ConverterConfig,
    MeasurementConverter,
    render_inch_table,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def converter():
    """Конвертер с конфигурацией по умолчанию."""
    return MeasurementConverter()


# =============================================================================
# CONVERTER
# =============================================================================


class TestMillimetersToInches:
    """Сценарии мм → дюймы"""

    def test_whole_inch(self, converter) -> None:
        """25.4 мм → 1.000, целое число без дроби и смешанного числа"""
        result = converter.convert("25.4", Unit.INCH)
        assert isinstance(result, InchConversion)
        assert result.decimal == "1.000"
        assert result.whole == 1
        assert result.fraction is None
        assert result.mixed is None

    def test_half_inch(self, converter) -> None:
        """12.7 мм → 0.500, 1/2, без смешанного числа"""
        result = converter.convert("12.7", "in")
        assert result.decimal == "0.500"
        assert result.fraction == InchFraction(numerator=1, denominator=2)
        assert result.mixed is None

    def test_fifty_millimeters(self, converter) -> None:
        """50 мм → 1.969, 63/32, 1 31/32"""
        result = converter.convert("50", Unit.INCH)
        assert result.decimal == "1.969"
        assert result.fraction == InchFraction(numerator=63, denominator=32)
        assert result.mixed == "1 31/32"

    def test_input_is_stripped(self, converter) -> None:
        result = converter.convert(" 50 ", Unit.INCH)
        assert result.millimeters == "50"


class TestInchesToMillimeters:
    """Сценарии дюймы → мм"""

    def test_one_inch(self, converter) -> None:
        result = converter.convert("1", Unit.MILLIMETER)
        assert isinstance(result, MillimeterConversion)
        assert result.decimal == "25.400"

    def test_fractional_inch(self, converter) -> None:
        assert converter.convert("0.125", "mm").decimal == "3.175"


class TestSuppression:
    """Пустой и нечисловой ввод не даёт результата и не вызывает ошибку"""

    @pytest.mark.parametrize("raw", [None, "", "abc", "1.2.3", "-4"])
    @pytest.mark.parametrize("unit", [Unit.INCH, Unit.MILLIMETER])
    def test_suppressed(self, converter, raw, unit) -> None:
        assert converter.convert(raw, unit) is None

    def test_suppression_logged(self, converter, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="measureconv.converter.converter"):
            converter.convert("abc", Unit.INCH)
        assert "not_a_number" in caplog.text

    def test_unknown_unit(self, converter) -> None:
        with pytest.raises(ValueError):
            converter.convert("1", "cm")


class TestConverterConfig:
    """Тесты ConverterConfig"""

    def test_defaults(self) -> None:
        config = ConverterConfig()
        assert config.fixed_places == 3
        assert config.max_denominator == 128

    def test_invalid_max_denominator(self) -> None:
        with pytest.raises(ValueError, match="power of two"):
            ConverterConfig(max_denominator=10)

    def test_max_denominator_above_128(self) -> None:
        with pytest.raises(ValueError, match="must not exceed 128"):
            ConverterConfig(max_denominator=256)

    def test_invalid_places(self) -> None:
        with pytest.raises(ValueError, match="fixed_places"):
            ConverterConfig(fixed_places=-1)

    @pytest.mark.parametrize("precision", [0, 2, 19])
    def test_invalid_precision(self, precision) -> None:
        with pytest.raises(ValueError, match="precision must be at least 20"):
            ConverterConfig(precision=precision)

    def test_min_precision(self) -> None:
        result = MeasurementConverter(ConverterConfig(precision=20)).convert("50", Unit.INCH)
        assert result.decimal == "1.969"
        assert result.mixed == "1 31/32"

    def test_custom_resolution(self) -> None:
        converter = MeasurementConverter(ConverterConfig(fixed_places=1, max_denominator=16))
        result = converter.convert("50", Unit.INCH)
        assert result.decimal == "2.0"
        assert result.fraction == InchFraction(numerator=31, denominator=16)
        assert result.mixed == "1 15/16"

    def test_injected_backend(self) -> None:
        backend = RationalBackend()
        converter = MeasurementConverter(ConverterConfig(backend=backend))
        assert converter.backend is backend
        assert converter.convert("50", Unit.INCH).mixed == "1 31/32"


# =============================================================================
# SECTION
# =============================================================================


class TestConversionSection:
    """Тесты ConversionSection"""

    def test_title(self) -> None:
        assert ConversionSection("in").title == "Convert millimeters into inches:"
        assert ConversionSection("mm").title == "Convert inches into millimeters:"

    def test_update_keeps_latest_input(self) -> None:
        section = ConversionSection(Unit.INCH)
        section.update("12.7")
        section.update("50")
        assert section.latest_input == "50"
        assert section.result.mixed == "1 31/32"

    def test_suppressed_input_clears_result(self) -> None:
        section = ConversionSection(Unit.INCH)
        section.update("50")
        assert section.update("5.") is not None
        assert section.update("") is None
        assert section.render() == ""

    def test_render_millimeters(self) -> None:
        section = ConversionSection(Unit.MILLIMETER)
        section.update("1")
        assert section.render() == "25.400 mm"

    def test_render_inch_table(self) -> None:
        section = ConversionSection(Unit.INCH)
        section.update("50")
        lines = section.render().splitlines()
        assert lines[0] == "Fraction | Decimal  | Mixed fraction"
        assert lines[2] == "63/32 in | 1.969 in | 1 31/32 in"

    def test_render_proper_fraction_has_no_mixed(self) -> None:
        result = MeasurementConverter().convert("12.7", Unit.INCH)
        value_row = render_inch_table(result).splitlines()[2]
        assert value_row.startswith("1/2 in")
        assert value_row.endswith("|")

    def test_render_whole(self) -> None:
        result = MeasurementConverter().convert("25.4", Unit.INCH)
        value_row = render_inch_table(result).splitlines()[2]
        assert value_row.split(" | ") == ["1 in    ", "1.000 in", "1 in"]


# =============================================================================
# CLI
# =============================================================================


class TestCli:
    """Тесты командной строки"""

    def test_inches(self, capsys) -> None:
        assert main(["50"]) == 0
        out = capsys.readouterr().out
        assert "Convert millimeters into inches:" in out
        assert "1 31/32 in" in out

    def test_millimeters(self, capsys) -> None:
        assert main(["1", "--to", "mm"]) == 0
        assert "25.400 mm" in capsys.readouterr().out

    def test_json(self, capsys) -> None:
        assert main(["50", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["mixed"] == "1 31/32"
        assert payload["fraction"] == {"numerator": 63, "denominator": 32}

    def test_suppressed(self, capsys) -> None:
        assert main(["abc"]) == EXIT_SUPPRESSED
        assert capsys.readouterr().out == ""

    def test_invalid_config(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["50", "--max-denominator", "100"])
        assert excinfo.value.code == 2

    def test_suppressed_differs_from_usage_error(self, capsys) -> None:
        """Подавленный ввод не путается с ошибкой разбора аргументов (2)"""
        assert EXIT_SUPPRESSED == 1
        assert main(["-5"]) == EXIT_SUPPRESSED

    def test_max_denominator_flag_above_128(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["50", "--max-denominator", "256"])
        assert excinfo.value.code == 2
