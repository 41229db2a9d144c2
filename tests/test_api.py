"""Tests for the public conversion API."""

from __future__ import annotations

import datetime

import pytest

from datelayout import (
    NATIVE_DATE,
    ConvertOptions,
    DateComponents,
    FormatMismatch,
    InvalidMonth,
    NativeDate,
    convert,
    format_components,
)

TEMPLATES = [
    "DD/MM/YYYY",
    "YYYY-MM-DD",
    "MM/DD/YYYY",
    "MMMM DD, YYYY",
    "DD-MMM-YYYY",
    "YYYYMMDD",
    "on DD.MM.YYYY!",
    "[YYYY|MMM|DD]",
]

COMPONENTS = [
    DateComponents(2020, 1, 5),
    DateComponents(1999, 9, 30),
    DateComponents(2024, 12, 25),
]


class TestConvertStrings:
    """Tests for string-to-string conversion."""

    def test_to_full_month_name(self) -> None:
        assert convert("25/12/2020", "DD/MM/YYYY", "MMMM DD, YYYY") == "December 25, 2020"

    def test_iso_to_day_first(self) -> None:
        assert convert("2020-01-05", "YYYY-MM-DD", "DD/MM/YYYY") == "05/01/2020"

    def test_name_to_numeric(self) -> None:
        assert convert("Mar 07 2021", "MMM DD YYYY", "YYYY-MM-DD") == "2021-03-07"

    def test_template_named_date_is_not_native(self) -> None:
        """The text 'Date' is an ordinary template, not the native marker."""
        assert convert("05/01/2020", "DD/MM/YYYY", "Date") == "Date"

    @pytest.mark.parametrize("source", TEMPLATES)
    @pytest.mark.parametrize("target", TEMPLATES)
    def test_round_trip(self, source: str, target: str) -> None:
        """Formatting in one template and converting to another matches direct formatting."""
        for parts in COMPONENTS:
            text = format_components(parts, source)
            assert convert(text, source, target) == format_components(parts, target)


class TestConvertNative:
    """Tests for conversion to and from native dates."""

    def test_native_to_string(self) -> None:
        value = datetime.datetime(2020, 1, 5)
        assert convert(value, NATIVE_DATE, "YYYY-MM-DD", False) == "2020-01-05"

    def test_plain_date_to_string(self) -> None:
        assert convert(datetime.date(2020, 1, 5), NATIVE_DATE, "DD MMM YYYY") == "05 Jan 2020"

    def test_aware_native_corrected(self) -> None:
        """Zulu correction keeps the local calendar day."""
        tz = datetime.timezone(datetime.timedelta(hours=1))
        value = datetime.datetime(2020, 1, 5, 0, 30, tzinfo=tz)
        assert convert(value, NATIVE_DATE, "DD/MM/YYYY") == "05/01/2020"

    def test_aware_native_uncorrected(self) -> None:
        """Without correction the UTC day is used."""
        tz = datetime.timezone(datetime.timedelta(hours=1))
        value = datetime.datetime(2020, 1, 5, 0, 30, tzinfo=tz)
        assert convert(value, NATIVE_DATE, "DD/MM/YYYY", False) == "04/01/2020"

    def test_string_to_native(self) -> None:
        result = convert("05/01/2020", "DD/MM/YYYY", NATIVE_DATE, False)
        assert result == datetime.datetime(2020, 1, 5)

    def test_string_to_native_corrected(self, set_local_timezone) -> None:
        set_local_timezone("EST5")
        result = convert("05/01/2020", "DD/MM/YYYY", NATIVE_DATE)
        assert result == datetime.datetime(2020, 1, 5, tzinfo=datetime.timezone.utc)

    def test_native_to_native(self) -> None:
        result = convert(datetime.date(2020, 1, 5), NATIVE_DATE, NATIVE_DATE, False)
        assert result == datetime.datetime(2020, 1, 5)

    def test_native_source_must_be_date(self) -> None:
        with pytest.raises(TypeError):
            convert("2020-01-05", NATIVE_DATE, "DD/MM/YYYY")

    def test_layout_must_be_string_or_marker(self) -> None:
        with pytest.raises(TypeError):
            convert("2020-01-05", "YYYY-MM-DD", None)  # type: ignore[arg-type]

    def test_marker_repr(self) -> None:
        assert repr(NATIVE_DATE) == "NATIVE_DATE"
        assert NATIVE_DATE is NativeDate.NATIVE_DATE


class TestConvertOptions:
    """Tests for ConvertOptions."""

    def test_defaults(self) -> None:
        opts = ConvertOptions()
        assert opts.correct_to_zulu is True
        assert opts.strict is False
        assert opts.legacy is False

    def test_is_frozen(self) -> None:
        opts = ConvertOptions()
        with pytest.raises(AttributeError):
            opts.strict = True  # type: ignore[misc]

    def test_permissive_passes_garbage_through(self) -> None:
        assert convert("2020/01/05", "YYYY-MM-DD", "DD.MM.YYYY") == "00.00.NaN"

    def test_strict_raises_on_mismatch(self) -> None:
        with pytest.raises(FormatMismatch):
            convert(
                "2020/01/05",
                "YYYY-MM-DD",
                "DD.MM.YYYY",
                options=ConvertOptions(strict=True),
            )

    def test_permissive_rejects_underscored_year(self) -> None:
        assert convert("05/01/20_20", "DD/MM/YYYY", "YYYY-MM-DD") == "NaN-01-05"

    def test_strict_raises_on_fractional_day(self) -> None:
        with pytest.raises(FormatMismatch):
            convert(
                "5.5/01/2020",
                "DD/MM/YYYY",
                "YYYY-MM-DD",
                options=ConvertOptions(strict=True),
            )

    def test_strict_raises_on_bad_month(self) -> None:
        with pytest.raises(InvalidMonth):
            convert(
                "05-Foo-2020",
                "DD-MMM-YYYY",
                "YYYY-MM-DD",
                options=ConvertOptions(strict=True),
            )

    def test_strict_raises_on_incomplete_template(self) -> None:
        with pytest.raises(FormatMismatch):
            convert("01/2020", "MM/YYYY", "YYYY-MM", options=ConvertOptions(strict=True))

    def test_options_override_keyword(self) -> None:
        """correct_to_zulu comes from options when they are given."""
        tz = datetime.timezone(datetime.timedelta(hours=1))
        value = datetime.datetime(2020, 1, 5, 0, 30, tzinfo=tz)
        result = convert(
            value,
            NATIVE_DATE,
            "DD/MM/YYYY",
            True,
            options=ConvertOptions(correct_to_zulu=False),
        )
        assert result == "04/01/2020"

    def test_legacy_keeps_prefix(self) -> None:
        result = convert(
            "on 05.01.2020",
            "on DD.MM.YYYY",
            "YYYY-MM-DD",
            options=ConvertOptions(legacy=True),
        )
        assert result == "2020-01-NaN"

    def test_default_strips_prefix(self) -> None:
        assert convert("on 05.01.2020", "on DD.MM.YYYY", "YYYY-MM-DD") == "2020-01-05"
