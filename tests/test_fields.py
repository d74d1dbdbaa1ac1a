"""Tests for sitemap_xml_writer.fields — per-element validation rules."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from urllib.parse import urlparse, urlsplit

import pytest

from sitemap_xml_writer._errors import (
    EmptyLocation,
    InvalidDateSyntax,
    InvalidDecimalSyntax,
    InvalidUrlSyntax,
    PriorityOutOfRange,
    UnknownChangefreq,
    ValidationError,
)
from sitemap_xml_writer.fields import (
    Changefreq,
    Lastmod,
    Loc,
    Priority,
    validate_changefreq,
    validate_date,
    validate_loc,
    validate_priority,
)


# ---------------------------------------------------------------------------
# loc
# ---------------------------------------------------------------------------


class TestValidateLoc:
    """validate_loc — required, absolute URL."""

    def test_accepts_absolute_url(self) -> None:
        assert validate_loc("http://www.example.com/") == Loc("http://www.example.com/")

    def test_keeps_text_unchanged(self) -> None:
        raw = "https://example.com/search?q=a&b=c#frag"
        assert validate_loc(raw).value == raw

    def test_empty_rejected(self) -> None:
        with pytest.raises(EmptyLocation):
            validate_loc("")

    def test_empty_rejected_without_syntax_check(self) -> None:
        with pytest.raises(EmptyLocation):
            validate_loc("", check_syntax=False)

    def test_not_a_url_rejected(self) -> None:
        with pytest.raises(InvalidUrlSyntax):
            validate_loc("not a url")

    def test_not_a_url_allowed_without_syntax_check(self) -> None:
        assert validate_loc("not a url", check_syntax=False).value == "not a url"

    @pytest.mark.parametrize(
        "raw",
        [
            "/relative/path",
            "example.com/page",
            "http:///no-host",
            "mailto:someone@example.com",
            "http://example.com:notaport/",
            "http://[::1/",
            "http://example.com/a b",
            "http://example.com/\x00",
        ],
    )
    def test_malformed_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidUrlSyntax):
            validate_loc(raw)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidUrlSyntax):
            validate_loc(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize("check_syntax", [True, False])
    @pytest.mark.parametrize(
        "raw",
        [
            "http://example.com/\udc80",
            "http://example.com/\ud800x",
            "a\x01b",
            "http://example.com/\x0b",
            "http://example.com/\ufffe",
        ],
    )
    def test_xml_illegal_characters_rejected(self, raw: str, check_syntax: bool) -> None:
        with pytest.raises(InvalidUrlSyntax, match="XML cannot carry"):
            validate_loc(raw, check_syntax=check_syntax)

    def test_non_ascii_allowed(self) -> None:
        assert validate_loc("http://example.com/café/\U0001f600").value.endswith("\U0001f600")
        assert validate_loc("tab\there", check_syntax=False).value == "tab\there"

    def test_split_result_adapter(self) -> None:
        parts = urlsplit("http://www.example.com/page?x=1")
        assert validate_loc(parts).value == "http://www.example.com/page?x=1"

    def test_parse_result_adapter(self) -> None:
        parts = urlparse("https://example.com/a")
        assert validate_loc(parts).value == "https://example.com/a"

    def test_idempotent(self) -> None:
        field = validate_loc("http://www.example.com/")
        assert validate_loc(field) == field

    def test_errors_carry_value(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_loc("not a url")
        assert exc_info.value.value == "not a url"


# ---------------------------------------------------------------------------
# lastmod
# ---------------------------------------------------------------------------


class TestValidateDate:
    """validate_date — W3C date and datetime forms."""

    @pytest.mark.parametrize(
        "raw",
        [
            "2005-01-01",
            "2004-12-23T18:00:15+00:00",
            "2004-10-01T18:23:17Z",
            "2004-10-01T18:23:17.123456789+09:00",
            "2004-10-01T18:23:17",
            "2004-10-01T24:00:00",
            "2004-10-01T18:23:17-14:00",
            "2004-10-01Z",
            "12004-10-01",
            "-0044-03-15",
            # Lexically valid even though February has no 31st
            "2023-02-31",
        ],
    )
    def test_accepts(self, raw: str) -> None:
        assert validate_date(raw) == Lastmod(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "2005-1-1",
            "2005/01/01",
            "05-01-01",
            "2005-13-01",
            "2005-01-32",
            "2005-01-01T25:00:00",
            "2005-01-01T18:00",
            "2005-01-01T24:00:01",
            "2005-01-01T18:00:00+15:00",
            "2005-01-01T18:00:00+05",
            "2005-01-01 18:00:00",
            "2005-01-01\n",
            "yesterday",
        ],
    )
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(InvalidDateSyntax):
            validate_date(raw)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidDateSyntax):
            validate_date(20050101)  # type: ignore[arg-type]

    def test_date_adapter(self) -> None:
        assert validate_date(date(2005, 1, 1)).value == "2005-01-01"

    def test_aware_datetime_adapter(self) -> None:
        value = datetime(2004, 12, 23, 18, 0, 15, tzinfo=timezone.utc)
        assert validate_date(value).value == "2004-12-23T18:00:15+00:00"

    def test_naive_datetime_adapter(self) -> None:
        value = datetime(2004, 12, 23, 18, 0, 15, 123456)
        assert validate_date(value).value == "2004-12-23T18:00:15.123456"

    def test_offset_with_seconds_still_validated(self) -> None:
        tz = timezone(timedelta(hours=5, seconds=30))
        with pytest.raises(InvalidDateSyntax):
            validate_date(datetime(2004, 12, 23, 18, 0, 15, tzinfo=tz))

    def test_idempotent(self) -> None:
        field = validate_date("2004-12-23T18:00:15+00:00")
        assert validate_date(field) == field


# ---------------------------------------------------------------------------
# changefreq
# ---------------------------------------------------------------------------


class TestValidateChangefreq:
    """validate_changefreq — fixed, case-sensitive word list."""

    @pytest.mark.parametrize(
        "raw", ["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"],
    )
    def test_accepts_every_word(self, raw: str) -> None:
        result = validate_changefreq(raw)
        assert result.value == raw
        assert isinstance(result, Changefreq)

    @pytest.mark.parametrize("raw", ["Monthly", "MONTHLY", "fortnightly", "", " daily"])
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(UnknownChangefreq):
            validate_changefreq(raw)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(UnknownChangefreq):
            validate_changefreq(["daily"])  # type: ignore[arg-type]

    def test_enum_member_passthrough(self) -> None:
        assert validate_changefreq(Changefreq.WEEKLY) is Changefreq.WEEKLY


# ---------------------------------------------------------------------------
# priority
# ---------------------------------------------------------------------------


class TestValidatePriority:
    """validate_priority — decimal in [0.0, 1.0], canonical form."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0.8", "0.8"),
            ("0.0", "0.0"),
            ("1.0", "1.0"),
            ("1", "1.0"),
            ("0", "0.0"),
            ("0.80", "0.8"),
            ("00.5", "0.5"),
            (".5", "0.5"),
            ("1.", "1.0"),
            ("+0.25", "0.25"),
            ("-0", "0.0"),
            ("0.1234", "0.1234"),
            ("0.12340000", "0.1234"),
        ],
    )
    def test_canonical_form(self, raw: str, expected: str) -> None:
        assert validate_priority(raw) == Priority(expected)

    @pytest.mark.parametrize("raw", ["1.01", "-0.01", "2", "-1", "1.00001"])
    def test_out_of_range(self, raw: str) -> None:
        with pytest.raises(PriorityOutOfRange):
            validate_priority(raw)

    @pytest.mark.parametrize(
        "raw", ["", "high", "0,5", "1e-1", "nan", "inf", "0.5.1", " 0.5", "."],
    )
    def test_bad_syntax(self, raw: str) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority(raw)

    def test_too_many_fraction_digits(self) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority("0.12345")

    def test_float_adapter(self) -> None:
        assert validate_priority(0.8).value == "0.8"
        assert validate_priority(0.0).value == "0.0"
        assert validate_priority(-0.0).value == "0.0"

    @pytest.mark.parametrize("raw", [1.00004, -0.00004, 1.0000000001])
    def test_float_just_out_of_range(self, raw: float) -> None:
        with pytest.raises(PriorityOutOfRange):
            validate_priority(raw)

    @pytest.mark.parametrize("raw", [0.1 + 0.2, 0.00001, 1e-300])
    def test_float_not_rounded_into_shape(self, raw: float) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority(raw)

    def test_huge_int(self) -> None:
        with pytest.raises(PriorityOutOfRange, match="bit integer"):
            validate_priority(10**5000)
        with pytest.raises(PriorityOutOfRange):
            validate_priority(-(10**5000))

    @pytest.mark.parametrize("raw", ["1E+999999999", "-1E+999999999", "2"])
    def test_decimal_out_of_range(self, raw: str) -> None:
        with pytest.raises(PriorityOutOfRange):
            validate_priority(Decimal(raw))

    @pytest.mark.parametrize("raw", ["1E-999999999", "NaN", "sNaN", "-Infinity"])
    def test_decimal_bad_shape(self, raw: str) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority(Decimal(raw))

    def test_decimal_zero_with_tiny_exponent(self) -> None:
        assert validate_priority(Decimal("0E-999999999")).value == "0.0"
        assert validate_priority(Decimal("1.000000")).value == "1.0"

    def test_long_leading_zeros(self) -> None:
        assert validate_priority("0" * 1000 + ".5").value == "0.5"

    def test_long_fraction_with_late_digit(self) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority("0." + "0" * 1000 + "1")

    def test_long_fraction_of_zeros(self) -> None:
        assert validate_priority("0.5" + "0" * 1000).value == "0.5"

    def test_long_integer_string(self) -> None:
        with pytest.raises(PriorityOutOfRange):
            validate_priority("9" * 5000)

    def test_int_and_decimal_adapters(self) -> None:
        assert validate_priority(1).value == "1.0"
        assert validate_priority(Decimal("0.50")).value == "0.5"

    def test_float_out_of_range(self) -> None:
        with pytest.raises(PriorityOutOfRange):
            validate_priority(1.5)

    def test_float_nan_rejected(self) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority(float("nan"))

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority(True)

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidDecimalSyntax):
            validate_priority(None)  # type: ignore[arg-type]

    def test_idempotent(self) -> None:
        field = validate_priority("0.80")
        assert validate_priority(field) == field
        assert validate_priority(field.value) == field


# ---------------------------------------------------------------------------
# ValidatedField
# ---------------------------------------------------------------------------


class TestValidatedField:
    """ValidatedField — immutable, kind-aware text."""

    def test_str(self) -> None:
        assert str(Loc("http://example.com/")) == "http://example.com/"

    def test_frozen(self) -> None:
        field = Loc("http://example.com/")
        with pytest.raises(AttributeError):
            field.value = "other"  # type: ignore[misc]

    def test_kinds_not_equal(self) -> None:
        assert Loc("x") != Lastmod("x")
