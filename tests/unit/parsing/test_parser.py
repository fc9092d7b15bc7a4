"""Unit tests for the parser: text in, structured numbers out."""
from __future__ import annotations

import pytest

from mp_phonenumbers import CountryCodeSource, ErrorType, NumberParseError, PhoneNumber
from mp_phonenumbers.kernel.types.phone_number import PhoneNumberBuilder
from mp_phonenumbers.parsing import Parser, build_national_number_for_parsing

NZ_NUMBER = PhoneNumber(country_code=64, national_number=33316005)
US_NUMBER = PhoneNumber(country_code=1, national_number=6502530000)
IT_NUMBER = PhoneNumber(country_code=39, national_number=236618300, italian_leading_zero=True)
IT_MOBILE = PhoneNumber(country_code=39, national_number=345678901)
AR_NUMBER = PhoneNumber(country_code=54, national_number=1187654321)
AR_MOBILE = PhoneNumber(country_code=54, national_number=91187654321)
DE_NUMBER = PhoneNumber(country_code=49, national_number=30123456)
INTERNATIONAL_TOLL_FREE = PhoneNumber(country_code=800, national_number=12345678)


@pytest.fixture()
def parser(phone_registry) -> Parser:
    return Parser(phone_registry)


# ---------------------------------------------------------------------------
# National numbers
# ---------------------------------------------------------------------------


class TestParseNationalNumber:
    @pytest.mark.parametrize(
        "text",
        [
            "033316005",
            "33316005",
            "03-331 6005",
            "03 331 6005",
            "tel:03-331-6005;phone-context=+64",
            "tel:331-6005;phone-context=+64-3",
            "tel:03-331-6005;phone-context=+64;a=%A1",
            "tel:03-331-6005;isub=12345;phone-context=+64",
            "tel:+64-3-331-6005;isub=12345",
            "03-331-6005;phone-context=+64",
            "0064 3 331 6005",
            "+64 3 331 6005",
            "+0064 3 331 6005",
            "+ 00 64 3 331 6005",
        ],
    )
    def test_new_zealand_forms(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "NZ") == NZ_NUMBER

    def test_international_prefix_of_the_default_region(self, parser: Parser) -> None:
        assert parser.parse("01164 3 331 6005", "US") == NZ_NUMBER
        assert parser.parse("+01164 3 331 6005", "US") == NZ_NUMBER

    def test_phone_context_from_another_region(self, parser: Parser) -> None:
        assert parser.parse("tel:331-6005;phone-context=+64-3", "US") == NZ_NUMBER

    def test_national_prefix_in_brackets_after_country_code(self, parser: Parser) -> None:
        assert parser.parse("64(0)64123456", "NZ") == PhoneNumber(country_code=64, national_number=64123456)

    def test_slash_separated_number(self, parser: Parser) -> None:
        assert parser.parse("301/23456", "DE") == DE_NUMBER

    def test_leading_one_kept_when_stripping_breaks_validity(self, parser: Parser) -> None:
        assert parser.parse("123-456-7890", "US") == PhoneNumber(country_code=1, national_number=1234567890)

    def test_star_number(self, parser: Parser) -> None:
        assert parser.parse("+81 *2345", "JP") == PhoneNumber(country_code=81, national_number=2345)

    def test_two_digit_number(self, parser: Parser) -> None:
        assert parser.parse("12", "NZ") == PhoneNumber(country_code=64, national_number=12)


class TestParseAlphaNumbers:
    def test_letters_are_converted(self, parser: Parser) -> None:
        toll_free = PhoneNumber(country_code=64, national_number=800332005)
        assert parser.parse("0800 DDA 005", "NZ") == toll_free

    @pytest.mark.parametrize(
        "text",
        ["0900 DDA 6005", "0900 332 6005a", "0900 332 600a5", "0900 332 600A5", "0900 a332 600A5"],
    )
    def test_stray_letters_are_ignored(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "NZ") == PhoneNumber(country_code=64, national_number=9003326005)


# ---------------------------------------------------------------------------
# International prefixes and non-ASCII input
# ---------------------------------------------------------------------------


class TestParseInternational:
    def test_plus_from_another_region(self, parser: Parser) -> None:
        assert parser.parse("+1 (650) 253-0000", "NZ") == US_NUMBER

    def test_idd_then_non_geographic_code(self, parser: Parser) -> None:
        assert parser.parse("011 800 1234 5678", "US") == INTERNATIONAL_TOLL_FREE

    def test_country_code_without_plus(self, parser: Parser) -> None:
        assert parser.parse("1-650-253-0000", "US") == US_NUMBER

    @pytest.mark.parametrize("text", ["0011-650-253-0000", "0081-650-253-0000", "0191-650-253-0000"])
    def test_idd_pattern_with_choices(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "SG") == US_NUMBER

    def test_idd_with_wait_marker(self, parser: Parser) -> None:
        assert parser.parse("0~01-650-253-0000", "PL") == US_NUMBER

    def test_double_plus(self, parser: Parser) -> None:
        assert parser.parse("++1 (650) 253-0000", "PL") == US_NUMBER

    def test_mongolian_digits(self, parser: Parser) -> None:
        text = "\u1811 \u1816\u1815\u1810 \u1812\u1815\u1813 \u1810\u1810\u1810\u1810"
        assert parser.parse(text, "US") == US_NUMBER

    def test_fullwidth_plus(self, parser: Parser) -> None:
        assert parser.parse("\uff0b1 (650) 253-0000", "SG") == US_NUMBER

    def test_soft_hyphen(self, parser: Parser) -> None:
        assert parser.parse("1 (650) 253\u00ad-0000", "US") == US_NUMBER

    @pytest.mark.parametrize("dash", ["\uff0d", "\u30fc"])
    def test_fullwidth_number(self, parser: Parser, dash: str) -> None:
        text = (
            "\uff0b\uff11\u3000\uff08\uff16\uff15\uff10\uff09\u3000"
            "\uff12\uff15\uff13" + dash + "\uff10\uff10\uff10\uff10"
        )
        assert parser.parse(text, "SG") == US_NUMBER

    @pytest.mark.parametrize("region", ["ZZ", None])
    def test_plus_without_region(self, parser: Parser, region: str | None) -> None:
        assert parser.parse("+64 3 331 6005", region) == NZ_NUMBER
        assert parser.parse("\uff0b64 3 331 6005", region) == NZ_NUMBER
        assert parser.parse("tel:03-331-6005;phone-context=+64", region) == NZ_NUMBER


class TestParseLeadingZeros:
    def test_italian_fixed_line(self, parser: Parser) -> None:
        assert parser.parse("+39 02-36618 300", "NZ") == IT_NUMBER
        assert parser.parse("02-36618 300", "IT") == IT_NUMBER

    def test_italian_mobile_has_no_leading_zero(self, parser: Parser) -> None:
        assert parser.parse("345 678 901", "IT") == IT_MOBILE

    def test_several_leading_zeros(self, parser: Parser) -> None:
        number = parser.parse("+39 0000 1234", "ZZ")
        assert number.italian_leading_zero is True
        assert number.number_of_leading_zeros == 4
        assert number.national_number == 1234

    def test_zeros_not_kept_where_impossible(self, parser: Parser) -> None:
        assert parser.parse("+64 03 331 6005", "ZZ").italian_leading_zero is False


# ---------------------------------------------------------------------------
# National prefixes, carrier codes and transform rules
# ---------------------------------------------------------------------------


class TestParseArgentina:
    @pytest.mark.parametrize("text", ["+54 9 343 555 1212", "0343 15 555 1212"])
    def test_mobile_with_carrier_prefix(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "AR") == PhoneNumber(country_code=54, national_number=93435551212)

    @pytest.mark.parametrize("text", ["+54 9 3715 65 4320", "03715 15 65 4320"])
    def test_four_digit_area_code_mobile(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "AR") == PhoneNumber(country_code=54, national_number=93715654320)

    def test_mobile_written_nationally(self, parser: Parser) -> None:
        assert parser.parse("911 876 54321", "AR") == AR_MOBILE

    @pytest.mark.parametrize(
        "text", ["+54 11 8765 4321", "011 8765 4321", "01187654321", "(0) 1187654321", "0 1187654321", "(0xx) 1187654321"]
    )
    def test_fixed_line(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "AR") == AR_NUMBER

    @pytest.mark.parametrize("text", ["+54 3715 65 4321", "03715 65 4321"])
    def test_fixed_line_four_digit_area_code(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "AR") == PhoneNumber(country_code=54, national_number=3715654321)

    @pytest.mark.parametrize("text", ["+54 23 1234 0000", "023 1234 0000"])
    def test_fixed_line_two_digit_area_code(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "AR") == PhoneNumber(country_code=54, national_number=2312340000)

    def test_idd_with_x_characters(self, parser: Parser) -> None:
        assert parser.parse("011xx5481429712", "US") == PhoneNumber(country_code=54, national_number=81429712)


class TestParseMexico:
    @pytest.mark.parametrize("text", ["+52 (449)978-0001", "01 (449)978-0001", "(449)978-0001"])
    def test_fixed_line(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "MX") == PhoneNumber(country_code=52, national_number=4499780001)

    @pytest.mark.parametrize("text", ["+52 1 33 1234-5678", "044 (33) 1234-5678", "045 33 1234-5678"])
    def test_mobile_transform_rule(self, parser: Parser, text: str) -> None:
        assert parser.parse(text, "MX") == PhoneNumber(country_code=52, national_number=13312345678)


# ---------------------------------------------------------------------------
# Extensions
# ---------------------------------------------------------------------------


class TestParseExtensions:
    @pytest.mark.parametrize(
        "text",
        ["03 331 6005 ext 3456", "03-3316005x3456", "03-3316005 int.3456", "03 3316005 #3456"],
    )
    def test_new_zealand_extension(self, parser: Parser, text: str) -> None:
        expected = NZ_NUMBER.to_builder().set_extension("3456").build()
        assert parser.parse(text, "NZ") == expected

    def test_trailing_hash_group(self, parser: Parser) -> None:
        number = parser.parse("1 (645) 123 1234-910#", "US")
        assert number == PhoneNumber(country_code=1, national_number=6451231234, extension="910")

    def test_seven_digit_extension(self, parser: Parser) -> None:
        number = parser.parse("(800) 901-3355 x 7246433", "US")
        assert number == PhoneNumber(country_code=1, national_number=8009013355, extension="7246433")

    def test_extension_after_international_number(self, parser: Parser) -> None:
        number = parser.parse("+44 2034567890x456", "NZ")
        assert number == PhoneNumber(country_code=44, national_number=2034567890, extension="456")

    def test_rfc3966_extension(self, parser: Parser) -> None:
        number = parser.parse("tel:+1-650-253-0000;ext=1234", "ZZ")
        assert number == US_NUMBER.to_builder().set_extension("1234").build()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestParseFailures:
    @pytest.mark.parametrize(
        ("text", "region", "error_type"),
        [
            ("This is not a phone number", "NZ", ErrorType.NOT_A_NUMBER),
            ("1 Still not a number", "NZ", ErrorType.NOT_A_NUMBER),
            ("1 MICROSOFT", "NZ", ErrorType.NOT_A_NUMBER),
            ("12 MICROSOFT", "NZ", ErrorType.NOT_A_NUMBER),
            ("01495 72553301873 810104", "GB", ErrorType.TOO_LONG),
            ("+---", "DE", ErrorType.NOT_A_NUMBER),
            ("+***", "DE", ErrorType.NOT_A_NUMBER),
            ("+*******91", "DE", ErrorType.NOT_A_NUMBER),
            ("+49 0", "DE", ErrorType.TOO_SHORT_NSN),
            ("+210 3456 56789", "NZ", ErrorType.INVALID_COUNTRY_CODE),
            ("+ 00 210 3 331 6005", "NZ", ErrorType.INVALID_COUNTRY_CODE),
            ("123 456 7890", "ZZ", ErrorType.INVALID_COUNTRY_CODE),
            ("123 456 7890", "CS", ErrorType.INVALID_COUNTRY_CODE),
            ("123 456 7890", None, ErrorType.INVALID_COUNTRY_CODE),
            ("0044-----", "GB", ErrorType.TOO_SHORT_AFTER_IDD),
            ("0044", "GB", ErrorType.TOO_SHORT_AFTER_IDD),
            ("011", "US", ErrorType.TOO_SHORT_AFTER_IDD),
            ("0119", "US", ErrorType.TOO_SHORT_AFTER_IDD),
            ("", "ZZ", ErrorType.NOT_A_NUMBER),
        ],
    )
    def test_error_type(self, parser: Parser, text: str, region: str | None, error_type: ErrorType) -> None:
        with pytest.raises(NumberParseError) as exc_info:
            parser.parse(text, region)
        assert exc_info.value.error_type is error_type

    def test_none_is_not_a_number(self, parser: Parser) -> None:
        with pytest.raises(NumberParseError) as exc_info:
            parser.parse(None, "US")
        assert exc_info.value.error_type is ErrorType.NOT_A_NUMBER

    def test_overlong_input_is_rejected_before_matching(self, parser: Parser) -> None:
        text = "+" * 6000 + "12222-33-244 extensioB 343+"
        with pytest.raises(NumberParseError) as exc_info:
            parser.parse(text, "US")
        assert exc_info.value.error_type is ErrorType.TOO_LONG

    def test_overlong_digits_with_almost_extension(self, parser: Parser) -> None:
        text = "200" * 350 + " extensiOB 345"
        with pytest.raises(NumberParseError) as exc_info:
            parser.parse(text, "US")
        assert exc_info.value.error_type is ErrorType.TOO_LONG

    def test_error_detail_carries_error_type(self, parser: Parser) -> None:
        with pytest.raises(NumberParseError) as exc_info:
            parser.parse("0044", "GB")
        assert exc_info.value.to_dict()["detail"]["error_type"] == "TOO_SHORT_AFTER_IDD"


# ---------------------------------------------------------------------------
# Keeping the raw input
# ---------------------------------------------------------------------------


class TestParseAndKeepRawInput:
    def test_default_country(self, parser: Parser) -> None:
        number = parser.parse_and_keep_raw_input("800 six-flags", "US")
        assert number == PhoneNumber(
            country_code=1,
            national_number=80074935247,
            raw_input="800 six-flags",
            country_code_source=CountryCodeSource.FROM_DEFAULT_COUNTRY,
            preferred_domestic_carrier_code="",
        )

    def test_country_code_without_plus(self, parser: Parser) -> None:
        number = parser.parse_and_keep_raw_input("1800 six-flag", "US")
        assert number.country_code_source is CountryCodeSource.FROM_NUMBER_WITHOUT_PLUS_SIGN
        assert number.national_number == 8007493524
        assert number.raw_input == "1800 six-flag"

    def test_plus_sign(self, parser: Parser) -> None:
        number = parser.parse_and_keep_raw_input("+1800 six-flag", "NZ")
        assert number.country_code_source is CountryCodeSource.FROM_NUMBER_WITH_PLUS_SIGN

    def test_international_prefix(self, parser: Parser) -> None:
        number = parser.parse_and_keep_raw_input("001800 six-flag", "NZ")
        assert number.country_code_source is CountryCodeSource.FROM_NUMBER_WITH_IDD
        assert number.national_number == 8007493524

    def test_carrier_code_is_recorded(self, parser: Parser) -> None:
        number = parser.parse_and_keep_raw_input("0 21 23 4567 8901", "BR")
        assert number.preferred_domestic_carrier_code == "21"
        assert number.national_number == 2345678901

    def test_invalid_region_still_fails(self, parser: Parser) -> None:
        with pytest.raises(NumberParseError) as exc_info:
            parser.parse_and_keep_raw_input("123 456 7890", "CS")
        assert exc_info.value.error_type is ErrorType.INVALID_COUNTRY_CODE

    def test_plain_parse_records_nothing_extra(self, parser: Parser) -> None:
        number = parser.parse("+1800 six-flag", "NZ")
        assert number.has_raw_input is False
        assert number.has_country_code_source is False
        assert number.has_preferred_domestic_carrier_code is False


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


class TestBuildNationalNumberForParsing:
    def test_global_context_is_prepended(self) -> None:
        assert build_national_number_for_parsing("tel:03-331-6005;phone-context=+64") == "+6403-331-6005"

    def test_domain_context_is_ignored(self) -> None:
        text = "tel:253-0000;phone-context=www.google.com"
        assert build_national_number_for_parsing(text) == "253-0000"

    def test_subaddress_is_dropped(self) -> None:
        assert build_national_number_for_parsing("tel:+64-3-331-6005;isub=12345") == "+64-3-331-6005"


class TestParserBuildingBlocks:
    def test_extract_country_code(self, parser: Parser) -> None:
        assert parser.extract_country_code("4412345678") == (44, "12345678")
        assert parser.extract_country_code("80012345678") == (800, "12345678")
        assert parser.extract_country_code("0123") == (0, "0123")
        assert parser.extract_country_code("2101234") == (0, "2101234")

    def test_strip_international_prefix(self, parser: Parser) -> None:
        assert parser.maybe_strip_international_prefix_and_normalize("0034567700-3898003", "00[39]") == (
            CountryCodeSource.FROM_NUMBER_WITH_IDD,
            "45677003898003",
        )

    def test_idd_followed_by_zero_is_not_stripped(self, parser: Parser) -> None:
        assert parser.maybe_strip_international_prefix_and_normalize("00(0)344", "00") == (
            CountryCodeSource.FROM_DEFAULT_COUNTRY,
            "000344",
        )

    def test_plus_is_stripped(self, parser: Parser) -> None:
        assert parser.maybe_strip_international_prefix_and_normalize("+45677003898003", "00[39]") == (
            CountryCodeSource.FROM_NUMBER_WITH_PLUS_SIGN,
            "45677003898003",
        )

    def test_extract_with_plus_records_source(self, parser: Parser, phone_registry) -> None:
        builder = PhoneNumberBuilder()
        metadata = phone_registry.get_metadata_for_region("US")
        code, national = parser.maybe_extract_country_code("+6423456789", metadata, builder, True)
        assert (code, national) == (64, "23456789")
        assert builder.build().country_code_source is CountryCodeSource.FROM_NUMBER_WITH_PLUS_SIGN

    def test_extract_without_country_code(self, parser: Parser, phone_registry) -> None:
        metadata = phone_registry.get_metadata_for_region("US")
        assert parser.maybe_extract_country_code("2345-6789", metadata, PhoneNumberBuilder(), False) == (0, "")

    def test_extract_with_unknown_code_after_idd(self, parser: Parser, phone_registry) -> None:
        metadata = phone_registry.get_metadata_for_region("US")
        with pytest.raises(NumberParseError) as exc_info:
            parser.maybe_extract_country_code("0119991234567", metadata, PhoneNumberBuilder(), False)
        assert exc_info.value.error_type is ErrorType.INVALID_COUNTRY_CODE

    def test_strip_national_prefix(self, parser: Parser, phone_registry) -> None:
        nz = phone_registry.get_metadata_for_region("NZ")
        assert parser.maybe_strip_national_prefix_and_carrier_code("033316005", nz) == (True, "33316005", "")

    def test_national_prefix_kept_when_stripping_would_invalidate(self, parser: Parser, phone_registry) -> None:
        us = phone_registry.get_metadata_for_region("US")
        assert parser.maybe_strip_national_prefix_and_carrier_code("1234567890", us) == (False, "1234567890", "")

    def test_transform_rule(self, parser: Parser, phone_registry) -> None:
        ar = phone_registry.get_metadata_for_region("AR")
        assert parser.maybe_strip_national_prefix_and_carrier_code("0343155551212", ar) == (
            True,
            "93435551212",
            "",
        )

    def test_carrier_code_captured_by_transform(self, parser: Parser, phone_registry) -> None:
        br = phone_registry.get_metadata_for_region("BR")
        assert parser.maybe_strip_national_prefix_and_carrier_code("0212345678901", br) == (
            True,
            "2345678901",
            "21",
        )
