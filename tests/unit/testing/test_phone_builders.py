"""Unit tests for the phone number fixture builder and shared fixtures."""
from __future__ import annotations

from mp_phonenumbers import CountryCodeSource, PhoneNumber
from mp_phonenumbers.metadata import MetadataRegistry
from mp_phonenumbers.testing import PhoneNumberFixtureBuilder, build_test_registry
from mp_phonenumbers.util import PhoneNumberUtil

# ---------------------------------------------------------------------------
# PhoneNumberFixtureBuilder
# ---------------------------------------------------------------------------


class TestPhoneNumberFixtureBuilder:
    def test_default_is_new_zealand_landline(self) -> None:
        assert PhoneNumberFixtureBuilder().build() == PhoneNumber(country_code=64, national_number=33316005)

    def test_with_returns_new_builder(self) -> None:
        base = PhoneNumberFixtureBuilder()
        with_ext = base.with_(extension="1234")
        assert base.build().extension is None
        assert with_ext.build().extension == "1234"

    def test_override_single_key(self) -> None:
        number = PhoneNumberFixtureBuilder().override("country_code", 44).build()
        assert number.country_code == 44
        assert number.national_number == 33316005

    def test_with_leading_zeros(self) -> None:
        number = PhoneNumberFixtureBuilder().with_leading_zeros(2).with_(country_code=39, national_number=11).build()
        assert number.italian_leading_zero is True
        assert number.number_of_leading_zeros == 2

    def test_from_plus_sign(self) -> None:
        number = PhoneNumberFixtureBuilder().from_plus_sign("+64 3 331 6005").build()
        assert number.raw_input == "+64 3 331 6005"
        assert number.country_code_source is CountryCodeSource.FROM_NUMBER_WITH_PLUS_SIGN

    def test_call_with_overrides(self) -> None:
        builder = PhoneNumberFixtureBuilder()
        assert builder(national_number=44444444).national_number == 44444444
        assert builder() == builder.build()

    def test_attrs_and_get(self) -> None:
        builder = PhoneNumberFixtureBuilder().with_(extension="9")
        assert builder.attrs == {"country_code": 64, "national_number": 33316005, "extension": "9"}
        assert builder.get("extension") == "9"
        assert builder.get("raw_input", "none") == "none"


# ---------------------------------------------------------------------------
# Shared fixtures and test metadata
# ---------------------------------------------------------------------------


class TestFixtures:
    def test_registry_fixture(self, phone_registry: MetadataRegistry) -> None:
        assert len(phone_registry) == 21

    def test_util_fixture_shares_registry(self, phone_util: PhoneNumberUtil, phone_registry: MetadataRegistry) -> None:
        assert phone_util.registry is phone_registry

    def test_build_test_registry_is_fresh(self, phone_registry: MetadataRegistry) -> None:
        assert build_test_registry() is not phone_registry
