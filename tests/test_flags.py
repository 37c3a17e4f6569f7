import itertools

import pytest

from dlms_enums import ImproperlyConfigured, UnknownEnumError
from dlms_enums.enumerations import (
    Conformance,
    CryptoKeyType,
    MacCapabilities,
    SecurityPolicy,
    Weekdays,
)


def single_bits(flag_enum):
    return [
        member
        for member in flag_enum.all()
        if member > 0 and member & (member - 1) == 0
    ]


def test_zero_round_trip(flag_enum):
    zero_spelling = flag_enum.to_string(0)
    assert zero_spelling
    assert flag_enum.parse(zero_spelling) == 0


def test_empty_text_is_zero(flag_enum):
    assert flag_enum.parse("") == 0
    assert flag_enum.parse("   ") == 0


def test_composition(flag_enum):
    declared = {int(member) for member in flag_enum.all()}
    for a, b in itertools.combinations(single_bits(flag_enum), 2):
        combined = a | b
        text = f"{flag_enum.to_string(a)},{flag_enum.to_string(b)}"
        assert flag_enum.parse(text) == combined
        if combined in declared:
            continue
        assert flag_enum.to_string(combined) == text


class TestZeroSpelling:
    def test_declared_zero_entry_is_used(self):
        assert Weekdays.to_string(0) == "None"
        assert CryptoKeyType.to_string(0) == "Ecdsa"
        assert CryptoKeyType.parse("Ecdsa") is CryptoKeyType.ECDSA

    def test_default_zero_spelling_without_zero_entry(self):
        assert MacCapabilities.to_string(0) == "None"
        assert MacCapabilities.parse("None") == 0
        assert MacCapabilities.parse("none, Arq") == MacCapabilities.ARQ

    def test_zero_spelling_is_configurable(self, monkeypatch):
        from dlms_enums.conf import settings

        monkeypatch.setattr(settings, "FLAG_ZERO_SPELLING", "Empty")
        assert MacCapabilities.to_string(0) == "Empty"
        assert MacCapabilities.parse("Empty") == 0
        assert Weekdays.to_string(0) == "None"


class TestParse:
    def test_whitespace_around_tokens_is_ignored(self):
        assert Weekdays.parse(" Monday , Friday ") == Weekdays.MONDAY | Weekdays.FRIDAY

    def test_single_entry_returns_member(self):
        assert Conformance.parse("get") is Conformance.GET

    def test_undeclared_combination_returns_int(self):
        result = Conformance.parse("Get,Set")
        assert result == 0x180000
        assert type(result) is int

    def test_declared_combination_returns_member(self):
        assert (
            SecurityPolicy.parse("Authenticated,Encrypted")
            is SecurityPolicy.AUTHENTICATED_ENCRYPTED
        )

    def test_repeated_token(self):
        assert Weekdays.parse("Monday,Monday") is Weekdays.MONDAY

    @pytest.mark.parametrize(
        "text", ["Monday,Someday", "Monday,,Friday", "Monday,", "Someday"]
    )
    def test_unknown_token_rejects_whole_text(self, text):
        with pytest.raises(UnknownEnumError) as e:
            Weekdays.parse(text)

        assert e.value.value == text
        assert e.value.enum_name == "Weekdays"


class TestToString:
    def test_composite_entry_keeps_own_spelling(self):
        assert SecurityPolicy.to_string(0x3) == "AUTHENTICATEDENCRYPTED"

    def test_bits_in_declaration_order(self):
        assert (
            SecurityPolicy.to_string(0x5) == "AUTHENTICATED,AUTHENTICATEDREQUEST"
        )
        assert Weekdays.to_string(0x41) == "Monday,Sunday"

    def test_undeclared_bits_are_dropped(self):
        assert Weekdays.to_string(0x80 | 0x2) == "Tuesday"
        assert Weekdays.to_string(0x80) == ""

    def test_bits(self):
        assert Weekdays.bits(0x3) == [Weekdays.MONDAY, Weekdays.TUESDAY]


def test_separator_is_read_from_settings(flag_separator):
    flag_separator("|")
    assert Conformance.to_string(0x800018) == "Read|Write|Action"
    assert Conformance.parse("Read | Write | Action") == 0x800018
    with pytest.raises(UnknownEnumError):
        Conformance.parse("Read,Write")


def test_empty_separator_set_at_runtime_raises(flag_separator):
    flag_separator("")
    with pytest.raises(ImproperlyConfigured):
        Conformance.parse("Read,Write")
    with pytest.raises(ImproperlyConfigured):
        Conformance.to_string(0x18)
