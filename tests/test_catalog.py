from enum import unique

import pytest

from dlms_enums import CATALOG, DlmsEnum, DlmsFlag, UnknownEnumError
from dlms_enums.catalog import CasingPolicy, EnumCatalog, EnumDefinition, EnumEntry
from dlms_enums.enumerations import ClockStatus, Command, ErrorCode, SecurityPolicy


@unique
class Colour(DlmsEnum):
    RED = 1, "Red"
    GREEN = 2, "Green"


@unique
class Options(DlmsFlag):
    FIRST = 1, "FIRST"
    SECOND = 2, "SECOND"


class TestEnumCatalog:
    def test_register(self):
        catalog = EnumCatalog()
        assert catalog.register(Colour) is Colour
        assert catalog.get("Colour") is Colour
        assert len(catalog) == 1
        assert list(catalog) == [Colour]

    def test_register_twice_raises(self):
        catalog = EnumCatalog()
        catalog.register(Colour)
        with pytest.raises(ValueError):
            catalog.register(Colour)

    def test_get_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            EnumCatalog().get("Colour")

    def test_parse_and_to_string_by_identifier(self):
        assert CATALOG.parse("Command", "Aarq") is Command.AARQ
        assert CATALOG.to_string("Command", 0x60) == "Aarq"
        assert CATALOG.parse("Conformance", "Read,Write,Action") == 0x800018

    def test_parse_unknown_value(self):
        with pytest.raises(UnknownEnumError):
            CATALOG.parse("Command", "Aarx")

    def test_flags(self):
        catalog = EnumCatalog()
        catalog.register(Colour)
        catalog.register(Options)
        assert catalog.flags() == [Options]
        assert catalog.identifiers() == ["Colour", "Options"]

    def test_package_flags(self):
        assert sorted(flag.__name__ for flag in CATALOG.flags()) == [
            "AccessMode3",
            "AccountCreditStatus",
            "Conformance",
            "CreditCollectionConfiguration",
            "CreditConfiguration",
            "CryptoKeyType",
            "DateTimeExtraInfo",
            "DateTimeSkips",
            "KeyUsage",
            "MacCapabilities",
            "MethodAccessMode3",
            "RequiredProtection",
            "SecurityPolicy",
            "Weekdays",
            "ZigBeeStatus",
        ]


class TestEnumDefinition:
    def test_entries(self):
        definition = EnumDefinition.from_enum(Colour)
        assert definition.identifier == "Colour"
        assert definition.entries == (
            EnumEntry(name="RED", code=1, spelling="Red"),
            EnumEntry(name="GREEN", code=2, spelling="Green"),
        )
        assert definition.codes == [1, 2]
        assert not definition.flag
        assert not definition.signed

    @pytest.mark.parametrize(
        "identifier,casing",
        [
            ("Command", CasingPolicy.MIXED),
            ("ClockStatus", CasingPolicy.UPPER),
            ("SecurityPolicy", CasingPolicy.UPPER),
        ],
    )
    def test_casing(self, identifier, casing):
        assert CATALOG.definition(identifier).casing == casing

    def test_flag_and_signed(self):
        assert CATALOG.definition("SecurityPolicy").flag
        assert CATALOG.definition("ErrorCode").signed
        assert not CATALOG.definition("ClockStatus").flag

    def test_definition_follows_enum(self):
        for enum_class in (ClockStatus, Command, ErrorCode, SecurityPolicy):
            definition = EnumDefinition.from_enum(enum_class)
            assert definition.codes == [int(member) for member in enum_class.all()]
