import pytest

from dlms_enums import CATALOG
from dlms_enums.enumerations import (
    ActionRequestType,
    Command,
    Conformance,
    DataType,
    ErrorCode,
    ObjectType,
    Security,
    Unit,
)


@pytest.mark.parametrize(
    "enum_type,text,code",
    [
        (DataType, "OctetString", 9),
        (ErrorCode, "DisconnectMode", -4),
        (Command, "Aarq", 0x60),
        (Security, "AuthenticationEncryption", 0x30),
        (ObjectType, "TariffPlan", 8192),
        (Unit, "NoUnit", 255),
    ],
)
def test_parse(enum_type, text, code):
    assert enum_type.parse(text) == code


@pytest.mark.parametrize(
    "enum_type,code,text",
    [
        (DataType, 9, "OctetString"),
        (ErrorCode, -4, "DisconnectMode"),
        (Command, 0x60, "Aarq"),
        (Security, 0x30, "AUTHENTICATIONENCRYPTION"),
        (Unit, 255, "NoUnit"),
        (ObjectType, 8192, "TariffPlan"),
    ],
)
def test_to_string(enum_type, code, text):
    assert enum_type.to_string(code) == text


def test_conformance_parses_list():
    assert Conformance.parse("Read,Write,Action") == 0x800018
    assert Conformance.parse("Read,Write,Action") == (
        Conformance.READ | Conformance.WRITE | Conformance.ACTION
    )


def test_conformance_to_string():
    assert Conformance.to_string(0x800018) == "Read,Write,Action"


def test_data_type_parse_ignores_case():
    assert DataType.parse("OCTETSTRING") is DataType.OCTET_STRING
    assert DataType.parse("octetstring") is DataType.OCTET_STRING


def test_action_request_type_prints_upper_case():
    assert ActionRequestType.to_string(ActionRequestType.NORMAL) == "NORMAL"
    assert ActionRequestType.parse("Normal") is ActionRequestType.NORMAL


def test_error_code_is_the_only_signed_enumeration():
    signed = [
        identifier
        for identifier in CATALOG.identifiers()
        if CATALOG.definition(identifier).signed
    ]
    assert signed == ["ErrorCode"]


def test_parse_returns_member():
    command = Command.parse("aarq")
    assert command is Command.AARQ
    assert command.name == "AARQ"
    assert command.spelling == "Aarq"
    assert str(command) == "Aarq"


def test_unknown_code_does_not_raise():
    assert Command.to_string(0xFF) == ""
    assert ObjectType.to_string(12345) == ""
