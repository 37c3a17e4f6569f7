import pytest

from dlms_enums import CATALOG, UnknownEnumError


def test_catalog_holds_all_enumerations():
    assert len(CATALOG) == 140


def test_round_trip_of_every_entry(enum_class):
    for member in enum_class.all():
        assert enum_class.parse(enum_class.to_string(member)) == member


def test_parse_is_case_insensitive(enum_class):
    for member in enum_class.all():
        spelling = enum_class.to_string(member)
        assert (
            enum_class.parse(spelling.lower())
            == enum_class.parse(spelling.upper())
            == enum_class.parse(spelling)
        )


def test_unknown_text_is_rejected(enum_class):
    with pytest.raises(UnknownEnumError) as e:
        enum_class.parse("ZZZ_not_a_value")

    assert e.value.value == "ZZZ_not_a_value"
    assert e.value.enum_name == enum_class.__name__


def test_empty_text_is_rejected_for_scalars(scalar_enum):
    with pytest.raises(UnknownEnumError):
        scalar_enum.parse("")


def test_codes_are_unique(enum_class):
    codes = [int(member) for member in enum_class.all()]
    assert len(codes) == len(set(codes))


def test_all_is_in_declaration_order(enum_class):
    assert enum_class.all() == list(enum_class.__members__.values())


def test_undeclared_code_gives_empty_string(scalar_enum):
    undeclared = max(int(member) for member in scalar_enum.all()) + 1
    assert scalar_enum.to_string(undeclared) == ""


def test_undeclared_negative_code_gives_empty_string(scalar_enum):
    undeclared = min(int(member) for member in scalar_enum.all()) - 1
    assert scalar_enum.to_string(undeclared) == ""
    if not CATALOG.definition(scalar_enum.__name__).signed:
        assert scalar_enum.to_string(-1) == ""


@pytest.mark.parametrize(
    "identifier,code", [("ObjectType", 13), ("DataType", 7), ("Unit", 75)]
)
def test_gap_in_sparse_table_gives_empty_string(identifier, code):
    assert CATALOG.to_string(identifier, code) == ""


def test_str_is_canonical_spelling(enum_class):
    for member in enum_class.all():
        assert str(member) == enum_class.to_string(member)


def test_members_compare_equal_to_wire_codes(enum_class):
    for member in enum_class.all():
        assert enum_class(int(member)) is member
