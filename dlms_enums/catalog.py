from enum import IntEnum
from typing import *

import attr
import structlog

from dlms_enums.base import DlmsEnum, DlmsFlag

LOG = structlog.get_logger()


class CasingPolicy(IntEnum):
    """How the canonical spellings of an enumeration are cased."""

    UPPER = 1
    MIXED = 2


@attr.s(auto_attribs=True, frozen=True)
class EnumEntry:
    name: str
    code: int
    spelling: str

    @classmethod
    def from_member(cls, member: DlmsEnum) -> "EnumEntry":
        return cls(name=member.name, code=int(member), spelling=member.spelling)


@attr.s(auto_attribs=True, frozen=True)
class EnumDefinition:
    """
    Describes one enumeration: its identifier, the entries in declaration order,
    if it is a bit-flag enumeration, how its spellings are cased and if any code is
    negative.
    """

    identifier: str
    entries: Tuple[EnumEntry, ...]
    flag: bool
    casing: CasingPolicy
    signed: bool

    @classmethod
    def from_enum(cls, enum_class: Type[DlmsEnum]) -> "EnumDefinition":
        entries = tuple(EnumEntry.from_member(member) for member in enum_class)
        if all(entry.spelling == entry.spelling.upper() for entry in entries):
            casing = CasingPolicy.UPPER
        else:
            casing = CasingPolicy.MIXED

        return cls(
            identifier=enum_class.__name__,
            entries=entries,
            flag=issubclass(enum_class, DlmsFlag),
            casing=casing,
            signed=any(entry.code < 0 for entry in entries),
        )

    @property
    def codes(self) -> List[int]:
        return [entry.code for entry in self.entries]


@attr.s(auto_attribs=True)
class EnumCatalog:
    """
    Lookup of enumerations by identifier.

    Makes it possible to parse and print values when the enumeration is only known
    by name, ex when decoding translated XML or user input.
    """

    enums: Dict[str, Type[DlmsEnum]] = attr.ib(factory=dict)

    def register(self, enum_class: Type[DlmsEnum]) -> Type[DlmsEnum]:
        identifier = enum_class.__name__
        if identifier in self.enums:
            raise ValueError(f"Enumeration {identifier} is already registered")
        self.enums[identifier] = enum_class
        LOG.debug("Registered enumeration", enum=identifier)
        return enum_class

    def get(self, identifier: str) -> Type[DlmsEnum]:
        try:
            return self.enums[identifier]
        except KeyError:
            raise KeyError(f"No enumeration named {identifier!r}")

    def definition(self, identifier: str) -> EnumDefinition:
        return EnumDefinition.from_enum(self.get(identifier))

    def parse(self, identifier: str, text: str) -> Union[DlmsEnum, int]:
        return self.get(identifier).parse(text)

    def to_string(self, identifier: str, code: int) -> str:
        return self.get(identifier).to_string(code)

    def identifiers(self) -> List[str]:
        return list(self.enums.keys())

    def flags(self) -> List[Type[DlmsFlag]]:
        return [
            enum_class
            for enum_class in self.enums.values()
            if issubclass(enum_class, DlmsFlag)
        ]

    def __iter__(self) -> Iterator[Type[DlmsEnum]]:
        return iter(self.enums.values())

    def __len__(self) -> int:
        return len(self.enums)


CATALOG = EnumCatalog()
