import functools
from enum import IntEnum
from typing import *

import structlog

from dlms_enums.conf import settings
from dlms_enums.exceptions import ImproperlyConfigured, UnknownEnumError

LOG = structlog.get_logger()


@functools.lru_cache(maxsize=None)
def _spelling_index(enum_class) -> Dict[str, "DlmsEnum"]:
    return {member.spelling.upper(): member for member in enum_class}


@functools.lru_cache(maxsize=None)
def _code_index(enum_class) -> Dict[int, "DlmsEnum"]:
    return {int(member): member for member in enum_class}


class DlmsEnum(IntEnum):
    """
    Base for all DLMS/COSEM enumerations.

    Members are declared as ``NAME = code, "Spelling"``. The spelling is the
    canonical text of the entry and is what ``to_string`` and ``str()`` return.
    Parsing is case insensitive so both ``"OctetString"`` and ``"OCTETSTRING"``
    are accepted.
    """

    def __new__(cls, value: int, spelling: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.spelling = spelling
        return member

    def __str__(self):
        return self.spelling

    @classmethod
    def parse(cls, text: str) -> "DlmsEnum":
        member = _spelling_index(cls).get(text.upper())
        if member is None:
            LOG.debug("Unable to parse enum value", enum=cls.__name__, value=text)
            raise UnknownEnumError(text, cls.__name__)
        return member

    @classmethod
    def to_string(cls, code: int) -> str:
        """
        Returns the canonical spelling of the entry with the code. Codes that are
        not declared gives an empty string.
        """
        member = _code_index(cls).get(int(code))
        if member is None:
            LOG.debug("No entry for code", enum=cls.__name__, code=code)
            return ""
        return member.spelling

    @classmethod
    def all(cls) -> List["DlmsEnum"]:
        return list(cls)


def _is_single_bit(code: int) -> bool:
    return code > 0 and code & (code - 1) == 0


def _flag_separator() -> str:
    separator = settings.FLAG_SEPARATOR
    if not separator:
        raise ImproperlyConfigured("FLAG_SEPARATOR can not be empty")
    return separator


class DlmsFlag(DlmsEnum):
    """
    Base for enumerations where each entry is a bit in a bit-set.

    In text form a set is the spellings of its bits joined by
    ``settings.FLAG_SEPARATOR``, ex ``"Read,Write,Action"``. The empty set is the
    spelling of the entry with code 0, or ``settings.FLAG_ZERO_SPELLING`` if there
    is no such entry.

    ``parse`` returns the member if the combined bits is a declared entry and a
    plain int otherwise.
    """

    @classmethod
    def zero_spelling(cls) -> str:
        zero = _code_index(cls).get(0)
        if zero is not None:
            return zero.spelling
        return settings.FLAG_ZERO_SPELLING

    @classmethod
    def _coerce(cls, mask: int) -> Union["DlmsFlag", int]:
        return _code_index(cls).get(mask, mask)

    @classmethod
    def parse(cls, text: str) -> Union["DlmsFlag", int]:
        if not text.strip():
            return cls._coerce(0)

        index = _spelling_index(cls)
        zero = cls.zero_spelling().upper()
        mask = 0
        for token in text.split(_flag_separator()):
            folded = token.strip().upper()
            member = index.get(folded)
            if member is not None:
                mask |= member
            elif folded and folded == zero:
                continue
            else:
                LOG.debug(
                    "Unable to parse flag value",
                    enum=cls.__name__,
                    value=text,
                    token=token,
                )
                raise UnknownEnumError(text, cls.__name__)

        return cls._coerce(mask)

    @classmethod
    def to_string(cls, code: int) -> str:
        code = int(code)
        if code == 0:
            return cls.zero_spelling()

        exact = _code_index(cls).get(code)
        if exact is not None:
            return exact.spelling

        spellings = [member.spelling for member in cls.bits(code)]
        if not spellings:
            LOG.debug("No declared bits in code", enum=cls.__name__, code=code)
        return _flag_separator().join(spellings)

    @classmethod
    def bits(cls, code: int) -> List["DlmsFlag"]:
        """Returns the declared single bit entries that are set in code"""
        return [
            member for member in cls if _is_single_bit(int(member)) and code & member
        ]
