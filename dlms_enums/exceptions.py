class UnknownEnumError(ValueError):
    """
    A text could not be matched to any entry of an enumeration.

    Raised by every ``parse``. For bit-flag enumerations ``value`` holds the whole
    input, not only the token that failed.
    """

    def __init__(self, value: str, enum_name: str):
        self.value = value
        self.enum_name = enum_name
        super().__init__(f"{value!r} is not a valid {enum_name}")


class ImproperlyConfigured(Exception):
    """The settings are somehow improperly configured"""
