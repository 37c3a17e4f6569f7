from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class ClockBase(DlmsEnum):
    NONE = 0, "NONE"
    CRYSTAL = 1, "CRYSTAL"
    FREQUENCY50 = 2, "FREQUENCY50"
    FREQUENCY60 = 3, "FREQUENCY60"
    GPS = 4, "GPS"
    RADIO = 5, "RADIO"


@CATALOG.register
@unique
class ClockStatus(DlmsEnum):
    """Status byte of a COSEM date-time."""

    OK = 0, "OK"
    INVALID_VALUE = 0x1, "INVALIDVALUE"
    DOUBTFUL_VALUE = 0x2, "DOUBTFULVALUE"
    DIFFERENT_CLOCK_BASE = 0x4, "DIFFERENTCLOCKBASE"
    INVALID_CLOCK_STATUS = 0x8, "INVALIDCLOCKSTATUS"
    DAYLIGHT_SAVING_ACTIVE = 0x80, "DAYLIGHTSAVINGACTIVE"
    SKIP = 0xFF, "SKIP"


@CATALOG.register
@unique
class DateTimeSkips(DlmsFlag):
    """Fields of a date-time that are left out (not specified)."""

    NONE = 0x0, "NONE"
    YEAR = 0x1, "YEAR"
    MONTH = 0x2, "MONTH"
    DAY = 0x4, "DAY"
    DAY_OF_WEEK = 0x8, "DAYOFWEEK"
    HOUR = 0x10, "HOUR"
    MINUTE = 0x20, "MINUTE"
    SECOND = 0x40, "SECOND"
    MS = 0x80, "MS"
    DEVIATION = 0x100, "DEVIATION"
    STATUS = 0x200, "STATUS"


@CATALOG.register
@unique
class DateTimeExtraInfo(DlmsFlag):
    NONE = 0x0, "NONE"
    DST_BEGIN = 0x1, "DSTBEGIN"
    DST_END = 0x2, "DSTEND"
    LAST_DAY = 0x4, "LASTDAY"
    LAST_DAY2 = 0x8, "LASTDAY2"


@CATALOG.register
@unique
class Weekdays(DlmsFlag):
    """Days of the week as used in schedules."""

    NONE = 0, "None"
    MONDAY = 0x1, "Monday"
    TUESDAY = 0x2, "Tuesday"
    WEDNESDAY = 0x4, "Wednesday"
    THURSDAY = 0x8, "Thursday"
    FRIDAY = 0x10, "Friday"
    SATURDAY = 0x20, "Saturday"
    SUNDAY = 0x40, "Sunday"
