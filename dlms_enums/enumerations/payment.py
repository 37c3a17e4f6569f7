from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class AccountStatus(DlmsEnum):
    NEW_INACTIVE_ACCOUNT = 1, "NEWINACTIVEACCOUNT"
    ACCOUNT_ACTIVE = 2, "ACCOUNTACTIVE"
    ACCOUNT_CLOSED = 3, "ACCOUNTCLOSED"


@CATALOG.register
@unique
class AccountCreditStatus(DlmsFlag):
    """Credit status bits of the Account object."""

    NONE = 0, "NONE"
    IN_CREDIT = 0x1, "INCREDIT"
    LOW_CREDIT = 0x2, "LOWCREDIT"
    NEXT_CREDIT_ENABLED = 0x4, "NEXTCREDITENABLED"
    NEXT_CREDIT_SELECTABLE = 0x8, "NEXTCREDITSELECTABLE"
    CREDIT_REFERENCE_LIST = 0x10, "CREDITREFERENCELIST"
    SELECTABLE_CREDIT_IN_USE = 0x20, "SELECTABLECREDITINUSE"
    OUT_OF_CREDIT = 0x40, "OUTOFCREDIT"
    RESERVED = 0x80, "RESERVED"


@CATALOG.register
@unique
class PaymentMode(DlmsEnum):
    CREDIT = 1, "CREDIT"
    PREPAYMENT = 2, "PREPAYMENT"


@CATALOG.register
@unique
class CreditStatus(DlmsEnum):
    ENABLED = 0, "ENABLED"
    SELECTABLE = 1, "SELECTABLE"
    INVOKED = 2, "INVOKED"
    IN_USE = 3, "INUSE"
    CONSUMED = 4, "CONSUMED"


@CATALOG.register
@unique
class CreditConfiguration(DlmsFlag):
    NONE = 0, "None"
    VISUAL = 0x1, "Visual"
    CONFIRMATION = 0x2, "Confirmation"
    PAID_BACK = 0x4, "PaidBack"
    RESETTABLE = 0x8, "Resettable"
    TOKENS = 0x10, "Tokens"


@CATALOG.register
@unique
class CreditCollectionConfiguration(DlmsFlag):
    NONE = 0, "NONE"
    DISCONNECTED = 0x1, "DISCONNECTED"
    LOAD_LIMITING = 0x2, "LOADLIMITING"
    FRIENDLY_CREDIT = 0x4, "FRIENDLYCREDIT"


@CATALOG.register
@unique
class ChargeConfiguration(DlmsEnum):
    NONE = 0, "NONE"
    PERCENTAGE_BASED_COLLECTION = 0x1, "PERCENTAGEBASEDCOLLECTION"
    CONTINUOUS_COLLECTION = 0x2, "CONTINUOUSCOLLECTION"


@CATALOG.register
@unique
class Currency(DlmsEnum):
    TIME = 0, "Time"
    CONSUMPTION = 1, "Consumption"
    MONETARY = 2, "Monetary"
