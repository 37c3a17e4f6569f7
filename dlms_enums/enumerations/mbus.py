from enum import unique

from dlms_enums.base import DlmsEnum
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class MBusCommand(DlmsEnum):
    RSP_UD = 0x8, "RSPUD"
    SND_NR = 0x4, "SNDNR"
    SND_UD = 0x3, "SNDUD"


@CATALOG.register
@unique
class MBusDataHeaderType(DlmsEnum):
    NONE = 0, "None"
    SHORT = 1, "Short"
    LONG = 2, "Long"


@CATALOG.register
@unique
class MBusDeviceType(DlmsEnum):
    OTHER = 0, "OTHER"
    OIL = 1, "OIL"
    ELECTRICITY = 2, "ELECTRICITY"
    GAS = 3, "GAS"
    HEAT = 4, "HEAT"
    STEAM = 5, "STEAM"
    HOT_WATER = 6, "HOTWATER"
    WATER = 7, "WATER"
    HEAT_COST_ALLOCATOR = 8, "HEATCOSTALLOCATOR"
    RESERVED = 9, "RESERVED"
    GAS_MODE2 = 10, "GASMODE2"
    HEAT_MODE2 = 11, "HEATMODE2"
    HOT_WATER_MODE2 = 12, "HOTWATERMODE2"
    WATER_MODE2 = 13, "WATERMODE2"
    HEAT_COST_ALLOCATOR_MODE2 = 14, "HEATCOSTALLOCATORMODE2"
    RESERVED2 = 15, "RESERVED2"


@CATALOG.register
@unique
class MBusEncryptionMode(DlmsEnum):
    """Encryption mode as coded in the M-Bus configuration field."""

    NONE = 0, "NONE"
    AES128 = 1, "AES128"
    DES_CBC = 2, "DESCBC"
    DES_CBC_IV = 3, "DESCBCIV"
    AES_CBC_IV = 5, "AESCBCIV"
    AES_CBC_IV0 = 7, "AESCBCIV0"
    TLS = 13, "TLS"


@CATALOG.register
@unique
class MBusEncryptionKeyStatus(DlmsEnum):
    NO_ENCRYPTION_KEY = 0, "NoEncryptionKey"
    ENCRYPTION_KEY_SET = 1, "EncryptionKeySet"
    ENCRYPTION_KEY_TRANSFERRED = 2, "EncryptionKeyTransferred"
    ENCRYPTION_KEY_SET_AND_TRANSFERRED = 3, "EncryptionKeySetAndTransferred"
    ENCRYPTION_KEY_IN_USE = 4, "EncryptionKeyInUse"


@CATALOG.register
@unique
class MBusLinkStatus(DlmsEnum):
    NONE = 0, "NONE"
    NORMAL = 1, "NORMAL"
    TEMPORARILY_INTERRUPTED = 2, "TEMPORARILYINTERRUPTED"
    PERMANENTLY_INTERRUPTED = 3, "PERMANENTLYINTERRUPTED"


@CATALOG.register
@unique
class MBusPortCommunicationState(DlmsEnum):
    NO_ACCESS = 0, "NoAccess"
    TEMPORARY_NO_ACCESS = 1, "TemporaryNoAccess"
    LIMITED_ACCESS = 2, "LimitedAccess"
    UNLIMITED_ACCESS = 3, "UnlimitedAccess"
    WMBUS = 4, "wMBus"
