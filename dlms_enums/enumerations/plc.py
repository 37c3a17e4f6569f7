"""PRIME, G3 and S-FSK PLC values."""

from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class Modulation(DlmsEnum):
    ROBUST_MODE = 0, "ROBUSTMODE"
    DBPSK = 1, "DBPSK"
    DQPSK = 2, "DQPSK"
    D8PSK = 3, "D8PSK"
    QAM16 = 4, "QAM16"


@CATALOG.register
@unique
class PlcDataLinkData(DlmsEnum):
    REQUEST = 0x90, "Request"


@CATALOG.register
@unique
class PlcSourceAddress(DlmsEnum):
    INITIATOR = 0xC00, "INITIATOR"
    NEW = 0xFFE, "NEW"


@CATALOG.register
@unique
class PlcHdlcSourceAddress(DlmsEnum):
    INITIATOR = 0xC01, "INITIATOR"


@CATALOG.register
@unique
class PlcMacSubframes(DlmsEnum):
    """Sequence numbers of S-FSK MAC sub frames."""

    ONE = 0x6C6C, "ONE"
    TWO = 0x3A3A, "TWO"
    THREE = 0x5656, "THREE"
    FOUR = 0x7171, "FOUR"
    FIVE = 0x1D1D, "FIVE"
    SIX = 0x4B4B, "SIX"
    SEVEN = 0x2727, "SEVEN"


@CATALOG.register
@unique
class MacState(DlmsEnum):
    DISCONNECTED = 0, "Disconnected"
    TERMINAL = 1, "Terminal"
    SWITCH = 2, "Switch"
    BASE = 3, "Base"


@CATALOG.register
@unique
class MacCapabilities(DlmsFlag):
    """PRIME MAC capabilities of a node."""

    SWITCH_CAPABLE = 1, "SwitchCapable"
    PACKET_AGGREGATION = 2, "PacketAggregation"
    CONTENTION_FREE_PERIOD = 4, "ContentionFreePeriod"
    DIRECT_CONNECTION = 8, "DirectConnection"
    MULTICAST = 0x10, "Multicast"
    PHY_ROBUSTNESS_MANAGEMENT = 0x20, "PhyRobustnessManagement"
    ARQ = 0x40, "Arq"
    RESERVED_FOR_FUTURE_USE = 0x80, "ReservedForFutureUse"
    DIRECT_CONNECTION_SWITCHING = 0x100, "DirectConnectionSwitching"
    MULTICAST_SWITCHING_CAPABILITY = 0x200, "MulticastSwitchingCapability"
    PHY_ROBUSTNESS_MANAGEMENT_SWITCHING_CAPABILITY = 0x400, "PhyRobustnessManagementSwitchingCapability"
    ARQ_BUFFERING_SWITCHING_CAPABILITY = 0x800, "ArqBufferingSwitchingCapability"


@CATALOG.register
@unique
class AddressState(DlmsEnum):
    NONE = 0, "None"
    ASSIGNED = 1, "Assigned"


@CATALOG.register
@unique
class GainResolution(DlmsEnum):
    DB6 = 0, "DB6"
    DB3 = 1, "DB3"


@CATALOG.register
@unique
class DeviceType(DlmsEnum):
    PAN_DEVICE = 0, "PanDevice"
    PAN_COORDINATOR = 1, "PanCoordinator"
    NOT_DEFINED = 2, "NotDefined"


@CATALOG.register
@unique
class PrimeDcMsgType(DlmsEnum):
    NEW_DEVICE_NOTIFICATION = 1, "NEWDEVICENOTIFICATION"
    REMOVE_DEVICE_NOTIFICATION = 2, "REMOVEDEVICENOTIFICATION"
    START_REPORTING_METERS = 3, "STARTREPORTINGMETERS"
    DELETE_METERS = 4, "DELETEMETERS"
    ENABLE_AUTO_CLOSE = 5, "ENABLEAUTOCLOSE"
    DISABLE_AUTO_CLOSE = 6, "DISABLEAUTOCLOSE"


@CATALOG.register
@unique
class ZigBeeStatus(DlmsFlag):
    AUTHORISED = 0x1, "Authorised"
    REPORTING = 0x2, "Reporting"
    UNAUTHORISED = 0x4, "Unauthorised"
    AUTHORISED_SWAP_OUT = 0x8, "AuthorisedSwapOut"
    SEP_TRANSMITTING = 0x10, "SepTransmitting"
