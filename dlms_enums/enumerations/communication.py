from enum import unique

from dlms_enums.base import DlmsEnum
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class BaudRate(DlmsEnum):
    """
    Baud rates used in the IEC local port setup. The code is the index, not
    the rate.
    """

    BAUD_300 = 0, "BAUDRATE300"
    BAUD_600 = 1, "BAUDRATE600"
    BAUD_1200 = 2, "BAUDRATE1200"
    BAUD_2400 = 3, "BAUDRATE2400"
    BAUD_4800 = 4, "BAUDRATE4800"
    BAUD_9600 = 5, "BAUDRATE9600"
    BAUD_19200 = 6, "BAUDRATE19200"
    BAUD_38400 = 7, "BAUDRATE38400"
    BAUD_57600 = 8, "BAUDRATE57600"
    BAUD_115200 = 9, "BAUDRATE115200"


@CATALOG.register
@unique
class InterfaceType(DlmsEnum):
    HDLC = 0, "HDLC"
    WRAPPER = 1, "WRAPPER"
    PDU = 2, "PDU"
    WIRELESS_MBUS = 3, "WIRELESSMBUS"
    HDLC_WITH_MODE_E = 4, "HDLCWITHMODEE"
    PLC = 5, "PLC"
    PLC_HDLC = 6, "PLCHDLC"
    LPWAN = 7, "LPWAN"
    WI_SUN = 8, "WISUN"
    PLC_PRIME = 9, "PLCPRIME"
    WIRED_MBUS = 10, "WIREDMBUS"
    SMS = 11, "SMS"
    PRIME_DC_WRAPPER = 12, "PRIMEDCWRAPPER"
    COAP = 13, "COAP"


@CATALOG.register
@unique
class OpticalProtocolMode(DlmsEnum):
    DEFAULT = 0, "DEFAULT"
    NET = 1, "NET"
    UNKNOWN = 2, "UNKNOWN"


@CATALOG.register
@unique
class LocalPortResponseTime(DlmsEnum):
    MS20 = 0, "ms20"
    MS200 = 1, "ms200"


@CATALOG.register
@unique
class IecTwistedPairSetupMode(DlmsEnum):
    INACTIVE = 0, "Inactive"
    ACTIVE = 1, "Active"


@CATALOG.register
@unique
class HdlcFrameType(DlmsEnum):
    IFRAME = 0x0, "IFRAME"
    SFRAME = 0x1, "SFRAME"
    UFRAME = 0x3, "UFRAME"


@CATALOG.register
@unique
class HdlcControlFrame(DlmsEnum):
    RECEIVE_READY = 0, "RECEIVEREADY"
    RECEIVE_NOT_READY = 1, "RECEIVENOTREADY"
    REJECT = 2, "REJECT"
    SELECTIVE_REJECT = 3, "SELECTIVEREJECT"


@CATALOG.register
@unique
class ConnectionState(DlmsEnum):
    NONE = 0, "NONE"
    HDLC = 1, "HDLC"
    DLMS = 2, "DLMS"
    IEC = 4, "IEC"


@CATALOG.register
@unique
class AutoAnswerMode(DlmsEnum):
    DEVICE = 0, "Device"
    CALL = 1, "Call"
    CONNECTED = 2, "Connected"
    NONE = 3, "None"


@CATALOG.register
@unique
class AutoAnswerStatus(DlmsEnum):
    INACTIVE = 0, "INACTIVE"
    ACTIVE = 1, "ACTIVE"
    LOCKED = 2, "LOCKED"


@CATALOG.register
@unique
class AutoConnectMode(DlmsEnum):
    """Mode controlling the auto dial functionality."""

    NO_AUTO_CONNECT = 0, "NOAUTOCONNECT"
    AUTO_DIALLING_ALLOWED_ANYTIME = 1, "AUTODIALLINGALLOWEDANYTIME"
    AUTO_DIALLING_ALLOWED_CALLING_WINDOW = 2, "AUTODIALLINGALLOWEDCALLINGWINDOW"
    REGULAR_AUTO_DIALLING_ALLOWED_CALLING_WINDOW = 3, "REGULARAUTODIALLINGALLOWEDCALLINGWINDOW"
    SMS_SENDING_PLMN = 4, "SMSSENDINGPLMN"
    SMS_SENDING_PSTN = 5, "SMSSENDINGPSTN"
    EMAIL_SENDING = 6, "EMAILSENDING"
    PERMANENTLY_CONNECT = 101, "PERMANENTLYCONNECT"
    CONNECT_WITH_CALLING_WINDOW = 102, "CONNECTWITHCALLINGWINDOW"
    CONNECT_INVOKED = 103, "CONNECTINVOKED"
    DISCONNECT_CONNECT_INVOKED = 104, "DISCONNECTCONNECTINVOKED"


@CATALOG.register
@unique
class CallType(DlmsEnum):
    NORMAL = 0, "Normal"
    WAKE_UP = 1, "WakeUp"


@CATALOG.register
@unique
class GsmStatus(DlmsEnum):
    NONE = 0, "NONE"
    HOME_NETWORK = 1, "HOMENETWORK"
    SEARCHING = 2, "SEARCHING"
    DENIED = 3, "DENIED"
    UNKNOWN = 4, "UNKNOWN"
    ROAMING = 5, "ROAMING"


@CATALOG.register
@unique
class GsmCircuitSwitchStatus(DlmsEnum):
    INACTIVE = 0, "Inactive"
    INCOMING_CALL = 1, "IncomingCall"
    ACTIVE = 2, "Active"


@CATALOG.register
@unique
class GsmPacketSwitchStatus(DlmsEnum):
    INACTIVE = 0, "Inactive"
    GPRS = 1, "GPRS"
    EDGE = 2, "EDGE"
    UMTS = 3, "UMTS"
    HSDPA = 4, "HSDPA"
    LTE = 5, "LTE"
    CDMA = 6, "CDMA"
    LTE_CAT_M1 = 7, "LteCatM1"
    LTE_CAT_NB1 = 8, "LteCatNb1"
    LTE_CAT_NB2 = 9, "LteCatNb2"


@CATALOG.register
@unique
class LteCoverageEnhancement(DlmsEnum):
    LEVEL0 = 0, "LEVEL0"
    LEVEL1 = 1, "LEVEL1"
    LEVEL2 = 2, "LEVEL2"


@CATALOG.register
@unique
class PushOperationMethod(DlmsEnum):
    UNCONFIRMED_FAILURE = 0, "UnconfirmedFailure"
    UNCONFIRMED_MISSING = 1, "UnconfirmedMissing"
    CONFIRMED = 2, "Confirmed"


@CATALOG.register
@unique
class ServiceType(DlmsEnum):
    TCP = 0, "TCP"
    UDP = 1, "UDP"
    FTP = 2, "Ftp"
    SMTP = 3, "SMTP"
    SMS = 4, "Sms"
    HDLC = 5, "Hdlc"
    MBUS = 6, "MBus"
    ZIGBEE = 7, "ZigBee"
    DLMS_GATEWAY = 8, "DlmsGateway"
    RELIABLE_COAP = 9, "ReliableCoAP"
    UNRELIABLE_COAP = 10, "UnreliableCoAP"


@CATALOG.register
@unique
class MessageType(DlmsEnum):
    COSEM_APDU = 0, "CosemApdu"
    COSEM_APDU_XML = 1, "CosemApduXml"
    MANUFACTURER_SPESIFIC = 128, "ManufacturerSpesific"


@CATALOG.register
@unique
class TransportMode(DlmsEnum):
    RELIABLE = 1, "Reliable"
    UNRELIABLE = 2, "Unreliable"
    RELIABLE_UNRELIABLE = 3, "ReliableUnreliable"


@CATALOG.register
@unique
class NtpAuthenticationMethod(DlmsEnum):
    NO_SECURITY = 0, "NoSecurity"
    SHARED_SECRETS = 1, "SharedSecrets"
    AUTO_KEY_IFF = 2, "AutoKeyIff"


@CATALOG.register
@unique
class IP4SetupIpOptionType(DlmsEnum):
    SECURITY = 0x82, "Security"
    LOOSE_SOURCE_AND_RECORD_ROUTE = 0x83, "LooseSourceAndRecordRoute"
    STRICT_SOURCE_AND_RECORD_ROUTE = 0x89, "StrictSourceAndRecordRoute"
    RECORD_ROUTE = 0x07, "RecordRoute"
    INTERNET_TIMESTAMP = 0x44, "InternetTimestamp"


@CATALOG.register
@unique
class AddressConfigMode(DlmsEnum):
    AUTO = 0, "AUTO"
    DHCPV6 = 1, "DHCPV6"
    MANUAL = 2, "MANUAL"
    NEIGHBOUR_DISCOVERY = 3, "NEIGHBOURDISCOVERY"


@CATALOG.register
@unique
class PppAuthenticationType(DlmsEnum):
    NONE = 0, "None"
    PAP = 1, "PAP"
    CHAP = 2, "CHAP"


@CATALOG.register
@unique
class PppSetupAuthenticationProtocol(DlmsEnum):
    """PPP authentication protocol numbers."""

    NONE = 0, "NONE"
    PAP = 0xC023, "PAP"
    CHAP = 0xC223, "CHAP"
    EAP = 0xC227, "EAP"


@CATALOG.register
@unique
class PppSetupCallbackOperation(DlmsEnum):
    USER = 0, "USER"
    DIALLING = 1, "DIALLING"
    LOCATION = 2, "LOCATION"
    E164 = 3, "E_164"
    X500 = 4, "X500"
    CBCP = 6, "CBCP"


@CATALOG.register
@unique
class PppSetupIPCPOptionType(DlmsEnum):
    IP_COMPRESSION_PROTOCOL = 2, "IPCompressionProtocol"
    PREF_LOCAL_IP = 3, "PrefLocalIP"
    PREF_PEER_IP = 20, "PrefPeerIP"
    GAO = 21, "GAO"
    USIP = 22, "USIP"


@CATALOG.register
@unique
class PppSetupLcpOptionType(DlmsEnum):
    MAX_REC_UNIT = 1, "MAXRECUNIT"
    ASYNC_CONTROL_CHAR_MAP = 2, "ASYNCCONTROLCHARMAP"
    AUTH_PROTOCOL = 3, "AUTHPROTOCOL"
    MAGIC_NUMBER = 5, "MAGICNUMBER"
    PROTOCOL_FIELD_COMPRESSION = 7, "PROTOCOLFIELDCOMPRESSION"
    ADDRESS_AND_CTR_COMPRESSION = 8, "ADDRESSANDCTRCOMPRESSION"
    FCS_ALTERNATIVES = 9, "FCSALTERNATIVES"
    CALLBACK = 13, "CALLBACK"
