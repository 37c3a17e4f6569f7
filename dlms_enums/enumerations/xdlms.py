"""
xDLMS APDU tags, service choices, conformance bits and data access results.
"""

from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class Command(DlmsEnum):
    """
    APDU tags of xDLMS, ACSE and HDLC frames. The glo/ded variants are the
    global and dedicated key ciphered versions of the plain service.
    """

    NONE = 0, "None"
    INITIATE_REQUEST = 0x1, "InitiateRequest"
    INITIATE_RESPONSE = 0x8, "InitiateResponse"
    READ_REQUEST = 0x5, "ReadRequest"
    READ_RESPONSE = 0xC, "ReadResponse"
    WRITE_REQUEST = 0x6, "WriteRequest"
    WRITE_RESPONSE = 0xD, "WriteResponse"
    GET_REQUEST = 0xC0, "GetRequest"
    GET_RESPONSE = 0xC4, "GetResponse"
    SET_REQUEST = 0xC1, "SetRequest"
    SET_RESPONSE = 0xC5, "SetResponse"
    METHOD_REQUEST = 0xC3, "MethodRequest"
    METHOD_RESPONSE = 0xC7, "MethodResponse"
    # HDLC frames
    DISCONNECT_MODE = 0x1F, "DisconnectMode"
    UNACCEPTABLE_FRAME = 0x97, "UnacceptableFrame"
    SNRM = 0x93, "Snrm"
    UA = 0x73, "Ua"
    AARQ = 0x60, "Aarq"
    AARE = 0x61, "Aare"
    DISCONNECT_REQUEST = 0x53, "DisconnectRequest"
    RELEASE_REQUEST = 0x62, "ReleaseRequest"
    RELEASE_RESPONSE = 0x63, "ReleaseResponse"
    CONFIRMED_SERVICE_ERROR = 0x0E, "ConfirmedServiceError"
    EXCEPTION_RESPONSE = 0xD8, "ExceptionResponse"
    GENERAL_BLOCK_TRANSFER = 0xE0, "GeneralBlockTransfer"
    ACCESS_REQUEST = 0xD9, "AccessRequest"
    ACCESS_RESPONSE = 0xDA, "AccessResponse"
    DATA_NOTIFICATION = 0x0F, "DataNotification"
    DATA_NOTIFICATION_CONFIRM = 16, "DataNotificationConfirm"
    # global key
    GLO_GET_REQUEST = 0xC8, "GloGetRequest"
    GLO_GET_RESPONSE = 0xCC, "GloGetResponse"
    GLO_SET_REQUEST = 0xC9, "GloSetRequest"
    GLO_SET_RESPONSE = 0xCD, "GloSetResponse"
    GLO_EVENT_NOTIFICATION = 0xCA, "GloEventNotification"
    GLO_METHOD_REQUEST = 0xCB, "GloMethodRequest"
    GLO_METHOD_RESPONSE = 0xCF, "GloMethodResponse"
    GLO_INITIATE_REQUEST = 0x21, "GloInitiateRequest"
    GLO_READ_REQUEST = 37, "GloReadRequest"
    GLO_WRITE_REQUEST = 38, "GloWriteRequest"
    GLO_INITIATE_RESPONSE = 0x28, "GloInitiateResponse"
    GLO_READ_RESPONSE = 44, "GloReadResponse"
    GLO_WRITE_RESPONSE = 45, "GloWriteResponse"
    GLO_CONFIRMED_SERVICE_ERROR = 46, "GloConfirmedServiceError"
    GLO_INFORMATION_REPORT = 56, "GloInformationReport"
    GENERAL_GLO_CIPHERING = 0xDB, "GeneralGloCiphering"
    GENERAL_DED_CIPHERING = 0xDC, "GeneralDedCiphering"
    GENERAL_CIPHERING = 0xDD, "GeneralCiphering"
    GENERAL_SIGNING = 0xDF, "GeneralSigning"
    INFORMATION_REPORT = 0x18, "InformationReport"
    EVENT_NOTIFICATION = 0xC2, "EventNotification"
    DED_INITIATE_REQUEST = 65, "DedInitiateRequest"
    DED_READ_REQUEST = 69, "DedReadRequest"
    DED_WRITE_REQUEST = 70, "DedWriteRequest"
    DED_INITIATE_RESPONSE = 72, "DedInitiateResponse"
    DED_READ_RESPONSE = 76, "DedReadResponse"
    DED_WRITE_RESPONSE = 77, "DedWriteResponse"
    DED_CONFIRMED_SERVICE_ERROR = 78, "DedConfirmedServiceError"
    DED_UNCONFIRMED_WRITE_REQUEST = 86, "DedUnconfirmedWriteRequest"
    DED_INFORMATION_REPORT = 88, "DedInformationReport"
    # dedicated key
    DED_GET_REQUEST = 0xD0, "DedGetRequest"
    DED_GET_RESPONSE = 0xD4, "DedGetResponse"
    DED_SET_REQUEST = 0xD1, "DedSetRequest"
    DED_SET_RESPONSE = 0xD5, "DedSetResponse"
    DED_EVENT_NOTIFICATION = 0xD2, "DedEventNotification"
    DED_METHOD_REQUEST = 0xD3, "DedMethodRequest"
    DED_METHOD_RESPONSE = 0xD7, "DedMethodResponse"
    GATEWAY_REQUEST = 0xE6, "GatewayRequest"
    GATEWAY_RESPONSE = 0xE7, "GatewayResponse"
    DISCOVER_REQUEST = 0x1D, "DiscoverRequest"
    DISCOVER_REPORT = 0x1E, "DiscoverReport"
    REGISTER_REQUEST = 0x1C, "RegisterRequest"
    PING_REQUEST = 0x19, "PingRequest"
    PING_RESPONSE = 0x1A, "PingResponse"


@CATALOG.register
@unique
class AccessServiceCommandType(DlmsEnum):
    GET = 1, "Get"
    SET = 2, "Set"
    ACTION = 3, "Action"


@CATALOG.register
@unique
class ActionRequestType(DlmsEnum):
    """Choice of the ACTION-request APDU."""

    NORMAL = 1, "NORMAL"
    NEXT_BLOCK = 2, "NEXTBLOCK"
    WITH_LIST = 3, "WITHLIST"
    WITH_FIRST_BLOCK = 4, "WITHFIRSTBLOCK"
    WITH_LIST_AND_FIRST_BLOCK = 5, "WITHLISTANDFIRSTBLOCK"
    WITH_BLOCK = 6, "WITHBLOCK"


@CATALOG.register
@unique
class ActionResponseType(DlmsEnum):
    NORMAL = 1, "NORMAL"
    WITH_BLOCK = 2, "WITHBLOCK"
    WITH_LIST = 3, "WITHLIST"
    NEXT_BLOCK = 4, "NEXTBLOCK"


@CATALOG.register
@unique
class GetCommandType(DlmsEnum):
    """Choice of GET-request and GET-response APDUs."""

    NORMAL = 1, "NORMAL"
    NEXT_DATA_BLOCK = 2, "NEXTDATABLOCK"
    WITH_LIST = 3, "WITHLIST"


@CATALOG.register
@unique
class SetRequestType(DlmsEnum):
    """Choice of the SET-request APDU."""

    NORMAL = 1, "NORMAL"
    FIRST_DATA_BLOCK = 2, "FIRSTDATABLOCK"
    WITH_DATA_BLOCK = 3, "WITHDATABLOCK"
    WITH_LIST = 4, "WITHLIST"
    WITH_LIST_AND_WITH_FIRST_DATABLOCK = 5, "WITHLISTANDWITHFIRSTDATABLOCK"


@CATALOG.register
@unique
class SetResponseType(DlmsEnum):
    """Choice of the SET-response APDU."""

    NORMAL = 1, "NORMAL"
    DATA_BLOCK = 2, "DATABLOCK"
    LAST_DATA_BLOCK = 3, "LASTDATABLOCK"
    LAST_DATA_BLOCK_WITH_LIST = 4, "LASTDATABLOCKWITHLIST"
    WITH_LIST = 5, "WITHLIST"


@CATALOG.register
@unique
class VariableAccessSpecification(DlmsEnum):
    """Variable access used in short name referencing read and write requests."""

    VARIABLE_NAME = 2, "VARIABLENAME"
    PARAMETERISED_ACCESS = 4, "PARAMETERISEDACCESS"
    BLOCK_NUMBER_ACCESS = 5, "BLOCKNUMBERACCESS"
    READ_DATA_BLOCK_ACCESS = 6, "READDATABLOCKACCESS"
    WRITE_DATA_BLOCK_ACCESS = 7, "WRITEDATABLOCKACCESS"


@CATALOG.register
@unique
class RequestTypes(DlmsEnum):
    NONE = 0, "NONE"
    DATA_BLOCK = 1, "DATABLOCK"
    FRAME = 2, "FRAME"
    GBT = 4, "GBT"


@CATALOG.register
@unique
class SingleReadResponse(DlmsEnum):
    DATA = 0, "DATA"
    DATA_ACCESS_ERROR = 1, "DATAACCESSERROR"
    DATA_BLOCK_RESULT = 2, "DATABLOCKRESULT"
    BLOCK_NUMBER = 3, "BLOCKNUMBER"


@CATALOG.register
@unique
class Priority(DlmsEnum):
    NORMAL = 0, "Normal"
    HIGH = 1, "High"


@CATALOG.register
@unique
class ServiceClass(DlmsEnum):
    UNCONFIRMED = 0, "UnConfirmed"
    CONFIRMED = 1, "Confirmed"


@CATALOG.register
@unique
class Conformance(DlmsFlag):
    """The xDLMS conformance block.

    Bits are numbered with bit 0 as the LSB, so ``ACTION`` is bit 23. Parse and
    print it as a comma separated list, ex: ``"Get,Set,Action"``."""

    NONE = 0, "None"
    RESERVED_ZERO = 0x1, "ReservedZero"
    GENERAL_PROTECTION = 0x2, "GeneralProtection"
    GENERAL_BLOCK_TRANSFER = 0x4, "GeneralBlockTransfer"
    READ = 0x8, "Read"
    WRITE = 0x10, "Write"
    UNCONFIRMED_WRITE = 0x20, "UnconfirmedWrite"
    DELTA_VALUE_ENCODING = 0x40, "DeltaValueEncoding"
    RESERVED_SEVEN = 0x80, "ReservedSeven"
    ATTRIBUTE0_SUPPORTED_WITH_SET = 0x100, "Attribute0SupportedWithSet"
    PRIORITY_MGMT_SUPPORTED = 0x200, "PriorityMgmtSupported"
    ATTRIBUTE0_SUPPORTED_WITH_GET = 0x400, "Attribute0SupportedWithGet"
    BLOCK_TRANSFER_WITH_GET_OR_READ = 0x800, "BlockTransferWithGetOrRead"
    BLOCK_TRANSFER_WITH_SET_OR_WRITE = 0x1000, "BlockTransferWithSetOrWrite"
    BLOCK_TRANSFER_WITH_ACTION = 0x2000, "BlockTransferWithAction"
    MULTIPLE_REFERENCES = 0x4000, "MultipleReferences"
    INFORMATION_REPORT = 0x8000, "InformationReport"
    DATA_NOTIFICATION = 0x10000, "DataNotification"
    ACCESS = 0x20000, "Access"
    PARAMETERIZED_ACCESS = 0x40000, "ParameterizedAccess"
    GET = 0x80000, "Get"
    SET = 0x100000, "Set"
    SELECTIVE_ACCESS = 0x200000, "SelectiveAccess"
    EVENT_NOTIFICATION = 0x400000, "EventNotification"
    ACTION = 0x800000, "Action"


@CATALOG.register
@unique
class ErrorCode(DlmsEnum):
    """
    Result codes of a data access.

    The negative codes are not sent on the wire. They report HDLC link layer
    conditions in the same value range.
    """

    DISCONNECT_MODE = -4, "DisconnectMode"
    RECEIVE_NOT_READY = -3, "ReceiveNotReady"
    REJECTED = -2, "Rejected"
    UNACCEPTABLE_FRAME = -1, "UnacceptableFrame"
    OK = 0, "Ok"
    HARDWARE_FAULT = 1, "HardwareFault"
    TEMPORARY_FAILURE = 2, "TemporaryFailure"
    READ_WRITE_DENIED = 3, "ReadWriteDenied"
    UNDEFINED_OBJECT = 4, "UndefinedObject"
    INCONSISTENT_CLASS = 9, "InconsistentClass"
    UNAVAILABLE_OBJECT = 11, "UnavailableObject"
    UNMATCHED_TYPE = 12, "UnmatchedType"
    ACCESS_VIOLATED = 13, "AccessViolated"
    DATA_BLOCK_UNAVAILABLE = 14, "DataBlockUnavailable"
    LONG_GET_OR_READ_ABORTED = 15, "LongGetOrReadAborted"
    NO_LONG_GET_OR_READ_IN_PROGRESS = 16, "NoLongGetOrReadInProgress"
    LONG_SET_OR_WRITE_ABORTED = 17, "LongSetOrWriteAborted"
    NO_LONG_SET_OR_WRITE_IN_PROGRESS = 18, "NoLongSetOrWriteInProgress"
    DATA_BLOCK_NUMBER_INVALID = 19, "DataBlockNumberInvalid"
    OTHER_REASON = 250, "OtherReason"
