from enum import unique

from dlms_enums.base import DlmsEnum
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class ServiceError(DlmsEnum):
    """The choice of error kind in a CONFIRMED-SERVICE-ERROR APDU."""

    APPLICATION_REFERENCE = 0, "APPLICATIONREFERENCE"
    HARDWARE_RESOURCE = 1, "HARDWARERESOURCE"
    VDE_STATE_ERROR = 2, "VDESTATEERROR"
    SERVICE = 3, "SERVICE"
    DEFINITION = 4, "DEFINITION"
    ACCESS = 5, "ACCESS"
    INITIATE = 6, "INITIATE"
    LOAD_DATA_SET = 7, "LOADDATASET"
    TASK = 8, "TASK"
    OTHER_ERROR = 9, "OTHERERROR"


@CATALOG.register
@unique
class ConfirmedServiceError(DlmsEnum):
    INITIATE_ERROR = 1, "InitiateError"
    READ = 5, "Read"
    WRITE = 6, "Write"


@CATALOG.register
@unique
class ExceptionServiceError(DlmsEnum):
    """Service errors of the EXCEPTION-response APDU."""

    NONE = 0, "NONE"
    OPERATION_NOT_POSSIBLE = 1, "OPERATIONNOTPOSSIBLE"
    SERVICE_NOT_SUPPORTED = 2, "SERVICENOTSUPPORTED"
    OTHER_REASON = 3, "OTHERREASON"
    PDU_TOO_LONG = 4, "PDUTOOLONG"
    DECIPHERING_ERROR = 5, "DECIPHERINGERROR"
    INVOCATION_COUNTER_ERROR = 6, "INVOCATIONCOUNTERERROR"


@CATALOG.register
@unique
class ExceptionStateError(DlmsEnum):
    SERVICE_NOT_ALLOWED = 1, "ServiceNotAllowed"
    SERVICE_UNKNOWN = 2, "ServiceUnknown"


@CATALOG.register
@unique
class ApplicationReference(DlmsEnum):
    OTHER = 0, "OTHER"
    TIME_ELAPSED = 1, "TIMEELAPSED"
    APPLICATION_UNREACHABLE = 2, "APPLICATIONUNREACHABLE"
    APPLICATION_REFERENCE_INVALID = 3, "APPLICATIONREFERENCEINVALID"
    APPLICATION_CONTEXT_UNSUPPORTED = 4, "APPLICATIONCONTEXTUNSUPPORTED"
    PROVIDER_COMMUNICATION_ERROR = 5, "PROVIDERCOMMUNICATIONERROR"
    DECIPHERING_ERROR = 6, "DECIPHERINGERROR"


@CATALOG.register
@unique
class HardwareResource(DlmsEnum):
    OTHER = 0, "OTHER"
    MEMORY_UNAVAILABLE = 1, "MEMORYUNAVAILABLE"
    PROCESSOR_RESOURCE_UNAVAILABLE = 2, "PROCESSORRESOURCEUNAVAILABLE"
    MASS_STORAGE_UNAVAILABLE = 3, "MASSSTORAGEUNAVAILABLE"
    OTHER_RESOURCE_UNAVAILABLE = 4, "OTHERRESOURCEUNAVAILABLE"


@CATALOG.register
@unique
class VdeStateError(DlmsEnum):
    OTHER = 0, "Other"
    NO_DLMS_CONTEXT = 1, "NoDlmsContext"
    LOADING_DATA_SET = 2, "LoadingDataSet"
    STATUS_NOCHANGE = 3, "StatusNochange"
    STATUS_INOPERABLE = 4, "StatusInoperable"


@CATALOG.register
@unique
class Service(DlmsEnum):
    OTHER = 0, "Other"
    PDU_SIZE = 1, "PduSize"
    UNSUPPORTED = 2, "Unsupported"


@CATALOG.register
@unique
class Definition(DlmsEnum):
    OTHER = 0, "OTHER"
    OBJECT_UNDEFINED = 1, "OBJECTUNDEFINED"
    OBJECT_CLASS_INCONSISTENT = 2, "OBJECTCLASSINCONSISTENT"
    OBJECT_ATTRIBUTE_INCONSISTENT = 3, "OBJECTATTRIBUTEINCONSISTENT"


@CATALOG.register
@unique
class Access(DlmsEnum):
    OTHER = 0, "OTHER"
    SCOPE_OF_ACCESS_VIOLATED = 1, "SCOPEOFACCESSVIOLATED"
    OBJECT_ACCESS_INVALID = 2, "OBJECTACCESSINVALID"
    HARDWARE_FAULT = 3, "HARDWAREFAULT"
    OBJECT_UNAVAILABLE = 4, "OBJECTUNAVAILABLE"


@CATALOG.register
@unique
class Initiate(DlmsEnum):
    OTHER = 0, "OTHER"
    DLMS_VERSION_TOO_LOW = 1, "DLMSVERSIONTOOLOW"
    INCOMPATIBLE_CONFORMANCE = 2, "INCOMPATIBLECONFORMANCE"
    PDU_SIZE_TOO_SHORT = 3, "PDUSIZETOOSHORT"
    REFUSED_BY_THE_VDE_HANDLER = 4, "REFUSEDBYTHEVDEHANDLER"


@CATALOG.register
@unique
class LoadDataSet(DlmsEnum):
    OTHER = 0, "OTHER"
    PRIMITIVE_OUT_OF_SEQUENCE = 1, "PRIMITIVEOUTOFSEQUENCE"
    NOT_LOADABLE = 2, "NOTLOADABLE"
    DATASET_SIZE_TOO_LARGE = 3, "DATASETSIZETOOLARGE"
    NOT_AWAITED_SEGMENT = 4, "NOTAWAITEDSEGMENT"
    INTERPRETATION_FAILURE = 5, "INTERPRETATIONFAILURE"
    STORAGE_FAILURE = 6, "STORAGEFAILURE"
    DATASET_NOT_READY = 7, "DATASETNOTREADY"


@CATALOG.register
@unique
class Task(DlmsEnum):
    OTHER = 0, "OTHER"
    NO_REMOTE_CONTROL = 1, "NOREMOTECONTROL"
    TI_STOPPED = 2, "TISTOPPED"
    TI_RUNNING = 3, "TIRUNNING"
    TI_UNUSABLE = 4, "TIUNUSABLE"
