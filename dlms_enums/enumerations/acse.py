from enum import unique

from dlms_enums.base import DlmsEnum
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class ApplicationContextName(DlmsEnum):
    """Application context used in the association."""

    UNKNOWN = 0, "UNKNOWN"
    LOGICAL_NAME = 1, "LOGICALNAME"
    SHORT_NAME = 2, "SHORTNAME"
    LOGICAL_NAME_WITH_CIPHERING = 3, "LOGICALNAMEWITHCIPHERING"
    SHORT_NAME_WITH_CIPHERING = 4, "SHORTNAMEWITHCIPHERING"


@CATALOG.register
@unique
class Authentication(DlmsEnum):
    """Authentication mechanism of the association."""

    NONE = 0, "None"
    LOW = 1, "Low"
    HIGH = 2, "High"
    HIGH_MD5 = 3, "HighMD5"
    HIGH_SHA1 = 4, "HighSHA1"
    HIGH_GMAC = 5, "HighGMAC"
    HIGH_SHA256 = 6, "HighSHA256"
    HIGH_ECDSA = 7, "HighECDSA"


@CATALOG.register
@unique
class AssociationResult(DlmsEnum):
    ACCEPTED = 0, "Accepted"
    PERMANENT_REJECTED = 1, "PermanentRejected"
    TRANSIENT_REJECTED = 2, "TransientRejected"


@CATALOG.register
@unique
class SourceDiagnostic(DlmsEnum):
    """Diagnostics from the ACSE service user when an association is rejected."""

    NONE = 0, "None"
    NO_REASON_GIVEN = 1, "NoReasonGiven"
    APPLICATION_CONTEXT_NAME_NOT_SUPPORTED = 2, "ApplicationContextNameNotSupported"
    CALLING_AP_TITLE_NOT_RECOGNIZED = 3, "CallingApTitleNotRecognized"
    CALLING_AP_INVOCATION_IDENTIFIER_NOT_RECOGNIZED = 4, "CallingApInvocationIdentifierNotRecognized"
    CALLING_AE_QUALIFIER_NOT_RECOGNIZED = 5, "CallingAeQualifierNotRecognized"
    CALLING_AE_INVOCATION_IDENTIFIER_NOT_RECOGNIZED = 6, "CallingAeInvocationIdentifierNotRecognized"
    CALLED_AP_TITLE_NOT_RECOGNIZED = 7, "CalledApTitleNotRecognized"
    CALLED_AP_INVOCATION_IDENTIFIER_NOT_RECOGNIZED = 8, "CalledApInvocationIdentifierNotRecognized"
    CALLED_AE_QUALIFIER_NOT_RECOGNIZED = 9, "CalledAeQualifierNotRecognized"
    CALLED_AE_INVOCATION_IDENTIFIER_NOT_RECOGNIZED = 10, "CalledAeInvocationIdentifierNotRecognized"
    AUTHENTICATION_MECHANISM_NAME_NOT_RECOGNIZED = 11, "AuthenticationMechanismNameNotRecognized"
    AUTHENTICATION_MECHANISM_NAME_REGUIRED = 12, "AuthenticationMechanismNameReguired"
    AUTHENTICATION_FAILURE = 13, "AuthenticationFailure"
    AUTHENTICATION_REQUIRED = 14, "AuthenticationRequired"


@CATALOG.register
@unique
class AcseServiceProvider(DlmsEnum):
    NONE = 0, "NONE"
    NO_REASON_GIVEN = 1, "NOREASONGIVEN"
    NO_COMMON_ACSE_VERSION = 2, "NOCOMMONACSEVERSION"


@CATALOG.register
@unique
class ReleaseRequestReason(DlmsEnum):
    NORMAL = 0, "NORMAL"
    URGENT = 1, "URGENT"
    USER_DEFINED = 30, "USERDEFINED"


@CATALOG.register
@unique
class ReleaseResponseReason(DlmsEnum):
    NORMAL = 0, "NORMAL"
    NOT_FINISHED = 1, "NOTFINISHED"
    USER_DEFINED = 30, "USERDEFINED"
