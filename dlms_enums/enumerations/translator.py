from enum import unique

from dlms_enums.base import DlmsEnum
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class TranslatorGeneralTags(DlmsEnum):
    """Tags used when translating ACSE and xDLMS content to XML."""

    APPLICATION_CONTEXT_NAME = 0xA1, "APPLICATIONCONTEXTNAME"
    NEGOTIATED_QUALITY_OF_SERVICE = 0xBE00, "NEGOTIATEDQUALITYOFSERVICE"
    PROPOSED_DLMS_VERSION_NUMBER = 0xBE01, "PROPOSEDDLMSVERSIONNUMBER"
    PROPOSED_MAX_PDU_SIZE = 0xBE02, "PROPOSEDMAXPDUSIZE"
    PROPOSED_CONFORMANCE = 0xBE03, "PROPOSEDCONFORMANCE"
    VAA_NAME = 0xBE04, "VAANAME"
    NEGOTIATED_CONFORMANCE = 0xBE05, "NEGOTIATEDCONFORMANCE"
    NEGOTIATED_DLMS_VERSION_NUMBER = 0xBE06, "NEGOTIATEDDLMSVERSIONNUMBER"
    NEGOTIATED_MAX_PDU_SIZE = 0xBE07, "NEGOTIATEDMAXPDUSIZE"
    CONFORMANCE_BIT = 0xBE08, "CONFORMANCEBIT"
    PROPOSED_QUALITY_OF_SERVICE = 0xBE09, "PROPOSEDQUALITYOFSERVICE"
    SENDER_ACSE_REQUIREMENTS = 0x8A, "SENDERACSEREQUIREMENTS"
    RESPONDER_ACSE_REQUIREMENT = 0x88, "RESPONDERACSEREQUIREMENT"
    RESPONDING_MECHANISM_NAME = 0x89, "RESPONDINGMECHANISMNAME"
    CALLING_MECHANISM_NAME = 0x8B, "CALLINGMECHANISMNAME"
    CALLING_AUTHENTICATION = 0xAC, "CALLINGAUTHENTICATION"
    RESPONDING_AUTHENTICATION = 0x80, "RESPONDINGAUTHENTICATION"
    ASSOCIATION_RESULT = 0xA2, "ASSOCIATIONRESULT"
    RESULT_SOURCE_DIAGNOSTIC = 0xA3, "RESULTSOURCEDIAGNOSTIC"
    ACSE_SERVICE_USER = 0xA301, "ACSESERVICEUSER"
    ACSE_SERVICE_PROVIDER = 0xA302, "ACSESERVICEPROVIDER"
    CALLING_AP_TITLE = 0xA6, "CALLINGAPTITLE"
    RESPONDING_AP_TITLE = 0xA4, "RESPONDINGAPTITLE"
    DEDICATED_KEY = 0xA8, "DEDICATEDKEY"
    CALLING_AE_INVOCATION_ID = 0xA9, "CALLINGAEINVOCATIONID"
    CALLED_AE_INVOCATION_ID = 0xA5, "CALLEDAEINVOCATIONID"
    CALLING_AE_QUALIFIER = 0xA7, "CALLINGAEQUALIFIER"
    CHAR_STRING = 0xAA, "CHARSTRING"
    USER_INFORMATION = 0xAB, "USERINFORMATION"
    RESPONDING_AE_INVOCATION_ID = 0xAD, "RESPONDINGAEINVOCATIONID"
    PRIME_NEW_DEVICE_NOTIFICATION = 0xAE, "PRIMENEWDEVICENOTIFICATION"
    PRIME_REMOVE_DEVICE_NOTIFICATION = 0xAF, "PRIMEREMOVEDEVICENOTIFICATION"
    PRIME_START_REPORTING_METERS = 0xB0, "PRIMESTARTREPORTINGMETERS"
    PRIME_DELETE_METERS = 0xB1, "PRIMEDELETEMETERS"
    PRIME_ENABLE_AUTO_CLOSE = 0xB2, "PRIMEENABLEAUTOCLOSE"
    PRIME_DISABLE_AUTO_CLOSE = 0xB3, "PRIMEDISABLEAUTOCLOSE"


@CATALOG.register
@unique
class TranslatorOutputType(DlmsEnum):
    SIMPLE_XML = 0, "SimpleXml"
    STANDARD_XML = 1, "StandardXml"


@CATALOG.register
@unique
class Standard(DlmsEnum):
    DLMS = 0, "DLMS"
    INDIA = 1, "INDIA"
    ITALY = 2, "ITALY"
    SAUDI_ARABIA = 3, "SAUDIARABIA"
    IDIS = 4, "IDIS"
    SPAIN = 5, "SPAIN"
