"""
All DLMS/COSEM enumerations. Importing the package registers them in CATALOG.
"""

from dlms_enums.enumerations.xdlms import (
    Command,
    AccessServiceCommandType,
    ActionRequestType,
    ActionResponseType,
    GetCommandType,
    SetRequestType,
    SetResponseType,
    VariableAccessSpecification,
    RequestTypes,
    SingleReadResponse,
    Priority,
    ServiceClass,
    Conformance,
    ErrorCode,
)
from dlms_enums.enumerations.service_errors import (
    ServiceError,
    ConfirmedServiceError,
    ExceptionServiceError,
    ExceptionStateError,
    ApplicationReference,
    HardwareResource,
    VdeStateError,
    Service,
    Definition,
    Access,
    Initiate,
    LoadDataSet,
    Task,
)
from dlms_enums.enumerations.acse import (
    ApplicationContextName,
    Authentication,
    AssociationResult,
    SourceDiagnostic,
    AcseServiceProvider,
    ReleaseRequestReason,
    ReleaseResponseReason,
)
from dlms_enums.enumerations.security import (
    Security,
    SecurityPolicy,
    SecuritySuite,
    GlobalKeyType,
    DataProtectionIdentifiedKeyType,
    KeyAgreementScheme,
    Signing,
    SignCipherOrder,
    CryptoKeyType,
    AlgorithmID,
    Ecc,
    RequiredProtection,
    ProtectionType,
    ProtectionMode,
    ProtectionStatus,
)
from dlms_enums.enumerations.x509 import (
    CertificateEntity,
    CertificateType,
    CertificateIdentificationType,
    CertificateVersion,
    KeyUsage,
    ExtendedKeyUsage,
    HashAlgorithm,
    PkcsType,
    PkcsObjectIdentifier,
    X509CertificateType,
    X509Name,
    X9ObjectIdentifier,
)
from dlms_enums.enumerations.cosem import (
    ObjectType,
    DataType,
    Unit,
    AccessMode,
    AccessMode3,
    MethodAccessMode,
    MethodAccessMode3,
    AccessRange,
    SortMethod,
    CaptureMethod,
    RestrictionType,
    ScriptActionType,
    ImageTransferStatus,
    SingleActionScheduleType,
    ControlMode,
    ControlState,
)
from dlms_enums.enumerations.clock import (
    ClockBase,
    ClockStatus,
    DateTimeSkips,
    DateTimeExtraInfo,
    Weekdays,
)
from dlms_enums.enumerations.payment import (
    AccountStatus,
    AccountCreditStatus,
    PaymentMode,
    CreditStatus,
    CreditConfiguration,
    CreditCollectionConfiguration,
    ChargeConfiguration,
    Currency,
)
from dlms_enums.enumerations.communication import (
    BaudRate,
    InterfaceType,
    OpticalProtocolMode,
    LocalPortResponseTime,
    IecTwistedPairSetupMode,
    HdlcFrameType,
    HdlcControlFrame,
    ConnectionState,
    AutoAnswerMode,
    AutoAnswerStatus,
    AutoConnectMode,
    CallType,
    GsmStatus,
    GsmCircuitSwitchStatus,
    GsmPacketSwitchStatus,
    LteCoverageEnhancement,
    PushOperationMethod,
    ServiceType,
    MessageType,
    TransportMode,
    NtpAuthenticationMethod,
    IP4SetupIpOptionType,
    AddressConfigMode,
    PppAuthenticationType,
    PppSetupAuthenticationProtocol,
    PppSetupCallbackOperation,
    PppSetupIPCPOptionType,
    PppSetupLcpOptionType,
)
from dlms_enums.enumerations.mbus import (
    MBusCommand,
    MBusDataHeaderType,
    MBusDeviceType,
    MBusEncryptionMode,
    MBusEncryptionKeyStatus,
    MBusLinkStatus,
    MBusPortCommunicationState,
)
from dlms_enums.enumerations.plc import (
    Modulation,
    PlcDataLinkData,
    PlcSourceAddress,
    PlcHdlcSourceAddress,
    PlcMacSubframes,
    MacState,
    MacCapabilities,
    AddressState,
    GainResolution,
    DeviceType,
    PrimeDcMsgType,
    ZigBeeStatus,
)
from dlms_enums.enumerations.translator import (
    TranslatorGeneralTags,
    TranslatorOutputType,
    Standard,
)

__all__ = [
    "Command",
    "AccessServiceCommandType",
    "ActionRequestType",
    "ActionResponseType",
    "GetCommandType",
    "SetRequestType",
    "SetResponseType",
    "VariableAccessSpecification",
    "RequestTypes",
    "SingleReadResponse",
    "Priority",
    "ServiceClass",
    "Conformance",
    "ErrorCode",
    "ServiceError",
    "ConfirmedServiceError",
    "ExceptionServiceError",
    "ExceptionStateError",
    "ApplicationReference",
    "HardwareResource",
    "VdeStateError",
    "Service",
    "Definition",
    "Access",
    "Initiate",
    "LoadDataSet",
    "Task",
    "ApplicationContextName",
    "Authentication",
    "AssociationResult",
    "SourceDiagnostic",
    "AcseServiceProvider",
    "ReleaseRequestReason",
    "ReleaseResponseReason",
    "Security",
    "SecurityPolicy",
    "SecuritySuite",
    "GlobalKeyType",
    "DataProtectionIdentifiedKeyType",
    "KeyAgreementScheme",
    "Signing",
    "SignCipherOrder",
    "CryptoKeyType",
    "AlgorithmID",
    "Ecc",
    "RequiredProtection",
    "ProtectionType",
    "ProtectionMode",
    "ProtectionStatus",
    "CertificateEntity",
    "CertificateType",
    "CertificateIdentificationType",
    "CertificateVersion",
    "KeyUsage",
    "ExtendedKeyUsage",
    "HashAlgorithm",
    "PkcsType",
    "PkcsObjectIdentifier",
    "X509CertificateType",
    "X509Name",
    "X9ObjectIdentifier",
    "ObjectType",
    "DataType",
    "Unit",
    "AccessMode",
    "AccessMode3",
    "MethodAccessMode",
    "MethodAccessMode3",
    "AccessRange",
    "SortMethod",
    "CaptureMethod",
    "RestrictionType",
    "ScriptActionType",
    "ImageTransferStatus",
    "SingleActionScheduleType",
    "ControlMode",
    "ControlState",
    "ClockBase",
    "ClockStatus",
    "DateTimeSkips",
    "DateTimeExtraInfo",
    "Weekdays",
    "AccountStatus",
    "AccountCreditStatus",
    "PaymentMode",
    "CreditStatus",
    "CreditConfiguration",
    "CreditCollectionConfiguration",
    "ChargeConfiguration",
    "Currency",
    "BaudRate",
    "InterfaceType",
    "OpticalProtocolMode",
    "LocalPortResponseTime",
    "IecTwistedPairSetupMode",
    "HdlcFrameType",
    "HdlcControlFrame",
    "ConnectionState",
    "AutoAnswerMode",
    "AutoAnswerStatus",
    "AutoConnectMode",
    "CallType",
    "GsmStatus",
    "GsmCircuitSwitchStatus",
    "GsmPacketSwitchStatus",
    "LteCoverageEnhancement",
    "PushOperationMethod",
    "ServiceType",
    "MessageType",
    "TransportMode",
    "NtpAuthenticationMethod",
    "IP4SetupIpOptionType",
    "AddressConfigMode",
    "PppAuthenticationType",
    "PppSetupAuthenticationProtocol",
    "PppSetupCallbackOperation",
    "PppSetupIPCPOptionType",
    "PppSetupLcpOptionType",
    "MBusCommand",
    "MBusDataHeaderType",
    "MBusDeviceType",
    "MBusEncryptionMode",
    "MBusEncryptionKeyStatus",
    "MBusLinkStatus",
    "MBusPortCommunicationState",
    "Modulation",
    "PlcDataLinkData",
    "PlcSourceAddress",
    "PlcHdlcSourceAddress",
    "PlcMacSubframes",
    "MacState",
    "MacCapabilities",
    "AddressState",
    "GainResolution",
    "DeviceType",
    "PrimeDcMsgType",
    "ZigBeeStatus",
    "TranslatorGeneralTags",
    "TranslatorOutputType",
    "Standard",
]
