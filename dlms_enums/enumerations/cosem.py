"""
COSEM interface classes, A-XDR data types, units and access rights.
"""

from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class ObjectType(DlmsEnum):
    """COSEM interface class ids."""

    NONE = 0, "None"
    ACTION_SCHEDULE = 22, "ActionSchedule"
    ACTIVITY_CALENDAR = 20, "ActivityCalendar"
    ASSOCIATION_LOGICAL_NAME = 15, "AssociationLogicalName"
    ASSOCIATION_SHORT_NAME = 12, "AssociationShortName"
    AUTO_ANSWER = 28, "AutoAnswer"
    AUTO_CONNECT = 29, "AutoConnect"
    CLOCK = 8, "Clock"
    DATA = 1, "Data"
    DEMAND_REGISTER = 5, "DemandRegister"
    MAC_ADDRESS_SETUP = 43, "MacAddressSetup"
    EXTENDED_REGISTER = 4, "ExtendedRegister"
    GPRS_SETUP = 45, "GprsSetup"
    IEC_HDLC_SETUP = 23, "IecHdlcSetup"
    IEC_LOCAL_PORT_SETUP = 19, "IecLocalPortSetup"
    IEC_TWISTED_PAIR_SETUP = 24, "IecTwistedPairSetup"
    IP4_SETUP = 42, "IP4Setup"
    GSM_DIAGNOSTIC = 47, "GSMDiagnostic"
    IP6_SETUP = 48, "IP6Setup"
    MBUS_SLAVE_PORT_SETUP = 25, "MBusSlavePortSetup"
    MODEM_CONFIGURATION = 27, "ModemConfiguration"
    PUSH_SETUP = 40, "PushSetup"
    PPP_SETUP = 44, "PppSetup"
    PROFILE_GENERIC = 7, "ProfileGeneric"
    REGISTER = 3, "Register"
    REGISTER_ACTIVATION = 6, "RegisterActivation"
    REGISTER_MONITOR = 21, "RegisterMonitor"
    IEC8802_LLC_TYPE1_SETUP = 57, "Iec8802LlcType1Setup"
    IEC8802_LLC_TYPE2_SETUP = 58, "Iec8802LlcType2Setup"
    IEC8802_LLC_TYPE3_SETUP = 59, "Iec8802LlcType3Setup"
    DISCONNECT_CONTROL = 70, "DisconnectControl"
    LIMITER = 71, "Limiter"
    MBUS_CLIENT = 72, "MBusClient"
    COMPACT_DATA = 62, "CompactData"
    PARAMETER_MONITOR = 65, "ParameterMonitor"
    WIRELESS_MODE_QCHANNEL = 73, "WirelessModeQchannel"
    MBUS_MASTER_PORT_SETUP = 74, "MBusMasterPortSetup"
    MBUS_PORT_SETUP = 76, "MBusPortSetup"
    MBUS_DIAGNOSTIC = 77, "MBusDiagnostic"
    LLC_SSCS_SETUP = 80, "LlcSscsSetup"
    PRIME_NB_OFDM_PLC_PHYSICAL_LAYER_COUNTERS = 81, "PrimeNbOfdmPlcPhysicalLayerCounters"
    PRIME_NB_OFDM_PLC_MAC_SETUP = 82, "PrimeNbOfdmPlcMacSetup"
    PRIME_NB_OFDM_PLC_MAC_FUNCTIONAL_PARAMETERS = 83, "PrimeNbOfdmPlcMacFunctionalParameters"
    PRIME_NB_OFDM_PLC_MAC_COUNTERS = 84, "PrimeNbOfdmPlcMacCounters"
    PRIME_NB_OFDM_PLC_MAC_NETWORK_ADMINISTRATION_DATA = 85, "PrimeNbOfdmPlcMacNetworkAdministrationData"
    PRIME_NB_OFDM_PLC_APPLICATIONS_IDENTIFICATION = 86, "PrimeNbOfdmPlcApplicationsIdentification"
    REGISTER_TABLE = 61, "RegisterTable"
    NTP_SETUP = 100, "NtpSetup"
    ZIGBEE_SAS_STARTUP = 101, "ZigBeeSasStartup"
    ZIGBEE_SAS_JOIN = 102, "ZigBeeSasJoin"
    ZIGBEE_SAS_APS_FRAGMENTATION = 103, "ZigBeeSasApsFragmentation"
    ZIGBEE_NETWORK_CONTROL = 104, "ZigBeeNetworkControl"
    DATA_PROTECTION = 30, "DataProtection"
    ACCOUNT = 111, "Account"
    CREDIT = 112, "Credit"
    CHARGE = 113, "Charge"
    TOKEN_GATEWAY = 115, "TokenGateway"
    IEC6205541_ATTRIBUTES = 116, "IEC6205541Attributes"
    ARRAY_MANAGER = 123, "ArrayManager"
    SAP_ASSIGNMENT = 17, "SapAssignment"
    IMAGE_TRANSFER = 18, "ImageTransfer"
    SCHEDULE = 10, "Schedule"
    SCRIPT_TABLE = 9, "ScriptTable"
    SMTP_SETUP = 2, "SMTPSetup"
    SPECIAL_DAYS_TABLE = 11, "SpecialDaysTable"
    STATUS_MAPPING = 63, "StatusMapping"
    SECURITY_SETUP = 64, "SecuritySetup"
    TCPUDP_SETUP = 41, "TCPUDPSetup"
    UTILITY_TABLES = 26, "UtilityTables"
    SFSK_PHY_MAC_SET_UP = 50, "SFSKPhyMacSetUp"
    SFSK_ACTIVE_INITIATOR = 51, "SFSKActiveInitiator"
    SFSK_MAC_SYNCHRONIZATION_TIMEOUTS = 52, "SFSKMacSynchronizationTimeouts"
    SFSK_MAC_COUNTERS = 53, "SFSKMacCounters"
    IEC61334_4_32_LLC_SETUP = 55, "Iec61334_4_32LlcSetup"
    SFSK_REPORTING_SYSTEM_LIST = 56, "SFSKReportingSystemList"
    ARBITRATOR = 68, "Arbitrator"
    G3_PLC_MAC_LAYER_COUNTERS = 90, "G3PlcMacLayerCounters"
    G3_PLC_MAC_SETUP = 91, "G3PlcMacSetup"
    G3_PLC_6LOWPAN = 92, "G3Plc6LoWPan"
    FUNCTION_CONTROL = 122, "FunctionControl"
    COMMUNICATION_PORT_PROTECTION = 124, "CommunicationPortProtection"
    LTE_MONITORING = 151, "LteMonitoring"
    COAP_SETUP = 152, "CoAPSetup"
    COAP_DIAGNOSTIC = 153, "CoAPDiagnostic"
    G3_PLC_HYBRID_RF_MAC_LAYER_COUNTERS = 160, "G3PlcHybridRfMacLayerCounters"
    G3_PLC_HYBRID_RF_MAC_SETUP = 161, "G3PlcHybridRfMacSetup"
    G3_PLC_HYBRID_6LOWPAN_ADAPTATION_LAYER_SETUP = 162, "G3PlcHybrid6LoWPANAdaptationLayerSetup"
    TARIFF_PLAN = 8192, "TariffPlan"


@CATALOG.register
@unique
class DataType(DlmsEnum):
    """Tags of the A-XDR encoded data types."""

    NONE = 0, "None"
    ARRAY = 1, "Array"
    BCD = 13, "Bcd"
    BIT_STRING = 4, "BitString"
    BOOLEAN = 3, "Boolean"
    COMPACT_ARRAY = 0x13, "CompactArray"
    DATE = 0x1A, "Date"
    DATE_TIME = 0x19, "DateTime"
    ENUM = 0x16, "Enum"
    FLOAT32 = 0x17, "Float32"
    FLOAT64 = 0x18, "Float64"
    INT16 = 0x10, "Int16"
    INT32 = 5, "Int32"
    INT64 = 20, "Int64"
    INT8 = 15, "Int8"
    OCTET_STRING = 9, "OctetString"
    STRING = 10, "String"
    STRING_UTF8 = 12, "StringUTF8"
    STRUCTURE = 2, "Structure"
    TIME = 0x1B, "Time"
    DELTA_INT8 = 28, "DeltaInt8"
    DELTA_INT16 = 29, "DeltaInt16"
    DELTA_INT32 = 30, "DeltaInt32"
    DELTA_UINT8 = 31, "DeltaUint8"
    DELTA_UINT16 = 32, "DeltaUint16"
    DELTA_UINT32 = 33, "DeltaUint32"
    UINT16 = 0x12, "Uint16"
    UINT32 = 6, "Uint32"
    UINT64 = 0x15, "Uint64"
    UINT8 = 0x11, "Uint8"


@CATALOG.register
@unique
class Unit(DlmsEnum):
    """
    Units of the COSEM scaler_unit as defined in the Blue Book.

    Codes 1 - 72 are the SI units. Codes 128 - 174 are the imperial and US
    customary units.
    """

    NONE = 0, "None"
    YEAR = 1, "Year"
    MONTH = 2, "Month"
    WEEK = 3, "Week"
    DAY = 4, "Day"
    HOUR = 5, "Hour"
    MINUTE = 6, "Minute"
    SECOND = 7, "Second"
    PHASE_ANGLE_DEGREE = 8, "PhaseAngleDegree"
    TEMPERATURE = 9, "Temperature"
    LOCAL_CURRENCY = 10, "LocalCurrency"
    LENGTH = 11, "Length"
    SPEED = 12, "Speed"
    VOLUME_CUBIC_METER = 13, "VolumeCubicMeter"
    CORRECTED_VOLUME = 14, "CorrectedVolume"
    VOLUME_FLUX_HOUR = 15, "VolumeFluxHour"
    CORRECTED_VOLUME_FLUX_HOUR = 16, "CorrectedVolumeFluxHour"
    VOLUME_FLUX_DAY = 17, "VolumeFluxDay"
    CORRECTED_VOLUME_FLUX_DAY = 18, "CorrectedVolumeFluxDay"
    VOLUME_LITER = 19, "VolumeLiter"
    MASS_KG = 20, "MassKg"
    FORCE = 21, "Force"
    ENERGY = 22, "Energy"
    PRESSURE_PASCAL = 23, "PressurePascal"
    PRESSURE_BAR = 24, "PressureBar"
    ENERGY_JOULE = 25, "EnergyJoule"
    THERMAL_POWER = 26, "ThermalPower"
    ACTIVE_POWER = 27, "ActivePower"
    APPARENT_POWER = 28, "ApparentPower"
    REACTIVE_POWER = 29, "ReactivePower"
    ACTIVE_ENERGY = 30, "ActiveEnergy"
    APPARENT_ENERGY = 31, "ApparentEnergy"
    REACTIVE_ENERGY = 32, "ReactiveEnergy"
    CURRENT = 33, "Current"
    ELECTRICAL_CHARGE = 34, "ElectricalCharge"
    VOLTAGE = 35, "Voltage"
    ELECTRICAL_FIELD_STRENGTH = 36, "ElectricalFieldStrength"
    CAPACITY = 37, "Capacity"
    RESISTANCE = 38, "Resistance"
    RESISTIVITY = 39, "Resistivity"
    MAGNETIC_FLUX = 40, "MagneticFlux"
    INDUCTION = 41, "Induction"
    MAGNETIC = 42, "Magnetic"
    INDUCTIVITY = 43, "Inductivity"
    FREQUENCY = 44, "Frequency"
    ACTIVE = 45, "Active"
    REACTIVE = 46, "Reactive"
    APPARENT = 47, "Apparent"
    V260 = 48, "V260"
    A260 = 49, "A260"
    MASS_KG_PER_SECOND = 50, "MassKgPerSecond"
    CONDUCTANCE = 51, "Conductance"
    KELVIN = 52, "Kelvin"
    RU2H = 53, "RU2h"
    RI2H = 54, "RI2h"
    CUBIC_METER_RV = 55, "CubicMeterRV"
    PERCENTAGE = 56, "Percentage"
    AMPERE_HOUR = 57, "AmpereHour"
    ENERGY_PER_VOLUME = 60, "EnergyPerVolume"
    WOBBE = 61, "Wobbe"
    MOLE_PERCENT = 62, "MolePercent"
    MASS_DENSITY = 63, "MassDensity"
    PASCAL_SECOND = 64, "PascalSecond"
    JOULE_KILOGRAM = 65, "JouleKilogram"
    PRESSURE_GRAM_PER_SQUARE_CENTIMETER = 66, "PressureGramPerSquareCentimeter"
    PRESSURE_ATMOSPHERE = 67, "PressureAtmosphere"
    SIGNAL_STRENGTH_MILLI_WATT = 70, "SignalStrengthMilliWatt"
    SIGNAL_STRENGTH_MICRO_VOLT = 71, "SignalStrengthMicroVolt"
    DB = 72, "dB"
    INCH = 128, "Inch"
    FOOT = 129, "Foot"
    POUND = 130, "Pound"
    FAHRENHEIT = 131, "Fahrenheit"
    RANKINE = 132, "Rankine"
    SQUARE_INCH = 133, "SquareInch"
    SQUARE_FOOT = 134, "SquareFoot"
    ACRE = 135, "Acre"
    CUBIC_INCH = 136, "CubicInch"
    CUBIC_FOOT = 137, "CubicFoot"
    ACRE_FOOT = 138, "AcreFoot"
    GALLON_IMPERIAL = 139, "GallonImperial"
    GALLON_US = 140, "GallonUS"
    POUND_FORCE = 141, "PoundForce"
    POUND_FORCE_PER_SQUARE_INCH = 142, "PoundForcePerSquareInch"
    POUND_PER_CUBIC_FOOT = 143, "PoundPerCubicFoot"
    POUND_PER_FOOT_SECOND = 144, "PoundPerFootSecond"
    SQUARE_FOOT_PER_SECOND = 145, "SquareFootPerSecond"
    BRITISH_THERMAL_UNIT = 146, "BritishThermalUnit"
    THERM_EU = 147, "ThermEU"
    THERM_US = 148, "ThermUS"
    BRITISH_THERMAL_UNIT_PER_POUND = 149, "BritishThermalUnitPerPound"
    BRITISH_THERMAL_UNIT_PER_CUBIC_FOOT = 150, "BritishThermalUnitPerCubicFoot"
    CUBIC_FEET = 151, "CubicFeet"
    FOOT_PER_SECOND = 152, "FootPerSecond"
    CUBIC_FOOT_PER_SECOND = 153, "CubicFootPerSecond"
    CUBIC_FOOT_PER_MIN = 154, "CubicFootPerMin"
    CUBIC_FOOT_PER_HOUR = 155, "CubicFootPerHour"
    CUBIC_FOOT_PER_DAY = 156, "CubicFootPerDay"
    ACRE_FOOT_PER_SECOND = 157, "AcreFootPerSecond"
    ACRE_FOOT_PER_MIN = 158, "AcreFootPerMin"
    ACRE_FOOT_PER_HOUR = 159, "AcreFootPerHour"
    ACRE_FOOT_PER_DAY = 160, "AcreFootPerDay"
    IMPERIAL_GALLON = 161, "ImperialGallon"
    IMPERIAL_GALLON_PER_SECOND = 162, "ImperialGallonPerSecond"
    IMPERIAL_GALLON_PER_MIN = 163, "ImperialGallonPerMin"
    IMPERIAL_GALLON_PER_HOUR = 164, "ImperialGallonPerHour"
    IMPERIAL_GALLON_PER_DAY = 165, "ImperialGallonPerDay"
    US_GALLON = 166, "USGallon"
    US_GALLON_PER_SECOND = 167, "USGallonPerSecond"
    US_GALLON_PER_MIN = 168, "USGallonPerMin"
    US_GALLON_PER_HOUR = 169, "USGallonPerHour"
    US_GALLON_PER_DAY = 170, "USGallonPerDay"
    BRITISH_THERMAL_UNIT_PER_SECOND = 171, "BritishThermalUnitPerSecond"
    BRITISH_THERMAL_UNIT_PER_MINUTE = 172, "BritishThermalUnitPerMinute"
    BRITISH_THERMAL_UNIT_PER_HOUR = 173, "BritishThermalUnitPerHour"
    BRITISH_THERMAL_UNIT_PER_DAY = 174, "BritishThermalUnitPerDay"
    OTHER_UNIT = 254, "OtherUnit"
    NO_UNIT = 255, "NoUnit"


@CATALOG.register
@unique
class AccessMode(DlmsEnum):
    """Attribute access modes for Logical Name Association version 0 - 2."""

    NO_ACCESS = 0, "NOACCESS"
    READ = 1, "READ"
    WRITE = 2, "WRITE"
    READ_WRITE = 3, "READWRITE"
    AUTHENTICATED_READ = 4, "AUTHENTICATEDREAD"
    AUTHENTICATED_WRITE = 5, "AUTHENTICATEDWRITE"
    AUTHENTICATED_READ_WRITE = 6, "AUTHENTICATEDREADWRITE"


@CATALOG.register
@unique
class AccessMode3(DlmsFlag):
    """Attribute access rights for Logical Name Association version 3."""

    NO_ACCESS = 0, "NOACCESS"
    READ = 1, "READ"
    WRITE = 2, "WRITE"
    AUTHENTICATED_REQUEST = 4, "AUTHENTICATEDREQUEST"
    ENCRYPTED_REQUEST = 8, "ENCRYPTEDREQUEST"
    DIGITALLY_SIGNED_REQUEST = 16, "DIGITALLYSIGNEDREQUEST"
    AUTHENTICATED_RESPONSE = 32, "AUTHENTICATEDRESPONSE"
    ENCRYPTED_RESPONSE = 64, "ENCRYPTEDRESPONSE"
    DIGITALLY_SIGNED_RESPONSE = 128, "DIGITALLYSIGNEDRESPONSE"


@CATALOG.register
@unique
class MethodAccessMode(DlmsEnum):
    NO_ACCESS = 0x0, "NOACCESS"
    ACCESS = 0x1, "ACCESS"
    AUTHENTICATED_ACCESS = 0x2, "AUTHENTICATEDACCESS"


@CATALOG.register
@unique
class MethodAccessMode3(DlmsFlag):
    """Method access rights for Logical Name Association version 3."""

    NO_ACCESS = 0x0, "NOACCESS"
    ACCESS = 0x1, "ACCESS"
    AUTHENTICATED_REQUEST = 0x4, "AUTHENTICATEDREQUEST"
    ENCRYPTED_REQUEST = 0x8, "ENCRYPTEDREQUEST"
    DIGITALLY_SIGNED_REQUEST = 0x10, "DIGITALLYSIGNEDREQUEST"
    AUTHENTICATED_RESPONSE = 0x20, "AUTHENTICATEDRESPONSE"
    ENCRYPTED_RESPONSE = 0x40, "ENCRYPTEDRESPONSE"
    DIGITALLY_SIGNED_RESPONSE = 0x80, "DIGITALLYSIGNEDRESPONSE"


@CATALOG.register
@unique
class AccessRange(DlmsEnum):
    ENTRY = 0, "ENTRY"
    LAST = 1, "LAST"
    RANGE = 2, "RANGE"
    ALL = 3, "ALL"


@CATALOG.register
@unique
class SortMethod(DlmsEnum):
    FIFO = 1, "FiFo"
    LIFO = 2, "LiFo"
    LARGEST = 3, "Largest"
    SMALLEST = 4, "Smallest"
    NEAREST_TO_ZERO = 5, "NearestToZero"
    FAREST_FROM_ZERO = 6, "FarestFromZero"


@CATALOG.register
@unique
class CaptureMethod(DlmsEnum):
    INVOKE = 0, "INVOKE"
    IMPLICIT = 1, "IMPLICIT"


@CATALOG.register
@unique
class RestrictionType(DlmsEnum):
    NONE = 0, "None"
    DATE = 1, "Date"
    ENTRY = 2, "Entry"


@CATALOG.register
@unique
class ScriptActionType(DlmsEnum):
    NONE = 0, "None"
    WRITE = 1, "Write"
    EXECUTE = 2, "Execute"


@CATALOG.register
@unique
class ImageTransferStatus(DlmsEnum):
    NOT_INITIATED = 0, "NotInitiated"
    TRANSFER_INITIATED = 1, "TransferInitiated"
    VERIFICATION_INITIATED = 2, "VerificationInitiated"
    VERIFICATION_SUCCESSFUL = 3, "VerificationSuccessful"
    VERIFICATION_FAILED = 4, "VerificationFailed"
    ACTIVATION_INITIATED = 5, "ActivationInitiated"
    ACTIVATION_SUCCESSFUL = 6, "ActivationSuccessful"
    ACTIVATION_FAILED = 7, "ActivationFailed"


@CATALOG.register
@unique
class SingleActionScheduleType(DlmsEnum):
    SINGLE_ACTION_SCHEDULE_TYPE1 = 1, "SINGLEACTIONSCHEDULETYPE1"
    SINGLE_ACTION_SCHEDULE_TYPE2 = 2, "SINGLEACTIONSCHEDULETYPE2"
    SINGLE_ACTION_SCHEDULE_TYPE3 = 3, "SINGLEACTIONSCHEDULETYPE3"
    SINGLE_ACTION_SCHEDULE_TYPE4 = 4, "SINGLEACTIONSCHEDULETYPE4"
    SINGLE_ACTION_SCHEDULE_TYPE5 = 5, "SINGLEACTIONSCHEDULETYPE5"


@CATALOG.register
@unique
class ControlMode(DlmsEnum):
    NONE = 0, "NONE"
    MODE1 = 1, "MODE1"
    MODE2 = 2, "MODE2"
    MODE3 = 3, "MODE3"
    MODE4 = 4, "MODE4"
    MODE5 = 5, "MODE5"
    MODE6 = 6, "MODE6"
    MODE7 = 7, "MODE7"


@CATALOG.register
@unique
class ControlState(DlmsEnum):
    DISCONNECTED = 0, "DISCONNECTED"
    CONNECTED = 1, "CONNECTED"
    READY_FOR_RECONNECTION = 2, "READYFORRECONNECTION"
