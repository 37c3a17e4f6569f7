from dlms_enums import enumerations
from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG, EnumCatalog, EnumDefinition, EnumEntry
from dlms_enums.exceptions import ImproperlyConfigured, UnknownEnumError
