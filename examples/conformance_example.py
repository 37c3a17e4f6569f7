import logging
from pprint import pprint

from dlms_enums import CATALOG, UnknownEnumError
from dlms_enums.enumerations import Conformance, DataType, Unit

# set up logging so you get a bit nicer printout of what is happening.
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s,%(msecs)d : %(levelname)s : %(message)s",
    datefmt="%H:%M:%S",
)

proposed = Conformance.parse(
    "BlockTransferWithGetOrRead,BlockTransferWithAction,MultipleReferences,"
    "Get,Set,SelectiveAccess,Action"
)
print(f"Proposed conformance: {proposed:#08x}")
print(Conformance.to_string(proposed))
pprint([bit.name for bit in Conformance.bits(proposed)])

# Values received from a meter can hold codes we don't know of.
print(repr(DataType.to_string(0x30)))
print(Unit.to_string(Unit.ACTIVE_ENERGY))

try:
    CATALOG.parse("Unit", "Horsepower")
except UnknownEnumError as e:
    print(f"{e.value} is not a {e.enum_name}")
