"""Parse, classify and reformat EUI-48 / EUI-64 hardware addresses."""

from .address import ETHER2TOKEN, MACAddress
from .config import Config, get_strict_errors, set_strict_errors
from .errors import (
    ConflictingPriorityError,
    EmptyInputError,
    InvalidFormatError,
    MACAddressError,
    NotDerivedFromEUI48Error,
    WrongArgumentTypeError,
)
from .parser import ParsedMAC, ParseResult, parse_mac, try_parse

VERSION = "0.1.0"
