"""Tolerant parser turning human-entered MAC address text into octets."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .errors import (
    ConflictingPriorityError,
    EmptyInputError,
    InvalidFormatError,
    MACAddressError,
    WrongArgumentTypeError,
)

logger = logging.getLogger(__name__)

EUI48_LENGTH_HEX = 12
EUI48_LENGTH_DEC = 6
EUI64_LENGTH_HEX = 16
EUI64_LENGTH_DEC = 8

# 60#0011.22aa.bbcc (Cisco bridge ID)
_PRIORITY_RE = re.compile(r"^([0-9]+)#(.+)$", re.DOTALL)
# 1,6,00:11:22:aa:bb:cc (BPR); the count is not checked against the octets
_BPR_PREFIX_RE = re.compile(r"^1,[0-9]+,")
_DELIMITER_RE = re.compile(r"[^a-z0-9]+", re.IGNORECASE)
_NON_HEX_RE = re.compile(r"[^a-f0-9]", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedMAC:
    """Canonical octets plus the bridge priority resolved while parsing."""

    octets: tuple[int, ...]
    priority: int
    original: str


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse: exactly one of value / error is set."""

    value: Optional[ParsedMAC] = None
    error: Optional[MACAddressError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ParsedMAC:
        """Return the parsed value or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.value


def split_groups(text: str) -> list[str]:
    """
    Split address text into hex groups.

    Any run of non-alphanumeric characters delimits groups. Groups of even
    length are broken into 2-character pairs so that mixed groupings such as
    "aabb.cc.00.11.22" line up with the fully delimited form; odd-length
    groups are kept whole.

    Raises:
        InvalidFormatError: a group contains a non-hex character
    """
    parts = [p for p in _DELIMITER_RE.split(text) if p]

    if any(_NON_HEX_RE.search(p) for p in parts):
        raise InvalidFormatError(text)

    groups: list[str] = []
    for part in parts:
        if len(part) % 2 == 0:
            groups.extend(part[i : i + 2] for i in range(0, len(part), 2))
        else:
            groups.append(part)
    return groups


def groups_to_octets(groups: list[str], text: str) -> tuple[int, ...]:
    """Resolve normalized hex groups into 6 or 8 octets."""
    # 0019e3010e72
    if len(groups) == 1 and len(groups[0]) in (EUI48_LENGTH_HEX, EUI64_LENGTH_HEX):
        blob = groups[0]
        return tuple(int(blob[i : i + 2], 16) for i in range(0, len(blob), 2))

    # 00:19:e3:01:0e:72, 0:19:e3:1:e:72
    if len(groups) in (EUI48_LENGTH_DEC, EUI64_LENGTH_DEC):
        if any(len(g) > 2 for g in groups):
            raise InvalidFormatError(text)
        return tuple(int(g, 16) for g in groups)

    # 0019.e301.0e72; leading zeros may not be dropped
    if len(groups) in (EUI48_LENGTH_DEC // 2, EUI64_LENGTH_DEC // 2):
        if any(len(g) != 4 for g in groups):
            raise InvalidFormatError(text)
        octets: list[int] = []
        for g in groups:
            octets.append(int(g[:2], 16))
            octets.append(int(g[2:], 16))
        return tuple(octets)

    raise InvalidFormatError(text)


def parse_mac(text: Optional[str], priority: Optional[int] = None) -> ParsedMAC:
    """
    Parse MAC address text into canonical octets.

    Supported input formats include:
    - 00:11:22:aa:bb:cc, 00-11-22-AA-BB-CC, 0:11:22:aa:bb:cc
    - 0011.22aa.bbcc (Cisco)
    - 001122aabbcc, 001122:aabbcc, 001122-aabbcc
    - 1,6,00:11:22:aa:bb:cc (BPR)
    - 45#0011.22aa.bbcc (bridge ID with priority)
    - any of the above with 8 octets (EUI-64)

    Args:
        text: Address text
        priority: Bridge priority supplied by the caller; a falsy value
            means "not supplied"

    Returns:
        ParsedMAC with octets in left-to-right order

    Raises:
        EmptyInputError: text is None or empty
        WrongArgumentTypeError: text is not a string
        InvalidFormatError: text does not resolve to 6 or 8 octets
        ConflictingPriorityError: embedded priority differs from priority
    """
    if text is None or (isinstance(text, str) and not text):
        raise EmptyInputError()
    if not isinstance(text, str):
        raise WrongArgumentTypeError()

    original = text
    mac = text.strip()
    trimmed = mac

    embedded_priority: Optional[int] = None
    match = _PRIORITY_RE.match(mac)
    if match:
        embedded_priority = int(match.group(1))
        mac = match.group(2)

    mac = _BPR_PREFIX_RE.sub("", mac, count=1)

    try:
        octets = groups_to_octets(split_groups(mac), mac)
    except InvalidFormatError:
        logger.debug(f"Rejected MAC address text '{trimmed}'", extra={"mac": trimmed})
        raise InvalidFormatError(trimmed) from None

    if embedded_priority is not None:
        if priority and priority != embedded_priority:
            raise ConflictingPriorityError(original, priority)
        resolved_priority = embedded_priority
    else:
        resolved_priority = priority or 0

    return ParsedMAC(octets=octets, priority=resolved_priority, original=original)


def try_parse(text: Optional[str], priority: Optional[int] = None) -> ParseResult:
    """Parse without raising; the error kind is carried in the result."""
    try:
        return ParseResult(value=parse_mac(text, priority=priority))
    except MACAddressError as e:
        return ParseResult(error=e)
