"""MAC address value: classification predicates, renderings and EUI conversions."""

import logging
from typing import Iterable, Optional, Union

from .config import resolve_strict_errors
from .errors import InvalidFormatError, MACAddressError, NotDerivedFromEUI48Error
from .parser import EUI48_LENGTH_DEC, EUI64_LENGTH_DEC, parse_mac

logger = logging.getLogger(__name__)

# Octet -> octet with its bit order reversed (Token Ring / FDDI canonical form)
ETHER2TOKEN: tuple[int, ...] = tuple(int(f"{i:08b}"[::-1], 2) for i in range(256))


class MACAddress:
    """
    Represents an EUI-48 or EUI-64 hardware address.

    Instances are immutable: to_eui48() and to_eui64() return new values.
    The only mutable state is errstr, which records why the last lenient
    conversion on this object failed.
    """

    __slots__ = ("_octets", "_priority", "_original", "_strict_errors", "errstr", "__weakref__")

    def __init__(
        self,
        mac: str,
        priority: Optional[int] = None,
        strict_errors: Optional[bool] = None,
    ):
        """Construct from address text; raises MACAddressError on bad input.

        Use functions.new_mac() to get None plus a recorded error instead.
        """
        parsed = parse_mac(mac, priority=priority)
        self._set(parsed.octets, parsed.priority, parsed.original, strict_errors)

    def _set(self, octets, priority, original, strict_errors):
        self._octets: tuple[int, ...] = tuple(octets)
        self._priority: int = priority
        self._original: Optional[str] = original
        self._strict_errors: bool = resolve_strict_errors(strict_errors)
        self.errstr: Optional[str] = None

    @classmethod
    def from_octets(
        cls,
        octets: Union[bytes, Iterable[int]],
        priority: int = 0,
        strict_errors: Optional[bool] = None,
    ) -> "MACAddress":
        """Construct from an already canonical sequence of 6 or 8 octets."""
        data = tuple(octets)
        if len(data) not in (EUI48_LENGTH_DEC, EUI64_LENGTH_DEC) or any(
            not isinstance(o, int) or not 0 <= o <= 255 for o in data
        ):
            raise MACAddressError(
                f"'{octets!r}' does not appear to be an EUI-48 or EUI-64 address"
            )

        address = cls.__new__(cls)
        address._set(data, priority or 0, None, strict_errors)
        address._original = address.as_microsoft()
        return address

    @classmethod
    def from_oid_suffix(
        cls, oid_suffix: str, strict_errors: Optional[bool] = None
    ) -> "MACAddress":
        """
        Construct from an SNMP OID index suffix.

        Example: 170.187.204.221.238.255 -> aa:bb:cc:dd:ee:ff
        """
        parts = oid_suffix.strip().split(".") if oid_suffix else []
        if len(parts) not in (EUI48_LENGTH_DEC, EUI64_LENGTH_DEC) or not all(
            p.isascii() and p.isdigit() and int(p) <= 255 for p in parts
        ):
            raise InvalidFormatError(oid_suffix)

        address = cls.from_octets([int(p) for p in parts], strict_errors=strict_errors)
        address._original = oid_suffix
        return address

    def _derive(self, octets: tuple[int, ...]) -> "MACAddress":
        derived = self.__class__.__new__(self.__class__)
        derived._set(octets, self._priority, self._original, self._strict_errors)
        return derived

    def _fail(self, error: MACAddressError) -> None:
        if self._strict_errors:
            raise error
        logger.debug(error.message, extra={"mac": self._original})
        self.errstr = error.message

    # Value protocol

    @property
    def octets(self) -> tuple[int, ...]:
        return self._octets

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def original(self) -> Optional[str]:
        """The address text exactly as given at construction."""
        return self._original

    @property
    def strict_errors(self) -> bool:
        return self._strict_errors

    def __eq__(self, other):
        if not isinstance(other, MACAddress):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self):
        return hash(self._octets)

    def __len__(self) -> int:
        return len(self._octets)

    def __int__(self) -> int:
        return int.from_bytes(bytes(self._octets), "big")

    def __bytes__(self) -> bytes:
        return bytes(self._octets)

    def __str__(self) -> str:
        return self.as_microsoft()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.as_microsoft()}')"

    # Classification

    @property
    def is_eui48(self) -> bool:
        return len(self._octets) == EUI48_LENGTH_DEC

    @property
    def is_eui64(self) -> bool:
        return len(self._octets) == EUI64_LENGTH_DEC

    @property
    def is_broadcast(self) -> bool:
        return all(o == 0xFF for o in self._octets)

    @property
    def is_multicast(self) -> bool:
        """Group bit set, excluding the all-ones broadcast address."""
        return bool(self._octets[0] & 0x01) and not self.is_broadcast

    @property
    def is_unicast(self) -> bool:
        return not self._octets[0] & 0x01

    @property
    def is_local(self) -> bool:
        """Locally administered (U/L bit set)."""
        return bool(self._octets[0] & 0x02)

    @property
    def is_universal(self) -> bool:
        return not self.is_local

    @property
    def is_vrrp(self) -> bool:
        """VRRP virtual router address 00-00-5E-00-01-XX."""
        return self.is_eui48 and self._octets[:5] == (0x00, 0x00, 0x5E, 0x00, 0x01)

    @property
    def is_hsrp(self) -> bool:
        """HSRP virtual router address 00-00-0C-07-AC-XX."""
        return self.is_eui48 and self._octets[:5] == (0x00, 0x00, 0x0C, 0x07, 0xAC)

    @property
    def is_hsrp2(self) -> bool:
        """HSRPv2 virtual router address 00-00-0C-9F-FX-XX."""
        return (
            self.is_eui48
            and self._octets[:4] == (0x00, 0x00, 0x0C, 0x9F)
            and self._octets[4] >= 0xF0
        )

    @property
    def oui(self) -> str:
        """Organizationally Unique Identifier, e.g. AC-DE-48."""
        return "-".join(f"{o:02X}" for o in self._octets[:3])

    # Renderings

    def as_basic(self) -> str:
        """001122aabbcc"""
        return "".join(f"{o:02x}" for o in self._octets)

    def as_bpr(self) -> str:
        """1,6,00:11:22:aa:bb:cc"""
        return f"1,{len(self._octets)}," + self.as_microsoft()

    def as_cisco(self) -> str:
        """0011.22aa.bbcc"""
        basic = self.as_basic()
        return ".".join(basic[i : i + 4] for i in range(0, len(basic), 4))

    def as_ieee(self) -> str:
        """00-11-22-aa-bb-cc"""
        return "-".join(f"{o:02x}" for o in self._octets)

    def as_microsoft(self) -> str:
        """00:11:22:aa:bb:cc"""
        return ":".join(f"{o:02x}" for o in self._octets)

    def _halves(self) -> tuple[str, str]:
        basic = self.as_basic()
        middle = len(basic) // 2
        return basic[:middle], basic[middle:]

    def as_pgsql(self) -> str:
        """001122:aabbcc"""
        return ":".join(self._halves())

    def as_singledash(self) -> str:
        """001122-aabbcc"""
        return "-".join(self._halves())

    def as_sun(self) -> str:
        """0-11-22-aa-bb-cc"""
        return "-".join(f"{o:x}" for o in self._octets)

    def as_tokenring(self) -> str:
        """Bit-reversed octets: 10-00-5a-4d-bc-96 -> 08-00-5a-b2-3d-69"""
        return "-".join(f"{ETHER2TOKEN[o]:02x}" for o in self._octets)

    def as_bridge_id(self) -> str:
        """45#0011.22aa.bbcc"""
        return f"{self._priority}#{self.as_cisco()}"

    def as_oid_suffix(self) -> str:
        """
        Render as an SNMP OID index suffix.

        Example: aa:bb:cc:dd:ee:ff -> 170.187.204.221.238.255
        """
        return ".".join(str(o) for o in self._octets)

    def as_ipv6_suffix(self) -> str:
        """
        Modified EUI-64 interface identifier for IPv6 autoconfiguration.

        EUI-48 addresses are expanded with FF-FE first; the U/L bit of the
        first octet is inverted. Example: 00:11:22:aa:bb:cc -> 0211:22ff:feaa:bbcc
        """
        octets = list(_eui48_to_eui64(self._octets) if self.is_eui48 else self._octets)
        octets[0] ^= 0x02
        return ":".join(f"{octets[i]:02x}{octets[i + 1]:02x}" for i in range(0, 8, 2))

    # Conversions

    def to_eui64(self) -> Optional["MACAddress"]:
        """
        Encapsulate an EUI-48 address as EUI-64 (xx:xx:xx:ff:fe:xx:xx:xx).

        Returns a new MACAddress; on an EUI-64 address returns None and sets
        errstr, or raises MACAddressError when strict_errors is enabled.
        """
        if not self.is_eui48:
            self._fail(MACAddressError("address is already eui-64"))
            return None

        self.errstr = None
        logger.debug(f"Converting {self.as_microsoft()} to EUI-64")
        return self._derive(_eui48_to_eui64(self._octets))

    def to_eui48(self) -> Optional["MACAddress"]:
        """
        Convert an EUI-64 address back to EUI-48.

        Only possible when the EUI-64 was derived from an EUI-48, i.e. octets
        3 and 4 are FF-FF or FF-FE. An EUI-48 address converts to an equal
        copy of itself. On failure returns None and sets errstr, or raises
        NotDerivedFromEUI48Error when strict_errors is enabled.
        """
        if self.is_eui48:
            self.errstr = None
            return self._derive(self._octets)

        o = self._octets
        if o[3] != 0xFF or o[4] not in (0xFF, 0xFE):
            self._fail(NotDerivedFromEUI48Error())
            return None

        self.errstr = None
        logger.debug(f"Converting {self.as_microsoft()} to EUI-48")
        return self._derive(o[0:3] + o[5:8])


def _eui48_to_eui64(octets: tuple[int, ...]) -> tuple[int, ...]:
    return octets[0:3] + (0xFF, 0xFE) + octets[3:6]
