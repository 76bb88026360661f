"""
Procedural entry points that take raw address text.

Each function parses its argument and applies one MACAddress predicate or
rendering. In lenient mode (the default) a failure returns None and the
message is kept in a process-wide slot readable through errstr(); the slot
is shared by all threads. With strict_errors enabled, per call or through
config.set_strict_errors(), the MACAddressError is raised instead.

Passing a MACAddress object is a programming error and always raises
WrongArgumentTypeError naming the method to use instead.
"""

import logging
from typing import Any, Optional

from .address import MACAddress
from .config import resolve_strict_errors
from .errors import MACAddressError, WrongArgumentTypeError

logger = logging.getLogger(__name__)

_errstr: Optional[str] = None


def errstr() -> Optional[str]:
    """Message of the last failed procedural call, None after a success."""
    return _errstr


def _record(error: MACAddressError) -> None:
    global _errstr
    _errstr = error.message
    logger.debug(error.message)


def new_mac(
    mac: str,
    priority: Optional[int] = None,
    strict_errors: Optional[bool] = None,
) -> Optional[MACAddress]:
    """Construct a MACAddress, returning None and recording errstr on failure."""
    global _errstr
    _errstr = None
    strict = resolve_strict_errors(strict_errors)
    try:
        return MACAddress(mac, priority=priority, strict_errors=strict)
    except MACAddressError as e:
        if strict:
            raise
        _record(e)
        return None


def _apply(mac: Any, attribute: str, strict_errors: Optional[bool]) -> Any:
    global _errstr
    if isinstance(mac, MACAddress):
        raise WrongArgumentTypeError(f"please use {attribute}")

    _errstr = None
    strict = resolve_strict_errors(strict_errors)
    try:
        if mac is not None and not isinstance(mac, str):
            raise WrongArgumentTypeError()
        address = MACAddress(mac, strict_errors=strict)
    except MACAddressError as e:
        if strict:
            raise
        _record(e)
        return None

    value = getattr(address, attribute)
    return value() if callable(value) else value


# Properties


def mac_is_eui48(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_eui48", strict_errors)


def mac_is_eui64(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_eui64", strict_errors)


def mac_is_unicast(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_unicast", strict_errors)


def mac_is_multicast(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_multicast", strict_errors)


def mac_is_broadcast(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_broadcast", strict_errors)


def mac_is_vrrp(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_vrrp", strict_errors)


def mac_is_hsrp(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_hsrp", strict_errors)


def mac_is_hsrp2(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_hsrp2", strict_errors)


def mac_is_local(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_local", strict_errors)


def mac_is_universal(mac: str, strict_errors: Optional[bool] = None) -> Optional[bool]:
    return _apply(mac, "is_universal", strict_errors)


# Renderings


def mac_as_basic(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_basic", strict_errors)


def mac_as_bpr(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_bpr", strict_errors)


def mac_as_cisco(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_cisco", strict_errors)


def mac_as_ieee(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_ieee", strict_errors)


def mac_as_ipv6_suffix(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_ipv6_suffix", strict_errors)


def mac_as_microsoft(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_microsoft", strict_errors)


def mac_as_pgsql(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_pgsql", strict_errors)


def mac_as_singledash(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_singledash", strict_errors)


def mac_as_sun(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_sun", strict_errors)


def mac_as_tokenring(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_tokenring", strict_errors)


def mac_as_oui(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "oui", strict_errors)


def mac_as_bridge_id(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    """Bridge ID rendering; the priority comes from a 45#... prefix or is 0."""
    return _apply(mac, "as_bridge_id", strict_errors)


def mac_as_oid_suffix(mac: str, strict_errors: Optional[bool] = None) -> Optional[str]:
    return _apply(mac, "as_oid_suffix", strict_errors)
