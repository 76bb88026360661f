"""Error kinds raised while parsing and converting MAC addresses."""

from typing import Optional


class MACAddressError(ValueError):
    """Base error for MAC address handling."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(MACAddressError):
    """No address text was supplied."""

    def __init__(self, message: str = "Please provide a mac address"):
        super().__init__(message)


class InvalidFormatError(MACAddressError):
    """Address text could not be resolved into 6 or 8 octets."""

    def __init__(self, text: Optional[str]):
        super().__init__(f"Invalid MAC format '{text}'")
        self.text = text


class ConflictingPriorityError(MACAddressError):
    """Priority embedded in the text differs from the priority argument."""

    def __init__(self, original: str, priority: int):
        super().__init__(
            f"Conflicting priority in '{original}' and priority argument {priority}"
        )
        self.original = original
        self.priority = priority


class NotDerivedFromEUI48Error(MACAddressError):
    """EUI-64 address has no FF-FF / FF-FE filler, so it has no EUI-48 form."""

    def __init__(self, message: str = "eui-64 address is not derived from an eui-48 address"):
        super().__init__(message)


class WrongArgumentTypeError(MACAddressError, TypeError):
    """Procedural entry point was given something other than a string."""

    def __init__(self, message: str = "argument must be a string"):
        super().__init__(message)
