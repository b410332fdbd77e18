"""Error kinds raised by the SKU catalog."""

from __future__ import annotations


class SkuwrightError(Exception):
    """Base class for all skuwright errors."""


class CapabilityNotFoundError(SkuwrightError):
    """A SKU carries no capability with the requested name."""

    quantity = -1

    def __init__(self, name: str):
        super().__init__(f"{name}CapabilityNotFound")
        self.name = name


class CapabilityValueParseError(SkuwrightError):
    """A capability is present but its value is not a number of the requested kind."""

    quantity = -1

    def __init__(self, name: str, raw_value: str, cause: Exception, kind: str = "int64"):
        super().__init__(
            f"{name}CapabilityValueParse: failed to parse string '{raw_value}' as {kind}, error: '{cause}'"
        )
        self.name = name
        self.raw_value = raw_value
        self.cause = cause


class ClientAlreadySetError(SkuwrightError):
    """More than one listing client was supplied while building a cache."""

    def __init__(self) -> None:
        super().__init__("multiple client options provided, only one listing client may be set")


class SkuListError(SkuwrightError):
    """The listing collaborator failed; the original error is chained as __cause__."""
