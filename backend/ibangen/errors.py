"""Exception taxonomy for BBAN/IBAN construction.

Every failure is raised at the point of construction; no partially built
value is ever returned.
"""

from __future__ import annotations


class IbanError(Exception):
    """Base class for every error raised by ibangen."""


class InvalidLength(IbanError, ValueError):
    """Cleaned input does not have the length the format requires."""

    def __init__(self, message: str, *, actual: int | None = None, expected: str | None = None):
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class InvalidFormat(IbanError, ValueError):
    """A field does not match its character class or length."""

    def __init__(self, field: str, expected: str, value: str | None = None):
        shown = f" (got {value!r})" if value is not None else ""
        super().__init__(f"{field} should be {expected}{shown}")
        self.field = field
        self.expected = expected
        self.value = value


class InvalidChecksum(IbanError, ValueError):
    """National (BBAN) or IBAN-level check digits do not verify."""

    def __init__(self, message: str, *, kind: str = "iban", expected: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.expected = expected


class UnsupportedCountry(IbanError, ValueError):
    """Country code has no BBAN format in the registry."""

    def __init__(self, country_code: str):
        super().__init__(f"The country code {country_code} is not supported")
        self.country_code = country_code


class UnsupportedCapability(IbanError, NotImplementedError):
    """The BBAN variant does not define the requested field."""

    def __init__(self, capability: str, country_code: str):
        super().__init__(f"{country_code} BBAN does not support {capability}")
        self.capability = capability
        self.country_code = country_code
