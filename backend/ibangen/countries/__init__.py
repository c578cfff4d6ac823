"""Country BBAN format registry.

To add a new country:
  1. Create ``ibangen/countries/<country>.py`` (copy an existing one as template).
  2. Export a ``FORMAT`` (``BbanFormat``) from it.
  3. If it carries a national check, register the algorithm in
     ``ibangen/core/checksums.py`` and reference its tag.
  4. Register the module path in ``_REGISTRY`` below.

The registry is built once at import time and is read-only afterwards.
"""

from __future__ import annotations

import importlib
import logging
from types import MappingProxyType

from ibangen.core.checksums import resolve_algorithm
from ibangen.countries._base import BbanFormat, ChecksumRule, FieldSpec
from ibangen.errors import UnsupportedCountry

__all__ = [
    "BbanFormat",
    "ChecksumRule",
    "FieldSpec",
    "FORMATS",
    "available_countries",
    "is_supported",
    "resolve_format",
]

_log = logging.getLogger(__name__)

_REGISTRY: dict[str, str] = {
    "ES": "ibangen.countries.spain",
    "AD": "ibangen.countries.andorra",
    "AT": "ibangen.countries.austria",
    "BE": "ibangen.countries.belgium",
    "BG": "ibangen.countries.bulgaria",
    "DE": "ibangen.countries.germany",
    "FR": "ibangen.countries.france",
    "IT": "ibangen.countries.italy",
    "PT": "ibangen.countries.portugal",
    "NL": "ibangen.countries.netherlands",
}


def _load_formats() -> MappingProxyType[str, BbanFormat]:
    formats: dict[str, BbanFormat] = {}
    for code, module_path in _REGISTRY.items():
        fmt: BbanFormat = importlib.import_module(module_path).FORMAT
        if fmt.country_code != code:
            raise ValueError(
                f"{module_path} declares country {fmt.country_code!r}, registered as {code!r}"
            )
        if fmt.checksum is not None:
            resolve_algorithm(fmt.checksum.algorithm)
        formats[code] = fmt
    _log.debug("Loaded %d BBAN formats: %s", len(formats), sorted(formats))
    return MappingProxyType(formats)


FORMATS = _load_formats()


def resolve_format(country_code: str) -> BbanFormat:
    """Return the BBAN format for *country_code* (case-insensitive).

    Raises ``UnsupportedCountry`` when the code is not registered.
    """
    code = str(country_code).upper()
    fmt = FORMATS.get(code)
    if fmt is None:
        raise UnsupportedCountry(code)
    return fmt


def available_countries() -> list[str]:
    """Return registered country codes."""
    return sorted(FORMATS)


def is_supported(country_code: str) -> bool:
    return str(country_code).upper() in FORMATS
