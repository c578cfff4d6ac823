"""BBAN value object.

A ``Bban`` is tagged by its country code; the country's ``BbanFormat``
decides which fields exist, their widths, character classes and the
national checksum. Construction always validates, whichever entry point
is used:

    Bban.construct("ES", bank_code="3841", branch_code="2436",
                   check_digits="11", account_number="6183191503")
    Bban.from_string("3841-2436-11-6183191503", "ES")

Fields a format does not define are *unsupported*, not empty: reading
``Bban.construct("AT", ...).branch_code`` raises ``UnsupportedCapability``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ibangen.config import NOISE_PATTERN
from ibangen.core.checksums import resolve_algorithm
from ibangen.countries import BbanFormat, FieldSpec, resolve_format
from ibangen.errors import InvalidChecksum, InvalidFormat, InvalidLength, UnsupportedCapability

_log = logging.getLogger(__name__)


def _validate_field(spec: FieldSpec, value: object) -> None:
    if not isinstance(value, str) or not spec.char_class.matches(value, spec.length):
        raise InvalidFormat(spec.name, spec.describe(), None if value is None else str(value))


def _validate_national_checksum(fmt: BbanFormat, fields: Mapping[str, str]) -> None:
    rule = fmt.checksum
    if rule is None:
        return
    algorithm = resolve_algorithm(rule.algorithm)
    expected = algorithm(*(fields[name] for name in rule.fields))
    if fields[rule.check_field] != expected:
        _log.debug(
            "%s BBAN national check failed (%s): got %s, expected %s",
            fmt.country_code, rule.algorithm, fields[rule.check_field], expected,
        )
        raise InvalidChecksum(
            f"{fmt.label} BBAN control digits are not valid",
            kind="national",
            expected=expected,
        )


@dataclass(frozen=True)
class Bban:
    """Immutable, validated BBAN of one country variant."""

    country_code: str
    values: tuple[str, ...]     # field values in format order

    def __post_init__(self) -> None:
        fmt = resolve_format(self.country_code)
        values = tuple(self.values)
        if len(values) != len(fmt.fields):
            raise InvalidFormat(
                "fields",
                f"{len(fmt.fields)} values for {fmt.country_code}: {', '.join(fmt.field_names)}",
            )
        for spec, value in zip(fmt.fields, values):
            _validate_field(spec, value)
        _validate_national_checksum(fmt, dict(zip(fmt.field_names, values)))

        object.__setattr__(self, "country_code", fmt.country_code)
        object.__setattr__(self, "values", values)

    # ---------- construction ----------
    @classmethod
    def construct(cls, country_code: str, *values: str, **fields: str) -> Bban:
        """Build from explicit field values, positionally (format order) or by name."""
        fmt = resolve_format(country_code)
        names = fmt.field_names
        if len(values) > len(names):
            raise InvalidFormat(
                "fields", f"at most {len(names)} values for {fmt.country_code}: {', '.join(names)}"
            )

        merged: dict[str, str] = dict(zip(names, values))
        for name, value in fields.items():
            if name not in names:
                raise InvalidFormat(name, f"one of {', '.join(names)} for {fmt.country_code}")
            if name in merged:
                raise TypeError(f"construct() got multiple values for field {name!r}")
            merged[name] = value

        missing = [spec for spec in fmt.fields if spec.name not in merged]
        if missing:
            raise InvalidFormat(missing[0].name, missing[0].describe())

        return cls(fmt.country_code, tuple(merged[name] for name in names))

    @classmethod
    def from_string(cls, bban: str, country_code: str) -> Bban:
        """Parse a printed BBAN; spaces, hyphens and other separators are ignored."""
        fmt = resolve_format(country_code)
        cleaned = NOISE_PATTERN.sub("", str(bban))
        if len(cleaned) != fmt.length:
            raise InvalidLength(
                f"{fmt.label} BBAN should be {fmt.length} chars long, got {len(cleaned)}",
                actual=len(cleaned),
                expected=str(fmt.length),
            )
        return cls(fmt.country_code, tuple(cleaned[sl] for _, sl in fmt.slices()))

    # ---------- capabilities ----------
    @property
    def format(self) -> BbanFormat:
        return resolve_format(self.country_code)

    @property
    def capabilities(self) -> frozenset[str]:
        """Field names this variant defines."""
        return frozenset(self.format.field_names)

    def supports(self, field_name: str) -> bool:
        return self.format.field(field_name) is not None

    @property
    def fields(self) -> Mapping[str, str]:
        """Read-only view ``{field_name: value}`` in format order."""
        return MappingProxyType(dict(zip(self.format.field_names, self.values)))

    def _get(self, name: str) -> str:
        fmt = self.format
        if fmt.field(name) is None:
            raise UnsupportedCapability(name, self.country_code)
        return self.values[fmt.field_names.index(name)]

    @property
    def bank_code(self) -> str:
        return self._get("bank_code")

    @property
    def branch_code(self) -> str:
        return self._get("branch_code")

    @property
    def check_digits(self) -> str:
        return self._get("check_digits")

    @property
    def account_type(self) -> str:
        return self._get("account_type")

    @property
    def account_number(self) -> str:
        return self._get("account_number")

    def __str__(self) -> str:
        return "".join(self.values)
