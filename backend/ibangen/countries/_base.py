"""BBAN format dataclasses: field layout plus optional national checksum."""

from __future__ import annotations

from dataclasses import dataclass

from ibangen.core.charclass import CharClass


@dataclass(frozen=True)
class FieldSpec:
    """One fixed-width BBAN field."""
    name: str               # e.g. "bank_code"
    length: int
    char_class: CharClass

    def describe(self) -> str:
        return self.char_class.describe(self.length)


@dataclass(frozen=True)
class ChecksumRule:
    """National check: ``algorithm(*fields) == value of check_field``."""
    algorithm: str          # tag in ibangen.core.checksums.ALGORITHMS
    fields: tuple[str, ...]
    check_field: str


@dataclass(frozen=True)
class BbanFormat:
    """Everything the validators need to know about one country's BBAN.

    Each supported country gets one instance (see the per-country modules
    under ``ibangen/countries/``). Field order is the order of the fields
    in the printed BBAN.
    """

    country_code: str                   # e.g. "ES"
    label: str                          # e.g. "Spain"
    fields: tuple[FieldSpec, ...]
    checksum: ChecksumRule | None = None

    def __post_init__(self) -> None:
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"{self.country_code}: duplicated BBAN field names {names}")
        if self.checksum is not None:
            referenced = (*self.checksum.fields, self.checksum.check_field)
            missing = [n for n in referenced if n not in names]
            if missing:
                raise ValueError(
                    f"{self.country_code}: checksum references undefined fields {missing}"
                )

    @property
    def length(self) -> int:
        return sum(f.length for f in self.fields)

    @property
    def iban_length(self) -> int:
        return self.length + 4

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def slices(self) -> list[tuple[FieldSpec, slice]]:
        """Fixed offsets of every field inside the BBAN string."""
        out = []
        offset = 0
        for spec in self.fields:
            out.append((spec, slice(offset, offset + spec.length)))
            offset += spec.length
        return out
