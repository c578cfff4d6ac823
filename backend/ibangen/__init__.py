"""ibangen: parse, validate and build IBANs and their country BBANs.

Quick start::

    from ibangen import Iban, spain_bban

    iban = Iban.from_string("ES68 3841 2436 1161 8319 1503")
    iban.bank_code            # "3841"

    bban = spain_bban("3841", "2436", "11", "6183191503")
    str(Iban.from_bban_and_country(bban, "ES"))   # "ES6838412436116183191503"
"""

from ibangen.bban import Bban
from ibangen.countries import BbanFormat, available_countries, is_supported, resolve_format
from ibangen.errors import (
    IbanError,
    InvalidChecksum,
    InvalidFormat,
    InvalidLength,
    UnsupportedCapability,
    UnsupportedCountry,
)
from ibangen.iban import Iban, is_valid_iban
from ibangen.variants import (
    andorra_bban,
    austria_bban,
    belgium_bban,
    bulgaria_bban,
    france_bban,
    germany_bban,
    italy_bban,
    netherlands_bban,
    portugal_bban,
    spain_bban,
)

__all__ = [
    "Bban",
    "BbanFormat",
    "Iban",
    "IbanError",
    "InvalidChecksum",
    "InvalidFormat",
    "InvalidLength",
    "UnsupportedCapability",
    "UnsupportedCountry",
    "andorra_bban",
    "austria_bban",
    "available_countries",
    "belgium_bban",
    "bulgaria_bban",
    "france_bban",
    "germany_bban",
    "is_supported",
    "is_valid_iban",
    "italy_bban",
    "netherlands_bban",
    "portugal_bban",
    "resolve_format",
    "spain_bban",
]
