"""
Currency Codes

A currency code is an opaque, validated token. The bookkeeping core
only needs codes to compare for equality and to serialize to and from
a stable string.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from bookkeeping.models.errors import InvalidCurrencyCodeError


CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


class CurrencyCode(BaseModel):
    """A validated three-letter currency code, e.g. EUR."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(
        ...,
        pattern=CURRENCY_CODE_PATTERN.pattern,
        description="Three uppercase letters"
    )

    def __str__(self) -> str:
        return self.code


def parse_currency_code(code: str) -> CurrencyCode:
    """
    Parse a currency code token.

    Raises:
        InvalidCurrencyCodeError: If the token is not three uppercase letters
    """
    if not isinstance(code, str) or not CURRENCY_CODE_PATTERN.fullmatch(code):
        raise InvalidCurrencyCodeError(str(code))
    return CurrencyCode(code=code)
