from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from mundoflor_prices.domain.errors import PriceError


@dataclass(frozen=True, slots=True)
class Ok:
    value: Decimal

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Decimal:
        return self.value

    def unwrap_or(self, default: Decimal | None) -> Decimal | None:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    error: PriceError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Decimal:
        raise self.error

    def unwrap_or(self, default: Decimal | None) -> Decimal | None:
        return default


ParseResult = Ok | Err


@dataclass(frozen=True, slots=True)
class PriceRow:
    raw_text: str
    amount: Decimal | None
    formatted: str | None
    error: str | None
