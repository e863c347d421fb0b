# storefront/domain/catalog/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union
from storefront.domain.catalog.exceptions import InvalidDiscountError

Number = Union[int, float]


class DuplicatePolicy(str, Enum):
    """How a registry treats a second component registered under the same code."""
    REJECT = "reject"
    ALLOW = "allow"


@dataclass(frozen=True)
class DiscountRate:
    """Percentage discount, validated against 0-100 unless enforcement is off."""
    value: float
    enforce_range: bool = True

    def __post_init__(self):
        if self.enforce_range and not 0 <= self.value <= 100:
            raise InvalidDiscountError(self.value)

    def apply(self, amount: Number) -> float:
        return amount * (1 - self.value / 100)

    def __str__(self) -> str:
        return format_amount(self.value)


def format_amount(value: Number) -> str:
    """Render integral amounts without a decimal part (100, 12.5)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
