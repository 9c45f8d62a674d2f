"""Classes whose annotations are strings that only partly resolve at runtime."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from litewire import Inject


if TYPE_CHECKING:
    from decimal import Decimal


class PriceRepository: ...


class PricingService:
    repository: Annotated[PriceRepository, Inject]
    price: Decimal | None = None


class TypedPricingService:
    repository: PriceRepository
    price: Decimal | None = None
