"""Supplier Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_serializer, field_validator

from supplier_api.domain.mixins import as_utc
from supplier_api.domain.supplier import (
    ADDRESS_MAX,
    BILLING_PRECISION,
    BILLING_SCALE,
    COUNTRY_MAX,
    EMAIL_MAX,
    NAME_MAX,
    PHONE_MAX,
    TAX_ID_MAX,
    TRADE_NAME_MAX,
    WEBSITE_MAX,
)
from supplier_api.schemas.common import CamelModel

class SupplierCreate(CamelModel):
    """Fields a client may set. Id, CreatedAt and LastEdited are server-assigned."""

    name: str = Field(min_length=1, max_length=NAME_MAX)
    address: str | None = Field(default=None, max_length=ADDRESS_MAX)
    trade_name: str | None = Field(default=None, max_length=TRADE_NAME_MAX)
    tax_id: str | None = Field(default=None, max_length=TAX_ID_MAX)
    phone_number: str | None = Field(default=None, max_length=PHONE_MAX)
    email: str | None = Field(default=None, max_length=EMAIL_MAX)
    website: str | None = Field(default=None, max_length=WEBSITE_MAX)
    country: str | None = Field(default=None, max_length=COUNTRY_MAX)
    annual_billing_usd: Decimal | None = Field(
        default=None,
        alias="annualBillingUSD",
        max_digits=BILLING_PRECISION,
        decimal_places=BILLING_SCALE,
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

class SupplierUpdate(SupplierCreate):
    """Full replacement of every mutable field. ``id`` must echo the path id."""

    id: int

class SupplierOut(CamelModel):
    id: int
    name: str
    address: str | None = None
    trade_name: str | None = None
    tax_id: str | None = None
    phone_number: str | None = None
    email: str | None = None
    website: str | None = None
    country: str | None = None
    annual_billing_usd: Decimal | None = Field(default=None, alias="annualBillingUSD")
    last_edited: datetime | None = None
    created_at: datetime

    @field_validator("last_edited", "created_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    @field_serializer("annual_billing_usd", when_used="json")
    def _billing_as_number(self, value: Decimal | None) -> float | None:
        # Emitted as a JSON number
        return None if value is None else float(value)

class SupplierSearchParams(CamelModel):
    """Optional, AND-combined filters for ``GET /suppliers/search``."""

    name: str | None = None
    country: str | None = None
    min_annual_billing: Decimal | None = None
    max_annual_billing: Decimal | None = None

    def as_filters(self) -> dict:
        return self.model_dump(exclude_none=True)
