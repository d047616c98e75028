"""SQLAlchemy ORM model for Suppliers.

The store owns the physical schema (PascalCase columns on the ``Suppliers``
table). Every attribute is bound to its column name explicitly so the
mapping can be verified against the live table at startup
(see :func:`supplier_api.db.schema.verify_schema`).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from supplier_api.db.base import Base
from supplier_api.domain.mixins import TimestampMixin

# Column lengths shared with the request schemas
NAME_MAX = 200
ADDRESS_MAX = 500
TRADE_NAME_MAX = 200
TAX_ID_MAX = 50
PHONE_MAX = 50
EMAIL_MAX = 200
WEBSITE_MAX = 200
COUNTRY_MAX = 100
BILLING_PRECISION = 18
BILLING_SCALE = 2


class Supplier(Base, TimestampMixin):
    __tablename__ = "Suppliers"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(NAME_MAX), nullable=False)
    address: Mapped[Optional[str]] = mapped_column("Address", String(ADDRESS_MAX), nullable=True)
    trade_name: Mapped[Optional[str]] = mapped_column(
        "TradeName", String(TRADE_NAME_MAX), nullable=True
    )
    # Free-form string: tax identifiers vary in format between countries
    tax_id: Mapped[Optional[str]] = mapped_column("TaxId", String(TAX_ID_MAX), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(
        "PhoneNumber", String(PHONE_MAX), nullable=True
    )
    email: Mapped[Optional[str]] = mapped_column("Email", String(EMAIL_MAX), nullable=True)
    website: Mapped[Optional[str]] = mapped_column("Website", String(WEBSITE_MAX), nullable=True)
    country: Mapped[Optional[str]] = mapped_column("Country", String(COUNTRY_MAX), nullable=True)
    annual_billing_usd: Mapped[Optional[Decimal]] = mapped_column(
        "AnnualBillingUSD", Numeric(BILLING_PRECISION, BILLING_SCALE), nullable=True
    )

    # Fields a client may write; everything else is server-assigned
    MUTABLE_FIELDS = (
        "name",
        "address",
        "trade_name",
        "tax_id",
        "phone_number",
        "email",
        "website",
        "country",
        "annual_billing_usd",
    )

    def __repr__(self) -> str:
        return f"<Supplier id={self.id} name={self.name!r}>"
