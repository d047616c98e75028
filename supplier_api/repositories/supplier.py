"""Supplier repository: name lookup and multi-filter search on top of BaseRepository."""

from __future__ import annotations

from decimal import Decimal

from supplier_api.domain.supplier import Supplier
from supplier_api.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):
    model = Supplier

    async def find_by_name(self, fragment: str) -> list[Supplier]:
        """Suppliers whose name contains ``fragment``.

        Case sensitivity is whatever the store's default collation does.
        LIKE wildcards in the fragment are matched literally.
        """
        q = (
            self._base_query()
            .where(Supplier.name.contains(fragment, autoescape=True))
            .order_by(Supplier.id)
        )
        return list((await self._session.execute(q)).scalars().all())

    async def search(
        self,
        *,
        name: str | None = None,
        country: str | None = None,
        min_annual_billing: Decimal | None = None,
        max_annual_billing: Decimal | None = None,
    ) -> list[Supplier]:
        """AND-combine every filter that is set; no filters returns every row."""
        q = self._base_query()
        if name is not None:
            q = q.where(Supplier.name.contains(name, autoescape=True))
        if country is not None:
            q = q.where(Supplier.country == country)
        if min_annual_billing is not None:
            q = q.where(Supplier.annual_billing_usd >= min_annual_billing)
        if max_annual_billing is not None:
            q = q.where(Supplier.annual_billing_usd <= max_annual_billing)
        q = q.order_by(Supplier.id)
        return list((await self._session.execute(q)).scalars().all())
