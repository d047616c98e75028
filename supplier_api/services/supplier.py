"""Supplier service: every business rule of the Supplier resource.

Routers hand in validated schemas; the service turns them into entity
changes through :class:`SupplierRepository` and raises AppException
subclasses for rule violations. No FastAPI here.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.core.config import settings
from supplier_api.core.exceptions import BadRequestError, ConcurrencyConflictError, NotFoundError
from supplier_api.domain.mixins import utcnow
from supplier_api.domain.supplier import Supplier
from supplier_api.repositories.supplier import SupplierRepository
from supplier_api.schemas.supplier import SupplierCreate, SupplierSearchParams, SupplierUpdate

logger = logging.getLogger(__name__)

class SupplierService:
    def __init__(self, session: AsyncSession):
        self._repo = SupplierRepository(session)

    async def list_suppliers(self, page: int, page_size: int) -> tuple[list[Supplier], int]:
        return await self._repo.list(offset=(page - 1) * page_size, limit=page_size)

    async def get_supplier(self, supplier_id: int) -> Supplier:
        supplier = await self._repo.get_by_id(supplier_id)
        if not supplier:
            raise NotFoundError("Supplier", supplier_id)
        return supplier

    async def find_by_name(self, fragment: str) -> list[Supplier]:
        """Name substring lookup. Zero matches is a 404, not an empty list."""
        matches = await self._repo.find_by_name(fragment) if fragment else []
        if not matches:
            raise NotFoundError(f"Supplier with name containing '{fragment}'")
        return matches

    async def search(self, params: SupplierSearchParams) -> list[Supplier]:
        """Filtered search. Zero matches is an empty list, unlike find_by_name."""
        return await self._repo.search(**params.as_filters())

    async def create_supplier(self, data: SupplierCreate) -> Supplier:
        now = utcnow()
        supplier = await self._repo.create(
            **data.model_dump(),
            created_at=now,
            last_edited=now if settings.stamp_last_edited_on_create else None,
        )
        logger.info("Created supplier %s (%s)", supplier.id, supplier.name)
        return supplier

    async def update_supplier(self, supplier_id: int, data: SupplierUpdate) -> Supplier:
        if data.id != supplier_id:
            raise BadRequestError(
                f"Body id {data.id} does not match path id {supplier_id}"
            )
        supplier = await self.get_supplier(supplier_id)

        for field in Supplier.MUTABLE_FIELDS:
            setattr(supplier, field, getattr(data, field))
        supplier.touch()

        try:
            supplier = await self._repo.save(supplier)
        except ConcurrencyConflictError:
            logger.warning("Update of supplier %s lost a race; re-checking", supplier_id)
            if not await self._repo.exists(supplier_id):
                raise NotFoundError("Supplier", supplier_id)
            raise
        logger.info("Updated supplier %s", supplier_id)
        return supplier

    async def delete_supplier(self, supplier_id: int) -> None:
        supplier = await self.get_supplier(supplier_id)
        try:
            await self._repo.delete(supplier)
        except ConcurrencyConflictError:
            logger.warning("Delete of supplier %s lost a race; re-checking", supplier_id)
            if not await self._repo.exists(supplier_id):
                raise NotFoundError("Supplier", supplier_id)
            raise
        logger.info("Deleted supplier %s", supplier_id)
