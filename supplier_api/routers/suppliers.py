"""Supplier CRUD router.

Pattern:
  1. Inject a request-scoped DB session via Depends(get_db)
  2. Instantiate the service with that session
  3. Call service methods and shape the result into the response model

Static paths (/search, /name/{name}) are declared before /{supplier_id}.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.core.pagination import PaginationParams
from supplier_api.core.response import PageResponse, paginated
from supplier_api.db.base import get_db
from supplier_api.schemas.supplier import (
    SupplierCreate,
    SupplierOut,
    SupplierSearchParams,
    SupplierUpdate,
)
from supplier_api.services.supplier import SupplierService

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def _svc(session: AsyncSession) -> SupplierService:
    return SupplierService(session)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=PageResponse[SupplierOut])
async def list_suppliers(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List suppliers in id order (paginated)."""
    items, total = await _svc(session).list_suppliers(pagination.page, pagination.page_size)
    return paginated(
        [SupplierOut.model_validate(s) for s in items],
        total, pagination.page, pagination.page_size,
    )


@router.get("/search", response_model=list[SupplierOut])
async def search_suppliers(
    name: Optional[str] = Query(default=None, description="Name contains"),
    country: Optional[str] = Query(default=None, description="Exact country"),
    min_annual_billing: Optional[Decimal] = Query(default=None, alias="minAnnualBilling"),
    max_annual_billing: Optional[Decimal] = Query(default=None, alias="maxAnnualBilling"),
    session: AsyncSession = Depends(get_db),
):
    """Filter suppliers; every filter is optional and they combine with AND."""
    params = SupplierSearchParams(
        name=name,
        country=country,
        min_annual_billing=min_annual_billing,
        max_annual_billing=max_annual_billing,
    )
    suppliers = await _svc(session).search(params)
    return [SupplierOut.model_validate(s) for s in suppliers]


@router.get("/name/{name}", response_model=list[SupplierOut])
async def get_suppliers_by_name(
    name: str,
    session: AsyncSession = Depends(get_db),
):
    """Suppliers whose name contains the fragment; 404 when nothing matches."""
    suppliers = await _svc(session).find_by_name(name)
    return [SupplierOut.model_validate(s) for s in suppliers]


@router.get("/{supplier_id}", response_model=SupplierOut)
async def get_supplier(
    supplier_id: int,
    session: AsyncSession = Depends(get_db),
):
    supplier = await _svc(session).get_supplier(supplier_id)
    return SupplierOut.model_validate(supplier)


@router.post("", response_model=SupplierOut, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    body: SupplierCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    """Create a supplier; the Location header points at the new resource."""
    supplier = await _svc(session).create_supplier(body)
    response.headers["Location"] = str(
        request.url_for("get_supplier", supplier_id=supplier.id)
    )
    return SupplierOut.model_validate(supplier)


@router.put("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_supplier(
    supplier_id: int,
    body: SupplierUpdate,
    session: AsyncSession = Depends(get_db),
):
    """Replace every mutable field. The body id must equal the path id."""
    await _svc(session).update_supplier(supplier_id, body)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: int,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_supplier(supplier_id)
