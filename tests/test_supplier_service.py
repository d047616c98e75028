import pytest
from decimal import Decimal
from sqlalchemy import delete

from supplier_api.core.config import settings
from supplier_api.core.exceptions import BadRequestError, ConcurrencyConflictError, NotFoundError
from supplier_api.domain.mixins import as_utc
from supplier_api.domain.supplier import Supplier
from supplier_api.repositories.supplier import SupplierRepository
from supplier_api.schemas.supplier import SupplierCreate, SupplierSearchParams, SupplierUpdate
from supplier_api.services.supplier import SupplierService


@pytest.mark.asyncio
async def test_create_leaves_last_edited_null(session):
    supplier = await SupplierService(session).create_supplier(SupplierCreate(name="Acme Corp"))

    assert supplier.id is not None
    assert supplier.created_at is not None
    assert supplier.last_edited is None


@pytest.mark.asyncio
async def test_create_stamps_both_when_configured(session, monkeypatch):
    monkeypatch.setattr(settings, "stamp_last_edited_on_create", True)

    supplier = await SupplierService(session).create_supplier(SupplierCreate(name="Acme Corp"))

    assert supplier.last_edited == supplier.created_at


@pytest.mark.asyncio
async def test_update_moves_last_edited_forward(session, make_supplier):
    supplier = await make_supplier("Acme Corp")
    svc = SupplierService(session)

    first = await svc.update_supplier(supplier.id, SupplierUpdate(id=supplier.id, name="Acme 1"))
    first_edit = as_utc(first.last_edited)
    second = await svc.update_supplier(supplier.id, SupplierUpdate(id=supplier.id, name="Acme 2"))

    assert as_utc(second.last_edited) > first_edit
    assert second.name == "Acme 2"
    assert as_utc(second.created_at) == as_utc(supplier.created_at)


@pytest.mark.asyncio
async def test_update_id_mismatch_fails_before_lookup(session):
    # No row 5 exists; the mismatch must win over not-found
    with pytest.raises(BadRequestError):
        await SupplierService(session).update_supplier(5, SupplierUpdate(id=6, name="Acme"))


@pytest.mark.asyncio
async def test_update_missing_supplier(session):
    with pytest.raises(NotFoundError):
        await SupplierService(session).update_supplier(3, SupplierUpdate(id=3, name="Ghost"))


@pytest.mark.asyncio
async def test_update_after_concurrent_delete_is_not_found(session, session_factory, make_supplier, monkeypatch):
    supplier = await make_supplier("Acme Corp")
    original_save = SupplierRepository.save

    async def save_after_concurrent_delete(self, instance):
        async with session_factory() as other:
            await other.execute(delete(Supplier).where(Supplier.id == supplier.id))
            await other.commit()
        return await original_save(self, instance)

    monkeypatch.setattr(SupplierRepository, "save", save_after_concurrent_delete)

    with pytest.raises(NotFoundError):
        await SupplierService(session).update_supplier(
            supplier.id, SupplierUpdate(id=supplier.id, name="Acme Renamed")
        )


@pytest.mark.asyncio
async def test_update_conflict_on_existing_row_is_reraised(session, make_supplier, monkeypatch):
    supplier = await make_supplier("Acme Corp")

    async def conflicting_save(self, instance):
        raise ConcurrencyConflictError("Supplier", instance.id)

    monkeypatch.setattr(SupplierRepository, "save", conflicting_save)

    with pytest.raises(ConcurrencyConflictError):
        await SupplierService(session).update_supplier(
            supplier.id, SupplierUpdate(id=supplier.id, name="Acme Renamed")
        )


@pytest.mark.asyncio
async def test_delete_then_get_is_not_found(session, make_supplier):
    supplier = await make_supplier("Acme Corp")
    svc = SupplierService(session)

    await svc.delete_supplier(supplier.id)

    with pytest.raises(NotFoundError):
        await svc.get_supplier(supplier.id)


@pytest.mark.asyncio
async def test_delete_after_concurrent_delete_is_not_found(session, session_factory, make_supplier, monkeypatch):
    supplier = await make_supplier("Acme Corp")
    original_delete = SupplierRepository.delete

    async def delete_after_concurrent_delete(self, instance):
        async with session_factory() as other:
            await other.execute(delete(Supplier).where(Supplier.id == supplier.id))
            await other.commit()
        return await original_delete(self, instance)

    monkeypatch.setattr(SupplierRepository, "delete", delete_after_concurrent_delete)

    with pytest.raises(NotFoundError):
        await SupplierService(session).delete_supplier(supplier.id)


@pytest.mark.asyncio
async def test_delete_conflict_on_existing_row_is_reraised(session, make_supplier, monkeypatch):
    supplier = await make_supplier("Acme Corp")

    async def conflicting_delete(self, instance):
        raise ConcurrencyConflictError("Supplier", instance.id)

    monkeypatch.setattr(SupplierRepository, "delete", conflicting_delete)

    with pytest.raises(ConcurrencyConflictError):
        await SupplierService(session).delete_supplier(supplier.id)


@pytest.mark.asyncio
async def test_delete_missing_supplier(session):
    with pytest.raises(NotFoundError):
        await SupplierService(session).delete_supplier(1)


@pytest.mark.asyncio
async def test_find_by_name_empty_fragment_is_not_found(session, catalog):
    with pytest.raises(NotFoundError):
        await SupplierService(session).find_by_name("")


@pytest.mark.asyncio
async def test_find_by_name_treats_wildcards_literally(session, catalog):
    with pytest.raises(NotFoundError):
        await SupplierService(session).find_by_name("%")


@pytest.mark.asyncio
async def test_search_empty_result_is_a_list(session, catalog):
    result = await SupplierService(session).search(SupplierSearchParams(country="FR"))
    assert result == []


@pytest.mark.asyncio
async def test_search_minimum_only(session, catalog):
    result = await SupplierService(session).search(
        SupplierSearchParams(min_annual_billing=Decimal("1500.50"))
    )
    assert [s.name for s in result] == ["Acme Corp", "Globex"]


@pytest.mark.asyncio
async def test_list_second_page(session, make_supplier):
    for i in range(12):
        await make_supplier(f"Supplier {i}")

    items, total = await SupplierService(session).list_suppliers(page=2, page_size=10)

    assert total == 12
    assert [s.name for s in items] == ["Supplier 10", "Supplier 11"]
