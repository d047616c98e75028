"""Repositories package: the only layer that builds SQLAlchemy queries."""

from supplier_api.repositories.supplier import SupplierRepository

__all__ = ["SupplierRepository"]
