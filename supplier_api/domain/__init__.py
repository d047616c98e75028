"""Domain package: all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  supplier.py - Supplier entity (explicit attribute-to-column mapping)
  mixins.py - Shared TimestampMixin and UTC helpers
"""

from supplier_api.domain.supplier import Supplier

__all__ = ["Supplier"]
