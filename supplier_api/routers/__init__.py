"""Routers package: HTTP endpoint definitions.

Files:
  suppliers.py - Supplier resource (/api/suppliers/*)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to supplier_api/services/.
"""
