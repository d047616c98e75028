"""Pydantic schemas package.

Folder intent:
  common.py - CamelModel base + HealthResponse (all schemas inherit CamelModel)
  supplier.py - Supplier Create / Update / Out transfer shapes and search filters
"""
