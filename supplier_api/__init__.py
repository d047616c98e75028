"""Supplier API: async CRUD service for Supplier records."""
