"""Services package: all business logic lives here, never in routers.

Files:
  supplier.py - Supplier CRUD, name lookup and filtered search

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
