"""
User Directory API.

Application package root. A small CRUD service over a single User
entity, laid out as ports & adapters.

Layers:
    - domain: Entities, query vocabulary, ports (ABCs), errors.
    - application: Use cases, DTOs (response projections).
    - infrastructure: SQLAlchemy adapter implementing the store port.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
