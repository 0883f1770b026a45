"""
Articles service: form processing for a small publishing API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - articles: Article forms (validate, then create/update), listing and lookup.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: FormService and read use cases, DTOs.
    - infrastructure: Adapters (SQLAlchemy repository, pydantic validator).
    - interfaces: FastAPI routers, Pydantic response schemas, wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
