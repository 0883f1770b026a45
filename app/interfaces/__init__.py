"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and dependency
wiring. No business logic belongs here.
Routes call services and use cases and return responses.
"""
