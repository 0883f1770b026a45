"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
error mapping, security middleware and logging configuration.
"""
