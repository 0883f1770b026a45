"""
Application layer package.

Contains services and use cases that orchestrate domain ports.
This layer depends on domain ports, never on infrastructure.
"""
