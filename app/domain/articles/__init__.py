"""
Articles bounded context: domain layer.

This module contains the domain model for publishing articles:
- Article entity and its tags
- Validation outcome of a submitted form
- Ports for validating and persisting form input
"""
