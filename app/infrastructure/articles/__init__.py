"""
Infrastructure adapters for the articles bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems: the relational database and the validation library.
"""
