"""
Persistence adapters.

Services depend on the repository primitives (query/insert/delete/update by
table and column names) rather than touching SQLAlchemy sessions directly.
"""
