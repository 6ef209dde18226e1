"""
High-level use cases for the pet catalog.

The provider dispatches content URIs to the SQL repository, the resolver
routes URIs to providers by authority, and catalog_service wraps the list
screen actions. Routers and scripts call these instead of the repository.
"""
