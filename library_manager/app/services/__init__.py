"""
Service layer.

Each service encapsulates the business rules for one part of the
catalog and works on a ``CatalogStore`` handed to it at construction,
so the same services run against a JSON file or an in-memory slot.
"""
