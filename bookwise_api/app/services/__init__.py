"""
Service layer.

Each service encapsulates the business logic for one domain and works
on an ``EntityStore`` passed to it at construction.  ``Catalog``
bundles them behind a single object.
"""
