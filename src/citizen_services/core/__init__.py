"""Core services and cross-cutting concerns.

Import from the subpackages directly (``citizen_services.core.errors``,
``citizen_services.core.permissions``, ...); this package stays empty so
that ``citizen_services.config`` can import constants without pulling in
the database layer.
"""
