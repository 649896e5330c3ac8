"""Resource modules mounted under /api/v1.

Each subpackage exposes a ``router`` in its ``__init__``; the top-level
router mounts whatever :func:`discover_modules` finds.
"""

import pkgutil
from importlib import import_module

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every resource subpackage and collect its router, in name order."""
    routers: list[APIRouter] = []
    for info in sorted(pkgutil.iter_modules(__path__), key=lambda m: m.name):
        if not info.ispkg or info.name.startswith("_"):
            continue
        package = import_module(f"{__name__}.{info.name}")
        router = getattr(package, "router", None)
        if router is None:
            continue
        routers.append(router)
        logger.debug("module_mounted", module=info.name, prefix=router.prefix)
    return routers
