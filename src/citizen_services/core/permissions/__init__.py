"""Permission system for role-based admin authorization."""

from citizen_services.core.permissions.gate import (
    AdminIdExtractor,
    CurrentAdmin,
    DefaultAdminIdExtractor,
    PermissionGate,
    PermissionMode,
    get_current_admin,
    get_permission_resolver,
    require_all_permissions,
    require_any_permission,
    require_permission,
)
from citizen_services.core.permissions.models import (
    Admin,
    Permission,
    Role,
    roles_permissions,
)
from citizen_services.core.permissions.resolver import PermissionResolver
from citizen_services.core.permissions.schemas import AdminIdentity


__all__ = [
    # Models
    "Admin",
    # Gate
    "AdminIdExtractor",
    "AdminIdentity",
    "CurrentAdmin",
    "DefaultAdminIdExtractor",
    "Permission",
    "PermissionGate",
    "PermissionMode",
    # Resolver
    "PermissionResolver",
    "Role",
    "get_current_admin",
    "get_permission_resolver",
    "require_all_permissions",
    "require_any_permission",
    "require_permission",
    "roles_permissions",
]
