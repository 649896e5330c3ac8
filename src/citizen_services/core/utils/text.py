"""Text processing utilities for generated codes."""

import re


def generate_role_code(label: str) -> str:
    """Derive a role code from its label.

    Examples:
        >>> generate_role_code("Super Admin")
        'super_admin'
    """
    return re.sub(r"\s+", "_", label.strip().lower())


def generate_permission_code(entity_code: str, action: str) -> str:
    """Derive a permission code from its entity and action.

    Only the last dotted segment of the entity code is used.

    Examples:
        >>> generate_permission_code("entity.statuses", "Create")
        'statuses.create'
        >>> generate_permission_code("requests", "approve")
        'requests.approve'
    """
    entity_name = entity_code.rsplit(".", 1)[-1]
    return f"{entity_name}.{action}".lower()
