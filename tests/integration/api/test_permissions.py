"""Integration tests for the permission catalogue endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from citizen_services.core.permissions import PermissionResolver


pytestmark = pytest.mark.integration


PERMISSIONS_URL = "/api/v1/permissions"


class TestPermissionCrud:
    """Tests for /permissions CRUD endpoints."""

    async def test_create_permission_derives_code(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """The code is built from the last entity segment and the action."""
        response = await client.post(
            PERMISSIONS_URL,
            json={
                "label": "Approve requests",
                "entity_code": "Entity.Requests",
                "action": "Approve",
            },
            headers=super_admin_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["code"] == "requests.approve"
        assert data["entity_code"] == "entity.requests"
        assert data["action"] == "approve"
        assert data["status"] == "active"

    async def test_create_permission_with_explicit_code(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """An explicit code is lower-cased and kept."""
        response = await client.post(
            PERMISSIONS_URL,
            json={
                "label": "Export requests",
                "entity_code": "entity.requests",
                "action": "export",
                "code": "Requests.Bulk_Export",
            },
            headers=super_admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["code"] == "requests.bulk_export"

    async def test_create_duplicate_permission_conflicts(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """A permission whose code exists gives 409."""
        response = await client.post(
            PERMISSIONS_URL,
            json={"label": "Read roles", "entity_code": "entity.roles", "action": "read"},
            headers=super_admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Permission with this code already exists"
        assert response.json()["code"] == "roles.read"

    async def test_list_permissions_ordered(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """Permissions are ordered by entity, then action."""
        response = await client.get(PERMISSIONS_URL, headers=super_admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 12
        keys = [(p["entity_code"], p["action"]) for p in body["data"]]
        assert keys == sorted(keys)

    async def test_get_missing_permission(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """An unknown permission id gives 404."""
        response = await client.get(
            f"{PERMISSIONS_URL}/{uuid4()}", headers=super_admin_headers
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Permission not found"

    async def test_update_entity_and_action_regenerates_code(
        self, client: AsyncClient, super_admin_headers: dict[str, str], create_permission
    ):
        """Changing both entity and action rebuilds the code."""
        permission = await create_permission("requests.approve")

        response = await client.put(
            f"{PERMISSIONS_URL}/{permission.id}",
            json={"entity_code": "entity.offices", "action": "close"},
            headers=super_admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["code"] == "offices.close"

    async def test_update_action_only_keeps_code(
        self, client: AsyncClient, super_admin_headers: dict[str, str], create_permission
    ):
        """Changing only the action leaves the code alone."""
        permission = await create_permission("requests.approve")

        response = await client.put(
            f"{PERMISSIONS_URL}/{permission.id}",
            json={"action": "sign"},
            headers=super_admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["code"] == "requests.approve"
        assert response.json()["data"]["action"] == "sign"

    async def test_empty_update_is_rejected(
        self, client: AsyncClient, super_admin_headers: dict[str, str], create_permission
    ):
        """An update without fields gives 400."""
        permission = await create_permission("requests.approve")

        response = await client.put(
            f"{PERMISSIONS_URL}/{permission.id}", json={}, headers=super_admin_headers
        )

        assert response.status_code == 400
        assert response.json()["error"] == "No fields to update"

    async def test_delete_permission_revokes_grants(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        create_permission,
        create_role,
        resolver: PermissionResolver,
    ):
        """Deleting a permission removes it from every role."""
        permission = await create_permission("requests.approve")
        role = await create_role([permission])
        assert await resolver.role_has_permission(role.id, "requests.approve")

        response = await client.delete(
            f"{PERMISSIONS_URL}/{permission.id}", headers=super_admin_headers
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Permission deleted successfully"
        assert not await resolver.role_has_permission(role.id, "requests.approve")
        assert await resolver.get_role_permissions(role.id) == []


class TestPermissionAuthorization:
    """The permission endpoints are gated by permissions.* codes."""

    async def test_requires_permission(self, client: AsyncClient, admin_with):
        """An admin without permissions.read gets 403."""
        admin = await admin_with("roles.read")

        response = await client.get(
            PERMISSIONS_URL, headers={"x-admin-id": str(admin.id)}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Required permission: permissions.read"
