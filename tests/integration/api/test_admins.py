"""Integration tests for admin onboarding and management."""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from citizen_services.core.auth import verify_password
from citizen_services.core.permissions import Admin, Role


pytestmark = pytest.mark.integration


ADMINS_URL = "/api/v1/admins"


@pytest.fixture
async def clerk_role(create_role, create_permission) -> Role:
    """A role that may only read roles."""
    return await create_role([await create_permission("roles.read")], code="clerk")


def onboarding_payload(role_id, **overrides) -> dict:
    payload = {
        "email": "New.Admin@Example.gov",
        "password": "s3cret-pass",
        "firstname": "Ama",
        "lastname": "Mensah",
        "country": "gha",
        "role_id": str(role_id),
    }
    payload.update(overrides)
    return payload


async def load_admin(
    session_factory: async_sessionmaker[AsyncSession], email: str
) -> Admin | None:
    async with session_factory() as session:
        result = await session.execute(select(Admin).where(Admin.email == email))
        return result.scalar_one_or_none()


class TestOnboarding:
    """Tests for POST /admins."""

    async def test_onboard_admin(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        clerk_role: Role,
        session_factory,
    ):
        """Onboarding normalizes input and stores a bcrypt hash."""
        response = await client.post(
            ADMINS_URL,
            json=onboarding_payload(clerk_role.id),
            headers=super_admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Admin onboarded successfully"
        data = body["data"]
        assert data["email"] == "new.admin@example.gov"
        assert data["country"] == "GHA"
        assert data["role_id"] == str(clerk_role.id)
        assert data["status"] == "enabled"
        assert "password" not in data
        assert "password_hash" not in data

        stored = await load_admin(session_factory, "new.admin@example.gov")
        assert stored is not None
        assert stored.password_hash != "s3cret-pass"
        assert verify_password("s3cret-pass", stored.password_hash)

    async def test_onboarded_admin_is_gated_by_role(
        self, client: AsyncClient, super_admin_headers: dict[str, str], clerk_role: Role
    ):
        """A new admin can do exactly what their role allows."""
        created = await client.post(
            ADMINS_URL,
            json=onboarding_payload(clerk_role.id),
            headers=super_admin_headers,
        )
        headers = {"x-admin-id": created.json()["data"]["id"]}

        assert (await client.get("/api/v1/roles", headers=headers)).status_code == 200
        assert (await client.get(ADMINS_URL, headers=headers)).status_code == 403

    async def test_duplicate_email_conflicts(
        self, client: AsyncClient, super_admin_headers: dict[str, str], clerk_role: Role
    ):
        """Emails are unique regardless of case."""
        await client.post(
            ADMINS_URL,
            json=onboarding_payload(clerk_role.id),
            headers=super_admin_headers,
        )

        response = await client.post(
            ADMINS_URL,
            json=onboarding_payload(clerk_role.id, email="NEW.ADMIN@example.gov"),
            headers=super_admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Admin with this email already exists"

    async def test_unknown_role_is_invalid(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """Onboarding onto a role that does not exist gives 400."""
        response = await client.post(
            ADMINS_URL,
            json=onboarding_payload(uuid4()),
            headers=super_admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid role"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("email", "not-an-email"),
            ("password", "short"),
            ("country", "GH"),
            ("country", "G1A"),
            ("status", "active"),
            ("status", "rejected"),
        ],
    )
    async def test_invalid_input(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        clerk_role: Role,
        field: str,
        value: str,
    ):
        """Malformed onboarding data is a 400 validation error."""
        response = await client.post(
            ADMINS_URL,
            json=onboarding_payload(clerk_role.id, **{field: value}),
            headers=super_admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"
        assert response.json()["errors"][0]["field"] == field


class TestAdminManagement:
    """Tests for listing, updating and deleting admins."""

    async def test_list_admins(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        create_admin,
        clerk_role: Role,
    ):
        """All admins are listed with a count."""
        await create_admin(clerk_role)

        response = await client.get(ADMINS_URL, headers=super_admin_headers)

        assert response.status_code == 200
        assert response.json()["count"] == 2
        assert all("password_hash" not in a for a in response.json()["data"])

    async def test_get_missing_admin(
        self, client: AsyncClient, super_admin_headers: dict[str, str]
    ):
        """An unknown admin id gives 404."""
        response = await client.get(f"{ADMINS_URL}/{uuid4()}", headers=super_admin_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "Admin not found"

    async def test_update_admin(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        create_admin,
        clerk_role: Role,
        session_factory,
    ):
        """Provided fields change and a new password is hashed."""
        admin = await create_admin(clerk_role)

        response = await client.put(
            f"{ADMINS_URL}/{admin.id}",
            json={"country": "nga", "password": "another-pass", "status": "disabled"},
            headers=super_admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["country"] == "NGA"
        assert response.json()["data"]["status"] == "disabled"
        stored = await load_admin(session_factory, admin.email)
        assert verify_password("another-pass", stored.password_hash)

    async def test_update_to_unknown_role(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        create_admin,
        clerk_role: Role,
    ):
        """Moving an admin to a role that does not exist gives 400."""
        admin = await create_admin(clerk_role)

        response = await client.put(
            f"{ADMINS_URL}/{admin.id}",
            json={"role_id": str(uuid4())},
            headers=super_admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid role"

    async def test_update_to_taken_email(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        super_admin: Admin,
        create_admin,
        clerk_role: Role,
    ):
        """Taking another admin's email gives 409."""
        admin = await create_admin(clerk_role)

        response = await client.put(
            f"{ADMINS_URL}/{admin.id}",
            json={"email": super_admin.email.upper()},
            headers=super_admin_headers,
        )

        assert response.status_code == 409

    async def test_role_change_applies_to_next_request(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        create_admin,
        create_role,
        clerk_role: Role,
    ):
        """Moving an admin to another role changes what they may do at once."""
        admin = await create_admin(clerk_role)
        empty_role = await create_role()
        headers = {"x-admin-id": str(admin.id)}
        assert (await client.get("/api/v1/roles", headers=headers)).status_code == 200

        await client.put(
            f"{ADMINS_URL}/{admin.id}",
            json={"role_id": str(empty_role.id)},
            headers=super_admin_headers,
        )

        assert (await client.get("/api/v1/roles", headers=headers)).status_code == 403

    async def test_delete_admin(
        self,
        client: AsyncClient,
        super_admin_headers: dict[str, str],
        create_admin,
        clerk_role: Role,
    ):
        """Deleting an admin removes it and revokes its access."""
        admin = await create_admin(clerk_role)

        response = await client.delete(
            f"{ADMINS_URL}/{admin.id}", headers=super_admin_headers
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Admin deleted successfully"
        follow_up = await client.get(
            "/api/v1/roles", headers={"x-admin-id": str(admin.id)}
        )
        assert follow_up.status_code == 403
