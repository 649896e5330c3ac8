"""Pytest configuration and shared fixtures.

Every test gets its own on-disk SQLite store. Fixtures commit what they
create, because the app and the permission resolver read through their own
sessions, never through the ``db`` fixture.
"""

from collections.abc import AsyncGenerator, Callable, Sequence
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, insert, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from citizen_services.config import Settings
from citizen_services.core.database import Base, build_session_factory
from citizen_services.core.permissions import (
    Admin,
    Permission,
    PermissionResolver,
    Role,
    roles_permissions,
)
from citizen_services.main import create_app
from tests.factories.admin import AdminFactory
from tests.factories.permission import PermissionFactory
from tests.factories.role import RoleFactory


ADMIN_HEADER = "x-admin-id"


def _enable_sqlite_constraints(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


@pytest.fixture
def settings() -> Settings:
    """Settings for the app under test."""
    return Settings(environment="test", log_level="WARNING")


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'store.db'}",
        poolclass=NullPool,
        echo=False,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_constraints)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return build_session_factory(engine)


@pytest.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session used by tests to seed data. Seed helpers commit."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def resolver(session_factory: async_sessionmaker[AsyncSession]) -> PermissionResolver:
    """Permission resolver reading the test store."""
    return PermissionResolver(session_factory)


@pytest.fixture
def app(
    settings: Settings, session_factory: async_sessionmaker[AsyncSession]
) -> FastAPI:
    """Create test application instance bound to the test store."""
    return create_app(settings=settings, session_factory=session_factory)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Permission Store Seeding
# ============================================================


@pytest.fixture
def create_role(db: AsyncSession) -> Callable:
    """Persist a role, optionally holding the given permissions."""

    async def _create_role(
        permissions: Sequence[Permission] = (), **overrides
    ) -> Role:
        role = RoleFactory.build(**overrides)
        db.add(role)
        await db.flush()
        if permissions:
            await db.execute(
                insert(roles_permissions),
                [{"role_id": role.id, "permission_id": p.id} for p in permissions],
            )
        await db.commit()
        return role

    return _create_role


@pytest.fixture
def create_permission(db: AsyncSession) -> Callable:
    """Persist a permission with the given code, reusing an existing one."""

    async def _create_permission(code: str, **overrides) -> Permission:
        result = await db.execute(select(Permission).where(Permission.code == code))
        existing = result.scalar_one_or_none()
        await db.commit()
        if existing is not None:
            return existing

        entity, action = code.split(".", 1)
        overrides.setdefault("entity_code", f"entity.{entity}")
        overrides.setdefault("action", action)
        permission = PermissionFactory.build(code=code, **overrides)
        db.add(permission)
        await db.commit()
        return permission

    return _create_permission


@pytest.fixture
def create_admin(db: AsyncSession) -> Callable:
    """Persist an admin holding the given role."""

    async def _create_admin(role: Role, **overrides) -> Admin:
        admin = AdminFactory.build(role_id=role.id, **overrides)
        db.add(admin)
        await db.commit()
        return admin

    return _create_admin


@pytest.fixture
def admin_with(
    create_permission: Callable, create_role: Callable, create_admin: Callable
) -> Callable:
    """Persist an admin whose role holds exactly the given permission codes."""

    async def _admin_with(*codes: str) -> Admin:
        permissions = [await create_permission(code) for code in codes]
        role = await create_role(permissions)
        return await create_admin(role)

    return _admin_with


@pytest.fixture
async def super_admin(admin_with: Callable) -> Admin:
    """An admin holding every administrative permission."""
    return await admin_with(
        *(
            f"{entity}.{action}"
            for entity in ("admins", "roles", "permissions")
            for action in ("read", "create", "update", "delete")
        )
    )


@pytest.fixture
def super_admin_headers(super_admin: Admin) -> dict[str, str]:
    """Headers identifying the super admin to the permission gate."""
    return {ADMIN_HEADER: str(super_admin.id)}
