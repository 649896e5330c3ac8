#!/usr/bin/env python
"""
Seed the permission store with the default permissions and super admin role.

Usage:
    python scripts/seed.py
    python scripts/seed.py --email root@example.gov --password 'change-me-now' --country GHA
"""

import argparse
import asyncio
import sys

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession


# Add src to path for imports
sys.path.insert(0, "src")

from citizen_services.config import get_settings
from citizen_services.core.auth import hash_password
from citizen_services.core.database import (
    Base,
    build_engine,
    build_session_factory,
)
from citizen_services.core.permissions.models import (
    Admin,
    Permission,
    Role,
    roles_permissions,
)


SEED_ENTITIES = ("admins", "roles", "permissions")
SEED_ACTIONS = ("read", "create", "update", "delete")

SUPER_ADMIN_CODE = "super_admin"


async def seed_permissions(session: AsyncSession) -> list[Permission]:
    """Ensure every default ``<entity>.<action>`` permission exists."""
    existing = {
        p.code: p for p in (await session.execute(select(Permission))).scalars()
    }

    permissions = []
    for entity in SEED_ENTITIES:
        for action in SEED_ACTIONS:
            code = f"{entity}.{action}"
            permission = existing.get(code)
            if permission is None:
                permission = Permission(
                    label=f"{action.capitalize()} {entity}",
                    code=code,
                    entity_code=f"entity.{entity}",
                    action=action,
                    description=f"Allows to {action} {entity}",
                )
                session.add(permission)
                print(f"Created permission: {code}")
            permissions.append(permission)

    await session.flush()
    return permissions


async def seed_super_admin_role(
    session: AsyncSession, permissions: list[Permission]
) -> Role:
    """Ensure the super admin role exists and holds every given permission."""
    result = await session.execute(select(Role).where(Role.code == SUPER_ADMIN_CODE))
    role = result.scalar_one_or_none()

    if role is None:
        role = Role(
            label="Super Admin",
            code=SUPER_ADMIN_CODE,
            description="Full access to administrative resources",
        )
        session.add(role)
        await session.flush()
        print(f"Created role: {role.code} ({role.id})")
    else:
        print(f"Role already exists: {role.code}")

    granted = set(
        (
            await session.execute(
                select(roles_permissions.c.permission_id).where(
                    roles_permissions.c.role_id == role.id
                )
            )
        ).scalars()
    )
    missing = [p.id for p in permissions if p.id not in granted]
    if missing:
        await session.execute(
            insert(roles_permissions),
            [{"role_id": role.id, "permission_id": pid} for pid in missing],
        )
        print(f"Granted {len(missing)} permission(s) to {role.code}")

    return role


async def seed_first_admin(
    session: AsyncSession,
    role: Role,
    email: str,
    password: str,
    country: str,
) -> Admin:
    """Ensure an admin with the given email exists."""
    email = email.lower()
    result = await session.execute(select(Admin).where(Admin.email == email))
    admin = result.scalar_one_or_none()

    if admin is not None:
        print(f"Admin already exists: {admin.email}")
        return admin

    admin = Admin(
        email=email,
        password_hash=hash_password(password),
        country=country.upper(),
        role_id=role.id,
    )
    session.add(admin)
    await session.flush()
    print(f"Created admin: {admin.email} ({admin.id})")
    return admin


async def seed(
    session: AsyncSession,
    email: str | None = None,
    password: str | None = None,
    country: str = "GHA",
) -> Role:
    """Seed the default permission set. Safe to run repeatedly.

    Args:
        session: Session to seed through; the caller commits
        email: Optional first admin email
        password: First admin password, required with ``email``
        country: First admin ISO3 country code

    Returns:
        The super admin role
    """
    permissions = await seed_permissions(session)
    role = await seed_super_admin_role(session, permissions)
    if email:
        if not password:
            raise ValueError("A password is required to create the first admin")
        await seed_first_admin(session, role, email, password, country)
    return role


async def main(email: str | None, password: str | None, country: str) -> None:
    """Create the schema and run the seed."""
    engine = build_engine(get_settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        session_factory = build_session_factory(engine)
        async with session_factory() as session:
            await seed(session, email=email, password=password, country=country)
            await session.commit()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the permission store")
    parser.add_argument("--email", "-e", help="Email of the first admin to create")
    parser.add_argument("--password", "-p", help="Password of the first admin")
    parser.add_argument(
        "--country",
        "-c",
        default="GHA",
        help="ISO3 country code of the first admin (default: GHA)",
    )
    args = parser.parse_args()

    if args.email and not args.password:
        parser.error("--password is required with --email")

    asyncio.run(main(args.email, args.password, args.country))
