"""Credential utilities for admin accounts."""

from citizen_services.core.auth.backend import hash_password, verify_password


__all__ = [
    "hash_password",
    "verify_password",
]
