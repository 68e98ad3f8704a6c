# /halaqat-backend/app/core/security.py

"""
Credential comparison.

KNOWN WEAKNESS: passwords are stored and compared as plaintext. Every
credential check in the application goes through `verify_password`, so a
hashed scheme can replace this one function without touching call sites.
Changing it also requires migrating the stored passwords.
"""

import secrets
from typing import Optional


def verify_password(plain_password: str, stored_password: Optional[str]) -> bool:
    """Returns True only when the supplied password equals the stored one."""
    if stored_password is None:
        return False
    return secrets.compare_digest(
        plain_password.encode("utf-8"), stored_password.encode("utf-8")
    )
