"""Role check for write endpoints.

Authentication happens upstream; the gateway forwards the caller's roles
as a comma-separated ``X-User-Roles`` header.
"""

from fastapi import Header, HTTPException, status

ADMIN_ROLE = "ADMIN"


def parse_roles(header_value: str | None) -> set[str]:
    if not header_value:
        return set()
    return {role.strip().upper() for role in header_value.split(",") if role.strip()}


async def require_admin(x_user_roles: str | None = Header(default=None)) -> None:
    """FastAPI dependency that lets only ADMIN callers through."""
    if ADMIN_ROLE not in parse_roles(x_user_roles):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
