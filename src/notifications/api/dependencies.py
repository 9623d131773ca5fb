"""Request dependencies shared by the Notifications routes."""

from fastapi import Header, HTTPException


async def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Return the caller's user id as forwarded by the auth gateway."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_user_id
