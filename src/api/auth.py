from fastapi import Header, HTTPException

from src.config import get_settings


async def require_admin_key(x_admin_key: str = Header(None)) -> None:
    """Require the admin key in production."""
    settings = get_settings()
    if not settings.is_production:
        return
    if not settings.admin_api_key:
        raise HTTPException(status_code=503, detail="Admin API not configured")
    if x_admin_key != settings.admin_api_key:
        raise HTTPException(status_code=401, detail="Invalid admin key")
