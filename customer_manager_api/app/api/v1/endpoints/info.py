"""
Information endpoint for API v1.

Reports the service name and version.  Publicly accessible; useful as a
liveness probe.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from customer_manager_api.app.api.deps import get_settings
from customer_manager_api.app.core.config import Settings

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {"status": "ok", "name": settings.project_name, "version": settings.api_version}
