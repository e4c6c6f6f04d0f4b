"""Service Root — GET / describes the running service and its resources."""

from datetime import datetime, timezone

from fastapi import APIRouter

from task_api.config import get_settings

router = APIRouter(tags=["root"])


@router.get("/")
async def service_info():
    settings = get_settings()
    return {
        "message": f"{settings.app_name} is running!",
        "version": settings.app_version,
        "endpoints": {
            "users": "/api/users",
            "projects": "/api/projects",
            "tasks": "/api/tasks",
            "health": "/health",
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
