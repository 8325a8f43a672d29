"""
Health check and service status endpoints.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Dict, Any
from fastapi import APIRouter
from ..config.settings import get_settings
from .. import schemas

logger = logging.getLogger(__name__)
router = APIRouter()

STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    return round(time.monotonic() - STARTED_AT, 3)


@router.get("/health", response_model=schemas.HealthStatus, summary="Health Check")
def health_check():
    """Liveness probe: status, current UTC time and process uptime in seconds."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": uptime_seconds(),
    }


@router.get("/", summary="Service Banner")
def read_root() -> Dict[str, str]:
    return {"message": "Job Portal API is running!"}


@router.get("/api/health/detailed", summary="Detailed Health Check")
def detailed_health_check() -> Dict[str, Any]:
    """
    Detailed health check with configuration status.
    Never includes secrets, only whether they are configured.
    """
    settings = get_settings()
    health_status = {
        "status": "healthy",
        "uptime": uptime_seconds(),
        "app_info": {
            "name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
            "testing": settings.testing
        },
        "configuration": {
            "log_level": settings.log_level,
            "database_type": settings.get_database_url().split(":", 1)[0],
            "cors_enabled": settings.cors_enabled,
            "api_docs_enabled": settings.api_docs_enabled
        },
        "security": {
            "token_expiry_minutes": settings.access_token_expire_minutes,
            "default_credentials_in_use": settings.uses_default_credentials()
        }
    }

    config_issues = settings.validate_required_settings()
    if config_issues:
        health_status["status"] = "degraded"
        health_status["configuration_issues"] = config_issues
        logger.warning("Configuration issues found: %s", config_issues)

    return health_status
