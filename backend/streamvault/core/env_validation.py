"""
Environment variable validation.

Checks configuration at startup and reports problems through the log.
The service still starts with an incomplete configuration: store-backed
operations degrade to empty results or 500 responses.
"""

from typing import List, Tuple
from urllib.parse import urlparse

from streamvault.core.config import settings
from streamvault.core.logging import get_logger

logger = get_logger(__name__)


def validate_supabase_settings() -> List[str]:
    """
    Validate Supabase connection settings.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not settings.SUPABASE_URL:
        errors.append("SUPABASE_URL is not set")
    else:
        parsed = urlparse(settings.SUPABASE_URL)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(
                "SUPABASE_URL must be an absolute URL (format: https://<project>.supabase.co)"
            )

    if not settings.SUPABASE_ANON_KEY:
        errors.append("SUPABASE_ANON_KEY is not set")
    elif "your-" in settings.SUPABASE_ANON_KEY.lower():
        errors.append(
            "SUPABASE_ANON_KEY appears to be a placeholder - update with the project's anon key"
        )

    return errors


def validate_production_settings() -> List[str]:
    """
    Validate production-specific settings.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not settings.is_production:
        return errors

    if settings.DEBUG:
        errors.append("DEBUG must be false in production")

    if any("localhost" in origin for origin in settings.ALLOWED_ORIGINS):
        logger.warning(
            "localhost_in_allowed_origins",
            message="ALLOWED_ORIGINS includes localhost in production - may be insecure"
        )

    if settings.LOG_FORMAT != "json":
        logger.warning(
            "log_format_not_json",
            message="LOG_FORMAT should be 'json' in production for better log aggregation"
        )

    return errors


def validate_environment() -> Tuple[bool, List[str]]:
    """
    Validate all environment variables.

    Returns:
        (is_valid, list_of_errors)
    """
    all_errors = []

    logger.info(
        "validating_environment",
        app_env=settings.APP_ENV,
        app_name=settings.APP_NAME
    )

    all_errors.extend(validate_supabase_settings())
    all_errors.extend(validate_production_settings())

    if all_errors:
        logger.warning(
            "environment_validation_failed",
            errors=all_errors,
            error_count=len(all_errors)
        )
        return False, all_errors

    logger.info(
        "environment_validation_successful",
        app_env=settings.APP_ENV,
        supabase_configured=settings.supabase_configured,
    )
    return True, []
