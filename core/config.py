"""
Platform Configuration

Explicit configuration object for the course platform services. Values are
read once from Django settings (which in turn are populated from the
environment, see backend/settings.py) and handed to service constructors
instead of being looked up ad hoc inside business logic.

Author: Course Platform Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformConfig:
    """
    Immutable runtime configuration.

    Attributes:
        admin_user_id: Id of the single administrator account
        frontend_url: Base URL used for checkout redirect targets
        stripe_secret_key: Active Stripe secret key (test or live)
        stripe_webhook_secret: Signing secret of the webhook endpoint
        stripe_api_version: Pinned Stripe API version
        currency: ISO currency code used for course prices
        mux_token_id: Mux access token id
        mux_token_secret: Mux access token secret
        mux_base_url: Base URL of the Mux video API
        mux_timeout: Timeout in seconds for Mux requests
    """

    admin_user_id: str
    frontend_url: str
    stripe_secret_key: str
    stripe_webhook_secret: str
    stripe_api_version: str
    currency: str
    mux_token_id: str
    mux_token_secret: str
    mux_base_url: str
    mux_timeout: int

    @classmethod
    def from_settings(cls, source: Optional[Any] = None) -> "PlatformConfig":
        source = source or settings
        return cls(
            admin_user_id=str(getattr(source, "ADMIN_USER_ID", "") or ""),
            frontend_url=(getattr(source, "FRONTEND_URL", "") or "").rstrip("/"),
            stripe_secret_key=getattr(source, "STRIPE_SECRET_KEY", ""),
            stripe_webhook_secret=getattr(source, "STRIPE_WEBHOOK_SECRET", ""),
            stripe_api_version=getattr(source, "STRIPE_API_VERSION", "2024-06-20"),
            currency=getattr(source, "DEFAULT_CURRENCY", "jpy"),
            mux_token_id=getattr(source, "MUX_TOKEN_ID", ""),
            mux_token_secret=getattr(source, "MUX_TOKEN_SECRET", ""),
            mux_base_url=(
                getattr(source, "MUX_API_BASE_URL", "https://api.mux.com") or ""
            ).rstrip("/"),
            mux_timeout=int(getattr(source, "MUX_TIMEOUT_SECONDS", 30)),
        )


@lru_cache(maxsize=1)
def get_platform_config() -> PlatformConfig:
    """Return the process-wide configuration, built on first use."""
    config = PlatformConfig.from_settings()
    if not config.admin_user_id:
        logger.warning("ADMIN_USER_ID is not configured; admin endpoints are locked.")
    return config


@receiver(setting_changed)
def _reset_platform_config(sender, setting: str, **kwargs) -> None:
    # override_settings in tests must be visible to newly built services
    get_platform_config.cache_clear()
