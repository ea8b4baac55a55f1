"""Application state and dependencies."""

from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi import Request

from adhan_core.config import AppConfig, get_config
from adhan_core.services.prayer_service import PrayerService
from adhan_core.services.timezone_lookup import TimezoneResolver


@dataclass
class AppState:
    """Application state container."""

    config: AppConfig
    prayer_service: PrayerService
    timezone_resolver: TimezoneResolver
    started_at: datetime


def initialize_app_state(config: AppConfig | None = None) -> AppState:
    """
    Initialize application state.

    Args:
        config: Uygulama yapılandırması (varsayılan: ortam değişkenleri)

    Returns:
        Initialized AppState
    """
    return AppState(
        config=config or get_config(),
        prayer_service=PrayerService(),
        timezone_resolver=TimezoneResolver(),
        started_at=datetime.now(timezone.utc),
    )


def get_app_state(request: Request) -> AppState:
    """Get current application state."""
    state = getattr(request.app.state, "adhan", None)
    if state is None:
        raise RuntimeError("Application state not initialized")
    return state
