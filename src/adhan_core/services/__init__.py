"""Service layer - Calculation engine and facade."""

from adhan_core.services.high_latitude import HighLatitudeResolver, Night
from adhan_core.services.ports import PrayerTimeCalculatorPort, TimezoneResolverPort
from adhan_core.services.prayer_service import PrayerService, validate_coordinates
from adhan_core.services.solar_time import SolarTime
from adhan_core.services.timezone_lookup import TimezoneResolver

__all__ = [
    "HighLatitudeResolver",
    "Night",
    "PrayerService",
    "PrayerTimeCalculatorPort",
    "SolarTime",
    "TimezoneResolver",
    "TimezoneResolverPort",
    "validate_coordinates",
]
