"""Timezone resolution from coordinates."""

import logging
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

from adhan_core.domain.errors import InvalidParameter
from adhan_core.domain.models import Coordinates
from adhan_core.services.ports import TimezoneResolverPort

logger = logging.getLogger(__name__)


class TimezoneResolver(TimezoneResolverPort):
    """IANA saat dilimi çözümleyici (timezonefinder)."""

    def __init__(self, finder: TimezoneFinder | None = None) -> None:
        self._finder = finder or TimezoneFinder()

    def timezone_name(self, coordinates: Coordinates) -> str:
        """Koordinatın saat dilimi adı (bulunamazsa UTC)."""
        name = self._finder.timezone_at(lat=coordinates.latitude, lng=coordinates.longitude)
        if name is None:
            logger.debug(f"Saat dilimi bulunamadı, UTC kullanılıyor: {coordinates}")
            return "UTC"
        return name

    def resolve(self, coordinates: Coordinates, name: str | None = None) -> tzinfo:
        """İsim verildiyse onu, yoksa koordinattan bulunan dilimi döndür."""
        if name is None:
            name = self.timezone_name(coordinates)
        if name.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidParameter(f"Geçersiz saat dilimi: {name!r}") from e
