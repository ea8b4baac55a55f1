"""Fallback for fajr and isha where the twilight angle is never reached."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from adhan_core.domain.errors import AngleUnattainable, TimeUnavailable
from adhan_core.domain.methods import CalculationParameters
from adhan_core.domain.models import Coordinates, HighLatitudeRule, Prayer
from adhan_core.services.astronomy import (
    season_adjusted_evening_twilight,
    season_adjusted_morning_twilight,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Night:
    """Gün batımından ertesi gün doğumuna kadar olan gece."""

    sunrise: datetime
    sunset: datetime
    next_sunrise: datetime

    @property
    def duration(self) -> timedelta:
        """Gece süresi."""
        return self.next_sunrise - self.sunset


class HighLatitudeResolver:
    """Yüksek enlem kuralına göre imsak/yatsı belirler."""

    def __init__(
        self,
        parameters: CalculationParameters,
        coordinates: Coordinates,
        day: date,
    ) -> None:
        self._parameters = parameters
        self._coordinates = coordinates
        self._day = day
        self._rule = parameters.effective_high_latitude_rule(coordinates)

    @property
    def rule(self) -> HighLatitudeRule:
        """Uygulanan kural."""
        return self._rule

    def resolve(self, prayer: Prayer, night: Night, cause: AngleUnattainable) -> datetime:
        """Ulaşılamayan açı yerine imsak veya yatsı anını döndür."""
        if prayer not in (Prayer.FAJR, Prayer.ISHA):
            raise TimeUnavailable(f"{prayer.value} vakti hesaplanamıyor: {cause.message}") from cause
        if self._rule is HighLatitudeRule.NONE:
            raise TimeUnavailable(
                f"{prayer.value} vakti hesaplanamıyor ve yüksek enlem kuralı yok: {cause.message}"
            ) from cause

        if self._parameters.seasonal_twilight:
            logger.debug(f"{prayer.value}: mevsimsel şafak tablosu uygulandı")
            return self._seasonal(prayer, night)

        logger.debug(f"{prayer.value}: {self._rule.value} kuralı uygulandı")
        fajr_portion, isha_portion = self._parameters.night_portions(self._coordinates)
        if prayer is Prayer.FAJR:
            return night.sunrise - night.duration * fajr_portion
        return night.sunset + night.duration * isha_portion

    def seventh_of_the_night(self, prayer: Prayer, night: Night) -> datetime:
        """Gecenin yedide biri kuralı (enlem eşiğinin üzerindeki metotlar için)."""
        logger.debug(f"{prayer.value}: enlem eşiği aşıldı, gecenin 1/7'si kullanıldı")
        if prayer is Prayer.FAJR:
            return night.sunrise - night.duration / 7
        return night.sunset + night.duration / 7

    def _seasonal(self, prayer: Prayer, night: Night) -> datetime:
        day_of_year = self._day.timetuple().tm_yday
        latitude = self._coordinates.latitude
        if prayer is Prayer.FAJR:
            minutes = season_adjusted_morning_twilight(latitude, day_of_year, self._day.year)
            return night.sunrise - timedelta(seconds=round(minutes * 60))
        minutes = season_adjusted_evening_twilight(
            latitude, day_of_year, self._day.year, self._parameters.shafaq
        )
        return night.sunset + timedelta(seconds=round(minutes * 60))
