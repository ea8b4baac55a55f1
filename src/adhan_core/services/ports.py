"""Service layer interfaces (ports)."""

from abc import ABC, abstractmethod
from datetime import date, tzinfo

from adhan_core.domain.methods import CalculationParameters
from adhan_core.domain.models import (
    CalculationDate,
    CalculationMethod,
    Coordinates,
    PrayerAdjustments,
    PrayerTimes,
)

MethodSpec = CalculationParameters | CalculationMethod | str
DateSpec = CalculationDate | date | str
AdjustmentsSpec = PrayerAdjustments | dict[str, int] | None


class PrayerTimeCalculatorPort(ABC):
    """Namaz vakti hesaplama arayüzü (port)."""

    @abstractmethod
    def compute(
        self,
        coordinates: Coordinates,
        day: DateSpec,
        method: MethodSpec,
        adjustments: AdjustmentsSpec = None,
    ) -> PrayerTimes:
        """Belirtilen gün için namaz vakitlerini hesapla."""

    @abstractmethod
    def compute_range(
        self,
        coordinates: Coordinates,
        start: DateSpec,
        end: DateSpec,
        method: MethodSpec,
        adjustments: AdjustmentsSpec = None,
    ) -> list[PrayerTimes]:
        """Başlangıç ve bitiş dahil her gün için vakitleri hesapla."""


class TimezoneResolverPort(ABC):
    """Koordinattan saat dilimi çözümleme arayüzü."""

    @abstractmethod
    def resolve(self, coordinates: Coordinates, name: str | None = None) -> tzinfo:
        """Verilen isimden veya koordinattan saat dilimini döndür."""
