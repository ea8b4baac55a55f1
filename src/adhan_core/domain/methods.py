"""Calculation method registry.

Every preset is pure data. Behaviour that differs between authorities (seasonal
twilight tables, the seventh-of-the-night rule above a latitude, an angle-based
maghrib or a fixed isha interval) is expressed through parameter fields, so a new
method is added by adding a table entry.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Self

from adhan_core.domain.errors import UnknownMethod
from adhan_core.domain.models import (
    CalculationMethod,
    Coordinates,
    HighLatitudeRule,
    Madhab,
    PrayerAdjustments,
    Rounding,
    Shafaq,
)


@dataclass(frozen=True)
class MethodParameters:
    """Bir hesaplama metodunun sabit parametreleri."""

    method: CalculationMethod
    display_name: str
    fajr_angle: float
    isha_angle: float
    isha_interval: int = 0
    maghrib_angle: float | None = None
    method_adjustments: PrayerAdjustments = field(default_factory=PrayerAdjustments)
    rounding: Rounding = Rounding.NEAREST
    high_latitude_rule: HighLatitudeRule | None = None
    seasonal_twilight: bool = False
    night_fraction_latitude: float | None = None
    description: str = ""

    def to_dict(self) -> dict:
        """Dictionary olarak döndür."""
        return {
            "name": self.method.value,
            "display_name": self.display_name,
            "fajr_angle": self.fajr_angle,
            "isha_angle": self.isha_angle,
            "isha_interval": self.isha_interval,
            "maghrib_angle": self.maghrib_angle,
            "method_adjustments": self.method_adjustments.to_dict(),
            "rounding": self.rounding.value,
            "high_latitude_rule": (
                self.high_latitude_rule.value if self.high_latitude_rule else None
            ),
            "seasonal_twilight": self.seasonal_twilight,
            "night_fraction_latitude": self.night_fraction_latitude,
            "description": self.description,
        }


@dataclass(frozen=True)
class CalculationParameters:
    """Bir sorgu için metot parametreleri ve kullanıcı seçimleri."""

    method: CalculationMethod
    fajr_angle: float
    isha_angle: float
    isha_interval: int = 0
    maghrib_angle: float | None = None
    madhab: Madhab = Madhab.SHAFI
    high_latitude_rule: HighLatitudeRule | None = None
    shafaq: Shafaq = Shafaq.GENERAL
    rounding: Rounding = Rounding.NEAREST
    method_adjustments: PrayerAdjustments = field(default_factory=PrayerAdjustments)
    seasonal_twilight: bool = False
    night_fraction_latitude: float | None = None

    @classmethod
    def from_method(cls, preset: MethodParameters, **overrides) -> Self:
        """Hazır metottan oluştur; None olmayan değerler üzerine yazılır."""
        params = cls(
            method=preset.method,
            fajr_angle=preset.fajr_angle,
            isha_angle=preset.isha_angle,
            isha_interval=preset.isha_interval,
            maghrib_angle=preset.maghrib_angle,
            high_latitude_rule=preset.high_latitude_rule,
            rounding=preset.rounding,
            method_adjustments=preset.method_adjustments,
            seasonal_twilight=preset.seasonal_twilight,
            night_fraction_latitude=preset.night_fraction_latitude,
        )
        return params.with_overrides(**overrides)

    def with_overrides(self, **overrides) -> Self:
        """None olmayan alanları değiştirerek yeni parametreler döndür."""
        converters = {
            "madhab": Madhab.parse,
            "high_latitude_rule": HighLatitudeRule.parse,
            "shafaq": Shafaq.parse,
            "rounding": Rounding.parse,
        }
        changes = {}
        for name, value in overrides.items():
            if value is None:
                continue
            converter = converters.get(name)
            changes[name] = converter(value) if converter else value
        return replace(self, **changes)

    def effective_high_latitude_rule(self, coordinates: Coordinates) -> HighLatitudeRule:
        """Açıkça seçilmiş kural yoksa konum için önerileni döndür."""
        if self.high_latitude_rule is not None:
            return self.high_latitude_rule
        return HighLatitudeRule.recommended(coordinates)

    def night_portions(self, coordinates: Coordinates) -> tuple[float, float]:
        """İmsak ve yatsı için gece kesirleri."""
        rule = self.effective_high_latitude_rule(coordinates)
        if rule is HighLatitudeRule.SEVENTH_OF_THE_NIGHT:
            return 1 / 7, 1 / 7
        if rule is HighLatitudeRule.TWILIGHT_ANGLE:
            return self.fajr_angle / 60, self.isha_angle / 60
        return 1 / 2, 1 / 2


_PRESETS = (
    MethodParameters(
        method=CalculationMethod.MUSLIM_WORLD_LEAGUE,
        display_name="Muslim World League",
        fajr_angle=18,
        isha_angle=17,
        method_adjustments=PrayerAdjustments(dhuhr=1),
        description="Muslim World League. Fajr: 18°, Isha: 17°",
    ),
    MethodParameters(
        method=CalculationMethod.EGYPTIAN,
        display_name="Egyptian General Authority of Survey",
        fajr_angle=19.5,
        isha_angle=17.5,
        method_adjustments=PrayerAdjustments(dhuhr=1),
        description="Egyptian General Authority of Survey. Fajr: 19.5°, Isha: 17.5°",
    ),
    MethodParameters(
        method=CalculationMethod.KARACHI,
        display_name="University of Islamic Sciences, Karachi",
        fajr_angle=18,
        isha_angle=18,
        method_adjustments=PrayerAdjustments(dhuhr=1),
        description="University of Islamic Sciences, Karachi. Fajr: 18°, Isha: 18°",
    ),
    MethodParameters(
        method=CalculationMethod.UMM_AL_QURA,
        display_name="Umm al-Qura University, Makkah",
        fajr_angle=18.5,
        isha_angle=0,
        isha_interval=90,
        description="Umm al-Qura University, Makkah. Fajr: 18.5°, Isha: 90 minutes after Maghrib",
    ),
    MethodParameters(
        method=CalculationMethod.DUBAI,
        display_name="Dubai",
        fajr_angle=18.2,
        isha_angle=18.2,
        method_adjustments=PrayerAdjustments(sunrise=-3, dhuhr=3, asr=3, maghrib=3),
        description="Dubai. Fajr: 18.2°, Isha: 18.2°",
    ),
    MethodParameters(
        method=CalculationMethod.MOONSIGHTING_COMMITTEE,
        display_name="Moonsighting Committee",
        fajr_angle=18,
        isha_angle=18,
        method_adjustments=PrayerAdjustments(dhuhr=5, maghrib=3),
        seasonal_twilight=True,
        night_fraction_latitude=55,
        description="Moonsighting Committee. Fajr: 18°, Isha: 18°, seasonal twilight",
    ),
    MethodParameters(
        method=CalculationMethod.NORTH_AMERICA,
        display_name="Islamic Society of North America (ISNA)",
        fajr_angle=15,
        isha_angle=15,
        method_adjustments=PrayerAdjustments(dhuhr=1),
        description="Islamic Society of North America (ISNA). Fajr: 15°, Isha: 15°",
    ),
    MethodParameters(
        method=CalculationMethod.KUWAIT,
        display_name="Kuwait",
        fajr_angle=18,
        isha_angle=17.5,
        description="Kuwait. Fajr: 18°, Isha: 17.5°",
    ),
    MethodParameters(
        method=CalculationMethod.QATAR,
        display_name="Qatar",
        fajr_angle=18,
        isha_angle=0,
        isha_interval=90,
        description="Qatar. Fajr: 18°, Isha: 90 minutes after Maghrib",
    ),
    MethodParameters(
        method=CalculationMethod.SINGAPORE,
        display_name="Majlis Ugama Islam Singapura (MUIS)",
        fajr_angle=20,
        isha_angle=18,
        method_adjustments=PrayerAdjustments(dhuhr=1),
        rounding=Rounding.UP,
        description="Majlis Ugama Islam Singapura (MUIS). Fajr: 20°, Isha: 18°",
    ),
    MethodParameters(
        method=CalculationMethod.TEHRAN,
        display_name="Institute of Geophysics, University of Tehran",
        fajr_angle=17.7,
        isha_angle=14,
        maghrib_angle=4.5,
        description="Institute of Geophysics, University of Tehran. Fajr: 17.7°, Isha: 14°",
    ),
    MethodParameters(
        method=CalculationMethod.TURKEY,
        display_name="Diyanet İşleri Başkanlığı",
        fajr_angle=18,
        isha_angle=17,
        # Diyanet'in kullandığı temkin süreleri
        method_adjustments=PrayerAdjustments(sunrise=-7, dhuhr=5, asr=4, maghrib=7),
        description="Diyanet İşleri Başkanlığı. Fajr: 18°, Isha: 17°",
    ),
    MethodParameters(
        method=CalculationMethod.OTHER,
        display_name="Other",
        fajr_angle=0,
        isha_angle=0,
        description="Custom calculation method",
    ),
)


class MethodRegistry(Mapping[CalculationMethod, MethodParameters]):
    """Salt okunur metot kayıt defteri."""

    def __init__(self, presets: "tuple[MethodParameters, ...] | list[MethodParameters]") -> None:
        self._presets = MappingProxyType({p.method: p for p in presets})

    def __getitem__(self, key: CalculationMethod) -> MethodParameters:
        return self._presets[key]

    def __iter__(self) -> Iterator[CalculationMethod]:
        return iter(self._presets)

    def __len__(self) -> int:
        return len(self._presets)

    def get_method(self, identifier: "str | CalculationMethod") -> MethodParameters:
        """Metot kimliğinden parametreleri döndür (bilinmeyen: UnknownMethod)."""
        method = CalculationMethod.parse(identifier)
        if method not in self._presets:
            raise UnknownMethod(f"Kayıtlı olmayan hesaplama metodu: {identifier!r}")
        return self._presets[method]

    def parameters(self, identifier: "str | CalculationMethod", **overrides) -> CalculationParameters:
        """Metot ve kullanıcı seçimlerinden CalculationParameters oluştur."""
        return CalculationParameters.from_method(self.get_method(identifier), **overrides)

    def all(self) -> list[MethodParameters]:
        """Tüm metotları tanım sırasıyla döndür."""
        return list(self._presets.values())


DEFAULT_REGISTRY = MethodRegistry(_PRESETS)
