"""Domain layer - Value objects, method registry and errors."""

from adhan_core.domain.errors import (
    AdhanError,
    AngleUnattainable,
    InternalInconsistency,
    InvalidCoordinates,
    InvalidDate,
    InvalidParameter,
    InvalidPrayer,
    TimeUnavailable,
    UnknownMethod,
)
from adhan_core.domain.methods import (
    DEFAULT_REGISTRY,
    CalculationParameters,
    MethodParameters,
    MethodRegistry,
)
from adhan_core.domain.models import (
    CalculationDate,
    CalculationMethod,
    Coordinates,
    HighLatitudeRule,
    Madhab,
    Prayer,
    PrayerAdjustments,
    PrayerTimes,
    Rounding,
    Shafaq,
    SunnahTimes,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "AdhanError",
    "AngleUnattainable",
    "CalculationDate",
    "CalculationMethod",
    "CalculationParameters",
    "Coordinates",
    "HighLatitudeRule",
    "InternalInconsistency",
    "InvalidCoordinates",
    "InvalidDate",
    "InvalidParameter",
    "InvalidPrayer",
    "Madhab",
    "MethodParameters",
    "MethodRegistry",
    "Prayer",
    "PrayerAdjustments",
    "PrayerTimes",
    "Rounding",
    "Shafaq",
    "SunnahTimes",
    "TimeUnavailable",
    "UnknownMethod",
]
