"""Error taxonomy for the calculation engine."""


class AdhanError(Exception):
    """Tüm hesaplama hatalarının temel sınıfı."""

    kind = "AdhanError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Yapılandırılmış hata olarak döndür."""
        return {"kind": self.kind, "message": self.message}


class InvalidCoordinates(AdhanError, ValueError):
    """Enlem/boylam geçerli aralıkta değil."""

    kind = "InvalidCoordinates"


class InvalidDate(AdhanError, ValueError):
    """Tarih geçersiz veya desteklenen aralığın dışında."""

    kind = "InvalidDate"


class UnknownMethod(AdhanError, ValueError):
    """Bilinmeyen hesaplama metodu."""

    kind = "UnknownMethod"


class InvalidParameter(AdhanError, ValueError):
    """Bilinmeyen mezhep, kural, yuvarlama veya saat dilimi."""

    kind = "InvalidParameter"


class InvalidPrayer(AdhanError, ValueError):
    """Bilinmeyen vakit adı."""

    kind = "InvalidPrayer"


class AngleUnattainable(AdhanError):
    """Güneş bu enlem/tarihte hedef açıya hiç ulaşmıyor.

    Only raised inside the engine; the facade always resolves it or converts it
    to TimeUnavailable.
    """

    kind = "AngleUnattainable"

    def __init__(self, angle: float, message: str = "") -> None:
        super().__init__(message or f"Güneş {angle:.2f}° yüksekliğine ulaşmıyor")
        self.angle = angle


class TimeUnavailable(AdhanError):
    """Vakit hesaplanamadı (kutup gündüzü/gecesi)."""

    kind = "TimeUnavailable"


class InternalInconsistency(AdhanError):
    """Vakitler kanonik sırada değil; hesaplama hatası."""

    kind = "InternalInconsistency"
