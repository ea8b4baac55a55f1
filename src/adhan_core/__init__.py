"""Adhan-Core: namaz vakti ve güneş konumu hesaplama motoru."""

__version__ = "0.1.0"
