"""oereb — narzędzie CLI do przeglądania wyciągów ÖREB."""

__version__ = "0.1.0"
