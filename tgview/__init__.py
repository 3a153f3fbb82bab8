"""Core of a terminal genome viewer: start-up settings, genome intervals and rendering layout."""

__version__ = "0.0.3"