"""Shot-adjustment and performance-analytics engine for a golf caddie app."""

__version__ = "0.1.0"
