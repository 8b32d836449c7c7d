"""worldfeel: anonymous one-word mood submissions and live world aggregate."""

__version__ = "1.0.0"
