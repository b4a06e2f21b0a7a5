"""cs-commons — scaffold and publish course websites and content artifacts."""

__version__ = "0.1.0"
