"""HTTP client for the Riot Games API with pluggable request middleware."""

__version__ = "0.1.0"