"""Configuration module."""

from petstore_api.config.settings import PetstoreSettings

__all__ = ["PetstoreSettings"]
