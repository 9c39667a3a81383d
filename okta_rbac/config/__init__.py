"""Configuration module for the Okta role manager."""
from .settings import AppConfig, load_settings

__all__ = ["AppConfig", "load_settings"]
