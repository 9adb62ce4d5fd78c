"""
Configuration package.
"""
from .settings import ApiConfig, Settings, PLACEHOLDER_CV_BASE64, load_api_config, settings

__all__ = ["ApiConfig", "Settings", "PLACEHOLDER_CV_BASE64", "load_api_config", "settings"]
