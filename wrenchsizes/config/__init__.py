from .settings import Defaults, Limits, SizeSettings, get_settings

__all__ = [
    "Defaults",
    "Limits",
    "SizeSettings",
    "get_settings",
]
