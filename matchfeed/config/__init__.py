from .settings import Settings, normalize_provider_name, settings

__all__ = ["Settings", "normalize_provider_name", "settings"]
