from geoencode.settings.geoencode_settings import GeoEncodeSettings, LoggingSettings

__all__ = ["GeoEncodeSettings", "LoggingSettings"]
