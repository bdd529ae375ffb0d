from .settings import PlacesSettings, ReviewSettings, Settings, UISettings, get_settings

__all__ = ["PlacesSettings", "ReviewSettings", "Settings", "UISettings", "get_settings"]
