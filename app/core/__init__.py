"""Core: config, constants, and application composition.

Import the container and lifespan from their modules
(app.core.container, app.core.lifespan); only settings are re-exported here.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
