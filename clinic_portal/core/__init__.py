"""Core: config, exception handlers, and application bootstrap.

Single place for settings and process-wide wiring.
"""

from clinic_portal.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
