"""
Модуль конфигурации.
Экспортирует настройки приложения.
"""

from orders_api.config.loader import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
