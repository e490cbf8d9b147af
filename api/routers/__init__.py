"""API Routers"""

from api.routers import equipment, health, inventory, quotes

__all__ = ["equipment", "health", "inventory", "quotes"]
