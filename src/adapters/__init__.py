"""Adapters over third-party libraries (httpx, Rich syntax highlighting)."""
