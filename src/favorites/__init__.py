from .store import FavoritesStore

__all__ = ["FavoritesStore"]
