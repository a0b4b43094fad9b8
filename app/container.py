"""Dependency Injection container - initialized at app startup."""

from app.repositories.common import CacheStore, DuckDBKeyValueStore, KeyValueStore
from app.services.cached_data import ControllerConfig
from app.services.revenue import RevenueService
from settings import CACHE_MAX_AGE, DB_PATH, FETCH_THROTTLE


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, store: KeyValueStore | None = None, config: ControllerConfig | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Storage
        self.store = store if store is not None else DuckDBKeyValueStore(DB_PATH)
        self.cache = CacheStore(self.store)

        # Controller timing, passed explicitly to every controller
        self.config = config or ControllerConfig(max_age=CACHE_MAX_AGE, throttle=FETCH_THROTTLE)

        # Services
        self.revenue = RevenueService(cache=self.cache, config=self.config)

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
