"""Stale-while-revalidate controller for one cached data source."""

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from loguru import logger

from app.repositories.common import CacheStore, encode_params
from app.services.cached_data.config import ControllerConfig

FetchFn = Callable[[dict], Awaitable[Any]]


@dataclass(frozen=True)
class CachedDataState:
    """Snapshot published to subscribers on every change."""

    data: Any = None
    is_loading: bool = False
    is_fresh_data: bool = False
    error: BaseException | None = None


class StaleWhileRevalidateController:
    """Cache-first reads with background refresh for one logical data source.

    A cache hit is published immediately and refreshed in the background when
    older than `max_age`; a miss fetches in the foreground with `is_loading`
    set. Fetches started within `throttle` seconds of the previous start are
    suppressed. Results of a fetch that was overtaken by a later-started one
    are discarded on arrival.
    """

    def __init__(
        self,
        cache_key: str,
        fetch_fn: FetchFn,
        cache: CacheStore,
        params: Mapping[str, Any] | None = None,
        auto_fetch: bool = True,
        dependencies: Sequence | None = None,
        max_age: float | None = None,
        config: ControllerConfig | None = None,
    ):
        self.cache_key = cache_key
        self._fetch_fn = fetch_fn
        self._cache = cache
        self._config = config or ControllerConfig()
        self._max_age = self._config.max_age if max_age is None else max_age
        self._auto_fetch = auto_fetch
        self._params = dict(params or {})
        self._param_key = encode_params(self._params)
        self._dependencies = tuple(dependencies) if dependencies is not None else None

        self._state = CachedDataState()
        self._listeners: list[Callable[[CachedDataState], None]] = []
        self._background: set[asyncio.Task] = set()

        self._last_fetch_started: float | None = None
        self._started_seq = 0
        self._applied_seq = 0
        self._foreground_seq: int | None = None

    # State

    @property
    def state(self) -> CachedDataState:
        return self._state

    @property
    def data(self) -> Any:
        return self._state.data

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def is_fresh_data(self) -> bool:
        return self._state.is_fresh_data

    @property
    def error(self) -> BaseException | None:
        return self._state.error

    @property
    def params(self) -> dict:
        return dict(self._params)

    @property
    def param_key(self) -> str:
        return self._param_key

    def subscribe(self, listener: Callable[[CachedDataState], None]) -> Callable[[], None]:
        """Call listener with every new state; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, **changes) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # Activation

    async def start(self) -> Any:
        """Mount: load from cache and revalidate when auto_fetch is on."""
        if self._auto_fetch:
            return await self.load_cached_and_fetch()
        return self._state.data

    async def update(
        self,
        params: Mapping[str, Any] | None = None,
        dependencies: Sequence | None = None,
    ) -> bool:
        """Apply new params and/or dependencies; re-activate if either changed."""
        changed = False

        if params is not None:
            param_key = encode_params(params)
            if param_key != self._param_key:
                self._params = dict(params)
                self._param_key = param_key
                # New source: in-flight results for the old params are stale
                self._applied_seq = self._started_seq
                self._last_fetch_started = None
                changed = True

        if dependencies is not None and tuple(dependencies) != self._dependencies:
            self._dependencies = tuple(dependencies)
            changed = True

        if changed and self._auto_fetch:
            await self.load_cached_and_fetch()
        return changed

    async def load_cached_and_fetch(self) -> Any:
        """Publish cached data if any, then revalidate as needed."""
        self._publish(error=None)

        entry = await self._cache.get(self.cache_key, self._param_key)
        if entry is None:
            return await self._fetch(show_loading=True)

        self._publish(data=entry.data, is_fresh_data=False, is_loading=self._foreground_active)

        meta = await self._cache.get_meta(self.cache_key, self._param_key)
        cached_at = meta.timestamp if meta is not None else 0
        if self._config.clock() - cached_at > self._max_age:
            self._refresh_in_background()
        return entry.data

    async def refetch(self, show_loading: bool = True) -> Any:
        """Fetch explicitly, skipping the cache (pull-to-refresh)."""
        return await self._fetch(show_loading=show_loading)

    async def wait_idle(self) -> None:
        """Wait until all background refreshes have settled."""
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    # Fetching

    def _refresh_in_background(self) -> None:
        task = asyncio.create_task(self._fetch(show_loading=False, surface_errors=False))
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task) -> None:
        self._background.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Background refresh crashed for {}: {}", self.cache_key, task.exception())

    @property
    def _foreground_active(self) -> bool:
        # A foreground fetch superseded by a param change no longer blocks
        return self._foreground_seq is not None and self._foreground_seq > self._applied_seq

    def _throttled(self, now: float) -> bool:
        if self._foreground_active:
            return True
        return self._last_fetch_started is not None and now - self._last_fetch_started < self._config.throttle

    async def _fetch(self, show_loading: bool, surface_errors: bool = True) -> Any:
        now = self._config.clock()
        if self._throttled(now):
            logger.debug("Fetch suppressed for {} (throttled)", self.cache_key)
            return self._state.data

        self._last_fetch_started = now
        self._started_seq += 1
        seq = self._started_seq
        params, param_key = dict(self._params), self._param_key

        if show_loading:
            self._foreground_seq = seq
            self._publish(is_loading=True)

        try:
            fresh = await self._fetch_fn(params)
        except Exception as e:
            self._end_foreground(seq)
            if seq <= self._applied_seq:
                logger.debug("Ignoring failure of superseded fetch for {}", self.cache_key)
                self._publish(is_loading=self._foreground_active)
                return None
            if surface_errors:
                logger.warning("Error fetching data for {}: {}", self.cache_key, e)
                self._publish(error=e, is_loading=self._foreground_active)
            else:
                logger.warning("Background refresh failed for {}: {}", self.cache_key, e)
                self._publish(is_loading=self._foreground_active)
            return None

        self._end_foreground(seq)

        if seq <= self._applied_seq:
            logger.debug("Discarding superseded result for {}", self.cache_key)
            self._publish(is_loading=self._foreground_active)
            return self._state.data

        self._applied_seq = seq
        self._publish(data=fresh, is_fresh_data=True, error=None, is_loading=self._foreground_active)
        await self._cache.put(self.cache_key, fresh, param_key)
        return fresh

    def _end_foreground(self, seq: int) -> None:
        if self._foreground_seq == seq:
            self._foreground_seq = None


async def use_cached_data(
    cache_key: str,
    fetch_fn: FetchFn,
    params: Mapping[str, Any] | None = None,
    auto_fetch: bool = True,
    dependencies: Sequence | None = None,
    max_age: float | None = None,
    *,
    cache: CacheStore,
    config: ControllerConfig | None = None,
) -> StaleWhileRevalidateController:
    """Create a controller for a data source and mount it."""
    controller = StaleWhileRevalidateController(
        cache_key,
        fetch_fn,
        cache,
        params=params,
        auto_fetch=auto_fetch,
        dependencies=dependencies,
        max_age=max_age,
        config=config,
    )
    await controller.start()
    return controller
