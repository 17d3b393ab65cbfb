"""Skill Name Cache - In-process TTL cache of the skill id -> name catalog."""
import logging
import threading
import time
from typing import Callable, Dict

logger = logging.getLogger(__name__)

# 5 minutes
CACHE_TTL_SECONDS = 5 * 60


class SkillNameCache:
    """
    Cache for the skill catalog.

    Owned by a service instance and injected at construction. On expiry the
    next get() blocks on a synchronous refetch; there is no background refresh.
    """

    def __init__(
        self,
        loader: Callable[[], Dict[str, str]],
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.loader = loader
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._names: Dict[str, str] = {}
        self._expires_at: float = 0.0
        self._lock = threading.Lock()

    @property
    def is_fresh(self) -> bool:
        return bool(self._names) and self._clock() < self._expires_at

    def get(self) -> Dict[str, str]:
        """Return the catalog, refetching when expired or empty."""
        with self._lock:
            if self.is_fresh:
                return self._names
            return self._load()

    def get_name(self, skill_id: str) -> str:
        return self.get().get(skill_id, skill_id)

    def refresh(self) -> Dict[str, str]:
        """Refetch now regardless of freshness."""
        with self._lock:
            return self._load()

    def invalidate(self) -> None:
        with self._lock:
            self._names = {}
            self._expires_at = 0.0
        logger.debug("Skill name cache invalidated")

    def _load(self) -> Dict[str, str]:
        names = dict(self.loader() or {})
        self._names = names
        self._expires_at = self._clock() + self.ttl_seconds
        logger.debug(f"Loaded {len(names)} skill names (TTL: {self.ttl_seconds}s)")
        return names
