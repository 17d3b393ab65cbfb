"""Cache Module - Caching services."""
from core.cache.skill_cache import (
    SkillNameCache,
    CACHE_TTL_SECONDS
)

__all__ = [
    'SkillNameCache',
    'CACHE_TTL_SECONDS'
]
