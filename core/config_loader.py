import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///matching.db"
    echo: bool = False


class MatchingWeights(BaseModel):
    """Weights for the overall match score. Should sum to 1.0."""
    skill: float = 0.30
    trust: float = 0.25
    availability: float = 0.15
    budget: float = 0.15
    timezone: float = 0.10
    engagement: float = 0.05


class ScorerConfig(BaseModel):
    """
    Configuration for the MatchScorer.

    Handles combining sub-scores into an overall match score.
    """
    weights: MatchingWeights = Field(default_factory=MatchingWeights)

    # Fallbacks used when mission/contributor fields are unset
    default_match_power: int = 50
    default_budget_max: float = 1000.0


class FilterConfig(BaseModel):
    """Hard floors applied after scoring, independent of the weights."""
    min_skill_coverage: float = 30.0
    min_availability: float = 20.0
    strict_budget_min: float = 50.0


class BatchConfig(BaseModel):
    """
    Bounded-parallel evaluation of candidates.

    deadline_seconds bounds a whole refresh. When it runs out nothing is persisted.
    """
    batch_size: int = 10
    parallelism: int = 5
    deadline_seconds: Optional[float] = 60.0


class DiversityConfig(BaseModel):
    max_from_same_timezone: int = 5
    boost_new_contributors: bool = True
    penalize_recent_hires: bool = True


class RankingOptions(BaseModel):
    """Per-refresh ranking options.

    Applied after scoring to filter, adjust and truncate results.
    """
    limit: Optional[int] = None  # Truncates the returned list only
    minimum_score: Optional[float] = None  # 0-100
    strict_budget: bool = False
    diversity_boost: bool = False  # Tie-break jitter before sorting
    diversity: Optional[DiversityConfig] = None  # Timezone capping + hire penalty


class SkillCacheConfig(BaseModel):
    ttl_seconds: float = 300.0


class RecommendationConfig(BaseModel):
    sample_size: int = 50  # Missions scanned per request
    min_score: float = 40.0
    default_limit: int = 10
    open_statuses: list = Field(default_factory=lambda: ['open', 'matching'])


class PersistenceConfig(BaseModel):
    top_n: int = 50  # Stored matches per mission, independent of the returned limit
    recent_hire_days: int = 30


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    diversity: DiversityConfig = Field(default_factory=DiversityConfig)
    skill_cache: SkillCacheConfig = Field(default_factory=SkillCacheConfig)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)
    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    # Allow env var override for the refresh deadline
    env_deadline = os.environ.get("MATCHING_DEADLINE_SECONDS")
    if env_deadline:
        matching = data.setdefault('matching', {}) or {}
        data['matching'] = matching
        matching.setdefault('batch', {})
        matching['batch']['deadline_seconds'] = float(env_deadline)

    return AppConfig(**data)
