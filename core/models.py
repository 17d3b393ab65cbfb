#!/usr/bin/env python3
"""
Domain Models - Plain records supplied by the repository.

These carry no storage knowledge. The SQL repository converts its ORM rows
into these before anything in core/ sees them.
"""

from typing import List, Optional
from dataclasses import dataclass, field
from datetime import datetime


PROFICIENCY_LEVELS = ('beginner', 'intermediate', 'advanced', 'expert')


@dataclass
class ContributorSkill:
    skill_id: str
    skill_name: str = ""
    proficiency_level: str = "intermediate"
    years_experience: float = 0.0
    verified: bool = False


@dataclass
class ContributorProfile:
    """Contributor profile as seen by the matching engine."""
    id: str
    user_id: str = ""

    # Verification
    verification_status: str = "pending"  # pending|proof_task_submitted|verified|rejected
    background_check_status: str = "not_started"  # not_started|in_progress|passed|failed

    # Availability
    is_looking_for_work: bool = False
    availability_hours_per_week: Optional[float] = None
    timezone: Optional[str] = None

    # Professional info
    headline: Optional[str] = None
    bio: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    years_experience: float = 0.0

    # Cached scores (0-100)
    trust_score: Optional[float] = None
    match_power: Optional[float] = None
    completion_rate: Optional[float] = None  # 0-1
    total_earnings: float = 0.0

    skills: List[ContributorSkill] = field(default_factory=list)
    updated_at: Optional[datetime] = None


@dataclass
class Mission:
    id: str
    initiator_id: str = ""
    title: str = ""
    # Order is significant: skill-gap severity is derived from position
    required_skills: List[str] = field(default_factory=list)
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    complexity: str = "medium"  # easy|medium|hard|expert
    estimated_duration_days: Optional[float] = None
    status: str = "open"
    featured: bool = False
    preferred_timezone: Optional[str] = None


@dataclass
class CompletedPayment:
    """A released, completed payment to the contributor."""
    initiator_id: Optional[str] = None
    amount: float = 0.0
    completed_at: Optional[datetime] = None
    on_time: Optional[bool] = None


@dataclass
class HistoryRecords:
    """Raw historical records for one contributor, as fetched from storage."""
    completed_payments: List[CompletedPayment] = field(default_factory=list)
    dispute_count: int = 0
    ratings: List[float] = field(default_factory=list)
    response_hours: List[float] = field(default_factory=list)


@dataclass
class WorkHistory:
    """Derived aggregate of a contributor's track record. Never persisted."""
    completed_missions: int = 0
    completion_rate: float = 0.0
    average_rating: float = 0.0
    dispute_rate: float = 0.0
    avg_response_time: float = 12.0  # hours
    on_time_rate: float = 0.85
    repeat_clients: int = 0
    total_earnings: float = 0.0
    last_completed_at: Optional[datetime] = None
