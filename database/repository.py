import logging
from datetime import datetime
from typing import Dict, List, Optional, Set

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)
from tenacity import RetryCallState

from core.interfaces import MatchingRepository
from core.models import (
    CompletedPayment, ContributorProfile, ContributorSkill, HistoryRecords, Mission
)
from core.scorer.models import MatchResult
from core.utils import as_utc
from database.models import ContributorProfileRecord, MissionMatch, MissionRecord
from database.uow import matching_uow

logger = logging.getLogger(__name__)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception()
    logger.warning(
        "Transient database error (attempt %s), retrying. Details: %s",
        retry_state.attempt_number, exc,
    )


def _db_retry(**kwargs):
    """Return a tenacity @retry decorator for read queries."""
    return retry(
        retry=retry_if_exception_type(OperationalError),
        wait=wait_fixed(0.5),
        stop=stop_after_attempt(3),
        before_sleep=_log_retry,
        reraise=True,
        **kwargs,
    )


def _float(value, default: Optional[float] = None) -> Optional[float]:
    """Numeric columns come back as Decimal."""
    if value is None:
        return default
    return float(value)


def _to_contributor(record: ContributorProfileRecord) -> ContributorProfile:
    skills = [
        ContributorSkill(
            skill_id=s.skill_id,
            skill_name=s.skill.name if s.skill is not None else "",
            proficiency_level=s.proficiency_level,
            years_experience=_float(s.years_experience, 0.0),
            verified=bool(s.verified),
        )
        for s in record.skills
    ]
    return ContributorProfile(
        id=record.id,
        user_id=record.user_id,
        verification_status=record.verification_status,
        background_check_status=record.background_check_status,
        is_looking_for_work=bool(record.is_looking_for_work),
        availability_hours_per_week=_float(record.availability_hours_per_week),
        timezone=record.timezone,
        headline=record.headline,
        bio=record.bio,
        github_url=record.github_url,
        linkedin_url=record.linkedin_url,
        portfolio_url=record.portfolio_url,
        years_experience=_float(record.years_experience, 0.0),
        trust_score=_float(record.trust_score),
        match_power=_float(record.match_power),
        completion_rate=_float(record.completion_rate),
        total_earnings=_float(record.total_earnings, 0.0),
        skills=skills,
        updated_at=as_utc(record.updated_at) if record.updated_at else None,
    )


def _to_mission(record: MissionRecord) -> Mission:
    return Mission(
        id=record.id,
        initiator_id=record.initiator_id,
        title=record.title,
        required_skills=list(record.required_skill_ids or []),
        budget_min=_float(record.budget_min),
        budget_max=_float(record.budget_max),
        complexity=record.complexity,
        estimated_duration_days=_float(record.estimated_duration_days),
        status=record.status,
        featured=bool(record.featured),
        preferred_timezone=record.preferred_timezone,
    )


def _to_match_row(result: MatchResult) -> MissionMatch:
    return MissionMatch(
        mission_id=result.mission_id,
        contributor_id=result.contributor_id,
        overall_score=result.overall_score,
        skill_score=result.skill_score,
        trust_score=result.trust_score,
        availability_score=result.availability_score,
        budget_fit_score=result.budget_fit_score,
        timezone_fit_score=result.timezone_fit_score,
        engagement_score=result.engagement_score,
        breakdown=result.to_dict()['breakdown'],
        rank=result.rank,
        contributor_name=result.contributor_name,
        matched_at=result.matched_at,
    )


def _to_match_result(row: MissionMatch) -> MatchResult:
    return MatchResult.from_dict({
        'contributor_id': row.contributor_id,
        'mission_id': row.mission_id,
        'overall_score': row.overall_score,
        'skill_score': row.skill_score,
        'trust_score': row.trust_score,
        'availability_score': row.availability_score,
        'budget_fit_score': row.budget_fit_score,
        'timezone_fit_score': row.timezone_fit_score,
        'engagement_score': row.engagement_score,
        'breakdown': row.breakdown,
        'rank': row.rank,
        'matched_at': as_utc(row.matched_at) if row.matched_at else None,
        'contributor_name': row.contributor_name,
    })


class SqlMatchingRepository(MatchingRepository):
    """
    MatchingRepository backed by SQLAlchemy.

    Every call opens its own unit of work, so one instance can be shared by
    the evaluation worker threads.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory

    def get_mission(self, mission_id: str) -> Optional[Mission]:
        with matching_uow(self.session_factory) as uow:
            record = uow.missions.get_by_id(mission_id)
            return _to_mission(record) if record else None

    def get_contributor(self, contributor_id: str) -> Optional[ContributorProfile]:
        with matching_uow(self.session_factory) as uow:
            record = uow.contributors.get_by_id(contributor_id)
            return _to_contributor(record) if record else None

    def list_eligible_contributors(self) -> List[ContributorProfile]:
        with matching_uow(self.session_factory) as uow:
            return [_to_contributor(r) for r in uow.contributors.list_eligible()]

    def list_open_missions(self, statuses: List[str], limit: int) -> List[Mission]:
        with matching_uow(self.session_factory) as uow:
            return [_to_mission(r) for r in uow.missions.list_by_status(statuses, limit)]

    @_db_retry()
    def get_history_records(self, contributor_id: str) -> HistoryRecords:
        with matching_uow(self.session_factory) as uow:
            payments = [
                CompletedPayment(
                    initiator_id=p.initiator_id,
                    amount=_float(p.amount, 0.0),
                    completed_at=as_utc(p.completed_at) if p.completed_at else None,
                    on_time=p.on_time,
                )
                for p in uow.history.completed_payments(contributor_id)
            ]
            return HistoryRecords(
                completed_payments=payments,
                dispute_count=uow.history.dispute_count(contributor_id),
                ratings=uow.history.ratings(contributor_id),
                response_hours=uow.history.response_hours(contributor_id),
            )

    @_db_retry()
    def get_skill_names(self) -> Dict[str, str]:
        with matching_uow(self.session_factory) as uow:
            return uow.skills.get_name_map()

    def get_recent_hire_ids(self, initiator_id: str, since: datetime) -> Set[str]:
        with matching_uow(self.session_factory) as uow:
            return uow.history.recent_hire_ids(initiator_id, since)

    def replace_matches(self, mission_id: str, results: List[MatchResult]) -> None:
        """Delete-then-insert in one transaction under a mission row lock."""
        with matching_uow(self.session_factory) as uow:
            uow.missions.lock(mission_id)
            removed = uow.matches.delete_for_mission(mission_id)
            uow.matches.add_all([_to_match_row(r) for r in results])
            logger.debug(f"Mission {mission_id}: replaced {removed} stored matches with {len(results)}")

    def get_stored_matches(self, mission_id: str, limit: int = 50) -> List[MatchResult]:
        with matching_uow(self.session_factory) as uow:
            return [_to_match_result(row) for row in uow.matches.list_for_mission(mission_id, limit)]

    def update_match_power(self, contributor_id: str, score: int, updated_at: datetime) -> None:
        with matching_uow(self.session_factory) as uow:
            uow.contributors.update_match_power(contributor_id, score, updated_at)
