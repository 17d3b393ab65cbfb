#!/usr/bin/env python3
"""
Exceptions raised by the matching services.
"""


class MatchingServiceException(Exception):
    """Base exception for matching service errors."""
    pass


class NotFoundException(MatchingServiceException):
    """Raised when a requested record does not exist."""
    pass


class MissionNotFound(NotFoundException):
    def __init__(self, mission_id: str):
        self.mission_id = mission_id
        super().__init__(f"Mission not found: {mission_id}")


class ContributorNotFound(NotFoundException):
    def __init__(self, contributor_id: str):
        self.contributor_id = contributor_id
        super().__init__(f"Contributor not found: {contributor_id}")


class RefreshDeadlineExceeded(MatchingServiceException):
    """Raised when a refresh runs past its deadline. Partial results are discarded."""

    def __init__(self, mission_id: str, deadline_seconds: float):
        self.mission_id = mission_id
        self.deadline_seconds = deadline_seconds
        super().__init__(
            f"Refresh for mission {mission_id} exceeded deadline of {deadline_seconds:.1f}s"
        )
