"""Admin use cases."""

from .get_dashboard import AdminVote, GetDashboardResponse, GetDashboardUseCase

__all__ = [
    "AdminVote",
    "GetDashboardResponse",
    "GetDashboardUseCase",
]
