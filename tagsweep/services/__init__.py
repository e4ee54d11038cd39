"""Service layer: orchestration over the GitHub client and the policy."""

from .cleanup import CleanupReport, CleanupService, utc_now

__all__ = ["CleanupReport", "CleanupService", "utc_now"]
