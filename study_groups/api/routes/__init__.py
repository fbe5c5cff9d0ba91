"""
API routes package.

This package contains all FastAPI route modules organized by domain.
"""

from study_groups.api.routes import groups

__all__ = [
    "groups"
]
