"""
Study Groups

In-memory discussion groups for study sessions: group creation, membership,
message posting and paginated discussion retrieval, served over FastAPI.
"""

__version__ = "1.0.0"
