"""
Backlog API v2 operations, one module per area.
Every operation is a coroutine taking the shared BacklogClient first.
"""

from . import (
    activities,
    categories,
    git,
    issue_types,
    issues,
    priorities,
    projects,
    pull_requests,
    rate_limit,
    resolutions,
    space,
    teams,
    users,
    versions,
    watchings,
    webhooks,
    wikis,
)

__all__ = [
    "activities",
    "categories",
    "git",
    "issue_types",
    "issues",
    "priorities",
    "projects",
    "pull_requests",
    "rate_limit",
    "resolutions",
    "space",
    "teams",
    "users",
    "versions",
    "watchings",
    "webhooks",
    "wikis",
]
