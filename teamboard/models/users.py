"""User, role and permission records returned by the backend."""

from __future__ import annotations

from typing import Literal, TypedDict

Team = Literal["synergy", "ignite", "alliance"]

TEAMS: tuple[str, ...] = ("synergy", "ignite", "alliance")


class Permissions(TypedDict):
    dashboard: bool
    tasks: bool
    clients: bool
    pipeline: bool
    teams: bool
    xero: bool
    settings: bool


class Role(TypedDict, total=False):
    id: str
    name: str
    permissions: Permissions
    created_at: str


class AppUser(TypedDict, total=False):
    """Row of ``app_users`` with the embedded role.

    ``last_sign_in_at`` is merged in from the auth provider and may be
    missing when that lookup fails.
    """

    id: str
    auth_user_id: str | None
    email: str
    full_name: str
    role_id: str | None
    team: Team | None
    avatar_url: str | None
    is_active: bool
    created_at: str
    updated_at: str
    role: Role
    last_sign_in_at: str | None


DEFAULT_PERMISSIONS: Permissions = {
    "dashboard": True,
    "tasks": True,
    "clients": True,
    "pipeline": True,
    "teams": True,
    "xero": True,
    "settings": True,
}
