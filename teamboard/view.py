"""Plain-text rendering of user lists."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models.users import AppUser


def render_users(title: str, users: Sequence[AppUser]) -> str:
    if not users:
        return f"{title}\n\nNo users found."
    lines = [title, ""]
    for idx, user in enumerate(users, 1):
        name = user.get("full_name") or user.get("email") or "Unknown"
        line = f"{idx}. {name}"
        team = user.get("team")
        if team:
            line += f" [{team}]"
        if not user.get("is_active", True):
            line += " (inactive)"
        lines.append(line)
    return "\n".join(lines)


def render_assignees(pairs: Iterable[tuple[str, str | None]]) -> str:
    lines = [f"{name} [{team}]" if team else name for name, team in pairs]
    return "\n".join(lines) if lines else "No assignees match."
