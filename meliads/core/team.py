"""
Team Management
===============
Pure logic behind the team screen: members, invite links and password changes.

Rules:
- Email is required and unique (case-insensitive)
- New members start PENDING until they accept the invite
- Display name defaults to the local part of the email
- Passwords need at least MIN_PASSWORD_LENGTH characters
"""

import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Tuple

from meliads.core.models import MemberStatus, TeamMember, TeamRole

INVITE_BASE_URL = "https://meliads.app/invite/"
MIN_PASSWORD_LENGTH = 6


class TeamError(ValueError):
    """Raised when a member cannot be added."""
    pass


class MemberNotFound(Exception):
    pass


@dataclass(frozen=True)
class PasswordChangeResult:
    """
    Typed result for password operations.
    Avoids boolean blindness.
    """
    success: bool
    reason: Optional[str] = None


def add_member(
    members: Iterable[TeamMember],
    email: str,
    role: TeamRole = TeamRole.EDITOR,
    now: Optional[datetime] = None,
) -> Tuple[TeamMember, ...]:
    """
    Invite a new member.

    Args:
        members: Current team
        email: Invitee email
        role: Role granted on acceptance
        now: Invite timestamp

    Returns:
        New tuple with the member appended

    Raises:
        TeamError: Missing or duplicate email
    """
    members = tuple(members)
    email = (email or '').strip().lower()
    if not email:
        raise TeamError("Informe o e-mail do colaborador.")
    if any(m.email.lower() == email for m in members):
        raise TeamError("Este e-mail já faz parte da equipe.")

    member = TeamMember(
        id=uuid.uuid4().hex[:9],
        name=email.split('@')[0],
        email=email,
        role=TeamRole(role),
        status=MemberStatus.PENDING,
        added_at=now or datetime.now(),
    )
    return members + (member,)


def remove_member(members: Iterable[TeamMember], member_id: str) -> Tuple[TeamMember, ...]:
    members = tuple(members)
    if not any(m.id == member_id for m in members):
        raise MemberNotFound(f"Member '{member_id}' not found")
    return tuple(m for m in members if m.id != member_id)


def generate_invite_link(token: Optional[str] = None) -> str:
    """Viewer invite link. A new token invalidates the previous link."""
    token = token or f"tk_{secrets.token_hex(4)}"
    return f"{INVITE_BASE_URL}{token}"


def validate_password_change(new_password: str, confirm_password: str) -> PasswordChangeResult:
    """Check a password reset form before submitting it."""
    if new_password != confirm_password:
        return PasswordChangeResult(False, "As senhas não coincidem.")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        return PasswordChangeResult(
            False, f"A senha deve ter pelo menos {MIN_PASSWORD_LENGTH} caracteres."
        )
    return PasswordChangeResult(True)
