"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Invitation
from folio.domain.repository import InvitationRepository
from folio.domain.value import InvitationId, InvitationStatus, InvitationToken, UserId
from folio.persistence.mappers import invitation_to_dict, row_to_invitation
from folio.persistence.repository.common import execute_guarded
from folio.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending_by_email(self, email: str) -> Optional[Invitation]:
        """Find the pending invitation for an email.

        Backed by the partial unique index on pending emails.
        """
        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.email == email,
                invitations_table.c.status == InvitationStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_status(self, status: InvitationStatus) -> list[Invitation]:
        """List invitations in a status, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.status == status.value)
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            ConflictError: On a duplicate token or pending email
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)

        await execute_guarded(
            self.session, stmt, "Invitation token or pending email already exists"
        )
        await self.session.flush()
        return invitation

    async def mark_accepted(
        self, token: InvitationToken, user_id: UserId, accepted_at: datetime
    ) -> bool:
        """Conditionally flip a PENDING invitation to ACCEPTED.

        Returns:
            True if this statement changed the row
        """
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.token == token.root,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                )
            )
            .values(
                status=InvitationStatus.ACCEPTED.value,
                accepted_at=accepted_at,
                accepted_by_user_id=user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def mark_expired(self, invitation_id: InvitationId) -> bool:
        """Conditionally flip a PENDING invitation to EXPIRED."""
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                )
            )
            .values(status=InvitationStatus.EXPIRED.value)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def mark_revoked(self, invitation_id: InvitationId) -> bool:
        """Conditionally flip a PENDING invitation to REVOKED."""
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                )
            )
            .values(status=InvitationStatus.REVOKED.value)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Physically delete an invitation."""
        stmt = delete(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
