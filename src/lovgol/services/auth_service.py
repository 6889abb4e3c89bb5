"""Admin authentication - password check and server-side sessions."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.lovgol.core.config import get_settings
from src.lovgol.core.exceptions import ConflictError
from src.lovgol.core.logging import get_logger
from src.lovgol.core.security import DUMMY_PASSWORD_HASH, hash_password, verify_password
from src.lovgol.core.session_store import (
    create_admin_session,
    destroy_admin_session,
    get_admin_session,
)
from src.lovgol.models import Admin
from src.lovgol.repositories import AdminRepository
from src.lovgol.services.base import BaseService

logger = get_logger(__name__)


class AuthService(BaseService):
    def __init__(self, admin_repo: AdminRepository, session: AsyncSession):
        super().__init__(session)
        self.admin_repo = admin_repo

    async def authenticate(self, username: str, password: str) -> Admin | None:
        """Return the admin when the credentials match, else None.

        A dummy hash is verified for unknown usernames so both failure paths
        take the same time.
        """
        admin = await self.admin_repo.get_by_username(username)
        password_hash = admin.hashed_password if admin else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if admin is None or not password_valid:
            logger.info("Admin login failed")
            return None
        return admin

    async def login(self, username: str, password: str) -> tuple[Admin, str] | None:
        """Authenticate and open a session. Returns (admin, session_id) or None."""
        admin = await self.authenticate(username, password)
        if admin is None:
            return None
        session_id = await create_admin_session(admin.id, get_settings().session_ttl_seconds)
        logger.info("Admin logged in", admin_id=str(admin.id))
        return admin, session_id

    async def logout(self, session_id: str | None) -> None:
        if session_id:
            await destroy_admin_session(session_id)

    async def resolve_session(self, session_id: str | None) -> Admin | None:
        """Admin owning a live session, or None for missing/expired/stale sessions."""
        if not session_id:
            return None
        admin_id: UUID | None = await get_admin_session(session_id)
        if admin_id is None:
            return None
        return await self.admin_repo.get_by_id(admin_id)

    async def create_admin(self, username: str, password: str) -> Admin:
        """Create an admin account.

        Raises:
            ConflictError: If the username is taken.
        """
        if await self.admin_repo.exists_by_username(username):
            raise ConflictError(f"Admin '{username}' already exists")
        admin = Admin(username=username, hashed_password=hash_password(password))
        self.admin_repo.add(admin)
        await self.commit(
            admin,
            action="create admin",
            conflict_detail=f"Admin '{username}' already exists",
        )
        logger.info("Admin created", admin_id=str(admin.id), username=username)
        return admin
