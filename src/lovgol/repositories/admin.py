"""Repository for Admin accounts."""

from sqlmodel import select

from src.lovgol.models import Admin
from src.lovgol.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    model = Admin

    async def get_by_username(self, username: str) -> Admin | None:
        result = await self.session.execute(select(Admin).where(Admin.username == username))
        return result.scalar_one_or_none()

    async def exists_by_username(self, username: str) -> bool:
        return await self.get_by_username(username) is not None
