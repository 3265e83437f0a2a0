# servers/fastapi/services/slide_store.py

from typing import List, Optional
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from models.sql.slide import SlideModel
from utils.datetime_utils import get_current_utc_datetime


class SlideStore:
    """
    Persistence for the `slides` table on top of one AsyncSession.

    Every mutating call commits before returning. `replace_all` is the only
    multi-statement write and runs inside a single transaction.
    """

    def __init__(self, sql_session: AsyncSession):
        self.sql_session = sql_session

    async def list_ordered(self) -> List[SlideModel]:
        result = await self.sql_session.execute(
            select(SlideModel).order_by(SlideModel.order)
        )
        return list(result.scalars().all())

    async def get(self, slide_id: str) -> Optional[SlideModel]:
        return await self.sql_session.get(SlideModel, slide_id)

    async def insert(self, slide: SlideModel) -> SlideModel:
        self.sql_session.add(slide)
        await self.sql_session.commit()
        return slide

    async def update(self, slide: SlideModel, changes: dict) -> SlideModel:
        for field, value in changes.items():
            setattr(slide, field, value)
        slide.updated_at = get_current_utc_datetime()
        self.sql_session.add(slide)
        await self.sql_session.commit()
        return slide

    async def delete(self, slide: SlideModel):
        await self.sql_session.delete(slide)
        await self.sql_session.commit()

    async def delete_all(self) -> int:
        result = await self.sql_session.execute(delete(SlideModel))
        await self.sql_session.commit()
        return result.rowcount

    async def replace_all(self, slides: List[SlideModel]) -> List[SlideModel]:
        """Swap the whole deck for `slides`. Either every slide is stored or,
        on failure, the previous deck is left untouched."""
        try:
            await self.sql_session.execute(delete(SlideModel))
            self.sql_session.add_all(slides)
            await self.sql_session.commit()
        except Exception:
            await self.sql_session.rollback()
            raise
        return slides
