import logging
from sqlalchemy import exists, insert, literal, select, union_all
from sqlalchemy.ext.asyncio import AsyncSession

from constants.slides import DEFAULT_SLIDES
from models.sql.slide import SlideModel, generate_slide_id
from utils.datetime_utils import get_current_utc_datetime

logger = logging.getLogger(__name__)


def build_seed_statement():
    """
    Build one INSERT ... SELECT that writes the default deck only while the
    slides table is empty. The emptiness check and the insert run as a
    single statement, so two concurrent callers cannot both seed.
    """
    slides_table = SlideModel.__table__
    columns = slides_table.c
    store_is_empty = ~exists().select_from(slides_table).correlate(None)
    now = get_current_utc_datetime()

    rows = [
        select(
            literal(generate_slide_id(), columns.id.type).label("id"),
            literal(slide["title"], columns.title.type).label("title"),
            literal(slide["content"], columns.content.type).label("content"),
            literal(slide["layout"], columns.layout.type).label("layout"),
            literal(index, columns.order.type).label("order"),
            literal(now, columns.created_at.type).label("created_at"),
            literal(now, columns.updated_at.type).label("updated_at"),
        ).where(store_is_empty)
        for index, slide in enumerate(DEFAULT_SLIDES)
    ]

    return insert(slides_table).from_select(
        [
            columns.id,
            columns.title,
            columns.content,
            columns.layout,
            columns.order,
            columns.created_at,
            columns.updated_at,
        ],
        union_all(*rows),
    )


async def seed_default_slides(sql_session: AsyncSession) -> int:
    """Insert the default deck into an empty store. Returns the number of
    slides written, 0 when the store already had slides."""
    result = await sql_session.execute(build_seed_statement())
    await sql_session.commit()

    seeded = result.rowcount or 0
    if seeded:
        logger.info(f"Seeded {seeded} default slides")
    return seeded
