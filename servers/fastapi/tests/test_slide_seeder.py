from constants.slides import DEFAULT_SLIDES
from models.sql.slide import SlideModel
from services.slide_seeder import seed_default_slides
from services.slide_store import SlideStore


async def test_seeds_fourteen_default_slides_into_empty_store(sql_session):
    seeded = await seed_default_slides(sql_session)

    slides = await SlideStore(sql_session).list_ordered()
    assert seeded == 14
    assert len(slides) == 14
    assert [slide.order for slide in slides] == list(range(14))
    assert [slide.title for slide in slides] == [slide["title"] for slide in DEFAULT_SLIDES]
    assert [slide.layout for slide in slides] == [slide["layout"] for slide in DEFAULT_SLIDES]
    assert slides[0].title == "Markdown Slide Deck Application"
    assert slides[-1].title == "Thank You!"


async def test_seeded_slides_get_unique_ids(sql_session):
    await seed_default_slides(sql_session)

    slides = await SlideStore(sql_session).list_ordered()
    assert len({slide.id for slide in slides}) == 14


async def test_seeding_twice_does_not_duplicate(sql_session):
    await seed_default_slides(sql_session)

    seeded_again = await seed_default_slides(sql_session)

    assert seeded_again == 0
    assert len(await SlideStore(sql_session).list_ordered()) == 14


async def test_non_empty_store_is_not_seeded(sql_session):
    store = SlideStore(sql_session)
    await store.insert(SlideModel(title="mine"))

    seeded = await seed_default_slides(sql_session)

    assert seeded == 0
    assert [slide.title for slide in await store.list_ordered()] == ["mine"]
