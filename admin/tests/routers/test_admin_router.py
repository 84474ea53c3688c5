# admin/tests/routers/test_admin_router.py
import pytest
import pytest_asyncio
from uuid import uuid4
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from activity.domain.models.activity_log import ActivityLog
from links.domain.models.link import Link
from videos.domain.models.video import Video
from videos.domain.platforms import Platform


@pytest_asyncio.fixture
async def seeded_links(db_session: AsyncSession, user, admin):
    links = [
        Link(owner_id=user.id, title="Python tips", url="https://tips.example.com", tags=[]),
        Link(owner_id=user.id, title="Recipes", url="https://food.example.com", tags=[]),
        Link(owner_id=admin.id, title="Admin notes", url="https://notes.example.com", tags=[]),
    ]
    db_session.add_all(links)
    await db_session.commit()
    for link in links:
        await db_session.refresh(link)
    return links


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/v1/admin/links"),
        ("GET", "/v1/admin/videos"),
        ("GET", "/v1/admin/activity"),
        ("POST", "/v1/admin/links/bulk-delete"),
    ],
)
async def test_should_return_403_when_caller_is_not_admin(client: AsyncClient, user, login_as, method, path):
    login_as(user)

    r = await client.request(method, path, json={"ids": [str(uuid4())]} if method == "POST" else None)

    assert r.status_code == 403
    assert r.json()["detail"] == "forbidden"


@pytest.mark.asyncio
async def test_should_list_every_users_links_with_owner(client: AsyncClient, admin, login_as, seeded_links):
    login_as(admin)

    r = await client.get("/v1/admin/links")

    assert r.status_code == 200
    by_title = {l["title"]: l for l in r.json()}
    assert set(by_title) == {"Python tips", "Recipes", "Admin notes"}
    assert by_title["Recipes"]["user_email"] == "sam@example.com"
    assert by_title["Recipes"]["user_name"] == "Sam"
    assert by_title["Admin notes"]["user_email"] == "admin@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "q, expected",
    [
        ("TIPS", {"Python tips"}),
        ("food.example", {"Recipes"}),
        ("sam@", {"Python tips", "Recipes"}),
        ("admin", {"Admin notes"}),
    ],
)
async def test_should_search_links_by_title_url_and_owner(
    client: AsyncClient, admin, login_as, seeded_links, q, expected
):
    login_as(admin)

    r = await client.get("/v1/admin/links", params={"q": q})

    assert {l["title"] for l in r.json()} == expected


@pytest.mark.asyncio
async def test_should_update_any_link_with_trimmed_values(
    client: AsyncClient, db_session: AsyncSession, admin, login_as, seeded_links
):
    login_as(admin)
    target = seeded_links[0]

    r = await client.patch(f"/v1/admin/links/{target.id}", json={"title": "  Better tips  "})

    assert r.status_code == 200
    assert r.json()["title"] == "Better tips"
    assert r.json()["url"] == "https://tips.example.com"

    log = (await db_session.execute(select(ActivityLog))).scalars().one()
    assert (log.user_id, log.action, log.entity_type, log.entity_id) == (admin.id, "update", "link", str(target.id))

    r = await client.patch(f"/v1/admin/links/{uuid4()}", json={"title": "x"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_should_delete_single_link(client: AsyncClient, admin, login_as, seeded_links):
    login_as(admin)
    target = seeded_links[1]

    r = await client.delete(f"/v1/admin/links/{target.id}")

    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert (await client.delete(f"/v1/admin/links/{target.id}")).status_code == 404


@pytest.mark.asyncio
async def test_should_bulk_delete_and_ignore_unknown_ids(
    client: AsyncClient, db_session: AsyncSession, admin, login_as, seeded_links
):
    login_as(admin)
    ids = [str(seeded_links[0].id), str(seeded_links[1].id), str(seeded_links[0].id), str(uuid4())]

    r = await client.post("/v1/admin/links/bulk-delete", json={"ids": ids})

    assert r.status_code == 200
    assert r.json() == {"deleted": 2}
    remaining = (await db_session.execute(select(Link.title))).scalars().all()
    assert remaining == ["Admin notes"]
    log = (await db_session.execute(select(ActivityLog))).scalars().one()
    assert log.action == "delete"
    assert log.details == {"count": 2}


@pytest.mark.asyncio
async def test_should_return_422_when_bulk_delete_ids_are_empty(client: AsyncClient, admin, login_as):
    login_as(admin)

    r = await client.post("/v1/admin/links/bulk-delete", json={"ids": []})

    assert r.status_code == 422


@pytest.mark.asyncio
async def test_should_list_every_users_videos_with_owner(
    client: AsyncClient, db_session: AsyncSession, admin, user, login_as
):
    login_as(admin)
    db_session.add(
        Video(
            owner_id=user.id, url="https://fb.watch/xYz/", platform=Platform.facebook, video_id="xYz",
            title="Family reel", thumbnail_url="/placeholder.svg",
        )
    )
    await db_session.commit()

    r = await client.get("/v1/admin/videos", params={"q": "sam"})

    assert r.status_code == 200
    [video] = r.json()
    assert video["title"] == "Family reel"
    assert video["platform"] == "facebook"
    assert video["user_id"] == str(user.id)
    assert video["user_email"] == "sam@example.com"


@pytest.mark.asyncio
async def test_should_list_activity_with_unknown_for_deleted_users(
    client: AsyncClient, db_session: AsyncSession, admin, user, login_as
):
    login_as(admin)
    gone = uuid4()
    db_session.add_all(
        [
            ActivityLog(user_id=user.id, action="login", entity_type="user", entity_id=str(user.id)),
            ActivityLog(user_id=gone, action="delete", entity_type="video", entity_id=str(uuid4())),
        ]
    )
    await db_session.commit()

    r = await client.get("/v1/admin/activity")

    assert r.status_code == 200
    by_user = {a["user_id"]: a for a in r.json()}
    assert by_user[str(user.id)]["user_email"] == "sam@example.com"
    assert by_user[str(user.id)]["user_name"] == "Sam"
    assert by_user[str(gone)]["user_email"] == "Unknown"
    assert by_user[str(gone)]["user_name"] is None

    r = await client.get("/v1/admin/activity", params={"q": "video"})
    assert [a["action"] for a in r.json()] == ["delete"]

    r = await client.get("/v1/admin/activity", params={"limit": 1})
    assert len(r.json()) == 1
