"""End-to-end tests for the article pages and form posts."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from pressroom.config import Settings
from pressroom.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def public_dir(tmp_path) -> Path:
    public = tmp_path / "public"
    (public / "styles").mkdir(parents=True)
    (public / "styles" / "main.css").write_text("body { color: black; }", encoding="utf-8")
    return public


@pytest.fixture
def settings(public_dir) -> Settings:
    return Settings(
        _env_file=None,
        public_dir=str(public_dir),
        upload_dir=str(public_dir / "uploads"),
        session_secret="test-secret",
    )


@pytest.fixture
def app(settings):
    return create_app(settings=settings)


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def _article_count(client: AsyncClient) -> int:
    return (await client.get("/health")).json()["articles"]


# ── Read-only pages ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_home_lists_seed_articles(app):
    async with _client(app) as client:
        response = await client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    for title in ("Valorant", "Apex Legends", "Rainbow Six Siege"):
        assert title in response.text


@pytest.mark.asyncio
async def test_compose_about_and_edit_pages(app):
    async with _client(app) as client:
        compose = await client.get("/compose")
        about = await client.get("/about")
        edit = await client.get("/articles/2/edit")

    assert compose.status_code == 200
    assert 'action="/submit"' in compose.text
    assert 'action="/articles/3/delete"' in compose.text
    assert about.status_code == 200
    assert edit.status_code == 200
    assert 'value="Apex Legends"' in edit.text
    assert 'action="/articles/2/update"' in edit.text


@pytest.mark.asyncio
async def test_unknown_article_is_404(app):
    async with _client(app) as client:
        detail = await client.get("/articles/999")
        edit = await client.get("/articles/999/edit")

    assert detail.status_code == 404
    assert "Article not found" in detail.text
    assert edit.status_code == 404


@pytest.mark.asyncio
async def test_non_numeric_id_is_rejected(app):
    async with _client(app) as client:
        response = await client.get("/articles/abc")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_public_assets_are_served(app):
    async with _client(app) as client:
        response = await client.get("/styles/main.css")
    assert response.status_code == 200
    assert "color: black" in response.text


# ── Create ───────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_submit_redirects_to_new_article(app):
    async with _client(app) as client:
        response = await client.post("/submit", data={"title": "T", "brief": "B", "article": "A"})

        assert response.status_code == 302
        assert response.headers["location"] == "/articles/4"

        page = await client.get("/articles/4")
        assert page.status_code == 200
        assert "<h1>T</h1>" in page.text
        assert "Article created successfully!" in page.text

        # The flash is shown exactly once
        again = await client.get("/articles/4")
        assert "Article created successfully!" not in again.text


@pytest.mark.asyncio
async def test_submit_trims_fields(app):
    async with _client(app) as client:
        await client.post("/submit", data={"title": "  Spaced  ", "brief": " B ", "article": " A "})
        page = await client.get("/articles/4")
    assert "<h1>Spaced</h1>" in page.text


@pytest.mark.asyncio
async def test_submit_with_blank_title_is_400(app):
    async with _client(app) as client:
        response = await client.post("/submit", data={"title": "   ", "brief": "B", "article": "A"})
        count = await _article_count(client)

    assert response.status_code == 400
    assert "Title, brief, and article are required." in response.text
    assert count == 3


@pytest.mark.asyncio
async def test_submit_with_missing_fields_is_400(app):
    async with _client(app) as client:
        response = await client.post("/submit", data={"title": "Only a title"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_submit_with_image(app, public_dir):
    async with _client(app) as client:
        response = await client.post(
            "/submit",
            data={"title": "Pictured", "brief": "B", "article": "A"},
            files={"image": ("summer trip.png", PNG_BYTES, "image/png")},
        )
        page = await client.get(response.headers["location"])

        stored = list((public_dir / "uploads").iterdir())
        assert len(stored) == 1
        assert stored[0].name.endswith("_summer_trip.png")
        image_url = f"/uploads/{stored[0].name}"
        assert image_url in page.text

        served = await client.get(image_url)
        assert served.status_code == 200
        assert served.content == PNG_BYTES


@pytest.mark.asyncio
async def test_submit_with_text_file_is_rejected(app, public_dir):
    async with _client(app) as client:
        response = await client.post(
            "/submit",
            data={"title": "T", "brief": "B", "article": "A"},
            files={"image": ("notes.txt", b"hello", "text/plain")},
        )
        count = await _article_count(client)

    assert response.status_code == 415
    assert "Only image uploads are allowed" in response.text
    assert count == 3
    assert list((public_dir / "uploads").iterdir()) == []


@pytest.mark.asyncio
async def test_submit_with_oversized_image_is_400(public_dir):
    settings = Settings(
        _env_file=None,
        public_dir=str(public_dir),
        upload_dir=str(public_dir / "uploads"),
        max_upload_size_mb=1,
    )
    app = create_app(settings=settings)

    async with _client(app) as client:
        response = await client.post(
            "/submit",
            data={"title": "T", "brief": "B", "article": "A"},
            files={"image": ("big.png", b"\x00" * (1024 * 1024 + 1), "image/png")},
        )
        count = await _article_count(client)

    assert response.status_code == 400
    assert "File too large. Maximum size is 1MB." in response.text
    assert count == 3


@pytest.mark.asyncio
async def test_submit_with_two_image_parts_is_400(app, public_dir):
    async with _client(app) as client:
        response = await client.post(
            "/submit",
            data={"title": "T", "brief": "B", "article": "A"},
            files=[
                ("image", ("notes.txt", b"hello", "text/plain")),
                ("image", ("a.png", PNG_BYTES, "image/png")),
            ],
        )
        count = await _article_count(client)

    assert response.status_code == 400
    assert "Only one file may be uploaded" in response.text
    assert count == 3
    assert list((public_dir / "uploads").iterdir()) == []


@pytest.mark.asyncio
async def test_submit_with_file_under_other_field_is_400(app, public_dir):
    async with _client(app) as client:
        response = await client.post(
            "/submit",
            data={"title": "T", "brief": "B", "article": "A"},
            files={"attachment": ("notes.txt", b"hello", "text/plain")},
        )
        count = await _article_count(client)

    assert response.status_code == 400
    assert count == 3
    assert list((public_dir / "uploads").iterdir()) == []


@pytest.mark.asyncio
async def test_submit_with_blank_file_input_creates_article_without_image(app):
    async with _client(app) as client:
        response = await client.post(
            "/submit",
            data={"title": "T", "brief": "B", "article": "A"},
            files={"image": ("", b"", "application/octet-stream")},
        )

    assert response.status_code == 302
    assert response.headers["location"] == "/articles/4"


# ── Update ───────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_update_without_image_keeps_existing_image(app):
    async with _client(app) as client:
        response = await client.post(
            "/articles/1/update",
            data={"title": "Valorant 2", "brief": "New brief", "article": "New body"},
        )
        assert response.status_code == 302
        assert response.headers["location"] == "/articles/1"

        page = await client.get("/articles/1")

    assert "<h1>Valorant 2</h1>" in page.text
    assert "/images/valorant.svg" in page.text
    assert "Article updated successfully!" in page.text
    assert "&middot; updated" in page.text


@pytest.mark.asyncio
async def test_update_with_new_image_replaces_it(app):
    async with _client(app) as client:
        await client.post(
            "/articles/1/update",
            data={"title": "Valorant", "brief": "B", "article": "A"},
            files={"image": ("new.png", PNG_BYTES, "image/png")},
        )
        page = await client.get("/articles/1")

    assert "/images/valorant.svg" not in page.text
    assert "_new.png" in page.text


@pytest.mark.asyncio
async def test_update_missing_article_is_404(app):
    async with _client(app) as client:
        response = await client.post("/articles/999/update", data={"title": "T", "brief": "B", "article": "A"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_missing_article_with_blank_fields_is_404(app):
    async with _client(app) as client:
        response = await client.post("/articles/999/update", data={"title": "", "brief": "", "article": ""})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_with_second_file_is_400_and_changes_nothing(app, public_dir):
    async with _client(app) as client:
        response = await client.post(
            "/articles/2/update",
            data={"title": "X", "brief": "B", "article": "A"},
            files=[
                ("image", ("a.png", PNG_BYTES, "image/png")),
                ("extra", ("b.png", PNG_BYTES, "image/png")),
            ],
        )
        page = await client.get("/articles/2")

    assert response.status_code == 400
    assert "<h1>Apex Legends</h1>" in page.text
    assert list((public_dir / "uploads").iterdir()) == []


@pytest.mark.asyncio
async def test_update_with_blank_fields_is_400_and_changes_nothing(app):
    async with _client(app) as client:
        response = await client.post("/articles/2/update", data={"title": "X", "brief": "", "article": "A"})
        page = await client.get("/articles/2")

    assert response.status_code == 400
    assert "<h1>Apex Legends</h1>" in page.text


# ── Delete ───────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_delete_redirects_home(app):
    async with _client(app) as client:
        response = await client.post("/articles/2/delete")
        assert response.status_code == 302
        assert response.headers["location"] == "/"

        home = await client.get("/")
        gone = await client.get("/articles/2")

    assert "Apex Legends" not in home.text
    assert "Article deleted successfully!" in home.text
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_delete_missing_article_is_404(app):
    async with _client(app) as client:
        response = await client.post("/articles/999/delete")
        count = await _article_count(client)

    assert response.status_code == 404
    assert count == 3


@pytest.mark.asyncio
async def test_ids_are_not_reused_across_requests(app):
    async with _client(app) as client:
        first = await client.post("/submit", data={"title": "A", "brief": "B", "article": "C"})
        assert first.headers["location"] == "/articles/4"
        await client.post("/articles/4/delete")

        second = await client.post("/submit", data={"title": "D", "brief": "E", "article": "F"})

    assert second.headers["location"] == "/articles/5"
