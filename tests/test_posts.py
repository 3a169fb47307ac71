"""Tests for blog post slugs, the SQL repository and the posts API."""

import pytest

from msc_admin.infrastructure.database.repositories import SqlBlogPostRepository
from msc_admin.modules.posts import BlogPostNotFoundError, BlogPostService, generate_slug


@pytest.mark.parametrize(
    ("title", "slug"),
    [
        ("Hello, World!", "hello-world"),
        ("  Spaces   and__underscores -- dashes ", "spaces-and-underscores-dashes"),
        ("Café au lait", "caf-au-lait"),
        ("---", ""),
    ],
)
def test_generate_slug(title, slug):
    assert generate_slug(title) == slug


class TestRepository:
    async def test_counters_increment_in_place(self, db_session):
        repository = SqlBlogPostRepository(db_session)
        post = await repository.create_post({"slug": "first", "title": "First", "content": "Body"})
        assert await repository.increment_counter(post.id, "views") == 1
        assert await repository.increment_counter(post.id, "views") == 2
        assert await repository.increment_counter(post.id, "likes") == 1

    async def test_increment_unknown_post(self, db_session):
        with pytest.raises(BlogPostNotFoundError):
            await SqlBlogPostRepository(db_session).increment_counter(999, "views")

    async def test_update_keeps_unset_fields(self, db_session):
        service = BlogPostService(SqlBlogPostRepository(db_session))
        post = await service.update_post(
            (await SqlBlogPostRepository(db_session).create_post({"slug": "s", "title": "T", "category": "news"})).id,
            {"title": "New title", "unknown_column": "ignored"},
        )
        assert post.title == "New title"
        assert post.category == "news"


class TestPostsApi:
    async def test_create_generates_slug(self, client, auth_headers):
        response = await client.post(
            "/api/posts",
            json={"title": "Launch Day: Part 1", "content": "Hello", "author": "Mai", "tags": ["news"]},
            headers=await auth_headers("collab"),
        )
        body = response.json()
        assert response.status_code == 201
        assert body["data"]["slug"] == "launch-day-part-1"
        assert body["data"]["tags"] == ["news"]
        assert body["data"]["views"] == 0

    async def test_duplicate_slug_conflicts(self, client, auth_headers):
        headers = await auth_headers()
        payload = {"title": "Same", "content": "x", "author": "a"}
        assert (await client.post("/api/posts", json=payload, headers=headers)).status_code == 201
        response = await client.post("/api/posts", json=payload, headers=headers)
        assert response.status_code == 409
        assert response.json()["success"] is False

    async def test_list_is_newest_first(self, client, auth_headers):
        headers = await auth_headers()
        for title in ("Older", "Newer"):
            await client.post("/api/posts", json={"title": title, "content": "x", "author": "a"}, headers=headers)
        response = await client.get("/api/posts", headers=headers)
        assert [item["title"] for item in response.json()["data"]] == ["Newer", "Older"]

    async def test_partial_update_with_seo(self, client, auth_headers):
        headers = await auth_headers("editor")
        created = await client.post(
            "/api/posts",
            json={"title": "Guide", "content": "x", "author": "a", "excerpt": "Short"},
            headers=headers,
        )
        post_id = created.json()["data"]["id"]
        response = await client.put(
            f"/api/posts/{post_id}",
            json={"featured": True, "seo": {"title": "Guide | MSC", "keywords": ["guide"]}},
            headers=headers,
        )
        data = response.json()["data"]
        assert response.status_code == 200
        assert data["featured"] is True
        assert data["excerpt"] == "Short"
        assert data["seo"] == {"title": "Guide | MSC", "keywords": ["guide"]}

    async def test_views_and_likes(self, client, auth_headers):
        headers = await auth_headers()
        created = await client.post("/api/posts", json={"title": "Counted", "content": "x", "author": "a"}, headers=headers)
        post_id = created.json()["data"]["id"]
        await client.post(f"/api/posts/{post_id}/views")
        views = await client.post(f"/api/posts/{post_id}/views")
        likes = await client.post(f"/api/posts/{post_id}/likes")
        assert views.json()["data"] == {"id": post_id, "value": 2}
        assert likes.json()["data"] == {"id": post_id, "value": 1}

    async def test_delete_then_missing(self, client, auth_headers):
        headers = await auth_headers()
        created = await client.post("/api/posts", json={"title": "Gone", "content": "x", "author": "a"}, headers=headers)
        post_id = created.json()["data"]["id"]
        assert (await client.delete(f"/api/posts/{post_id}", headers=headers)).status_code == 200
        response = await client.get(f"/api/posts/{post_id}", headers=headers)
        assert response.status_code == 404
        assert (await client.post(f"/api/posts/{post_id}/views")).status_code == 404

    async def test_plain_user_cannot_write(self, client, auth_headers):
        response = await client.post(
            "/api/posts",
            json={"title": "Nope", "content": "x", "author": "a"},
            headers=await auth_headers("user"),
        )
        assert response.status_code == 403

    async def test_validation_errors_use_envelope(self, client, auth_headers):
        response = await client.post("/api/posts", json={"title": ""}, headers=await auth_headers())
        body = response.json()
        assert response.status_code == 422
        assert body["success"] is False
        assert body["error"] == "Invalid request"
        assert body["details"]
