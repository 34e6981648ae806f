from fastapi.testclient import TestClient

from notekeeper.config import settings
from tests.helpers import USER_1, USER_2, as_user


def create_note(
    client: TestClient,
    notes_url: str,
    title: str = "t",
    text: str = "text",
    tags: list[str] | None = None,
    user=USER_1,
) -> str:
    """Create a note through the API and return its id."""
    payload = {"title": title, "text": text, "tags": tags or []}
    response = client.post(notes_url, json=payload, headers=as_user(user))
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_create_returns_201_with_full_note(test_client: TestClient, notes_url: str) -> None:
    response = test_client.post(
        notes_url,
        json={"title": "My first note", "text": "note is just a note", "tags": ["BUSINESS", "IMPORTANT"]},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["title"] == "My first note"
    assert body["text"] == "note is just a note"
    assert body["user_id"] == str(USER_1)
    assert body["created_at"]
    assert set(body["tags"]) == {"BUSINESS", "IMPORTANT"}
    assert response.headers["location"].endswith(f"/notes/{body['id']}")


def test_create_without_tags_returns_empty_list(test_client: TestClient, notes_url: str) -> None:
    response = test_client.post(notes_url, json={"title": "Hello", "text": "World"})
    assert response.status_code == 201
    assert response.json()["tags"] == []


def test_create_rejects_blank_title(test_client: TestClient, notes_url: str, fake_repo) -> None:
    response = test_client.post(notes_url, json={"title": "   ", "text": "text"})
    assert response.status_code == 400
    assert "title" in response.json()["errors"]
    assert fake_repo.notes == {}


def test_create_rejects_blank_text(test_client: TestClient, notes_url: str, fake_repo) -> None:
    response = test_client.post(notes_url, json={"title": "Title", "text": "   "})
    assert response.status_code == 400
    assert "text" in response.json()["errors"]
    assert fake_repo.notes == {}


def test_create_rejects_unknown_tag(test_client: TestClient, notes_url: str, fake_repo) -> None:
    response = test_client.post(notes_url, json={"title": "Hello", "text": "World", "tags": ["FUN"]})
    assert response.status_code == 400
    assert fake_repo.notes == {}


def test_update_replaces_note(test_client: TestClient, notes_url: str) -> None:
    note_id = create_note(test_client, notes_url, "old", "old text", ["PERSONAL"])

    response = test_client.put(
        f"{notes_url}{note_id}", json={"title": "new", "text": "new text", "tags": ["BUSINESS"]}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == note_id
    assert (body["title"], body["text"], body["tags"]) == ("new", "new text", ["BUSINESS"])
    assert body["updated_at"] is not None


def test_update_missing_note_returns_404(test_client: TestClient, notes_url: str) -> None:
    response = test_client.put(f"{notes_url}missing-id", json={"title": "new", "text": "new text"})
    assert response.status_code == 404
    assert response.json() == {"detail": "Note not found"}


def test_delete_returns_204_then_404(test_client: TestClient, notes_url: str, fake_repo) -> None:
    note_id = create_note(test_client, notes_url)

    response = test_client.delete(f"{notes_url}{note_id}")
    assert response.status_code == 204
    assert fake_repo.notes == {}

    assert test_client.delete(f"{notes_url}{note_id}").status_code == 404


def test_list_is_newest_first_without_text(test_client: TestClient, notes_url: str) -> None:
    id1 = create_note(test_client, notes_url, "t1", "a", ["BUSINESS"])
    id2 = create_note(test_client, notes_url, "t2", "b", ["BUSINESS"])
    id3 = create_note(test_client, notes_url, "t3", "c", ["BUSINESS"])

    response = test_client.get(notes_url, params={"page": 0, "size": 10})

    assert response.status_code == 200
    items = response.json()["items"]
    assert [i["id"] for i in items] == [id3, id2, id1]
    assert all("text" not in i for i in items)
    assert items[0]["title"] == "t3"
    assert items[0]["created_at"]
    assert items[0]["tags"] == ["BUSINESS"]


def test_list_pagination(test_client: TestClient, notes_url: str) -> None:
    for i in range(3):
        create_note(test_client, notes_url, f"t{i}")

    page0 = test_client.get(notes_url, params={"page": 0, "size": 2}).json()
    page1 = test_client.get(notes_url, params={"page": 1, "size": 2}).json()

    assert len(page0["items"]) == 2
    assert len(page1["items"]) == 1
    assert set(page0) == {"items", "page", "size", "totalItems", "totalPages"}
    assert page0["totalItems"] == page1["totalItems"] == 3
    assert page0["totalPages"] == page1["totalPages"] == 2
    assert (page1["page"], page1["size"]) == (1, 2)


def test_list_default_page_size(test_client: TestClient, notes_url: str) -> None:
    body = test_client.get(notes_url).json()
    assert body == {
        "items": [],
        "page": 0,
        "size": settings.default_page_size,
        "totalItems": 0,
        "totalPages": 0,
    }


def test_list_filters_by_tag(test_client: TestClient, notes_url: str) -> None:
    create_note(test_client, notes_url, "b1", "x", ["BUSINESS"])
    create_note(test_client, notes_url, "p1", "y", ["PERSONAL"])
    create_note(test_client, notes_url, "b2", "z", ["BUSINESS", "IMPORTANT"])

    body = test_client.get(notes_url, params={"tag": "BUSINESS"}).json()

    assert sorted(i["title"] for i in body["items"]) == ["b1", "b2"]
    assert body["totalItems"] == 2


def test_list_rejects_invalid_paging(test_client: TestClient, notes_url: str) -> None:
    assert test_client.get(notes_url, params={"page": -1}).status_code == 400
    assert test_client.get(notes_url, params={"size": 0}).status_code == 400
    assert test_client.get(notes_url, params={"tag": "FUN"}).status_code == 400


def test_text_returns_text_only(test_client: TestClient, notes_url: str) -> None:
    note_id = create_note(test_client, notes_url, "t", "note is just a note")

    response = test_client.get(f"{notes_url}{note_id}/text")

    assert response.status_code == 200
    assert response.json() == {"id": note_id, "user_id": str(USER_1), "text": "note is just a note"}


def test_text_missing_returns_404(test_client: TestClient, notes_url: str) -> None:
    assert test_client.get(f"{notes_url}missing/text").status_code == 404


def test_stats_are_ordered(test_client: TestClient, notes_url: str) -> None:
    note_id = create_note(test_client, notes_url, "t", "note is just a note")

    response = test_client.get(f"{notes_url}{note_id}/stats")

    assert response.status_code == 200
    assert list(response.json()["stats"].items()) == [("note", 2), ("a", 1), ("is", 1), ("just", 1)]


def test_stats_fold_case_and_ignore_punctuation(test_client: TestClient, notes_url: str) -> None:
    note_id = create_note(test_client, notes_url, "t", "Note, note!")

    stats = test_client.get(f"{notes_url}{note_id}/stats").json()["stats"]

    assert stats == {"note": 2}


def test_notes_are_isolated_between_users(test_client: TestClient, notes_url: str) -> None:
    note_id = create_note(test_client, notes_url, "private", "secret words", user=USER_1)
    create_note(test_client, notes_url, "theirs", "other words", user=USER_2)
    other = as_user(USER_2)

    for path in (f"{notes_url}{note_id}", f"{notes_url}{note_id}/text", f"{notes_url}{note_id}/stats"):
        response = test_client.get(path, headers=other)
        assert response.status_code == 404
        assert response.json() == {"detail": "Note not found"}

    assert test_client.put(
        f"{notes_url}{note_id}", json={"title": "x", "text": "y"}, headers=other
    ).status_code == 404
    assert test_client.delete(f"{notes_url}{note_id}", headers=other).status_code == 404

    listed = test_client.get(notes_url, headers=other).json()
    assert [i["title"] for i in listed["items"]] == ["theirs"]
    assert test_client.get(f"{notes_url}{note_id}").json()["title"] == "private"


def test_metadata_lists_tags(test_client: TestClient) -> None:
    response = test_client.get(f"{settings.api_prefix}/metadata/tags")
    assert response.json() == ["BUSINESS", "PERSONAL", "IMPORTANT"]


def test_health(test_client: TestClient) -> None:
    response = test_client.get(f"{settings.api_prefix}/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["x-content-type-options"] == "nosniff"


def test_missing_bearer_token_returns_401(fake_repo) -> None:
    from notekeeper.dependencies import get_note_repository
    from notekeeper.main import create_app

    app = create_app()
    app.dependency_overrides[get_note_repository] = lambda: fake_repo
    client = TestClient(app)

    response = client.get(f"{settings.api_prefix}/notes/")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_malformed_bearer_token_returns_401(fake_repo) -> None:
    from notekeeper.dependencies import get_note_repository
    from notekeeper.main import create_app

    app = create_app()
    app.dependency_overrides[get_note_repository] = lambda: fake_repo
    client = TestClient(app)

    response = client.get(
        f"{settings.api_prefix}/notes/", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token format"


def test_list_page_past_the_end_is_empty_with_totals(test_client: TestClient, notes_url: str) -> None:
    for i in range(3):
        create_note(test_client, notes_url, f"t{i}")

    body = test_client.get(notes_url, params={"page": 5, "size": 2}).json()

    assert body == {"items": [], "page": 5, "size": 2, "totalItems": 3, "totalPages": 2}
