"""Category service and API tests."""

from notekeeper.models.category import Category, slugify
from notekeeper.models.note import Note
from notekeeper.models.task import Task
from notekeeper.services.category import CategoryService


def test_slugify():
    """Test slug generation from titles."""
    assert slugify("Groceries") == "groceries"
    assert slugify("  Home & Garden  ") == "home-garden"
    assert slugify("Zażółć gęślą jaźń") == "zazoc-gesla-jazn"


def test_slug_kept_unique(db):
    """Test that two categories with the same title get distinct slugs."""
    service = CategoryService(db)
    first = service.save(Category(title="Work"))
    second = service.save(Category(title="Work"))
    assert first.slug == "work"
    assert second.slug == "work-2"

    # Re-saving keeps the slug it already owns
    first.title = "Work"
    assert service.save(first).slug == "work"


def test_slug_fits_column_for_long_titles(db):
    """Test that the de-duplicating suffix never pushes a slug past its column."""
    service = CategoryService(db)
    limit = Category.__table__.c.slug.type.length
    title = "a" * 64

    first = service.save(Category(title=title))
    second = service.save(Category(title=title))
    assert first.slug == "a" * 64
    assert second.slug == "a" * 62 + "-2"
    assert len(second.slug) <= limit


def test_slug_taken_concurrently_is_retried(db, category, monkeypatch):
    """Test that a slug claimed between lookup and commit gets the next suffix."""
    service = CategoryService(db)
    lookup = service.categories.find_by_slug
    seen = []

    def stale_lookup(slug):
        # The first lookup misses the row another request just committed
        seen.append(slug)
        return None if len(seen) == 1 else lookup(slug)

    monkeypatch.setattr(service.categories, "find_by_slug", stale_lookup)

    second = service.save(Category(title="Groceries"))
    assert second.slug == "groceries-2"
    assert db.query(Category).count() == 2


def test_exists_and_find(db, category):
    """Test lookups by id."""
    service = CategoryService(db)
    assert service.exists(category.id)
    assert service.find_by_id(category.id).title == "Groceries"
    assert service.find_by_id(9999) is None
    assert not service.exists(9999)


def test_can_be_deleted_only_when_unused(db, user, category):
    """Test the deletion guard against notes and tasks."""
    service = CategoryService(db)
    assert service.can_be_deleted(category.id)

    note = Note(title="Milk", content="2 litres", author_id=user.id, category_id=category.id)
    db.add(note)
    db.commit()
    assert not service.can_be_deleted(category.id)

    db.delete(note)
    task = Task(title="Buy milk", author_id=user.id, category_id=category.id)
    db.add(task)
    db.commit()
    assert not service.can_be_deleted(category.id)

    db.delete(task)
    db.commit()
    assert service.can_be_deleted(category.id)


def test_can_be_deleted_missing_category(db):
    """Test that a missing category is never reported deletable."""
    assert CategoryService(db).can_be_deleted(9999) is False


def test_list_categories(client, auth_headers, db):
    """Test the paginated category index."""
    service = CategoryService(db)
    for i in range(12):
        service.save(Category(title=f"Category {i}"))

    response = client.get("/category", headers=auth_headers)
    assert response.status_code == 200
    pagination = response.json()["pagination"]
    assert pagination["total"] == 12
    assert pagination["pages"] == 2
    assert len(pagination["items"]) == 10
    # Most recently updated first
    assert pagination["items"][0]["title"] == "Category 11"

    response = client.get("/category?page=2", headers=auth_headers)
    assert len(response.json()["pagination"]["items"]) == 2


def test_invalid_page(client, auth_headers):
    """Test that page numbers start at 1."""
    response = client.get("/category?page=0", headers=auth_headers)
    assert response.status_code == 422


def test_create_category(client, auth_headers, db):
    """Test creating a category."""
    response = client.get("/category/create", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["method"] == "POST"

    response = client.post(
        "/category/create",
        headers=auth_headers,
        json={"title": "Groceries"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/category"

    saved = db.query(Category).filter(Category.slug == "groceries").first()
    assert saved is not None
    assert saved.title == "Groceries"

    # The flash message is shown once on the index
    index = client.get("/category", headers=auth_headers)
    assert index.json()["flashes"] == [
        {"kind": "success", "message": "message.created_successfully"}
    ]
    again = client.get("/category", headers=auth_headers)
    assert again.json()["flashes"] == []


def test_create_category_validation(client, auth_headers, db):
    """Test that a too short title is rejected without saving."""
    response = client.post("/category/create", headers=auth_headers, json={"title": "ab"})
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "title"]
    assert db.query(Category).count() == 0


def test_show_category(client, auth_headers, category):
    """Test showing a category."""
    response = client.get(f"/category/{category.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["slug"] == "groceries"


def test_show_missing_category(client, auth_headers):
    """Test that showing a missing category is a genuine 404."""
    response = client.get("/category/1234", headers=auth_headers)
    assert response.status_code == 404


def test_edit_missing_category_redirects(client, auth_headers):
    """Test that editing or deleting a missing category redirects to the index."""
    for route in ["/category/1234/edit", "/category/1234/delete"]:
        response = client.get(route, headers=auth_headers, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/category"


def test_edit_missing_category_with_invalid_payload(client, auth_headers):
    """Test that a missing category redirects before the payload is validated."""
    response = client.put(
        "/category/1234/edit",
        headers=auth_headers,
        json={"title": "x"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/category"


def test_edit_category(client, auth_headers, db, category):
    """Test editing a category title."""
    response = client.get(f"/category/{category.id}/edit", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"title": "Groceries"}
    assert response.json()["method"] == "PUT"

    response = client.put(
        f"/category/{category.id}/edit",
        headers=auth_headers,
        json={"title": "Shopping"},
        follow_redirects=False,
    )
    assert response.status_code == 303

    db.refresh(category)
    assert category.title == "Shopping"
    assert category.slug == "shopping"


def test_delete_category_scenario(client, auth_headers, db):
    """Create a category and a note in it; delete is refused until the note is gone."""
    response = client.post(
        "/category/create", headers=auth_headers, json={"title": "Groceries"}, follow_redirects=False
    )
    assert response.status_code == 303
    category_id = db.query(Category).filter(Category.title == "Groceries").one().id

    response = client.post(
        "/note/create",
        headers=auth_headers,
        json={"title": "Milk", "content": "Semi-skimmed", "category_id": category_id},
        follow_redirects=False,
    )
    assert response.status_code == 303
    note_id = db.query(Note).filter(Note.title == "Milk").one().id
    client.get("/note", headers=auth_headers)  # consume flash

    # Confirmation page is refused
    response = client.get(
        f"/category/{category_id}/delete", headers=auth_headers, follow_redirects=False
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/category"

    # Submitting the delete anyway is refused too
    response = client.delete(
        f"/category/{category_id}/delete", headers=auth_headers, follow_redirects=False
    )
    assert response.status_code == 303
    assert db.query(Category).filter(Category.id == category_id).count() == 1

    flashes = client.get("/category", headers=auth_headers).json()["flashes"]
    assert {"kind": "warning", "message": "message.category_contains_elements"} in flashes

    response = client.delete(f"/note/{note_id}/delete", headers=auth_headers, follow_redirects=False)
    assert response.status_code == 303

    response = client.get(f"/category/{category_id}/delete", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["method"] == "DELETE"

    response = client.delete(
        f"/category/{category_id}/delete", headers=auth_headers, follow_redirects=False
    )
    assert response.status_code == 303
    db.expire_all()
    assert db.query(Category).filter(Category.id == category_id).count() == 0
