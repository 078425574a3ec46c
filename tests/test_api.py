"""API endpoint tests."""


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    data = response.json()
    assert "access_token" in data
    assert data["user"]["email"] == "newuser@example.com"
    assert data["user"]["oauth_provider"] is None
    assert "password_hash" not in data["user"]


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": auth_headers.email, "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 400
    assert "already registered" in response.json()["detail"]


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "access_token" in response.json()


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id
    assert response.json()["email"] == auth_headers.email


def test_requires_token(client):
    """Test that protected endpoints reject missing or bad tokens."""
    assert client.get("/api/v1/items").status_code in (401, 403)
    response = client.get("/api/v1/items", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_get_user_by_id_and_email(client, auth_headers, other_headers):
    """Test looking up another user."""
    response = client.get(f"/api/v1/users/{other_headers.user_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == other_headers.email

    response = client.get(f"/api/v1/users/by-email/{other_headers.email}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == other_headers.user_id


def test_get_unknown_user(client, auth_headers):
    """Test looking up a user that does not exist."""
    response = client.get("/api/v1/users/does-not-exist", headers=auth_headers)
    assert response.status_code == 404

    response = client.get("/api/v1/users/by-email/nobody@example.com", headers=auth_headers)
    assert response.status_code == 404


def test_user_email_lookup_is_case_sensitive(client, auth_headers):
    """Test that emails match exactly as stored."""
    response = client.get("/api/v1/users/by-email/TEST@example.com", headers=auth_headers)
    assert response.status_code == 404


def test_create_item(client, auth_headers):
    """Test listing an item."""
    response = client.post(
        "/api/v1/items",
        headers=auth_headers,
        json={
            "name": "Bike",
            "description": "Red, 21 speed",
            "category": "Other",
            "image_keys": ["a", "b"],
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Bike"
    assert data["owner_id"] == auth_headers.user_id
    assert data["category"] == "Other"
    assert data["image_keys"] == ["a", "b"]


def test_item_image_keys_round_trip_in_order(client, auth_headers, create_item):
    """Test that image keys come back in the order they were given."""
    item = create_item(auth_headers, image_keys=["zeta", "alpha", "mid"])

    response = client.get(f"/api/v1/items/{item['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["image_keys"] == ["zeta", "alpha", "mid"]


def test_item_image_keys_sanitized(client, auth_headers, create_item):
    """Test that blank and duplicate keys are dropped and keys are trimmed."""
    item = create_item(auth_headers, image_keys=["a", " ", "b ", "a", ""])
    assert item["image_keys"] == ["a", "b"]


def test_create_item_category_case_insensitive(client, auth_headers, create_item):
    """Test that category names are matched case-insensitively."""
    item = create_item(auth_headers, category="eLeCtRoNiCs")
    assert item["category"] == "Electronics"


def test_create_item_invalid_category(client, auth_headers):
    """Test that unknown categories are rejected."""
    response = client.post(
        "/api/v1/items",
        headers=auth_headers,
        json={"name": "Thing", "category": "Spaceships"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid category."


def test_get_items(client, auth_headers, other_headers, create_item):
    """Test browsing all items and items by owner."""
    create_item(auth_headers, name="Mine")
    create_item(other_headers, name="Theirs")

    response = client.get("/api/v1/items", headers=auth_headers)
    assert response.status_code == 200
    assert {item["name"] for item in response.json()} == {"Mine", "Theirs"}

    response = client.get(f"/api/v1/users/{other_headers.user_id}/items", headers=auth_headers)
    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Theirs"]


def test_get_missing_item(client, auth_headers):
    """Test fetching an item that does not exist."""
    response = client.get("/api/v1/items/missing", headers=auth_headers)
    assert response.status_code == 404


def test_update_item_replaces_images(client, auth_headers, create_item):
    """Test that a new key list replaces the old images rather than merging."""
    item = create_item(auth_headers, name="Lamp", image_keys=["a", "b"])

    response = client.patch(
        f"/api/v1/items/{item['id']}",
        headers=auth_headers,
        json={"name": "Desk Lamp", "category": "Furniture", "image_keys": ["c", "a"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Desk Lamp"
    assert data["category"] == "Furniture"
    assert data["image_keys"] == ["c", "a"]


def test_update_item_without_image_keys_keeps_images(client, auth_headers, create_item):
    """Test that omitting image_keys leaves images untouched."""
    item = create_item(auth_headers, image_keys=["a", "b"])

    response = client.patch(
        f"/api/v1/items/{item['id']}",
        headers=auth_headers,
        json={"name": "Renamed", "category": "Other"},
    )
    assert response.status_code == 200
    assert response.json()["image_keys"] == ["a", "b"]


def test_update_item_empty_image_keys_clears_images(client, auth_headers, create_item):
    """Test that an empty key list removes all images."""
    item = create_item(auth_headers, image_keys=["a"])

    response = client.patch(
        f"/api/v1/items/{item['id']}",
        headers=auth_headers,
        json={"name": "Thing", "category": "Other", "image_keys": []},
    )
    assert response.status_code == 200
    assert response.json()["image_keys"] == []


def test_create_item_with_image_key_of_another_item(
    client, auth_headers, other_headers, create_item
):
    """Test that an image key cannot be attached to a second item on create."""
    create_item(auth_headers, name="First", image_keys=["shared"])

    response = client.post(
        "/api/v1/items",
        headers=other_headers,
        json={"name": "Second", "category": "Other", "image_keys": ["fresh", "shared"]},
    )
    assert response.status_code == 409
    assert "shared" in response.json()["detail"]

    response = client.get("/api/v1/items", headers=auth_headers)
    assert [item["name"] for item in response.json()] == ["First"]


def test_update_item_with_image_key_of_another_item(client, auth_headers, create_item):
    """Test that an image key cannot be moved onto a second item on update."""
    first = create_item(auth_headers, name="First", image_keys=["k1"])
    second = create_item(auth_headers, name="Second", image_keys=["k2"])

    response = client.patch(
        f"/api/v1/items/{second['id']}",
        headers=auth_headers,
        json={"name": "Renamed", "category": "Other", "image_keys": ["k1"]},
    )
    assert response.status_code == 409

    response = client.get(f"/api/v1/items/{second['id']}", headers=auth_headers)
    assert response.json()["name"] == "Second"
    assert response.json()["image_keys"] == ["k2"]
    response = client.get(f"/api/v1/items/{first['id']}", headers=auth_headers)
    assert response.json()["image_keys"] == ["k1"]


def test_update_item_keeps_own_image_keys(client, auth_headers, create_item):
    """Test that re-submitting an item's own keys is not a conflict."""
    item = create_item(auth_headers, image_keys=["a", "b"])

    response = client.patch(
        f"/api/v1/items/{item['id']}",
        headers=auth_headers,
        json={"name": "Thing", "category": "Other", "image_keys": ["b", "a"]},
    )
    assert response.status_code == 200
    assert response.json()["image_keys"] == ["b", "a"]


def test_update_item_not_owner(client, auth_headers, other_headers, create_item):
    """Test that only the owner can update an item."""
    item = create_item(auth_headers, name="Mine")

    response = client.patch(
        f"/api/v1/items/{item['id']}",
        headers=other_headers,
        json={"name": "Stolen", "category": "Other"},
    )
    assert response.status_code == 403

    response = client.get(f"/api/v1/items/{item['id']}", headers=auth_headers)
    assert response.json()["name"] == "Mine"


def test_update_missing_item(client, auth_headers):
    """Test updating an item that does not exist."""
    response = client.patch(
        "/api/v1/items/missing",
        headers=auth_headers,
        json={"name": "Ghost", "category": "Other"},
    )
    assert response.status_code == 404


def test_delete_item(client, auth_headers, create_item):
    """Test deleting an item."""
    item = create_item(auth_headers, image_keys=["a"])

    response = client.delete(f"/api/v1/items/{item['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/api/v1/items/{item['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_item_not_owner(client, auth_headers, other_headers, create_item):
    """Test that only the owner can delete an item."""
    item = create_item(auth_headers)

    response = client.delete(f"/api/v1/items/{item['id']}", headers=other_headers)
    assert response.status_code == 403

    response = client.get(f"/api/v1/items/{item['id']}", headers=auth_headers)
    assert response.status_code == 200
