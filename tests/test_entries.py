"""Entry API tests."""


def create_entry(client, headers, **overrides):
    payload = {
        "title": "Inception",
        "type": "Movie",
        "director": "Nolan",
        "budget": "$160M",
        "location": "LA",
        "duration": "148 min",
        "yearTime": "2010",
    }
    payload.update(overrides)
    response = client.post("/api/entries", headers=headers, json=payload)
    assert response.status_code == 201, response.json()
    return response.json()


def test_create_entry(client, auth_headers, entry_payload):
    """Test creating an entry."""
    response = client.post("/api/entries", headers=auth_headers, json=entry_payload)
    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["title"] == "Inception"
    assert data["type"] == "Movie"
    assert data["yearTime"] == "2010"
    assert data["userId"] == auth_headers.user_id
    assert data["budgetDisplay"] == "$160M"
    assert data["description"] is None
    assert data["createdAt"]
    assert data["updatedAt"]


def test_create_entry_ignores_user_id_in_payload(
    client, auth_headers, other_auth_headers, entry_payload
):
    """Test that the owner always comes from the token."""
    response = client.post(
        "/api/entries",
        headers=auth_headers,
        json={**entry_payload, "userId": other_auth_headers.user_id},
    )
    assert response.status_code == 201
    assert response.json()["userId"] == auth_headers.user_id


def test_create_tv_show_with_free_text_budget(client, auth_headers):
    """Test a TV show with a per-episode budget."""
    data = create_entry(
        client,
        auth_headers,
        title="Breaking Bad",
        type="TV Show",
        budget="$3M/ep",
        yearTime="2008-2013",
        description="Chemistry teacher turned manufacturer",
        imageUrl="/uploads/bb.png",
    )
    assert data["type"] == "TV Show"
    assert data["budget"] == "$3M/ep"
    assert data["budgetDisplay"] == "$3M/ep"
    assert data["imageUrl"] == "/uploads/bb.png"


def test_create_entry_accepts_snake_case(client, auth_headers, entry_payload):
    """Test that snake_case field names are accepted too."""
    payload = {**entry_payload, "year_time": entry_payload.pop("yearTime")}
    response = client.post("/api/entries", headers=auth_headers, json=payload)
    assert response.status_code == 201
    assert response.json()["yearTime"] == "2010"


def test_create_entry_validation(client, auth_headers, entry_payload):
    """Test that invalid fields are reported and nothing is stored."""
    response = client.post(
        "/api/entries",
        headers=auth_headers,
        json={**entry_payload, "title": "", "type": "Podcast", "budget": "lots"},
    )
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"title", "type", "budget"} <= fields

    listing = client.get("/api/entries", headers=auth_headers)
    assert listing.json()["pagination"]["total"] == 0


def test_create_entry_missing_fields(client, auth_headers):
    """Test that required fields must be present."""
    response = client.post("/api/entries", headers=auth_headers, json={"title": "Only a title"})
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert "director" in fields
    assert "yearTime" in fields


def test_create_entry_length_limits(client, auth_headers, entry_payload):
    """Test length bounds on text fields."""
    response = client.post(
        "/api/entries", headers=auth_headers, json={**entry_payload, "title": "x" * 256}
    )
    assert response.status_code == 400

    response = client.post(
        "/api/entries", headers=auth_headers, json={**entry_payload, "duration": "x" * 101}
    )
    assert response.status_code == 400


def test_budget_labels_accepted(client, auth_headers):
    """Test that known budget labels are accepted in any case."""
    for budget in ["Low", "medium", "HIGH", "Unknown", "tbd", "N/A"]:
        data = create_entry(client, auth_headers, budget=budget)
        assert data["budgetDisplay"] == budget


def test_list_entries_pagination(client, auth_headers):
    """Test paging through entries newest first."""
    for i in range(5):
        create_entry(client, auth_headers, title=f"Movie {i}")

    response = client.get("/api/entries?page=1&limit=2", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert [entry["title"] for entry in body["data"]] == ["Movie 4", "Movie 3"]
    assert body["pagination"] == {"page": 1, "limit": 2, "total": 5, "hasMore": True}

    response = client.get("/api/entries?page=3&limit=2", headers=auth_headers)
    body = response.json()
    assert [entry["title"] for entry in body["data"]] == ["Movie 0"]
    assert body["pagination"]["hasMore"] is False

    response = client.get("/api/entries?page=4&limit=2", headers=auth_headers)
    assert response.json()["data"] == []


def test_list_entries_defaults(client, auth_headers):
    """Test default page and limit."""
    for i in range(11):
        create_entry(client, auth_headers, title=f"Movie {i}")

    body = client.get("/api/entries", headers=auth_headers).json()
    assert len(body["data"]) == 10
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 11, "hasMore": True}


def test_list_entries_rejects_bad_query(client, auth_headers):
    """Test that malformed paging parameters are rejected."""
    for query in ["page=abc", "limit=xyz", "page=0", "limit=0", "page=-1", "limit=-5"]:
        response = client.get(f"/api/entries?{query}", headers=auth_headers)
        assert response.status_code == 400, query


def test_list_entries_scoped_to_owner(client, auth_headers, other_auth_headers):
    """Test that a user never sees another user's entries."""
    create_entry(client, auth_headers, title="Inception")
    create_entry(client, other_auth_headers, title="Someone Else's")

    body = client.get("/api/entries", headers=other_auth_headers).json()
    assert [entry["title"] for entry in body["data"]] == ["Someone Else's"]
    assert body["pagination"]["total"] == 1


def test_get_entry(client, auth_headers):
    """Test getting a single entry."""
    created = create_entry(client, auth_headers)

    response = client.get(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == created


def test_get_entry_of_other_user_is_not_found(client, auth_headers, other_auth_headers):
    """Test that entries owned by someone else are hidden."""
    created = create_entry(client, auth_headers)

    response = client.get(f"/api/entries/{created['id']}", headers=other_auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Entry not found"


def test_get_entry_not_found(client, auth_headers):
    """Test getting an entry that does not exist."""
    assert client.get("/api/entries/99999", headers=auth_headers).status_code == 404


def test_get_entry_invalid_id(client, auth_headers):
    """Test that a non-numeric id is a bad request."""
    assert client.get("/api/entries/abc", headers=auth_headers).status_code == 400


def test_update_entry_partial(client, auth_headers):
    """Test that a partial update leaves other fields unchanged."""
    created = create_entry(client, auth_headers)

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"description": "x"}
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["description"] == "x"
    for field in ["title", "type", "director", "budget", "location", "duration", "yearTime"]:
        assert updated[field] == created[field]


def test_update_entry_fields(client, auth_headers):
    """Test updating several fields at once."""
    created = create_entry(client, auth_headers)

    response = client.put(
        f"/api/entries/{created['id']}",
        headers=auth_headers,
        json={"title": "Tenet", "budget": "$205M", "yearTime": "2020"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Tenet"
    assert data["budgetDisplay"] == "$205M"
    assert data["yearTime"] == "2020"
    assert data["director"] == "Nolan"


def test_update_entry_validation(client, auth_headers):
    """Test that invalid updates are rejected without applying anything."""
    created = create_entry(client, auth_headers)

    response = client.put(
        f"/api/entries/{created['id']}",
        headers=auth_headers,
        json={"title": "Tenet", "budget": "plenty"},
    )
    assert response.status_code == 400

    current = client.get(f"/api/entries/{created['id']}", headers=auth_headers).json()
    assert current["title"] == "Inception"


def test_update_entry_rejects_null_required_field(client, auth_headers):
    """Test that required fields cannot be cleared."""
    created = create_entry(client, auth_headers)

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"title": None}
    )
    assert response.status_code == 400


def test_update_entry_clears_optional_field(client, auth_headers):
    """Test that an explicit null clears an optional field."""
    created = create_entry(client, auth_headers, description="Dreams")

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"description": None}
    )
    assert response.status_code == 200
    assert response.json()["description"] is None


def test_update_entry_empty_body(client, auth_headers):
    """Test that an empty patch returns the entry unchanged."""
    created = create_entry(client, auth_headers)

    response = client.put(f"/api/entries/{created['id']}", headers=auth_headers, json={})
    assert response.status_code == 200
    assert response.json()["title"] == created["title"]


def test_update_entry_not_found(client, auth_headers, other_auth_headers):
    """Test updating a missing or foreign entry."""
    created = create_entry(client, auth_headers)

    response = client.put("/api/entries/99999", headers=auth_headers, json={"title": "Nope"})
    assert response.status_code == 404

    response = client.put(
        f"/api/entries/{created['id']}", headers=other_auth_headers, json={"title": "Mine now"}
    )
    assert response.status_code == 404
    current = client.get(f"/api/entries/{created['id']}", headers=auth_headers).json()
    assert current["title"] == "Inception"


def test_delete_entry(client, auth_headers):
    """Test deleting an entry."""
    created = create_entry(client, auth_headers)

    response = client.delete(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/api/entries/{created['id']}", headers=auth_headers).status_code == 404

    # Deleting again is a 404, not a server error
    response = client.delete(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_entry_of_other_user(client, auth_headers, other_auth_headers):
    """Test that users cannot delete each other's entries."""
    created = create_entry(client, auth_headers)

    response = client.delete(f"/api/entries/{created['id']}", headers=other_auth_headers)
    assert response.status_code == 404
    assert client.get(f"/api/entries/{created['id']}", headers=auth_headers).status_code == 200


def test_list_entries_large_limit(client, auth_headers):
    """Test that any positive limit is accepted."""
    create_entry(client, auth_headers)

    response = client.get("/api/entries?limit=101", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["pagination"]["limit"] == 101
    assert response.json()["pagination"]["hasMore"] is False


def test_tvshow_type_alias(client, auth_headers):
    """Test that "TVShow" is accepted and stored as "TV Show"."""
    created = create_entry(client, auth_headers, title="Stranger Things", type="TVShow")
    assert created["type"] == "TV Show"

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"type": "Movie"}
    )
    assert response.json()["type"] == "Movie"

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"type": "TVShow"}
    )
    assert response.status_code == 200
    assert response.json()["type"] == "TV Show"
