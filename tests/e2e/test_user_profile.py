"""End-to-end tests for profile and stats endpoints."""


class TestProfile:
    """Tests for GET/PUT /users/profile."""

    def test_get_profile(self, client, register):
        headers, user = register("alice")

        response = client.get("/users/profile", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == user["id"]
        assert data["username"] == "alice"
        assert data["role"] == "user"
        assert "password_hash" not in data

    def test_partial_update_leaves_other_fields(self, client, register):
        """Fields missing from the body should stay as they were."""
        headers, _ = register("alice")
        client.put(
            "/users/profile",
            headers=headers,
            json={"bio": "Compilers", "location": "Lisbon"},
        )

        response = client.put(
            "/users/profile", headers=headers, json={"bio": "Databases"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bio"] == "Databases"
        assert data["location"] == "Lisbon"

    def test_avatar_update_is_stored(self, client, register):
        """An ``avatar`` field should set the profile's avatar URL."""
        headers, _ = register("alice")

        response = client.put(
            "/users/profile", headers=headers, json={"avatar": "https://img/x.png"}
        )

        assert response.status_code == 200
        assert response.json()["avatar_url"] == "https://img/x.png"

        response = client.get("/users/profile", headers=headers)
        assert response.json()["avatar_url"] == "https://img/x.png"

    def test_avatar_url_field_still_accepted(self, client, register):
        headers, _ = register("alice")

        response = client.put(
            "/users/profile", headers=headers, json={"avatar_url": "https://img/y.png"}
        )

        assert response.status_code == 200
        assert response.json()["avatar_url"] == "https://img/y.png"

    def test_malformed_website_is_bad_request(self, client, register):
        headers, _ = register("alice")

        response = client.put(
            "/users/profile", headers=headers, json={"website": "not a url"}
        )

        assert response.status_code == 400
        assert "website" in response.json()["error"]

    def test_bio_too_long_is_bad_request(self, client, register):
        headers, _ = register("alice")

        response = client.put("/users/profile", headers=headers, json={"bio": "a" * 501})

        assert response.status_code == 400

    def test_taken_username_is_bad_request(self, client, register):
        register("bob")
        headers, _ = register("alice")

        response = client.put(
            "/users/profile", headers=headers, json={"username": "bob"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Username already taken"}

    def test_update_requires_token(self, client):
        response = client.put("/users/profile", json={"bio": "hi"})

        assert response.status_code == 401


class TestStats:
    """Tests for GET /users/stats."""

    def test_stats_count_own_content(self, client, register):
        headers, _ = register("alice")
        created = client.post(
            "/questions",
            headers=headers,
            json={"title": "Q", "description": "D", "tags": ["misc"]},
        )
        question_id = created.json()["question_id"]
        client.post(
            f"/questions/{question_id}/answers",
            headers=headers,
            json={"content": "Self answer"},
        )

        response = client.get("/users/stats", headers=headers)

        assert response.status_code == 200
        assert response.json() == {
            "questions": 1,
            "answers": 1,
            "reputation": 0,
            "badges": 0,
        }
