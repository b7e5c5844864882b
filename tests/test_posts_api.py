from app.services.post import count_pages


def create(client, **data):
    response = client.post("/api/posts/", json=data)
    assert response.status_code == 201
    return response.json()


class TestCreate:

    def test_create_post(self, client):
        post = create(client, title="Hello", text="World")
        assert post == {"id": 1, "title": "Hello", "text": "World"}

    def test_missing_fields_default_to_empty(self, client):
        post = create(client)
        assert post["title"] == ""
        assert post["text"] == ""

    def test_title_over_255_characters_rejected(self, client):
        response = client.post("/api/posts/", json={"title": "x" * 256})
        assert response.status_code == 422

    def test_text_over_255_characters_rejected(self, client):
        response = client.post("/api/posts/", json={"text": "x" * 256})
        assert response.status_code == 422


class TestRead:

    def test_get_post(self, client):
        created = create(client, title="Hello", text="World")
        response = client.get(f"/api/posts/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_post(self, client):
        response = client.get("/api/posts/42")
        assert response.status_code == 404
        assert response.json() == {"detail": "Post not found"}

    def test_search_by_title(self, client):
        first = create(client, title="Hello", text="World")
        second = create(client, title="Hello", text="Again")
        create(client, title="Bye", text="World")

        response = client.get("/api/posts/search", params={"title": "Hello"})
        assert response.status_code == 200
        assert response.json() == [first, second]

    def test_unknown_api_path_is_json(self, client):
        response = client.get("/api/nothing")
        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestPagination:

    def test_count_pages(self):
        assert count_pages(0, 5) == 0
        assert count_pages(5, 5) == 1
        assert count_pages(6, 5) == 2

    def test_pages_ordered_by_id(self, client):
        ids = [create(client, title=f"post {i}")["id"] for i in range(7)]

        first = client.get("/api/posts/").json()
        assert first["num_pages"] == 2
        assert first["posts_per_page"] == 5
        assert [p["id"] for p in first["posts"]] == ids[:5]

        second = client.get("/api/posts/", params={"page": 2}).json()
        assert [p["id"] for p in second["posts"]] == ids[5:]

    def test_page_past_end_is_empty(self, client):
        create(client, title="only")
        body = client.get("/api/posts/", params={"page": 3, "posts_per_page": 1}).json()
        assert body["posts"] == []
        assert body["num_pages"] == 1

    def test_page_must_be_positive(self, client):
        assert client.get("/api/posts/", params={"page": 0}).status_code == 422
        assert client.get("/api/posts/", params={"posts_per_page": 0}).status_code == 422


class TestUpdateDelete:

    def test_partial_update(self, client):
        post = create(client, title="Hello", text="World")
        response = client.put(f"/api/posts/{post['id']}", json={"text": "Again"})
        assert response.status_code == 200
        assert response.json() == {"id": post["id"], "title": "Hello", "text": "Again"}

    def test_update_missing_post(self, client):
        response = client.put("/api/posts/42", json={"title": "x"})
        assert response.status_code == 404

    def test_delete_post(self, client):
        post = create(client, title="Hello")
        response = client.delete(f"/api/posts/{post['id']}")
        assert response.status_code == 204
        assert client.get(f"/api/posts/{post['id']}").status_code == 404

    def test_delete_missing_post(self, client):
        assert client.delete("/api/posts/42").status_code == 404


class TestOutOfRange:

    def test_huge_page_rejected(self, client):
        response = client.get("/api/posts/", params={"page": 10**19})
        assert response.status_code == 422

    def test_huge_posts_per_page_rejected(self, client):
        response = client.get("/api/posts/", params={"posts_per_page": 10**19})
        assert response.status_code == 422

    def test_offset_past_id_range_is_empty(self, client):
        create(client, title="only")
        body = client.get("/api/posts/", params={"page": 2**62, "posts_per_page": 4}).json()
        assert body["posts"] == []
        assert body["num_pages"] == 1

    def test_huge_id_not_found(self, client):
        assert client.get(f"/api/posts/{10**20}").status_code == 404
        assert client.put(f"/api/posts/{10**20}", json={"title": "x"}).status_code == 404
        assert client.delete(f"/api/posts/{10**20}").status_code == 404


def test_update_rejects_long_values(client):
    post = create(client, title="Hello", text="World")
    response = client.put(f"/api/posts/{post['id']}", json={"title": "x" * 256})
    assert response.status_code == 422
    response = client.put(f"/api/posts/{post['id']}", json={"text": "x" * 256})
    assert response.status_code == 422
    assert client.get(f"/api/posts/{post['id']}").json() == post
