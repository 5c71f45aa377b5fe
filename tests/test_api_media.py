from tests.support import auth

PNG = b"\x89PNG\r\n\x1a\n" + b"0" * 64


def upload(client, user="user_admin", name="foto perfil.png", body=PNG, content_type="image/png", **data):
    return client.post(
        "/api/upload",
        files={"file": (name, body, content_type)},
        data=data,
        headers=auth(user),
    )


def test_upload_image(client, blob_store):
    response = upload(client, category="blog")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["url"].startswith("https://blob.test/uploads/blog/blog-")
    assert data["fileName"].endswith("-foto_perfil.png")
    assert data["originalName"] == "foto perfil.png"
    assert data["size"] == len(PNG)
    assert data["type"] == "image/png"
    assert data["category"] == "blog"
    assert list(blob_store.blobs) == [data["url"]]


def test_upload_defaults_to_attorneys(client):
    data = upload(client).json()["data"]
    assert data["category"] == "attorneys"
    assert "/uploads/attorneys/" in data["url"]


def test_upload_without_file(client):
    response = client.post("/api/upload", data={"category": "blog"}, headers=auth("user_admin"))
    assert response.status_code == 400
    assert response.json()["error"] == "No se proporcionó ningún archivo"


def test_upload_rejects_before_storing(client, blob_store):
    assert upload(client, name="doc.pdf", content_type="application/pdf").status_code == 400
    # el límite configurado en las pruebas es de 2 KB
    assert upload(client, body=b"0" * 4096).status_code == 400
    assert blob_store.blobs == {}


def test_upload_rejects_unsafe_category(client, blob_store):
    for category in ("blog-images", "../config", "a/b"):
        response = upload(client, category=category)
        assert response.status_code == 400
        assert response.json()["success"] is False
    assert blob_store.blobs == {}

    listing = client.get("/api/media", params={"category": "../"}, headers=auth("user_admin"))
    assert listing.status_code == 400


def test_upload_permissions(client):
    assert upload(client, user="user_plain").status_code == 403
    assert upload(client, user="user_dev").status_code == 200
    assert client.post("/api/upload", files={"file": ("a.png", PNG, "image/png")}).status_code == 401


def test_list_and_delete_media(client):
    blog = upload(client, category="blog").json()["data"]
    upload(client)

    listed = client.get("/api/media", params={"category": "blog"}, headers=auth("user_creator")).json()["data"]
    assert [f["url"] for f in listed] == [blog["url"]]
    assert listed[0]["originalName"] == "foto_perfil.png"
    assert listed[0]["category"] == "blog"
    assert len(client.get("/api/media", headers=auth("user_creator")).json()["data"]) == 2

    response = client.request("DELETE", "/api/media", json={"url": blog["url"]}, headers=auth("user_admin"))
    assert response.status_code == 200
    assert client.get("/api/media", params={"category": "blog"}, headers=auth("user_admin")).json()["data"] == []
