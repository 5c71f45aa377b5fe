from tests.support import attorney_payload, auth


def test_create_attorney_assigns_slug(client, create_attorney):
    data = create_attorney()

    assert data["slug"] == "maria-vasquez"
    assert data["correo"] == "maria.vasquez@altumlegal.mx"
    assert data["experienciaAnios"] == 15
    assert data["activo"] is True
    assert len(data["id"]) == 24


def test_create_attorney_response_envelope(client):
    response = client.post("/api/attorneys", json=attorney_payload(), headers=auth("user_admin"))
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Abogado creado exitosamente"
    assert body["error"] is None


def test_duplicate_name_gets_unique_slug(client, create_attorney):
    first = create_attorney()
    second = create_attorney(correo="maria.vasquez2@altumlegal.mx")

    assert first["slug"] == "maria-vasquez"
    assert second["slug"] == f"maria-vasquez-{second['id'][-6:]}"


def test_duplicate_email_is_rejected(client, create_attorney):
    create_attorney()
    response = client.post("/api/attorneys", json=attorney_payload(nombre="Otra"), headers=auth("user_admin"))
    assert response.status_code == 400
    assert "correo" in response.json()["error"]


def test_email_outside_firm_is_rejected(client):
    response = client.post(
        "/api/attorneys", json=attorney_payload(correo="maria@gmail.com"), headers=auth("user_admin")
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_invalid_phone_is_rejected(client):
    response = client.post("/api/attorneys", json=attorney_payload(telefono="abc"), headers=auth("user_admin"))
    assert response.status_code == 400


def test_create_requires_manage_attorneys(client):
    response = client.post("/api/attorneys", json=attorney_payload(), headers=auth("user_creator"))
    assert response.status_code == 403


def test_get_by_id_or_slug(client, create_attorney):
    created = create_attorney()

    by_id = client.get(f"/api/attorneys/{created['id']}").json()["data"]
    by_slug = client.get("/api/attorneys/maria-vasquez").json()["data"]
    assert by_id["id"] == by_slug["id"] == created["id"]

    response = client.get("/api/attorneys/nadie")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_list_filters_and_pagination(client, create_attorney):
    create_attorney()
    create_attorney(nombre="Luis Pérez", correo="luis@altumlegal.mx", esSocio=False, especializaciones=["Penal"])
    create_attorney(nombre="Ana Ruiz", correo="ana@altumlegal.mx", esSocio=False, activo=False)

    body = client.get("/api/attorneys", params={"limit": 2}).json()["data"]
    assert [a["nombre"] for a in body["attorneys"]] == ["María Vásquez", "Ana Ruiz"]
    assert body["pagination"] == {
        "total": 3, "page": 1, "limit": 2, "totalPages": 2, "hasNext": True, "hasPrev": False,
    }

    partners = client.get("/api/attorneys", params={"esSocio": "true"}).json()["data"]["attorneys"]
    assert [a["nombre"] for a in partners] == ["María Vásquez"]

    penal = client.get("/api/attorneys", params={"especializacion": "Penal"}).json()["data"]["attorneys"]
    assert [a["nombre"] for a in penal] == ["Luis Pérez"]

    by_name = client.get("/api/attorneys", params={"sortBy": "nombre", "sortOrder": "desc"}).json()["data"]
    assert [a["nombre"] for a in by_name["attorneys"]] == ["María Vásquez", "Luis Pérez", "Ana Ruiz"]


def test_limit_is_bounded(client):
    assert client.get("/api/attorneys", params={"limit": 101}).status_code == 422


def test_active_partners_and_specialization(client, create_attorney):
    create_attorney()
    create_attorney(nombre="Luis Pérez", correo="luis@altumlegal.mx", esSocio=False, experienciaAnios=20)
    create_attorney(nombre="Ana Ruiz", correo="ana@altumlegal.mx", activo=False)

    active = client.get("/api/attorneys/active").json()["data"]
    assert [a["nombre"] for a in active] == ["María Vásquez", "Luis Pérez"]
    assert "correo" not in active[0]

    partners = client.get("/api/attorneys/partners").json()["data"]
    assert [a["nombre"] for a in partners] == ["María Vásquez"]

    corporate = client.get("/api/attorneys/specialization/Fusiones").json()["data"]
    assert [a["nombre"] for a in corporate] == ["María Vásquez", "Luis Pérez"]


def test_search(client, create_attorney):
    create_attorney()
    create_attorney(nombre="Luis Pérez", correo="luis@altumlegal.mx", especializaciones=["Penal"])

    found = client.get("/api/attorneys/search", params={"q": "penal"}).json()["data"]
    assert [a["nombre"] for a in found] == ["Luis Pérez"]

    empty = client.get("/api/attorneys/search", params={"q": "  "})
    assert empty.status_code == 400


def test_update_attorney(client, create_attorney):
    created = create_attorney()

    response = client.put(
        f"/api/attorneys/{created['slug']}", json={"cargo": "Socia Directora"}, headers=auth("user_admin")
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["cargo"] == "Socia Directora"
    assert data["nombre"] == "María Vásquez"

    bad = client.put(f"/api/attorneys/{created['id']}", json={"correo": "x@gmail.com"}, headers=auth("user_admin"))
    assert bad.status_code == 400


def test_update_slug_rules(client, create_attorney):
    first = create_attorney()
    second = create_attorney(nombre="Luis Pérez", correo="luis@altumlegal.mx")

    taken = client.put(f"/api/attorneys/{second['id']}", json={"slug": first["slug"]}, headers=auth("user_admin"))
    assert taken.status_code == 400

    invalid = client.put(f"/api/attorneys/{second['id']}", json={"slug": "Luis P"}, headers=auth("user_admin"))
    assert invalid.status_code == 400

    ok = client.put(f"/api/attorneys/{second['id']}", json={"slug": "lperez"}, headers=auth("user_admin"))
    assert ok.json()["data"]["slug"] == "lperez"
    assert client.get("/api/attorneys/lperez").status_code == 200


def test_update_email_taken(client, create_attorney):
    create_attorney()
    second = create_attorney(nombre="Luis Pérez", correo="luis@altumlegal.mx")

    response = client.put(
        f"/api/attorneys/{second['id']}", json={"correo": "maria.vasquez@altumlegal.mx"}, headers=auth("user_admin")
    )
    assert response.status_code == 400


def test_delete_attorney(client, create_attorney):
    created = create_attorney()

    assert client.delete(f"/api/attorneys/{created['id']}", headers=auth("user_creator")).status_code == 403
    response = client.delete(f"/api/attorneys/{created['id']}", headers=auth("user_admin"))
    assert response.status_code == 200
    assert response.json()["message"] == "Abogado eliminado exitosamente"
    assert client.get(f"/api/attorneys/{created['id']}").status_code == 404
    assert client.delete(f"/api/attorneys/{created['id']}", headers=auth("user_admin")).status_code == 404


def test_attorney_service_tree(client, create_attorney):
    parent = client.post("/api/services", json={"name": "Corporativo"}, headers=auth("user_admin")).json()["data"]
    child = client.post(
        "/api/services", json={"name": "Gobierno", "parentId": parent["id"], "order": 1}, headers=auth("user_admin")
    ).json()["data"]
    client.post(
        "/api/services", json={"name": "Contratos", "parentId": parent["id"], "order": 2}, headers=auth("user_admin")
    )
    attorney = create_attorney(especializaciones=[], serviciosQueAtiende=[child["id"]])

    tree = client.get(f"/api/attorneys/{attorney['slug']}/services").json()["data"]

    assert len(tree) == 1
    assert tree[0]["id"] == parent["id"]
    assert [c["id"] for c in tree[0]["children"]] == [child["id"]]
    assert client.get("/api/attorneys/nadie/services").status_code == 404
