import pytest

from tests.support import auth


@pytest.fixture
def create_service(client):
    def _create(name, **extra):
        body = {"name": name}
        body.update(extra)
        response = client.post("/api/services", json=body, headers=auth("user_admin"))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


def test_create_and_get_service(client, create_service):
    created = create_service("Derecho Laboral", description="Asesoría laboral", order=3)

    assert created["isParent"] is True
    assert created["isChild"] is False
    assert created["parentId"] is None

    by_slug = client.get("/api/services/derecho-laboral").json()["data"]
    assert by_slug["id"] == created["id"]
    assert client.get("/api/services/no-existe").status_code == 404


def test_empty_parent_id_means_root(client, create_service):
    assert create_service("Penal", parentId="")["parentId"] is None


def test_only_two_levels(client, create_service):
    parent = create_service("Corporativo")
    child = create_service("Fusiones", parentId=parent["id"])
    assert child["isChild"] is True

    response = client.post(
        "/api/services", json={"name": "Due diligence", "parentId": child["id"]}, headers=auth("user_admin")
    )
    assert response.status_code == 400

    missing = client.post(
        "/api/services", json={"name": "Huérfano", "parentId": "000000000000000000000000"}, headers=auth("user_admin")
    )
    assert missing.status_code == 400


def test_list_parents_and_children(client, create_service):
    parent = create_service("Corporativo", order=1)
    create_service("Fiscal", order=2)
    create_service("Fusiones", parentId=parent["id"], order=2)
    create_service("Contratos", parentId=parent["id"], order=1)

    def names(response):
        return [s["name"] for s in response.json()["data"]]

    assert len(client.get("/api/services").json()["data"]) == 4
    assert names(client.get("/api/services", params={"parentsOnly": "true"})) == ["Corporativo", "Fiscal"]
    assert names(client.get("/api/services", params={"parentId": parent["id"]})) == ["Contratos", "Fusiones"]


def test_inactive_services_are_hidden_by_default(client, create_service):
    service = create_service("Migratorio")
    response = client.put(f"/api/services/{service['id']}", json={"isActive": False}, headers=auth("user_admin"))
    assert response.json()["data"]["isActive"] is False

    assert client.get("/api/services").json()["data"] == []
    assert len(client.get("/api/services", params={"active": "false"}).json()["data"]) == 1


def test_update_service(client, create_service):
    service = create_service("Penal", description="Defensa")

    response = client.put(
        f"/api/services/{service['id']}", json={"shortDescription": "Defensa penal"}, headers=auth("user_admin")
    )
    data = response.json()["data"]
    assert data["shortDescription"] == "Defensa penal"
    assert data["description"] == "Defensa"

    negative = client.put(f"/api/services/{service['id']}", json={"order": -1}, headers=auth("user_admin"))
    assert negative.status_code == 422


def test_cannot_delete_service_with_children(client, create_service):
    parent = create_service("Corporativo")
    child = create_service("Fusiones", parentId=parent["id"])

    assert client.delete(f"/api/services/{parent['id']}", headers=auth("user_admin")).status_code == 400
    assert client.delete(f"/api/services/{child['id']}", headers=auth("user_admin")).status_code == 200
    assert client.delete(f"/api/services/{parent['id']}", headers=auth("user_admin")).status_code == 200


def test_inactive_child_blocks_parent_delete(client, create_service):
    parent = create_service("Corporativo")
    child = create_service("Fusiones", parentId=parent["id"])
    client.put(f"/api/services/{child['id']}", json={"isActive": False}, headers=auth("user_admin"))

    response = client.delete(f"/api/services/{parent['id']}", headers=auth("user_admin"))
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert client.get(f"/api/services/{parent['id']}").status_code == 200


def test_service_writes_require_manage_services(client, create_service):
    service = create_service("Penal")
    assert client.post("/api/services", json={"name": "X"}, headers=auth("user_creator")).status_code == 403
    assert client.put(f"/api/services/{service['id']}", json={}, headers=auth("user_dev")).status_code == 403
    assert client.delete(f"/api/services/{service['id']}").status_code == 401


def test_attorneys_for_service(client, create_service, create_attorney):
    service = create_service("Derecho Corporativo")
    create_attorney(nombre="Luis Pérez", correo="luis@altumlegal.mx", esSocio=False, experienciaAnios=30,
                    especializaciones=["Corporativo"])
    create_attorney(especializaciones=["Derecho Corporativo"])
    create_attorney(nombre="Ana Ruiz", correo="ana@altumlegal.mx", especializaciones=["Penal"])

    matched = client.get(f"/api/services/{service['id']}/attorneys").json()["data"]

    assert [a["nombre"] for a in matched] == ["María Vásquez", "Luis Pérez"]
    assert client.get("/api/services/no-existe/attorneys").status_code == 404
