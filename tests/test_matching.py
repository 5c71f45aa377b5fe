import pytest

from app.domains.attorneys.entities import Attorney
from app.domains.common.errors import DomainValidationError
from app.domains.legal_services.entities import Service
from app.domains.legal_services.matching import (
    attorney_handles_service,
    build_attorney_service_tree,
    match_attorneys_for_service,
)


def make_attorney(nombre="Luis Pérez", especializaciones=None, servicios=None, es_socio=False, experiencia=5):
    return Attorney(
        id=nombre.lower().replace(" ", "-"),
        nombre=nombre,
        cargo="Asociado",
        correo=f"{nombre.split()[0].lower()}@altumlegal.mx",
        telefono="5512345678",
        biografia="Bio",
        descripcion_corta="Abogado",
        especializaciones=especializaciones or [],
        servicios_que_atiende=servicios or [],
        es_socio=es_socio,
        experiencia_anios=experiencia,
    )


def test_matches_by_assigned_service_id():
    service = Service(id="s1", name="Litigio Civil")
    assert attorney_handles_service(make_attorney(servicios=["s1"]), service)
    assert not attorney_handles_service(make_attorney(servicios=["s2"]), service)


def test_matches_by_specialization_substring_both_ways():
    service = Service(id="s1", name="Derecho Laboral")
    assert attorney_handles_service(make_attorney(especializaciones=["laboral"]), service)
    assert attorney_handles_service(make_attorney(especializaciones=["Derecho Laboral Colectivo"]), service)
    assert not attorney_handles_service(make_attorney(especializaciones=["Fiscal"]), service)


def test_match_orders_partners_then_experience():
    service = Service(id="s1", name="Fiscal")
    junior = make_attorney("Ana Ruiz", especializaciones=["Fiscal"], experiencia=3)
    senior = make_attorney("Beto Gil", especializaciones=["Fiscal"], experiencia=20)
    partner = make_attorney("Carla Mora", especializaciones=["Fiscal"], es_socio=True, experiencia=10)
    outsider = make_attorney("Dario Paz", especializaciones=["Penal"])

    matched = match_attorneys_for_service(service, [junior, outsider, senior, partner])
    assert [a.nombre for a in matched] == ["Carla Mora", "Beto Gil", "Ana Ruiz"]


def test_tree_keeps_only_matched_children_under_their_parent():
    parent = Service(id="p", name="Corporativo", order=1)
    matched_child = Service(id="c1", name="Fusiones", parent_id="p", order=2)
    other_child = Service(id="c2", name="Gobierno corporativo", parent_id="p", order=1)
    attorney = make_attorney(servicios=["c1"])

    tree = build_attorney_service_tree(attorney, [parent, matched_child, other_child])

    assert len(tree) == 1
    assert tree[0].id == "p"
    assert [child.id for child in tree[0].children] == ["c1"]


def test_tree_orders_roots_and_children():
    services = [
        Service(id="p2", name="Penal", order=2),
        Service(id="p1", name="Laboral", order=1),
        Service(id="c2", name="Despidos", parent_id="p1", order=5),
        Service(id="c1", name="Sindicatos", parent_id="p1", order=3),
    ]
    attorney = make_attorney(servicios=["p2", "c1", "c2"])

    tree = build_attorney_service_tree(attorney, services)

    assert [node.id for node in tree] == ["p1", "p2"]
    assert [child.id for child in tree[0].children] == ["c1", "c2"]


def test_child_without_available_parent_becomes_root():
    orphan = Service(id="c1", name="Amparo", parent_id="inactivo")
    tree = build_attorney_service_tree(make_attorney(servicios=["c1"]), [orphan])
    assert [node.id for node in tree] == ["c1"]
    assert tree[0].children == []


def test_service_entity_rules():
    service = Service(name="  Litigio  ", parent_id="")
    assert service.name == "Litigio"
    assert service.is_parent and not service.is_child

    with pytest.raises(DomainValidationError):
        Service(name="Litigio", order=-1)
    with pytest.raises(DomainValidationError):
        service.update_parent(service.id)
    with pytest.raises(DomainValidationError):
        Service(name="x" * 151)
