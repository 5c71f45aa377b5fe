import pytest

from app.domains.attorneys.entities import Attorney
from app.domains.common.errors import DomainValidationError


def make_attorney(**overrides) -> Attorney:
    props = dict(
        nombre="María Vásquez",
        cargo="Socia",
        correo="Maria.Vasquez@AltumLegal.mx",
        telefono="+525512345678",
        biografia="Biografía",
        descripcion_corta="Socia fundadora",
        experiencia_anios=15,
        especializaciones=["Corporativo", "Corporativo", "Fiscal"],
    )
    props.update(overrides)
    return Attorney(**props)


def test_normalizes_email_and_dedupes_lists():
    attorney = make_attorney()
    assert attorney.correo == "maria.vasquez@altumlegal.mx"
    assert attorney.especializaciones == ["Corporativo", "Fiscal"]
    assert attorney.activo is True


@pytest.mark.parametrize("correo", ["maria@gmail.com", "maria@altumlegal.com"])
def test_rejects_email_outside_firm(correo):
    with pytest.raises(DomainValidationError):
        make_attorney(correo=correo)


def test_accepts_secondary_firm_domain():
    assert make_attorney(correo="maria@altum-legal.mx").correo == "maria@altum-legal.mx"


@pytest.mark.parametrize("overrides", [
    {"nombre": "   "},
    {"nombre": "x" * 101},
    {"experiencia_anios": 61},
    {"experiencia_anios": -1},
    {"telefono": "0123"},
    {"biografia": ""},
    {"descripcion_corta": "x" * 201},
    {"linked_in": "https://example.com/maria"},
])
def test_rejects_invalid_fields(overrides):
    with pytest.raises(DomainValidationError):
        make_attorney(**overrides)


def test_update_returns_new_validated_instance():
    attorney = make_attorney(id="65a1b2c3d4e5f60718293a4b")
    updated = attorney.update(cargo="Socia Directora")

    assert updated is not attorney
    assert updated.cargo == "Socia Directora"
    assert attorney.cargo == "Socia"
    assert updated.id == attorney.id
    assert updated.fecha_creacion == attorney.fecha_creacion

    with pytest.raises(DomainValidationError):
        attorney.update(correo="maria@gmail.com")


def test_update_rejects_unknown_fields():
    with pytest.raises(DomainValidationError):
        make_attorney().update(salario=100)


def test_create_ignores_identity_fields():
    attorney = Attorney.create(
        id="abc", nombre="Luis", cargo="Asociado", correo="luis@altumlegal.mx", telefono="5512345678",
        biografia="Bio", descripcion_corta="Asociado",
    )
    assert attorney.id is None


def test_public_info_hides_internal_state():
    info = make_attorney().public_info()
    assert "activo" not in info
    assert "fecha_creacion" not in info
    assert info["nombre"] == "María Vásquez"


def test_deactivate_and_equality():
    attorney = make_attorney(id="a1")
    inactive = attorney.deactivate()
    assert inactive.activo is False
    assert inactive == attorney
    assert make_attorney() != make_attorney()
