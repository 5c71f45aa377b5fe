import pytest

from app.core.roles import (
    ROLE_HIERARCHY,
    UserRole,
    can_assign_role,
    can_manage_user,
    get_role_display_name,
    has_permission,
    parse_role,
    permissions_for,
)


def test_only_superadmin_assigns_superadmin():
    for role in UserRole:
        assert can_assign_role(role, UserRole.SUPERADMIN) is (role == UserRole.SUPERADMIN)


def test_assign_role_up_to_own_level():
    assert can_assign_role(UserRole.ADMIN, UserRole.ADMIN)
    assert can_assign_role(UserRole.ADMIN, UserRole.DEVELOPER)
    assert not can_assign_role(UserRole.CONTENT_CREATOR, UserRole.DEVELOPER)


def test_manage_user_requires_strictly_higher_level():
    assert can_manage_user(UserRole.SUPERADMIN, UserRole.ADMIN)
    assert not can_manage_user(UserRole.ADMIN, UserRole.ADMIN)
    assert not can_manage_user(UserRole.DEVELOPER, UserRole.ADMIN)


def test_hierarchy_is_strict_order():
    levels = [ROLE_HIERARCHY[r] for r in (
        UserRole.USER, UserRole.CONTENT_CREATOR, UserRole.DEVELOPER, UserRole.ADMIN, UserRole.SUPERADMIN
    )]
    assert levels == sorted(set(levels))


@pytest.mark.parametrize("role,permission,expected", [
    (UserRole.ADMIN, "manage_users", True),
    (UserRole.ADMIN, "manage_roles", False),
    (UserRole.CONTENT_CREATOR, "edit_own_content", True),
    (UserRole.CONTENT_CREATOR, "edit_content", False),
    (UserRole.DEVELOPER, "publish_content", False),
    (UserRole.USER, "access_admin", False),
])
def test_has_permission(role, permission, expected):
    assert has_permission(role, permission) is expected


def test_unknown_role_is_user():
    assert parse_role(None) == UserRole.USER
    assert parse_role("intruso") == UserRole.USER
    assert parse_role("ADMIN") == UserRole.ADMIN


def test_permissions_for_returns_copy():
    perms = permissions_for(UserRole.USER)
    perms.append("manage_users")
    assert not has_permission(UserRole.USER, "manage_users")


def test_display_name():
    assert get_role_display_name(UserRole.CONTENT_CREATOR) == "Creador de Contenido"
