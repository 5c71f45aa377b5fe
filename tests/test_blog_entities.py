from datetime import datetime

import pytest

from app.domains.blog.entities import BlogPost, Category, FormatConfig, PostStatus
from app.domains.common.errors import DomainValidationError


def make_post(**overrides) -> BlogPost:
    props = dict(
        title="Reforma laboral",
        slug="reforma-laboral",
        content="<p>Texto</p>",
        excerpt="Resumen",
        author_id="user_admin",
        category_id="cat1",
    )
    props.update(overrides)
    return BlogPost(**props)


def test_new_post_defaults():
    post = make_post()
    assert post.status == PostStatus.DRAFT
    assert post.published_at is None
    assert post.view_count == 0
    assert len(post.id) == 24
    assert post.format_config == FormatConfig(1.4, 0.5)


def test_seo_fallbacks():
    post = make_post()
    assert post.seo_title == "Reforma laboral"
    assert post.seo_description == "Resumen"

    post.update_seo("Título SEO", None)
    assert post.seo_title == "Título SEO"
    assert post.seo_description == "Resumen"


def test_publish_sets_status_and_date():
    post = make_post()
    post.publish()
    assert post.status == PostStatus.PUBLISHED
    assert post.is_published
    assert post.published_at is not None


def test_unpublish_returns_to_draft():
    post = make_post()
    post.publish()
    post.unpublish()
    assert post.status == PostStatus.DRAFT
    assert post.published_at is None


def test_schedule_requires_date():
    post = make_post()
    with pytest.raises(DomainValidationError):
        post.schedule(None)

    when = datetime(2030, 1, 1, 9, 0)
    post.schedule(when)
    assert post.status == PostStatus.SCHEDULED
    assert post.published_at == when


def test_archive():
    post = make_post()
    post.archive()
    assert post.status == PostStatus.ARCHIVED
    assert not post.is_published


def test_increment_view_count():
    post = make_post()
    for _ in range(7):
        post.increment_view_count()
    assert post.view_count == 7


def test_mutators_touch_updated_at():
    post = make_post(updated_at=datetime(2020, 1, 1))
    post.update_tags(["fiscal"])
    assert post.updated_at > datetime(2020, 1, 1)
    assert post.tags == ["fiscal"]


@pytest.mark.parametrize("overrides", [
    {"title": ""},
    {"title": "x" * 201},
    {"slug": "Con Espacios"},
    {"author_id": ""},
    {"category_id": ""},
    {"view_count": -1},
    {"status": "BORRADOR"},
])
def test_rejects_invalid_posts(overrides):
    with pytest.raises(DomainValidationError):
        make_post(**overrides)


def test_status_parse_is_case_insensitive():
    assert PostStatus.parse("published") == PostStatus.PUBLISHED


def test_format_config_bounds_and_dict():
    with pytest.raises(DomainValidationError):
        FormatConfig(line_height=0)
    config = FormatConfig.from_dict({"lineHeight": 1.8, "paragraphSpacing": 1})
    assert config.to_dict() == {"lineHeight": 1.8, "paragraphSpacing": 1.0}
    assert FormatConfig.from_dict(None) == FormatConfig()


def test_posts_equal_by_id():
    post = make_post(id="abc")
    assert post == make_post(id="abc", title="Otro")
    assert post != make_post()


def test_category_tree_and_activation():
    category = Category(name="Laboral", slug="laboral")
    assert not category.is_subcategory

    with pytest.raises(DomainValidationError):
        category.update_parent(category.id)

    category.update_parent("padre")
    assert category.is_subcategory
    category.update_parent("")
    assert category.parent_id is None

    category.deactivate()
    assert category.is_active is False
    category.activate()
    assert category.is_active is True
