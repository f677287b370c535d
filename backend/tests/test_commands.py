from sitekit.commands import seed_cms
from sitekit.models.content import Content
from sitekit.models.feature_flag import FeatureFlag


def test_seed_is_idempotent(app):
    assert seed_cms() == 8
    assert seed_cms() == 0

    published = Content.alive().order_by(Content.slug).all()
    assert [c.slug for c in published] == ["installation", "welcome"]
    assert all(c.status == "published" and c.published_at for c in published)
    assert FeatureFlag.query.filter_by(flag_name="ENABLE_ANALYTICS").count() == 1


def test_seed_cli(app, client):
    result = app.test_cli_runner().invoke(args=["seed-cms"])

    assert result.exit_code == 0
    assert "Seeded 8 rows." in result.output

    listing = client.get("/api/v1/contents?status=published").get_json()
    assert listing["pagination"]["total"] == 2
