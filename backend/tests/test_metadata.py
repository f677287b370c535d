from sitekit.rendering.metadata import DEFAULT_DESCRIPTION, build_content_metadata

CONTENT = {
    "id": "c1",
    "title": "Hello world",
    "slug": "hello",
    "type": "blog",
    "excerpt": "A short intro",
    "featured_image": "https://cdn.example.com/hello.png",
}


def test_falls_back_to_content_fields():
    metadata = build_content_metadata(CONTENT, site_url="https://example.com/", site_name="Example")

    assert metadata.title == "Hello world"
    assert metadata.description == "A short intro"
    assert metadata.canonical == "https://example.com/blog/hello"
    assert metadata.open_graph["type"] == "website"
    assert metadata.open_graph["image"] == "https://cdn.example.com/hello.png"
    assert metadata.open_graph["url"] == metadata.canonical
    assert metadata.twitter["card"] == "summary_large_image"
    assert metadata.keywords == ()


def test_seo_row_wins():
    seo = {
        "meta_title": "SEO title",
        "meta_description": "SEO description",
        "meta_keywords": "python, cms , ,seo",
        "canonical_url": "https://example.com/canonical",
        "og_type": "article",
        "og_image": "https://cdn.example.com/og.png",
        "twitter_card": "summary",
    }

    metadata = build_content_metadata(CONTENT, seo=seo, site_url="https://example.com")

    assert metadata.title == "SEO title"
    assert metadata.description == "SEO description"
    assert metadata.keywords == ("python", "cms", "seo")
    assert metadata.canonical == "https://example.com/canonical"
    assert metadata.open_graph["title"] == "SEO title"
    assert metadata.open_graph["type"] == "article"
    assert metadata.open_graph["image"] == "https://cdn.example.com/og.png"
    assert metadata.twitter["card"] == "summary"


def test_locale_prefix_alternates_and_verification():
    metadata = build_content_metadata(
        dict(CONTENT, excerpt=None),
        hreflang=[
            {"locale": "en-US", "url": "https://example.com/en-US/blog/hello"},
            {"locale": "fr-FR", "url": "https://example.com/fr-FR/blog/hello"},
        ],
        verification={"google-site-verification": "abc"},
        site_url="https://example.com",
        locale="fr",
    )

    assert metadata.canonical == "https://example.com/fr/blog/hello"
    assert metadata.description == DEFAULT_DESCRIPTION
    assert metadata.alternates == {
        "en-US": "https://example.com/en-US/blog/hello",
        "fr-FR": "https://example.com/fr-FR/blog/hello",
    }
    assert metadata.verification == {"google-site-verification": "abc"}
