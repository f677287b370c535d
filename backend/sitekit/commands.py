import click
from flask import current_app

from .extensions import db
from .models.category import Category
from .models.content import Content
from .models.enums import ContentStatus, ContentType, Environment
from .models.feature_flag import FeatureFlag
from .models.tag import Tag
from .domain.lifecycle.content import apply_status, reading_time
from .utils.transaction import transactional

SEED_AUTHOR_ID = "00000000-0000-0000-0000-000000000001"

SEED_CATEGORIES = (
    ("Getting Started", "getting-started", "Guides for new users"),
    ("Engineering", "engineering", "Technical deep dives"),
)

SEED_TAGS = (
    ("Python", "python"),
    ("SEO", "seo"),
    ("Analytics", "analytics"),
)

SEED_CONTENT = (
    {
        "title": "Welcome to the site",
        "slug": "welcome",
        "type": ContentType.BLOG,
        "category": "getting-started",
        "tags": ("seo",),
        "body": "This is the first published post. Edit or delete it from the admin.",
    },
    {
        "title": "Installation",
        "slug": "installation",
        "type": ContentType.DOCS,
        "category": "engineering",
        "tags": ("python",),
        "body": "Install the backend, run the migrations and start both applications.",
    },
)


def seed_cms():
    """Idempotent: rows that already exist (by slug or name) are left alone."""
    created = 0

    with transactional():
        categories = {}
        for name, slug, description in SEED_CATEGORIES:
            category = Category.alive().filter_by(slug=slug).first()
            if not category:
                category = Category(name=name, slug=slug, description=description)
                db.session.add(category)
                created += 1
            categories[slug] = category

        tags = {}
        for name, slug in SEED_TAGS:
            tag = Tag.alive().filter_by(slug=slug).first()
            if not tag:
                tag = Tag(name=name, slug=slug)
                db.session.add(tag)
                created += 1
            tags[slug] = tag

        if not FeatureFlag.alive().filter_by(flag_name="ENABLE_ANALYTICS", environment=Environment.ALL.value).first():
            db.session.add(FeatureFlag(
                flag_name="ENABLE_ANALYTICS",
                description="Render analytics tags on public pages",
                is_enabled=True,
                environment=Environment.ALL.value,
            ))
            created += 1

        for item in SEED_CONTENT:
            if Content.alive().filter_by(slug=item["slug"]).first():
                continue
            content = Content(
                title=item["title"],
                slug=item["slug"],
                body=item["body"],
                type=item["type"].value,
                author_id=SEED_AUTHOR_ID,
                reading_time=reading_time(item["body"]),
                status=ContentStatus.DRAFT.value,
            )
            apply_status(content, ContentStatus.PUBLISHED.value)
            content.category = categories[item["category"]]
            content.tags = [tags[slug] for slug in item["tags"]]
            db.session.add(content)
            created += 1

    return created


def register_commands(app):
    @app.cli.command("seed-cms")
    def seed_cms_command():
        """Seed categories, tags, the analytics flag and sample content."""
        created = seed_cms()
        current_app.logger.info("Seeded %s CMS rows", created)
        click.echo(f"Seeded {created} rows.")
