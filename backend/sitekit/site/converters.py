from werkzeug.routing import BaseConverter


class LocaleConverter(BaseConverter):
    """`en`, `fr`, `en-US`: never collides with content type segments."""

    regex = r"[a-z]{2}(?:-[A-Z]{2})?"
