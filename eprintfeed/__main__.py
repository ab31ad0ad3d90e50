"""Allow ``python -m eprintfeed``."""

from .cli import app

app()
