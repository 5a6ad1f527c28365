"""
main.py

Command line entry point for rendering Piwigo gallery fragments.
"""

import logging
import os

import django
from rich.logging import RichHandler
from typer import Option, Typer, echo

app = Typer()


@app.callback()
def callback(
        verbose: bool = Option(False, "-v", "--verbose", help='Show verbose output.')
):
    logging.basicConfig(
        level="DEBUG" if verbose else "INFO", format="%(message)s", datefmt="[%X]", handlers=[RichHandler()]
    )
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'pwgsite.settings')
    django.setup()


@app.command()
def render(
        url: str = Option('', help='Root URL of the Piwigo gallery.'),
        limit: str = Option('20', help='Maximum number of albums to show.'),
        strict_limit: bool = Option(False, help='Show at most LIMIT albums instead of LIMIT + 1.'),
        timeout: float = Option(5.0, help='HTTP timeout in seconds.'),
):
    from gallery.services import GalleryOptions, render_gallery

    options = GalleryOptions(strict_limit=strict_limit, timeout=timeout)
    echo(render_gallery({'url': url, 'limit': limit}, options=options))


@app.command()
def stylesheet():
    """Print the stylesheet link tag, if the stylesheet is enabled."""
    from gallery.services import render_stylesheet
    from gallery.utils import stylesheet_enabled

    echo(render_stylesheet(stylesheet_enabled()))


if __name__ == '__main__':
    app()
