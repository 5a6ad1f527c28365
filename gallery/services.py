"""Gallery render pipeline: sanitize, validate, fetch, render."""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

from django.templatetags.static import static
from django.utils.html import format_html
from django.utils.translation import gettext as _

from . import renderer
from .client import DEFAULT_TIMEOUT, fetch_categories
from .exceptions import FetchError
from .sanitizer import is_valid_limit, is_valid_url, sanitize

logger = logging.getLogger(__name__)

STYLESHEET_PATH = 'gallery/css/piwigogallery.css'

Fetcher = Callable[[str], str]


@dataclass(slots=True, frozen=True)
class GalleryOptions:
    """Host-supplied switches for a render call."""

    strict_limit: bool = False
    timeout: float = DEFAULT_TIMEOUT


def alert_label() -> str:
    return _('Piwigo Gallery Alert')


def render_gallery(
    attrs: Mapping[str, object] | None,
    *,
    fetch: Fetcher | None = None,
    options: GalleryOptions | None = None,
) -> str:
    """Render a Piwigo gallery fragment from raw tag attributes.

    Args:
        attrs: Raw attributes, recognised keys are ``url`` and ``limit`` in any case
        fetch: Callable taking the gallery root and returning the raw body;
            it must raise :class:`FetchError` on transport failure
        options: Render switches; defaults to legacy behavior

    Returns:
        Either the gallery container or a one-line error fragment. Never raises.
    """
    options = options or GalleryOptions()
    request = sanitize(attrs)

    if not (is_valid_url(request['url']) and is_valid_limit(request['limit'])):
        logger.info("Invalid Piwigo gallery parameters: url=%r limit=%r", request['url'], request['limit'])
        return renderer.render_error(
            alert_label(),
            _('URL or LIMIT is invalid please check parameters !'),
        )

    fetcher = fetch or partial(fetch_categories, timeout=options.timeout)
    try:
        body = fetcher(request['url'])
    except FetchError as exc:
        return renderer.render_error(alert_label(), f"{exc} !")

    return renderer.render(body, request['limit'], strict_limit=options.strict_limit)


def render_stylesheet(enabled: bool) -> str:
    """Return the ``<link>`` tag for the bundled stylesheet, or '' when disabled."""
    if not enabled:
        return ''
    return format_html('<link rel="stylesheet" href="{}">', static(STYLESHEET_PATH))
