"""HTML rendering for Piwigo category lists."""
from __future__ import annotations

import json
import logging

from django.utils.html import escape

from common.models import Album
from common.utils import as_text, filter_url

logger = logging.getLogger(__name__)

CONTAINER_OPEN = '<div class="piwigogallery">'
CONTAINER_CLOSE = '</div>'
CARD_TEMPLATE = (
    '<a target="_blank" href="{url}" class="card">'
    ' <img src="{thumbnail_url}" alt="{title}">'
    '<div class="caption caption-title">{title}</div>'
    '<div class="caption">{comment}</div>'
    '</a>'
)
ERROR_TEMPLATE = '<div style="color: red">{primary}: {detail}</div>'


def decode_categories(raw_body: str | bytes | None) -> list[Album]:
    """Decode a ``pwg.categories.getList`` JSON body into albums.

    Anything that does not have the ``result.categories`` list shape decodes
    to an empty list. Entries that are not objects are dropped.
    """
    try:
        payload = json.loads(raw_body or '')
    except (json.JSONDecodeError, TypeError, ValueError, RecursionError) as exc:
        logger.warning("Piwigo response is not valid JSON: %s", exc)
        return []

    result = payload.get('result') if isinstance(payload, dict) else None
    categories = result.get('categories') if isinstance(result, dict) else None
    if not isinstance(categories, list):
        logger.warning("Piwigo response has no category list; rendering an empty gallery")
        return []

    albums: list[Album] = []
    for index, entry in enumerate(categories):
        if not isinstance(entry, dict):
            logger.debug("Skipping category #%s: not an object", index)
            continue
        albums.append({
            'name': as_text(entry.get('name')),
            'comment': as_text(entry.get('comment')),
            'tn_url': as_text(entry.get('tn_url')),
            'url': as_text(entry.get('url')),
        })
    return albums


def render_card(album: Album) -> str:
    title = escape(album['name'])
    return CARD_TEMPLATE.format(
        url=escape(filter_url(album['url'])),
        thumbnail_url=escape(filter_url(album['tn_url'])),
        title=title,
        comment=escape(album['comment']),
    )


def render(raw_body: str | bytes | None, limit: int, *, strict_limit: bool = False) -> str:
    """Render the gallery container for a raw web service response.

    By default ``limit + 1`` cards are emitted at most, matching the markup
    existing pages were built against. ``strict_limit`` caps it at ``limit``.
    """
    cards: list[str] = []
    count = 0
    for album in decode_categories(raw_body):
        if count > limit or (strict_limit and count >= limit):
            break
        cards.append(render_card(album))
        count += 1

    return CONTAINER_OPEN + ''.join(cards) + CONTAINER_CLOSE


def render_error(primary: str, detail: str) -> str:
    """Render a single-line red alert, e.g. ``Piwigo Gallery Alert: <detail>``."""
    return ERROR_TEMPLATE.format(primary=escape(primary), detail=escape(detail))
