"""Normalization and validation of the user-facing gallery parameters."""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator

from common.models import SanitizedRequest
from common.utils import coerce_int, filter_number_int, filter_url

logger = logging.getLogger(__name__)

DEFAULT_URL = ''
DEFAULT_LIMIT = 20

# Users sometimes paste the web service endpoint instead of the gallery root.
WEB_SERVICE_PATH = '/ws.php'

class GalleryURLValidator(URLValidator):
    """URLValidator that also accepts single-label hosts such as ``http://nas:8080``."""

    host_re = (
        "(" + URLValidator.hostname_re
        + "(?:" + URLValidator.domain_re + URLValidator.tld_re + ")?)"
    )
    regex = re.compile(
        r"^(?:[a-z0-9.+-]*)://"
        r"(?:[^\s:@/]+(?::[^\s:@/]*)?@)?"
        r"(?:" + URLValidator.ipv4_re + "|" + URLValidator.ipv6_re + "|" + host_re + ")"
        r"(?::[0-9]{1,5})?"
        r"(?:[/?#][^\s]*)?"
        r"\Z",
        re.IGNORECASE,
    )


_url_validator = GalleryURLValidator()


def normalize_attributes(raw: Mapping[str, object] | None) -> dict[str, object]:
    """Lower-case the attribute keys and apply defaults for ``url`` and ``limit``."""
    lowered = {str(key).lower(): value for key, value in (raw or {}).items()}
    return {
        'url': lowered.get('url', DEFAULT_URL),
        'limit': lowered.get('limit', DEFAULT_LIMIT),
    }


def sanitize(raw: Mapping[str, object] | None) -> SanitizedRequest:
    """Filter raw gallery attributes into a :class:`SanitizedRequest`.

    Never raises. Missing keys fall back to defaults; a ``None`` value is
    filtered like an empty string, so a ``None`` limit becomes 0.
    """
    attrs = normalize_attributes(raw)
    return {
        'url': filter_url(attrs['url']),
        'limit': coerce_int(filter_number_int(attrs['limit'])),
    }


def is_valid_url(url: str) -> bool:
    """True for a well-formed absolute URL that does not point at ``/ws.php``."""
    if WEB_SERVICE_PATH in url:
        return False
    try:
        _url_validator(url)
    except ValidationError:
        return False
    return True


def is_valid_limit(limit: object) -> bool:
    return isinstance(limit, int) and not isinstance(limit, bool) and limit > 0
