"""Gallery-specific helpers that read host settings."""
from __future__ import annotations

from django.conf import settings

from .client import DEFAULT_TIMEOUT
from .services import GalleryOptions


def stylesheet_enabled() -> bool:
    """Return whether the bundled stylesheet should be attached to pages."""
    return bool(getattr(settings, 'PIWIGO_GALLERY_STYLESHEET', True))


def gallery_options() -> GalleryOptions:
    """Build render options from ``PIWIGO_GALLERY_*`` settings."""
    return GalleryOptions(
        strict_limit=bool(getattr(settings, 'PIWIGO_GALLERY_STRICT_LIMIT', False)),
        timeout=float(getattr(settings, 'PIWIGO_GALLERY_TIMEOUT', DEFAULT_TIMEOUT)),
    )
