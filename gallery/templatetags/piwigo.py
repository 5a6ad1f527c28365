from django import template
from django.utils.safestring import mark_safe

from gallery.services import render_gallery, render_stylesheet
from gallery.utils import gallery_options, stylesheet_enabled

register = template.Library()


@register.simple_tag(name="piwigo_gallery")
def piwigo_gallery(**attrs):
    """Embed a Piwigo album gallery.

    Usage: {% piwigo_gallery url="https://photos.example.com" limit=8 %}
    Attribute names are case-insensitive; ``limit`` defaults to 20.
    """
    return mark_safe(render_gallery(attrs, options=gallery_options()))


@register.simple_tag(name="piwigo_gallery_stylesheet")
def piwigo_gallery_stylesheet():
    """Link the bundled gallery stylesheet unless PIWIGO_GALLERY_STYLESHEET is off."""
    return render_stylesheet(stylesheet_enabled())
