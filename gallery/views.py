from django.http import HttpRequest, HttpResponse
from django.views.decorators.http import require_GET

from .services import render_gallery
from .utils import gallery_options


@require_GET
def fragment(request: HttpRequest) -> HttpResponse:
    """Gallery fragment for ``?url=...&limit=...``, for hosts that embed over HTTP.

    Failures are rendered as alert fragments, so the status is always 200.
    """
    attrs = {key: request.GET.get(key) for key in request.GET}
    html = render_gallery(attrs, options=gallery_options())
    return HttpResponse(html, content_type='text/html; charset=utf-8')
