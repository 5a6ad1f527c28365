from __future__ import annotations

from django.conf import settings
from django.views.generic import TemplateView


class HomeView(TemplateView):
    """Preview page embedding the gallery configured by PIWIGO_GALLERY_DEMO_URL."""

    template_name = 'home.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                'demo_url': settings.PIWIGO_GALLERY_DEMO_URL,
                'demo_limit': self.request.GET.get('limit', settings.PIWIGO_GALLERY_DEMO_LIMIT),
            }
        )
        return context
