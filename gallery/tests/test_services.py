"""Tests for the gallery render pipeline."""
from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase, override_settings

from gallery.exceptions import FetchError
from gallery.services import GalleryOptions, render_gallery, render_stylesheet

INVALID_PARAMETERS = (
    '<div style="color: red">Piwigo Gallery Alert: '
    'URL or LIMIT is invalid please check parameters !</div>'
)
GALLERY_URL = 'https://photos.example.com'


def _body(count: int, **overrides) -> str:
    categories = []
    for index in range(count):
        album = {
            'name': f'Album {index}',
            'comment': '',
            'tn_url': f'{GALLERY_URL}/thumb/{index}.jpg',
            'url': f'{GALLERY_URL}/index.php?/category/{index}',
        }
        album.update(overrides)
        categories.append(album)
    return json.dumps({'result': {'categories': categories}})


class RenderGalleryValidationTests(SimpleTestCase):
    def test_invalid_limits_render_validation_alert(self) -> None:
        for limit in ('0', '-5', 'abc', '', None, 0):
            with self.subTest(limit=limit):
                fetch = MagicMock()
                html = render_gallery({'url': GALLERY_URL, 'limit': limit}, fetch=fetch)
                self.assertEqual(html, INVALID_PARAMETERS)
                fetch.assert_not_called()

    def test_web_service_url_renders_validation_alert(self) -> None:
        for url in (f'{GALLERY_URL}/ws.php', f'{GALLERY_URL}/ws.php?format=json'):
            with self.subTest(url=url):
                fetch = MagicMock()
                html = render_gallery({'url': url, 'limit': '5'}, fetch=fetch)
                self.assertEqual(html, INVALID_PARAMETERS)
                fetch.assert_not_called()

    def test_missing_url_renders_validation_alert(self) -> None:
        fetch = MagicMock()
        self.assertEqual(render_gallery({}, fetch=fetch), INVALID_PARAMETERS)
        fetch.assert_not_called()


class RenderGalleryTests(SimpleTestCase):
    def test_renders_limit_plus_one_cards(self) -> None:
        fetch = MagicMock(return_value=_body(10))
        html = render_gallery({'url': GALLERY_URL, 'limit': '3'}, fetch=fetch)

        fetch.assert_called_once_with(GALLERY_URL)
        self.assertTrue(html.startswith('<div class="piwigogallery">'))
        self.assertEqual(html.count('class="card"'), 4)

    def test_default_limit_is_twenty(self) -> None:
        fetch = MagicMock(return_value=_body(30))
        html = render_gallery({'url': GALLERY_URL}, fetch=fetch)
        self.assertEqual(html.count('class="card"'), 21)

    def test_strict_limit_option(self) -> None:
        fetch = MagicMock(return_value=_body(10))
        html = render_gallery(
            {'url': GALLERY_URL, 'limit': '3'},
            fetch=fetch,
            options=GalleryOptions(strict_limit=True),
        )
        self.assertEqual(html.count('class="card"'), 3)

    def test_attribute_names_are_case_insensitive(self) -> None:
        fetch = MagicMock(return_value=_body(5))
        html = render_gallery({'URL': GALLERY_URL, 'LiMiT': '1'}, fetch=fetch)
        fetch.assert_called_once_with(GALLERY_URL)
        self.assertEqual(html.count('class="card"'), 2)

    def test_escapes_album_names(self) -> None:
        fetch = MagicMock(return_value=_body(1, name='Summer & Sun'))
        html = render_gallery({'url': GALLERY_URL, 'limit': '5'}, fetch=fetch)
        self.assertIn('Summer &amp; Sun', html)
        self.assertNotIn('Summer & Sun', html)

    def test_fetch_error_renders_transport_message(self) -> None:
        fetch = MagicMock(side_effect=FetchError('Could not resolve host'))
        html = render_gallery({'url': GALLERY_URL, 'limit': '5'}, fetch=fetch)
        self.assertEqual(html, '<div style="color: red">Piwigo Gallery Alert: Could not resolve host !</div>')
        self.assertNotIn('class="card"', html)

    def test_fetch_error_joins_multiple_messages(self) -> None:
        fetch = MagicMock(side_effect=FetchError(['Connection refused', 'retry later']))
        html = render_gallery({'url': GALLERY_URL, 'limit': '5'}, fetch=fetch)
        self.assertIn('Connection refused, retry later', html)

    def test_missing_categories_render_empty_container(self) -> None:
        fetch = MagicMock(return_value='{"result":{}}')
        html = render_gallery({'url': GALLERY_URL, 'limit': '5'}, fetch=fetch)
        self.assertEqual(html, '<div class="piwigogallery"></div>')

    def test_deeply_nested_payload_renders_empty_container(self) -> None:
        fetch = MagicMock(return_value='[' * 200000 + ']' * 200000)
        html = render_gallery({'url': GALLERY_URL, 'limit': '3'}, fetch=fetch)
        self.assertEqual(html, '<div class="piwigogallery"></div>')

    def test_render_is_idempotent(self) -> None:
        fetch = MagicMock(return_value=_body(6, comment='<i>shot</i>'))
        attrs = {'url': GALLERY_URL, 'limit': '4'}
        self.assertEqual(render_gallery(attrs, fetch=fetch), render_gallery(attrs, fetch=fetch))

    @patch('gallery.services.fetch_categories')
    def test_default_fetcher_uses_configured_timeout(self, mock_fetch) -> None:
        mock_fetch.return_value = _body(1)
        render_gallery({'url': GALLERY_URL, 'limit': '1'}, options=GalleryOptions(timeout=2.5))
        mock_fetch.assert_called_once_with(GALLERY_URL, timeout=2.5)


class RenderStylesheetTests(SimpleTestCase):
    def test_enabled_links_bundled_stylesheet(self) -> None:
        self.assertEqual(
            render_stylesheet(True),
            '<link rel="stylesheet" href="/static/gallery/css/piwigogallery.css">',
        )

    def test_disabled_renders_nothing(self) -> None:
        self.assertEqual(render_stylesheet(False), '')

    @override_settings(PIWIGO_GALLERY_STYLESHEET=False)
    def test_settings_flag_is_not_read_by_core(self) -> None:
        self.assertIn('piwigogallery.css', render_stylesheet(True))
