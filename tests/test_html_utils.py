"""
Unit tests for responsive_images.utils.html_utils module.
"""

import pytest
from bs4 import BeautifulSoup

from responsive_images.models.image import Image
from responsive_images.services.media_store import InMemoryMediaStore, MediaRecord
from responsive_images.utils.html_utils import render_img_tag, padding_style


@pytest.fixture
def store():
    store = InMemoryMediaStore()
    store.add_record(
        MediaRecord(1, "attachment", "image/png", title="Chart"),
        metadata={"width": 800, "height": 600, "sizes": {"thumbnail": {"width": 150, "height": 150}}},
    )
    store.set_image_url(1, "thumbnail", "https://example.com/chart-150x150.png")
    store.set_srcset(1, "thumbnail", "https://example.com/chart-150x150.png 150w")
    store.add_record(MediaRecord(2, "attachment", "application/zip"))
    return store


class TestRenderImgTag:
    """Test cases for building <img> markup."""
    
    def test_render(self, store):
        """Test that resolved and extra attributes end up on the tag."""
        html = render_img_tag(Image(store, 1, size="thumbnail", alt=""), class_="chart", loading="lazy")
        img = BeautifulSoup(html, 'html.parser').find('img')
        
        assert img['src'] == "https://example.com/chart-150x150.png"
        assert img['srcset'] == "https://example.com/chart-150x150.png 150w"
        assert img['alt'] == ""
        assert img['title'] == "Chart"
        assert img['class'] == ["chart"]
        assert img['loading'] == "lazy"
        assert not img.has_attr('sizes')
    
    def test_none_extras_are_skipped(self, store):
        html = render_img_tag(Image(store, 1, size="thumbnail"), width=None)
        
        assert 'width' not in html
    
    def test_invalid_image_renders_nothing(self, store):
        assert render_img_tag(Image(store, 2)) == ""


class TestPaddingStyle:
    """Test cases for intrinsic-ratio padding."""
    
    def test_padding_style(self, store):
        assert padding_style(Image(store, 1)) == "padding-bottom: 75.0%"
        assert padding_style(Image(store, 1, size="thumbnail")) == "padding-bottom: 100.0%"
    
    def test_invalid_image(self, store):
        assert padding_style(Image(store, 2)) is None
