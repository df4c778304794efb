"""Tests for HTML rendering."""

import pytest

from guestbook.app.services.render_service import RenderService

from .helpers import list_items


@pytest.mark.unit
def test_page_contains_form() -> None:
    page = RenderService.render_page([], title="Guestbook", max_length=100)
    assert '<form method="post" action="/">' in page
    assert 'name="message"' in page
    assert 'maxlength="100"' in page


@pytest.mark.unit
def test_empty_log_renders_no_items() -> None:
    page = RenderService.render_page([], title="Guestbook", max_length=100)
    assert list_items(page) == []


@pytest.mark.unit
def test_markup_is_escaped() -> None:
    page = RenderService.render_page(
        ["<script>alert(1)</script>", "Tom & Jerry", '"quoted"'],
        title="Guestbook",
        max_length=100,
    )
    assert "<script>" not in page
    assert list_items(page) == [
        "&lt;script&gt;alert(1)&lt;/script&gt;",
        "Tom &amp; Jerry",
        "&quot;quoted&quot;",
    ]


@pytest.mark.unit
def test_title_is_escaped() -> None:
    page = RenderService.render_page([], title="<Guests>", max_length=100)
    assert "<title>&lt;Guests&gt;</title>" in page
