"""Shared pytest fixtures for the auditor tests."""

import pytest

from app.config import settings
from app.services.document import DocumentSnapshot, ImageSize, Layout


def build_html(head: str = "", body: str = "", body_attrs: str = "") -> str:
    """Wrap head/body fragments into a full document."""
    return (
        "<!DOCTYPE html><html><head>" + head + "</head>"
        "<body" + (" " + body_attrs if body_attrs else "") + ">" + body + "</body></html>"
    )


@pytest.fixture()
def make_snapshot():
    """Factory fixture: build a DocumentSnapshot from head/body fragments."""
    def _make(head="", body="", body_attrs="", url="https://example.com/page",
              layout=None, computed_styles=None, image_sizes=None, title=None):
        return DocumentSnapshot(
            html=build_html(head, body, body_attrs),
            url=url,
            title=title,
            layout=layout,
            computed_styles=computed_styles,
            image_sizes=image_sizes,
        )
    return _make


@pytest.fixture()
def full_page(make_snapshot):
    """A document that passes every check that can pass."""
    return make_snapshot(
        head=(
            "<title>Example Domain | Widgets</title>"
            '<meta name="description" content="Hand made widgets shipped worldwide.">'
            '<meta name="viewport" content="width=device-width, initial-scale=1">'
            '<link rel="canonical" href="https://example.com/page">'
        ),
        body=(
            "<h1>Widgets</h1>"
            '<img src="/small.png" alt="A widget">'
            '<a href="/about">About</a>'
        ),
        layout=Layout(client_width=390, inner_width=390, scroll_width=390),
        computed_styles={
            "body": {"color": "rgb(0, 0, 0)", "background-color": "rgba(0, 0, 0, 0)"},
            "html": {"background-color": "rgb(255, 255, 255)"},
        },
        image_sizes={"https://example.com/small.png": ImageSize(320, 240)},
    )


@pytest.fixture()
def restore_settings():
    """Snapshot settings and restore them after the test."""
    saved = dict(vars(settings))
    yield settings
    for key, value in saved.items():
        setattr(settings, key, value)
