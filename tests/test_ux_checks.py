"""Tests for the UX check set."""

import pytest

from app.services.checks.models import AuditStatus
from app.services.checks.ux_checks import (
    check_broken_links,
    check_contrast_hint,
    check_large_images,
    check_mobile_friendly,
    check_viewport,
)
from app.services.document import ImageSize, Layout


VIEWPORT_META = '<meta name="viewport" content="width=device-width, initial-scale=1">'


class TestViewport:
    """Viewport meta validity."""

    def test_missing_viewport_fails(self, make_snapshot):
        result = check_viewport(make_snapshot())
        assert result.id == "viewport"
        assert result.status is AuditStatus.FAIL

    def test_empty_content_fails(self, make_snapshot):
        snapshot = make_snapshot(head='<meta name="viewport" content=" ">')
        assert check_viewport(snapshot).status is AuditStatus.FAIL

    def test_width_only_warns(self, make_snapshot):
        snapshot = make_snapshot(head='<meta name="viewport" content="width=device-width">')
        assert check_viewport(snapshot).status is AuditStatus.WARN

    def test_width_and_scale_pass(self, make_snapshot):
        snapshot = make_snapshot(head=VIEWPORT_META)
        assert check_viewport(snapshot).status is AuditStatus.PASS

    def test_tokens_are_case_insensitive(self, make_snapshot):
        snapshot = make_snapshot(
            head='<meta name="viewport" content="Width=Device-Width, Initial-Scale=1.0">'
        )
        assert check_viewport(snapshot).status is AuditStatus.PASS


class TestMobileFriendly:
    """Horizontal overflow heuristic."""

    def test_no_overflow_with_viewport_passes(self, make_snapshot):
        snapshot = make_snapshot(
            head=VIEWPORT_META,
            layout=Layout(client_width=400, inner_width=400, scroll_width=400),
        )
        result = check_mobile_friendly(snapshot)
        assert result.id == "mobile-friendly"
        assert result.status is AuditStatus.PASS

    def test_overflow_within_tolerance_passes(self, make_snapshot):
        snapshot = make_snapshot(
            head=VIEWPORT_META,
            layout=Layout(client_width=400, scroll_width=420),
        )
        assert check_mobile_friendly(snapshot).status is AuditStatus.PASS

    def test_overflow_beyond_tolerance_warns(self, make_snapshot):
        snapshot = make_snapshot(
            head=VIEWPORT_META,
            layout=Layout(client_width=400, scroll_width=421),
        )
        result = check_mobile_friendly(snapshot)
        assert result.status is AuditStatus.WARN
        assert "overflow" in result.details

    def test_inner_width_widens_viewport(self, make_snapshot):
        snapshot = make_snapshot(
            head=VIEWPORT_META,
            layout=Layout(client_width=385, inner_width=400, scroll_width=420),
        )
        assert check_mobile_friendly(snapshot).status is AuditStatus.PASS

    def test_body_scroll_width_used_when_root_missing(self, make_snapshot):
        snapshot = make_snapshot(
            head=VIEWPORT_META,
            layout=Layout(client_width=400, scroll_width=0, body_scroll_width=900),
        )
        assert check_mobile_friendly(snapshot).status is AuditStatus.WARN

    def test_missing_viewport_meta_warns(self, make_snapshot):
        snapshot = make_snapshot(layout=Layout(client_width=400, scroll_width=400))
        result = check_mobile_friendly(snapshot)
        assert result.status is AuditStatus.WARN
        assert "Viewport meta missing" in result.details

    def test_overflow_reported_before_missing_meta(self, make_snapshot):
        snapshot = make_snapshot(layout=Layout(client_width=400, scroll_width=1200))
        result = check_mobile_friendly(snapshot)
        assert result.status is AuditStatus.WARN
        assert result.details.startswith("Horizontal overflow")

    def test_tolerance_follows_settings(self, make_snapshot, restore_settings):
        restore_settings.MOBILE_OVERFLOW_TOLERANCE = 1.5
        snapshot = make_snapshot(
            head=VIEWPORT_META,
            layout=Layout(client_width=400, scroll_width=590),
        )
        assert check_mobile_friendly(snapshot).status is AuditStatus.PASS


class TestBrokenLinks:
    """Obvious broken link patterns; no network involved."""

    def test_hash_and_javascript_links_warn(self, make_snapshot):
        snapshot = make_snapshot(
            body='<a href="#">Top</a><a href="javascript:void(0)">Click</a>'
        )
        result = check_broken_links(snapshot)
        assert result.id == "broken-links"
        assert result.status is AuditStatus.WARN
        assert "Found 2 link(s)" in result.details
        assert "Top, Click" in result.details
        assert "cross-origin" in result.details

    def test_scheme_check_is_case_insensitive(self, make_snapshot):
        snapshot = make_snapshot(body='<a href="  JavaScript:alert(1)">x</a>')
        assert check_broken_links(snapshot).status is AuditStatus.WARN

    def test_empty_href_example_falls_back_to_resolved_url(self, make_snapshot):
        snapshot = make_snapshot(body='<a href=""><img src="i.png" alt="i"></a>')
        result = check_broken_links(snapshot)
        assert result.status is AuditStatus.WARN
        assert "Examples: https://example.com/page" in result.details

    def test_empty_href_without_base_shows_hash(self, make_snapshot):
        snapshot = make_snapshot(body='<a href=" "></a>', url="")
        assert check_broken_links(snapshot).details.endswith("Examples: #")

    def test_examples_capped_at_five(self, make_snapshot):
        body = "".join(f'<a href="#">link{i}</a>' for i in range(8))
        result = check_broken_links(make_snapshot(body=body))
        assert "Found 8 link(s)" in result.details
        assert "link4" in result.details
        assert "link5" not in result.details

    def test_anchors_without_href_are_ignored(self, make_snapshot):
        snapshot = make_snapshot(body='<a name="top">Top</a><a href="/about">About</a>')
        result = check_broken_links(snapshot)
        assert result.status is AuditStatus.PASS
        assert "limited check" in result.details

    def test_fragment_links_are_fine(self, make_snapshot):
        snapshot = make_snapshot(body='<a href="#section-2">Next</a>')
        assert check_broken_links(snapshot).status is AuditStatus.PASS


class TestLargeImages:
    """Natural size above the dimension limit."""

    def test_small_images_pass(self, make_snapshot):
        snapshot = make_snapshot(
            body='<img src="/a.jpg" alt="a">',
            image_sizes={"https://example.com/a.jpg": ImageSize(1920, 1080)},
        )
        result = check_large_images(snapshot)
        assert result.id == "large-images"
        assert result.status is AuditStatus.PASS

    def test_unknown_size_counts_as_unloaded(self, make_snapshot):
        snapshot = make_snapshot(body='<img src="/a.jpg" alt="a">')
        assert check_large_images(snapshot).status is AuditStatus.PASS

    def test_large_images_warn_with_examples(self, make_snapshot):
        snapshot = make_snapshot(
            body=(
                '<img src="/wide.jpg" alt="w">'
                '<img src="tall.jpg" alt="t">'
                '<img src="/ok.jpg" alt="o">'
            ),
            image_sizes={
                "https://example.com/wide.jpg": ImageSize(4000, 1000),
                "tall.jpg": ImageSize(800, 2001),
                "https://example.com/ok.jpg": ImageSize(2000, 2000),
            },
        )
        result = check_large_images(snapshot)
        assert result.status is AuditStatus.WARN
        assert "Found 2 very large image(s)" in result.details
        assert result.details.endswith("Examples: 4000x1000, 800x2001")

    def test_examples_capped_at_three(self, make_snapshot):
        body = "".join(f'<img src="/{i}.jpg" alt="x">' for i in range(5))
        sizes = {f"https://example.com/{i}.jpg": ImageSize(3000 + i, 100) for i in range(5)}
        result = check_large_images(make_snapshot(body=body, image_sizes=sizes))
        assert "Found 5 very large image(s)" in result.details
        assert result.details.endswith("Examples: 3000x100, 3001x100, 3002x100")


class TestContrastHint:
    """Body text contrast estimate."""

    def test_black_on_white_passes(self, make_snapshot):
        snapshot = make_snapshot(computed_styles={
            "body": {"color": "#000000", "background-color": "#ffffff"},
        })
        result = check_contrast_hint(snapshot)
        assert result.id == "contrast-hint"
        assert result.status is AuditStatus.PASS
        assert result.details == "Estimated contrast 21.00:1"

    def test_transparent_body_falls_back_to_root(self, make_snapshot):
        snapshot = make_snapshot(computed_styles={
            "body": {"color": "rgb(0, 0, 0)", "background-color": "rgba(0, 0, 0, 0)"},
            "html": {"background-color": "rgb(255, 255, 255)"},
        })
        assert check_contrast_hint(snapshot).details == "Estimated contrast 21.00:1"

    def test_low_contrast_warns_with_ratio(self, make_snapshot):
        snapshot = make_snapshot(computed_styles={
            "body": {"color": "#777777", "background-color": "#ffffff"},
        })
        result = check_contrast_hint(snapshot)
        assert result.status is AuditStatus.WARN
        assert result.details.startswith("Estimated contrast 4.48:1")

    def test_unparseable_color_is_unchecked(self, make_snapshot):
        snapshot = make_snapshot(computed_styles={
            "body": {"color": "hsl(0, 0%, 0%)", "background-color": "#ffffff"},
        })
        assert check_contrast_hint(snapshot).status is AuditStatus.UNCHECKED

    def test_missing_styles_are_unchecked(self, make_snapshot):
        assert check_contrast_hint(make_snapshot()).status is AuditStatus.UNCHECKED

    def test_inline_styles_used_without_computed_state(self, make_snapshot):
        snapshot = make_snapshot(body_attrs='style="color: #fff; background: #000"')
        result = check_contrast_hint(snapshot)
        assert result.status is AuditStatus.PASS
        assert result.details == "Estimated contrast 21.00:1"

    def test_camel_case_style_keys(self, make_snapshot):
        snapshot = make_snapshot(computed_styles={
            "body": {"color": "#222", "backgroundColor": "#fafafa"},
        })
        assert check_contrast_hint(snapshot).status is AuditStatus.PASS

    @pytest.mark.parametrize("minimum, expected", [(3.0, AuditStatus.PASS), (7.0, AuditStatus.WARN)])
    def test_minimum_follows_settings(self, make_snapshot, restore_settings, minimum, expected):
        restore_settings.CONTRAST_MIN_RATIO = minimum
        snapshot = make_snapshot(computed_styles={
            "body": {"color": "#777777", "background-color": "#ffffff"},
        })
        assert check_contrast_hint(snapshot).status is expected


class TestMalformedImageSource:
    """Natural size lookup survives an unparseable src."""

    def test_large_image_with_malformed_src(self, make_snapshot):
        snapshot = make_snapshot(
            body='<img src="http://[broken/a.png" alt="a">',
            image_sizes={"http://[broken/a.png": ImageSize(2500, 100)},
        )
        result = check_large_images(snapshot)
        assert result.status is AuditStatus.WARN
        assert result.details.endswith("Examples: 2500x100")

    def test_unknown_size_with_malformed_src_passes(self, make_snapshot):
        snapshot = make_snapshot(body='<img src="http://[broken/a.png" alt="a">')
        assert check_large_images(snapshot).status is AuditStatus.PASS
