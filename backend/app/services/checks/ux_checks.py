"""
UX Checks - Safe client-side heuristics; nothing here touches the network.

- Viewport meta
- Mobile friendliness (horizontal overflow)
- Obvious broken link patterns
- Oversized images
- Body text contrast
"""
import re

from app.config import settings
from app.logger import logger
from app.services.checks.color import contrast_ratio, parse_color
from app.services.checks.models import AuditResult, AuditStatus, CheckInfo
from app.services.document import DocumentSnapshot, trim


VIEWPORT = CheckInfo("viewport", "Viewport Meta")
MOBILE_FRIENDLY = CheckInfo("mobile-friendly", "Mobile Friendly")
BROKEN_LINKS = CheckInfo("broken-links", "Broken Links")
LARGE_IMAGES = CheckInfo("large-images", "Large Images")
CONTRAST_HINT = CheckInfo("contrast-hint", "Contrast Hint")

# getComputedStyle reports an unset background as fully transparent black
TRANSPARENT = "rgba(0,0,0,0)"

_WHITESPACE = re.compile(r"\s+")


def check_viewport(doc: DocumentSnapshot) -> AuditResult:
    meta = doc.find_meta('viewport')
    content = meta.get('content') if meta else None
    if not trim(content):
        return VIEWPORT.result(
            AuditStatus.FAIL,
            'Missing meta viewport. Add <meta name="viewport" content="width=device-width, initial-scale=1">.'
        )
    
    content = content.lower()
    has_width = "width=device-width" in content
    has_scale = "initial-scale" in content
    if has_width and has_scale:
        return VIEWPORT.result(AuditStatus.PASS, "Viewport looks good.")
    return VIEWPORT.result(
        AuditStatus.WARN,
        "Viewport present but content may be incomplete. Include width=device-width and initial-scale."
    )


def check_mobile_friendly(doc: DocumentSnapshot) -> AuditResult:
    """Warn on horizontal overflow beyond the tolerance or a missing viewport meta."""
    layout = doc.layout
    viewport_width = max(layout.client_width, layout.inner_width or 0)
    scroll_width = layout.scroll_width or layout.body_scroll_width
    
    overflow_x = scroll_width > viewport_width * settings.MOBILE_OVERFLOW_TOLERANCE
    has_viewport_meta = doc.find_meta('viewport') is not None
    
    if not overflow_x and has_viewport_meta:
        return MOBILE_FRIENDLY.result(
            AuditStatus.PASS,
            "No horizontal overflow detected; viewport meta present."
        )
    
    if overflow_x:
        details = "Horizontal overflow may harm mobile UX. Ensure responsive layout and proper meta viewport."
    else:
        details = "Viewport meta missing; layout may not scale on mobile."
    return MOBILE_FRIENDLY.result(AuditStatus.WARN, details)


def _is_suspicious_href(href: str) -> bool:
    return href in ("", "#") or href.lower().startswith("javascript:")


def check_broken_links(doc: DocumentSnapshot) -> AuditResult:
    """Flag empty, '#' and javascript: hrefs. Reachability is never verified."""
    suspicious = [a for a in doc.anchors() if _is_suspicious_href(trim(a.get('href')))]
    
    if suspicious:
        sample = ", ".join(
            trim(a.get_text()) or doc.resolve_url(a.get('href')) or "#"
            for a in suspicious[:settings.LINK_EXAMPLE_LIMIT]
        )
        return BROKEN_LINKS.result(
            AuditStatus.WARN,
            f"Found {len(suspicious)} link(s) with empty/#/javascript href. "
            f"Network validation is limited for cross-origin links. Examples: {sample}"
        )
    return BROKEN_LINKS.result(
        AuditStatus.PASS,
        "No obvious broken link patterns detected (limited check)."
    )


def check_large_images(doc: DocumentSnapshot) -> AuditResult:
    limit = settings.LARGE_IMAGE_MAX_DIMENSION
    sizes = [doc.natural_size(img) for img in doc.images()]
    large = [s for s in sizes if s.natural_width > limit or s.natural_height > limit]
    
    if large:
        examples = ", ".join(
            f"{s.natural_width}x{s.natural_height}"
            for s in large[:settings.LARGE_IMAGE_EXAMPLE_LIMIT]
        )
        return LARGE_IMAGES.result(
            AuditStatus.WARN,
            f"Found {len(large)} very large image(s). Consider optimizing/resizing. Examples: {examples}"
        )
    return LARGE_IMAGES.result(AuditStatus.PASS, "No unusually large images detected.")


def _effective_background(doc: DocumentSnapshot) -> str:
    body_bg = doc.computed_style('body', 'background-color')
    if body_bg and _WHITESPACE.sub("", body_bg.lower()) != TRANSPARENT:
        return body_bg
    return doc.computed_style('html', 'background-color')


def check_contrast_hint(doc: DocumentSnapshot) -> AuditResult:
    """Estimate body text contrast against the page background (WCAG AA)."""
    color_str = doc.computed_style('body', 'color')
    bg_str = _effective_background(doc)
    
    fg = parse_color(color_str)
    bg = parse_color(bg_str)
    if fg is None or bg is None:
        logger.debug(f"Contrast unchecked: color={color_str!r} background={bg_str!r}")
        return CONTRAST_HINT.result(
            AuditStatus.UNCHECKED,
            "Could not parse colors to evaluate contrast."
        )
    
    ratio = contrast_ratio(fg, bg)
    minimum = settings.CONTRAST_MIN_RATIO
    if ratio < minimum:
        return CONTRAST_HINT.result(
            AuditStatus.WARN,
            f"Estimated contrast {ratio:.2f}:1 (< {minimum:g}:1). Consider increasing contrast."
        )
    return CONTRAST_HINT.result(AuditStatus.PASS, f"Estimated contrast {ratio:.2f}:1")
