"""
SEO Checks - Content SEO signals of a single document.

Each check reads the snapshot once and returns exactly one AuditResult:
- Meta title presence and length
- Meta description presence and length
- <h1> presence
- Duplicate meta (not decidable for one page)
- Image alt coverage
- Canonical link
"""
from app.config import settings
from app.services.checks.models import AuditResult, AuditStatus, CheckInfo
from app.services.document import DocumentSnapshot, trim


META_TITLE = CheckInfo("meta-title", "Meta Title")
META_DESCRIPTION = CheckInfo("meta-description", "Meta Description")
H1_PRESENCE = CheckInfo("h1-presence", "H1 Presence")
DUPLICATE_META = CheckInfo("duplicate-meta", "Duplicate Meta")
IMAGE_ALTS = CheckInfo("image-alts", "Image Alts")
CANONICAL = CheckInfo("canonical", "Canonical Link")


def check_meta_title(doc: DocumentSnapshot) -> AuditResult:
    """Title must exist and fit in a search result snippet."""
    title = trim(doc.title)
    max_length = settings.TITLE_MAX_LENGTH
    
    if not title:
        return META_TITLE.result(
            AuditStatus.FAIL,
            f"Missing <title>. Add a concise, descriptive title (<= {max_length} characters)."
        )
    if len(title) > max_length:
        return META_TITLE.result(
            AuditStatus.WARN,
            f"Title is {len(title)} characters. Aim for 50-{max_length} to avoid truncation."
        )
    return META_TITLE.result(AuditStatus.PASS, "Looks good.")


def check_meta_description(doc: DocumentSnapshot) -> AuditResult:
    """Description must exist and stay under the snippet length."""
    meta = doc.find_meta('description')
    content = trim(meta.get('content') if meta else None)
    max_length = settings.DESCRIPTION_MAX_LENGTH
    
    if not content:
        return META_DESCRIPTION.result(
            AuditStatus.FAIL,
            f"Missing or empty meta description. Add a compelling summary (<= {max_length} characters)."
        )
    if len(content) > max_length:
        return META_DESCRIPTION.result(
            AuditStatus.WARN,
            f"Description is {len(content)} characters. Aim for 120-{max_length} to avoid truncation."
        )
    return META_DESCRIPTION.result(AuditStatus.PASS, "Looks good.")


def check_h1_presence(doc: DocumentSnapshot) -> AuditResult:
    count = len(doc.soup.find_all('h1'))
    if count < 1:
        return H1_PRESENCE.result(
            AuditStatus.FAIL,
            "No <h1> found. Include a primary heading that describes the page content."
        )
    return H1_PRESENCE.result(AuditStatus.PASS, f"Found {count} <h1> tag(s).")


def check_duplicate_meta(doc: DocumentSnapshot) -> AuditResult:
    """Duplicates only exist across pages, so one document can never answer this."""
    return DUPLICATE_META.result(
        AuditStatus.UNCHECKED,
        "Unknown in single-page context. Compare title/description across multiple pages."
    )


def check_image_alts(doc: DocumentSnapshot) -> AuditResult:
    """Every <img> needs a non-blank alt attribute."""
    missing = [
        img for img in doc.images()
        if not img.has_attr('alt') or trim(img.get('alt')) == ""
    ]
    if missing:
        sample = ", ".join(
            doc.current_src(img) or "[inline]"
            for img in missing[:settings.ALT_EXAMPLE_LIMIT]
        )
        return IMAGE_ALTS.result(
            AuditStatus.FAIL,
            f"Found {len(missing)} image(s) without alt. Example(s): {sample}. Add descriptive alt text."
        )
    return IMAGE_ALTS.result(AuditStatus.PASS, "All images appear to have alt text.")


def check_canonical(doc: DocumentSnapshot) -> AuditResult:
    """A missing canonical is a recommendation, so it only warns."""
    link = doc.find_link('canonical')
    href = trim(doc.resolve_url(link.get('href'))) if link else ""
    if not href:
        return CANONICAL.result(
            AuditStatus.WARN,
            'No canonical URL found. Add <link rel="canonical" href="..."> to avoid duplicate content issues.'
        )
    return CANONICAL.result(AuditStatus.PASS, f"Canonical set to {href}")
