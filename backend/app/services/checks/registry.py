"""
Check Registry - Every check the auditor knows, grouped by category.

Order here is the order results are reported in.
"""
from dataclasses import dataclass
from typing import Callable

from app.services.checks.models import AuditResult, CheckInfo
from app.services.checks import seo_checks, ux_checks
from app.services.document import DocumentSnapshot


CheckFunc = Callable[[DocumentSnapshot], AuditResult]

SEO = "seo"
UX = "ux"
CATEGORIES = (SEO, UX)


class UnknownCheckError(KeyError):
    """Raised when a check id is not registered."""


@dataclass(frozen=True)
class RegisteredCheck:
    """A check function with its identity and category."""
    info: CheckInfo
    category: str
    func: CheckFunc
    
    @property
    def id(self) -> str:
        return self.info.id


CHECKS: list[RegisteredCheck] = [
    RegisteredCheck(seo_checks.META_TITLE, SEO, seo_checks.check_meta_title),
    RegisteredCheck(seo_checks.META_DESCRIPTION, SEO, seo_checks.check_meta_description),
    RegisteredCheck(seo_checks.H1_PRESENCE, SEO, seo_checks.check_h1_presence),
    RegisteredCheck(seo_checks.DUPLICATE_META, SEO, seo_checks.check_duplicate_meta),
    RegisteredCheck(seo_checks.IMAGE_ALTS, SEO, seo_checks.check_image_alts),
    RegisteredCheck(seo_checks.CANONICAL, SEO, seo_checks.check_canonical),
    RegisteredCheck(ux_checks.VIEWPORT, UX, ux_checks.check_viewport),
    RegisteredCheck(ux_checks.MOBILE_FRIENDLY, UX, ux_checks.check_mobile_friendly),
    RegisteredCheck(ux_checks.BROKEN_LINKS, UX, ux_checks.check_broken_links),
    RegisteredCheck(ux_checks.LARGE_IMAGES, UX, ux_checks.check_large_images),
    RegisteredCheck(ux_checks.CONTRAST_HINT, UX, ux_checks.check_contrast_hint),
]


def checks_for(category: str) -> list[RegisteredCheck]:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}")
    return [c for c in CHECKS if c.category == category]


def get_check(check_id: str) -> RegisteredCheck:
    for check in CHECKS:
        if check.id == check_id:
            return check
    raise UnknownCheckError(check_id)
