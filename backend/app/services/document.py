"""
Document Snapshot - Read-only view of a rendered page handed to every check.

Holds:
- The parsed DOM (BeautifulSoup, html.parser)
- Layout metrics captured by the host (client/inner/scroll widths)
- Computed styles for the root and body elements
- Natural (intrinsic) image sizes keyed by source URL
"""
import re
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag


_STYLE_DECLARATION = re.compile(r"(?:^|;)\s*([-a-zA-Z]+)\s*:\s*([^;]+)")
_CAMEL_HUMP = re.compile(r"(?<=[a-z])([A-Z])")


def trim(value: Optional[str]) -> str:
    """Coalesce missing values to '' and strip surrounding whitespace."""
    return (value or "").strip()


def _css_property_name(name: str) -> str:
    """backgroundColor -> background-color"""
    return _CAMEL_HUMP.sub(lambda m: "-" + m.group(1).lower(), name.strip()).lower()


@dataclass
class Layout:
    """Layout metrics of the rendered page, in CSS pixels."""
    client_width: int = 0           # documentElement.clientWidth
    inner_width: Optional[int] = None  # window.innerWidth
    scroll_width: int = 0           # documentElement.scrollWidth
    body_scroll_width: int = 0      # body.scrollWidth


@dataclass(frozen=True)
class ImageSize:
    """Intrinsic image dimensions; 0x0 when the image never loaded."""
    natural_width: int = 0
    natural_height: int = 0


class DocumentSnapshot:
    """A rendered document plus the presentation state the checks need."""
    
    def __init__(
        self,
        html: str,
        url: str = "",
        title: Optional[str] = None,
        layout: Optional[Layout] = None,
        computed_styles: Optional[Dict[str, Dict[str, str]]] = None,
        image_sizes: Optional[Dict[str, ImageSize]] = None
    ):
        self.soup = BeautifulSoup(html or "", 'html.parser')
        self.url = trim(url)
        self.layout = layout or Layout()
        self._title = title
        self._computed_styles = {
            element.lower(): {_css_property_name(k): v for k, v in props.items()}
            for element, props in (computed_styles or {}).items()
        }
        self._image_sizes = dict(image_sizes or {})
        self.base_url = self._resolve_base_url()
    
    def _resolve_base_url(self) -> str:
        base_tag = self.soup.find('base', href=True)
        if base_tag and trim(base_tag['href']):
            try:
                return urljoin(self.url, trim(base_tag['href']))
            except ValueError:
                return self.url
        return self.url
    
    # --- Tree access ---
    
    @property
    def title(self) -> str:
        """document.title, falling back to the first <title> element's text."""
        if self._title:
            return self._title
        title_tag = self.soup.find('title')
        if not title_tag:
            return ""
        return " ".join(title_tag.get_text().split())
    
    def find_meta(self, name: str) -> Optional[Tag]:
        return self.soup.find('meta', attrs={'name': name})
    
    def find_link(self, rel: str) -> Optional[Tag]:
        """First <link> whose whole rel value equals `rel`, ignoring case."""
        for link in self.soup.find_all('link'):
            value = link.get('rel') or ""
            if isinstance(value, list):
                value = " ".join(value)
            if value.lower() == rel:
                return link
        return None
    
    def images(self) -> list[Tag]:
        return self.soup.find_all('img')
    
    def anchors(self) -> list[Tag]:
        """Anchors carrying an href attribute (a[href])."""
        return self.soup.find_all('a', href=True)
    
    # --- URL resolution ---
    
    def resolve_url(self, value: Optional[str]) -> str:
        """Resolve an attribute value the way reflected URL properties do."""
        if value is None:
            return ""
        try:
            return urljoin(self.base_url, trim(value))
        except ValueError:
            # malformed URL, e.g. an unclosed IPv6 host
            return trim(value)
    
    def current_src(self, img: Tag) -> str:
        """Best guess at img.currentSrc: src, else the first srcset candidate."""
        src = img.get('src')
        if trim(src):
            return self.resolve_url(src)
        candidates = [c.split() for c in trim(img.get('srcset')).split(',')]
        candidates = [c for c in candidates if c]
        if candidates:
            return self.resolve_url(candidates[0][0])
        return ""
    
    def natural_size(self, img: Tag) -> ImageSize:
        for key in (self.current_src(img), trim(img.get('src'))):
            if key and key in self._image_sizes:
                return self._image_sizes[key]
        return ImageSize()
    
    # --- Computed styles ---
    
    def computed_style(self, element: str, prop: str) -> str:
        """Computed value of `prop` on the `html` or `body` element.
        
        Host-supplied computed styles win; otherwise the element's inline
        style attribute is consulted. Returns '' when nothing is known.
        """
        prop = _css_property_name(prop)
        value = self._computed_styles.get(element, {}).get(prop)
        if value is not None:
            return trim(value)
        
        inline = self._inline_style(element)
        if prop in inline:
            return inline[prop]
        if prop == 'background-color':
            return inline.get('background', "")
        return ""
    
    def _inline_style(self, element: str) -> Dict[str, str]:
        tag = self.soup.find(element)
        if not tag:
            return {}
        declarations = {}
        for name, value in _STYLE_DECLARATION.findall(tag.get('style', '')):
            declarations[name.lower()] = trim(value.replace("!important", ""))
        return declarations
