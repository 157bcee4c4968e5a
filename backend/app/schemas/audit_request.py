"""
Pydantic schemas for audit requests.

A request carries the rendered document as the host captured it: the
serialized DOM plus the layout, style and image state that cannot be
recovered from markup alone.
"""

from typing import Dict, Optional
from pydantic import BaseModel, Field

from app.services.document import DocumentSnapshot, ImageSize, Layout


class LayoutModel(BaseModel):
    """Layout metrics in CSS pixels."""
    client_width: int = Field(0, ge=0, description="documentElement.clientWidth")
    inner_width: Optional[int] = Field(None, ge=0, description="window.innerWidth")
    scroll_width: int = Field(0, ge=0, description="documentElement.scrollWidth")
    body_scroll_width: int = Field(0, ge=0, description="body.scrollWidth")


class ImageModel(BaseModel):
    """Intrinsic size of one image source."""
    src: str
    natural_width: int = Field(0, ge=0)
    natural_height: int = Field(0, ge=0)


class AuditRequest(BaseModel):
    """Request to audit a rendered document."""
    html: str = Field(..., description="Serialized document (outerHTML)")
    url: str = Field("", description="Document URL, used to resolve relative links")
    title: Optional[str] = Field(None, description="document.title, if changed by script")
    layout: LayoutModel = Field(default_factory=LayoutModel)
    computed_styles: Dict[str, Dict[str, str]] = Field(
        default_factory=dict,
        description="Computed styles of the 'html' and 'body' elements"
    )
    images: list[ImageModel] = Field(default_factory=list)
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "html": "<html><head><title>Example</title></head><body><h1>Hi</h1></body></html>",
                "url": "https://example.com/",
                "layout": {"client_width": 390, "inner_width": 390, "scroll_width": 390},
                "computed_styles": {
                    "body": {"color": "rgb(0, 0, 0)", "background-color": "rgba(0, 0, 0, 0)"},
                    "html": {"background-color": "rgb(255, 255, 255)"}
                },
                "images": [{"src": "https://example.com/hero.jpg", "natural_width": 2400, "natural_height": 1600}]
            }
        }
    }
    
    def to_snapshot(self) -> DocumentSnapshot:
        return DocumentSnapshot(
            html=self.html,
            url=self.url,
            title=self.title,
            layout=Layout(**self.layout.model_dump()),
            computed_styles=self.computed_styles,
            image_sizes={
                img.src: ImageSize(img.natural_width, img.natural_height)
                for img in self.images
            }
        )
