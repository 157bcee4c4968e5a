"""
Pydantic schemas for audit responses.
"""

from datetime import datetime
from typing import Dict, Optional, Literal
from pydantic import BaseModel, Field


Status = Literal["pass", "warn", "fail", "unchecked"]


class AuditItem(BaseModel):
    """Individual check result."""
    id: str
    name: str
    status: Status
    details: Optional[str] = None


class CheckDescriptor(BaseModel):
    """A registered check, without running it."""
    id: str
    name: str
    category: Literal["seo", "ux"]


class AuditReport(BaseModel):
    """Complete audit response."""
    url: str = ""
    checked_at: datetime
    duration_seconds: float = 0
    
    seo: list[AuditItem] = []
    ux: list[AuditItem] = []
    summary: Dict[Status, int] = Field(default_factory=dict, description="Number of checks per status")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "url": "https://example.com/",
                "checked_at": "2024-01-01T12:00:00Z",
                "duration_seconds": 0.01,
                "seo": [
                    {"id": "meta-title", "name": "Meta Title", "status": "pass", "details": "Looks good."}
                ],
                "ux": [
                    {"id": "contrast-hint", "name": "Contrast Hint", "status": "pass",
                     "details": "Estimated contrast 21.00:1"}
                ],
                "summary": {"pass": 2, "warn": 0, "fail": 0, "unchecked": 0}
            }
        }
    }
