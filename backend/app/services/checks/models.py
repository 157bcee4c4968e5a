"""
Audit result models shared by every check.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AuditStatus(str, Enum):
    """Verdict of a single check."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"
    UNCHECKED = "unchecked"  # cannot be determined in this context


@dataclass(frozen=True)
class AuditResult:
    """Individual audit check result."""
    id: str
    name: str
    status: AuditStatus
    details: Optional[str] = None


@dataclass(frozen=True)
class CheckInfo:
    """Identity of a check; the only place its results are built."""
    id: str
    name: str
    
    def result(self, status: AuditStatus, details: Optional[str] = None) -> AuditResult:
        return AuditResult(id=self.id, name=self.name, status=status, details=details)
