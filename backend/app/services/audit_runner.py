"""
Audit Runner - Main orchestrator for document audits.

Checks run in worker threads and are gathered; output keeps registry order.
"""
import asyncio
import time
from collections import Counter
from datetime import datetime, timezone
from typing import Iterable

from app.logger import logger
from app.services.checks.models import AuditResult, AuditStatus
from app.services.checks.registry import CATEGORIES, RegisteredCheck, checks_for, get_check
from app.services.document import DocumentSnapshot
from app.schemas.audit_result import AuditItem, AuditReport


class AuditRunner:
    """Runs registered checks against a document snapshot."""
    
    async def run(
        self,
        snapshot: DocumentSnapshot,
        categories: Iterable[str] = CATEGORIES
    ) -> AuditReport:
        """
        Run every check of the requested categories.
        
        Args:
            snapshot: The rendered document to audit
            categories: Subset of ("seo", "ux")
            
        Returns:
            AuditReport with per-category results and a status summary
        """
        categories = list(dict.fromkeys(categories))
        checks = [check for category in categories for check in checks_for(category)]
        
        checked_at = datetime.now(timezone.utc)
        started = time.perf_counter()
        logger.info(f"Starting audit of {snapshot.url or '[no url]'} ({len(checks)} checks)")
        
        results = await asyncio.gather(
            *(asyncio.to_thread(self._run_one, check, snapshot) for check in checks)
        )
        
        grouped = {category: [] for category in CATEGORIES}
        for check, result in zip(checks, results):
            grouped[check.category].append(self._to_item(result))
        
        summary = Counter(result.status.value for result in results)
        duration = time.perf_counter() - started
        logger.info(
            f"Audit finished in {duration:.3f}s: "
            + ", ".join(f"{status.value}={summary[status.value]}" for status in AuditStatus)
        )
        
        return AuditReport(
            url=snapshot.url,
            checked_at=checked_at,
            duration_seconds=round(duration, 4),
            seo=grouped["seo"],
            ux=grouped["ux"],
            summary={status.value: summary[status.value] for status in AuditStatus}
        )
    
    async def run_check(self, snapshot: DocumentSnapshot, check_id: str) -> AuditItem:
        """Run a single check by id. Raises UnknownCheckError for unknown ids."""
        check = get_check(check_id)
        result = await asyncio.to_thread(self._run_one, check, snapshot)
        return self._to_item(result)
    
    def _run_one(self, check: RegisteredCheck, snapshot: DocumentSnapshot) -> AuditResult:
        try:
            result = check.func(snapshot)
        except Exception as e:
            logger.exception(f"Check {check.id} failed: {e}")
            return check.info.result(AuditStatus.UNCHECKED, f"Check could not run: {e}")
        
        if result.status is not AuditStatus.PASS:
            logger.debug(f"{check.id}: {result.status.value} - {result.details}")
        return result
    
    @staticmethod
    def _to_item(result: AuditResult) -> AuditItem:
        return AuditItem(
            id=result.id,
            name=result.name,
            status=result.status.value,
            details=result.details
        )
