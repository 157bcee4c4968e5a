"""
Audit API endpoints.
"""
from fastapi import APIRouter, HTTPException

from app.logger import logger
from app.schemas.audit_request import AuditRequest
from app.schemas.audit_result import AuditItem, AuditReport, CheckDescriptor
from app.services.audit_runner import AuditRunner
from app.services.checks.registry import CHECKS, SEO, UX, UnknownCheckError

router = APIRouter(tags=["Audit"])

runner = AuditRunner()


@router.get("/checks", response_model=list[CheckDescriptor])
async def list_checks():
    """List every registered check."""
    return [
        CheckDescriptor(id=c.info.id, name=c.info.name, category=c.category)
        for c in CHECKS
    ]


@router.post("", response_model=AuditReport)
async def run_audit(request: AuditRequest):
    """Run all SEO and UX checks on a document snapshot."""
    logger.info(f"Audit requested for {request.url or '[no url]'}")
    return await runner.run(request.to_snapshot())


@router.post("/seo", response_model=AuditReport)
async def run_seo_audit(request: AuditRequest):
    """Run only the SEO checks."""
    logger.info(f"SEO audit requested for {request.url or '[no url]'}")
    return await runner.run(request.to_snapshot(), categories=[SEO])


@router.post("/ux", response_model=AuditReport)
async def run_ux_audit(request: AuditRequest):
    """Run only the UX checks."""
    logger.info(f"UX audit requested for {request.url or '[no url]'}")
    return await runner.run(request.to_snapshot(), categories=[UX])


@router.post("/checks/{check_id}", response_model=AuditItem)
async def run_single_check(check_id: str, request: AuditRequest):
    """Run one check by id."""
    try:
        return await runner.run_check(request.to_snapshot(), check_id)
    except UnknownCheckError:
        raise HTTPException(status_code=404, detail=f"Unknown check: {check_id}")
