"""Vendor Certification MCP Server.

FastMCP server exposing the automated certification checks as tools.
Run: vendor-certification-mcp
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .config import load_settings
from .core.evaluator import CertificationEvaluator
from .core.exceptions import ApplicationNotFoundError
from .core.models import ApplicationStatus, CertificationApplication
from .db import close_db, init_db
from .repository import SqlCertificationStorage

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)
# Writes the application's status, but repeat runs on unchanged data write the same thing.
STATUS_WRITE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False)

storage = SqlCertificationStorage()


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging and initialize the database."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    await init_db()
    logger.info("Vendor certification server ready")
    try:
        yield
    finally:
        await close_db()


mcp = FastMCP(
    "Vendor Certification",
    instructions="Run automated certification checks for vendor applications — documentation, compliance statements, and deployment history against Silver, Gold, and Platinum tiers.",
    lifespan=lifespan,
)


def _application_to_dict(application: CertificationApplication) -> dict:
    details = None
    if application.automated_check_details:
        details = json.loads(application.automated_check_details)
    return {
        "id": application.id,
        "vendor_id": application.vendor_id,
        "tier_requested": application.tier_requested,
        "status": application.status,
        "documentation_count": len(application.documentation_urls),
        "automated_checks_passed": application.automated_checks_passed,
        "automated_check_details": details,
    }


# ─── Tool 1: Process Application ─────────────────────────────────────────────


@mcp.tool(annotations=STATUS_WRITE)
async def certification_process_application(application_id: str) -> dict:
    """Run the automated checks for a certification application and update its status.

    Args:
        application_id: ID of the certification application to evaluate.
    """
    evaluator = CertificationEvaluator(
        storage,
        enforce_deployment_minimums=load_settings().enforce_deployment_minimums,
    )
    try:
        result = await evaluator.process(application_id)
    except ApplicationNotFoundError as exc:
        raise ValueError(str(exc)) from exc

    summary = f"{'PASSED' if result.passed else 'FAILED'} automated checks (score: {result.score})"
    return {
        "title": "Certification Check",
        "application_id": application_id,
        "result": result.model_dump(by_alias=True),
        "summary": summary,
    }


# ─── Tool 2: Get Application ─────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def certification_get_application(application_id: str) -> dict:
    """Current status and latest automated check outcome of a certification application.

    Args:
        application_id: ID of the certification application.
    """
    application = await storage.get_certification_application(application_id)
    if application is None:
        raise ValueError(str(ApplicationNotFoundError(application_id)))
    return _application_to_dict(application)


# ─── Tool 3: List Applications ───────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def certification_list_applications(status: Optional[str] = None) -> dict:
    """List certification applications, newest first.

    Args:
        status: Optional filter. One of 'pending', 'in_review', 'approved', 'rejected'.
    """
    status_filter = None
    if status:
        try:
            status_filter = ApplicationStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in ApplicationStatus)
            raise ValueError(f"Unknown status '{status}'. Expected one of: {allowed}") from None

    applications = await storage.list_certification_applications(status_filter)
    return {
        "title": "Certification Applications",
        "status": status,
        "applications": [_application_to_dict(a) for a in applications],
        "total": len(applications),
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
