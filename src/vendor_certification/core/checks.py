"""Automated certification checks.

Each check answers one yes/no question about an application. Only the
deployment check talks to storage.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .models import CertificationApplication, ComplianceStatements
from .rules import compliance_requirements_met, required_active_deployments, required_documents
from .storage import CertificationStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_or_default(parser: Callable[[str], T], raw: str, default: T) -> T:
    """Run ``parser`` on ``raw``, returning ``default`` if it rejects the input.

    Any failure while parsing vendor data maps to the default, including
    RecursionError from pathologically nested JSON. Failures are logged at
    DEBUG.
    """
    try:
        return parser(raw)
    except Exception as exc:
        logger.debug("Unparseable input mapped to default: %s", exc)
        return default


def check_documentation_complete(application: CertificationApplication) -> bool:
    """Count-only check: enough documents for the requested tier."""
    return len(application.documentation_urls) >= required_documents(application.tier_requested)


def check_compliance_statements(application: CertificationApplication) -> bool:
    """Check the declared compliance flags against the requested tier."""
    if not application.compliance_statements:
        return False

    statements = parse_or_default(ComplianceStatements.from_json, application.compliance_statements, None)
    if statements is None:
        return False
    return compliance_requirements_met(application.tier_requested, statements)


async def check_deployment_history(
    storage: CertificationStorage,
    vendor_id: str,
    tier: str,
    enforce_minimums: bool = False,
) -> bool:
    """Check the vendor's active deployment history.

    Unless ``enforce_minimums`` is set, any history (including none) is
    sufficient. With enforcement, Gold needs 1+ and Platinum 3+ active
    deployments.
    """
    deployments = await storage.get_deployments_by_vendor(vendor_id)
    active_count = sum(1 for d in deployments if d.is_active)
    logger.debug("Vendor %s has %d active deployment(s)", vendor_id, active_count)

    if not enforce_minimums:
        return True

    return active_count >= required_active_deployments(tier)
