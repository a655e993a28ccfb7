"""Certification application evaluator.

Workflow for one application:
1. Fetch the application
2. Check documentation completeness
3. Check compliance statements
4. Check deployment history
5. Score, recommend, and persist the new status with an audit payload

Storage and logging are injected so callers (and tests) choose the backend.
"""

from __future__ import annotations

import logging
from typing import Optional

from .checks import check_compliance_statements, check_deployment_history, check_documentation_complete
from .exceptions import ApplicationNotFoundError
from .models import ApplicationStatus, CertificationCheckResult, CertificationChecks
from .rules import (
    COMPLIANCE_RECOMMENDATION,
    COMPLIANCE_WEIGHT,
    DEPLOYMENT_RECOMMENDATIONS,
    DEPLOYMENT_WEIGHT,
    DOCUMENTATION_RECOMMENDATION,
    DOCUMENTATION_WEIGHT,
)
from .storage import CertificationStorage


def compute_score(checks: CertificationChecks) -> int:
    score = 0
    if checks.documentation_complete:
        score += DOCUMENTATION_WEIGHT
    if checks.compliance_statements_valid:
        score += COMPLIANCE_WEIGHT
    if checks.deployment_history_valid:
        score += DEPLOYMENT_WEIGHT
    return score


def build_recommendations(tier: str, checks: CertificationChecks) -> list[str]:
    """Recommendations in fixed order: documentation, compliance, deployment."""
    recommendations = []
    if not checks.documentation_complete:
        recommendations.append(DOCUMENTATION_RECOMMENDATION)
    if not checks.compliance_statements_valid:
        recommendations.append(COMPLIANCE_RECOMMENDATION)
    if not checks.deployment_history_valid and tier in DEPLOYMENT_RECOMMENDATIONS:
        recommendations.append(DEPLOYMENT_RECOMMENDATIONS[tier])
    return recommendations


class CertificationEvaluator:
    """Runs the automated checks for certification applications."""

    def __init__(
        self,
        storage: CertificationStorage,
        logger: Optional[logging.Logger] = None,
        enforce_deployment_minimums: bool = False,
    ):
        self._storage = storage
        self._logger = logger or logging.getLogger(__name__)
        self._enforce_deployment_minimums = enforce_deployment_minimums

    async def process(self, application_id: str) -> CertificationCheckResult:
        """Evaluate an application and persist its new status.

        Raises ApplicationNotFoundError before any write if the id is unknown.
        Storage errors propagate unchanged; nothing is retried.
        """
        self._logger.info(
            "Processing certification application: %s",
            application_id,
            extra={"application_id": application_id},
        )

        application = await self._storage.get_certification_application(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)

        checks = CertificationChecks(
            documentation_complete=check_documentation_complete(application),
            compliance_statements_valid=check_compliance_statements(application),
            deployment_history_valid=await check_deployment_history(
                self._storage,
                application.vendor_id,
                application.tier_requested,
                enforce_minimums=self._enforce_deployment_minimums,
            ),
        )

        result = CertificationCheckResult(
            passed=checks.all_passed,
            checks=checks,
            recommendations=build_recommendations(application.tier_requested, checks),
            score=compute_score(checks),
        )

        await self._storage.update_certification_application_status(
            application_id,
            ApplicationStatus.IN_REVIEW if result.passed else ApplicationStatus.PENDING,
            result.passed,
            result.to_audit_json(),
        )

        self._logger.info(
            "Certification application %s: %s automated checks (score: %d)",
            application_id,
            "PASSED" if result.passed else "FAILED",
            result.score,
            extra={"application_id": application_id, "passed": result.passed, "score": result.score},
        )
        return result


async def process_certification_application(
    application_id: str,
    storage: CertificationStorage,
    logger: Optional[logging.Logger] = None,
    enforce_deployment_minimums: bool = False,
) -> CertificationCheckResult:
    """Convenience wrapper around ``CertificationEvaluator.process``."""
    evaluator = CertificationEvaluator(
        storage,
        logger=logger,
        enforce_deployment_minimums=enforce_deployment_minimums,
    )
    return await evaluator.process(application_id)
