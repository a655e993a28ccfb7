"""Tier rule tables for automated certification checks.

Silver:   1 document,  HIPAA
Gold:     2 documents, HIPAA + NIST AI RMF
Platinum: 3 documents, HIPAA + NIST AI RMF + (FDA or ISO)
"""

from __future__ import annotations

from .models import CertificationTier, ComplianceStatements

DEFAULT_REQUIRED_DOCUMENTS = 1

REQUIRED_DOCUMENTS: dict[str, int] = {
    CertificationTier.SILVER.value: 1,
    CertificationTier.GOLD.value: 2,
    CertificationTier.PLATINUM.value: 3,
}

# Only consulted when deployment minimums are enforced. Silver welcomes new vendors.
REQUIRED_ACTIVE_DEPLOYMENTS: dict[str, int] = {
    CertificationTier.SILVER.value: 0,
    CertificationTier.GOLD.value: 1,
    CertificationTier.PLATINUM.value: 3,
}

DOCUMENTATION_WEIGHT = 40
COMPLIANCE_WEIGHT = 40
DEPLOYMENT_WEIGHT = 20

DOCUMENTATION_RECOMMENDATION = "Please upload complete documentation for all requested compliance frameworks"
COMPLIANCE_RECOMMENDATION = "Compliance statements must align with requested certification tier"

# Silver has no entry: it never gets a deployment recommendation.
DEPLOYMENT_RECOMMENDATIONS: dict[str, str] = {
    CertificationTier.PLATINUM.value: "Platinum tier requires at least 3 active deployments with health systems",
    CertificationTier.GOLD.value: "Gold tier requires at least 1 active deployment with a health system",
}


def required_documents(tier: str) -> int:
    return REQUIRED_DOCUMENTS.get(tier, DEFAULT_REQUIRED_DOCUMENTS)


def required_active_deployments(tier: str) -> int:
    return REQUIRED_ACTIVE_DEPLOYMENTS.get(tier, 0)


def compliance_requirements_met(tier: str, statements: ComplianceStatements) -> bool:
    """Evaluate the tier's compliance expression. Unrecognized tiers are denied."""
    if tier == CertificationTier.SILVER.value:
        return statements.hipaa
    if tier == CertificationTier.GOLD.value:
        return statements.hipaa and statements.nist
    if tier == CertificationTier.PLATINUM.value:
        return statements.hipaa and statements.nist and (statements.fda or statements.iso)
    return False
