"""Pydantic data models — the shared business objects.

Applications and deployments are validated into these models at the storage
boundary, so the checks and the evaluator never touch raw rows.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CertificationTier(str, Enum):
    """Certification levels a vendor can request."""

    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class ApplicationStatus(str, Enum):
    """Lifecycle status of a certification application."""

    PENDING = "pending"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class DeploymentStatus(str, Enum):
    """Status of a vendor deployment with a health system."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    TERMINATED = "terminated"


class CertificationApplication(BaseModel):
    """A vendor's request for certification at a given tier."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    vendor_id: str
    tier_requested: str = Field(description="Requested tier; unrecognized values are kept and fail compliance")
    documentation_urls: list[str] = Field(default_factory=list)
    compliance_statements: Optional[str] = Field(None, description="Serialized JSON record of compliance flags")
    status: str = Field(ApplicationStatus.PENDING.value, description="Stored as-is; the evaluator only writes pending or in_review")
    automated_checks_passed: Optional[bool] = None
    automated_check_details: Optional[str] = None

    @field_validator("documentation_urls", mode="before")
    @classmethod
    def _default_documentation_urls(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("compliance_statements", mode="before")
    @classmethod
    def _serialize_compliance_statements(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return json.dumps(value)
        return value


class Deployment(BaseModel):
    """A vendor deployment record. Only the status matters for certification."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    vendor_id: str
    status: str

    @property
    def is_active(self) -> bool:
        return self.status == DeploymentStatus.ACTIVE.value


class ComplianceStatements(BaseModel):
    """Compliance flags declared by a vendor.

    A flag counts only when the source document holds the JSON literal
    ``true``; strings such as ``"true"`` or numbers such as ``1`` do not.
    """

    hipaa: bool = False
    nist: bool = Field(False, description="NIST AI Risk Management Framework")
    fda: bool = False
    iso: bool = False

    @classmethod
    def from_json(cls, raw: str) -> "ComplianceStatements":
        """Parse a serialized statement record. Raises ValueError on malformed input."""
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Compliance statements must be a JSON object, got {type(data).__name__}")
        return cls(**{name: data.get(name) is True for name in cls.model_fields})


class CertificationChecks(BaseModel):
    """Outcome of the three automated checks."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    documentation_complete: bool = Field(alias="documentationComplete")
    compliance_statements_valid: bool = Field(alias="complianceStatementsValid")
    deployment_history_valid: bool = Field(alias="deploymentHistoryValid")

    @property
    def all_passed(self) -> bool:
        return self.documentation_complete and self.compliance_statements_valid and self.deployment_history_valid


class CertificationCheckResult(BaseModel):
    """Result of one automated evaluation, persisted as the audit payload."""

    model_config = ConfigDict(frozen=True)

    passed: bool
    checks: CertificationChecks
    recommendations: list[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100, description="Sum of weights for passing checks")

    @model_validator(mode="after")
    def _check_consistency(self) -> "CertificationCheckResult":
        if self.passed != self.checks.all_passed:
            raise ValueError("passed must equal the conjunction of all checks")
        if self.passed != (self.score == 100):
            raise ValueError("passed must hold exactly when score is 100")
        return self

    def to_audit_json(self) -> str:
        """Serialize the full result for the application's audit trail."""
        return json.dumps(self.model_dump(by_alias=True), separators=(",", ":"))
