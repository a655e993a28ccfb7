"""SQLAlchemy-backed storage for certification applications and deployments.

Implements the storage contract the evaluator consumes, plus a few helpers
for seeding and listing applications. Rows are validated into core models
on the way out; database errors propagate to the caller.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .core.exceptions import ApplicationNotFoundError
from .core.models import ApplicationStatus, CertificationApplication, Deployment, DeploymentStatus
from .db import get_session_factory
from .sqlmodels import CertificationApplicationRow, DeploymentRow

logger = logging.getLogger(__name__)


class SqlCertificationStorage:
    """Storage collaborator backed by the async SQLAlchemy session factory."""

    def __init__(self, session_factory: Optional[async_sessionmaker[AsyncSession]] = None):
        self._session_factory = session_factory

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory or get_session_factory()

    async def get_certification_application(self, application_id: str) -> Optional[CertificationApplication]:
        async with self.session_factory() as session:
            row = await session.get(CertificationApplicationRow, application_id)
            if row is None:
                return None
            return CertificationApplication.model_validate(row)

    async def get_deployments_by_vendor(self, vendor_id: str) -> list[Deployment]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(DeploymentRow)
                .where(DeploymentRow.vendor_id == vendor_id)
                .order_by(DeploymentRow.created_at)
            )
            return [Deployment.model_validate(row) for row in result.scalars()]

    async def update_certification_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        passed: bool,
        details_json: str,
    ) -> None:
        async with self.session_factory() as session:
            row = await session.get(CertificationApplicationRow, application_id)
            if row is None:
                raise ApplicationNotFoundError(application_id)
            row.status = ApplicationStatus(status).value
            row.automated_checks_passed = passed
            row.automated_check_details = details_json
            row.updated_at = datetime.utcnow()
            await session.commit()
        logger.debug("Application %s status set to %s", application_id, status)

    async def create_certification_application(
        self,
        vendor_id: str,
        tier_requested: str,
        documentation_urls: Optional[list[str]] = None,
        compliance_statements: Optional[str | dict[str, Any]] = None,
        application_id: Optional[str] = None,
    ) -> CertificationApplication:
        """Insert a new pending application and return it."""
        if isinstance(compliance_statements, dict):
            compliance_statements = json.dumps(compliance_statements)

        row = CertificationApplicationRow(
            id=application_id or uuid.uuid4().hex,
            vendor_id=vendor_id,
            tier_requested=tier_requested,
            documentation_urls=documentation_urls,
            compliance_statements=compliance_statements,
            status=ApplicationStatus.PENDING.value,
            created_at=datetime.utcnow(),
            updated_at=datetime.utcnow(),
        )
        async with self.session_factory() as session:
            session.add(row)
            await session.commit()
        logger.info("Created certification application %s (vendor %s, tier %s)", row.id, vendor_id, tier_requested)
        return CertificationApplication.model_validate(row)

    async def create_deployment(
        self,
        vendor_id: str,
        status: str = DeploymentStatus.ACTIVE.value,
        deployment_id: Optional[str] = None,
    ) -> Deployment:
        row = DeploymentRow(
            id=deployment_id or uuid.uuid4().hex,
            vendor_id=vendor_id,
            status=status,
            created_at=datetime.utcnow(),
        )
        async with self.session_factory() as session:
            session.add(row)
            await session.commit()
        return Deployment.model_validate(row)

    async def list_certification_applications(
        self,
        status: Optional[ApplicationStatus] = None,
    ) -> list[CertificationApplication]:
        """List applications, newest first, optionally filtered by status."""
        query = select(CertificationApplicationRow).order_by(CertificationApplicationRow.created_at.desc())
        if status is not None:
            query = query.where(CertificationApplicationRow.status == ApplicationStatus(status).value)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [CertificationApplication.model_validate(row) for row in result.scalars()]
