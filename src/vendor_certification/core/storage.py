"""Storage collaborator contract consumed by the evaluator.

Implementations must return validated models, not raw rows. Errors raised by
the backend propagate to the caller untouched.
"""

from __future__ import annotations

from typing import Optional, Protocol

from .models import ApplicationStatus, CertificationApplication, Deployment


class CertificationStorage(Protocol):
    async def get_certification_application(self, application_id: str) -> Optional[CertificationApplication]:
        ...

    async def get_deployments_by_vendor(self, vendor_id: str) -> list[Deployment]:
        ...

    async def update_certification_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        passed: bool,
        details_json: str,
    ) -> None:
        ...
