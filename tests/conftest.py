"""
Pytest fixtures for certification tests. Uses an in-memory storage fake for
evaluator tests and a temporary SQLite DB for repository tests.
"""

from __future__ import annotations

import pytest

from vendor_certification.core.models import ApplicationStatus, CertificationApplication, Deployment


class FakeStorage:
    """In-memory storage collaborator that records every status update."""

    def __init__(self):
        self.applications: dict[str, CertificationApplication] = {}
        self.deployments: list[Deployment] = []
        self.updates: list[tuple[str, ApplicationStatus, bool, str]] = []
        self.deployment_lookups: list[str] = []

    def add_application(self, **fields) -> CertificationApplication:
        fields.setdefault("id", f"app-{len(self.applications) + 1}")
        fields.setdefault("vendor_id", "vendor-1")
        application = CertificationApplication(**fields)
        self.applications[application.id] = application
        return application

    def add_deployment(self, vendor_id: str, status: str = "active") -> Deployment:
        deployment = Deployment(id=f"dep-{len(self.deployments) + 1}", vendor_id=vendor_id, status=status)
        self.deployments.append(deployment)
        return deployment

    async def get_certification_application(self, application_id):
        return self.applications.get(application_id)

    async def get_deployments_by_vendor(self, vendor_id):
        self.deployment_lookups.append(vendor_id)
        return [d for d in self.deployments if d.vendor_id == vendor_id]

    async def update_certification_application_status(self, application_id, status, passed, details_json):
        self.updates.append((application_id, status, passed, details_json))


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def sqlite_data_dir(tmp_path, monkeypatch):
    """
    Point the database at a temporary SQLite file and reset the engine cache.
    Each test must call init_db()/close_db() inside its own event loop.
    """
    import vendor_certification.db as db

    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setattr(db, "_engine", None)
    monkeypatch.setattr(db, "_session_factory", None)
    return tmp_path
