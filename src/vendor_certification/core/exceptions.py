"""Domain exceptions for certification processing."""

from __future__ import annotations


class CertificationError(Exception):
    """Base class for certification errors."""


class ApplicationNotFoundError(CertificationError, LookupError):
    """Raised when an application id does not resolve to a stored record."""

    def __init__(self, application_id: str):
        self.application_id = application_id
        super().__init__(f"Application not found: {application_id}")
