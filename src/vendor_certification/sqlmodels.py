"""SQLAlchemy models for certification applications and vendor deployments.

Rows are converted to pydantic models in the repository before they reach
the evaluator.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class CertificationApplicationRow(Base):
    """A vendor's certification application and its latest automated check outcome."""

    __tablename__ = "certification_applications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    vendor_id: Mapped[str] = mapped_column(String(64), nullable=False)
    tier_requested: Mapped[str] = mapped_column(String(20), nullable=False)
    documentation_urls: Mapped[list | None] = mapped_column(JSON, nullable=True)
    compliance_statements: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    automated_checks_passed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    automated_check_details: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_application_vendor", "vendor_id"),
        Index("ix_application_status", "status"),
    )


class DeploymentRow(Base):
    """A vendor deployment with a health system."""

    __tablename__ = "deployments"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    vendor_id: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_deployment_vendor_status", "vendor_id", "status"),
    )
