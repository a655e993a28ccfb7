"""Vendor Certification MCP Server.

Automated eligibility checks for vendor certification applications —
documentation, compliance statements, and deployment history scored
against Silver, Gold, and Platinum tier requirements.
"""

__version__ = "0.1.0"

from .core.evaluator import CertificationEvaluator, process_certification_application
from .core.exceptions import ApplicationNotFoundError
from .core.models import CertificationCheckResult
