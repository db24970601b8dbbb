"""Static checks for Terraform provider schema compatibility and documentation."""

from .service import CheckResult, SchemaCheckService

__all__ = ["CheckResult", "SchemaCheckService"]
