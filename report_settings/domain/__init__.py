"""Domain models used across application layer boundaries."""

from .models import DatabaseHealthReport, EmailAddress

__all__ = ["DatabaseHealthReport", "EmailAddress"]
