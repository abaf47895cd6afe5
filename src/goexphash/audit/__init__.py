"""Audit logging subsystem for goexphash.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: run identifier factory
"""

from goexphash.audit.helpers import generate_run_id, get_package_version
from goexphash.audit.logger import AuditLogger
from goexphash.audit.models import LOG_LEVELS, LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "LOG_LEVELS",
    "generate_run_id",
    "get_package_version",
]
