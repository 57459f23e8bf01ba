"""Observability module for audit logging."""

from resource_access.observability.audit import AuditSink, JSONLAuditSink, StdoutAuditSink

__all__ = ["AuditSink", "JSONLAuditSink", "StdoutAuditSink"]
