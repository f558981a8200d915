"""Shared cross-cutting helpers: telemetry and small utilities."""
