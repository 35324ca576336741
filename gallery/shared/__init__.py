"""Shared cross-cutting helpers (logging, telemetry)."""
