"""Runtime services (telemetry and its settings)."""
