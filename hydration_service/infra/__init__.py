"""Infrastructure adapters (logging, settings storage, notifications)."""
