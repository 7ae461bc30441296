"""Core building blocks: settings, exceptions, dependency wiring."""
