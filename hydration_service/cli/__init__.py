"""Command line interface for hydration-service."""
