"""Personal hydration reminder: intake counter and do-not-disturb aware scheduling."""

__version__ = "0.1.0"
