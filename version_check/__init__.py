"""Release version check: naming convention and tag/release history."""

__version__ = "1.0.0"
