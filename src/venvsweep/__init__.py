"""Find and delete Python project virtualenvs."""

__version__ = "0.1.0"
