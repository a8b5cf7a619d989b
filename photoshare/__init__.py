"""PhotoShare: authenticated REST backend for user accounts and photo records."""

__version__ = "1.0.0"
