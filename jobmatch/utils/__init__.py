"""
Shared utilities for JobMatch.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Text display helpers
- Timestamps for log session directories
"""

from jobmatch.utils.timestamp import now

__all__ = ["now"]
