"""
Version information for the job board.

This file is the single source of truth for version numbers.
Both the client core and the jobs API import from here.
"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
