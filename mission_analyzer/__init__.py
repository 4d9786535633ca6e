"""
mission-analyzer: find the longest qualifying missions in a pipe-delimited mission log.
"""

__version__ = "1.0.0"
