"""
Source category API: per-user category taxonomies from external content sources
"""

__version__ = "1.0.0"
