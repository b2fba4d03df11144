"""
Pydantic schemas for API responses and the site configuration file
"""

from .category import (
    Identity, Site, Category, FilterPolicy, CategoryListResponse, ErrorResponse
)
from .site_config import SiteConfigFile, SiteSettings, SourceEntry, UserConfig, UserEntry

__all__ = [
    # Category schemas
    "Identity", "Site", "Category", "FilterPolicy", "CategoryListResponse", "ErrorResponse",
    # Site config file schemas
    "SiteConfigFile", "SiteSettings", "SourceEntry", "UserConfig", "UserEntry"
]
