"""
Pydantic schemas for the site configuration file

The file keeps the layout used by existing deployments:

    {
        "SiteConfig": {"DisableYellowFilter": false, "BannedTerms": ["..."]},
        "SourceConfig": [{"key": "siteA", "name": "A", "api": "http://x/api"}],
        "UserConfig": {"Users": [{"username": "u1", "enabledApis": ["siteA"]}]}
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional


class SiteSettings(BaseModel):
    """Organization-wide site settings"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    disable_yellow_filter: bool = Field(False, alias="DisableYellowFilter")
    banned_terms: List[str] = Field(default_factory=list, alias="BannedTerms")


class SourceEntry(BaseModel):
    """One configured content source"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    key: str = Field(..., min_length=1)
    name: str = ""
    api: str = Field(..., min_length=1)
    detail: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    disabled: bool = False


class UserEntry(BaseModel):
    """Per-user access settings"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: str = Field(..., min_length=1)
    role: str = "user"
    banned: bool = False
    enabled_apis: List[str] = Field(default_factory=list, alias="enabledApis")


class UserConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    users: List[UserEntry] = Field(default_factory=list, alias="Users")


class SiteConfigFile(BaseModel):
    """Top-level site configuration file"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    site_config: SiteSettings = Field(default_factory=SiteSettings, alias="SiteConfig")
    source_config: List[SourceEntry] = Field(default_factory=list, alias="SourceConfig")
    user_config: UserConfig = Field(default_factory=UserConfig, alias="UserConfig")

    @field_validator("source_config")
    @classmethod
    def validate_unique_keys(cls, v):
        """Source keys must be unique"""
        seen = set()
        for source in v:
            if source.key in seen:
                raise ValueError(f"Duplicate source key: {source.key}")
            seen.add(source.key)
        return v
