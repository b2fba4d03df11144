"""
Pydantic schemas for sites, categories and the content filter policy
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional


class Identity(BaseModel):
    """Authenticated caller on whose behalf sources are resolved"""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Login name of the caller")
    role: Optional[str] = Field(None, description="Role carried by the auth cookie")


class Site(BaseModel):
    """An external content provider reachable through its classification endpoint"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Unique source key", examples=["siteA"])
    name: str = Field("", description="Display name of the source")
    api: str = Field(..., min_length=1, description="Base API endpoint", examples=["http://x/api"])
    detail: Optional[str] = Field(None, description="Detail page base URL")
    headers: Dict[str, str] = Field(default_factory=dict, description="Headers sent to the provider")


class Category(BaseModel):
    """Canonical category: provider identifiers are always strings"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Provider category identifier as a string", examples=["1"])
    name: str = Field("", description="Display name", examples=["动作片"])


class FilterPolicy(BaseModel):
    """Content policy applied to category names"""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(True, description="Whether banned terms are filtered out")
    banned_terms: List[str] = Field(default_factory=list, description="Substrings that hide a category")

    @field_validator("banned_terms")
    @classmethod
    def drop_empty_terms(cls, v):
        """An empty term would match every name"""
        return [term for term in v if term]


class CategoryListResponse(BaseModel):
    """Successful category lookup"""

    categories: List[Category] = Field(default_factory=list, description="Filtered categories")


class ErrorResponse(BaseModel):
    """Error body returned by the categories endpoint"""

    error: str = Field(..., description="User-facing error message")
