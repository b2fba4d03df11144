"""
Site registry and filter policy backed by the site configuration file
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from pydantic import ValidationError

from category_api.core.config import Settings
from category_api.schemas.category import FilterPolicy, Identity, Site
from category_api.schemas.site_config import SiteConfigFile, SourceEntry

logger = logging.getLogger(__name__)


class SiteConfigError(Exception):
    """Custom exception for an unreadable or invalid site configuration file"""
    pass


class SiteRegistry(Protocol):
    """Resolves an identity to the sites it may query"""

    def permitted_sites(self, identity: Identity) -> List[Site]:
        ...


class FilterPolicyProvider(Protocol):
    """Supplies the content filter policy in force"""

    def current(self) -> FilterPolicy:
        ...


def load_site_config(path: Optional[str]) -> SiteConfigFile:
    """
    Load and validate the site configuration file

    Args:
        path: Path to the JSON file, or None for an empty configuration

    Returns:
        Parsed configuration
    """
    if not path:
        logger.warning("SITE_CONFIG_PATH not set, no content sources configured")
        return SiteConfigFile()

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SiteConfigError(f"Failed to read site config {path}: {e}") from e

    try:
        config = SiteConfigFile.model_validate(raw)
    except ValidationError as e:
        raise SiteConfigError(f"Invalid site config {path}: {e}") from e

    logger.info(f"Loaded {len(config.source_config)} sources from {path}")
    return config


class ConfigSiteRegistry:
    """Site registry over a loaded configuration; read-only after construction"""

    def __init__(self, config: SiteConfigFile, default_headers: Optional[Dict[str, str]] = None):
        self._default_headers = dict(default_headers or {})
        self._sites = [
            self._to_site(source) for source in config.source_config if not source.disabled
        ]
        self._users = {user.username: user for user in config.user_config.users}

    def _to_site(self, source: SourceEntry) -> Site:
        headers = {**self._default_headers, **source.headers}
        return Site(
            key=source.key,
            name=source.name,
            api=source.api,
            detail=source.detail,
            headers=headers,
        )

    def permitted_sites(self, identity: Identity) -> List[Site]:
        """
        Get the sites a user may query

        Args:
            identity: Authenticated caller

        Returns:
            Enabled sites, narrowed to the user's enabled APIs when the user has any
        """
        user = self._users.get(identity.username)
        if user is None:
            return list(self._sites)

        if user.banned:
            return []

        if user.enabled_apis:
            allowed = set(user.enabled_apis)
            return [site for site in self._sites if site.key in allowed]

        return list(self._sites)


class ConfigFilterPolicyProvider:
    """Filter policy from the configuration file with settings overrides applied"""

    def __init__(self, config: SiteConfigFile, settings: Settings):
        disabled = config.site_config.disable_yellow_filter
        if settings.DISABLE_CONTENT_FILTER is not None:
            disabled = settings.DISABLE_CONTENT_FILTER

        self._policy = FilterPolicy(
            enabled=not disabled,
            banned_terms=[*config.site_config.banned_terms, *settings.BANNED_TERMS],
        )

    def current(self) -> FilterPolicy:
        return self._policy
