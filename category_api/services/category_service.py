"""
Category resolution: identity check, source lookup, fetch, normalize, filter
"""

import logging
from functools import lru_cache
from typing import List, Optional

from category_api.core.config import settings
from category_api.core.errors import (
    FetchError,
    InternalError,
    MissingParameter,
    SourceNotFound,
    Unauthenticated,
    UpstreamFailure,
)
from category_api.schemas.category import Category, Identity, Site
from category_api.services import content_filter
from category_api.services.category_fetcher import CategoryFetcher
from category_api.services.normalizer import normalize
from category_api.services.site_registry import (
    ConfigFilterPolicyProvider,
    ConfigSiteRegistry,
    FilterPolicyProvider,
    SiteRegistry,
    load_site_config,
)

logger = logging.getLogger(__name__)


class CategoryResolutionService:
    """Resolves the filtered category list of one source for one user"""

    def __init__(self, registry: SiteRegistry, policy_provider: FilterPolicyProvider,
                 fetcher: CategoryFetcher):
        self.registry = registry
        self.policy_provider = policy_provider
        self.fetcher = fetcher

    def resolve_site(self, identity: Identity, source_key: str) -> Site:
        """
        Find a source among the sites the user may query

        Raises:
            SourceNotFound: The key is unknown or not permitted for this user
        """
        for site in self.registry.permitted_sites(identity):
            if site.key == source_key:
                return site
        raise SourceNotFound(source_key)

    async def resolve(self, identity: Optional[Identity], source_key: Optional[str]) -> List[Category]:
        """
        Get the filtered categories of a source

        Args:
            identity: Authenticated caller, or None
            source_key: Requested source key

        Returns:
            Canonical categories in provider order

        Raises:
            Unauthenticated, MissingParameter, SourceNotFound, UpstreamFailure, InternalError
        """
        if identity is None or not identity.username:
            raise Unauthenticated()

        if not source_key:
            raise MissingParameter("source")

        site = self.resolve_site(identity, source_key)

        try:
            raw = await self.fetcher.fetch(site)
        except FetchError as e:
            logger.error(f"Failed to get categories for {source_key}: {e}")
            raise UpstreamFailure() from e

        try:
            categories = normalize(raw)
            return content_filter.apply(categories, self.policy_provider.current())
        except Exception as e:
            logger.error(f"Failed to process categories for {source_key}: {e}", exc_info=True)
            raise InternalError() from e


@lru_cache
def get_category_service() -> CategoryResolutionService:
    """Process-wide service built once from settings and the site config file"""
    config = load_site_config(settings.SITE_CONFIG_PATH)
    return CategoryResolutionService(
        registry=ConfigSiteRegistry(config, default_headers=settings.default_upstream_headers),
        policy_provider=ConfigFilterPolicyProvider(config, settings),
        fetcher=CategoryFetcher(timeout=settings.UPSTREAM_TIMEOUT_SECONDS),
    )
