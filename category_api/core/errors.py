"""
Error taxonomy for category resolution

Every error a caller can see maps to exactly one HTTP status and one
user-facing message. Upstream detail stays in the server log.
"""

from enum import Enum
from typing import Optional

CATEGORY_FETCH_FAILED_MESSAGE = "获取分类列表失败"


class CategoryResolutionError(Exception):
    """Base class for errors returned to the caller of a category lookup"""

    status_code: int = 500
    message: str = CATEGORY_FETCH_FAILED_MESSAGE

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthenticated(CategoryResolutionError):
    """No identity, or an identity without a username"""

    status_code = 401
    message = "Unauthorized"


class MissingParameter(CategoryResolutionError):
    """A required query parameter was not supplied"""

    status_code = 400

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"缺少参数: {parameter}")


class SourceNotFound(CategoryResolutionError):
    """The source key is not among the caller's permitted sites"""

    status_code = 404

    def __init__(self, source_key: str):
        self.source_key = source_key
        super().__init__(f"未找到指定的视频源: {source_key}")


class UpstreamFailure(CategoryResolutionError):
    """The provider request timed out, failed, or returned a bad status"""

    status_code = 500


class InternalError(CategoryResolutionError):
    """Unexpected fault while processing a provider payload"""

    status_code = 500


class FetchErrorKind(str, Enum):
    """Why a provider request failed"""

    TIMEOUT = "timeout"
    BAD_STATUS = "bad_status"
    NETWORK = "network"
    INVALID_BODY = "invalid_body"


class FetchError(Exception):
    """Raised by the category fetcher when a provider request fails"""

    def __init__(self, kind: FetchErrorKind, detail: str, status_code: Optional[int] = None):
        self.kind = kind
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"{kind.value}: {detail}")
