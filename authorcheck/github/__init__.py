"""GitHub REST API access used by the detector and CLI."""

from .api import ApiRequest, FetchError
from .content import ContentFetcher, decode_base64_content
from .pulls import PullRequestFilesClient

__all__ = [
    "ApiRequest",
    "ContentFetcher",
    "FetchError",
    "PullRequestFilesClient",
    "decode_base64_content",
]
