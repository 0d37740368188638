"""News reader: fetch client and presentation state controller."""

from .client import NewsClient, build_query_params
from .config import ConfigError, ReaderConfig, load_config
from .controller import NewsController
from .exceptions import DecodeError, NetworkError, NewsFetchError
from .models import ControllerState, FilterParameters
from .schemas import ArticleRecord, FetchResult

__all__ = [
    "ArticleRecord",
    "ConfigError",
    "ControllerState",
    "DecodeError",
    "FetchResult",
    "FilterParameters",
    "NetworkError",
    "NewsClient",
    "NewsController",
    "NewsFetchError",
    "ReaderConfig",
    "build_query_params",
    "load_config",
]
