"""Client library for the PerfRepo performance test result repository."""

from perfrepo_client.client import PerfRepoClient
from perfrepo_client.config import PerfRepoConfig
from perfrepo_client.errors import (
    EnumParseError,
    NotFoundError,
    ParseError,
    PerfRepoError,
    TimestampParseError,
    UnexpectedElementError,
    UnexpectedStatusError,
)

__all__ = [
    "EnumParseError",
    "NotFoundError",
    "ParseError",
    "PerfRepoClient",
    "PerfRepoConfig",
    "PerfRepoError",
    "TimestampParseError",
    "UnexpectedElementError",
    "UnexpectedStatusError",
]
