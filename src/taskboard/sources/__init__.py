from config.settings import Settings, settings as default_settings
from taskboard.client.http import ApiClient
from taskboard.sources.base import DataSource
from taskboard.sources.fallback import FallbackDataSource
from taskboard.sources.memory import MemoryDataSource
from taskboard.sources.remote import RemoteDataSource


def create_data_source(settings: Settings | None = None) -> DataSource:
    """Build the data source the application should use.

    With fallback enabled this is the remote backend backed by the seeded
    in-memory store; otherwise the remote backend alone.
    """
    settings = settings or default_settings
    client = ApiClient(settings.api_base_url, timeout=settings.api_timeout_seconds)
    remote = RemoteDataSource(client)
    if not settings.fallback_enabled:
        return remote
    return FallbackDataSource(remote, MemoryDataSource(delay_ms=settings.fallback_delay_ms))


__all__ = [
    "DataSource",
    "FallbackDataSource",
    "MemoryDataSource",
    "RemoteDataSource",
    "create_data_source",
]
