"""Engine factory for the journey store."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool


def create_journey_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine usable from the worker threads the repository runs queries on.

    In-memory SQLite gets a single shared connection, otherwise every thread
    would see its own empty database.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=echo)
