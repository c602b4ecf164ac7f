"""Schema management for SQL-backed providers.

Memory providers need no schema, so only ``sqlite`` and ``postgresql``
providers are touched. Table metadata is registered lazily when a DAO is
first built, which is why every repository is touched before
``create_all``.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    return [provider for provider in domain.providers.values() if provider.conn_info["provider"] in SQL_PROVIDERS]


def _register_tables(domain: Domain, provider) -> None:
    registries = (domain.registry.aggregates, domain.registry.entities, domain.registry.projections)
    for registry in registries:
        for record in registry.values():
            if record.cls.meta_.provider == provider.name:
                domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for every SQL provider of ``domain``."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _register_tables(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    """Drop the tables created by ``setup_db``."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
