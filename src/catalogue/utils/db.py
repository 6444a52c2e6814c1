from protean.domain import Domain
from sqlalchemy import create_engine

FETCH_BATCH_SIZE = 100


def setup_db(domain: Domain):
    """Setup database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in ("sqlite", "postgresql"):
                engine = create_engine(provider.conn_info["database_uri"])

                for _, aggregate_record in domain.registry.aggregates.items():
                    if aggregate_record.cls.meta_.provider == provider.name:
                        domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

                for _, entity_record in domain.registry.entities.items():
                    if entity_record.cls.meta_.provider == provider.name:
                        domain.repository_for(entity_record.cls)._dao  # noqa: B018

                provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in ("sqlite", "postgresql"):
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)


def fetch_all(query, batch_size=FETCH_BATCH_SIZE):
    """Drain a DAO query page by page.

    Protean querysets are limited by default, so full scans (the category
    tree, product search) walk the result in fixed-size batches.
    Batches are ordered by id so that OFFSET paging is stable on SQL
    providers.
    """
    query = query.order_by("id")
    records = []
    offset = 0
    while True:
        batch = query.offset(offset).limit(batch_size).all().items
        records.extend(batch)
        if len(batch) < batch_size:
            return records
        offset += batch_size
