from dependency_injector import containers, providers

from tokensync.config import Settings
from tokensync.db.session import build_engine, build_session_factory
from tokensync.infra.blockchain.starknet.rpc_client import StarknetRPCClient
from tokensync.infra.http.rate_limited_client import RateLimitedClient
from tokensync.sync.indexer import BlockIndexer


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    ledger = providers.Singleton(
        StarknetRPCClient,
        rpc_url=settings.provided.starknet_rpc_url,
        http_client=http_client,
    )

    # New indexer, and not-a-match cache, per run.
    indexer = providers.Factory(
        BlockIndexer,
        session_factory=session_factory,
        ledger=ledger,
        verify_previous_owner=settings.provided.strict_ownership,
    )
