from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "tokensync"
    starknet_rpc_url: str = "https://starknet-mainnet.public.blastapi.io/rpc/v0_7"
    rpc_rate_per_second: float = 5.0
    rpc_timeout: float = 30.0
    strict_ownership: bool = False  # reject ERC721 transfers whose `from` is not the recorded owner
    debug: bool = False

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    class Config:
        env_file = ".env"
        env_prefix = "TOKENSYNC_"

