from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # Trees must hold strictly fewer leaves than this
    max_tree_size: int = Field(default=1000000, alias="MERKLE_MAX_TREE_SIZE")

    # Exclusive upper bound for mock leaf seeds used by the CLI driver
    leaf_seed_max: int = Field(default=100, alias="MERKLE_LEAF_SEED_MAX")

    log_level: str = Field(default="INFO", alias="MERKLE_LOG_LEVEL")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()  # load at import
