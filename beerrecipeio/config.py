from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

DEFAULT_USER_AGENT = "beerrecipeio/0.1"


class DecoderSettings(BaseSettings):
    http_timeout: float = Field(30.0, validation_alias="BEERRECIPEIO_HTTP_TIMEOUT")
    verify_tls: bool = Field(True, validation_alias="BEERRECIPEIO_VERIFY_TLS")
    follow_redirects: bool = Field(True, validation_alias="BEERRECIPEIO_FOLLOW_REDIRECTS")
    user_agent: str = Field(DEFAULT_USER_AGENT, validation_alias="BEERRECIPEIO_USER_AGENT")

    log_ring_size: int = Field(200, validation_alias="BEERRECIPEIO_LOG_RING_SIZE")
    log_propagate: bool = Field(False, validation_alias="BEERRECIPEIO_LOG_PROPAGATE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
