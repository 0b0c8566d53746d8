import logging
from typing import Optional

from pydantic import PrivateAttr, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Loan Admin Client"
    debug: bool = False

    api_base_url: str = "https://apiloantrix.seotube.in/api"
    # None disables the timeout: a hung request waits until the network stack gives up
    request_timeout: Optional[float] = None
    session_file: str = ".loan_admin_session.json"
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "LOAN_ADMIN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    _is_local: bool = PrivateAttr(default=False)

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def model_post_init(self, __context: object) -> None:
        _host = self.api_base_url.split("://")[-1].split("/")[0].split(":")[0].lower()
        self._is_local = _host in ("localhost", "127.0.0.1")

    @property
    def is_local(self) -> bool:
        return self._is_local


def configure_logging(config: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """Apply the level of `config` (the module settings by default) to this project's loggers."""
    config = config or settings
    name = (level or ("DEBUG" if config.debug else config.log_level)).upper()
    for logger_name in ("api", "services", "client"):
        logging.getLogger(logger_name).setLevel(name)


settings = Settings()
