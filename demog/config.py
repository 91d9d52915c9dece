import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_STATE_BASE_URL = 'https://www.broadbandmap.gov/broadbandmap/census/state/'
DEFAULT_DEMOGRAPHIC_BASE_URL = 'https://www.broadbandmap.gov/broadbandmap/demographic/jun2014/'
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = 'WARNING'


@dataclass(frozen=True)
class Config:
    """Runtime settings read from the environment (and an optional .env file)"""
    state_base_url: str = DEFAULT_STATE_BASE_URL
    demographic_base_url: str = DEFAULT_DEMOGRAPHIC_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> 'Config':
        load_dotenv()

        raw_timeout = os.getenv('DEMOG_TIMEOUT', str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"DEMOG_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
        if timeout <= 0:
            raise ValueError(f"DEMOG_TIMEOUT must be positive, got {raw_timeout!r}")

        log_level = os.getenv('DEMOG_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"DEMOG_LOG_LEVEL must be a logging level name, got {log_level!r}")

        config = cls(
            state_base_url=os.getenv('DEMOG_STATE_BASE_URL', DEFAULT_STATE_BASE_URL),
            demographic_base_url=os.getenv('DEMOG_DEMOGRAPHIC_BASE_URL', DEFAULT_DEMOGRAPHIC_BASE_URL),
            timeout=timeout,
            log_level=log_level
        )
        logger.debug(f"Loaded configuration: {config}")
        return config
