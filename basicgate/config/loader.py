import json

from threading import Lock

from basicgate.config.models import BasicAuthConfig
from basicgate.logger import get_logger

logger = get_logger(__name__)

config_lock = Lock()


def get_file_config(filepath: str) -> BasicAuthConfig | None:
    with config_lock:
        try:
            with open(filepath) as f:
                config = BasicAuthConfig(**json.load(f))
                logger.info(f"Nb users: {len(config.users)}")
                return config
        except FileNotFoundError:
            logger.error(f"File {filepath} not found")
            return None
