import logging
from pathlib import Path
from typing import Dict, Any, Tuple

from .logging_config import set_log_level
from .utils import load_settings

logger = logging.getLogger(__name__)


class Config:
    """Settings shared by the whole process. Used through class methods only."""
    _config: Dict[str, Any] = {}

    @classmethod
    def initialize(cls, config_file: str) -> Dict[str, Any]:
        """Load settings from a json file and apply the configured log level"""
        cls._config = cls._read(config_file)
        set_log_level(cls._config.get('log_level'))
        return cls._config

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        return cls._config.get(key, default)

    @classmethod
    def get_db_params(cls) -> Tuple[str, str]:
        """Connection string and database name, falling back to the defaults"""
        defaults = cls.defaults()
        return (
            cls._config.get('db_uri', defaults['db_uri']),
            cls._config.get('db_name', defaults['db_name'])
        )

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return {
            'db_uri': 'mongodb://localhost:27017',
            'db_name': 'default_db',
            'log_level': 'info',
        }

    @classmethod
    def _read(cls, config_file: str) -> Dict[str, Any]:
        # file values win; anything the file leaves out comes from defaults()
        settings = cls.defaults()
        if config_file and Path(config_file).exists():
            settings.update(load_settings(Path(config_file)))
        else:
            logger.warning(f'No settings file at "{config_file}", connecting to {settings["db_uri"]}')
        return settings
