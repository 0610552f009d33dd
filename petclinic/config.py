# petclinic/config.py

import os
import logging
import logging.config
from typing import Optional, Union

# --- Logging Configuration ---
LOG_LEVEL_ENV_VAR = "PETCLINIC_LOG_LEVEL"
LOG_LEVEL = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper())
if not isinstance(LOG_LEVEL, int): # unknown level names come back as "Level X"
    LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s.%(funcName)s:%(lineno)d - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': LOG_DATE_FORMAT,
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': logging.DEBUG,
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
}


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Applies LOGGING_CONFIG to the root logger.
    :param level: Optional root level (int or level name) overriding LOG_LEVEL.
    """
    config = dict(LOGGING_CONFIG)
    config['root'] = dict(LOGGING_CONFIG['root'])
    if level is not None:
        config['root']['level'] = level.upper() if isinstance(level, str) else level
    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug(f"Logging configured with root level {config['root']['level']}")
