import logging
import logging.config
from typing import Optional


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Set default user if not provided
        return True


def build_logging_config(level: str = 'INFO', log_file: Optional[str] = None) -> dict:
    handler_names = ['console']
    handlers = {
        'console': {
            'level': level,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['user_filter']
        },
    }
    if log_file:
        handlers['file'] = {
            'level': level,
            'class': 'logging.FileHandler',
            'filename': log_file,
            'formatter': 'standard',
            'filters': ['user_filter']
        }
        handler_names.append('file')

    logger_config = {'handlers': handler_names, 'level': level, 'propagate': False}
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
            },
        },
        'filters': {
            'user_filter': {
                '()': UserFilter,
            },
        },
        'handlers': handlers,
        'loggers': {
            'handlers': dict(logger_config),
            'repositories': dict(logger_config),
            'store': dict(logger_config),
            'sessions': dict(logger_config),
            '': {
                'handlers': handler_names,
                'level': level,
                'propagate': True,
            }
        }
    }


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    logging.config.dictConfig(build_logging_config(level, log_file))
