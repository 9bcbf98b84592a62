# contacts_api/logging_setup.py
import logging
import os
from logging.handlers import RotatingFileHandler

def setup_logging(app):
    """
    Sets up the 'contacts_api' logger with a console handler and, when
    LOG_FILE is configured, a rotating file handler.
    """
    logger = logging.getLogger('contacts_api')
    logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Prevent duplicate handlers when the app factory runs more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(app.config['LOG_FORMAT'])

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = app.config.get('LOG_FILE')
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=app.config['LOG_MAX_BYTES'],
            backupCount=app.config['LOG_BACKUP_COUNT']
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
