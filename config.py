"""
Configuration management for the cluster controller
"""
import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name, default):
    """Read a true/false environment variable"""
    return os.getenv(name, default).strip().lower() in ('true', '1', 'yes')


class Config:
    """Controller configuration"""

    # Reject user-supplied labels that use a reserved strimzi.io key.
    # Setting this to false only logs a warning and keeps the label.
    STRICT_USER_LABELS = _env_flag('STRICT_USER_LABELS', 'true')

    # Logging configuration
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_FORMAT = os.getenv('LOG_FORMAT', '%(asctime)s %(levelname)s [%(name)s] %(message)s')

    @staticmethod
    def init_logging(level=None):
        """
        Initialize logging for the controller process

        Args:
            level: Optional level name overriding LOG_LEVEL
        """
        logging.basicConfig(
            level=getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO),
            format=Config.LOG_FORMAT
        )
