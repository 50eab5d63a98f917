"""
Configuration Management
========================

Centralized configuration for the scraper API, read from the environment
(and a `.env` file in the working directory, if present).
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Application configuration"""

    # Server Configuration
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 3000))
    DEBUG = _env_bool('DEBUG', 'False')

    # Browser Configuration
    HEADLESS = _env_bool('HEADLESS', 'True')
    USER_AGENT = os.getenv(
        'USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
    )

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


# Global config instance
config = Config()
