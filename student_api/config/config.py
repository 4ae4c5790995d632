"""
Application Configuration

FLOW OVERVIEW
- Config.__init__
  • Reads FLASK_ENV to select which .env file to load (dev/prod). Testing bypasses file load.
- Properties expose configuration values, defaulting to sensible development-safe defaults.
"""

import os
from dotenv import load_dotenv

class Config:
    """Base configuration class"""

    def __init__(self):
        # Load environment variables based on FLASK_ENV
        env_file = os.getenv('FLASK_ENV', 'development')
        if env_file == 'testing':
            # For testing, don't load config files, use environment variables directly
            pass
        elif env_file == 'production':
            load_dotenv('config.prod.env')
        else:
            load_dotenv('config.env')

    @property
    def SECRET_KEY(self):
        """Application secret key"""
        return os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        """Database connection URI"""
        return os.getenv('DATABASE_URL', 'sqlite:///:memory:')

    @property
    def SQLALCHEMY_TRACK_MODIFICATIONS(self):
        return False

    @property
    def SQLALCHEMY_ECHO(self):
        """Log every SQL statement"""
        return os.getenv('SQLALCHEMY_ECHO', 'False').lower() == 'true'

    @property
    def DEFAULT_PAGE_LIMIT(self):
        """Page size used when ?limit is missing or unusable"""
        return int(os.getenv('DEFAULT_PAGE_LIMIT', 10))

    @property
    def LOG_LEVEL(self):
        """Level for the application logger"""
        return os.getenv('LOG_LEVEL', 'INFO').upper()
