"""Configuration module for the storefront pricing package."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class."""

    ENV = os.getenv('STOREFRONT_ENV', 'development')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Database - in-memory SQLite unless told otherwise
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///:memory:')
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_ECHO = os.getenv('SQLALCHEMY_ECHO', 'false').lower() == 'true'

    # Cart pricing rules
    DELIVERY_FEE_SMALL = os.getenv('DELIVERY_FEE_SMALL', '5.00')  # 1-3 items
    DELIVERY_FEE_MEDIUM = os.getenv('DELIVERY_FEE_MEDIUM', '12.50')  # 4-10 items
    DELIVERY_FEE_LARGE = os.getenv('DELIVERY_FEE_LARGE', '20.00')  # more than 10
    ELECTRONICS_SURCHARGE = os.getenv('ELECTRONICS_SURCHARGE', '7.50')


class TestingConfig(Config):
    """Configuration used by the test suite."""

    ENV = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ECHO = False
