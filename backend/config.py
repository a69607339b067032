"""
Configuration for the recipe suggester
"""

import os

from dotenv import load_dotenv

load_dotenv()

def _timeout():
    value = os.environ.get('GEMINI_TIMEOUT')
    return float(value) if value else None

class Config:
    """Base configuration class"""
    # Flask secret key for the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
    GEMINI_API_URL = os.environ.get('GEMINI_API_URL') or 'https://generativelanguage.googleapis.com/v1beta/models'
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL') or 'gemini-1.5-flash'
    # None means wait for the model as long as it takes
    GEMINI_TIMEOUT = _timeout()

    DEBUG = os.environ.get('FLASK_ENV') == 'development'
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    GEMINI_API_KEY = 'test-key'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
