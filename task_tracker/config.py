import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-this'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{BASE_DIR}/data/tasktracker.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SEED_DATABASE = _env_flag('SEED_DATABASE', True)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS') or '*'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = int(os.environ.get('PORT') or 5000)


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_DATABASE = False
    LOG_LEVEL = 'WARNING'
