import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_DATABASE_URL = "sqlite:///database.sqlite"


def _split_origins(value):
    return [origin.strip() for origin in (value or "").split(",") if origin.strip()]


class Config:
    ENV = os.environ.get("FLASK_ENV", "production")
    PORT = int(os.environ.get("PORT", DEFAULT_PORT))

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = ENV == "development"

    # empty list leaves CORS off
    CORS_ORIGINS = _split_origins(os.environ.get("CORS_ORIGINS"))


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_ECHO = False
    CORS_ORIGINS = []
