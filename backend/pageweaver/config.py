import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name, default):
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Document store keys (one blob each)
    PAGES_STORAGE_KEY = os.getenv("PAGES_STORAGE_KEY", "pageweaver.pages")
    NAVIGATION_STORAGE_KEY = os.getenv("NAVIGATION_STORAGE_KEY", "pageweaver.navigation")

    DEFAULT_ROLE = os.getenv("DEFAULT_ROLE", "admin")
    REJECT_DUPLICATE_SLUGS = _flag("REJECT_DUPLICATE_SLUGS", "true")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///pageweaver-dev.db")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI", "sqlite:///pageweaver.db")

config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
