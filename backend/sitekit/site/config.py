import os
from dotenv import load_dotenv

load_dotenv()

class SiteBaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Upstream services
    BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
    AUTH_SERVICE_URL = os.getenv("AUTH_SERVICE_URL", "http://localhost:8001")
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "5"))

    # Public site
    SITE_URL = os.getenv("SITE_URL", "http://localhost:3000")
    SITE_NAME = os.getenv("SITE_NAME", "Sitekit")
    SITE_ENVIRONMENT = os.getenv("SITE_ENVIRONMENT", "development")
    DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "sitekit.session_token")
    RECENT_POSTS_LIMIT = int(os.getenv("RECENT_POSTS_LIMIT", "10"))

class SiteDevelopmentConfig(SiteBaseConfig):
    DEBUG = True

class SiteProductionConfig(SiteBaseConfig):
    DEBUG = False
    SITE_ENVIRONMENT = os.getenv("SITE_ENVIRONMENT", "production")

class SiteTestingConfig(SiteBaseConfig):
    TESTING = True
    BACKEND_URL = "http://cms.test"
    AUTH_SERVICE_URL = "http://auth.test"
    SITE_URL = "https://example.com"
    SITE_NAME = "Example"
    SITE_ENVIRONMENT = "production"

site_config_by_name = {
    "development": SiteDevelopmentConfig,
    "production": SiteProductionConfig,
    "testing": SiteTestingConfig,
}
