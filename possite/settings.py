import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# -----------------------------
# Core
# -----------------------------
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = env_flag("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [
    h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "pos",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "possite.urls"
WSGI_APPLICATION = "possite.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# -----------------------------
# Database (SQLite unless POS_DB_ENGINE says otherwise)
# -----------------------------
DATABASES = {
    "default": {
        "ENGINE": os.getenv("POS_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.getenv("POS_DB_NAME", str(BASE_DIR / "pos.sqlite3")),
        "USER": os.getenv("POS_DB_USER", ""),
        "PASSWORD": os.getenv("POS_DB_PASSWORD", ""),
        "HOST": os.getenv("POS_DB_HOST", ""),
        "PORT": os.getenv("POS_DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

# -----------------------------
# Point of sale
# -----------------------------
# Publish an SNS message when an inventory item gets flagged for reorder.
POS_REORDER_ALERTS = env_flag("POS_REORDER_ALERTS", False)

# -----------------------------
# Logging
# -----------------------------
POS_LOG_LEVEL = os.getenv("POS_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "pos": {
            "level": POS_LOG_LEVEL,
        },
    },
}
