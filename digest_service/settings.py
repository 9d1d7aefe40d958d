"""Django settings for the notification digest service.

Settings are read from environment variables so the same image can run the
web process (health probes), the RQ workers and the management commands.
Database connection fields are assembled by ``core.config.database``.
"""

import os
from pathlib import Path

from core.config.database import DatabaseConfig, database_settings

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-digest-service-dev-key")

DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "django_rq",
    "core",
]

MIDDLEWARE = [
    "core.middleware.request_id.RequestIDMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "digest_service.urls"

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

WSGI_APPLICATION = "digest_service.wsgi.application"

# Database
DATABASE_CONFIG = DatabaseConfig.from_env()

DATABASES = {
    "default": database_settings(DATABASE_CONFIG),
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Minutes an unread message or notification must age before an instant email
INSTANT_UNREAD_LOOKBACK_INTERVAL = DATABASE_CONFIG.instant_unread_lookback_interval

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# Redis / RQ
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

EMAIL_QUEUE_NAME = os.getenv("EMAIL_QUEUE_NAME", "email")

RQ_QUEUES = {
    "default": {
        "URL": REDIS_URL,
        "DEFAULT_TIMEOUT": 360,
    },
    EMAIL_QUEUE_NAME: {
        "URL": REDIS_URL,
        "DEFAULT_TIMEOUT": 360,
    },
}

# Jobs owned by the email-sending service, enqueued by dotted path
EMAIL_SENDER_JOBS = {
    "instant": os.getenv(
        "EMAIL_SENDER_INSTANT_JOB", "mailer.jobs.send_instant_notification_email"
    ),
    "digest": os.getenv("EMAIL_SENDER_DIGEST_JOB", "mailer.jobs.send_digest_email"),
    "message": os.getenv(
        "EMAIL_SENDER_MESSAGE_JOB", "mailer.jobs.send_unread_message_email"
    ),
}

# Cron schedules (UTC) registered by the ``scheduledispatch`` command.
# ``None`` dispatches unread direct messages instead of notifications.
DISPATCH_SCHEDULES = [
    {"cron": "*/5 * * * *", "frequency": "instant"},
    {"cron": "*/5 * * * *", "frequency": None},
    {"cron": "0 8 * * *", "frequency": "daily"},
    {"cron": "0 8 * * 1", "frequency": "weekly"},
    {"cron": "0 8 1,15 * *", "frequency": "biweekly"},
]

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Logging is configured by structlog in core.logging.setup_logging
LOGGING_CONFIG = None

TEST_MODE = False
