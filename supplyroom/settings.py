import ast
import os
import os.path

PROJECT_ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), ".."))


def get_list(text):
    return [item.strip() for item in text.split(",") if item.strip()]


def get_bool_from_env(name, default_value):
    if name in os.environ:
        value = os.environ[name]
        try:
            return ast.literal_eval(value)
        except ValueError as e:
            raise ValueError(f"{value} is an invalid value for {name}") from e
    return default_value


DEBUG = get_bool_from_env("DEBUG", False)

SECRET_KEY = os.environ.get("SECRET_KEY", "supplyroom-insecure-development-key")

ALLOWED_HOSTS = get_list(os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1"))

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("DATABASE_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get(
            "DATABASE_NAME", os.path.join(PROJECT_ROOT, "supplyroom.sqlite3")
        ),
        "USER": os.environ.get("DATABASE_USER", ""),
        "PASSWORD": os.environ.get("DATABASE_PASSWORD", ""),
        "HOST": os.environ.get("DATABASE_HOST", ""),
        "PORT": os.environ.get("DATABASE_PORT", ""),
        "ATOMIC_REQUESTS": False,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

TIME_ZONE = "UTC"
LANGUAGE_CODE = "en"
USE_I18N = True
USE_TZ = True

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django_countries",
    "supplyroom.practice",
    "supplyroom.catalog",
    "supplyroom.inventory",
    "supplyroom.order",
    "supplyroom.receiving",
    "supplyroom.audit",
    "supplyroom.notification",
]

DEFAULT_CURRENCY = os.environ.get("DEFAULT_CURRENCY", "EUR")
DEFAULT_CURRENCY_CODE_LENGTH = 3
DEFAULT_MAX_DIGITS = 12
DEFAULT_DECIMAL_PLACES = 3

# Unread low stock notifications younger than this suppress new ones
LOW_STOCK_NOTIFICATION_WINDOW_HOURS = int(
    os.environ.get("LOW_STOCK_NOTIFICATION_WINDOW_HOURS", 24)
)

# Default page size for the stock adjustment history
STOCK_ADJUSTMENT_HISTORY_LIMIT = 50

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": (
                "%(levelname)s %(name)s %(message)s "
                "[PID:%(process)d:%(threadName)s]"
            )
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {"level": "WARNING", "handlers": ["console"]},
    "loggers": {
        "django": {"level": "INFO", "propagate": True},
        "supplyroom": {"level": LOG_LEVEL, "propagate": True},
    },
}
