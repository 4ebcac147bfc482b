from pathlib import Path
import environ

BASE_DIR = Path(__file__).resolve().parent.parent
env = environ.Env(DJANGO_DEBUG=(bool, False))
# Read .env if present
environ.Env.read_env(BASE_DIR / ".env")

LOG_DIR = BASE_DIR / "logs"
LOG_DIR.mkdir(exist_ok=True)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,

    "formatters": {
        "standard": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
        "simple": {
            "format": "{levelname}: {message}",
            "style": "{",
        },
    },

    "handlers": {
        # ========== console ==========
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },

        # ========== main file log ==========
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "project.log",
            "maxBytes": 5 * 1024 * 1024,  # 5 MB
            "backupCount": 5,
            "encoding": "utf-8",
            "formatter": "standard",
        },

        # ========== pricelist reading logs ==========
        "sheets": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "sheets.log",
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "encoding": "utf-8",
            "formatter": "standard",
        },
    },

    "loggers": {
        # Django internal logs
        "django": {
            "handlers": ["console", "file"],
            "level": "INFO",
            "propagate": True,
        },
        "django.request": {
            "handlers": ["file"],
            "level": "ERROR",
            "propagate": False,
        },
        # Pricelist workbook / catalog building
        "sheets": {
            "handlers": ["sheets", "console"],
            "level": "DEBUG",
            "propagate": False,
        },
        # API and request lines
        "app": {
            "handlers": ["file", "console"],
            "level": "INFO",
        },
    },
}

DEBUG = env.bool("DJANGO_DEBUG", default=False)
SECRET_KEY = env("DJANGO_SECRET_KEY", default="change-me")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "rest_framework",
    "apps.catalog",
    "apps.api",
]

# nothing is persisted by the catalog; the database only backs Django itself
DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

# rediscache://127.0.0.1:6379/1 switches to django-redis
CACHES = {
    "default": env.cache("CACHE_URL", default="locmemcache://"),
}

# --- Pricelist ---
# explicit file: no fallback when it can't be read
PRICELIST_PATH = env("PRICELIST_PATH", default=None)
PRICELIST_ENRICHED_FILE = env(
    "PRICELIST_ENRICHED_FILE",
    default=str(BASE_DIR / "data" / "ASI_SAGE_PRICELIST_ENRICHED.xlsx"),
)
PRICELIST_DEFAULT_FILE = env(
    "PRICELIST_DEFAULT_FILE",
    default=str(BASE_DIR / "data" / "ASI_SAGE_PRICELIST.xlsx"),
)
CATALOG_CACHE_SECONDS = env.int("CATALOG_CACHE_SECONDS", default=300)

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ("rest_framework.renderers.JSONRenderer",),
}

TIME_ZONE = "UTC"
USE_TZ = True
LANGUAGE_CODE = "en-us"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# --- MIDDLEWARE (порядок важен) ---
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "apps.middleware.request_logging.RequestLoggingMiddleware",
]

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# --- Тип PK по умолчанию (убирает W042) ---
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Где лежит корневой urls.py
ROOT_URLCONF = "config.urls"

# Точки входа WSGI/ASGI (полезно и для dev)
WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"
