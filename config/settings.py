import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

DEBUG = os.getenv('DEBUG', '0') == '1'

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'django.contrib.sitemaps',   # XML sitemap for SEO
    # Local apps
    'directory',
    'public_pages',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Serve static files in production
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'config.context_processors.app_branding',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

LANGUAGE_CODE = 'en-au'
TIME_ZONE = 'Australia/Sydney'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STATICFILES_DIRS = [BASE_DIR / 'static']
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Security settings for production
if not DEBUG:
    SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
    SECURE_SSL_REDIRECT = True
    CSRF_COOKIE_SECURE = True
    CSRF_TRUSTED_ORIGINS = [
        'https://ausverity.com.au',
        'https://www.ausverity.com.au',
    ]

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'directory': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
        },
        'public_pages': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
        },
    },
}

# =============================================================================
# DIRECTORY CONFIGURATION
# =============================================================================

# App Branding
SITE_NAME = os.getenv('SITE_NAME', 'AusVerity')  # Used in page titles and footer
SITE_TAGLINE = os.getenv('SITE_TAGLINE', 'Find verified lawyers across Australia')

# Lawyer search backend the search widget submits to
LAWYER_SEARCH_URL = os.getenv('LAWYER_SEARCH_URL', '/search')

# One JSON file per state (<state_code>.json), keyed by practice area slug
PRACTICE_AREA_CONTENT_DIR = Path(
    os.getenv('PRACTICE_AREA_CONTENT_DIR', BASE_DIR / 'directory' / 'content')
)

# Output directory for `manage.py build_static_pages`
STATIC_PAGES_OUTPUT_DIR = Path(os.getenv('STATIC_PAGES_OUTPUT_DIR', BASE_DIR / 'build'))
