# blockbuilder/conf.py

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

# Everything lives under a single BLOCKBUILDER dict in the project settings.
DEFAULTS = {
    'NAMESPACE': 'blocks',
    'VIEW_ENGINES': ('django', 'jinja2'),
    'VIEW_EXTENSIONS': ('.html',),
    'STRIP_SUFFIXES': ('.html', '.py'),
    'THEME_DIRS': [],
    'BLOCK_MODULES': [],
    'AUTODISCOVER': True,
    'SEND_READY': True,
}


def get_setting(key):
    """
    Returns the BLOCKBUILDER[key] value from settings, or its default.
    Read on every call so override_settings() is honoured.
    """
    if key not in DEFAULTS:
        raise ImproperlyConfigured(f"Unknown BLOCKBUILDER setting: {key!r}")
    user_settings = getattr(settings, 'BLOCKBUILDER', None) or {}
    return user_settings.get(key, DEFAULTS[key])
