from pathlib import Path

import django
import pytest
from django.conf import settings

TESTS_DIR = Path(__file__).resolve().parent


def pytest_configure():
    settings.configure(
        DEBUG=True,
        SECRET_KEY='tests',
        ALLOWED_HOSTS=['testserver'],
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'django.contrib.auth',
            'rest_framework',
            'blockbuilder',
        ],
        ROOT_URLCONF='mysite.urls',
        DATABASES={'default': {'ENGINE': 'django.db.backends.sqlite3', 'NAME': ':memory:'}},
        TEMPLATES=[
            {
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [TESTS_DIR / 'templates'],
                'APP_DIRS': True,
            },
            {
                'BACKEND': 'django.template.backends.jinja2.Jinja2',
                'DIRS': [TESTS_DIR / 'jinja2'],
                'APP_DIRS': False,
            },
        ],
        BLOCKBUILDER={
            'THEME_DIRS': [TESTS_DIR / 'theme'],
        },
    )
    django.setup()


@pytest.fixture(autouse=True)
def isolated_platform_ready():
    """Blocks created in a test stop listening to platform_ready afterwards."""
    from blockbuilder.signals import platform_ready

    receivers = list(platform_ready.receivers)
    yield
    with platform_ready.lock:
        platform_ready.receivers = receivers
        platform_ready.sender_receivers_cache.clear()


@pytest.fixture
def block_types():
    from blockbuilder.registry import BlockTypeRegistry
    return BlockTypeRegistry()


@pytest.fixture
def field_groups():
    from blockbuilder.registry import FieldGroupRegistry
    return FieldGroupRegistry()


@pytest.fixture
def global_registries():
    """The process-wide registries, emptied before and after the test."""
    from blockbuilder.registry import block_types, field_groups

    block_types.clear()
    field_groups.clear()
    yield block_types, field_groups
    block_types.clear()
    field_groups.clear()
