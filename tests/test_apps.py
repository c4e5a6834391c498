import gc
import sys
from unittest.mock import patch

import pytest
from django import forms
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from blockbuilder import Block
from blockbuilder.apps import load_block_modules
from blockbuilder.conf import DEFAULTS, get_setting
from blockbuilder.signals import platform_ready


def test_get_setting_defaults_and_overrides():
    assert get_setting('NAMESPACE') == DEFAULTS['NAMESPACE']
    with override_settings(BLOCKBUILDER={'NAMESPACE': 'acme'}):
        assert get_setting('NAMESPACE') == 'acme'
        assert get_setting('SEND_READY') is True


def test_get_setting_rejects_unknown_keys():
    with pytest.raises(ImproperlyConfigured):
        get_setting('NOPE')


def test_platform_ready_registers_block_then_field_group(block_types, field_groups):
    calls = []
    block = Block.make('Card', 'card').set_fields([('title', forms.CharField())])

    with patch.object(block_types, 'register', side_effect=lambda c: calls.append(('block', c['name']))), \
         patch.object(field_groups, 'register', side_effect=lambda c: calls.append(('group', c['title']))):
        platform_ready.send(sender=None, block_types=block_types, field_groups=field_groups)

    assert calls == [('block', 'card'), ('group', 'Card')]
    assert block.get_name() == 'card'


def test_platform_ready_skips_field_group_without_fields(block_types, field_groups):
    Block.make('Card', 'card')
    platform_ready.send(sender=None, block_types=block_types, field_groups=field_groups)
    assert block_types.has('card')
    assert field_groups.all() == []


def test_blocks_without_other_references_stay_registered(block_types, field_groups):
    Block.make('Card', 'card').enable_anchor()
    gc.collect()
    platform_ready.send(sender=None, block_types=block_types, field_groups=field_groups)
    assert block_types.get('card')['supports'] == {'anchor': True}


def test_load_block_modules_imports_declarations(block_types, field_groups):
    sys.modules.pop('mysite.blocks', None)
    with override_settings(BLOCKBUILDER={'BLOCK_MODULES': ['mysite.blocks'], 'AUTODISCOVER': False}):
        load_block_modules()
    platform_ready.send(sender=None, block_types=block_types, field_groups=field_groups)

    assert sorted(b['name'] for b in block_types.all()) == [
        'blocks/divider',
        'blocks/hero-banner',
        'blocks/mysite-blocks-siteblock-testimonial',
    ]
    assert len(field_groups.all()) == 2


def test_ready_sends_platform_ready_to_global_registries(global_registries):
    block_types, field_groups = global_registries
    Block.make('Card', 'card').set_fields([('title', forms.CharField())])

    apps.get_app_config('blockbuilder').ready()

    assert block_types.has('card')
    assert len(field_groups.for_block('card')) == 1


@override_settings(BLOCKBUILDER={'SEND_READY': False})
def test_ready_can_leave_registration_to_the_project(global_registries):
    block_types, _ = global_registries
    Block.make('Card', 'card')

    apps.get_app_config('blockbuilder').ready()

    assert not block_types.has('card')
