# blockbuilder/apps.py

import logging
from importlib import import_module

from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules

logger = logging.getLogger(__name__)


def load_block_modules():
    """
    Imports every module that declares blocks: the BLOCK_MODULES setting
    first, then <app>.blocks for each installed app.
    """
    from .conf import get_setting

    for module_path in get_setting('BLOCK_MODULES'):
        import_module(module_path)
    if get_setting('AUTODISCOVER'):
        autodiscover_modules('blocks')


class BlockbuilderConfig(AppConfig):
    name = 'blockbuilder'
    verbose_name = 'Block Builder'

    def ready(self):
        from .conf import get_setting
        from .registry import block_types, field_groups
        from .signals import platform_ready

        load_block_modules()
        if get_setting('SEND_READY'):
            responses = platform_ready.send(
                sender=self.__class__,
                block_types=block_types,
                field_groups=field_groups,
            )
            logger.debug("platform_ready handled by %d receivers", len(responses))
