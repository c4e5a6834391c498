# blockbuilder/registry.py

import copy
import itertools
import logging

from django.utils.text import slugify

from .conf import get_setting
from .exceptions import (
    BlockTypeAlreadyRegistered,
    BlockTypeNotFound,
    InvalidBlockType,
    InvalidFieldGroup,
)
from .fields import Location, build_form_class, is_field_declaration

logger = logging.getLogger(__name__)

MODES = ('auto', 'preview', 'edit')

# Host-side defaults merged under every submitted block type
BLOCK_TYPE_DEFAULTS = {
    'title': '',
    'description': '',
    'category': 'common',
    'icon': '',
    'keywords': [],
    'post_types': [],
    'mode': 'preview',
    'align': '',
    'align_text': '',
    'align_content': 'top',
    'enqueue_script': None,
    'enqueue_style': None,
    'supports': {},
    'example': {},
}


def qualified_name(name):
    """'Hero Banner' -> 'blocks/hero-banner'. Already namespaced names keep their namespace."""
    namespace = get_setting('NAMESPACE')
    prefix = f"{namespace}/"
    if name.startswith(prefix):
        name = name[len(prefix):]
    return f"{prefix}{slugify(name)}"


# -------------------------
# Block types
# -------------------------
class BlockTypeRegistry:
    """
    Stores block type configurations by namespaced name.
    Registration is where invalid or duplicate declarations get rejected.
    """

    def __init__(self):
        self._block_types = {}
        self._ids = itertools.count(1)

    def register(self, config):
        block_type = copy.deepcopy(BLOCK_TYPE_DEFAULTS)
        # None means "not declared": keep the host default
        block_type.update({k: v for k, v in config.items() if v is not None})
        # The stored config must not follow later changes to the declaring Block
        for key in ('keywords', 'post_types', 'supports', 'example'):
            block_type[key] = copy.deepcopy(block_type[key])

        if not block_type.get('name') or not slugify(block_type['name']):
            raise InvalidBlockType("Block types need a non-empty name.")
        if not block_type.get('title'):
            raise InvalidBlockType(f"Block type {block_type['name']!r} needs a title.")
        if block_type['mode'] not in MODES:
            raise InvalidBlockType(
                f"Block type {block_type['name']!r} has mode {block_type['mode']!r}, "
                f"expected one of {', '.join(MODES)}."
            )
        if not callable(block_type.get('render_callback')):
            raise InvalidBlockType(f"Block type {block_type['name']!r} has no render_callback.")

        block_type['name'] = qualified_name(block_type['name'])
        if block_type['name'] in self._block_types:
            raise BlockTypeAlreadyRegistered(
                f"Block type {block_type['name']!r} is already registered."
            )

        self._block_types[block_type['name']] = block_type
        logger.info("Registered block type %s", block_type['name'])
        return block_type

    def get(self, name):
        return self._block_types.get(qualified_name(name))

    def has(self, name):
        return qualified_name(name) in self._block_types

    def all(self):
        return list(self._block_types.values())

    def unregister(self, name):
        return self._block_types.pop(qualified_name(name), None)

    def clear(self):
        self._block_types.clear()

    def render(self, name, data=None, content='', is_preview=False, **attrs):
        """
        Renders one instance of a block type. The instance dict handed to
        the render callback mirrors what an editor would save.
        """
        block_type = self.get(name)
        if block_type is None:
            raise BlockTypeNotFound(f"No block type registered as {name!r}.")

        block = {
            'id': f"block_{next(self._ids)}",
            'name': block_type['name'],
            'data': dict(data or {}),
            'align': block_type['align'],
            'align_text': block_type['align_text'],
            'align_content': block_type['align_content'],
            'mode': block_type['mode'],
            'className': '',
        }
        block.update(attrs)
        return block_type['render_callback'](block, content, is_preview)


# -------------------------
# Field groups
# -------------------------
class FieldGroupRegistry:
    """Stores field groups and hands out the form classes built from them."""

    def __init__(self):
        self._groups = {}
        self._form_classes = {}

    def register(self, config):
        title = config.get('title')
        fields = config.get('fields') or []
        locations = config.get('location') or []

        if not title:
            raise InvalidFieldGroup("Field groups need a title.")
        if not locations or not all(isinstance(loc, Location) for loc in locations):
            raise InvalidFieldGroup(f"Field group {title!r} needs Location rules.")
        for item in fields:
            if not is_field_declaration(item):
                raise InvalidFieldGroup(
                    f"Field group {title!r}: expected (name, forms.Field) pairs, got {item!r}."
                )

        key = config.get('key') or f"group_{slugify(title).replace('-', '_')}"
        base_key, suffix = key, 2
        while key in self._groups:
            key = f"{base_key}_{suffix}"
            suffix += 1

        group = dict(config, key=key, title=title, fields=list(fields), location=list(locations))
        self._groups[key] = group
        logger.info("Registered field group %s (%d fields)", key, len(group['fields']))
        return group

    def get(self, key):
        return self._groups.get(key)

    def all(self):
        return list(self._groups.values())

    def for_block(self, block_type_name):
        name = qualified_name(block_type_name) if block_type_name else ''
        return [
            group for group in self._groups.values()
            if any(loc.matches('block', name) for loc in group['location'])
        ]

    def form_class(self, group):
        if group['key'] not in self._form_classes:
            self._form_classes[group['key']] = build_form_class(group['title'], group['fields'])
        return self._form_classes[group['key']]

    def clear(self):
        self._groups.clear()
        self._form_classes.clear()


# Process-wide registries used unless a caller passes its own
block_types = BlockTypeRegistry()
field_groups = FieldGroupRegistry()
