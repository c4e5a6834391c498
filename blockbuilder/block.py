# blockbuilder/block.py

import json

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import escape
from django.utils.safestring import mark_safe
from django.utils.text import slugify

from . import registry
from .fields import Location, get_fields
from .rendering import render_template
from .signals import platform_ready


def _json_attr(value):
    return escape(json.dumps(value, cls=DjangoJSONEncoder, separators=(',', ':')))


class Block:
    """
    Fluent declaration of one block type.

        Block.make('Hero Banner') \\
            .set_category('layout') \\
            .enable_jsx() \\
            .set_view('blocks/hero.html') \\
            .set_fields([('heading', forms.CharField())])

    The block registers itself (block type first, then its field group)
    when platform_ready is sent, or when register() is called directly.
    """

    def __init__(self, title, name=None):
        self.name = None
        self.title = None
        self.description = None
        self.category = ''
        self.icon = ''
        self.keywords = []
        self.fields = None
        self.render_template = None
        self.load_all_field = False
        self.post_types = []
        self.mode = 'preview'
        self.align = ''
        self.align_text = None
        self.align_content = 'top'
        self.enqueue_script = None
        self.enqueue_style = None
        self.supports = {}
        self.example = {}
        self.jsx_template = []
        self.allowed_blocks = []
        self.template_lock = None
        self._field_groups = None

        if name is None:
            cls = type(self)
            path = f"{cls.__module__}.{cls.__qualname__}".lower().replace('.', '-')
            name = f"{path}-{slugify(title)}"
        self.set_name(name)
        self.set_title(title)

        # weak=False: the signal holds the only reference to most blocks
        platform_ready.connect(self._on_platform_ready_block, weak=False)
        platform_ready.connect(self._on_platform_ready_field_group, weak=False)

    @classmethod
    def make(cls, title, name=None):
        """
        Instantiate a new block.
        `title` is the display title, `name` a unique identifier (without namespace).
        """
        return cls(title, name)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r}>"

    # -------------------------
    # Registration
    # -------------------------
    def _on_platform_ready_block(self, sender, block_types=None, **kwargs):
        self.register_block(block_types)

    def _on_platform_ready_field_group(self, sender, field_groups=None, **kwargs):
        self.register_field_group(field_groups)

    def register(self, block_types=None, field_groups=None):
        """Registers the block type, then its field group."""
        self.register_block(block_types)
        self.register_field_group(field_groups)
        return self

    def register_block(self, block_types=None):
        block_types = block_types if block_types is not None else registry.block_types
        return block_types.register({
            'title': self.get_title(),
            'name': self.get_name(),
            'description': self.get_description(),
            'category': self.get_category(),
            'icon': self.get_icon(),
            'post_types': self.get_post_types(),
            'mode': self.get_mode(),
            'align': self.get_align(),
            'align_text': self.get_align_text(),
            'align_content': self.get_align_content(),
            'enqueue_script': self.get_enqueue_script(),
            'enqueue_style': self.get_enqueue_style(),
            'supports': self.get_supports(),
            'keywords': self.get_keywords(),
            'example': self.get_example(),
            'render_callback': self.render_callback,
        })

    def register_field_group(self, field_groups=None):
        """Registers the field group, if fields are defined."""
        if not self.fields:
            return None
        field_groups = field_groups if field_groups is not None else registry.field_groups
        self._field_groups = field_groups
        return field_groups.register({
            'title': self.get_title(),
            'fields': self.get_fields(),
            'location': [Location.when('block', registry.qualified_name(self.name))],
        })

    # -------------------------
    # Rendering
    # -------------------------
    def get_view_args(self, block):
        view_args = {
            'block': block,
            'instance': self,
            'inner_blocks': '',
        }

        if self.get_support('jsx'):
            inner_block_attrs = ''
            if len(self.jsx_template) > 0:
                view_args['template_attr'] = f' template="{_json_attr(self.jsx_template)}"'
                inner_block_attrs += view_args['template_attr']

            if len(self.allowed_blocks) > 0:
                view_args['allowed_blocks_attr'] = f' allowedBlocks="{_json_attr(self.allowed_blocks)}"'
                inner_block_attrs += view_args['allowed_blocks_attr']

            if self.template_lock:
                view_args['template_lock_attr'] = f' templateLock="{escape(self.template_lock)}"'
                inner_block_attrs += view_args['template_lock_attr']

            view_args['inner_blocks'] = mark_safe(f"<InnerBlocks{inner_block_attrs} />")

        if self.load_all_field:
            view_args['field'] = get_fields(block, self._field_groups)

        return view_args

    def render_callback(self, block, content='', is_preview=False):
        """Called by the block type registry for every rendered instance."""
        view_args = self.get_view_args(block)
        view_args['content'] = content
        view_args['is_preview'] = is_preview
        return self.render(self.render_template, view_args)

    def render(self, tpl='', args=None):
        """Renders a template file or view path with the given view arguments."""
        return render_template(tpl or '', args or {})

    def load_all_fields(self, load=True):
        """Exposes every field value to the view as `field`."""
        self.load_all_field = load
        return self

    def get_load_all_fields(self):
        return self.load_all_field

    # -------------------------
    # Identity
    # -------------------------
    def set_name(self, name):
        """A unique name that identifies the block (without namespace)."""
        self.name = name
        return self

    def get_name(self):
        return self.name

    def set_title(self, title):
        self.title = title
        return self

    def get_title(self):
        return self.title

    def set_description(self, description):
        self.description = description
        return self

    def get_description(self):
        return self.description

    def set_category(self, category):
        self.category = category
        return self

    def get_category(self):
        return self.category

    def set_icon(self, icon):
        self.icon = icon
        return self

    def get_icon(self):
        return self.icon

    def set_keywords(self, keywords):
        """Search terms that help users discover the block in the inserter."""
        self.keywords = list(keywords)
        return self

    def get_keywords(self):
        return self.keywords

    def set_post_types(self, post_types):
        """Restricts the block to these content types. Empty means anywhere."""
        self.post_types = list(post_types)
        return self

    def get_post_types(self):
        return self.post_types

    # -------------------------
    # Editor behaviour
    # -------------------------
    def set_mode(self, mode):
        """Display mode: "auto", "preview" or "edit". Defaults to "preview"."""
        self.mode = mode
        return self

    def get_mode(self):
        return self.mode

    def set_align(self, align):
        """Default alignment: "left", "center", "right", "wide" or "full"."""
        self.align = align
        return self

    def get_align(self):
        return self.align

    def set_align_text(self, align_text):
        """Default text alignment: "left", "center" or "right"."""
        self.align_text = align_text
        return self

    def get_align_text(self):
        return self.align_text

    def set_align_content(self, align_content):
        """
        Default content alignment: "top", "center" or "bottom". With the
        matrix control all nine positions ("top left" .. "bottom right")
        are valid.
        """
        self.align_content = align_content
        return self

    def get_align_content(self):
        return self.align_content

    # -------------------------
    # Assets
    # -------------------------
    def set_enqueue_script(self, enqueue_script):
        """URL of a .js file loaded wherever the block is displayed."""
        self.enqueue_script = enqueue_script
        return self

    def get_enqueue_script(self):
        return self.enqueue_script

    def set_enqueue_style(self, enqueue_style):
        """URL of a .css file loaded wherever the block is displayed."""
        self.enqueue_style = enqueue_style
        return self

    def get_enqueue_style(self):
        return self.enqueue_style

    def set_render_template(self, render_template):
        self.render_template = render_template
        return self

    def get_render_template(self):
        return self.render_template

    def set_view(self, view):
        return self.set_render_template(view)

    def get_view(self):
        return self.get_render_template()

    # -------------------------
    # Supports
    # -------------------------
    def set_supports(self, supports):
        """Replaces the whole supports mapping. Absent keys use the host default."""
        self.supports = dict(supports)
        return self

    def get_supports(self):
        return self.supports

    def add_support(self, key, value):
        self.supports[key] = value
        return self

    def get_support(self, key, default=None):
        return self.supports.get(key, default)

    def disable_align(self):
        return self.add_support('align', False)

    def set_align_support(self, align_support):
        """Limits the alignment toolbar to these choices."""
        return self.add_support('align', list(align_support))

    def enable_align_text(self):
        return self.add_support('align_text', True)

    def enable_align_content(self):
        return self.add_support('align_content', True)

    def set_align_content_support(self, setting):
        """True for the alignment toolbar button, 'matrix' for the full matrix."""
        return self.add_support('align_content', setting)

    def enable_full_height(self):
        """
        Adds the full height toolbar button. block['full_height'] is then
        true in the render template when the editor turned it on.
        """
        return self.add_support('full_height', True)

    def disable_mode(self):
        """Removes the edit/preview toggle."""
        return self.add_support('mode', False)

    def disable_custom_class_name(self):
        return self.add_support('customClassName', False)

    def enable_anchor(self):
        return self.add_support('anchor', True)

    def enable_jsx(self):
        """Lets the block hold nested blocks (see set_jsx_template)."""
        return self.add_support('jsx', True)

    # -------------------------
    # Nested blocks
    # -------------------------
    def set_jsx_template(self, template):
        """Initial nested blocks, e.g. [['core/heading', {'level': 2}], ['core/paragraph', {}]]."""
        self.jsx_template = list(template)
        return self

    def get_jsx_template(self):
        return self.jsx_template

    def set_allowed_blocks(self, allowed_blocks):
        self.allowed_blocks = list(allowed_blocks)
        return self

    def get_allowed_blocks(self):
        return self.allowed_blocks

    def set_template_lock(self, template_lock):
        """One of "all", "insert", "move", "delete", or False."""
        self.template_lock = template_lock
        return self

    def get_template_lock(self):
        return self.template_lock

    # -------------------------
    # Content
    # -------------------------
    def set_example(self, example):
        """
        Preview payload for the inserter. Values under
        example['attributes']['data'] reach the template as block['data'].
        """
        self.example = example
        return self

    def get_example(self):
        return self.example

    def set_fields(self, fields):
        """(name, django.forms.Field) pairs edited alongside the block."""
        self.fields = list(fields)
        return self

    def get_fields(self):
        return self.fields
