# blockbuilder/templatetags/blockbuilder_tags.py

from django import template
from django.utils.safestring import mark_safe

from ..registry import block_types

register = template.Library()

@register.simple_tag
def render_block(name, data=None, **attrs):
    """
    Renders a registered block type in place.
    Usage: {% render_block 'blocks/hero' hero_data align='wide' %}
    """
    return mark_safe(block_types.render(name, data=data, **attrs))
