# mysite/blocks.py
from django import forms

from blockbuilder import Block


class SiteBlock(Block):
    pass


# Django template, nested blocks limited to text content
SiteBlock.make('Hero Banner', 'hero-banner') \
    .set_description('Full width banner with a heading and nested content.') \
    .set_category('layout') \
    .set_icon('cover-image') \
    .set_keywords(['hero', 'banner', 'header']) \
    .set_align('full') \
    .set_align_support(['wide', 'full']) \
    .enable_full_height() \
    .enable_jsx() \
    .set_jsx_template([['core/heading', {'level': 1}], ['core/paragraph', {}]]) \
    .set_allowed_blocks(['core/heading', 'core/paragraph', 'core/buttons']) \
    .set_view('blocks/hero_banner.html') \
    .set_fields([
        ('heading', forms.CharField(max_length=120)),
        ('background', forms.CharField(required=False)),
    ]) \
    .load_all_fields() \
    .set_example({'attributes': {'mode': 'preview', 'data': {'heading': 'Welcome aboard'}}})

# Jinja2 template
SiteBlock.make('Testimonial') \
    .set_category('text') \
    .set_icon('format-quote') \
    .set_post_types(['page', 'post']) \
    .enable_anchor() \
    .set_view('blocks/testimonial') \
    .set_fields([
        ('quote', forms.CharField(widget=forms.Textarea)),
        ('author', forms.CharField()),
        ('rating', forms.IntegerField(min_value=1, max_value=5, initial=5)),
    ]) \
    .load_all_fields() \
    .set_example({'attributes': {'data': {'quote': 'Great work.', 'author': 'Sam', 'rating': '4'}}})

# Plain theme file, no fields
SiteBlock.make('Divider', 'divider') \
    .set_category('design') \
    .disable_mode() \
    .disable_custom_class_name() \
    .set_mode('auto') \
    .set_view('blocks/divider.py')
