# blockbuilder/rendering.py
"""
Template resolution for block render targets.

A template identifier is resolved in a fixed order, first success wins:
the configured template engines (django, then jinja2), then a plain
Python file found in one of the theme directories. When nothing matches
the block renders as an empty string.
"""
import functools
import io
import logging
import runpy
from pathlib import Path

from django.template import TemplateDoesNotExist, engines
from django.template.utils import InvalidTemplateEngineError

from .conf import get_setting

logger = logging.getLogger(__name__)


def normalize_template_name(tpl):
    """Strips one known template suffix ('blocks/hero.html' -> 'blocks/hero')."""
    for suffix in get_setting('STRIP_SUFFIXES'):
        if suffix and tpl.endswith(suffix):
            return tpl[:-len(suffix)]
    return tpl


class Renderer:
    """A view-rendering facility: can it render `name`, and render it."""

    def exists(self, name):
        raise NotImplementedError

    def render(self, name, args):
        raise NotImplementedError


class EngineRenderer(Renderer):
    """Renders through one of the engines declared in settings.TEMPLATES."""

    def __init__(self, alias, extensions=None):
        self.alias = alias
        self.extensions = tuple(extensions if extensions is not None else get_setting('VIEW_EXTENSIONS'))
        # Templates found by exists(), handed over to the next render()
        self._resolved = {}

    @property
    def engine(self):
        try:
            return engines[self.alias]
        except InvalidTemplateEngineError:
            return None

    def is_available(self):
        return self.engine is not None

    def candidates(self, name):
        return [name] + [name + ext for ext in self.extensions]

    def get_template(self, name):
        engine = self.engine
        if engine is None:
            return None
        for candidate in self.candidates(name):
            try:
                return engine.get_template(candidate)
            except TemplateDoesNotExist:
                continue
        return None

    def exists(self, name):
        template = self.get_template(name)
        if template is None:
            return False
        self._resolved[name] = template
        return True

    def render(self, name, args):
        template = self._resolved.pop(name, None) or self.get_template(name)
        return template.render(args)

    def __repr__(self):
        return f"EngineRenderer({self.alias!r})"


class ThemeTemplateLocator:
    """
    Last resort: a .py file under one of the theme directories, executed
    with the view arguments as its globals. Whatever it print()s is the
    rendered block. print is bound per call, so concurrent includes never
    share an output buffer.
    """

    extension = '.py'

    def __init__(self, dirs=None):
        self.dirs = [Path(d) for d in (dirs if dirs is not None else get_setting('THEME_DIRS'))]

    def locate(self, name):
        for directory in self.dirs:
            for candidate in (name + self.extension, name):
                path = directory / candidate
                if path.is_file():
                    return path
        return None

    def include(self, path, args):
        buffer = io.StringIO()
        init_globals = dict(args, print=functools.partial(print, file=buffer))
        runpy.run_path(str(path), init_globals=init_globals)
        return buffer.getvalue()


def get_renderers():
    """Default renderer chain, in priority order, skipping unconfigured engines."""
    renderers = [EngineRenderer(alias) for alias in get_setting('VIEW_ENGINES')]
    return [renderer for renderer in renderers if renderer.is_available()]


def render_template(tpl, args=None, renderers=None, locator=None):
    """
    Resolves `tpl` and renders it with `args`. Never raises for a template
    that cannot be found; returns '' instead.
    """
    args = args or {}
    if not tpl:
        return ''
    name = normalize_template_name(tpl)

    if renderers is None:
        renderers = get_renderers()
    for renderer in renderers:
        if renderer.exists(name):
            return renderer.render(name, args)

    if locator is None:
        locator = ThemeTemplateLocator()
    located = locator.locate(name)
    if located:
        return locator.include(located, args)

    logger.debug("No template found for %r", tpl)
    return ''
