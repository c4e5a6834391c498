# blockbuilder/exceptions.py

from django.core.exceptions import ImproperlyConfigured


class BlockbuilderError(ImproperlyConfigured):
    """Base class for everything the registries reject."""


class InvalidBlockType(BlockbuilderError):
    pass


class BlockTypeAlreadyRegistered(BlockbuilderError):
    pass


class BlockTypeNotFound(BlockbuilderError, KeyError):
    pass


class InvalidFieldGroup(BlockbuilderError):
    pass
