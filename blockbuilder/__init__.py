# blockbuilder/__init__.py

from .block import Block
from .fields import Location

__version__ = '0.3.0'

__all__ = ['Block', 'Location']
