'''A permissive HTML parser producing a validated element tree.'''
from tagtree.element import Document, Element
from tagtree.errors import ParseError
from tagtree.parser import parse
from tagtree.version import __version__
