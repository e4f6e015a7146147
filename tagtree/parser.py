# encoding=utf-8
'''Tree building.'''
import logging

from tagtree.element import Document, Element
from tagtree.errors import MismatchedCloseTag, UnclosedElements
from tagtree.logging import BraceMessage as __
from tagtree.rawtext import RAW_TEXT_ELEMENTS, read_raw_text
from tagtree.scanner import Cursor, read_until_tag
from tagtree.stack import ElementStack
from tagtree.tag import read_tag
import tagtree.string


_logger = logging.getLogger(__name__)


class TreeBuilder(object):
    '''Builds a document tree from markup in a single pass.

    Text runs and tags are read alternately. Open elements are kept on an
    :class:`.stack.ElementStack` so close tags can be checked against the
    innermost open element. Any scan or nesting error ends the build.

    Args:
        text (str): The markup.
    '''
    def __init__(self, text):
        self._text = text
        self._cursor = Cursor()
        self._stack = ElementStack()
        self._children = []

    def build(self):
        '''Parse the whole text.

        Returns:
            Document

        Raises:
            ParseError: The markup is malformed. No partial tree is kept.
        '''
        text = self._text
        cursor = self._cursor

        while not cursor.at_end(text):
            run = read_until_tag(text, cursor)

            if run:
                self._append(Element.new_text(run))

            if cursor.at_end(text):
                break

            tag_start = cursor.position
            self._handle_tag(read_tag(text, cursor), tag_start)

        if self._stack:
            raise UnclosedElements(
                'Elements not closed: {0}'.format(
                    self._stack.to_debug_string()),
                cursor.position
            )

        document = Document(self._children)
        self._children = []

        return document

    def _append(self, element):
        if self._stack:
            self._stack.peek().children.append(element)
        else:
            self._children.append(element)

    def _handle_tag(self, element, position):
        if element.is_close:
            self._close(element, position)
        elif element.is_void:
            self._append(element)
        else:
            self._append(element)
            self._stack.push(element)

            if element.name in RAW_TEXT_ELEMENTS:
                element.inner_text = read_raw_text(
                    self._text, self._cursor, element.name,
                    element.attributes.get('type', '')
                )
                self._stack.pop()

    def _close(self, element, position):
        if not self._stack:
            raise MismatchedCloseTag(
                'Close tag </{0}> has no open element'.format(element.name),
                position
            )

        open_path = self._stack.to_debug_string()
        open_element = self._stack.pop()

        if open_element.name != element.name:
            raise MismatchedCloseTag(
                'Close tag </{0}> does not match <{1}> in {2}'.format(
                    element.name, open_element.name, open_path
                ),
                position
            )


def parse(markup, encoding=None):
    '''Parse markup into a document.

    Args:
        markup (str, bytes): The document. Bytes are decoded using
            :func:`.string.detect_encoding`.
        encoding (str): The encoding to try first for bytes.

    Returns:
        Document: The top-level elements.

    Raises:
        ParseError: The markup is malformed.
    '''
    if isinstance(markup, bytes):
        markup = tagtree.string.decode_html(markup, encoding=encoding)

    _logger.debug(__('Parsing {0} characters.', len(markup)))

    document = TreeBuilder(markup).build()

    _logger.debug(__('Parsed {0} top-level elements.',
                     len(document.children)))

    return document
