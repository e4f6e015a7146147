'''Primitive scanners over a character sequence.

Every scanner takes the text and a shared :class:`Cursor`. A scanner
reads from ``cursor.position``, advances it past whatever it consumed
and returns the consumed characters. Scanners called one after another
on the same cursor never re-read input.
'''
import re

from tagtree.errors import UnterminatedAttributeValue


WHITESPACE = ' \t\n\r\f'
QUOTES = '\'"'

TAG_START_RE = re.compile(r'<(?:[a-zA-Z!]|[ \t\n\r\f]*/)')
'''A ``<`` that begins a tag rather than being a literal character.'''


class Cursor(object):
    '''A mutable offset into the text being scanned.

    Attributes:
        position (int): The index of the next character to read.
    '''
    __slots__ = ('position',)

    def __init__(self, position=0):
        self.position = position

    def __repr__(self):
        return 'Cursor({0})'.format(self.position)

    def at_end(self, text):
        '''Return whether every character has been consumed.'''
        return self.position >= len(text)

    def startswith(self, text, prefix, ignore_case=False):
        '''Return whether the unread text begins with the prefix.'''
        chunk = text[self.position:self.position + len(prefix)]

        if ignore_case:
            return chunk.lower() == prefix.lower()

        return chunk == prefix


def read_whitespace(text, cursor):
    '''Consume a run of whitespace.

    Returns:
        str: The whitespace read, which may be empty.
    '''
    start = position = cursor.position
    length = len(text)

    while position < length and text[position] in WHITESPACE:
        position += 1

    cursor.position = position
    return text[start:position]


def read_until_tag(text, cursor):
    '''Consume text up to the start of the next tag.

    A ``<`` only starts a tag when a letter, ``!`` or ``/`` follows it,
    so text such as ``a < b`` is consumed as ordinary characters. If no
    tag follows, the rest of the text is consumed.

    Returns:
        str: The text read. Empty if the cursor is already at a tag.
    '''
    start = cursor.position
    match = TAG_START_RE.search(text, start)

    if match:
        end = match.start()
    else:
        end = len(text)

    cursor.position = end
    return text[start:end]


def read_until_any(text, cursor, stop_chars):
    '''Consume characters until one of the stop characters.

    Returns:
        str: The text read. The stop character is not consumed.
    '''
    start = position = cursor.position
    length = len(text)

    while position < length and text[position] not in stop_chars:
        position += 1

    cursor.position = position
    return text[start:position]


def read_quoted(text, cursor):
    '''Consume a string delimited by single or double quotes.

    Everything up to the same quote character is taken literally,
    including the other kind of quote. No escapes are processed.

    Returns:
        str: The text between the quotes.

    Raises:
        UnterminatedAttributeValue: The closing quote is missing.
    '''
    start = cursor.position
    quote = text[start]
    assert quote in QUOTES, quote
    end = text.find(quote, start + 1)

    if end == -1:
        raise UnterminatedAttributeValue(
            'Quoted value is not closed', start
        )

    cursor.position = end + 1
    return text[start + 1:end]
