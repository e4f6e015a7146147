'''Tag reader.'''
from tagtree.element import Element, COMMENT_NAME, DOCTYPE_NAME, \
    DECLARATION_NAME
from tagtree.errors import UnterminatedTag, UnterminatedComment, \
    MalformedTag
from tagtree.scanner import WHITESPACE, QUOTES, read_whitespace, \
    read_until_any, read_quoted


VOID_ELEMENTS = frozenset([
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'keygen',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
])
'''Elements that never have children or a close tag.'''

NAME_STOP_CHARS = WHITESPACE + '/>'
ATTRIBUTE_NAME_STOP_CHARS = WHITESPACE + '=/>'
BAREWORD_STOP_CHARS = WHITESPACE + '>'


def read_tag(text, cursor):
    '''Consume one tag.

    The cursor must be positioned at a ``<``. It is left after the
    ``>`` that ends the tag. The number of characters consumed is the
    difference in cursor positions.

    Tag names are lowercased, including mixed-case foreign names such as
    SVG ``foreignObject``. Attribute names and values keep their case.

    Returns:
        Element: A token that is not attached to any tree. Close tags are
        returned with :attr:`.Element.is_close` set.

    Raises:
        ScanError: The tag is malformed or not terminated.
    '''
    start = cursor.position

    if not cursor.startswith(text, '<'):
        raise MalformedTag('Expected a tag', start)

    if cursor.startswith(text, '<!--'):
        return read_comment(text, cursor)
    elif cursor.startswith(text, '<!doctype', ignore_case=True):
        return read_doctype(text, cursor)
    elif cursor.startswith(text, '<!'):
        return read_declaration(text, cursor)

    cursor.position += 1
    read_whitespace(text, cursor)

    if cursor.startswith(text, '/'):
        cursor.position += 1
        return read_close_tag(text, cursor, start)
    else:
        return read_open_tag(text, cursor, start)


def read_comment(text, cursor):
    start = cursor.position
    body_start = start + len('<!--')
    end = text.find('-->', body_start)

    if end == -1:
        raise UnterminatedComment('Comment is not closed', start)

    cursor.position = end + len('-->')

    return Element(
        COMMENT_NAME, is_void=True, is_comment=True,
        inner_text=text[body_start:end]
    )


def read_doctype(text, cursor):
    '''Consume a doctype.

    Each word after ``DOCTYPE`` becomes an attribute with an empty value.
    '''
    start = cursor.position
    cursor.position += len('<!doctype')
    attributes = {}

    while True:
        read_whitespace(text, cursor)

        if cursor.at_end(text):
            raise UnterminatedTag('Doctype is not closed', start)

        char = text[cursor.position]

        if char == '>':
            cursor.position += 1
            break
        elif char in QUOTES:
            token = read_quoted(text, cursor)
        else:
            token = read_until_any(text, cursor, BAREWORD_STOP_CHARS)

        attributes.setdefault(token, '')

    return Element(DOCTYPE_NAME, attributes, is_void=True)


def read_declaration(text, cursor):
    '''Consume a ``<!...>`` that is not a comment or doctype.

    CDATA sections end at ``]]>``. Anything else ends at the first ``>``.
    '''
    start = cursor.position
    body_start = start + len('<!')

    if cursor.startswith(text, '<![CDATA['):
        end = text.find(']]>', body_start)
        body_end = end + len(']]')
    else:
        end = body_end = text.find('>', body_start)

    if end == -1:
        raise UnterminatedTag('Declaration is not closed', start)

    cursor.position = body_end + 1

    return Element(
        DECLARATION_NAME, is_void=True, inner_text=text[body_start:body_end]
    )


def read_close_tag(text, cursor, start):
    read_whitespace(text, cursor)
    name = read_until_any(text, cursor, NAME_STOP_CHARS)

    if not name:
        if cursor.at_end(text):
            raise UnterminatedTag('Tag is not closed', start)

        raise MalformedTag('Close tag has no name', start)

    end = text.find('>', cursor.position)

    if end == -1:
        raise UnterminatedTag('Tag is not closed', start)

    cursor.position = end + 1

    return Element(name.lower(), is_close=True)


def read_open_tag(text, cursor, start):
    name = read_until_any(text, cursor, NAME_STOP_CHARS)

    if not name:
        if cursor.at_end(text):
            raise UnterminatedTag('Tag is not closed', start)

        raise MalformedTag('Tag has no name', start)

    name = name.lower()
    attributes = {}
    self_closing = False

    while True:
        read_whitespace(text, cursor)

        if cursor.at_end(text):
            raise UnterminatedTag('Tag is not closed', start)

        char = text[cursor.position]

        if char == '>':
            cursor.position += 1
            break
        elif char == '/':
            cursor.position += 1

            if cursor.startswith(text, '>'):
                cursor.position += 1
                self_closing = True
                break
        else:
            key, value = read_attribute(text, cursor, start)
            # First occurrence wins
            attributes.setdefault(key, value)

    return Element(
        name, attributes, is_void=self_closing or name in VOID_ELEMENTS
    )


def read_attribute(text, cursor, start):
    '''Consume a ``name[=value]`` pair.

    Returns:
        tuple: The name and value. The value is empty if there is no ``=``.
    '''
    key = read_until_any(text, cursor, ATTRIBUTE_NAME_STOP_CHARS)
    value_start = cursor.position

    read_whitespace(text, cursor)

    if not cursor.startswith(text, '='):
        # The whitespace belongs to the next attribute
        cursor.position = value_start
        return key, ''

    cursor.position += 1
    read_whitespace(text, cursor)

    if cursor.at_end(text):
        raise UnterminatedTag('Tag is not closed', start)

    if text[cursor.position] in QUOTES:
        value = read_quoted(text, cursor)
    else:
        value = read_until_any(text, cursor, BAREWORD_STOP_CHARS)

    return key, value
