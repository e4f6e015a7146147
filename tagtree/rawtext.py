'''Raw-text reader for elements whose body is not markup.'''
import enum
import functools
import re

from tagtree.errors import UnterminatedRawText
from tagtree.scanner import QUOTES


RAW_TEXT_ELEMENTS = frozenset(['script', 'style'])
'''Elements whose body is captured verbatim instead of being tokenized.'''

SCRIPT_CONTENT_TYPE_KEYWORDS = ('javascript', 'ecmascript', 'jscript')
DEFAULT_SCRIPT_CONTENT_TYPE = 'text/javascript'


class ScriptState(enum.Enum):
    '''Lexical states of the script body scanner.'''
    code = 'code'
    string = 'string'
    line_comment = 'line_comment'
    block_comment = 'block_comment'


@functools.lru_cache()
def get_close_tag_re(name):
    '''Return a pattern matching the close tag of the element.

    The tag name is matched case-insensitively and whitespace is allowed
    before the ``>``.
    '''
    return re.compile(
        r'</' + re.escape(name) + r'[ \t\n\r\f]*>', re.IGNORECASE
    )


def is_script_content_type(content_type):
    '''Return whether the ``type`` of a script is a JavaScript dialect.

    A missing type counts as JavaScript.
    '''
    content_type = (content_type or '').strip().lower()

    if not content_type or content_type == 'module':
        return True

    return any(keyword in content_type
               for keyword in SCRIPT_CONTENT_TYPE_KEYWORDS)


def read_raw_text(text, cursor, name, content_type=''):
    '''Consume the body and close tag of a raw-text element.

    The cursor must be positioned just after the open tag. It is left
    after the close tag.

    Args:
        text (str): The document.
        cursor (Cursor): The shared cursor.
        name (str): The element name, such as ``script``.
        content_type (str): The ``type`` attribute of the element.

    Returns:
        str: The body, excluding the close tag.

    Raises:
        UnterminatedRawText: The close tag was not found.
    '''
    if name == 'script':
        return read_until_script_close(
            text, cursor, content_type or DEFAULT_SCRIPT_CONTENT_TYPE,
            name=name
        )
    else:
        return read_until_close_tag(text, cursor, name)


def read_until_close_tag(text, cursor, name):
    '''Consume up to and including the literal close tag.

    Returns:
        str: The text before the close tag.
    '''
    start = cursor.position
    match = get_close_tag_re(name).search(text, start)

    if not match:
        raise UnterminatedRawText(
            'No close tag for {0}'.format(name), start
        )

    cursor.position = match.end()
    return text[start:match.start()]


def read_until_script_close(text, cursor,
                            content_type=DEFAULT_SCRIPT_CONTENT_TYPE,
                            name='script'):
    '''Consume a script body up to and including its close tag.

    A close tag inside a string literal or a comment does not end the
    script. Content types that are not JavaScript fall back to
    :func:`read_until_close_tag`.

    Returns:
        str: The script body.
    '''
    if not is_script_content_type(content_type):
        return read_until_close_tag(text, cursor, name)

    close_tag_re = get_close_tag_re(name)
    start = position = cursor.position
    length = len(text)
    state = ScriptState.code
    quote = None

    while position < length:
        char = text[position]

        if state == ScriptState.code:
            if char == '<':
                match = close_tag_re.match(text, position)

                if match:
                    cursor.position = match.end()
                    return text[start:position]
            elif char in QUOTES:
                state = ScriptState.string
                quote = char
            elif text.startswith('//', position):
                state = ScriptState.line_comment
                position += 1
            elif text.startswith('/*', position):
                state = ScriptState.block_comment
                position += 1

        elif state == ScriptState.string:
            if char == '\\':
                position += 1
            elif char == quote or char == '\n':
                # JavaScript strings can not span lines
                state = ScriptState.code

        elif state == ScriptState.line_comment:
            if char == '\n':
                state = ScriptState.code

        elif text.startswith('*/', position):
            state = ScriptState.code
            position += 1

        position += 1

    raise UnterminatedRawText('No close tag for {0}'.format(name), start)
