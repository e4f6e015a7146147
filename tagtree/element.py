# encoding=utf-8
'''HTML tree things.'''


TEXT_NAME = 'text'
'''Name of the synthetic element holding a run of text.'''
DOCTYPE_NAME = 'DOCTYPE'
COMMENT_NAME = 'XML COMMENT'
DECLARATION_NAME = 'DECLARATION'
'''Name of a ``<!...>`` that is neither a comment nor a doctype.'''
SYNTHETIC_NAMES = frozenset([
    TEXT_NAME, DOCTYPE_NAME, COMMENT_NAME, DECLARATION_NAME
])


class Element(object):
    '''A node in the document tree.

    Text, comments and doctypes are elements too. They are told apart by
    their name and flags.

    Attributes:
        name (str): The tag name of the element.
        attributes (dict): The attributes of the element.
        is_void (bool): Whether the element can not have children.
        is_close (bool): Whether the element is a close tag token.
        is_comment (bool): Whether the element is a comment.
        inner_text (str): The body of a comment, script, style or text.
        children (list): The child elements.
    '''
    __slots__ = ('name', 'attributes', 'is_void', 'is_close', 'is_comment',
                 'inner_text', 'children')

    def __init__(self, name, attributes=None, is_void=False, is_close=False,
                 is_comment=False, inner_text='', children=None):
        self.name = name
        self.attributes = attributes if attributes is not None else {}
        self.is_void = is_void
        self.is_close = is_close
        self.is_comment = is_comment
        self.inner_text = inner_text
        self.children = children if children is not None else []

    @classmethod
    def new_text(cls, text):
        '''Return a text element.'''
        return cls(TEXT_NAME, inner_text=text)

    @property
    def is_text(self):
        return self.name == TEXT_NAME

    def __repr__(self):
        return 'Element({0}, {1}, is_void={2}, is_close={3}, ' \
            'is_comment={4}, inner_text={5}, children={6})'.format(
                repr(self.name), repr(self.attributes), self.is_void,
                self.is_close, self.is_comment, repr(self.inner_text),
                len(self.children)
            )

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented

        pairs = [(self, other)]

        while pairs:
            element, other_element = pairs.pop()

            if element._fields() != other_element._fields():
                return False

            pairs.extend(zip(element.children, other_element.children))

        return True

    __hash__ = None

    def _fields(self):
        return (self.name, self.attributes, self.is_void, self.is_close,
                self.is_comment, self.inner_text, len(self.children))

    def iter_elements(self):
        '''Return an iterator of this element and its descendants.

        Elements are returned in document order (depth-first pre-order).
        '''
        stack = [self]

        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    def get_elements_by_tag_name(self, name):
        '''Return the descendants, including this element, with the name.'''
        return [element for element in self.iter_elements()
                if element.name == name]

    def to_debug_string(self):
        '''Return markup resembling the source of the element.

        The result is meant for diagnostics. It is not guaranteed to
        match the original markup.
        '''
        parts = []
        stack = [self]

        while stack:
            element = stack.pop()

            if isinstance(element, str):
                # End of a container whose children were written
                parts.append(element)
                continue

            tag = element._format_tag()

            if tag is not None:
                parts.append(tag)
                continue

            parts.append('<{0}{1}>'.format(
                element.name, format_attributes(element.attributes)
            ))
            stack.append('{0}</{1}>'.format(element.inner_text, element.name))
            stack.extend(reversed(element.children))

        return ''.join(parts)

    def _format_tag(self):
        '''Return the markup of an element without children, or None.'''
        if self.is_text:
            return self.inner_text

        if self.is_comment:
            return '<!--{0}-->'.format(self.inner_text)

        if self.name == DOCTYPE_NAME:
            return '<!DOCTYPE{0}>'.format(
                ''.join(' ' + key for key in self.attributes)
            )

        if self.name == DECLARATION_NAME:
            return '<!{0}>'.format(self.inner_text)

        if self.is_close:
            return '</{0}>'.format(self.name)

        if self.is_void:
            return '<{0}{1}/>'.format(
                self.name, format_attributes(self.attributes)
            )


class Document(object):
    '''The parse result: top-level elements in document order.

    Attributes:
        children (list): The top-level :class:`Element` instances.
    '''
    def __init__(self, children=None):
        self.children = children if children is not None else []

    def __repr__(self):
        return 'Document(children={0})'.format(len(self.children))

    def non_text_children(self):
        '''Return the top-level elements that are not text.'''
        return [child for child in self.children if not child.is_text]

    def iter_elements(self):
        '''Return an iterator of every element in document order.'''
        for child in self.children:
            for element in child.iter_elements():
                yield element

    def get_elements_by_tag_name(self, name):
        '''Return every element in the document with the name.

        The search is recursive and results are in document order. Text
        runs can be found with the name ``text``.
        '''
        return [element for element in self.iter_elements()
                if element.name == name]

    def iter_text(self):
        '''Return an iterator of the text runs in document order.

        Script and style bodies and comments are not included.
        '''
        for element in self.iter_elements():
            if element.is_text:
                yield element.inner_text

    def to_debug_string(self):
        return ''.join(child.to_debug_string() for child in self.children)


def format_attributes(attributes):
    '''Return the attributes as markup, with a leading space.'''
    parts = []

    for key, value in attributes.items():
        if not value:
            parts.append(' {0}'.format(key))
        elif '"' in value:
            parts.append(" {0}='{1}'".format(key, value))
        else:
            parts.append(' {0}="{1}"'.format(key, value))

    return ''.join(parts)
