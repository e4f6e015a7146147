'''Open element bookkeeping.'''


class ElementStack(object):
    '''A LIFO of the currently open elements, innermost last.

    The stack only references the elements. They belong to the tree they
    were attached to.
    '''
    def __init__(self):
        self._elements = []

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __repr__(self):
        return 'ElementStack({0})'.format(repr(self.to_debug_string()))

    @property
    def count(self):
        '''The number of open elements.'''
        return len(self._elements)

    def push(self, element):
        self._elements.append(element)

    def pop(self):
        '''Remove and return the innermost element.

        Raises:
            IndexError: The stack is empty.
        '''
        if not self._elements:
            raise IndexError('pop from empty element stack')

        return self._elements.pop()

    def peek(self):
        '''Return the innermost element.

        Raises:
            IndexError: The stack is empty.
        '''
        if not self._elements:
            raise IndexError('peek at empty element stack')

        return self._elements[-1]

    def to_debug_string(self):
        '''Return the element names from outermost to innermost.'''
        return ' > '.join(element.name for element in self._elements)
