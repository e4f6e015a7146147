import unittest

from tagtree.element import Element
from tagtree.stack import ElementStack


class TestElementStack(unittest.TestCase):
    def test_push_peek_pop(self):
        stack = ElementStack()

        self.assertEqual(0, stack.count)

        stack.push(Element('br', is_void=True))
        self.assertEqual(1, stack.count)

        stack.push(Element('div', {'class': 'first'}))
        self.assertEqual(2, stack.count)

        stack.push(Element('div', {'class': 'second'}))
        self.assertEqual(3, stack.count)

        self.assertEqual('br > div > div', stack.to_debug_string())
        self.assertEqual('div', stack.peek().name)
        self.assertEqual(3, stack.count)

        div = stack.pop()
        self.assertEqual('div', div.name)
        self.assertEqual('second', div.attributes['class'])
        self.assertEqual(2, stack.count)
        self.assertEqual(2, len(stack))
        self.assertEqual(['br', 'div'], [element.name for element in stack])

    def test_empty(self):
        stack = ElementStack()

        self.assertRaises(IndexError, stack.pop)
        self.assertRaises(IndexError, stack.peek)
        self.assertEqual('', stack.to_debug_string())
        self.assertFalse(stack)

    def test_holds_references(self):
        stack = ElementStack()
        element = Element('ul')
        stack.push(element)

        stack.peek().children.append(Element('li'))

        self.assertEqual(1, len(element.children))
        self.assertIs(element, stack.pop())
