import unittest

from tagtree.scanner import Cursor, read_whitespace, read_until_tag, \
    read_until_any


class TestScanner(unittest.TestCase):
    def test_read_whitespace(self):
        text = '     \n\t     this is a test string ...'
        cursor = Cursor()

        self.assertEqual('     \n\t     ', read_whitespace(text, cursor))
        self.assertEqual(12, cursor.position)
        self.assertEqual('', read_whitespace(text, cursor))
        self.assertEqual(12, cursor.position)

    def test_read_whitespace_at_end(self):
        cursor = Cursor(3)
        self.assertEqual('', read_whitespace('abc', cursor))
        self.assertEqual(3, cursor.position)

    def test_read_until_tag(self):
        text = '      this is a test of reading until the tag <area/>'
        cursor = Cursor()

        self.assertEqual(
            '      this is a test of reading until the tag ',
            read_until_tag(text, cursor)
        )
        self.assertEqual('<area/>', text[cursor.position:])

    def test_read_until_tag_no_tag(self):
        text = 'there is no tag.'
        cursor = Cursor()

        self.assertEqual(text, read_until_tag(text, cursor))
        self.assertEqual(len(text), cursor.position)
        self.assertTrue(cursor.at_end(text))

    def test_read_until_tag_at_tag(self):
        for text in ("<a href='things.html'>things</a>",
                     '<br/> more text ...',
                     '</div>',
                     '< /div>',
                     '<!-- comment -->'):
            cursor = Cursor()
            self.assertEqual('', read_until_tag(text, cursor))
            self.assertEqual(0, cursor.position)

    def test_read_until_tag_literal_less_than(self):
        text = 'if a < b and 1<2 then <b>bold</b>'
        cursor = Cursor()

        self.assertEqual('if a < b and 1<2 then ', read_until_tag(text, cursor))
        self.assertTrue(cursor.startswith(text, '<b>'))

    def test_read_until_tag_composes(self):
        text = 'one<i>two</i>'
        cursor = Cursor()

        self.assertEqual('one', read_until_tag(text, cursor))
        cursor.position += len('<i>')
        self.assertEqual('two', read_until_tag(text, cursor))
        self.assertEqual(9, cursor.position)

    def test_read_until_any(self):
        cursor = Cursor(1)
        self.assertEqual('div', read_until_any('<div class="a">', cursor, ' />'))
        self.assertEqual(4, cursor.position)

    def test_cursor_startswith(self):
        cursor = Cursor(1)
        self.assertTrue(cursor.startswith('<!DOCTYPE html>', '!doctype', True))
        self.assertFalse(cursor.startswith('<!DOCTYPE html>', '!doctype'))
