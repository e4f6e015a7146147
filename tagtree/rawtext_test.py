import unittest

from tagtree.errors import UnterminatedRawText
from tagtree.rawtext import read_until_script_close, read_raw_text, \
    read_until_close_tag, is_script_content_type
from tagtree.scanner import Cursor


class TestRawText(unittest.TestCase):
    def test_read_until_script_close(self):
        test_cases = {
            'var a = "abc";</script>': 'var a = "abc";',
            "alert('</script>');</script>": "alert('</script>');",
            '//</script>\n\t\tvar foo = "bar";\n\t\t</script>':
                '//</script>\n\t\tvar foo = "bar";\n\t\t',
            "var foo = 'bar';\n\t\t/* this is a block \n\t\tcomment and is "
            "annoying */\n\t\tfoo = 'baz';\n\t\t</script>":
                "var foo = 'bar';\n\t\t/* this is a block \n\t\tcomment and "
                "is annoying */\n\t\tfoo = 'baz';\n\t\t",
        }

        for text, expected in test_cases.items():
            cursor = Cursor()
            result = read_until_script_close(text, cursor, 'text/javascript')

            self.assertEqual(expected, result)
            self.assertEqual(len(text), cursor.position)

    def test_script_close_tag_case_and_space(self):
        text = 'x = 1;</SCRIPT >rest'
        cursor = Cursor()

        self.assertEqual('x = 1;', read_until_script_close(text, cursor))
        self.assertEqual('rest', text[cursor.position:])

    def test_script_escaped_quote(self):
        text = r"""s = 'it\'s </script>'; t = "\"</script>";</script>"""
        cursor = Cursor()

        self.assertEqual(
            r"""s = 'it\'s </script>'; t = "\"</script>";""",
            read_until_script_close(text, cursor)
        )

    def test_script_comment_quotes(self):
        text = "// don't\nx = 1; /* it's */ y = 2;</script>"
        cursor = Cursor()

        self.assertEqual(
            "// don't\nx = 1; /* it's */ y = 2;",
            read_until_script_close(text, cursor)
        )

    def test_script_string_ends_at_newline(self):
        text = "re = /'/;\nx = 1;\n</script>"
        cursor = Cursor()

        self.assertEqual(
            "re = /'/;\nx = 1;\n", read_until_script_close(text, cursor)
        )

    def test_script_less_than(self):
        text = 'if (a <b) {}</script>'
        self.assertEqual(
            'if (a <b) {}', read_until_script_close(text, Cursor())
        )

    def test_script_empty(self):
        cursor = Cursor()
        self.assertEqual('', read_until_script_close('</script>', cursor))
        self.assertEqual(9, cursor.position)

    def test_script_non_javascript(self):
        text = 'var a = "</script>";</script>'
        cursor = Cursor()

        self.assertEqual(
            'var a = "',
            read_until_script_close(text, cursor, 'text/x-template')
        )

    def test_read_raw_text_style(self):
        text = 'a::after { content: "</style>"; }</style>'
        cursor = Cursor()

        self.assertEqual(
            'a::after { content: "',
            read_raw_text(text, cursor, 'style', 'text/css')
        )

    def test_read_raw_text_default_script(self):
        text = "document.write('<b></script>');</script>"

        self.assertEqual(
            "document.write('<b></script>');",
            read_raw_text(text, Cursor(), 'script')
        )

    def test_unterminated(self):
        self.assertRaises(
            UnterminatedRawText, read_until_script_close,
            'var a = 1;', Cursor()
        )
        self.assertRaises(
            UnterminatedRawText, read_until_script_close,
            'var a = "</script>";', Cursor()
        )
        self.assertRaises(
            UnterminatedRawText, read_until_close_tag,
            'body { }', Cursor(), 'style'
        )

        try:
            read_raw_text('<style>p {}', Cursor(7), 'style')
        except UnterminatedRawText as error:
            self.assertEqual(7, error.position)
        else:
            self.fail()

    def test_is_script_content_type(self):
        self.assertTrue(is_script_content_type(''))
        self.assertTrue(is_script_content_type(None))
        self.assertTrue(is_script_content_type('text/javascript'))
        self.assertTrue(is_script_content_type('Application/X-JavaScript'))
        self.assertTrue(is_script_content_type('text/ecmascript'))
        self.assertTrue(is_script_content_type('module'))
        self.assertFalse(is_script_content_type('text/template'))
        self.assertFalse(is_script_content_type('application/ld+json'))
