# encoding=utf-8
'''Exceptions.'''


class ParseError(ValueError):
    '''The markup could not be parsed.

    Attributes:
        position (int): The character offset where the problem was found.
    '''
    def __init__(self, message, position):
        super().__init__(message, position)
        self.message = message
        self.position = position

    def __str__(self):
        return '{0} (at offset {1})'.format(self.message, self.position)

    def locate(self, text):
        '''Return the line and column of the error in the text.

        Returns:
            tuple: 1-based line and column numbers.
        '''
        position = min(self.position, len(text))
        line = text.count('\n', 0, position) + 1
        column = position - (text.rfind('\n', 0, position) + 1) + 1
        return line, column


class ScanError(ParseError):
    '''A lexical problem occurred while scanning characters.'''


class UnterminatedTag(ScanError):
    '''A ``<`` was not matched by a ``>`` before the end of input.'''


class UnterminatedAttributeValue(ScanError):
    '''A quoted attribute value was missing its closing quote.'''


class UnterminatedComment(ScanError):
    '''A ``<!--`` was not matched by a ``-->``.'''


class UnterminatedRawText(ScanError):
    '''A script or style body did not have a closing tag.'''


class MalformedTag(ScanError):
    '''A tag was not where it was expected or it had no name.'''


class StructuralError(ParseError):
    '''Tag nesting was not well formed.'''


class MismatchedCloseTag(StructuralError):
    '''A close tag did not match the innermost open element.'''


class UnclosedElements(StructuralError):
    '''The end of input was reached with elements still open.'''


class ExitStatus(object):
    '''Program exit status codes.

    Attributes:
        generic_error (1): An unclassified serious or fatal error occurred.
        parser_error (2): The document could not be parsed. Invalid
            program arguments also use this code.
        file_io_error (3): A problem with reading a file occurred.
    '''
    generic_error = 1
    parser_error = 2
    file_io_error = 3
