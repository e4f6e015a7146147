# encoding=utf-8
'''Application main interface.'''
from collections import OrderedDict
import collections
import gettext
import logging
import sys

from tagtree.errors import ExitStatus, ParseError
from tagtree.logging import StyleAdapter, LOG_VERBOSE, \
    setup_console_logger, remove_console_logger
from tagtree.options import AppArgumentParser
from tagtree.parser import parse
import tagtree.string


_logger = StyleAdapter(logging.getLogger(__name__))
_ = gettext.gettext


class Application(object):
    '''Reads one document, parses it and prints the requested output.

    Args:
        args: The parsed program options.
        stdin: A binary file object used when the input is ``-``.
        stdout: A text file object for the output.
    '''
    ERROR_CODE_MAP = OrderedDict([
        (ParseError, ExitStatus.parser_error),
        (OSError, ExitStatus.file_io_error),
        # Anything else is ExitStatus.generic_error.
    ])
    '''Mapping of error types to exit status.'''

    EXPECTED_EXCEPTIONS = (ParseError, OSError)
    '''Exception classes that are not crashes.'''

    def __init__(self, args, stdin=None, stdout=None):
        self._args = args
        self._stdin = stdin
        self._stdout = stdout or sys.stdout
        self._exit_code = 0

    @property
    def exit_code(self):
        return self._exit_code

    def run(self):
        '''Run the application.

        Returns:
            int: The exit status.
        '''
        try:
            text = self._read_text()
            document = self._parse(text)
        except Exception as error:
            if not isinstance(error, self.EXPECTED_EXCEPTIONS):
                _logger.exception(_('Fatal exception.'))
            elif not isinstance(error, ParseError):
                _logger.error(
                    _('Could not read {0}: {1}'), self._args.input, error
                )

            self._update_exit_code_from_error(error)
        else:
            self._write_output(document)

        _logger.log(LOG_VERBOSE, _('Exiting with status {0}.'),
                    self._exit_code)

        return self._exit_code

    def _read_text(self):
        if self._args.input == '-':
            stdin = self._stdin or sys.stdin.buffer
            data = stdin.read()
        else:
            with open(self._args.input, 'rb') as file:
                data = file.read()

        _logger.log(LOG_VERBOSE, _('Read {0} bytes from {1}.'),
                    len(data), self._args.input)

        return tagtree.string.decode_html(data, encoding=self._args.encoding)

    def _parse(self, text):
        try:
            document = parse(text)
        except ParseError as error:
            line, column = error.locate(text)
            _logger.error(
                _('{path}:{line}:{column}: {message}'),
                path=self._args.input, line=line, column=column,
                message=tagtree.string.printable_str(error.message)
            )
            raise

        _logger.log(LOG_VERBOSE, _('Parsed {0} elements.'),
                    sum(1 for dummy in document.iter_elements()))

        return document

    def _write_output(self, document):
        args = self._args
        stdout = self._stdout

        if args.tags:
            for element in document.iter_elements():
                if element.name in args.tags:
                    print(element.to_debug_string(), file=stdout)

        elif args.text:
            for text in document.iter_text():
                text = text.strip()

                if text:
                    print(text, file=stdout)

        elif args.summary:
            counter = collections.Counter(
                element.name for element in document.iter_elements()
            )

            for name, count in counter.most_common():
                print('{0}\t{1}'.format(count, name), file=stdout)

        else:
            print(document.to_debug_string(), file=stdout)

    def _update_exit_code_from_error(self, error):
        '''Set the exit code based on the error type.

        Args:
            error (:class:`Exception`): An exception instance.
        '''
        for error_type, exit_code in self.ERROR_CODE_MAP.items():
            if isinstance(error, error_type):
                self._exit_code = exit_code
                break
        else:
            self._exit_code = ExitStatus.generic_error


def main(args=None, exit=True, stdin=None, stdout=None):
    '''Program entry point.

    Args:
        args (list): The program arguments. ``sys.argv`` is used if not given.
        exit (bool): Whether to call :func:`sys.exit` when done.

    Returns:
        int: The exit status, if `exit` is false.
    '''
    arg_parser = AppArgumentParser()
    args = arg_parser.parse_args(args)

    handler = setup_console_logger(args.verbosity)

    try:
        exit_code = Application(args, stdin=stdin, stdout=stdout).run()
    finally:
        remove_console_logger(handler)

    if exit:
        sys.exit(exit_code)
    else:
        return exit_code
