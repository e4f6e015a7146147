# encoding=utf-8
'''Program options.'''
import argparse
import gettext
import logging
import sys

from tagtree.element import SYNTHETIC_NAMES
from tagtree.logging import BraceMessage as __, LOG_VERY_QUIET, LOG_QUIET, \
    LOG_NO_VERBOSE, LOG_VERBOSE, LOG_DEBUG
import tagtree.string
import tagtree.version


_ = gettext.gettext
_logger = logging.getLogger(__name__)


class AppHelpFormatter(argparse.HelpFormatter):
    def _get_help_string(self, action):
        # Modified from argparse
        help = action.help

        if '%(default)' not in action.help:
            if action.default and not isinstance(action.default, bool) \
               and action.default is not argparse.SUPPRESS:
                defaulting_nargs = [argparse.OPTIONAL, argparse.ZERO_OR_MORE]
                if action.option_strings or action.nargs in defaulting_nargs:
                    help += _(' (default: %(default)s)')
        return help


class AppArgumentParser(argparse.ArgumentParser):
    '''An Argument Parser that builds up the application options.'''
    def __init__(self, *args, **kwargs):
        super().__init__(
            *args,
            prog='tagtree',
            description=_('Parse an HTML document into an element tree.'),
            formatter_class=AppHelpFormatter,
            **kwargs
        )
        self._add_app_args()

    def parse_args(self, args=None, namespace=None):
        if args is None:
            args = sys.argv[1:]

        args = super().parse_args(
            args=tagtree.string.to_str(args),
            namespace=namespace
        )

        self._post_parse_args(args)
        return args

    def _add_app_args(self):
        self.add_argument(
            'input',
            metavar='FILE',
            help=_('the document to parse, or - to read standard input')
        )
        self.add_argument(
            '-V',
            '--version',
            action='version',
            version=tagtree.version.__version__
        )
        self.add_argument(
            '--encoding',
            metavar='ENC',
            help=_('read the document using encoding ENC instead of '
                   'detecting it')
        )
        self._add_output_args()
        self._add_log_args()

    def _add_output_args(self):
        group = self.add_argument_group(_('output'))
        output_group = group.add_mutually_exclusive_group()
        output_group.add_argument(
            '-t',
            '--tag',
            metavar='NAME',
            dest='tags',
            action='append',
            help=_('print every element named NAME')
        )
        output_group.add_argument(
            '--text',
            action='store_true',
            help=_('print the text of the document, one run per line')
        )
        output_group.add_argument(
            '--summary',
            action='store_true',
            help=_('print the number of elements for each tag name')
        )

    def _add_log_args(self):
        group = self.add_argument_group(_('logging'))
        verbosity_group = group.add_mutually_exclusive_group()
        verbosity_group.add_argument(
            '-d',
            '--debug',
            dest='verbosity',
            action='store_const',
            const=LOG_DEBUG,
            help=_('print debugging messages')
        )
        verbosity_group.add_argument(
            '-v',
            '--verbose',
            dest='verbosity',
            action='store_const',
            const=LOG_VERBOSE,
            help=_('print informative program messages')
        )
        verbosity_group.add_argument(
            '-nv',
            '--no-verbose',
            dest='verbosity',
            action='store_const',
            const=LOG_NO_VERBOSE,
            help=_('print program messages and errors')
        )
        verbosity_group.add_argument(
            '-q',
            '--quiet',
            dest='verbosity',
            action='store_const',
            const=LOG_QUIET,
            help=_('print program error messages')
        )
        verbosity_group.add_argument(
            '-qq',
            '--very-quiet',
            dest='verbosity',
            action='store_const',
            const=LOG_VERY_QUIET,
            help=_('do not print program messages unless critical')
        )

    def _post_parse_args(self, args):
        if args.encoding:
            encoding = tagtree.string.normalize_codec_name(args.encoding)

            if not encoding:
                self.error(_('unknown encoding {0}').format(args.encoding))

            _logger.debug(__('Encoding override: {0}', encoding))
            args.encoding = encoding

        if args.tags:
            args.tags = [tag if tag in SYNTHETIC_NAMES else tag.lower()
                         for tag in args.tags]

        if not args.verbosity:
            args.verbosity = LOG_NO_VERBOSE
