# encoding=utf-8
'''Logging.'''

import logging


LOG_VERY_QUIET = logging.CRITICAL
LOG_QUIET = logging.ERROR
LOG_NO_VERBOSE = logging.INFO
LOG_VERBOSE = logging.INFO - 1
LOG_DEBUG = logging.DEBUG


class BraceMessage(object):
    '''A log message formatted with :meth:`str.format` only when emitted.'''
    def __init__(self, fmt, *args, **kwargs):
        self.fmt = fmt
        self.args = args
        self.kwargs = kwargs

    def __str__(self):
        return self.fmt.format(*self.args, **self.kwargs)


class StyleAdapter(logging.LoggerAdapter):
    '''Logger adapter that accepts brace style arguments.

    Example::

        _logger = StyleAdapter(logging.getLogger(__name__))
        _logger.info('Read {0} bytes.', size)
    '''
    PASSTHROUGH_KWARGS = ('exc_info', 'extra', 'stack_info')

    def __init__(self, logger, extra=None):
        super().__init__(logger, extra or {})

    def log(self, level, msg, *args, **kwargs):
        if not self.isEnabledFor(level):
            return

        log_kwargs = dict(
            (key, kwargs.pop(key)) for key in self.PASSTHROUGH_KWARGS
            if key in kwargs
        )
        log_kwargs.setdefault('extra', self.extra)

        self.logger._log(
            level, BraceMessage(msg, *args, **kwargs), (), **log_kwargs
        )


def setup_console_logger(verbosity=LOG_NO_VERBOSE, stream=None):
    '''Set up the root logger to print program messages.

    A handler with a formatter is added to the root logger. Only records
    from ``tagtree`` loggers are printed.

    Args:
        verbosity (int): One of the ``LOG_`` levels.
        stream: A file object. If not given, standard error is used.

    Returns:
        logging.Handler: The installed handler.
    '''
    assert (
        LOG_VERY_QUIET >
        LOG_QUIET >
        LOG_NO_VERBOSE >
        LOG_VERBOSE >
        LOG_DEBUG
    )

    root_logger = logging.getLogger()

    if root_logger.getEffectiveLevel() > verbosity:
        root_logger.setLevel(verbosity)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    handler.setLevel(verbosity)
    handler.addFilter(logging.Filter('tagtree'))
    root_logger.addHandler(handler)

    return handler


def remove_console_logger(handler):
    '''Remove a handler installed by :func:`setup_console_logger`.'''
    logging.getLogger().removeHandler(handler)
