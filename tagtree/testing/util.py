import contextlib
import logging
import os
from tempfile import TemporaryDirectory

_logger = logging.getLogger(__name__)

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), 'samples')


def get_sample_path(filename):
    '''Return the path of a document in the samples directory.'''
    return os.path.join(SAMPLES_DIR, filename)


def read_sample(filename):
    '''Return the contents of a sample document as bytes.'''
    with open(get_sample_path(filename), 'rb') as file:
        return file.read()


@contextlib.contextmanager
def cd_tempdir():
    '''Change to a temporary directory for the duration of the block.'''
    original_dir = os.getcwd()

    with TemporaryDirectory() as temp_dir:
        try:
            os.chdir(temp_dir)
            _logger.debug('Switch to %s', temp_dir)
            yield temp_dir
        finally:
            os.chdir(original_dir)
