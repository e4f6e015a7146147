# encoding=utf-8
'''String and binary data functions.'''
import codecs
import itertools
import logging

from bs4.dammit import EncodingDetector

from tagtree.logging import BraceMessage as __


_logger = logging.getLogger(__name__)

CHARSET_ALIASES = {
    'macintosh': 'mac-roman',
    'x-sjis': 'shift-jis',
}
'''Charset names seen in documents that Python does not know.'''


def to_str(instance, encoding='utf-8'):
    '''Convert an instance recursively to string.'''
    if isinstance(instance, str):
        return instance
    elif hasattr(instance, 'decode'):
        return instance.decode(encoding)
    elif isinstance(instance, list):
        return list([to_str(item, encoding) for item in instance])
    elif isinstance(instance, tuple):
        return tuple([to_str(item, encoding) for item in instance])
    else:
        return instance


def normalize_codec_name(name):
    '''Return the Python name of the encoder/decoder

    Returns:
        str, None
    '''
    name = CHARSET_ALIASES.get(name.lower(), name)

    try:
        return codecs.lookup(name).name
    except (LookupError, TypeError):
        # TypeError occurs when name contains \x00
        pass


def detect_encoding(data, encoding=None, fallback='latin1', is_html=False):
    '''Detect the character encoding of the data.

    Args:
        data (bytes): The document.
        encoding (str): An encoding that should be tried first.
        fallback (str): The encoding used when nothing else fits.
        is_html (bool): Whether to look for a ``meta`` charset declaration.

    Returns:
        str: The name of the codec

    Raises:
        ValueError: The codec could not be detected. This error can only
        occur if fallback is not a "lossless" codec.
    '''
    if encoding:
        encoding = normalize_codec_name(encoding)

    detector = EncodingDetector(
        data,
        known_definite_encodings=(encoding,) if encoding else (),
        is_html=is_html
    )
    candidates = itertools.chain(detector.encodings, (fallback,))

    for candidate in candidates:
        if not candidate:
            continue

        candidate = normalize_codec_name(candidate)

        if not candidate:
            continue

        if candidate == 'ascii' and fallback != 'ascii':
            # Something ASCII compatible and wider is a safer guess
            continue

        if try_decoding(data, candidate):
            _logger.debug(__('Detected encoding {0}.', candidate))
            return candidate

    raise ValueError('Unable to detect encoding.')


def try_decoding(data, encoding):
    '''Return whether the Python codec could decode the data.'''
    try:
        data.decode(encoding, 'strict')
    except UnicodeError:
        # Data under 16 bytes is very unlikely to be truncated
        if len(data) > 16:
            for trim in (1, 2, 3):
                trimmed_data = data[:-trim]
                if trimmed_data:
                    try:
                        trimmed_data.decode(encoding, 'strict')
                    except UnicodeError:
                        continue
                    else:
                        return True
        return False
    else:
        return True


def printable_str(text, keep_newlines=False):
    '''Escape any control or non-ASCII characters from string.

    This function is intended for use with strings from an untrusted
    source such as a document being written to logs.
    '''
    if isinstance(text, str):
        new_text = ascii(text)[1:-1]
    else:
        new_text = ascii(text)

    if keep_newlines:
        new_text = new_text.replace('\\r', '\r').replace('\\n', '\n')

    return new_text


def decode_html(data, encoding=None):
    '''Decode an HTML document.

    Args:
        data (bytes): The document.
        encoding (str): An encoding that should be tried first.

    Returns:
        str: The text without a byte order mark. Undecodable bytes are
        replaced.
    '''
    encoding = detect_encoding(data, encoding=encoding, is_html=True)
    stripped_data, bom_encoding = EncodingDetector.strip_byte_order_mark(data)

    if bom_encoding and normalize_codec_name(bom_encoding) == encoding:
        data = stripped_data

    return data.decode(encoding, 'replace')
