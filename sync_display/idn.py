"""
Internationalized domain name (IDN) conversion for URLs.

Only the host part of a URL is transcoded; scheme, user info, port, path
and query are left untouched. Labels are converted with the IDNA 2003
codec that ships with Python (``encodings.idna``).
"""
from __future__ import annotations

from encodings import idna
from typing import Callable, List

from sync_display.errors import InvalidHostLabel
from sync_display.logging import logger


def _label_to_ascii(label: str) -> str:
    return idna.ToASCII(label).decode('ascii')


def _label_to_unicode(label: str) -> str:
    if not label.isascii():
        # Already in Unicode form
        return label
    return idna.ToUnicode(label)


def _transcode_host(host: str, to_ascii: bool) -> str:
    """Transcode each dot-separated label of a host name.

    Raises:
        InvalidHostLabel: If the codec rejects a label
    """
    if not host:
        return host

    labels: List[str] = idna.dots.split(host)
    root = ''
    if len(labels) > 1 and labels[-1] == '':
        labels.pop()
        root = '.'

    convert: Callable[[str], str] = _label_to_ascii if to_ascii else _label_to_unicode
    try:
        converted = [convert(label) for label in labels]
    except UnicodeError as e:
        logger.debug(f'IDNA conversion failed for host {host!r}: {e}')
        raise InvalidHostLabel(host, str(e)) from e

    return '.'.join(converted) + root


def convert_idn(url: str, to_ascii: bool) -> str:
    """Convert the domain name in a URL to or from ASCII/Unicode.

    Leading dots are removed before the host is located and a single
    dot is put back in front of the result, so ``"..a.com"`` comes back
    as ``".a.com"``.

    Args:
        url: The URL where the domain name should be converted
        to_ascii: If True converts from Unicode to ASCII (``xn--`` labels),
            if False converts from ASCII to Unicode

    Returns:
        The URL containing the converted domain name

    Raises:
        InvalidHostLabel: If the host is not a valid IDNA domain name

    Examples:
        >>> convert_idn('http://bücher.de/shop', True)
        'http://xn--bcher-kva.de/shop'
    """
    stripped = url.lstrip('.')
    dots = '.' if len(stripped) < len(url) else ''

    # Host name starts after '//' or '@'
    host_start = 0
    if '//' in stripped:
        host_start = stripped.index('//') + len('//')
    elif '@' in stripped:
        host_start = stripped.index('@') + len('@')

    # A URL without a path ends with its host
    host_end = stripped.find('/', host_start)
    if host_end == -1:
        host_end = len(stripped)

    host = _transcode_host(stripped[host_start:host_end], to_ascii)

    return dots + stripped[:host_start] + host + stripped[host_end:]
