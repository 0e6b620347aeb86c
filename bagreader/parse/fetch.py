"""
Decoding of fetch.txt, the list of payload files that are to be retrieved
from remote locations rather than being present in the bag.
"""
import os, re
from urllib.parse import urlsplit

from ..access.bagit import read_text_lines
from ..access.exceptions import InvalidFetchFormat
from ..model import FetchItem, UNKNOWN_LENGTH
from .paths import default_codec, resolve_path, is_contained

_LENGTH_RE = re.compile(r"[0-9]+\Z")

def _parse_length(token, source):
    if token == '-':
        return UNKNOWN_LENGTH
    if not _LENGTH_RE.match(token):
        raise InvalidFetchFormat("Invalid fetch length: " + token, source)
    return int(token)

def _check_url(url, source):
    try:
        parts = urlsplit(url)
    except ValueError as ex:
        raise InvalidFetchFormat("Invalid fetch URL: {0} ({1})".format(url, ex),
                                 source)
    if not parts.scheme or not (parts.netloc or parts.path):
        raise InvalidFetchFormat("Fetch URL is not absolute: " + url, source)
    return url

def parse_fetch_lines(lines, bag_root=None, path_codec=None, check_paths=False,
                      source=None, logger=None):
    """
    parse the lines of a fetch.txt file into a list of FetchItems.

    :param lines:           the lines of the file, without line terminators
    :param str bag_root:    the absolute path to the bag's root directory;
                            needed only to check the destination paths
    :param path_codec:      the function to decode destination paths with
    :param bool check_paths:  if True, raise a MaliciousManifest exception
                            when a destination path resolves outside of
                            bag_root; otherwise, only issue a warning.
    :param str source:      the name of the fetch file (for messages)
    :param Logger logger:   a logger instance to send messages to.
    :raises InvalidFetchFormat:  if a line does not have the form
                            URL LENGTH PATH
    """
    if path_codec is None:
        path_codec = default_codec

    out = []
    for line in lines:
        # trailing whitespace belongs to the destination path
        line = line.lstrip()
        if not line.strip():
            continue

        parts = line.split(None, 2)
        if len(parts) != 3:
            raise InvalidFetchFormat("Invalid fetch entry: " + line, source)

        url = _check_url(parts[0], source)
        length = _parse_length(parts[1], source)
        path = path_codec(parts[2])

        if bag_root:
            if check_paths:
                resolve_path(bag_root, parts[2], path_codec, source)
            elif not is_contained(bag_root, os.path.join(bag_root, path)):
                if logger:
                    logger.warning("%s: destination %s is outside of the bag",
                                   source, path)

        if logger:
            logger.debug("Read URL [%s] length [%s] path [%s] from [%s]",
                         url, length, path, source)
        out.append(FetchItem(url, length, path))

    return out

def read_fetch(path, bag_root=None, path_codec=None, check_paths=False,
               encoding='utf-8', logger=None):
    """
    read the fetch.txt file at the given path.

    :param Path path:       the location of the fetch file
    :param str encoding:    the character encoding of the file
    :return: a list of FetchItems
    """
    lines = read_text_lines(path, encoding, logger)
    return parse_fetch_lines(lines, bag_root, path_codec, check_paths,
                             str(path), logger)
