"""
Decoding of the file paths listed in manifests and fetch.txt, and the check
that keeps them inside the bag.

Manifest lines cannot carry bare line breaks, so the BagIt format escapes
them: CR and LF (and the escape character itself) are written as percent
escapes (%0D, %0A, %25).  Older bags escape them with backslashes instead
(\\r, \\n, \\\\); PathCodec decodes these when asked to.
"""
import os, re

from ..access.exceptions import MaliciousManifest

_percent_escapes = { "0a": "\n", "0d": "\r", "25": "%" }
_backslash_escapes = { "n": "\n", "r": "\r", "\\": "\\" }

class PathCodec(object):
    """
    a converter between literal file paths and their encoded form as they
    appear in a manifest or fetch.txt.  Instances are callable as a
    shorthand for decode().
    """

    def __init__(self, percent=True, backslash=False):
        """
        :param bool percent:    if True, decode %0A, %0D, and %25 escapes
        :param bool backslash:  if True, decode \\n, \\r, and \\\\ escapes
        """
        if not percent and not backslash:
            raise ValueError("PathCodec: at least one escape style required")
        self.percent = percent
        self.backslash = backslash

        alts = []
        if percent:
            alts.append(r'%(0[AaDd]|25)')
        if backslash:
            alts.append(r'\\([nr\\])')
        self._decre = re.compile('|'.join(alts))

    def _unescape(self, match):
        for grp in match.groups():
            if grp is None:
                continue
            if match.group(0).startswith('%'):
                return _percent_escapes[grp.lower()]
            return _backslash_escapes[grp]
        return match.group(0)

    def decode(self, encoded):
        """
        return the literal path represented by the encoded string
        """
        return self._decre.sub(self._unescape, encoded)

    def encode(self, path):
        """
        return the path with the characters that cannot appear in a manifest
        line escaped.  Percent escapes are used unless this codec only
        supports backslash escapes.
        """
        if self.percent:
            return path.replace('%', '%25').replace('\n', '%0A').replace('\r', '%0D')
        return path.replace('\\', '\\\\').replace('\n', '\\n').replace('\r', '\\r')

    def __call__(self, encoded):
        return self.decode(encoded)

default_codec = PathCodec()

def is_contained(root, path):
    """
    return True if the given absolute path, once normalized, is located
    below the given root directory.  The root itself is not considered
    contained.  Symbolic links are not resolved.
    """
    root = os.path.normpath(root)
    path = os.path.normpath(path)
    if path == root:
        return False
    try:
        return os.path.commonpath([root, path]) == root
    except ValueError:
        # e.g. paths on different drives
        return False

def resolve_path(root, encoded, codec=None, source=None):
    """
    decode a path as it appears in a manifest and return it as a normalized
    absolute path below the bag's root directory.

    :param str root:     the absolute path to the bag's root directory
    :param str encoded:  the path as given in the manifest, relative to root
    :param codec:        the function to use to decode the path; if None,
                         default_codec is used.
    :param str source:   the file the path was read from (for error reporting)
    :raises MaliciousManifest:  if the path resolves to a location outside
                         of root
    """
    if codec is None:
        codec = default_codec
    relpath = os.path.normpath(codec(encoded))
    path = os.path.normpath(os.path.join(root, relpath))
    if _escapes(relpath) or not is_contained(root, path):
        raise MaliciousManifest(path, root, source)
    return path

def _escapes(relpath):
    # relpath is already normalized, so any ".." left is at the front
    return os.path.isabs(relpath) or relpath == os.curdir or \
           relpath == os.pardir or relpath.startswith(os.pardir + os.sep)
