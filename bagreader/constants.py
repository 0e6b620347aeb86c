"""
Common data about the BagIt layout read by this package, along with the
Version class used to represent a bag's declared BagIt version.
"""
from collections import namedtuple

from .access.exceptions import MalformedVersion

BAGIT_FILE = "bagit.txt"
BAG_INFO_FILE = "bag-info.txt"
PACKAGE_INFO_FILE = "package-info.txt"     # versions 0.93 - 0.95 only
FETCH_FILE = "fetch.txt"

# tag files lived in a hidden subdirectory in an older, incubating layout
LEGACY_TAG_DIR = ".bagit"

MANIFEST_PREFIX = "manifest-"
TAGMANIFEST_PREFIX = "tagmanifest-"

VERSION_TAG = "BagIt-Version"
ENCODING_TAG = "Tag-File-Character-Encoding"
DEFAULT_ENCODING = "UTF-8"

TAG_SEPARATOR = ":"

def _2int(sint):
    if not sint.isdigit():
        raise ValueError(sint)
    return int(sint)

class Version(namedtuple("Version", "major minor")):
    """
    a BagIt version, a (major, minor) pair of non-negative integers.
    Instances order lexicographically and can be compared directly against
    "MAJOR.MINOR" strings and tuples.  Hashing follows the tuple, not the
    string, so parse a string before using it as a set member or dict key.
    """
    __slots__ = ()

    def __new__(cls, major, minor):
        if not isinstance(major, int) or not isinstance(minor, int) or \
           major < 0 or minor < 0:
            raise ValueError("Version fields must be non-negative integers: "+
                             repr((major, minor)))
        return super(Version, cls).__new__(cls, major, minor)

    def __str__(self):
        return "{0}.{1}".format(self.major, self.minor)

    def _coerce(self, other):
        if isinstance(other, Version):
            return other
        if isinstance(other, str):
            try:
                return parse_version(other)
            except MalformedVersion:
                return NotImplemented
        if isinstance(other, tuple):
            return tuple(other)
        return NotImplemented

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return tuple(self) == tuple(other)

    def __ne__(self, other):
        out = self.__eq__(other)
        if out is NotImplemented:
            return out
        return not out

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return tuple(self) < tuple(other)

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return tuple(self) <= tuple(other)

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return tuple(self) > tuple(other)

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return tuple(self) >= tuple(other)

    __hash__ = tuple.__hash__

def parse_version(vers, source=None):
    """
    convert a "MAJOR.MINOR" version string to a Version instance.

    :param str vers:    the version string, e.g. "0.97"
    :param str source:  the file the string was read from (for error
                        reporting)
    :raises MalformedVersion:  if the string has no "." separator or either
                        component is not a non-negative integer
    """
    if '.' not in vers:
        raise MalformedVersion(vers, source)

    major, minor = vers.split('.', 1)
    try:
        return Version(_2int(major), _2int(minor))
    except ValueError:
        raise MalformedVersion(vers, source)
