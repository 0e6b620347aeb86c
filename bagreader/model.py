"""
The immutable in-memory model of a bag produced by the reader.

A Bag is never modified in place: each step of the read pipeline takes a bag
snapshot and returns a new one with one more facet filled in (see the with_*
methods).  Because of this, a finished Bag (along with its Manifests and
FetchItems) can be shared freely between threads.
"""
from collections import namedtuple, OrderedDict
from types import MappingProxyType

from .constants import DEFAULT_ENCODING

UNKNOWN_LENGTH = -1

class Manifest(namedtuple("Manifest", "algorithm entries")):
    """
    the contents of a single manifest file: the algorithm used to compute its
    checksums and a read-only mapping of absolute file paths (within the bag)
    to checksums, as they appear in the file.
    """
    __slots__ = ()

    def __new__(cls, algorithm, entries=None):
        return super(Manifest, cls).__new__(cls, algorithm,
                                            MappingProxyType(OrderedDict(entries or ())))

    def checksum_for(self, path):
        """
        return the checksum recorded for the given absolute path, or None if
        the path is not listed.
        """
        return self.entries.get(path)

    @property
    def files(self):
        """
        the paths listed in this manifest, in the order first seen
        """
        return list(self.entries.keys())

    def __repr__(self):
        return "Manifest(algorithm={0}, entries={1})".format(
            self.algorithm.name, dict(self.entries))

class FetchItem(namedtuple("FetchItem", "url length path")):
    """
    a declaration from fetch.txt that the file at path (relative to the bag's
    root) can be retrieved from url.  length is the declared size in bytes,
    or UNKNOWN_LENGTH.
    """
    __slots__ = ()

    @property
    def length_known(self):
        return self.length != UNKNOWN_LENGTH

class Bag(namedtuple("Bag", "root version encoding metadata payload_manifests "
                            "tag_manifests fetch_items")):
    """
    a bag read from disk.

    metadata is a tuple of (key, value) pairs from bag-info.txt (or the legacy
    package-info.txt); keys may repeat and their order is that of the file.
    payload_manifests and tag_manifests are tuples of Manifest instances, and
    fetch_items is a tuple of FetchItems.
    """
    __slots__ = ()

    def __new__(cls, root=None, version=None, encoding=DEFAULT_ENCODING,
                metadata=(), payload_manifests=(), tag_manifests=(),
                fetch_items=()):
        return super(Bag, cls).__new__(cls, root, version, encoding,
                                       _pairs(metadata), tuple(payload_manifests),
                                       tuple(tag_manifests), tuple(fetch_items))

    def with_version(self, version, encoding=None):
        """
        return a copy of this bag with its version (and, optionally, its tag
        file encoding) set.
        """
        if encoding is None:
            encoding = self.encoding
        return self._replace(version=version, encoding=encoding)

    def with_manifests(self, payload_manifests=None, tag_manifests=None):
        """
        return a copy of this bag with the given manifests added to the ones
        it already has.
        """
        return self._replace(
            payload_manifests=self.payload_manifests + tuple(payload_manifests or ()),
            tag_manifests=self.tag_manifests + tuple(tag_manifests or ()))

    def with_metadata(self, metadata):
        """
        return a copy of this bag with its metadata replaced by the given
        (key, value) pairs.
        """
        return self._replace(metadata=_pairs(metadata))

    def with_fetch_items(self, items):
        return self._replace(fetch_items=self.fetch_items + tuple(items))

    @property
    def algorithms(self):
        """
        the names of the algorithms used by the payload manifests
        """
        return [m.algorithm.name for m in self.payload_manifests]

    def metadata_values(self, key):
        """
        return all the values given for a metadata key, in the order they
        appear.  An empty list is returned if the key is not present.
        """
        return [v for k, v in self.metadata if k == key]

    def manifest_for(self, algorithm, tag=False):
        """
        return the payload manifest (or tag manifest if tag is True) that
        uses the named algorithm, or None if there isn't one.
        """
        manifests = self.tag_manifests if tag else self.payload_manifests
        for m in manifests:
            if m.algorithm.name == algorithm:
                return m
        return None

def _pairs(items):
    return tuple((k, v) for k, v in items)
