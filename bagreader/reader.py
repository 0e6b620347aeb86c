"""
This module provides the BagReader class which reads a bag from a directory
on disk into an immutable Bag instance.

A read proceeds through a fixed sequence of steps:  locating the directory
holding the tag files, reading bagit.txt, reading all of the payload and tag
manifests, reading the bag metadata (bag-info.txt or package-info.txt), and
reading fetch.txt.  Each step takes a Bag snapshot and returns a new one with
the information from its file added; nothing is modified in place, so a single
BagReader can be used to read any number of bags, concurrently if need be.
Any failure aborts the whole read.
"""
import os, logging

from .access.bagit import open_root, root_path, check_encoding
from .access.exceptions import MissingTagFile
from .algorithms import default_registry
from .constants import (BAGIT_FILE, BAG_INFO_FILE, PACKAGE_INFO_FILE,
                        FETCH_FILE, LEGACY_TAG_DIR, MANIFEST_PREFIX,
                        TAGMANIFEST_PREFIX, VERSION_TAG, ENCODING_TAG,
                        DEFAULT_ENCODING, parse_version)
from .model import Bag
from .parse.paths import default_codec
from .parse.tagfile import read_tag_file
from .parse.manifest import read_manifest
from .parse.fetch import read_fetch

class BagReader(object):
    """
    a reader that turns a bag directory into a Bag instance.  A reader holds
    no state from one read to the next.
    """

    def __init__(self, name_mapping=None, path_codec=None,
                 check_fetch_paths=False, logger=None):
        """
        :param name_mapping:  a callable that converts the algorithm token in
                              a manifest's filename to a SupportedAlgorithm;
                              by default, the standard registry is used.
        :param path_codec:    a callable that decodes the paths listed in
                              manifests and fetch.txt; by default, percent
                              escapes are decoded.
        :param bool check_fetch_paths:  if True, a fetch.txt destination that
                              resolves outside of the bag raises a
                              MaliciousManifest exception; otherwise, it is
                              only logged as a warning.
        :param Logger logger: the logger to send messages to; by default,
                              the "bagreader" logger is used.
        """
        if name_mapping is None:
            name_mapping = default_registry
        if path_codec is None:
            path_codec = default_codec
        if not logger:
            logger = logging.getLogger("bagreader")

        self.name_mapping = name_mapping
        self.path_codec = path_codec
        self.check_fetch_paths = check_fetch_paths
        self.log = logger

    def read(self, rootdir):
        """
        read the bag with the given root directory

        :param str rootdir:  the path to the bag's root directory
        :rtype: Bag
        :raises OSError:     if the directory does not exist
        :raises BagReadError:  if any of the bag's files is missing or does
                             not conform to the BagIt format
        """
        rootdir = os.path.abspath(rootdir)
        self.log.info("Reading bag at %s", rootdir)

        with open_root(rootdir) as bagfs:
            tagdir = self.locate_tag_dir(root_path(bagfs, rootdir))

            bag = Bag(rootdir)
            bag = self.read_bagit_text_file(bag, tagdir.relpath(BAGIT_FILE))
            bag = self.read_all_manifests(bag, tagdir)
            bag = self.read_bag_metadata(bag, tagdir)

            fetch_file = tagdir.relpath(FETCH_FILE)
            if fetch_file.isfile():
                bag = self.read_fetch(bag, fetch_file)

        return bag

    def locate_tag_dir(self, root):
        """
        return the Path to the directory holding the bag's tag files:  the
        .bagit subdirectory if it exists, otherwise the root itself.

        :param Path root:  the bag's root directory
        """
        legacy = root.relpath(LEGACY_TAG_DIR)
        if legacy.isdir():
            self.log.debug("Found %s directory; reading tag files from it",
                           LEGACY_TAG_DIR)
            return legacy
        return root

    def read_bagit_text_file(self, bag, bagit_file):
        """
        return a new Bag with the version and tag file encoding declared in
        the given bagit.txt file.

        :param Bag bag:          the bag snapshot to build on
        :param Path bagit_file:  the location of bagit.txt
        :raises MissingTagFile:  if bagit_file does not exist
        :raises MalformedVersion:  if the BagIt-Version tag is missing or not
                                 in MAJOR.MINOR form
        """
        self.log.debug("Reading %s", bagit_file)
        if not bagit_file.isfile():
            raise MissingTagFile(str(bagit_file))

        version = ""
        encoding = DEFAULT_ENCODING
        for key, value in read_tag_file(bagit_file, 'utf-8', logger=self.log):
            if key == VERSION_TAG:
                version = value
                self.log.debug("%s is [%s]", VERSION_TAG, version)
            elif key == ENCODING_TAG:
                encoding = value
                self.log.debug("%s is [%s]", ENCODING_TAG, encoding)

        check_encoding(encoding, str(bagit_file))
        return bag.with_version(parse_version(version, str(bagit_file)), encoding)

    def read_all_manifests(self, bag, tagdir):
        """
        return a new Bag with all of the payload and tag manifests found in
        the given directory added to it.

        :param Bag bag:      the bag snapshot to build on; its root and encoding
                             must be set.
        :param Path tagdir:  the directory holding the manifests
        :raises UnsupportedAlgorithm:  if a manifest uses an unrecognized
                             algorithm
        :raises MaliciousManifest:  if a manifest lists a path outside the bag
        """
        self.log.info("Attempting to find and read manifests")
        payload, tag = [], []
        for name in tagdir.files([TAGMANIFEST_PREFIX+'*', MANIFEST_PREFIX+'*']):
            if name.startswith(TAGMANIFEST_PREFIX):
                self.log.debug("Found tag manifest [%s]", name)
                found = tag
            elif name.startswith(MANIFEST_PREFIX):
                self.log.debug("Found payload manifest [%s]", name)
                found = payload
            else:
                continue
            found.append(read_manifest(tagdir.relpath(name), bag.root,
                                       self.name_mapping, self.path_codec,
                                       bag.encoding, self.log))

        return bag.with_manifests(payload, tag)

    def read_bag_metadata(self, bag, tagdir):
        """
        return a new Bag with the metadata from bag-info.txt or, for older
        bags, package-info.txt.  If both files exist, package-info.txt is
        read last and its contents win.  If neither exists, the metadata is
        empty.

        :param Bag bag:      the bag snapshot to build on
        :param Path tagdir:  the directory holding the tag files
        """
        self.log.info("Attempting to read bag metadata file")
        metadata = []
        found = None
        for name in (BAG_INFO_FILE, PACKAGE_INFO_FILE):
            info_file = tagdir.relpath(name)
            if not info_file.isfile():
                continue
            if found:
                self.log.warning("Found both %s and %s; using the metadata "
                                 "from %s", found, name, name)
            self.log.debug("Found [%s] file", info_file)
            metadata = read_tag_file(info_file, bag.encoding, logger=self.log)
            found = name

        return bag.with_metadata(metadata)

    def read_fetch(self, bag, fetch_file):
        """
        return a new Bag with the items listed in the given fetch.txt file.

        :param Bag bag:          the bag snapshot to build on
        :param Path fetch_file:  the location of fetch.txt
        :raises InvalidFetchFormat:  if an entry is not of the form
                                 URL LENGTH PATH
        """
        self.log.info("Attempting to read [%s]", fetch_file)
        items = read_fetch(fetch_file, bag.root, self.path_codec,
                           self.check_fetch_paths, bag.encoding, self.log)
        return bag.with_fetch_items(items)

def read_bag(rootdir, **kw):
    """
    read the bag with the given root directory.  This is a shortcut for
    BagReader(**kw).read(rootdir).
    """
    return BagReader(**kw).read(rootdir)
