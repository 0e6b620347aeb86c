"""
a reader for BagIt bags.

The main bagreader module provides the BagReader class which reads a bag
directory--its bagit.txt, its payload and tag manifests, its metadata, and
its fetch.txt--into an immutable Bag instance, checking along the way that
none of the paths the bag lists point outside of it.
"""
from .reader import BagReader, read_bag
from .model import Bag, Manifest, FetchItem, UNKNOWN_LENGTH
from .constants import Version, parse_version
from .algorithms import (SupportedAlgorithm, AlgorithmRegistry,
                         StandardAlgorithmRegistry)
from .parse.paths import PathCodec
from .access.exceptions import (BagReadError, MissingTagFile, MalformedVersion,
                                InvalidTagFormat, UnsupportedEncoding,
                                UnsupportedAlgorithm, MaliciousManifest,
                                InvalidManifestFormat, InvalidFetchFormat)
