"""
Decoding of payload and tag manifests.  A manifest's name has the form
<kind>-<algorithm>.<ext> (e.g. manifest-sha256.txt), and each of its lines
gives a checksum followed by the (encoded) path of the file it applies to.
"""
from collections import OrderedDict

from ..access.bagit import read_text_lines
from ..access.exceptions import InvalidManifestFormat, UnsupportedAlgorithm
from ..algorithms import default_registry
from ..model import Manifest
from .paths import resolve_path

def algorithm_token(filename):
    """
    return the algorithm name token embedded in a manifest filename, e.g.
    "sha256" for "tagmanifest-sha256.txt".
    """
    token = filename.split('-', 1)[-1] if '-' in filename else ''
    return token.split('.', 1)[0]

def parse_manifest_lines(lines, algorithm, bag_root, path_codec=None,
                         source=None, logger=None):
    """
    parse the lines of a manifest into a Manifest.  Each path is decoded and
    checked to be inside the bag before it is recorded; if a path is listed
    more than once, the last checksum given for it is kept.  Blank lines and
    lines starting with '#' are ignored.

    :param lines:          the lines of the file, without line terminators
    :param SupportedAlgorithm algorithm:  the algorithm used by the manifest
    :param str bag_root:   the absolute path to the bag's root directory
    :param path_codec:     the function to decode paths with (default:
                           PathCodec())
    :param str source:     the name of the manifest file (for messages)
    :param Logger logger:  a logger instance to send messages to.
    :raises InvalidManifestFormat:  if a line lacks a checksum or a path
    :raises MaliciousManifest:  if a path resolves outside of the bag
    """
    entries = OrderedDict()
    for line in lines:
        # trailing whitespace belongs to the file path
        line = line.lstrip()
        if not line.strip() or line.startswith('#'):
            continue

        parts = line.split(None, 1)
        if len(parts) != 2:
            raise InvalidManifestFormat(
                "Invalid {0} manifest entry: {1}".format(algorithm.name, line),
                source)

        checksum, path = parts[0], resolve_path(bag_root, parts[1], path_codec,
                                                source)
        if path in entries and logger:
            logger.warning("%s lists %s multiple times; keeping the last value",
                           source, path)
        if logger:
            logger.debug("Read checksum [%s] and file [%s] from manifest [%s]",
                         checksum, path, source)
        entries[path] = checksum

    return Manifest(algorithm, entries)

def read_manifest(path, bag_root, name_mapping=None, path_codec=None,
                  encoding='utf-8', logger=None):
    """
    read the manifest file at the given path.

    :param Path path:      the location of the manifest file
    :param str bag_root:   the absolute path to the bag's root directory
    :param name_mapping:   the algorithm registry to resolve the filename's
                           algorithm token with (default: the standard
                           registry)
    :param path_codec:     the function to decode paths with
    :param str encoding:   the character encoding of the file
    :param Logger logger:  a logger instance to send messages to.
    :rtype: Manifest
    :raises UnsupportedAlgorithm:  if the algorithm is not recognized
    """
    if name_mapping is None:
        name_mapping = default_registry
    if logger:
        logger.debug("Reading manifest [%s]", path)

    token = algorithm_token(path.name)
    try:
        algorithm = name_mapping(token)
    except UnsupportedAlgorithm as ex:
        if ex.source:
            raise
        raise UnsupportedAlgorithm(token, str(path))

    lines = read_text_lines(path, encoding, logger)
    return parse_manifest_lines(lines, algorithm, bag_root, path_codec,
                                str(path), logger)
