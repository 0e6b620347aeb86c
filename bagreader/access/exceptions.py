"""
exceptions that can be raised while reading a bag's tag files and manifests
"""
from bagit import BagError

class BagReadError(BagError):
    """
    a general exception indicating that a bag could not be read because one
    of its files does not conform to the BagIt format.
    """
    def __init__(self, message, source=None):
        """
        :param str message:  the description of the problem
        :param str source:   the path to the file being read when the problem
                             was detected, if known
        """
        self.source = source
        if source:
            message = "{0}: {1}".format(source, message)
        super(BagReadError, self).__init__(message)

class MissingTagFile(BagReadError):
    """
    an exception indicating that a tag file required by the BagIt format is
    missing.
    """
    def __init__(self, filepath, message=None):
        """
        initialize the exception with the name of the missing file
        :param str filepath:   the path to the missing file
        :param str message:    the exceptions message, overriding the default
                               (generated from the filename)
        """
        self.file = filepath
        if not message:
            message = "Missing required tag file: " + self.file
        super(MissingTagFile, self).__init__(message)

class MalformedVersion(BagReadError):
    """
    the BagIt-Version value is not of the form MAJOR.MINOR
    """
    def __init__(self, version, source=None):
        self.version = version
        super(MalformedVersion, self).__init__(
            "Version must be in format MAJOR.MINOR but was '{0}'".format(version),
            source)

class InvalidTagFormat(BagReadError):
    """
    a line in a tag file is neither a key-value pair nor a continuation of one
    """
    pass

class UnsupportedEncoding(BagReadError):
    """
    bagit.txt declares a tag file character encoding that is not recognized
    """
    pass

class UnsupportedAlgorithm(BagReadError):
    """
    a manifest's filename names a checksum algorithm that is not recognized
    """
    def __init__(self, token, source=None):
        self.algorithm = token
        super(UnsupportedAlgorithm, self).__init__(
            "Unsupported checksum algorithm: '{0}'".format(token), source)

class MaliciousManifest(BagReadError):
    """
    a path referenced by the bag resolves to a location outside of the bag's
    root directory
    """
    def __init__(self, path, root, source=None):
        self.path = path
        self.root = root
        super(MaliciousManifest, self).__init__(
            "Path {0} is outside the bag root directory of {1}; this is not "
            "allowed by the BagIt specification".format(path, root), source)

class InvalidManifestFormat(BagReadError):
    """
    a manifest line does not have the form CHECKSUM PATH
    """
    pass

class InvalidFetchFormat(BagReadError):
    """
    a fetch.txt line does not have the form URL LENGTH PATH
    """
    pass
