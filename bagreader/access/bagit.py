"""
This is a proxy module around the LOC bagit module and the fs filesystem
abstraction.  It provides the Path class used to locate tag files within a
bag and the functions used to read them.
"""
import os, codecs
import fs.osfs, fs.path

from bagit import CHECKSUM_ALGOS, UNICODE_BYTE_ORDER_MARK

from .exceptions import UnsupportedEncoding

class Path(object):
    """
    A container class for pointing to a path within a specific FS instance
    """
    def __init__(self, filesys, path, prefix=None):
        """
        wrap a path within a filesystem, given as an FS object
        :param filesys FS:  the filesystem, usually as an FS instance,
                            where the path is located
        :param path str:    the path to the location within the filesystem
        :param prefix str:  a prefix to use to represent the filesystem in
                            the string representation of the full path.  It
                            will be prepended to the path value, so it should
                            include any desired delimiters
        """
        self.fs = filesys
        self.path = str(path)
        if prefix is None:
            prefix = repr(filesys) + ":"
        self._pfx = prefix

    @property
    def name(self):
        """
        the last field of the path
        """
        return fs.path.basename(self.path)

    def relpath(self, relpath):
        """
        return a Path instance that represents another path relative to
        this one.  This assumes that the current Path instance points to
        a directory; the relpath string then refers to a file or directory
        relative to it.  Note that relpath need not point to an existing
        object within the filesystem.
        """
        if not relpath:
            return Path(self.fs, self.path, self._pfx)

        path = ""
        if self.path:
            path += self.path+'/'
        path += relpath.lstrip('/')

        return Path(self.fs, path, self._pfx)

    def exists(self):
        """
        return true if the file or directory pointed to exists in the filesystem
        """
        return self.fs.exists(self.path)

    def isfile(self):
        """
        return true if the path points to a file that exists in the filesystem
        """
        return self.fs.isfile(self.path)

    def isdir(self):
        """
        return true if the path points to a directory that exists in the filesystem
        """
        return self.fs.isdir(self.path)

    def files(self, patterns=None):
        """
        return the sorted names of the files directly below the directory
        this path points to.  Subdirectories are not descended into.
        :param list patterns:  if given, a list of wildcard patterns (e.g.
                               "manifest-*"); only files whose names match
                               one of them are returned.
        """
        entries = self.fs.filterdir(self.path or "/", files=patterns,
                                    exclude_dirs=["*"])
        return sorted(e.name for e in entries if e.is_file)

    def __str__(self):
        return "{0}{1}".format(self._pfx, self.path)

    def __repr__(self):
        return "{0}:{1}".format(repr(self.fs), self.path)

def open_root(rootdir):
    """
    return an OSFS filesystem instance wrapping a bag's root directory.  The
    caller is responsible for closing it (it can be used as a context manager).

    :raises OSError:  if the directory does not exist
    """
    if not os.path.isdir(rootdir):
        raise OSError(2, "Bag root directory not found: "+rootdir)
    return fs.osfs.OSFS(rootdir)

def root_path(filesys, rootdir):
    """
    return a Path pointing to the root of the given bag filesystem that
    displays itself using the bag's OS directory path.
    """
    return Path(filesys, "", rootdir.rstrip(os.sep) + os.sep)

def check_encoding(encoding, source=None):
    """
    raise an UnsupportedEncoding exception if the given character encoding
    name is not recognized.
    """
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise UnsupportedEncoding("Unsupported encoding: %s" % encoding, source)

def open_text_file(path, mode='r', encoding='utf-8', errors='strict', buffering=-1):
    """
    return a file-like object for the text file located at the given path
    relative to the bag's root directory.  Line endings are passed through
    untranslated.
    """
    if isinstance(path, Path):
        return path.fs.open(path.path, mode, buffering=buffering,
                            encoding=encoding, errors=errors, newline='')
    return open(path, mode, buffering=buffering, encoding=encoding,
                errors=errors, newline='')

def read_text_lines(path, encoding='utf-8', logger=None):
    """
    return the lines of the text file at the given path as a list with the
    line terminators removed.  A leading byte-order mark is dropped; for
    UTF-8 files a warning is issued since the BagIt RFC does not allow one.
    The file is closed before this function returns.
    """
    with open_text_file(path, 'r', encoding=encoding) as fd:
        lines = [line.rstrip('\r\n') for line in fd]

    if lines and lines[0].startswith(UNICODE_BYTE_ORDER_MARK):
        lines[0] = lines[0][len(UNICODE_BYTE_ORDER_MARK):]
        if logger and codecs.lookup(encoding).name == 'utf-8':
            logger.warning("%s is encoded using UTF-8 but contains an "
                           "unnecessary byte-order mark, which is not in "
                           "compliance with the BagIt RFC", str(path))
    return lines
