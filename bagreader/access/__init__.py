"""
A subpackage for accessing a bag's files.

The :py:mod:`bagit` module wraps the filesystem holding a bag and provides
the functions for reading its text files.  The :py:mod:`exceptions` module
defines the errors raised when a bag's contents do not conform to the BagIt
format.
"""
