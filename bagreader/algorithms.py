"""
This module maps the checksum algorithm names that appear in manifest
filenames (e.g. "sha256" in "manifest-sha256.txt") to the digest functions
that compute them.

A registry is any callable that takes a name token and returns a
SupportedAlgorithm, raising UnsupportedAlgorithm when it does not recognize
the token.  StandardAlgorithmRegistry is the default; callers needing
vendor-specific digests can extend it or provide their own callable.
"""
import hashlib
from collections import namedtuple
from abc import ABCMeta, abstractmethod

from .access.bagit import CHECKSUM_ALGOS
from .access.exceptions import UnsupportedAlgorithm

class SupportedAlgorithm(namedtuple("SupportedAlgorithm", "name tokens")):
    """
    the identity of a checksum function.  name is the name hashlib knows it
    by; tokens are the (lower-case) names that denote it in manifest
    filenames.
    """
    __slots__ = ()

    def __new__(cls, name, tokens=None):
        if not tokens:
            tokens = (name,)
        tokens = tuple(t.lower() for t in tokens)
        return super(SupportedAlgorithm, cls).__new__(cls, name, tokens)

    def new(self):
        """
        return a new hash object for computing digests with this algorithm
        """
        return hashlib.new(self.name)

    def __str__(self):
        return self.name

def _tokens_for(name):
    out = [name]
    if '_' in name:
        out.append(name.replace('_', '-'))
    return out

# variable-length digests cannot be named by a manifest filename alone
STANDARD_ALGORITHMS = tuple(
    SupportedAlgorithm(a, _tokens_for(a))
    for a in sorted(CHECKSUM_ALGOS) if not a.startswith("shake_")
)

class AlgorithmRegistry(object, metaclass=ABCMeta):
    """
    an interface for looking up SupportedAlgorithms by their manifest
    filename tokens.  Instances are callable.
    """

    @abstractmethod
    def lookup(self, token):
        """
        return the SupportedAlgorithm named by the given token
        :raises UnsupportedAlgorithm:  if the token is not recognized
        """
        raise NotImplementedError()

    def __call__(self, token):
        return self.lookup(token)

    def supports(self, token):
        """
        return True if the given token names a recognized algorithm
        """
        try:
            self.lookup(token)
            return True
        except UnsupportedAlgorithm:
            return False

class StandardAlgorithmRegistry(AlgorithmRegistry):
    """
    a registry that recognizes a fixed set of algorithms.  Tokens are
    matched case-insensitively.
    """

    def __init__(self, algorithms=None):
        """
        :param algorithms:  the SupportedAlgorithms to recognize; if None,
                            the STANDARD_ALGORITHMS are used.
        """
        if algorithms is None:
            algorithms = STANDARD_ALGORITHMS
        self._algs = tuple(algorithms)
        self._bytoken = {}
        for alg in self._algs:
            for token in alg.tokens:
                self._bytoken[token] = alg

    @property
    def algorithms(self):
        """
        the SupportedAlgorithms recognized by this registry
        """
        return self._algs

    def lookup(self, token):
        alg = self._bytoken.get(token.lower()) if token else None
        if not alg:
            raise UnsupportedAlgorithm(token)
        return alg

    def extend(self, *algorithms):
        """
        return a new registry that recognizes the given algorithms in addition
        to the ones recognized by this one.  Where tokens collide, the new
        algorithms take precedence.
        """
        return StandardAlgorithmRegistry(self._algs + tuple(algorithms))

default_registry = StandardAlgorithmRegistry()
