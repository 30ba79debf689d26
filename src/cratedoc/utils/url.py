from abc import ABC, abstractmethod
from urllib.parse import urljoin, urlparse

INDEX_FILENAME = "all.html"

NETWORK_SCHEMES = ("http", "https")


def is_network_url(location: str) -> bool:
    """True for absolute http(s) URLs that carry a host."""
    parsed = urlparse(location)
    return parsed.scheme.lower() in NETWORK_SCHEMES and bool(parsed.netloc)


def is_local_path(location: str) -> bool:
    """True for plain filesystem paths.

    A single letter "scheme" is a Windows drive (C:\\doc\\all.html), not a URL.
    """
    scheme = urlparse(location).scheme
    return not scheme or len(scheme) == 1


def parses(reference: str) -> bool:
    try:
        urlparse(reference)
    except ValueError:
        return False
    return True


class UrlResolver(ABC):
    @abstractmethod
    def resolve(self, relative: str):
        pass


class UrlJoinResolver(UrlResolver):
    def __init__(self, base: str):
        self.base = base

    def resolve(self, relative: str):
        if not parses(relative):
            return None
        # The base was validated by resolver_for, so a failing join is a bug
        # upstream and is left to propagate.
        return urljoin(self.base, relative)


class IndexPathResolver(UrlResolver):
    """Resolves links of a local doc mirror by swapping out the index filename.

    Only bare filenames are supported: the result is not joined any further,
    so ``../`` segments stay as they are. Every occurrence of the index
    filename in the base is replaced.
    """

    def __init__(self, base: str, index_filename: str = INDEX_FILENAME):
        self.base = base
        self.index_filename = index_filename

    def resolve(self, relative: str):
        if not parses(relative):
            return None
        if is_network_url(relative):
            return relative
        if self.index_filename not in self.base:
            return None
        return self.base.replace(self.index_filename, relative)


def resolver_for(base: str, index_filename: str = INDEX_FILENAME):
    """Pick the resolution strategy for a base location.

    Returns None when the base does not parse, or is neither a network URL
    nor a local path.
    """
    try:
        if is_network_url(base):
            return UrlJoinResolver(base)
        if is_local_path(base):
            return IndexPathResolver(base, index_filename)
    except ValueError:
        return None
    return None


def resolve(base: str, relative: str, index_filename: str = INDEX_FILENAME):
    """Make ``relative`` absolute against ``base``.

    Returns None when the reference cannot be resolved and has to be dropped.
    """
    resolver = resolver_for(base, index_filename)
    if resolver is None:
        return None
    return resolver.resolve(relative)
