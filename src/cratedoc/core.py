import os
import pathlib
from dotenv import load_dotenv
from .errors import NotFound
from .fetch.httpx_fetcher import HttpxFetcher
from .fetch.local_fetcher import LocalFetcher
from .parsers.allitems import AllItemsParser
from .parsers.base import DocPage, PageType, RawPage
from .index import build_index, search_listing  # noqa: F401
from .utils.url import INDEX_FILENAME

# Load environment variables from .env file
load_dotenv()

DOCS_HOST = os.getenv("DOCS_HOST", "https://docs.rs")
DOC_CACHE_DIR = os.getenv("DOC_CACHE_DIR", os.path.join("target", "doc"))
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", 15))


def make_log(log_callback=None, verbose=False):
    def log(message, verbose_only=False):
        if verbose_only and not verbose:
            return
        if log_callback:
            try:
                log_callback(message, verbose_only=verbose_only)
            except TypeError:
                log_callback(message)
        else:
            print(message)

    return log


def cache_path(subject, cwd=None, cache_dir=None):
    root = pathlib.Path(cwd) if cwd is not None else pathlib.Path.cwd()
    return root / (cache_dir or DOC_CACHE_DIR) / subject / INDEX_FILENAME


def index_url(resolved_url):
    # docs.rs redirects /<crate> to /<crate>/<version>/<crate>/, so the
    # version is only known once the landing page has been resolved.
    if not resolved_url.endswith("/"):
        resolved_url += "/"
    return resolved_url + INDEX_FILENAME


async def open_source(subject, online=False, fetcher=None, cwd=None, docs_host=None, log_callback=None, verbose=False):
    """Return the raw all-items page of ``subject``.

    Offline, the page is read from the local ``cargo doc`` output; online, it
    is fetched from the doc host in two requests (landing page, then its
    ``all.html``). Raises NotFound when no documentation exists there and
    LoadFailure when the source could not be read.
    """
    log = make_log(log_callback, verbose)

    if not online:
        if fetcher is None:
            fetcher = LocalFetcher()
        fetcher.set_verbose_callback(lambda m: log(m, verbose_only=True))
        path = cache_path(subject, cwd)
        result = await fetcher.fetch(str(path))
        return RawPage(result.html, result.url, PageType.ALL)

    if fetcher is None:
        fetcher = HttpxFetcher(timeout=FETCH_TIMEOUT)
    fetcher.set_verbose_callback(lambda m: log(m, verbose_only=True))

    host = (docs_host or DOCS_HOST).rstrip("/")
    landing = await fetcher.fetch(f"{host}/{subject}")
    log(f"Resolved {subject} to {landing.url}", verbose_only=True)

    result = await fetcher.fetch(index_url(landing.url))
    if not result.ok:
        raise NotFound(subject, f"{result.url} returned HTTP {result.status_code}")
    return RawPage(result.html, result.url, PageType.ALL)


async def lookup_subject(subject, online=False, fetcher=None, cwd=None, docs_host=None, log_callback=None, verbose=False):
    log = make_log(log_callback, verbose)
    log(f"Looking up {subject} ({'online' if online else 'offline'})", verbose_only=True)
    source = await open_source(subject, online, fetcher, cwd, docs_host, log_callback, verbose)

    parser = AllItemsParser()
    parser.set_verbose_callback(lambda m: log(m, verbose_only=True))
    page = DocPage.from_source(source, parser)

    count = sum(len(group.listings) for group in page.groups)
    log(f"Loaded {count} listings in {len(page.groups)} groups from {source.base}", verbose_only=True)
    return page


def open_page(page):
    """Pair a page with its search index for an interactive session."""
    return page, build_index(page)

