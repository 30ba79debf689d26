from bs4 import BeautifulSoup
from .base import DocKind, Listing, ListingGroup, PageType, Parser
from ..errors import InvalidPage
from ..utils.url import resolve

KIND_BY_CLASS = {
    "modules": DocKind.MODULE,
    "structs": DocKind.STRUCT,
    "typedefs": DocKind.TYPE,
    "traits": DocKind.TRAIT,
    "enums": DocKind.ENUM,
    "functions": DocKind.FUNCTION,
    "constants": DocKind.CONSTANT,
}

# Newer rustdoc headings use "types" where the list class used to be "typedefs".
KIND_BY_HEADING = dict(KIND_BY_CLASS, types=DocKind.TYPE)

# Lists that belong to the page chrome rather than to a documentation group.
NAVIGATION_CLASSES = frozenset(
    {"block", "sidebar", "sidebar-elems", "sidebar-menu", "menu", "nav", "navbar", "settings"}
)

# Current rustdoc tags every group list the same way and names the group in
# the heading right before it.
HEADED_LIST_CLASS = "all-items"


def classify(token: str) -> DocKind:
    return KIND_BY_CLASS.get(token, DocKind.OTHER)


def classify_heading(container) -> DocKind:
    heading = container.find_previous(["h1", "h2", "h3", "h4"])
    if heading is None:
        return DocKind.OTHER
    return KIND_BY_HEADING.get(heading.get("id"), DocKind.OTHER)


class AllItemsParser(Parser):
    """Extracts the item listings of a rustdoc ``all.html`` page.

    Each documentation group is a ``<ul>`` whose first class names the kind
    of item it holds; each item is an ``<a>`` inside it. Lists that don't
    look like groups, and anchors that can't be turned into absolute links,
    are skipped.
    """

    def parse(self, page):
        if page.page_type != PageType.ALL:
            raise InvalidPage(page.base, f"expected an all-items page, got {page.page_type.value}")

        soup = BeautifulSoup(page.html, "lxml")
        groups = []
        for container in soup.find_all("ul"):
            classes = container.get("class") or []
            if not classes:
                continue
            token = classes[0]
            if token in NAVIGATION_CLASSES:
                self.v_log(f"Skipping navigation list: {token}")
                continue

            if token == HEADED_LIST_CLASS:
                kind = classify_heading(container)
            else:
                kind = classify(token)

            listings = self._listings(container, page.base)
            if not listings:
                self.v_log(f"Dropping empty {kind.label} group")
                continue
            groups.append(ListingGroup(kind, tuple(listings)))

        return tuple(groups)

    def _listings(self, container, base):
        listings = []
        for anchor in container.find_all("a"):
            href = anchor.get("href")
            if href is None:
                self.v_log(f"Skipping anchor without href: {anchor.get_text()!r}")
                continue
            url = resolve(base, href)
            if url is None:
                self.v_log(f"Skipping unresolvable link {href!r} against {base}")
                continue
            listings.append(Listing(anchor.get_text(), url))
        return listings
