from dataclasses import dataclass


@dataclass(frozen=True)
class ListingIndex:
    """Flat, search-only view over every listing of one page."""

    listings: tuple

    def __len__(self):
        return len(self.listings)

    def __iter__(self):
        return iter(self.listings)

    def find(self, query: str):
        """Return the listing best matching ``query``, or None.

        An exact name match anywhere wins over a suffix match, so the suffix
        scan only runs once the exact scan has come up empty.
        """
        for listing in self.listings:
            if listing.name == query:
                return listing
        for listing in self.listings:
            if listing.name.endswith(query):
                return listing
        return None


def build_index(page) -> ListingIndex:
    return ListingIndex(tuple(listing for group in page.groups for listing in group.listings))


def search_listing(index: ListingIndex, query: str):
    return index.find(query)
