import httpx
from .base import Fetcher, FetchResult
from ..errors import LoadFailure


class HttpxFetcher(Fetcher):
    def __init__(self, timeout=15, transport=None):
        super().__init__()
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, location: str) -> FetchResult:
        self.v_log(f"Fetching with httpx: {location}")
        try:
            async with httpx.AsyncClient(follow_redirects=True, transport=self.transport) as client:
                r = await client.get(location, timeout=self.timeout)
                # Status is left to the caller: a 404 means something different
                # depending on which request of the lookup it answers.
                return FetchResult(str(r.url), r.text, r.status_code)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LoadFailure(location, str(e) or type(e).__name__) from e
