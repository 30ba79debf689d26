import pathlib
from .base import Fetcher, FetchResult
from ..errors import LoadFailure, NotFound


class LocalFetcher(Fetcher):
    """Reads pages from a local documentation mirror such as ``target/doc``."""

    def __init__(self, encoding="utf-8"):
        super().__init__()
        self.encoding = encoding

    async def fetch(self, location: str) -> FetchResult:
        path = pathlib.Path(location)
        self.v_log(f"Reading cached page: {path}")
        try:
            html = path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise NotFound(location, "no cached documentation") from e
        except (OSError, UnicodeDecodeError) as e:
            raise LoadFailure(location, str(e)) from e
        return FetchResult(str(path), html)
