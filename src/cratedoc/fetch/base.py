from abc import ABC, abstractmethod

class FetchResult:
    def __init__(self, url: str, html: str, status_code: int = 200):
        self.url = url
        self.html = html
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Fetcher(ABC):
    def __init__(self):
        self.verbose_callback = None

    def set_verbose_callback(self, callback):
        self.verbose_callback = callback

    def v_log(self, message):
        if self.verbose_callback:
            self.verbose_callback(message)

    @abstractmethod
    async def fetch(self, location: str) -> FetchResult:
        pass
