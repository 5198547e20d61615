from abc import ABC, abstractmethod


class FetchError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResultsPageFetcher(ABC):
    @abstractmethod
    async def fetch(self, search_url: str) -> str:
        ...

    @abstractmethod
    def build_search_url(self, query: str) -> str:
        ...
