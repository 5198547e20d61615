from urllib.parse import quote

import httpx

from app.interfaces.results_page import FetchError, ResultsPageFetcher


class GoodreadsClient(ResultsPageFetcher):
    BASE_URL = "https://www.goodreads.com/search"
    USER_AGENT = "Book Rating Lookup/0.1.0"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str = BASE_URL,
        user_agent: str = USER_AGENT,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._headers = {"User-Agent": user_agent}
        self._timeout = timeout

    def build_search_url(self, query: str) -> str:
        return f"{self._base_url}?utf8=%E2%9C%93&q={quote(query, safe='')}&search_type=books"

    async def fetch(self, search_url: str) -> str:
        try:
            if self._client is not None:
                response = await self._client.get(
                    search_url, headers=self._headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient(
                    headers=self._headers, timeout=self._timeout, follow_redirects=True
                ) as client:
                    response = await client.get(search_url)
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {search_url} failed: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"HTTP error! Status: {response.status_code}",
                status_code=response.status_code,
            )
        return response.text
