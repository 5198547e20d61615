import pytest

from app.interfaces.results_page import ResultsPageFetcher
from app.models import BookQuery, BookRecord
from app.services.query_cache import QueryCache
from app.stores.memory_store import InMemoryRecordStore


class MockResultsPageFetcher(ResultsPageFetcher):
    def __init__(self, page: str | None = None, error: Exception | None = None):
        self._page = page
        self._error = error
        self.calls: list[str] = []

    def build_search_url(self, query: str) -> str:
        return f"https://example.test/search?q={query}"

    async def fetch(self, search_url: str) -> str:
        self.calls.append(search_url)
        if self._error:
            raise self._error
        assert self._page is not None
        return self._page


def build_results_page(
    title: str = "The Hobbit",
    authors: list[tuple[str, str]] | None = None,
    details: str = "4.28 avg rating — 1,234,567 ratings — published 1937 — 5 editions",
) -> str:
    if authors is None:
        authors = [("J.R.R. Tolkien", "")]
    author_html = "".join(
        f'<span class="authorName__container">'
        f'<a class="authorName" href="#"><span itemprop="name">{name}</span></a>'
        + (f' <span class="greyText smallText role">{role}</span>' if role else "")
        + "</span>"
        for name, role in authors
    )
    return f"""
    <html><body>
    <div id="bodycontainer"><div class="mainContentContainer"><div class="mainContent">
    <div class="mainContentFloat"><div class="leftContainer">
    <table class="tableList">
      <tr itemscope itemtype="http://schema.org/Book">
        <td width="5%"><img src="cover.jpg"/></td>
        <td width="100%">
          <a class="bookTitle" href="/book/show/1"><span itemprop="name">
            {title}
          </span></a>
          <br/>
          <span class="by">by</span>
          {author_html}
          <br/>
          <span class="greyText smallText uitext">
            <span class="minirating">{details}</span>
          </span>
        </td>
      </tr>
      <tr itemscope itemtype="http://schema.org/Book">
        <td width="5%"><img src="other.jpg"/></td>
        <td width="100%">
          <a class="bookTitle" href="/book/show/2"><span itemprop="name">Second Result</span></a>
          <span class="minirating">2.10 avg rating — 12 ratings — published 2001 — 1 editions</span>
        </td>
      </tr>
    </table>
    </div></div></div></div></div>
    </body></html>
    """


NO_RESULTS_PAGE = """
<html><body><div id="bodycontainer"><div class="mainContentContainer">
<div class="mainContent"><div class="mainContentFloat"><div class="leftContainer">
<h3 class="searchSubNavContainer">No results.</h3>
</div></div></div></div></div></body></html>
"""


@pytest.fixture
def hobbit_page() -> str:
    return build_results_page()


@pytest.fixture
def hobbit_query() -> BookQuery:
    return BookQuery(title="The Hobbit", author="J.R.R. Tolkien")


@pytest.fixture
def hobbit_record() -> BookRecord:
    return BookRecord(
        book_name="The Hobbit",
        author="J.R.R. Tolkien",
        avg_rating=4.28,
        ratings=1234567,
        published=1937,
        editions=5,
    )


@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def query_cache(memory_store) -> QueryCache:
    return QueryCache(memory_store)
