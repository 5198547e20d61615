import logging

from app.interfaces.results_page import FetchError, ResultsPageFetcher
from app.models import BookQuery, LookupResult
from app.services.extractor import RecordExtractor
from app.services.matcher import DEFAULT_THRESHOLD, is_same_book
from app.services.query_cache import QueryCache

logger = logging.getLogger(__name__)


class RatingLookup:
    def __init__(
        self,
        fetcher: ResultsPageFetcher,
        cache: QueryCache,
        extractor: RecordExtractor | None = None,
        match_threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._extractor = extractor or RecordExtractor()
        self._threshold = match_threshold

    async def lookup(self, title: str, author: str) -> LookupResult:
        query = BookQuery(title=title, author=author)
        query_key = query.query_key
        search_url = self._fetcher.build_search_url(query.search_text)

        record = await self._cache.get(query_key)
        if record is not None:
            logger.debug("Using cached record for %r", query_key)
        else:
            logger.info("Fetching results page: %s", search_url)
            try:
                raw_markup = await self._fetcher.fetch(search_url)
            except FetchError as e:
                logger.warning("No data received for %r. Error: %s", query_key, e)
                return LookupResult(search_url=search_url)

            record = self._extractor.extract(raw_markup)
            if record is None:
                logger.info("No results region found for %r", query_key)
                return LookupResult(search_url=search_url)
            await self._cache.put(query_key, record)

        matched = is_same_book(query, record, threshold=self._threshold)
        return LookupResult(record=record, matched=matched, search_url=search_url)

    async def lookup_many(self, queries: list[BookQuery]) -> list[LookupResult]:
        results = []
        for query in queries:
            results.append(await self.lookup(query.title, query.author))
        return results
