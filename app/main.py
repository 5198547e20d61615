import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Query

from app.config import settings
from app.models import HealthResponse, LookupRequest, LookupResult
from app.services.extractor import RecordExtractor
from app.services.goodreads import GoodreadsClient
from app.services.lookup import RatingLookup
from app.services.query_cache import QueryCache
from app.stores.json_file_store import JsonFileRecordStore

lookup_service: RatingLookup | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global lookup_service
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    async with httpx.AsyncClient(follow_redirects=True) as http_client:
        fetcher = GoodreadsClient(
            http_client,
            base_url=settings.search_base_url,
            user_agent=settings.user_agent,
            timeout=settings.fetch_timeout,
        )
        cache = QueryCache(
            JsonFileRecordStore(settings.cache_path),
            namespace=settings.cache_namespace,
        )
        lookup_service = RatingLookup(
            fetcher,
            cache,
            extractor=RecordExtractor(include_author_roles=settings.include_author_roles),
            match_threshold=settings.match_threshold,
        )
        yield
    lookup_service = None


app = FastAPI(title="Book Rating Lookup", version="0.1.0", lifespan=lifespan)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version="0.1.0")


@app.get("/lookup", response_model=LookupResult)
async def lookup(title: str = Query(..., min_length=1), author: str = ""):
    assert lookup_service is not None
    return await lookup_service.lookup(title, author)


@app.post("/lookup/batch", response_model=list[LookupResult])
async def lookup_batch(queries: list[LookupRequest]):
    assert lookup_service is not None
    return await lookup_service.lookup_many(queries)
