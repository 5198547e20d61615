from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class BookQuery(CamelModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    author: str = ""

    @property
    def search_text(self) -> str:
        return f"{self.title} {self.author}"

    @property
    def query_key(self) -> str:
        return self.search_text.strip()


class LookupRequest(BookQuery):
    title: str = Field(min_length=1)


class BookRecord(CamelModel):
    model_config = ConfigDict(frozen=True)

    book_name: str | None = None
    author: str | None = None
    avg_rating: float | None = None
    ratings: int | None = None
    published: int | None = None
    editions: int | None = None


class LookupResult(CamelModel):
    record: BookRecord | None = None
    matched: bool = False
    search_url: str | None = None


class HealthResponse(CamelModel):
    status: str
    version: str
