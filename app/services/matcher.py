from app.models import BookQuery, BookRecord
from app.services.similarity import similarity

DEFAULT_THRESHOLD = 0.5


def match_score(query: BookQuery, candidate: BookRecord) -> float:
    title_sim = similarity(query.title, candidate.book_name or "")
    author_sim = similarity(query.author, candidate.author or "")
    return (title_sim + author_sim) / 2


def is_same_book(
    query: BookQuery, candidate: BookRecord, threshold: float = DEFAULT_THRESHOLD
) -> bool:
    if candidate.book_name is None or candidate.author is None or candidate.avg_rating is None:
        return False
    return match_score(query, candidate) > threshold
