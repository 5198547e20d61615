import math
import re
from collections import Counter

_NON_WORD = re.compile(r"[^\w\s]")


def term_frequencies(text: str) -> Counter[str]:
    words = _NON_WORD.sub("", text.lower()).split()
    return Counter(words)


def similarity(a: str, b: str) -> float:
    """Cosine similarity of the term-frequency vectors of ``a`` and ``b``.

    Text is lowercased and stripped of punctuation before splitting on
    whitespace. Returns 0.0 when either side has no words left.
    """
    freq_a = term_frequencies(a)
    freq_b = term_frequencies(b)

    vocabulary = freq_a.keys() | freq_b.keys()
    dot = sum(freq_a[w] * freq_b[w] for w in vocabulary)
    norm_a = sum(n * n for n in freq_a.values())
    norm_b = sum(n * n for n in freq_b.values())

    if norm_a == 0 or norm_b == 0:
        return 0.0
    # sqrt of the product keeps identical vectors at exactly 1.0
    return min(1.0, dot / math.sqrt(norm_a * norm_b))
