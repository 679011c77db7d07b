from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def count_words(text: str | None) -> int:
    """Number of whitespace-separated words; runs of whitespace count as one separator."""
    if not text:
        return 0
    return len(text.split())
