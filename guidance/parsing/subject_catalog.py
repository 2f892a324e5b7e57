"""
Subject Catalog

Maps raw keyword variants found on report cards to canonical subject names.

Matching is a case-insensitive substring test over an ORDERED list of
(keyword, canonical name) pairs and the first hit wins. The order is a
priority list, not a lookup table: e.g. "physical sciences" resolves through
"science" before "physical science" is ever reached, and callers rely on that.
"""

from typing import List, Optional, Tuple

SUBJECT_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("mathematics", "Mathematics"),
    ("math", "Mathematics"),
    ("maths", "Mathematics"),
    ("english", "English Home Language"),
    ("home language", "English Home Language"),
    ("first additional", "First Additional Language"),
    ("additional language", "First Additional Language"),
    ("afrikaans", "First Additional Language"),
    ("isizulu", "First Additional Language"),
    ("isixhosa", "First Additional Language"),
    ("sesotho", "First Additional Language"),
    ("natural science", "Natural Sciences"),
    ("natural sciences", "Natural Sciences"),
    ("science", "Natural Sciences"),
    ("social science", "Social Sciences"),
    ("social sciences", "Social Sciences"),
    ("geography", "Social Sciences"),
    ("history", "Social Sciences"),
    ("technology", "Technology"),
    ("life orientation", "Life Orientation"),
    ("economic", "Economic Management Sciences"),
    ("business", "Economic Management Sciences"),
    ("ems", "Economic Management Sciences"),
    ("accounting", "Accounting"),
    ("economics", "Economics"),
    ("physical science", "Physical Sciences"),
    ("physical sciences", "Physical Sciences"),
    ("physics", "Physical Sciences"),
    ("chemistry", "Physical Sciences"),
    ("life science", "Life Sciences"),
    ("life sciences", "Life Sciences"),
    ("biology", "Life Sciences"),
    ("creative arts", "Creative Arts"),
    ("arts", "Creative Arts"),
    ("music", "Creative Arts"),
    ("drama", "Creative Arts"),
)

# Fallback groups for pattern-matching mode, scanned in this order
SUBJECT_PATTERN_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Mathematics", ("math", "mathematics")),
    ("English Home Language", ("english", "home language")),
    ("First Additional Language", ("first additional", "afrikaans", "isizulu", "isixhosa")),
    ("Natural Sciences", ("natural science", "science")),
    ("Social Sciences", ("social science", "geography", "history")),
    ("Technology", ("technology",)),
    ("Life Orientation", ("life orientation",)),
    ("Economic Management Sciences", ("economic", "business", "ems")),
    ("Creative Arts", ("creative arts", "arts", "music")),
)

CORE_SUBJECT_TOKENS: Tuple[str, ...] = (
    "mathematics",
    "english",
    "home language",
    "life orientation",
    "first additional language",
    "natural science",
    "science",
)


class SubjectCatalog:
    """
    Ordered keyword catalog for canonical subject names.

    Pure lookup data; safe to share between parses.
    """

    def __init__(
        self,
        keywords: Tuple[Tuple[str, str], ...] = SUBJECT_KEYWORDS,
        pattern_groups: Tuple[Tuple[str, Tuple[str, ...]], ...] = SUBJECT_PATTERN_GROUPS,
        core_tokens: Tuple[str, ...] = CORE_SUBJECT_TOKENS,
    ):
        self._keywords = tuple((k.lower(), name) for k, name in keywords)
        self._pattern_groups = pattern_groups
        self._core_tokens = core_tokens
        self._canonical = {name.lower(): name for _, name in keywords}

    @property
    def canonical_names(self) -> List[str]:
        return list(self._canonical.values())

    def canonicalize(self, raw_fragment: str) -> Optional[str]:
        """
        Resolve a raw text fragment to a canonical subject name.

        An exact canonical name resolves to itself; anything else goes through
        the keyword priority list. Returns None when nothing matches.
        """
        if not raw_fragment:
            return None
        fragment = raw_fragment.strip().lower()

        exact = self._canonical.get(fragment)
        if exact is not None:
            return exact

        for keyword, name in self._keywords:
            if keyword in fragment:
                return name
        return None

    def is_core(self, canonical_name: str) -> bool:
        name = canonical_name.lower()
        return any(token in name for token in self._core_tokens)

    def pattern_groups(self) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
        return self._pattern_groups


# Module-level default instance
subject_catalog = SubjectCatalog()
