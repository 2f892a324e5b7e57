"""
Matching helpers shared by the rule modules.

Subject matching is a case-insensitive substring test on subject NAMES, so a
subject only counts as "math" while its canonical name still contains "math".
"""

from typing import Iterable, Optional, Sequence

from .contracts import Subject


def name_contains(subject: Subject, *tokens: str) -> bool:
    name = subject.name.lower()
    return any(token in name for token in tokens)


def any_subject_contains(subjects: Iterable[Subject], *tokens: str) -> bool:
    return any(name_contains(s, *tokens) for s in subjects)


def first_score(subjects: Sequence[Subject], *tokens: str) -> int:
    """Score of the first subject whose name contains any token, 0 if none."""
    match: Optional[Subject] = next((s for s in subjects if name_contains(s, *tokens)), None)
    return match.score if match else 0


def has_tag(tags: Iterable[str], tag: str) -> bool:
    """Case-insensitive membership test for interest/skill tags."""
    wanted = tag.lower()
    return any(t.lower() == wanted for t in tags)


def has_any_tag(tags: Iterable[str], *wanted: str) -> bool:
    tags = list(tags)
    return any(has_tag(tags, w) for w in wanted)
