"""
Test the APS calculator, score extractor and subject catalog.

Run from project root:
    pytest guidance/tests
"""

import pytest

from guidance.logic.aps_calculator import compute_aps, points_for_score, subject_points
from guidance.logic.contracts import Subject
from guidance.parsing.score_extractor import extract_score
from guidance.parsing.subject_catalog import SUBJECT_KEYWORDS, SubjectCatalog, subject_catalog


def _subject(score, name="Mathematics"):
    return Subject(name=name, score=score)


# =============================================================================
# APS CALCULATOR
# =============================================================================

@pytest.mark.parametrize("score, points", [
    (100, 7), (80, 7), (79, 6), (70, 6), (69, 5), (60, 5),
    (59, 4), (50, 4), (49, 3), (40, 3), (39, 2), (30, 2), (29, 1), (0, 1),
])
def test_points_for_score_bands(score, points):
    assert points_for_score(score) == points


def test_compute_aps_reference_values():
    assert compute_aps([_subject(85)]) == 7
    assert compute_aps([_subject(59)]) == 4
    assert compute_aps([]) == 0
    assert compute_aps([_subject(80), _subject(59, "English Home Language")]) == 11


def test_compute_aps_is_order_independent():
    subjects = [_subject(45), _subject(91, "Life Orientation"), _subject(12, "Technology")]
    assert compute_aps(subjects) == compute_aps(list(reversed(subjects)))


def test_adding_a_subject_never_decreases_aps():
    subjects = [_subject(45), _subject(67, "Technology")]
    before = compute_aps(subjects)
    for score in (67, 80, 100):
        assert compute_aps(subjects + [_subject(score, "Creative Arts")]) >= before


def test_every_subject_earns_at_least_one_point():
    subjects = [_subject(0), _subject(5, "Technology"), _subject(29, "Creative Arts")]
    assert compute_aps(subjects) == 3


def test_subject_points_breakdown_keeps_input_order():
    subjects = [_subject(72), _subject(33, "Technology")]
    assert subject_points(subjects) == [("Mathematics", 6), ("Technology", 2)]


def test_subject_rejects_out_of_range_score():
    with pytest.raises(ValueError):
        Subject(name="Mathematics", score=101)
    with pytest.raises(ValueError):
        Subject(name="Mathematics", score=-1)


# =============================================================================
# SCORE EXTRACTOR
# =============================================================================

def test_explicit_percentage_wins():
    assert extract_score("Mathematics 72%") == 72


def test_percentage_preferred_over_larger_bare_number():
    assert extract_score("maths 2023 term 4 65% 88") == 65


def test_bare_numbers_take_maximum_in_range():
    assert extract_score("Code 3: 72 marks out of 8") == 72


def test_bare_numbers_outside_range_are_ignored():
    assert extract_score("subject code 12 term 4") is None


def test_out_of_range_percentage_falls_back_to_bare_numbers():
    assert extract_score("english 150% 64") == 64


def test_line_without_numbers_has_no_score():
    assert extract_score("life orientation") is None


# =============================================================================
# SUBJECT CATALOG
# =============================================================================

def test_canonicalize_variants():
    assert subject_catalog.canonicalize("MATHS P1") == "Mathematics"
    assert subject_catalog.canonicalize("isiZulu FAL") == "First Additional Language"
    assert subject_catalog.canonicalize("Geography") == "Social Sciences"
    assert subject_catalog.canonicalize("Biology") == "Life Sciences"


def test_first_keyword_in_priority_order_wins():
    # "science" is listed before "physical science"
    assert subject_catalog.canonicalize("physical sciences 70") == "Natural Sciences"
    # "economic" is listed before "economics"
    assert subject_catalog.canonicalize("economics 55") == "Economic Management Sciences"


def test_canonicalize_unknown_fragment():
    assert subject_catalog.canonicalize("Principal signature") is None
    assert subject_catalog.canonicalize("") is None


@pytest.mark.parametrize("name", sorted({name for _, name in SUBJECT_KEYWORDS}))
def test_canonicalize_is_idempotent(name):
    assert subject_catalog.canonicalize(name) == name


def test_is_core():
    assert subject_catalog.is_core("Mathematics")
    assert subject_catalog.is_core("English Home Language")
    assert subject_catalog.is_core("Life Orientation")
    assert subject_catalog.is_core("First Additional Language")
    assert subject_catalog.is_core("Natural Sciences")
    assert not subject_catalog.is_core("Technology")
    assert not subject_catalog.is_core("Accounting")


def test_custom_catalog_order_is_respected():
    catalog = SubjectCatalog(keywords=(("art", "Art"), ("arts", "Creative Arts")))
    assert catalog.canonicalize("visual arts") == "Art"
