"""Tests for field-weighted scoring and the AND eligibility rule."""

from clinic_portal.application.dtos.records import SopRecord
from clinic_portal.application.dtos.search import VISIBLE, Candidate
from clinic_portal.application.services.scorer import (
    score_candidate,
    score_match,
    searchable_text,
)
from clinic_portal.domain.enums import EntityType


def _candidate(
    title: str,
    keywords: tuple[str, ...] = (),
    body: str = "",
    candidate_id: int = 1,
    entity_type: EntityType = EntityType.SOPS,
) -> Candidate:
    record = SopRecord(
        id=candidate_id,
        title=title,
        category=None,
        version=None,
        status="published",
        content_markdown=body,
        keywords=keywords,
    )
    return Candidate(
        entity_type=entity_type,
        id=candidate_id,
        title=title,
        keywords=keywords,
        body=body,
        record=record,
        visibility=VISIBLE,
    )


def test_score_match_prefix_word_start_substring() -> None:
    """+5 at string start, +3 at a later word start, +1 anywhere else."""
    assert score_match("geburtshilfe leitlinie", ["geburt"]) == 5
    assert score_match("leitlinie geburtshilfe", ["geburt"]) == 3
    assert score_match("nachgeburt", ["geburt"]) == 1
    assert score_match("sectio", ["geburt"]) == 0


def test_score_match_sums_over_tokens() -> None:
    assert score_match("geburtshilfe leitlinie", ["geburt", "leit"]) == 8


def test_searchable_text_combines_fields_normalized() -> None:
    candidate = _candidate("Übergabe", keywords=("station",), body=" Früh ")
    assert searchable_text(candidate) == "ubergabe station fruh"


def test_token_missing_everywhere_is_ineligible() -> None:
    """AND across tokens: one missing token drops the candidate."""
    candidate = _candidate("Geburtshilfe Leitlinie", body="Kreissaal")
    assert score_candidate(candidate, ["geburt", "sectio"]) is None


def test_tokens_may_match_different_fields() -> None:
    """OR across fields: each token may be found in a different field."""
    candidate = _candidate("Geburtshilfe", keywords=("kreissaal",), body="Notfall")
    assert score_candidate(candidate, ["geburt", "kreis", "notfall"]) is not None


def test_title_and_keyword_weighting_beats_body_only() -> None:
    """'geburt' ranks the titled, keyworded document above a body-only mention."""
    titled = _candidate("Geburtshilfe Leitlinie", keywords=("Geburt",), candidate_id=1)
    body_only = _candidate(
        "Stationsablauf", body="Einmal erwaehnt: Geburt.", candidate_id=2
    )
    tokens = ["geburt"]
    titled_score = score_candidate(titled, tokens)
    body_score = score_candidate(body_only, tokens)
    assert titled_score is not None and body_score is not None
    # title 5*4 + keyword 5*2 + combined text 5*1
    assert titled_score == 35
    # combined text only: "stationsablauf einmal erwaehnt: geburt." -> word start
    assert body_score == 3
    assert titled_score > body_score


def test_diacritics_do_not_block_matches() -> None:
    candidate = _candidate("Ärztliche Übergabe")
    assert score_candidate(candidate, ["arztliche", "ubergabe"]) is not None


def test_training_media_ranked_on_title_and_keywords_only() -> None:
    """Same fields: an SOP adds the combined-text term, a video does not."""
    sop = _candidate("Geburtshilfe", keywords=("Kreissaal",))
    video = _candidate(
        "Geburtshilfe", keywords=("Kreissaal",), entity_type=EntityType.VIDEOS
    )
    assert score_candidate(sop, ["geburt"]) == 5 * 4 + 5
    assert score_candidate(video, ["geburt"]) == 5 * 4
