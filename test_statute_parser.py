import pytest

from legal_citations.errors import CitationParseError, ErrorCode
from legal_citations.records import StatuteCitation
from legal_citations.statute import detect_language, parse_statute


def test_parse_article_and_code():
    assert parse_statute("Art. 97 OR") == StatuteCitation(article=97, statute="OR", language="de")


def test_parse_all_components():
    citation = parse_statute("Art. 8 Abs. 1 lit. a Ziff. 2 ZGB")
    assert citation.article == 8
    assert citation.paragraph == 1
    assert citation.letter == "a"
    assert citation.number == 2
    assert citation.statute == "ZGB"
    assert citation.language == "de"


@pytest.mark.parametrize(
    "text,language",
    [
        ("Art. 97 Abs. 1 OR", "de"),
        ("art. 97 al. 1 CO", "fr"),
        ("art. 97 cpv. 1 CO", "it"),
        ("art. 41 let. b CO", "fr"),
        ("art. 41 lett. b CO", "it"),
        ("art. 8 ch. 2 CEDH", "fr"),
        ("Art. 97 OR", "de"),
        ("art. 97 CO", "de"),
    ],
)
def test_language_follows_markers(text, language):
    assert parse_statute(text).language == language
    assert detect_language(text) == language


def test_mixed_markers_are_accepted():
    citation = parse_statute("Art. 97 al. 1 OR")
    assert citation.paragraph == 1
    assert citation.statute == "OR"
    assert citation.language == "fr"


def test_case_and_spacing_are_normalized():
    citation = parse_statute("art.97 abs.1 lit. A or")
    assert citation == StatuteCitation(
        article=97, paragraph=1, letter="a", statute="OR", language="de"
    )


def test_statute_code_spelling_is_canonical():
    assert parse_statute("Art. 111 stgb").statute == "StGB"
    assert parse_statute("Art. 5 SCHKG").statute == "SchKG"
    assert parse_statute("Art. 8 emrk").statute == "EMRK"


def test_trailing_dot_on_code_is_dropped():
    assert parse_statute("art. 8 al. 1 Cst.").statute == "Cst"


def test_missing_statute_is_reported():
    with pytest.raises(CitationParseError) as excinfo:
        parse_statute("Art. 97")
    assert excinfo.value.code is ErrorCode.MISSING_STATUTE


def test_missing_statute_allowed_when_not_required():
    citation = parse_statute("Art. 97 Abs. 2", require_statute=False)
    assert citation.statute is None
    assert citation.paragraph == 2


@pytest.mark.parametrize(
    "text",
    [
        "Art. OR",
        "Art. 97a OR",
        "Art. 97 Abs. OR",
        "Art. 97 lit. 1 OR",
        "Art. 97 lit. ab OR",
        "Art. 97 OR ZGB",
        "Art. 97 O",
        "Art. 97 ABCDEFGHIJK",
        "Artikel 97 OR",
        "Art. 97 OR, S. 4",
    ],
)
def test_malformed_statutes_are_unrecognized(text):
    with pytest.raises(CitationParseError) as excinfo:
        parse_statute(text)
    assert excinfo.value.code is ErrorCode.UNRECOGNIZED_FORMAT
