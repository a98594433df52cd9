import pytest

from legal_citations.classifier import classify, detect_citation_type
from legal_citations.errors import CitationParseError, ErrorCode
from legal_citations.records import CitationType
from legal_citations.tokenizer import TokenKind, collapse_whitespace, tokenize


def test_collapse_whitespace_handles_tabs_and_newlines():
    assert collapse_whitespace("  BGE\t145\nIII   229  ") == "BGE 145 III 229"
    assert collapse_whitespace("") == ""
    assert collapse_whitespace(None) == ""


def test_tokenize_records_kind_position_and_spacing():
    tokens = tokenize("Art.97 Abs. 1 OR")
    assert [t.text for t in tokens] == ["Art.", "97", "Abs.", "1", "OR"]
    assert [t.kind for t in tokens] == [
        TokenKind.WORD, TokenKind.NUMBER, TokenKind.WORD, TokenKind.NUMBER, TokenKind.WORD,
    ]
    assert [t.position for t in tokens] == [0, 4, 7, 12, 14]
    assert [t.spaced for t in tokens] == [True, False, True, True, True]


def test_tokenize_keeps_dotted_consideration_paths_together():
    tokens = tokenize("BGE 145 III 229 E. 4.2.1")
    assert tokens[-2].text == "E."
    assert tokens[-1].text == "4.2.1"
    assert not tokens[-1].is_integer


def test_tokenize_splits_unspaced_case_law():
    tokens = tokenize("BGE145III229")
    assert [t.text for t in tokens] == ["BGE", "145", "III", "229"]
    assert [t.spaced for t in tokens] == [True, False, False, False]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("BGE 145 III 229", CitationType.BGE),
        ("atf 140 II 315", CitationType.BGE),
        ("DTF 138 I 1", CitationType.BGE),
        ("BGE145III229", CitationType.BGE),
        ("Art. 97 OR", CitationType.STATUTE),
        ("art. 97 al. 1 CO", CitationType.STATUTE),
        ("ART. 1 ZGB", CitationType.STATUTE),
        ("GAUCH/SCHLUEP/SCHMID, OR AT, N 123", CitationType.DOCTRINE),
        ("Müller, Kommentar zum OR, N 4", CitationType.DOCTRINE),
        ("random text here", None),
        ("Artikel 97 OR", None),
        ("", None),
    ],
)
def test_detect_citation_type(text, expected):
    assert detect_citation_type(text) == expected


def test_classify_collapses_whitespace_first():
    assert classify("\n\t BGE 145 III 229") is CitationType.BGE


def test_classify_accepts_matching_hint():
    assert classify("Art. 97 OR", "statute") is CitationType.STATUTE
    assert classify("BGE 145 III 229", CitationType.BGE) is CitationType.BGE


def test_classify_rejects_conflicting_hint():
    with pytest.raises(CitationParseError) as excinfo:
        classify("BGE 145 III 229", "statute")
    assert excinfo.value.code is ErrorCode.TYPE_MISMATCH
    assert "does not match detected type 'bge'" in excinfo.value.message


def test_classify_unrecognized_text_with_hint_stays_unrecognized():
    assert classify("random text here", "bge") is None
