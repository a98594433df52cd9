import pytest

from legal_citations import convert_citation
from legal_citations.records import CitationType, Language


@pytest.mark.parametrize(
    "text,to_format,language,expected",
    [
        ("BGE 145 III 229", "bge", "fr", "ATF 145 III 229"),
        ("ATF 140 II 315 consid. 4.2", "bge", "it", "DTF 140 II 315 consid. 4.2"),
        ("DTF 138 I 1", "bge", "de", "BGE 138 I 1"),
        ("Art. 97 Abs. 1 OR", "statute", "fr", "art. 97 al. 1 CO"),
        ("art. 97 al. 1 CO", "statute", "de", "Art. 97 Abs. 1 OR"),
        ("art. 8 cpv. 1 Cost", "statute", "fr", "art. 8 al. 1 Cst"),
    ],
)
def test_convert_within_family(text, to_format, language, expected):
    result = convert_citation(text, to_format, target_language=language)
    assert result.success is True
    assert result.converted == expected
    assert result.from_format is CitationType(to_format)
    assert result.to_format is CitationType(to_format)
    assert result.target_language is Language(language)
    assert result.warnings is None


def test_convert_defaults_to_german():
    assert convert_citation("ATF 140 II 315", "bge").converted == "BGE 140 II 315"


def test_convert_with_matching_source_hint():
    result = convert_citation("Art. 97 OR", "statute", from_format="statute", target_language="it")
    assert result.converted == "art. 97 CO"


@pytest.mark.parametrize(
    "text,to_format,detected",
    [
        ("BGE 145 III 229", "statute", "bge"),
        ("Art. 97 OR", "bge", "statute"),
        ("GAUCH/SCHLUEP/SCHMID, OR AT, N 123", "bge", "doctrine"),
        ("GAUCH/SCHLUEP/SCHMID, OR AT, N 123", "statute", "doctrine"),
    ],
)
def test_families_are_never_converted_into_each_other(text, to_format, detected):
    result = convert_citation(text, to_format, target_language="fr")
    assert result.success is False
    assert result.error_code == "FORMAT_MISMATCH"
    assert result.error == (
        f"Cannot convert from '{detected}' to '{to_format}'. "
        "Citation type must match target format."
    )
    assert result.from_format is CitationType(detected)
    assert result.converted is None


def test_doctrine_target_is_unsupported():
    result = convert_citation("BGE 145 III 229", "doctrine")
    assert result.success is False
    assert result.error_code == "UNSUPPORTED_TARGET"
    assert result.error == "Conversion to doctrine format is not yet supported"


def test_parse_errors_come_first():
    result = convert_citation("BGE 145 VII 229", "doctrine")
    assert result.error_code == "INVALID_SECTION"
    assert result.from_format is None


def test_source_hint_mismatch():
    result = convert_citation("BGE 145 III 229", "bge", from_format="statute")
    assert result.success is False
    assert result.error_code == "TYPE_MISMATCH"
    assert result.from_format is CitationType.STATUTE


def test_unrecognized_input():
    result = convert_citation("hello world", "bge")
    assert result.error_code == "UNRECOGNIZED_FORMAT"


def test_untranslatable_statute_is_kept_with_warning():
    result = convert_citation("Art. 8 EMRK", "statute", target_language="fr")
    assert result.success is True
    assert result.converted == "art. 8 EMRK"
    assert result.warnings == ["No translation found for statute 'EMRK'; kept as-is"]


def test_english_criminal_code_warns_about_civil_code_clash():
    result = convert_citation("Art. 111 StGB", "statute", target_language="en")
    assert result.converted == "Art. 111 CC"
    assert len(result.warnings) == 1
    assert "Swiss Civil Code" in result.warnings[0]

    assert convert_citation("Art. 111 StGB", "statute", target_language="fr").warnings is None


def test_convert_rejects_unknown_target_format():
    with pytest.raises(ValueError):
        convert_citation("BGE 145 III 229", "treaty")
