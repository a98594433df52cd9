from legal_citations.records import CitationType
from legal_citations.reference_extraction import extract_citations, extract_references


def test_extract_statutes_with_paragraphs():
    text = "Nach Art. 8 EMRK und Art. 34 Abs. 2 BV ist die Beschwerde begründet."
    refs = extract_citations(text)
    assert [r.normalized for r in refs] == ["Art. 8 EMRK", "Art. 34 Abs. 2 BV"]
    assert all(r.citation_type is CitationType.STATUTE for r in refs)
    assert refs[1].parsed["paragraph"] == 2


def test_extract_reports_offsets_into_original_text():
    text = "Vgl. BGE 147 I 268 E. 2.1 sowie ATF 140 II 315."
    refs = extract_citations(text)
    assert [r.raw for r in refs] == ["BGE 147 I 268 E. 2.1", "ATF 140 II 315"]
    for ref in refs:
        assert text[ref.start:ref.end] == ref.raw


def test_extract_mixed_families_in_order_of_appearance():
    text = (
        "Gemäss Art. 97 Abs. 1 OR haftet der Schuldner (BGE 145 III 229 E. 4.2); "
        "voir aussi art. 8 al. 1 CC."
    )
    refs = extract_citations(text)
    assert [r.normalized for r in refs] == [
        "Art. 97 Abs. 1 OR",
        "BGE 145 III 229 E. 4.2",
        "art. 8 al. 1 CC",
    ]
    assert refs == sorted(refs, key=lambda r: r.start)


def test_extract_skips_malformed_candidates():
    refs = extract_citations("BGE 145 VII 229 wurde nie publiziert, BGE 145 III 229 schon.")
    assert [r.normalized for r in refs] == ["BGE 145 III 229"]


def test_extract_ignores_prose_after_article_numbers():
    refs = extract_citations("Art. 12 Der Gesetzgeber hat in Art. 13 Oder etwas anderes geregelt.")
    assert refs == []


def test_extract_deduplicates_on_normalized_form():
    refs = extract_citations("Art. 97 OR; vgl. auch Art.  97  OR und art. 97 or.")
    assert len(refs) == 1
    assert refs[0].start == 0


def test_extract_accepts_title_case_french_codes():
    refs = extract_citations("Selon l'art. 29 al. 2 Cst, le droit d'être entendu est garanti.")
    assert [r.normalized for r in refs] == ["art. 29 al. 2 Cst"]


def test_extract_empty_text():
    assert extract_citations("") == []
    assert extract_references("") == {"statutes": [], "citations": []}


def test_extract_references_splits_by_family():
    refs = extract_references("Art. 8 EMRK, BGE 145 III 229 und DTF 138 I 1.")
    assert [r["normalized"] for r in refs["statutes"]] == ["Art. 8 EMRK"]
    assert [r["normalized"] for r in refs["citations"]] == ["BGE 145 III 229", "DTF 138 I 1"]
    assert refs["citations"][0]["citation_type"] == "bge"


def test_extract_does_not_take_markers_for_law_codes():
    assert extract_citations("Gemäss Art. 34 Abs. 2 des Gesetzes gilt") == []
    assert extract_citations("Art. 5 Ziff. 2 des Vertrags") == []
    assert extract_citations("art. 8 al. 1 de la loi") == []
    assert extract_citations("art. 41 lett. b della legge") == []
