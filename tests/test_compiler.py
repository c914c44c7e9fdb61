# tests/test_compiler.py
"""Tests for dictionary compilation and the short gloss table."""

from eldamo_lookup.compiler import (
    DictionaryCompiler,
    ShortGlossTable,
    compile_dictionary,
    merge_gloss,
)
from eldamo_lookup.lexicon import LexiconNode, parse_lexicon


def headwords(compiled):
    return [entry.headword for entry in compiled.entries]


def test_entries_in_document_order(compiled):
    assert headwords(compiled) == [
        "Nolofinwë", "Fingolfin", "nolo", "nolo", "nolo",
        "Finwë", "iþil", "Ñoldo", "aragorn",
    ]


def test_entry_fields(compiled):
    entry = compiled.entries[0]

    assert entry.tokens == ("nolofinwe", "son", "finwe", "proud")
    assert entry.language == "q"
    assert entry.part_of_speech == "masc-name"
    assert entry.gloss == "*son of Finwë, the proud"
    assert entry.notes == "Name of Fingolfin."
    assert entry.elements == ("nolo", "Finwë", "?")


def test_excluded_speech_skipped(compiled):
    assert "-ya" not in headwords(compiled)


def test_word_without_headword_skipped(root):
    compiler = DictionaryCompiler()
    compiled = compiler.compile(root)

    assert compiler.skipped == 1
    assert len(compiled) == 9


def test_tengwar_applied_at_compile_time(root, compiled):
    isil = compiled.entries[6]

    assert isil.headword == "iþil"
    assert isil.tengwar == "þ"
    # Index tokens come from the uncorrected headword
    assert isil.tokens[0] == "isil"
    # The raw node is left untouched
    assert root.children[0].children[7].headword == "isil"


def test_gloss_table_merges_distinct_glosses(compiled):
    assert compiled.gloss_table.get("nolo") == "wise / lore"


def test_gloss_table_skips_unglossed(compiled):
    table = compiled.gloss_table

    assert "Finwë" not in table
    assert table.get("Finwë") == ""
    assert len(table) == 8


def test_gloss_table_unknown_headwords(compiled):
    assert compiled.gloss_table.get("?") == ""
    assert compiled.gloss_table.get("missing") == ""


def test_compile_is_deterministic(sample_xml):
    first = compile_dictionary(parse_lexicon(sample_xml))
    second = compile_dictionary(parse_lexicon(sample_xml))

    assert first.entries == second.entries
    assert first.gloss_table == second.gloss_table


def test_empty_lexicon_is_valid():
    compiled = compile_dictionary(LexiconNode("eldamo"))

    assert compiled.entries == ()
    assert len(compiled.gloss_table) == 0


def test_merge_gloss():
    assert merge_gloss(None, "star") == "star"
    assert merge_gloss("star", "star") == "star"
    assert merge_gloss("star", "sky") == "star / sky"
    assert merge_gloss("star / sky", "star") == "star / sky"


def test_merge_gloss_order_independent_contents():
    forward = merge_gloss(merge_gloss(None, "a"), "b")
    backward = merge_gloss(merge_gloss(None, "b"), "a")

    assert set(forward.split(" / ")) == set(backward.split(" / "))


def test_short_gloss_table_items():
    table = ShortGlossTable({"elen": "star", "aran": "king"})

    assert table.items() == [("aran", "king"), ("elen", "star")]
    assert table == ShortGlossTable({"aran": "king", "elen": "star"})
    assert table != ShortGlossTable({"aran": "king"})


def test_merge_gloss_skips_known_parts_of_merged_gloss():
    assert merge_gloss("b", "b / c") == "b / c"
    assert merge_gloss("b / c", "c / b") == "b / c"


def test_gloss_table_keeps_lexicon_spelling(compiled):
    table = compiled.gloss_table

    assert table.get("Ñoldo") == "one of the wise"
    assert table.get("Noldo") == "one of the wise"
    assert table.get("iþil") == "Moon"
    assert table.get("isil") == "Moon"


def test_source_headword_recorded(compiled):
    noldo = compiled.entries[7]

    assert noldo.headword == "Ñoldo"
    assert noldo.source_headword == "Noldo"
