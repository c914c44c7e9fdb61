# tests/conftest.py
"""Shared fixtures: a small Eldamo-like lexicon."""

import pytest

from eldamo_lookup.compiler import compile_dictionary
from eldamo_lookup.dictionary import unload_dictionary
from eldamo_lookup.lexicon import parse_lexicon

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<eldamo>
  <!-- sample data for tests -->
  <language id="q" name="Quenya">
    <word v="Nolofinwë" l="q" speech="masc-name" gloss="*son of Finwë, the proud">
      <element v="nolo"/>
      <element v="Finwë"/>
      <element v="?"/>
      <element gloss="no headword"/>
      <notes>Name of <l>Fingolfin</l>.</notes>
      <word v="Fingolfin" l="s" speech="masc-name" gloss="Fingolfin"/>
    </word>
    <word v="nolo" l="q" speech="n" gloss="wise"/>
    <word v="nolo" l="q" speech="n" gloss="wise"/>
    <word v="nolo" l="q" speech="n" gloss="lore"/>
    <word v="Finwë" l="q" speech="masc-name" gloss="[unglossed]"/>
    <word v="-ya" l="q" speech="suf" gloss="adjectival suffix"/>
    <word l="q" speech="n" gloss="headless"/>
    <word v="isil" l="q" speech="n" gloss="Moon" ngloss="Moon, (poetic) moonlight 2" tengwar="þ"/>
    <word v="Noldo" l="q" speech="n" gloss="one of the wise" tengwar="ñ"/>
    <word v="aragorn" l="s" speech="masc-name" gloss="Kingly Valour"/>
  </language>
</eldamo>
""".encode("utf-8")


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "eldamo-data.xml"
    path.write_bytes(SAMPLE_XML)
    return path


@pytest.fixture
def root():
    return parse_lexicon(SAMPLE_XML)


@pytest.fixture
def compiled(root):
    return compile_dictionary(root)


@pytest.fixture(autouse=True)
def no_global_dictionary():
    unload_dictionary()
    yield
    unload_dictionary()
