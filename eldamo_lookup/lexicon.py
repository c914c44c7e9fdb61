"""
Raw lexicon tree for eldamo-lookup.

The Eldamo data file is an XML document whose elements nest words, their
compound elements, notes and many structural kinds (languages, sources,
phonetic rules...). This module parses it with lxml into a tree of
LexiconNode records carrying only the attributes the compiler reads.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

from lxml import etree


class LexiconParseError(Exception):
    """Raised when the raw lexicon cannot be read or is not valid XML."""
    pass


# ============================================================================
# Node Record
# ============================================================================

@dataclass(slots=True)
class LexiconNode:
    """
    One element of the raw lexicon.

    Attributes:
        kind: Element name ("word", "element", "notes", ...)
        headword: The lemma (`v` attribute)
        gloss: Definition (`gloss` attribute)
        ngloss: Definition including neo-glosses (`ngloss` attribute)
        stem: Inflection stem (`stem` attribute)
        speech: Part of speech (`speech` attribute)
        tengwar: Tengwar spelling hint (`tengwar` attribute)
        language: Language code (`l` attribute)
        text: All text contained in the element (TEXT_KINDS only)
        children: Child elements in document order
    """
    kind: str
    headword: Optional[str] = None
    gloss: Optional[str] = None
    ngloss: Optional[str] = None
    stem: Optional[str] = None
    speech: Optional[str] = None
    tengwar: Optional[str] = None
    language: Optional[str] = None
    text: str = ""
    children: List["LexiconNode"] = field(default_factory=list)

    def children_of_kind(self, kind: str) -> List["LexiconNode"]:
        """Direct children with the given element name."""
        return [child for child in self.children if child.kind == kind]

    def first_child_of_kind(self, kind: str) -> Optional["LexiconNode"]:
        """First direct child with the given element name, if any."""
        for child in self.children:
            if child.kind == kind:
                return child
        return None

    def walk(self) -> Iterator["LexiconNode"]:
        """Yield this node and all its descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


def find_word(node: LexiconNode, headword: str) -> Optional[LexiconNode]:
    """
    Find the first "word" node with the given headword.

    The search is depth-first in document order and stops at the first match.
    """
    for candidate in node.walk():
        if candidate.kind == "word" and candidate.headword == headword:
            return candidate
    return None


# ============================================================================
# XML Parsing
# ============================================================================

# Only these kinds keep their text content, the others would copy the whole
# document once per nesting level
TEXT_KINDS = frozenset(['notes'])


def _convert(elem) -> LexiconNode:
    attrib = elem.attrib
    node = LexiconNode(
        kind=elem.tag,
        headword=attrib.get('v'),
        gloss=attrib.get('gloss'),
        ngloss=attrib.get('ngloss'),
        stem=attrib.get('stem'),
        speech=attrib.get('speech'),
        tengwar=attrib.get('tengwar'),
        language=attrib.get('l'),
        text=''.join(elem.itertext()) if elem.tag in TEXT_KINDS else "",
    )
    for child in elem:
        # Comments and processing instructions have a non-string tag
        if isinstance(child.tag, str):
            node.children.append(_convert(child))
    return node


def parse_lexicon(source: Union[str, Path, bytes]) -> LexiconNode:
    """
    Parse a raw lexicon document.

    Args:
        source: Path to the XML file, or the document itself as bytes

    Returns:
        The root LexiconNode

    Raises:
        LexiconParseError: If the file is missing or the XML is malformed
    """
    parser = etree.XMLParser(no_network=True, remove_comments=True, huge_tree=True)

    try:
        if isinstance(source, bytes):
            root = etree.fromstring(source, parser)
        else:
            root = etree.parse(str(source), parser).getroot()
    except (OSError, etree.XMLSyntaxError) as e:
        raise LexiconParseError(f"Cannot parse lexicon {source!r:.80}: {e}") from e

    return _convert(root)
