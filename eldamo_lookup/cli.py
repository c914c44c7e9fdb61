"""
CLI interface for eldamo-lookup.

Usage:
    eldamo-lookup aragorn
    eldamo-lookup --json "nolofinwë"
    echo star | eldamo-lookup --simple --limit 5
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from eldamo_lookup import __version__
from eldamo_lookup.dictionary import (
    DictionaryLoadError,
    get_dictionary_path,
    load_dictionary,
    lookup,
)


# ============================================================================
# Language Names
# ============================================================================

LANGUAGE_NAMES = {
    'q': 'Quenya',
    'nq': 'Neo-Quenya',
    's': 'Sindarin',
    'ns': 'Neo-Sindarin',
    'n': 'Noldorin',
    'p': 'Primitive Elvish',
    't': 'Telerin',
    'ad': 'Adûnaic',
    'kh': 'Khuzdul',
    'bs': 'Black Speech',
}


def sort_results(results: List[Dict[str, Any]], limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Best scores first; entries with equal scores keep dictionary order."""
    ranked = sorted(results, key=lambda r: -r['score'])
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(results: List[Dict[str, Any]]) -> str:
    """
    Human readable output.

    One line per entry, then one line per compound element:
        headword (Language, pos) [score] gloss
          └─ element: short gloss
    """
    if not results:
        return "No match."

    lines = []
    for r in results:
        language = LANGUAGE_NAMES.get(r['language'], r['language'] or '?')
        label = f"{language}, {r['part_of_speech']}" if r['part_of_speech'] else language
        line = f"{r['headword']} ({label}) [{r['score']}]"
        if r['gloss']:
            line += f" {r['gloss']}"
        lines.append(line)

        for element in r['elements']:
            short_gloss = element['short_gloss'] or '-'
            lines.append(f"  └─ {element['headword']}: {short_gloss}")

    return "\n".join(lines)


def format_json(results: List[Dict[str, Any]]) -> str:
    return json.dumps(results, ensure_ascii=False, indent=2)


def format_simple(results: List[Dict[str, Any]]) -> str:
    """Simple tab-separated output format."""
    lines = []
    for r in results:
        lines.append(f"{r['headword']}\t{r['score']}\t{r['language'] or ''}\t{r['gloss'] or ''}")
    return "\n".join(lines)


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="eldamo-lookup",
        description="Fuzzy lookup in the Eldamo dictionary",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Words or glosses to look up (read from stdin if omitted)",
    )
    parser.add_argument(
        "--dictionary", "-D",
        default=None,
        help=f"Path to the Eldamo XML file (default: {get_dictionary_path()})",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--simple", "-s",
        action="store_true",
        help="Simple output format (headword, score, language, gloss)",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=None,
        help="Show at most this many results per word",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log loading and cache activity",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"eldamo-lookup {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    words = args.words
    if not words:
        # Read from stdin, one query per line
        words = [line.strip() for line in sys.stdin if line.strip()]

    if not words:
        parser.print_help()
        sys.exit(1)

    try:
        load_dictionary(args.dictionary)
    except DictionaryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for word in words:
        results = sort_results(lookup(word), args.limit)

        if args.json:
            print(format_json(results))
        elif args.simple:
            print(format_simple(results))
        else:
            if len(words) > 1:
                print(f"== {word}")
            print(format_default(results))


if __name__ == "__main__":
    main()
