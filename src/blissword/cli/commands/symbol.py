"""
Symbol commands: codec, decomposition and lookups, run locally.
"""

import asyncio
import sys

from rich import print_json
from rich.console import Console
from rich.markup import escape

from blissword.config import get_settings
from blissword.core.codec import Alphabet, decode, detect_alphabet, encode
from blissword.core.decompose import decompose
from blissword.core.errors import BlisswordError
from blissword.core.roles import role_of
from blissword.core.search import find_by_gloss
from blissword.core.symbols import format_symbol
from blissword.core.tables import SymbolTables, load_tables

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("symbol", help="Encode, decode and look up symbols")
    parser.add_argument("--dictionary", help="Symbol dictionary JSON file")
    parser.add_argument("--id-map", help="Blissary id map JSON file")
    sym_sub = parser.add_subparsers(dest="symbol_command", required=True)

    # encode
    enc_p = sym_sub.add_parser("encode", help="BCI-AV numerals -> Blissary builder string")
    enc_p.add_argument("symbol", help='Symbol in numerals, e.g. "12335/8499"')
    enc_p.set_defaults(func=symbol_encode)

    # decode
    dec_p = sym_sub.add_parser("decode", help="Builder string -> BCI-AV IDs")
    dec_p.add_argument("text", help='Builder string, e.g. "B106/B12"')
    dec_p.add_argument("--alphabet", choices=["auto", "blissary", "bci_av"], default="auto")
    dec_p.set_defaults(func=symbol_decode)

    # decompose
    dcm_p = sym_sub.add_parser("decompose", help="Expand into elementary symbols")
    dcm_p.add_argument("symbol", help='Symbol in numerals, e.g. "12335" or "12335/8499"')
    dcm_p.set_defaults(func=symbol_decompose)

    # show
    show_p = sym_sub.add_parser("show", help="Show a dictionary entry")
    show_p.add_argument("bci_av_id", type=int, help="BCI-AV ID")
    show_p.set_defaults(func=symbol_show)

    # search
    search_p = sym_sub.add_parser("search", help="Find symbols by gloss")
    search_p.add_argument("gloss", help="Word to search for")
    search_p.set_defaults(func=symbol_search)


def _tables(args) -> SymbolTables:
    settings = get_settings()
    dictionary_path = args.dictionary or settings.dictionary_path
    id_map_path = args.id_map or settings.id_map_path
    return asyncio.run(load_tables(
        dictionary_path=dictionary_path,
        dictionary_url=None if dictionary_path else settings.dictionary_url,
        id_map_path=id_map_path,
        id_map_url=None if id_map_path else settings.id_map_url,
        timeout=settings.fetch_timeout,
    ))


def _parse_numerals(text: str) -> list:
    symbol = decode(text, Alphabet.BCI_AV)
    if not symbol:
        print(f"✗ Malformed symbol: {text}")
        sys.exit(1)
    return symbol


def symbol_encode(args):
    symbol = _parse_numerals(args.symbol)
    try:
        tables = _tables(args)
        print(encode(symbol, tables.id_map))
    except BlisswordError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def symbol_decode(args):
    alphabet = detect_alphabet(args.text) if args.alphabet == "auto" else Alphabet(args.alphabet)
    try:
        tables = _tables(args) if alphabet == Alphabet.BLISSARY else SymbolTables()
    except BlisswordError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    symbol = decode(args.text, alphabet, tables.id_map)
    if not symbol:
        print(f"✗ Could not decode: {args.text}")
        sys.exit(1)
    print_json(data=symbol)


def symbol_decompose(args):
    symbol = _parse_numerals(args.symbol)
    try:
        tables = _tables(args)
        result = decompose(symbol if len(symbol) > 1 else symbol[0], tables.dictionary)
    except BlisswordError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    if result is None:
        print(f"✗ Unknown symbol in: {args.symbol}")
        sys.exit(1)
    print(format_symbol(result))


def symbol_show(args):
    try:
        tables = _tables(args)
    except BlisswordError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    entry = tables.dictionary.get(args.bci_av_id)
    if entry is None:
        print(f"✗ Not found: {args.bci_av_id}")
        sys.exit(1)
    print(f"ID: {entry.id}")
    print(f"Gloss: {entry.gloss}")
    print(f"Elementary: {'yes' if entry.is_elementary else 'no'}")
    if entry.composition:
        print(f"Composition: {format_symbol(list(entry.composition))}")
    role = role_of(entry.id)
    if role:
        print(f"Role: {role}")
    code = tables.id_map.spelling(entry.id)
    if code:
        print(f"Builder code: {code}")


def symbol_search(args):
    try:
        tables = _tables(args)
    except BlisswordError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    matches = find_by_gloss(args.gloss, tables.dictionary)
    if not matches:
        print("No matches.")
        return
    for m in matches:
        line = f"{m.bci_av_id:>6}  {escape(m.gloss)}"
        if m.full_composition:
            line += f"  [dim]= {format_symbol(m.full_composition)}[/dim]"
        console.print(line)
