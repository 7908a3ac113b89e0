"""
Edit buffer commands, run against the API server.
"""

import sys

from rich.console import Console
from rich.markup import escape

from blissword.cli import client
from blissword.core.codec import Alphabet, decode
from blissword.core.symbols import format_symbol

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("buffer", help="Edit the shared symbol buffer")
    buf_sub = parser.add_subparsers(dest="buffer_command", required=True)

    show_p = buf_sub.add_parser("show", help="Show the buffer")
    show_p.set_defaults(func=_run(client.get_buffer))

    add_p = buf_sub.add_parser("append", help="Append a symbol")
    add_p.add_argument("symbol", help='Symbol in numerals, e.g. "12335" or "14164;8998"')
    add_p.add_argument("gloss", help="Gloss to show for it")
    add_p.add_argument("--id", dest="payload_id", help="Provenance id (default: the symbol)")
    add_p.add_argument("--no-decompose", action="store_true", help="Keep the symbol as given")
    add_p.set_defaults(func=buffer_append)

    back_p = buf_sub.add_parser("back", help="Move the caret back")
    back_p.set_defaults(func=_run(client.caret_backward))

    fwd_p = buf_sub.add_parser("forward", help="Move the caret forward")
    fwd_p.set_defaults(func=_run(client.caret_forward))

    del_p = buf_sub.add_parser("delete", help="Delete the selected symbol")
    del_p.set_defaults(func=_run(client.delete))

    clear_p = buf_sub.add_parser("clear", help="Delete everything")
    clear_p.set_defaults(func=_run(client.clear))

    ind_p = buf_sub.add_parser("indicator", help="Add or replace the indicator")
    ind_p.add_argument("indicator_id", type=int, help="Indicator BCI-AV ID")
    ind_p.set_defaults(func=buffer_indicator)

    unind_p = buf_sub.add_parser("unindicator", help="Remove the indicator")
    unind_p.set_defaults(func=_run(client.remove_indicator))

    mod_p = buf_sub.add_parser("modifier", help="Add a modifier")
    mod_p.add_argument("symbol", help='Modifier in numerals, e.g. "14947"')
    mod_p.add_argument("gloss", help="Modifier gloss")
    mod_p.add_argument("--prepend", action="store_true", help="Put it in front")
    mod_p.set_defaults(func=buffer_modifier)

    unmod_p = buf_sub.add_parser("unmodifier", help="Remove the last modifier")
    unmod_p.set_defaults(func=_run(client.remove_modifier))


def print_buffer(buf: dict):
    items = buf["items"]
    caret = buf["caret"]
    if not items:
        print("Buffer is empty.")
        return
    marker = "[bold]|[/bold]"
    if caret == -1:
        console.print(marker)
    for i, item in enumerate(items):
        mods = len(item.get("modifiers", []))
        suffix = f"  [dim]({mods} modifier{'s' if mods != 1 else ''})[/dim]" if mods else ""
        console.print(f"{i:>3}  {format_symbol(item['symbol']):30} {escape(item['gloss'])}{suffix}")
        if i == caret:
            console.print(marker)


def _run(call):
    def handler(args):
        try:
            print_buffer(call())
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
    return handler


def _numerals(text: str) -> list:
    symbol = decode(text, Alphabet.BCI_AV)
    if not symbol:
        print(f"✗ Malformed symbol: {text}")
        sys.exit(1)
    return symbol


def buffer_append(args):
    symbol = _numerals(args.symbol)
    payload_id = args.payload_id or args.symbol
    try:
        buf = client.append(payload_id, args.gloss, symbol, decompose=not args.no_decompose)
        print(f"✓ Appended: {args.gloss}")
        print_buffer(buf)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def buffer_indicator(args):
    try:
        buf = client.add_indicator(args.indicator_id)
        if not buf["items"]:
            print("Nothing to add an indicator to.")
        print_buffer(buf)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def buffer_modifier(args):
    symbol = _numerals(args.symbol)
    try:
        buf = client.add_modifier(symbol, args.gloss, prepend=args.prepend)
        if buf["caret"] == -1:
            print("No symbol selected.")
        print_buffer(buf)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
