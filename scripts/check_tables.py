"""Check the symbol tables: roles, compositions, cycles and codec round trips."""
import argparse
import asyncio
from collections import Counter

from blissword.config import get_settings
from blissword.core.codec import Alphabet, decode, encode
from blissword.core.decompose import decompose, find_cycles
from blissword.core.errors import CyclicComposition, UnknownIdentifier
from blissword.core.roles import role_of
from blissword.core.tables import load_tables


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dictionary", help="symbol dictionary JSON file")
    parser.add_argument("--id-map", help="Blissary id map JSON file")
    parser.add_argument("--show-examples", type=int, default=0,
                        help="show N problem IDs per category")
    args = parser.parse_args()

    settings = get_settings()
    print("Loading tables...")
    tables = asyncio.run(load_tables(
        dictionary_path=args.dictionary or settings.dictionary_path,
        dictionary_url=None if args.dictionary else settings.dictionary_url,
        id_map_path=args.id_map or settings.id_map_path,
        id_map_url=None if args.id_map else settings.id_map_url,
        timeout=settings.fetch_timeout,
    ))
    dictionary, id_map = tables.dictionary, tables.id_map

    # Collect stats
    kinds = Counter()
    roles = Counter()
    depths = []
    problems = {}

    def problem(kind, bci_av_id):
        problems.setdefault(kind, []).append(bci_av_id)

    for entry in dictionary:
        roles[role_of(entry.id) or "plain"] += 1
        if entry.is_elementary:
            kinds["elementary"] += 1
        elif entry.composition:
            kinds["composite"] += 1
        else:
            kinds["no composition"] += 1

        if entry.id not in id_map:
            problem("unmapped", entry.id)

        try:
            full = decompose(entry.id, dictionary)
        except CyclicComposition:
            continue
        if full is None:
            problem("missing part", entry.id)
            continue
        depths.append(len([e for e in full if isinstance(e, int)]))

        try:
            text = encode(full, id_map)
        except UnknownIdentifier:
            problem("part unmapped", entry.id)
            continue
        if decode(text, Alphabet.BLISSARY, id_map) != full:
            problem("round trip", entry.id)

    cycles = find_cycles(dictionary)

    print(f"\n{'='*60}")
    print(f"Dictionary: {len(dictionary)} entries, id map: {len(id_map)} records")
    print(f"{'='*60}")

    print(f"\n📋 Entries:")
    for kind, count in kinds.most_common():
        pct = 100 * count / max(len(dictionary), 1)
        print(f"  {kind:20} {count:6} ({pct:5.1f}%)")

    print(f"\n🏷️  Roles:")
    for role, count in roles.most_common():
        print(f"  {role:20} {count:6}")

    if depths:
        print(f"\n📏 Elementary parts per symbol:")
        print(f"  min: {min(depths)}")
        print(f"  max: {max(depths)}")
        print(f"  avg: {sum(depths) / len(depths):.1f}")

    print(f"\n⚠️  Problems:")
    print(f"  {'cycles':20} {len(cycles):6}")
    for kind, ids in problems.items():
        print(f"  {kind:20} {len(ids):6}")

    if args.show_examples:
        print(f"\n{'='*60}")
        print("Sample problem IDs:")
        print(f"{'='*60}")
        for cycle in cycles[:args.show_examples]:
            print(f"  • cycle: {' -> '.join(str(c) for c in cycle)}")
        for kind, ids in problems.items():
            print(f"\n[{kind}]")
            for bci_av_id in ids[:args.show_examples]:
                print(f"  • {bci_av_id} {dictionary.gloss(bci_av_id)}")


if __name__ == "__main__":
    main()
