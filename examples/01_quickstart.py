#!/usr/bin/env python3
"""Example: Quickstart — revtree

Minimal working example: parse a tree, add revenue, display it and
write it back out.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install revtree
"""
from __future__ import annotations

import revtree

TREE_SOURCE = '''
GROUP Casino
  GROUP Table Games
    GAME Blackjack 100.0
    GAME Roulette 50.5
  GROUP Slot Games
    GAME Mega Joker 0
'''


def main() -> None:
    print(f"revtree version: {revtree.__version__}")

    # Step 1: Parse the indented text into a tree
    root = revtree.parse(TREE_SOURCE)
    print(f"Parsed root: '{root.name}', "
          f"groups={len(root.get_groups())}, "
          f"games={len(root.get_all_games())}")

    # Step 2: Add revenue to the first game
    blackjack = root.get_all_games()[0]
    blackjack.add_revenue(25.0)
    print(f"Total revenue: {root.total_revenue()}")

    # Step 3: Display with per-group totals
    print()
    print("\n".join(revtree.render(root)))

    # Step 4: Serialize back to the persisted format
    print(f"\nSerialized ({len(revtree.dumps(root))} chars):")
    print(revtree.dumps(root))


if __name__ == "__main__":
    main()
