#!/usr/bin/env python3
"""Demo script: a tiny line editor built on zipperlist.

The buffer is a Zipper of lines with the cursor on the current line.
Moving up/down and editing at the cursor never re-walks the buffer.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from zipperlist import Directive, Zipper, find, fold, into


def show(buffer: Zipper, title: str):
    """Print the buffer with a marker on the current line."""
    print(f"\n=== {title} ===")
    start = buffer.cursor_start()
    for number, position in enumerate(start.positions(), 1):
        marker = ">" if buffer.has_cursor and len(position.left) == len(buffer.left) else " "
        print(f"{marker} {number:3d}  {position.cursor}")
    if buffer.is_at_end():
        print(">      <end of buffer>")


def demo_editing():
    """Insert, replace and delete lines around the cursor."""
    buffer = Zipper.from_list([
        "def greet(name):",
        "    print('hello')",
        "",
        "greet('world')",
    ])
    show(buffer, "Original")

    buffer = buffer.move_right().replace("    print(f'hello {name}')")
    show(buffer, "Replaced line 2")

    buffer = buffer.move_right().delete()
    show(buffer, "Deleted blank line")

    buffer = buffer.insert("").insert("# call it")
    show(buffer, "Inserted comment")


def demo_search_and_fold():
    """Search from the cursor and stop a fold early."""
    buffer = into(f"line {n}" for n in range(1, 11)).cursor_start()

    hit = find(buffer, lambda p: p.cursor.endswith("7"))
    print(f"\nFound {hit.cursor!r} with {len(hit.left)} line(s) above it")

    def total_chars(position, acc):
        if acc > 30:
            return Directive.HALT, acc
        return Directive.CONTINUE, acc + len(position.cursor)

    print(f"Counting characters until 30: {fold(buffer, 0, total_chars)}")


def main():
    demo_editing()
    demo_search_and_fold()
    return 0


if __name__ == "__main__":
    sys.exit(main())
