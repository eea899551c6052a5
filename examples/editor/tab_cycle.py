"""Simulate an editor's TAB key: repeated presses dedent one level at a time."""

from nesfab_mode import Indenter, RepeatTracker

lines = ["fn main()", "    while true", "        if x", "                y = 1"]
indenter = Indenter()
tracker = RepeatTracker()

for press in range(1, 6):
    kind = tracker.kind_for(lines, 3)
    lines[3] = indenter.indent_line(lines, 3, kind)
    tracker.record(lines, 3)
    print(f"press {press} ({kind.name}): {lines[3]!r}")
