"""Line-oriented sections inside human-edited card text.

A section is a header line followed by "- Name: value" entries:

  Attributes:
  - Strength: 7
  - Magic: disabled

Reading walks the lines as a small state machine: seek the header, then
accumulate entries (blank lines are skipped), and close at the first line
that is not an entry. An entry's value is kept as raw text ("very high",
"8 (trained)"); deciding whether it is usable is up to the caller. Stripping removes the header plus the contiguous run
of known-attribute entries directly below it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_ENTRY_RE = re.compile(r"^\s*>?\s*-?\s*([A-Za-z][A-Za-z0-9 _'\-]*?)\s*:\s*(\S.*?)\s*$")


class _Scan(Enum):
    SEEKING = "seeking"
    IN_SECTION = "in_section"


@dataclass(frozen=True)
class Entry:
    name: str
    raw: str
    line: int


def is_header(line: str, header: str) -> bool:
    return re.match(r"^\s*>?\s*" + re.escape(header) + r"\s*:\s*$", line, re.IGNORECASE) is not None


def parse_entry(line: str) -> tuple[str, str] | None:
    m = _ENTRY_RE.match(line)
    if m is None:
        return None
    return m.group(1).strip(), m.group(2)


def read_section(text: str, header: str) -> list[Entry]:
    entries: list[Entry] = []
    state = _Scan.SEEKING
    for index, line in enumerate((text or "").splitlines()):
        if state is _Scan.SEEKING:
            if is_header(line, header):
                state = _Scan.IN_SECTION
            continue
        if not line.strip():
            continue
        parsed = parse_entry(line)
        if parsed is None:
            break
        entries.append(Entry(name=parsed[0], raw=parsed[1], line=index))
    return entries


def collapse_blank_lines(text: str, keep: int = 2) -> str:
    out: list[str] = []
    blanks = 0
    for line in text.splitlines():
        if line.strip():
            blanks = 0
        else:
            blanks += 1
            if blanks > keep:
                continue
        out.append(line)
    return "\n".join(out)


def strip_section(text: str, header: str, known_names: list[str]) -> str:
    """Remove every header + known-entry block, then tidy blank lines."""
    known = {n.lower() for n in known_names}
    lines = (text or "").splitlines()
    out: list[str] = []
    i = 0
    while i < len(lines):
        if not is_header(lines[i], header):
            out.append(lines[i])
            i += 1
            continue
        i += 1
        while i < len(lines):
            parsed = parse_entry(lines[i])
            if parsed is None or parsed[0].lower() not in known:
                break
            i += 1
    return collapse_blank_lines("\n".join(out)).strip()
