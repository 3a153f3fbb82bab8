"""Text of the help screen."""

from __future__ import annotations

from typing import List, Tuple

_RULE_WIDTH = 78
_KEY_WIDTH = 18
_DESCRIPTION_WIDTH = 37

# (command, label, key, description) pairs on the first two rows.
_BASIC_ROWS: Tuple[Tuple[str, str, str, str], ...] = (
    ("|:q|", "Quit", "|<ESC>|", "Switch to normal mode / Close this window"),
    ("|:h|", "Help", "|:|", "Switch to command mode"),
)

_MOTIONS: Tuple[Tuple[str, str], ...] = (
    ("h / j / k / l", "Move left / down / up / right"),
    ("y / p", "Move left / right faster"),
    ("w / b", "Beginning of the next / last exon"),
    ("W / B", "Begining of the next / last gene"),
    ("e / ge", "End of the next / last exon"),
    ("E / gE", "End of the next / last gene"),
    ("z / o", "Zoom in / out"),
)

_REPEAT_EXAMPLES: Tuple[str, ...] = (
    "5h: Move right by 5 bases",
    "11B: Move left by 11 genes",
    "16o: Zoom out by 16x",
)

_JUMPS: Tuple[Tuple[str, str, str], ...] = (
    (":_pos_", "Go to position on same contig.", ":1000"),
    (":_contig_:_pos_", "Go to position on a contig.", "17:7572659"),
    (":_gene_", "Go to _gene_", ":KRAS"),
)


def _keyed(key: str, text: str) -> str:
    return f" |{key}|".ljust(_KEY_WIDTH + 1) + text


def _build_lines(version: str) -> List[str]:
    lines = [
        "",
        f" Terminal Genome Viewer - version {version}",
        " " + "-" * _RULE_WIDTH,
        " ",
    ]
    lines.extend(
        f" {cmd.ljust(8)}{label.ljust(15)}{key.ljust(12)}{text}"
        for cmd, label, key, text in _BASIC_ROWS
    )
    lines.append(" ")
    lines.extend(_keyed(key, text) for key, text in _MOTIONS)
    lines.append(" ")
    lines.append(_keyed("<num><key>", "Repeat movements. Examples:"))
    lines.extend(f"     - {example}" for example in _REPEAT_EXAMPLES)
    lines.append(" ")
    lines.extend(
        _keyed(key, text.ljust(_DESCRIPTION_WIDTH) + f"Example: {example}")
        for key, text, example in _JUMPS
    )
    lines.append(" ")
    return lines


def help_text(version: str) -> str:
    """The full help screen for the given program version."""
    return "\n".join(_build_lines(version))


def help_lines(version: str) -> List[str]:
    """The help screen split into lines, as drawn."""
    return help_text(version).splitlines()