"""Command-line parsing and validated start-up settings."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union
from urllib.parse import urlparse


class CliError(Exception):
    """Raised when the command line cannot be turned into settings."""


class Reference(Enum):
    """Supported reference genomes."""

    HG38 = "hg38"
    HG19 = "hg19"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GoToDefault:
    """Start at a default location."""


@dataclass(frozen=True)
class GotoContigCoordinate:
    """Start at a position on a named contig."""

    contig: str
    position: int


@dataclass(frozen=True)
class GoToGene:
    """Start at a gene, looked up by name."""

    name: str


StateMessage = Union[GoToDefault, GotoContigCoordinate, GoToGene]


@dataclass
class Settings:
    """Validated settings the viewer starts with."""

    bam_path: Optional[str] = None
    bai_path: Optional[str] = None
    reference: Optional[Reference] = None
    initial_state_messages: List[StateMessage] = field(default_factory=list)
    test_mode: bool = False
    debug: bool = False


_UNSIGNED = re.compile(r"\+?[0-9]+")


def _is_url(path: str) -> bool:
    parsed = urlparse(path)
    return bool(parsed.scheme) and bool(parsed.netloc)


def parse_reference(name: str) -> Reference:
    """Look up a reference genome by its name."""
    try:
        return Reference(name)
    except ValueError:
        raise CliError(f"Unsupported reference: {name}") from None


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the viewer's command line."""
    parser = argparse.ArgumentParser(
        prog="tgview", description="Explore genomes in the terminal."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATHS",
        help="BAM file path. Must be sorted and indexed. "
        "If not provided, only the reference genome is displayed.",
    )
    parser.add_argument(
        "-i",
        "--index",
        default="",
        metavar="PATH",
        help="Index file path. Defaults to the .bai next to the BAM file.",
    )
    parser.add_argument(
        "-r",
        "--region",
        default="",
        help="Starting region: [chr]:[pos] (e.g. 12:25398142) or a gene (e.g. TP53).",
    )
    parser.add_argument(
        "-g",
        "--reference",
        default=Reference.HG38.value,
        help="Reference genome: hg38 or hg19.",
    )
    parser.add_argument(
        "--no-reference",
        action="store_true",
        help="Do not display the reference genome. Requires a BAM file.",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Display debug messages in the terminal."
    )
    return parser


def parse_cli(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    """Parse command-line arguments (without the program name)."""
    return build_parser().parse_args(argv)


def translate_region(region: str) -> List[StateMessage]:
    """Interpret a region string as the messages to start with."""
    region = region.strip()

    if not region:
        return [GoToDefault()]

    parts = region.split(":")
    if len(parts) > 2:
        raise CliError(f"Cannot interpret the region: {region}")

    if len(parts) == 2:
        contig, position = parts
        if not _UNSIGNED.fullmatch(position):
            raise CliError(f"Invalid genome region: {region}")
        return [GotoContigCoordinate(contig, int(position))]

    return [GoToGene(region)]


def settings_from_cli(cli: argparse.Namespace, test_mode: bool) -> Settings:
    """Validate parsed arguments and build the start-up settings."""
    bam_path: Optional[str] = None
    for path in cli.paths:
        if path.endswith(".bam") or _is_url(path):
            bam_path = path
        else:
            raise CliError(f"Unsupported file type: {path}")

    bai_path = cli.index or None

    reference = None if cli.no_reference else parse_reference(cli.reference)

    messages = translate_region(cli.region)

    if reference is None:
        for message in messages:
            if isinstance(message, GoToGene):
                raise CliError(
                    f"The initial region cannot not be a gene name {message.name} "
                    "when no reference is provided. "
                )

    if bam_path is None and any(
        isinstance(message, GotoContigCoordinate) for message in messages
    ):
        raise CliError("Bam file is required to go to a contig coordinate")

    if bam_path is None and reference is None:
        raise CliError("Bam file and reference cannot both be none")

    return Settings(
        bam_path=bam_path,
        bai_path=bai_path,
        reference=reference,
        initial_state_messages=messages,
        test_mode=test_mode,
        debug=cli.debug,
    )