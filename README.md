# tgview

Building blocks for a terminal genome viewer: start-up settings read
from a command line, 1-based genome intervals, and the layout logic
that turns reads, coverage, coordinates, cytobands, gene features and
reference bases into positioned, styled text.

The package has no runtime dependencies. Its rendering functions work
out *what* to draw and *where*, as plain Python values; putting those
values on a terminal is left to the caller.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Settings

`tgview.settings` parses the viewer's command-line options and checks
that the combination makes sense.

```python
from tgview.settings import parse_cli, settings_from_cli

cli = parse_cli(["input.bam", "-r", "chr1:12345"])
settings = settings_from_cli(cli, False)

settings.bam_path                 # "input.bam"
settings.bai_path                 # None
settings.reference                # Reference.HG38, the default
settings.initial_state_messages   # [GotoContigCoordinate(contig="chr1", position=12345)]
```

`build_parser()` returns the `argparse.ArgumentParser` behind
`parse_cli`. It knows these options:

| Option | Meaning |
| --- | --- |
| `PATHS` | BAM file: a path ending in `.bam`, or a URL. |
| `-i`, `--index PATH` | Index file; when empty, `bai_path` is `None`. |
| `-r`, `--region REGION` | Starting region: `contig:position` (e.g. `12:25398142`) or a gene name (e.g. `TP53`). |
| `-g`, `--reference NAME` | Reference genome: `hg38` (default) or `hg19`. |
| `--no-reference` | Use no reference genome. |
| `--debug` | Sets `Settings.debug`. |

`settings_from_cli` raises `CliError` for an unsupported file type, an
unknown reference, an unreadable region, a gene region with
`--no-reference`, a `contig:position` region without a BAM file, or
neither a BAM file nor a reference.

`translate_region` interprets a region string by itself: an empty
string gives `[GoToDefault()]`, `contig:position` gives
`[GotoContigCoordinate(contig, position)]`, anything else gives
`[GoToGene(name)]`. More than one `:` or a non-numeric position raises
`CliError`. `parse_reference("hg19")` returns `Reference.HG19`.

## Intervals

`tgview.interval.GenomeInterval` is a mixin for classes that provide
`contig`, `start` and `end` (1-based, inclusive). It adds `length()`,
`covers(position)`, `overlaps(other)`, `contains(other)`,
`is_properly_bounded(end)` and `middle()` (rounding up).

## Rendering helpers

Everything below lives in `tgview.rendering`.

- `colors` – `Color` and `Style` (with `fg` and `bg` returning new
  styles), and the palette constants the other modules use.
- `coverage` – `round_up_max_coverage`, `linear_space` and
  `binned_coverage`. `binned_coverage` takes any object with
  `coverage_at(position)` and `mean_basewise_coverage_in(left, right)`.
  Invalid bounds or bin counts raise `ValueError`.
- `alignment` – `CigarOp`, `consumes_reference`, `consumes_query`,
  `cigar_style`, `segment_string` and `cigar_segments`, which turns a
  read's CIGAR and sequence into `(start, end, style)` reference spans,
  with soft-clipped bases coloured one by one.
- `coordinate` – ruler markers: `intermarker_distance`,
  `abbreviated_coordinate_text` and `thousand_separated`.
- `cytoband` – `Stain`, `CytobandSegment`, `total_length_text`,
  `linear_scale`, `segment_style`, `segment_placement` and
  `cytoband_placements`.
- `console` – `console_cells`: the `:` prompt, the typed input and the
  highlighted cursor, clipped to a width.
- `error` – `visible_errors`: the most recent messages that fit.
- `track` – `Strand`, `FeatureType`, `gene_segment` and
  `feature_segment`: glyphs and styles of genes, exons and introns.
- `sequence` – `base_color`, `sequence_cells` and `sequence_cells_2x`
  (two bases per cell as a half block).
- `help` – `help_text` and `help_lines`: the key-binding help screen
  for a given version string.

```python
from tgview.rendering.coverage import round_up_max_coverage, linear_space
from tgview.rendering.coordinate import thousand_separated
from tgview.rendering.cytoband import total_length_text

round_up_max_coverage(101)      # 110
linear_space(5, 10, 2)          # [(5, 7), (8, 10)]
thousand_separated(1234567)     # "1,234,567"
total_length_text(248_956_422)  # "248Mb"
```

## What this package does not do

- It installs no command and has no interactive screen: there is no
  key handling, no viewer state and no drawing to a terminal.
- It does not read BAM or index files, fetch reference sequence, or
  look up genes or cytobands; the data the rendering helpers work on
  must come from the caller.