"""
pipeline.py
===========

Does: Run Parse → Normalize/Dedup → Sort → Render over raw survey lines and
      write the generated source only once everything has been processed.
Used By: CLI, tests.
Returns: GenerationResult (source text, ordered colors, lookup table, parse stats).
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from color_survey_codegen.color import ColorTable, NamedColor, sort_by_hsv
from color_survey_codegen.render import RenderOptions, render_csharp, reserved_identifiers
from color_survey_codegen.survey import ParseStats, builtin_xkcd_lines, parse_lines, read_survey_lines

__all__ = ["GenerationResult", "generate", "generate_file", "write_output"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    source: str
    colors: List[NamedColor]
    table: ColorTable
    stats: ParseStats


# =============================================================================
# 1) IN-MEMORY GENERATION
# =============================================================================

def generate(lines: Iterable[str], options: Optional[RenderOptions] = None) -> GenerationResult:
    """Does: Parse, order and render the survey lines. Never touches the filesystem."""
    started = time.perf_counter()
    parsed = parse_lines(lines, reserved=reserved_identifiers(options))
    logger.info(
        "Detected %d correctly formatted colours, in %.0fms",
        parsed.stats.accepted, (time.perf_counter() - started) * 1000,
    )

    ordered = sort_by_hsv(parsed.colors)
    table = ColorTable(ordered)
    source = render_csharp(table, options)
    logger.info("Generated %d declarations in %.0fms", len(table), (time.perf_counter() - started) * 1000)
    return GenerationResult(source=source, colors=ordered, table=table, stats=parsed.stats)


# =============================================================================
# 2) FILE BOUNDARIES
# =============================================================================

def write_output(text: str, path: str | os.PathLike[str]) -> Path:
    """
    Does: Write `text` to a temporary sibling then atomically replace `path`,
          so a failed run never leaves a partial file behind.
    Returns: Resolved output path.
    """
    target = Path(path).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    logger.info("Saved %s", target)
    return target


def generate_file(
    input_path: str | os.PathLike[str] | None,
    output_path: str | os.PathLike[str] | None,
    options: Optional[RenderOptions] = None,
    *,
    builtin_xkcd: bool = False,
) -> GenerationResult:
    """
    Does: Read the survey (or the bundled XKCD survey), generate, and write the
          result to `output_path` when one is given.
    Raises: InputNotFound before anything is written when the input is unusable.
    """
    lines = builtin_xkcd_lines() if builtin_xkcd else read_survey_lines(input_path)
    result = generate(lines, options)
    if output_path is not None:
        write_output(result.source, output_path)
    return result
