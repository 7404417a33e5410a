"""
csharp.py

Does:
    Emit a C# static class (Unity ``Color`` flavored) with one declaration per
    survey color and an optional name → color dictionary with GetColor /
    TryGetColor accessors.
Returns:
    RenderOptions (validated settings) and render_csharp() → source text.

Notes:
- ``legacy_syntax`` only swaps token strings (readonly fields, collection
  initializers, block bodies); values and order are identical in both flavors.
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Iterable, List, Mapping

from color_survey_codegen.color import ColorTable, NamedColor
from color_survey_codegen.utils import debug

__all__ = ["RenderOptions", "render_csharp", "format_channel", "reserved_identifiers"]

log = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────────────────────
SIGNIFICANT_DIGITS = 7  # single-precision float resolution
MAP_FIELD = "stringToColour"
GET_METHOD = "GetColor"
TRY_GET_METHOD = "TryGetColor"


# ── Options ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class RenderOptions:
    legacy_syntax: bool = False
    generate_map: bool = True
    namespace: str = "XKCD"
    class_name: str = "XKCDColours"
    color_type: str = "Color"
    description: str = "A formatted XKCD survey colour"
    indent: str = "    "

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], **overrides: Any) -> RenderOptions:
        """
        Does: Validate a settings mapping (unknown keys and wrong types are errors);
              keyword overrides that are not None win over the mapping.
        Raises: ValueError / TypeError on bad settings.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ValueError(f"Unknown render option(s): {', '.join(unknown)}")

        merged = dict(data)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        defaults = asdict(cls())
        for key, value in merged.items():
            expected = type(defaults[key])
            if not isinstance(value, expected):
                raise TypeError(
                    f"Option '{key}' expects {expected.__name__}, got {type(value).__name__}"
                )
        return cls(**merged)


def reserved_identifiers(options: RenderOptions | None = None) -> frozenset[str]:
    """Does: Member names the generated class already owns; colors must not reuse them."""
    opts = options or RenderOptions()
    return frozenset({opts.class_name, MAP_FIELD, GET_METHOD, TRY_GET_METHOD})


# ── Helpers (private) ────────────────────────────────────────────────────────
def format_channel(value: float) -> str:
    """Shortest decimal for a channel at float precision ('1', '0', '0.6745098')."""
    return format(value, f".{SIGNIFICANT_DIGITS}g")


def _rgb_comment(color: NamedColor) -> str:
    return f"({', '.join(format_channel(c) for c in color.rgb)})"


def _rgb_args(color: NamedColor) -> str:
    return f"({', '.join(format_channel(c) + 'f' for c in color.rgb)})"


def _summary(lines: List[str], ident: str, *text: str) -> None:
    lines.append(f"{ident}/// <summary>")
    lines.extend(f"{ident}/// {t}" for t in text)
    lines.append(f"{ident}/// </summary>")


def _declaration(color: NamedColor, opts: RenderOptions) -> str:
    ctor = f"new {opts.color_type}{_rgb_args(color)}"
    if opts.legacy_syntax:
        return f"public static readonly {opts.color_type} {color.name} = {ctor};"
    return f"public static {opts.color_type} {color.name} {{ get; }} = {ctor};"


def _map_entry(color: NamedColor, opts: RenderOptions) -> str:
    if opts.legacy_syntax:
        return f'{{ "{color.name}", {color.name} }}'
    return f'["{color.name}"] = {color.name}'


def _render_colors(lines: List[str], colors: List[NamedColor], opts: RenderOptions, ident: str) -> None:
    lines.append(f"{ident}#region Colours")
    for i, color in enumerate(colors):
        debug(f"Creating variable for colour {color.name}", topic="render")
        _summary(lines, ident, f"{opts.description} {_rgb_comment(color)}")
        lines.append(ident + _declaration(color, opts))
        if i < len(colors) - 1:
            lines.append("")
    lines.append(f"{ident}#endregion")


def _render_map(lines: List[str], colors: List[NamedColor], opts: RenderOptions, ident: str) -> None:
    entry_ident = ident + opts.indent
    ct = opts.color_type
    dict_type = f"Dictionary<string, {ct}>"

    lines.append("")
    lines.append(f"{ident}#region Map")
    _summary(lines, ident, "A name to colour parsing dictionary")
    lines.append(f"{ident}private static readonly {dict_type} {MAP_FIELD} = new {dict_type}({len(colors)})")
    lines.append(f"{ident}{{")
    for i, color in enumerate(colors):
        debug(f"Generating dictionary entry for colour {color.name}", topic="render")
        sep = "," if i < len(colors) - 1 else ""
        lines.append(f"{entry_ident}{_map_entry(color, opts)}{sep}")
    lines.append(f"{ident}}};")
    lines.append("")

    _summary(lines, ident, "Gets an XKCDColour from it's name")
    lines.append(f'{ident}/// <param name="name">Name of the colour to get</param>')
    lines.append(f"{ident}/// <returns>The found colour of the given name</returns>")
    get_body = (
        f"{{ return {MAP_FIELD}[name]; }}" if opts.legacy_syntax else f"=> {MAP_FIELD}[name];"
    )
    lines.append(f"{ident}public static {ct} {GET_METHOD}(string name) {get_body}")
    lines.append("")

    _summary(lines, ident, "Tries and gets an XKCDColour from it's name, and stores it in the out parameter")
    lines.append(f'{ident}/// <param name="name">Name of the colour to get</param>')
    lines.append(f'{ident}/// <param name="colour">Color to store the result in</param>')
    lines.append(f"{ident}/// <returns>True if the colour of the given name was found, false otherwise</returns>")
    try_body = (
        f"{{ return {MAP_FIELD}.TryGetValue(name, out colour); }}"
        if opts.legacy_syntax
        else f"=> {MAP_FIELD}.TryGetValue(name, out colour);"
    )
    lines.append(f"{ident}public static bool {TRY_GET_METHOD}(string name, out {ct} colour) {try_body}")
    lines.append(f"{ident}#endregion")


# ── Core API (public) ────────────────────────────────────────────────────────
def render_csharp(colors: Iterable[NamedColor] | ColorTable, options: RenderOptions | None = None) -> str:
    """
    Does:
        Render the colors, in the given order, as one C# source file.
    Returns:
        Source text terminated by a newline.
    """
    opts = options or RenderOptions()
    ordered = list(colors)
    class_ident = opts.indent
    member_ident = opts.indent * 2

    lines: List[str] = ["using UnityEngine;"]
    if opts.generate_map:
        lines.append("using System.Collections.Generic;")
    lines.append("")
    lines.append(f"namespace {opts.namespace}")
    lines.append("{")
    lines.append(f"{class_ident}public static class {opts.class_name}")
    lines.append(f"{class_ident}{{")

    _render_colors(lines, ordered, opts, member_ident)
    if opts.generate_map:
        _render_map(lines, ordered, opts, member_ident)

    lines.append(f"{class_ident}}}")
    lines.append("}")

    log.debug(
        "Rendered %d colours (legacy=%s, map=%s)", len(ordered), opts.legacy_syntax, opts.generate_map
    )
    return "\n".join(lines) + "\n"
