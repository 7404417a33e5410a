# src/color_survey_codegen/cli.py
import argparse
import logging
import sys

from dotenv import find_dotenv, load_dotenv

EXIT_OK = 0
EXIT_BAD_CONFIG = 1
EXIT_MISSING_INPUT = 2
EXIT_USAGE = 64


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-codegen",
        description="Generate C# colour declarations from a color survey file (name + hex per line).",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("path", nargs="?", help="Survey file to parse (e.g. XKCD rgb.txt)")
    parser.add_argument("-o", "--output", help="Output file (default: <class_name>.cs)")
    parser.add_argument("--legacy", dest="legacy_syntax", action="store_const", const=True,
                        help="Use readonly fields instead of get-only properties")
    parser.add_argument("--modern", dest="legacy_syntax", action="store_const", const=False,
                        help="Use get-only properties (default)")
    parser.add_argument("--map", dest="generate_map", action="store_const", const=True,
                        help="Emit the name->colour dictionary and accessors (default)")
    parser.add_argument("--no-map", dest="generate_map", action="store_const", const=False,
                        help="Skip the name->colour dictionary")
    parser.add_argument("--config", help="JSON/JSON5 file with render options")
    source.add_argument("--builtin-xkcd", dest="builtin_xkcd", action="store_true",
                        help="Use the XKCD survey bundled with matplotlib instead of a file")
    parser.add_argument("--stdout", action="store_true", help="Print the source instead of writing a file")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None) -> int:
    """CLI: parse a color survey, sort by descending HSV, and emit C# declarations."""
    from .pipeline import generate_file
    from .render import RenderOptions
    from .survey import InputNotFound
    from .utils import ConfigFileNotFound, ConfigParseError, ConfigTypeError, load_config, reload_topics, resolve_config_path

    # .env from the working directory; debug topics are re-read once it is applied
    load_dotenv(find_dotenv(usecwd=True))
    reload_topics()
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as e:
        # usage errors map to EXIT_USAGE, --help to EXIT_OK
        return EXIT_USAGE if e.code else EXIT_OK
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    def _to_options(settings: dict) -> RenderOptions:
        return RenderOptions.from_mapping(
            settings, legacy_syntax=args.legacy_syntax, generate_map=args.generate_map
        )

    try:
        config_path = resolve_config_path(args.config)
        if config_path:
            options = load_config(config_path, mode="validated_dict", validator=_to_options)
        else:
            options = _to_options({})
    except (ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    output = None if args.stdout else (args.output or f"{options.class_name}.cs")
    try:
        result = generate_file(args.path, output, options, builtin_xkcd=args.builtin_xkcd)
    except InputNotFound as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_MISSING_INPUT

    if args.stdout:
        sys.stdout.write(result.source)
    else:
        stats = result.stats
        print(
            f"🎨 {stats.accepted} colours written to {output} "
            f"({stats.rejected} lines skipped, {stats.renamed} renamed)",
            file=sys.stderr,
        )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
