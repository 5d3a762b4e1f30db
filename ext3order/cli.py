"""CLI entrypoints for ext3order commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .collector import FileCollector
from .config import ConfigError, OrderConfig, load_config
from .driver import OrderingResult, Sequencer
from .errors import OrderingError
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding the sources (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to .ext3order.yml (defaults to the one in the source directory).",
    )
    parser.add_argument(
        "--base-dir",
        default=None,
        help="Directory #dependsFile paths are resolved against (defaults to cwd).",
    )
    parser.add_argument(
        "--namespace",
        dest="namespaces",
        action="append",
        default=None,
        help="Base expression for .extend/.define calls (repeatable, default: Ext).",
    )
    parser.add_argument(
        "--extractor",
        dest="extractors",
        action="append",
        default=None,
        help="Only run the named extractor (repeatable).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ext3order",
        description="Order JavaScript sources so base classes load before their subclasses.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    order_parser = subparsers.add_parser(
        "order",
        help="Print the files in dependency-first order or concatenate them.",
    )
    _add_verbose_option(order_parser, suppress_default=True)
    _add_source_options(order_parser)
    order_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Concatenate the ordered files into this file instead of listing them.",
    )

    classes_parser = subparsers.add_parser(
        "classes",
        help="List discovered classes with their defining file and dependencies.",
    )
    _add_verbose_option(classes_parser, suppress_default=True)
    _add_source_options(classes_parser)

    return parser


def _effective_config(args: argparse.Namespace, root: Path) -> OrderConfig:
    config = load_config(Path(args.config) if args.config else root)
    if args.base_dir:
        config.base_dir = Path(args.base_dir).expanduser().resolve()
    if args.namespaces:
        config.namespaces = list(args.namespaces)
    if args.extractors:
        config.extractors.enabled = list(args.extractors)
    return config


def _run(config: OrderConfig, root: Path) -> OrderingResult:
    collector = FileCollector(include=config.include, exclude=config.exclude_paths)
    files = collector.collect(root)
    return Sequencer.from_config(config).run(files)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint for ext3order commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    root = Path(args.path).expanduser().resolve()
    try:
        config = _effective_config(args, root)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(verbose=bool(args.verbose) or config.verbose)

    try:
        result = _run(config, root)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (OrderingError, ValueError) as exc:
        parser.exit(1, f"ext3order {args.command} failed: {exc}\n")

    if args.command == "order":
        if args.output:
            output = Path(args.output).expanduser()
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text("\n".join(file.text for file in result.files), encoding="utf-8")
            print(f"Wrote {len(result.files)} files to {_relativize(output.resolve())}")
        else:
            for identity in result.order:
                print(_relativize(Path(identity)))
    elif args.command == "classes":
        for class_name, file, dependencies in result.symbols.items():
            line = f"{class_name}\t{_relativize(Path(file))}"
            if dependencies:
                line += "\t<- " + ", ".join(dependencies)
            print(line)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
