# src/glossary_kit/cli.py

import argparse
import asyncio
import logging
from dataclasses import replace
from pathlib import Path

from glossary_kit.config import GlossaryConfig, load_profile
from glossary_kit.errors import OutputWriteError
from glossary_kit.pipeline import GlossaryPipeline, discover_pdfs
from glossary_kit.reports import render_report, write_report

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glossary-kit",
        description="Collect abbreviation sections from a folder of PDFs",
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=None,
        help="Directory containing PDF files (default: ./pdfs)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Markdown report path (default: ./abbreviations.md)",
    )
    parser.add_argument(
        "--mode",
        choices=["grouped", "unified"],
        default=None,
        help="Report layout (default: grouped)",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="YAML file overriding section headers and next-section markers",
    )
    parser.add_argument(
        "--max-concurrency",
        type=_positive_int,
        default=None,
        help="Documents processed in parallel (default: 4)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> GlossaryConfig:
    config = GlossaryConfig()
    if args.profile is not None:
        config = config.with_profile(load_profile(args.profile))

    # explicit flags win over the profile
    overrides = {
        "input_dir": args.input_dir,
        "output_file": args.output,
        "mode": args.mode,
        "max_concurrency": args.max_concurrency,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def run(config: GlossaryConfig) -> int:
    if not config.input_dir.exists():
        config.input_dir.mkdir(parents=True)
        logger.info(
            "Created input directory %s. Add PDF files to it and run again.",
            config.input_dir,
        )
        return 0

    if not config.input_dir.is_dir():
        logger.error("Input path %s is not a directory", config.input_dir)
        return 1

    paths = discover_pdfs(config.input_dir)
    logger.info("Found %d PDF files in %s", len(paths), config.input_dir)

    pipeline = GlossaryPipeline(
        headers=config.headers,
        next_markers=config.next_markers,
    )
    report = asyncio.run(
        pipeline.aprocess_batch(paths, max_concurrency=config.max_concurrency)
    )

    content = render_report(report.documents, config.mode)
    try:
        write_report(config.output_file, content)
    except OutputWriteError:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(resolve_config(args))


if __name__ == "__main__":
    raise SystemExit(main())
