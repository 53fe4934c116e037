"""
Command line entry point.

Usage:
    template-analyzer resume.png
    template-analyzer template.pdf --output analysis.json --css theme.css
    template-analyzer scan.jpg --debug-image scan_debug.png --log-level DEBUG
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analyzer import TemplateAnalyzer, guess_mime_type, supported_mime_types
from .config import load_config
from .exceptions import TemplateAnalysisError
from .generators import StyleGenerator
from .visualizers import AnalysisAnnotator

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """
    Setup logging configuration.

    Args:
        level: Logging level name
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="template-analyzer",
        description="Infer colors, layout and fonts from a resume template image or PDF."
    )
    parser.add_argument("template", help="Path to a PNG, JPEG or PDF template")
    parser.add_argument("--mime-type", help="Override the MIME type guessed from the extension "
                        f"({', '.join(supported_mime_types())})")
    parser.add_argument("--config", help="YAML file with analyzer thresholds")
    parser.add_argument("--output", "-o", help="Write the analysis JSON here instead of stdout")
    parser.add_argument("--css", help="Write the derived style theme as CSS to this file")
    parser.add_argument("--debug-image", help="Write an annotated page image to this file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


async def run(args: argparse.Namespace) -> dict:
    """Analyze the template named by the parsed arguments and write outputs."""
    config = load_config(args.config)
    path = Path(args.template)

    if not path.exists():
        raise FileNotFoundError(f"Template not found: {path}")

    size = path.stat().st_size
    if size > config.max_input_bytes:
        raise TemplateAnalysisError(
            f"{path.name} is {size} bytes, larger than the {config.max_input_bytes} byte limit"
        )

    analyzer = TemplateAnalyzer(config)
    mime_type = analyzer.check_mime_type(args.mime_type or guess_mime_type(path))
    data = path.read_bytes()

    session = await asyncio.to_thread(analyzer.open_session, data, mime_type)
    result = analyzer.analyze_session(session)

    output = result.to_dict()
    theme = StyleGenerator().generate(result)
    output["theme"] = theme.to_dict()

    if args.css:
        Path(args.css).write_text(theme.to_css(), encoding="utf-8")
        logger.info("Theme CSS saved: %s", args.css)

    if args.debug_image:
        annotator = AnalysisAnnotator()
        annotator.save(annotator.annotate(session.buffer, result), args.debug_image)

    text = json.dumps(output, indent=2)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info("Analysis saved: %s", args.output)
    else:
        print(text)

    return output


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        asyncio.run(run(args))
    except (TemplateAnalysisError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
