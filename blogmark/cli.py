"""
blogmark - Markdown/HTML blog draft converter

Converts blog drafts between Markdown and HTML, lists their paragraph
blocks, and inserts images after a chosen paragraph.
"""

import argparse
import sys
import os
import logging

from . import __version__
from .converter_api import (
    convert,
    format_for_path,
    load_document,
    plan_insertion,
    save_document,
    segment,
)
from .frontmatter_parser import attribution_hint_from_metadata
from .models import Format, MediaReference
from .exceptions import BlogmarkError

logger = logging.getLogger('blogmark')


def setup_logging(verbose=False, quiet=False):
    """Configure logging based on CLI flags.

    Args:
        verbose: If True, show DEBUG level messages
        quiet: If True, suppress all non-error output
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger = logging.getLogger('blogmark')
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="blogmark",
        description="Convert blog drafts between Markdown and HTML.",
        epilog="Examples:\n"
               "  blogmark draft.md -o draft.html\n"
               "  blogmark draft.html -o draft.md\n"
               "  blogmark draft.md --list-blocks\n"
               "  blogmark draft.md -o draft.md --insert-image https://img.example/a.png --block 2",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("input_file", help="Input document (.md, .markdown, .html, .htm)")
    parser.add_argument("-o", "--output", default=None,
                        help="Output file; its extension selects the target format")
    parser.add_argument("-t", "--to", choices=[fmt.value for fmt in Format], default=None,
                        help="Target format (default: inferred from --output)")
    parser.add_argument("--hint", default=None,
                        help="Image attribution hint (default: front matter keyword or title)")
    parser.add_argument("--list-blocks", action="store_true", default=False,
                        help="Print the paragraph blocks of the resulting document")
    parser.add_argument("--insert-image", metavar="ADDRESS", default=None,
                        help="Image address to insert before converting")
    parser.add_argument("--block", type=int, default=None,
                        help="0-based paragraph block that receives --insert-image")
    parser.add_argument("--alt", default=None,
                        help="Alt text for --insert-image (default: the hint, or 'image')")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", default=False,
                        help="Show detailed debug output")
    parser.add_argument("-q", "--quiet", action="store_true", default=False,
                        help="Suppress all non-error output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not args.output and not args.list_blocks:
        logger.error("Nothing to do: pass --output and/or --list-blocks")
        sys.exit(1)

    if args.insert_image is not None and args.block is None:
        logger.error("--insert-image requires --block")
        sys.exit(1)

    if not os.path.exists(args.input_file):
        logger.error("Input file not found: %s", args.input_file)
        sys.exit(1)

    try:
        document, metadata = load_document(args.input_file)
        hint = args.hint if args.hint is not None else attribution_hint_from_metadata(metadata)

        if args.insert_image is not None:
            attribution = args.alt if args.alt is not None else (hint or "image")
            media_ref = MediaReference(address=args.insert_image, attribution=attribution)
            document = plan_insertion(segment(document), args.block, media_ref, document.format)
            logger.info("Inserted image after block %d", args.block)

        target = args.to
        if target is None:
            target = format_for_path(args.output) if args.output else document.format
        document = convert(document, target, hint)

        if args.output:
            save_document(document, args.output, metadata)
            logger.info("Successfully wrote %s", args.output)

        if args.list_blocks:
            for block in segment(document):
                print(f"{block.index}: {block.label}")

    except BlogmarkError as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
