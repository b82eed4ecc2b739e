"""Command-line interface for mdlinks segmentation and catalog management."""

import argparse
import sys
from pathlib import Path

from mdlinks.catalog.loader import load_catalog, CatalogLoadError
from mdlinks.core.util import safe_json
from mdlinks.runtime.content import HelpContentResolver
from mdlinks.segmenters.links import LinkSegmenter, links, segment


def segment_command(args):
    """Segment a text argument and print the segments as JSON."""
    segmenter = LinkSegmenter(parse_links=not args.no_links)
    print(safe_json(segmenter.segment(args.text)))
    return 0


def translate_command(args):
    """Resolve a catalog key and print its segments as JSON."""
    try:
        catalog = load_catalog(Path(args.catalog_file))
        resolver = HelpContentResolver(translator=catalog, parse_links=not args.no_links)
        print(safe_json(resolver.resolve(args.key, args.locale)))
        return 0

    except CatalogLoadError as e:
        print(f"❌ Catalog loading failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        return 1


def validate_catalog_command(args):
    """Validate a translation catalog file."""
    try:
        catalog_path = Path(args.catalog_file)
        if not catalog_path.exists():
            print(f"Error: Catalog file not found: {catalog_path}")
            return 1

        print(f"Validating catalog: {catalog_path}")
        catalog = load_catalog(catalog_path)

        print("✅ Catalog validation successful!")
        print(f"   Version: {catalog.version}")
        print(f"   Locale: {catalog.locale} (fallback: {catalog.fallback_locale or 'none'})")
        print(f"   Locales: {len(catalog.messages)}")

        if args.verbose:
            print("\nLocales:")
            for locale, entries in catalog.messages.items():
                link_count = sum(len(links(segment(text))) for text in entries.values())
                print(f"   {locale}: {len(entries)} messages, {link_count} links")

        return 0

    except CatalogLoadError as e:
        print(f"❌ Catalog validation failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        return 1


def info_command(args):
    """Display mdlinks version and system information."""
    print("mdlinks CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("mdlinks")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdlinks",
        description="Markdown link segmentation and translation catalog CLI"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Split text into text and link segments"
    )
    segment_parser.add_argument(
        "text",
        help="Text containing [text](href) links"
    )
    segment_parser.add_argument(
        "--no-links",
        action="store_true",
        help="Keep the text as a single text segment"
    )

    # Translate command
    translate_parser = subparsers.add_parser(
        "translate",
        help="Resolve a catalog key and segment the translated text"
    )
    translate_parser.add_argument(
        "catalog_file",
        help="Path to the catalog YAML file"
    )
    translate_parser.add_argument(
        "key",
        help="Message key to resolve"
    )
    translate_parser.add_argument(
        "-l", "--locale",
        help="Locale to use instead of the catalog's active locale"
    )
    translate_parser.add_argument(
        "--no-links",
        action="store_true",
        help="Keep the translated text as a single text segment"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a translation catalog file"
    )
    validate_parser.add_argument(
        "catalog_file",
        help="Path to the catalog YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per-locale message and link counts"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "segment":
        return segment_command(args)
    elif args.command == "translate":
        return translate_command(args)
    elif args.command == "validate":
        return validate_catalog_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
