#!/usr/bin/env python
"""CLI tool for finding suppliers using the supplier discovery service."""

import argparse
import logging
import sys
from supplier_finder.suppliers import find_suppliers, SupplierSearchError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search the web for industrial suppliers")
    parser.add_argument("requirements", nargs="*", help="What you need, e.g. \"plastic prototype parts\"")
    parser.add_argument("--country", dest="country", help="Country to search in")
    parser.add_argument("--certifications", dest="certifications", help="Required certifications, e.g. \"ISO 9001\"")
    parser.add_argument("--max-results", dest="max_results", type=int, help="Number of results (1-20, default 10)")
    return parser


def main(argv=None):
    """Main CLI function."""
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    # Join all positional arguments to form the requirements text
    requirements = " ".join(args.requirements)

    try:
        print(f"🔍 Searching for suppliers: '{requirements or 'industrial supplier'}'")
        print("-" * 50)

        suppliers = find_suppliers(
            requirements,
            country=args.country,
            certifications=args.certifications,
            max_results=args.max_results,
        )

        if not suppliers:
            print("No suppliers found.")
            return

        print(f"Found {len(suppliers)} supplier(s):")
        print()

        for i, supplier in enumerate(suppliers, 1):
            print(f"{i}. {supplier.name}")
            print(f"   URL: {supplier.url}")
            print(f"   Location: {supplier.location}")
            print(f"   Size: {supplier.size_category}")
            print(f"   Tags: {', '.join(supplier.tags)}")
            print(f"   Match: {supplier.match_score}% - {supplier.match_summary}")
            print()

    except SupplierSearchError as e:
        print(f"❌ Search failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n⏸️  Search cancelled")
        sys.exit(0)
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
