#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Script to refresh the dictionary from the text map source
- wipes dictionary_items
- downloads every language concurrently and bulk inserts it
- removes duplicated vocabulary groups

Usage:
    python scripts/update_dictionary.py                 # all languages
    python scripts/update_dictionary.py --languages en fr
    python scripts/update_dictionary.py --dedup-only    # only remove duplicates
"""
import argparse
import asyncio
import logging
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from src.config import settings
from src.constants.languages import parse_language
from src.database import engine
from src.dictionary.deduplication import delete_duplicate_items
from src.dictionary.dependencies import get_dictionary_store, get_ingestion_service
from src.dictionary.exceptions import DictionaryException
from src.utils.logging import configure_logging

logger = logging.getLogger("update_dictionary")


async def run(languages, dedup_only: bool) -> int:
    """Run the refresh; returns the process exit code"""
    try:
        if dedup_only:
            deleted = await delete_duplicate_items(get_dictionary_store())
            logger.info(f"✅ De-duplication completed, {deleted} rows deleted")
            return 0

        async with get_ingestion_service() as ingestion:
            count = await ingestion.refresh(languages)
        logger.info(f"✅ Refresh completed, {count} rows inserted")
        return 0
    except DictionaryException as e:
        logger.error(f"❌ Refresh failed: {e.detail}")
        return 1
    finally:
        await engine.dispose()


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description="Refresh the multilingual dictionary")
    parser.add_argument(
        "--languages",
        nargs="+",
        metavar="CODE",
        help="Language codes to load (default: every language in the catalog)",
    )
    parser.add_argument(
        "--dedup-only",
        action="store_true",
        help="Skip downloading, only delete duplicated vocabulary groups",
    )
    args = parser.parse_args()

    load_dotenv()
    configure_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

    try:
        languages = [parse_language(code) for code in args.languages] if args.languages else None
    except DictionaryException as e:
        parser.error(e.detail)

    logger.info("🚀 Start updating...")
    return asyncio.run(run(languages, args.dedup_only))


if __name__ == "__main__":
    sys.exit(main())
