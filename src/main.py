# data.gov Crawler - Entry point
# v1.0 - Search data.gov and collect every dataset result across all pages
#   - Browser layer: browser/ (Playwright launch + teardown)
#   - Site layer: sites/ (open home page, run search)
#   - Crawler layer: crawlers/ (pagination + extraction)
#
# Output: JSON list of {organization, dataSetName, dataFormats} on stdout.
# Logs and errors go to stderr and logs/crawler_YYYYMMDD.log.

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from datetime import datetime

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.browser import BrowserSession
from src.sites import DataGovSite
from src.crawlers.datagov import DatasetSearchCrawler, DatasetRecord
from src.config import LOG_DIR, SEARCH_QUERY

logger = logging.getLogger(__name__)


def setup_logging(log_dir: str = LOG_DIR) -> None:
    """Log to a dated file and to stderr, keeping stdout for results."""
    log_file = Path(log_dir) / f"crawler_{datetime.now().strftime('%Y%m%d')}.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stderr)
        ]
    )


async def run(
    session: Optional[BrowserSession] = None,
    stats: Optional[Dict[str, Any]] = None
) -> List[DatasetRecord]:
    """
    Launch the browser, search data.gov and crawl every results page.

    Args:
        session: Browser session to use (a new BrowserSession by default)
        stats: Optional dict that receives "total_pages" once the crawl finishes

    Returns:
        All extracted records, page 1 first

    Raises:
        Exception: Anything raised while launching, navigating, typing or
            extracting. The browser is closed either way.
    """
    session = session or BrowserSession()

    try:
        page = await session.launch()

        site = DataGovSite(page)
        await site.open()
        await site.search(SEARCH_QUERY)

        crawler = DatasetSearchCrawler(page)
        records = await crawler.crawl()

        if stats is not None:
            stats["total_pages"] = crawler.pages_scraped
        return records

    finally:
        logger.info("Closing browser...")
        await session.close()


async def main(session: Optional[BrowserSession] = None) -> Optional[List[DatasetRecord]]:
    """
    Main entry point - runs the crawl and prints the result set.

    On success the records are printed to stdout as JSON. On failure the
    error is logged and printed to stderr and nothing goes to stdout.
    """
    logger.info("=" * 80)
    logger.info("data.gov Dataset Search Crawler")
    logger.info("=" * 80)

    results = {
        "query": SEARCH_QUERY,
        "success": False,
        "total_pages": 0,
        "total_records": 0,
        "error": None,
        "start_time": datetime.now().isoformat()
    }
    records = None

    try:
        records = await run(session, stats=results)
        results["success"] = True
        results["total_records"] = len(records)

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        results["error"] = str(e)

    finally:
        results["end_time"] = datetime.now().isoformat()
        print_summary(results)

    if records is not None:
        print(json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False))

    return records


def print_summary(results: Dict[str, Any]) -> None:
    """Log crawl summary."""
    logger.info("")
    logger.info("=" * 80)
    logger.info("CRAWL SUMMARY")
    logger.info("=" * 80)
    logger.info(f"Query: {results['query']}")
    logger.info(f"Status: {'SUCCESS' if results['success'] else 'FAILED'}")
    logger.info(f"Pages scraped: {results['total_pages']}")
    logger.info(f"Total records: {results['total_records']}")
    logger.info(f"Started: {results['start_time']}  Finished: {results.get('end_time', '-')}")

    if results['error']:
        logger.info(f"Error: {results['error']}")

    logger.info("=" * 80)


def cli() -> None:
    """Console script entry point (no arguments)."""
    setup_logging()
    asyncio.run(main())


if __name__ == '__main__':
    cli()
