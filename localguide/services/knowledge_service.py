"""
Knowledge Loader - category template + table retrieval.

Each category key maps to two files inside the data directory:
- <category>.txt: prompt template with the data and query placeholders
- <category>.csv: semicolon-delimited table, header row defines the columns

Files are read fresh on every request by default, so editing them takes
effect on the next request without a restart. An explicit per-category cache
can be switched on with KNOWLEDGE_CACHE_ENABLED and cleared with
KnowledgeCache.invalidate().
"""

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from starlette.concurrency import run_in_threadpool

from localguide.errors import CategoryNotFoundError
from localguide.services.price_tier import normalize_row_price_tier
from localguide.utils.constants import CSV_DELIMITER

logger = logging.getLogger(__name__)

# Category keys become file names, so path separators and dots are rejected
_CATEGORY_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

KnowledgeRow = Dict[str, str]


@dataclass(frozen=True)
class KnowledgeBundle:
    """Template text and table rows loaded for one category."""
    category: str
    template: str
    rows: List[KnowledgeRow] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)


def is_valid_category_key(category: str) -> bool:
    """Check that a category key is safe to use as a file name stem."""
    return bool(category) and _CATEGORY_KEY_PATTERN.match(category) is not None


def template_path(category: str, data_dir: Path) -> Path:
    return Path(data_dir) / f"{category}.txt"


def table_path(category: str, data_dir: Path) -> Path:
    return Path(data_dir) / f"{category}.csv"


def list_categories(data_dir: Path) -> List[str]:
    """
    List every category that has both a template and a table file.

    Returns:
        Sorted list of category keys (empty if the directory is missing)
    """
    directory = Path(data_dir)
    if not directory.is_dir():
        logger.warning(f"Data directory does not exist: {directory}")
        return []

    categories = []
    for template_file in directory.glob("*.txt"):
        category = template_file.stem
        if is_valid_category_key(category) and table_path(category, directory).is_file():
            categories.append(category)

    return sorted(categories)


def _read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_table(path: Path, price_tier_column: Optional[str]) -> tuple[List[str], List[KnowledgeRow]]:
    """Parse a semicolon-delimited table into ordered row dicts."""
    # utf-8-sig strips the BOM spreadsheet exports prepend to the header
    with path.open(encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle, delimiter=CSV_DELIMITER)
        columns = list(reader.fieldnames or [])
        rows: List[KnowledgeRow] = []
        for raw_row in reader:
            # Short rows yield None values; extra cells land under the None key
            row = {
                column: (value if value is not None else "")
                for column, value in raw_row.items()
                if column is not None
            }
            if price_tier_column and price_tier_column in columns:
                row = normalize_row_price_tier(row, price_tier_column)
            rows.append(row)

    return columns, rows


async def load_knowledge(
    category: str,
    data_dir: Path,
    price_tier_column: Optional[str] = None,
) -> KnowledgeBundle:
    """
    Load the prompt template and knowledge table for a category.

    Both files are read through the threadpool so the event loop keeps
    serving other requests while the disk is busy.

    Args:
        category: Category key (e.g. "food", "sights")
        data_dir: Directory holding <category>.txt and <category>.csv
        price_tier_column: Column normalized with normalize_price_tier, if present

    Returns:
        KnowledgeBundle with the raw template and rows in file order

    Raises:
        CategoryNotFoundError: Invalid key, or either file missing/unreadable
    """
    if not is_valid_category_key(category):
        raise CategoryNotFoundError(category, "invalid category key")

    prompt_file = template_path(category, data_dir)
    csv_file = table_path(category, data_dir)

    try:
        template = await run_in_threadpool(_read_template, prompt_file)
        columns, rows = await run_in_threadpool(_read_table, csv_file, price_tier_column)
    except FileNotFoundError as e:
        raise CategoryNotFoundError(category, f"file not found: {Path(str(e.filename)).name}") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise CategoryNotFoundError(category, f"could not read knowledge files ({e})") from e

    logger.info(f"Read {len(rows)} rows from {csv_file.name}")

    return KnowledgeBundle(category=category, template=template, rows=rows, columns=columns)


class KnowledgeCache:
    """
    Optional in-memory cache of loaded knowledge, keyed by category.

    Not used unless KNOWLEDGE_CACHE_ENABLED is set. Callers get deep-enough
    copies of the rows so one request can never alter another's data.
    """

    def __init__(self) -> None:
        self._bundles: Dict[str, KnowledgeBundle] = {}

    def __contains__(self, category: str) -> bool:
        return category in self._bundles

    async def load(
        self,
        category: str,
        data_dir: Path,
        price_tier_column: Optional[str] = None,
    ) -> KnowledgeBundle:
        bundle = self._bundles.get(category)
        if bundle is None:
            bundle = await load_knowledge(category, data_dir, price_tier_column)
            self._bundles[category] = bundle
        else:
            logger.debug(f"Knowledge cache hit for category '{category}'")

        return KnowledgeBundle(
            category=bundle.category,
            template=bundle.template,
            rows=[dict(row) for row in bundle.rows],
            columns=list(bundle.columns),
        )

    def invalidate(self, category: Optional[str] = None) -> None:
        """Drop one category (or every category when None)."""
        if category is None:
            self._bundles.clear()
            logger.info("Knowledge cache cleared")
        else:
            self._bundles.pop(category, None)
            logger.info(f"Knowledge cache entry dropped for '{category}'")
