"""Bulk import of transactions from a CSV file.

The file is read in bounded chunks with pandas. Every accepted row is kept in an
``ImportBatch`` until the reader is exhausted; only then are categories resolved
and the transactions written in one batch. The source file is removed after a
successful import.

Expected layout: a header line (skipped), then rows of
``title,type,value,category``.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from finance_tracker.core.db import Transaction
from finance_tracker.core.errors import CSVParseError
from finance_tracker.core.models import TransactionCreate
from finance_tracker.core.store import BaseStore
from finance_tracker.core.utils import get_logger
from finance_tracker.services.categories import CategoryResolver
from finance_tracker.services.transactions import TransactionWriter

logger = get_logger("finance-tracker.import")

CSV_COLUMNS = ("title", "type", "value", "category")
DEFAULT_CHUNK_SIZE = 500
HEADER_LINES = 1


@dataclass(frozen=True)
class ParsedRow:
    """One trimmed CSV row, still as raw text.

    ``number`` counts data rows from 1, ignoring the header and blank lines.
    """

    title: str
    type: str
    value: str
    category: str
    number: int = 0

    def is_complete(self) -> bool:
        return bool(self.title and self.type and self.value)

    def to_request(self) -> TransactionCreate:
        return TransactionCreate(title=self.title, type=self.type, value=self.value, category=self.category)


@dataclass
class ImportBatch:
    """Rows accumulated from one CSV file."""

    rows: list[ParsedRow] = field(default_factory=list)
    skipped: int = 0

    def add(self, row: ParsedRow) -> None:
        if row.is_complete():
            self.rows.append(row)
        else:
            self.skipped += 1

    @property
    def category_titles(self) -> list[str]:
        """Distinct non-empty category titles, in first-seen order."""
        return list(dict.fromkeys(row.category for row in self.rows if row.category))

    def to_requests(self) -> list[TransactionCreate]:
        """Validate every row; the first invalid one aborts the whole batch."""
        requests = []
        for row in self.rows:
            try:
                requests.append(row.to_request())
            except ValidationError as exc:
                msg = f"Invalid transaction in data row {row.number}: {exc.errors()[0]['msg']}"
                raise CSVParseError(msg) from exc
        return requests


def read_csv_batch(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ImportBatch:
    """Read a CSV file chunk by chunk into an ImportBatch.

    Raises CSVParseError when a row does not have exactly four fields or the
    file is not valid UTF-8, and lets FileNotFoundError/OSError propagate when
    the file cannot be read.
    """
    batch = ImportBatch()
    try:
        with pd.read_csv(
            path,
            sep=",",
            header=None,
            skiprows=HEADER_LINES,
            dtype=str,
            keep_default_na=False,
            chunksize=chunk_size,
        ) as reader:
            for chunk in reader:
                if chunk.shape[1] != len(CSV_COLUMNS) or chunk.isna().to_numpy().any():
                    msg = f"Expected {len(CSV_COLUMNS)} fields per row in {path}"
                    raise CSVParseError(msg)
                for index, values in zip(chunk.index, chunk.itertuples(index=False, name=None), strict=True):
                    cells = [str(value).strip() for value in values]
                    batch.add(ParsedRow(*cells, number=int(index) + 1))
    except pd.errors.EmptyDataError:
        logger.info(f"No data rows in {path}")
    except pd.errors.ParserError as exc:
        msg = f"Malformed CSV file {path}: {exc}"
        raise CSVParseError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"CSV file {path} is not valid UTF-8: {exc.reason}"
        raise CSVParseError(msg) from exc
    return batch


class ImportTransactionsService:
    """Imports every transaction of a CSV file with batched category and transaction writes."""

    def __init__(self, store: BaseStore, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize the service with the store and the CSV read chunk size."""
        self.categories = CategoryResolver(store)
        self.writer = TransactionWriter(store)
        self.chunk_size = chunk_size

    def execute(self, path: str | Path) -> list[Transaction]:
        """Import the file at ``path`` and delete it; return the created transactions."""
        path = Path(path)
        logger.info(f"Importing transactions from {path}")
        batch = read_csv_batch(path, self.chunk_size)
        logger.info(f"Parsed {len(batch.rows)} rows from {path}, skipped {batch.skipped} incomplete rows")
        requests = batch.to_requests()
        categories = self.categories.resolve(batch.category_titles)
        created = self.writer.write_many((request, categories.get(request.category)) for request in requests)
        logger.info(f"Imported {len(created)} transactions from {path}")
        self._remove_source(path)
        return created

    def _remove_source(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as exc:
            logger.warning(f"Could not remove imported file {path}: {exc}")
