"""
Document reader for bulk indexing.

Reads CSV, JSON-lines and Parquet files into id-keyed document
batches suitable for ``add_multiple``.
"""

import logging
import os
from typing import Any, Dict, Iterator

import pandas as pd
from tqdm import tqdm

logger = logging.getLogger(__name__)

Documents = Dict[str, Dict[str, Any]]


class DocumentReader:
    """Reads document files and yields them in batches."""

    def __init__(self, batch_size: int = 500, show_progress: bool = True):
        """
        Initialize the reader.

        Args:
            batch_size: Number of documents per batch
            show_progress: Whether to display a progress bar
        """
        self.batch_size = batch_size
        self.show_progress = show_progress

    def read_frame(self, path: str) -> pd.DataFrame:
        """
        Read a document file into a DataFrame.

        Args:
            path: Path to a ``.csv``, ``.jsonl``/``.ndjson``/``.json`` or ``.parquet`` file

        Returns:
            pd.DataFrame: One row per document

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file type is not supported
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Document file not found: {path}")

        extension = os.path.splitext(path)[1].lower()
        if extension == ".csv":
            return pd.read_csv(path)
        if extension in (".jsonl", ".ndjson"):
            return pd.read_json(path, lines=True)
        if extension == ".json":
            return pd.read_json(path)
        if extension == ".parquet":
            return pd.read_parquet(path)
        raise ValueError(f"Unsupported document file type: {extension or path}")

    def iter_batches(self, path: str, id_field: str = "id") -> Iterator[Documents]:
        """
        Yield documents in id-keyed batches.

        Args:
            path: Document file path
            id_field: Column holding the document id

        Yields:
            Documents: Up to ``batch_size`` documents keyed by id

        Raises:
            KeyError: If the id column is missing
        """
        df = self.read_frame(path)
        if id_field not in df.columns:
            raise KeyError(f"Id column '{id_field}' not found in {path}")

        # NaN cannot be serialized as JSON
        df = df.astype(object).where(pd.notnull(df), None)
        total_rows = len(df)
        logger.info("Read %d documents from %s", total_rows, path)

        with tqdm(
            total=total_rows,
            desc=f"Indexing {os.path.basename(path)}",
            unit="docs",
            disable=not self.show_progress,
        ) as pbar:
            for start_idx in range(0, total_rows, self.batch_size):
                batch = df.iloc[start_idx:start_idx + self.batch_size]
                documents = {
                    str(record[id_field]): record
                    for record in batch.to_dict("records")
                }
                yield documents
                pbar.update(len(batch))

    def read(self, path: str, id_field: str = "id") -> Documents:
        """Read every document of a file keyed by id."""
        documents: Documents = {}
        for batch in self.iter_batches(path, id_field):
            documents.update(batch)
        return documents
