"""Persistent puzzle document store.

Generated boards are saved as JSON documents under
``local_db/collections/number_grids/`` and
``local_db/collections/word_searches/``. Documents wrap the boards'
``to_jsonable()`` payload; the generators themselves never touch the store.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ..core.exceptions import StoreError
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .number_grid import NumberGridBoard
from .search_grid import SearchGrid


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections")
NUMBER_GRIDS = "number_grids"
WORD_SEARCHES = "word_searches"
COLLECTIONS = (NUMBER_GRIDS, WORD_SEARCHES)


class PuzzleStore:
    """Save and query generated puzzles as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        for collection in COLLECTIONS:
            (self.store_dir / collection).mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save_number_grid(self, board: NumberGridBoard, seed: Optional[int] = None) -> str:
        """Persist a number-grid puzzle and return its document ID."""
        payload = board.to_jsonable()
        stats = {
            "clue_cells": board.clue_count(),
            "empty_cells": board.empty_count(),
            "filled_cells": board.filled_count(),
        }
        return self._write(NUMBER_GRIDS, payload, seed, stats)

    def save_word_search(self, grid: SearchGrid, seed: Optional[int] = None) -> str:
        """Persist a word search and return its document ID."""
        payload = grid.to_jsonable()
        stats = {
            "words": len(grid.words),
            "placed": len(grid.placements),
            "skipped": len(grid.skipped_words),
        }
        return self._write(WORD_SEARCHES, payload, seed, stats)

    def load_number_grid(self, doc_id: str) -> NumberGridBoard:
        board = NumberGridBoard.from_jsonable(self.load_document(NUMBER_GRIDS, doc_id)["puzzle"])
        board.freeze()
        return board

    def load_word_search(self, doc_id: str) -> SearchGrid:
        grid = SearchGrid.from_jsonable(self.load_document(WORD_SEARCHES, doc_id)["puzzle"])
        grid.freeze()
        return grid

    def load_document(self, collection: str, doc_id: str) -> dict:
        path = self._path(collection, doc_id)
        if not path.exists():
            raise StoreError(f"No {collection} document with id {doc_id!r}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StoreError(f"Document {doc_id!r} is not valid JSON: {exc}") from exc

    def list_ids(self, collection: str) -> List[str]:
        self._check_collection(collection)
        return sorted(path.stem for path in (self.store_dir / collection).glob("*.json"))

    def number_grids_by_filled_cells(self) -> List[NumberGridBoard]:
        """All stored number grids, the most filled boards first."""
        boards = [self.load_number_grid(doc_id) for doc_id in self.list_ids(NUMBER_GRIDS)]
        boards.sort(key=lambda board: board.filled_count(), reverse=True)
        return boards

    def count_word_occurrences(self, word: str) -> int:
        """How many times ``word`` was requested across all stored word searches."""
        target = clean_word(word)
        total = 0
        for doc_id in self.list_ids(WORD_SEARCHES):
            words = self.load_document(WORD_SEARCHES, doc_id)["puzzle"].get("words", [])
            total += sum(1 for entry in words if entry == target)
        return total

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _write(self, collection: str, payload: dict, seed: Optional[int], stats: dict) -> str:
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "kind": collection,
            "seed": seed,
            "puzzle": payload,
            "stats": stats,
        }
        path = self._path(collection, doc_id)
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Puzzle saved: %s/%s", collection, doc_id)
        return doc_id

    def _path(self, collection: str, doc_id: str) -> Path:
        self._check_collection(collection)
        return self.store_dir / collection / f"{doc_id}.json"

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in COLLECTIONS:
            raise StoreError(f"Unknown collection {collection!r}")

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
