"""JSON-file document store shared by the JSON repositories.

Each collection is one JSON array in ``<data_dir>/<collection>.json``.
When atomic commit is enabled, writes made inside ``atomic()`` are
buffered in memory and reads inside the scope see the buffer; the
buffer is flushed on a clean exit and dropped on an exception.  With
atomic commit disabled the store behaves like a backend without
multi-document transactions: every write hits disk immediately.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from catalog.domain.exceptions import InternalError
from catalog.domain.repository.transaction_manager import TransactionManager

logger = logging.getLogger(__name__)


class JsonDocumentStore(TransactionManager):

    def __init__(self, data_dir: Path, atomic_commit: bool = True) -> None:
        self._data_dir = data_dir
        self._atomic_commit = atomic_commit
        self._pending: dict[str, list[dict]] | None = None

    # --- TransactionManager interface -----------------------------------------

    def supports_atomic_commit(self) -> bool:
        return self._atomic_commit

    @contextmanager
    def atomic(self) -> Iterator[None]:
        if not self._atomic_commit:
            raise InternalError("Atomic commit is not available on this store")
        if self._pending is not None:
            # nested scope joins the outer one
            yield
            return

        self._pending = {}
        try:
            yield
        except BaseException:
            discarded = self._pending
            self._pending = None
            logger.warning(
                "Discarded uncommitted writes to %s",
                ", ".join(sorted(discarded)) or "no collections",
            )
            raise

        pending, self._pending = self._pending, None
        self._commit(pending)
        logger.debug("Committed writes to %s", ", ".join(sorted(pending)))

    # --- Collection access ----------------------------------------------------

    def load(self, collection: str) -> list[dict]:
        if self._pending is not None and collection in self._pending:
            return copy.deepcopy(self._pending[collection])
        return self._read_file(collection)

    def persist(self, collection: str, records: list[dict]) -> None:
        if self._pending is not None:
            self._pending[collection] = copy.deepcopy(records)
        else:
            self._write_file(collection, records)

    # --- File helpers ---------------------------------------------------------

    def _commit(self, pending: dict[str, list[dict]]) -> None:
        """Flush buffered collections so that either all land or none do.

        Every collection is first written to its temp file; only when all
        of them are staged are the temp files swapped in.  A failure while
        swapping puts back the files that were already replaced.
        """
        staged: list[tuple[Path, Path]] = []
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            for collection, records in pending.items():
                path = self._path(collection)
                tmp = path.with_name(path.name + ".tmp")
                tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
                staged.append((tmp, path))
        except OSError as exc:
            for tmp, _ in staged:
                tmp.unlink(missing_ok=True)
            logger.error(
                "Cannot stage writes to %s; nothing was committed",
                ", ".join(sorted(pending)), exc_info=exc,
            )
            raise InternalError() from exc

        originals: dict[Path, bytes | None] = {}
        replaced: list[Path] = []
        try:
            for _, path in staged:
                originals[path] = path.read_bytes() if path.exists() else None
            for tmp, path in staged:
                tmp.replace(path)
                replaced.append(path)
        except OSError as exc:
            logger.error(
                "Commit to %s failed after replacing %d file(s); restoring them",
                ", ".join(sorted(pending)), len(replaced), exc_info=exc,
            )
            self._restore(replaced, originals)
            for tmp, path in staged:
                if path not in replaced:
                    tmp.unlink(missing_ok=True)
            raise InternalError() from exc

    @staticmethod
    def _restore(replaced: list[Path], originals: dict[Path, bytes | None]) -> None:
        for path in replaced:
            content = originals[path]
            try:
                if content is None:
                    path.unlink(missing_ok=True)
                else:
                    path.write_bytes(content)
            except OSError:
                logger.exception("Cannot restore %s after a failed commit", path)

    def _path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _read_file(self, collection: str) -> list[dict]:
        path = self._path(collection)
        if not path.exists():
            return []
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error(
                "Cannot read collection %s from %s", collection, path, exc_info=exc
            )
            raise InternalError() from exc

    def _write_file(self, collection: str, records: list[dict]) -> None:
        path = self._path(collection)
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            logger.error(
                "Cannot write collection %s to %s", collection, path, exc_info=exc
            )
            raise InternalError() from exc
