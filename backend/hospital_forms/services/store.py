# hospital_forms/services/store.py
"""Stockage en mémoire des soumissions.

Un store par type de formulaire, créé au démarrage de l'application et
rattaché à son état. Rien n'est persisté : un redémarrage repart de zéro.
"""
from __future__ import annotations

import threading
from typing import Generic, List, Optional, TypeVar

from hospital_forms.schemas.submissions import SubmissionRecord

RecordT = TypeVar("RecordT", bound=SubmissionRecord)


class SubmissionStore(Generic[RecordT]):
    """Journal append-only, sûr en écriture concurrente."""

    def __init__(self, name: str):
        self.name = name
        self._records: List[RecordT] = []
        self._lock = threading.Lock()

    def append(self, record: RecordT) -> int:
        with self._lock:
            self._records.append(record)
            return len(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def last(self) -> Optional[RecordT]:
        with self._lock:
            return self._records[-1] if self._records else None

    def snapshot(self) -> List[RecordT]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        return self.count()
