"""Service configuration.

Values come from defaults, a JSON file or ``MUTANT_*`` environment
variables:

    MUTANT_DB_PATH       database file, or ":memory:" for the in-memory store
    MUTANT_DIGEST        hashlib algorithm used for fingerprints
    MUTANT_DB_TIMEOUT    seconds to wait on a locked database
    MUTANT_LOG_LEVEL     logging level name
    MUTANT_LOG_FILE      optional log file
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from mutant_detector.storage import InMemoryRecordStore, RecordStore, SQLiteRecordStore

MEMORY_DATABASE = ":memory:"

_ENV_FIELDS = {
    "MUTANT_DB_PATH": "database_path",
    "MUTANT_DIGEST": "digest_algorithm",
    "MUTANT_DB_TIMEOUT": "db_timeout",
    "MUTANT_LOG_LEVEL": "log_level",
    "MUTANT_LOG_FILE": "log_file",
}


@dataclass
class ServiceConfig:
    """Configuration for the classification service.

    Attributes:
        database_path: SQLite file, or ":memory:" for a process-local store.
        digest_algorithm: hashlib algorithm for grid fingerprints.
        db_timeout: Seconds to wait on a locked database.
        log_level: Logging level name.
        log_file: Optional file to mirror log output to.
    """
    database_path: str = "mutant_detector.db"
    digest_algorithm: str = "sha256"
    db_timeout: float = 5.0
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        self.db_timeout = float(self.db_timeout)
        self.log_level = str(self.log_level).upper()
        if self.db_timeout <= 0:
            raise ValueError(f"db_timeout must be > 0, got {self.db_timeout}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")
        if not self.database_path:
            raise ValueError("database_path must not be empty")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> 'ServiceConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_json(cls, path: str | Path) -> 'ServiceConfig':
        with open(path) as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional['ServiceConfig'] = None,
    ) -> 'ServiceConfig':
        """Overlay ``MUTANT_*`` environment variables on ``base`` (or defaults)."""
        environ = os.environ if environ is None else environ
        values = base.to_dict() if base is not None else {}
        for var, field_name in _ENV_FIELDS.items():
            if environ.get(var):
                values[field_name] = environ[var]
        return cls.from_dict(values)

    def create_store(self) -> RecordStore:
        """Build the record store this configuration selects."""
        if self.database_path == MEMORY_DATABASE:
            return InMemoryRecordStore()
        return SQLiteRecordStore(self.database_path, timeout=self.db_timeout)
