"""SQLite-backed per-user record store for analyses, job matches and interviews."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from resume_insight.models.resume import ResumeRecord
from resume_insight.models.store import Interview, JobMatch, StoredAnalysis

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".resume-insight" / "records.db"

CURRENT_ANALYSIS_KEY = "current_analysis_id"
JOB_MATCHES_KEY = "job_matches"


class RecordStore:
    """Explicit store object handed to whoever needs persisted state.

    Analyses and interviews get their own tables; single-valued state (the
    current analysis, the last job-match list) lives in a key/value table.
    """

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS analyses (
                    id TEXT PRIMARY KEY,
                    created_at TEXT NOT NULL,
                    analysis_json TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS interviews (
                    id INTEGER PRIMARY KEY,
                    interview_json TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value_json TEXT NOT NULL
                )
            """)

    # --- analyses ---

    def save_analysis(self, record: ResumeRecord, brief: str | None = None) -> str:
        """Persist an extracted record and return its new analysis id."""
        analysis = StoredAnalysis(record=record, brief=brief)
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO analyses (id, created_at, analysis_json) VALUES (?, ?, ?)",
                (analysis.id, analysis.created_at.isoformat(), analysis.model_dump_json()),
            )
        logger.debug("Saved analysis %s", analysis.id)
        return analysis.id

    def get_analyses(self) -> list[StoredAnalysis]:
        """All stored analyses, oldest first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT analysis_json FROM analyses ORDER BY created_at, rowid"
            ).fetchall()
        return [StoredAnalysis.model_validate_json(row[0]) for row in rows]

    def get_analysis(self, analysis_id: str) -> StoredAnalysis | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT analysis_json FROM analyses WHERE id = ?", (analysis_id,)
            ).fetchone()
        return StoredAnalysis.model_validate_json(row[0]) if row else None

    def set_current_analysis(self, analysis_id: str) -> None:
        self._put(CURRENT_ANALYSIS_KEY, analysis_id)

    def get_current_analysis_id(self) -> str | None:
        return self._get(CURRENT_ANALYSIS_KEY)

    # --- job matches ---

    def save_job_matches(self, matches: list[JobMatch]) -> None:
        """Replace the stored job-match list."""
        self._put(JOB_MATCHES_KEY, [m.model_dump(mode="json") for m in matches])

    def get_job_matches(self) -> list[JobMatch]:
        return [JobMatch.model_validate(m) for m in self._get(JOB_MATCHES_KEY) or []]

    # --- interviews ---

    def save_interview(self, interview: Interview) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO interviews (id, interview_json) VALUES (?, ?)",
                (interview.id, interview.model_dump_json()),
            )

    def get_interviews(self) -> list[Interview]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT interview_json FROM interviews ORDER BY rowid"
            ).fetchall()
        return [Interview.model_validate_json(row[0]) for row in rows]

    def update_interview(self, interview_id: int, **updates: Any) -> Interview | None:
        """Merge ``updates`` into a stored interview; unknown ids are a no-op."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT interview_json FROM interviews WHERE id = ?", (interview_id,)
            ).fetchone()
            if row is None:
                return None
            current = Interview.model_validate_json(row[0])
            updated = Interview.model_validate(
                {**current.model_dump(), **updates, "id": interview_id}
            )
            conn.execute(
                "UPDATE interviews SET interview_json = ? WHERE id = ?",
                (updated.model_dump_json(), interview_id),
            )
        return updated

    # --- key/value helpers ---

    def _put(self, key: str, value: Any) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv (key, value_json) VALUES (?, ?)",
                (key, json.dumps(value)),
            )

    def _get(self, key: str) -> Any:
        with self._connect() as conn:
            row = conn.execute("SELECT value_json FROM kv WHERE key = ?", (key,)).fetchone()
        return json.loads(row[0]) if row else None
