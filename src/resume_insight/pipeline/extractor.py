"""Extraction orchestrator: prompt -> gateway -> sanitize -> decode -> record.

Every public operation is total. Gateway, decode and schema failures are
logged and replaced by the deterministic fallback for the requested kind, so
callers always get a complete record back (real or placeholder, never a mix).
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
import time
from enum import Enum
from typing import Callable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from resume_insight.clients.gateway import GatewayClient, LLMResponse
from resume_insight.config import ExtractionConfig
from resume_insight.errors import ExtractionError, GatewayError, ValidationError
from resume_insight.logging.cost_calculator import calculate_cost
from resume_insight.logging.models import UsageLog
from resume_insight.logging.usage_store import UsageStore
from resume_insight.models.feedback import FeedbackRecord
from resume_insight.models.resume import ResumeRecord
from resume_insight.pipeline.fallback import (
    fallback_feedback,
    fallback_resume,
    templated_brief,
)
from resume_insight.pipeline.prompts import RecordKind, build_brief_prompt, build_prompt
from resume_insight.utils.json_parser import decode_json, sanitize_json_text

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class ExtractionOutcome(str, Enum):
    DECODED = "decoded"
    FALLBACK = "fallback"


def coerce_text(document: str | bytes | None) -> str:
    """Best-effort text from whatever the upload handler passed in."""
    if document is None:
        return ""
    if isinstance(document, bytes):
        return document.decode("utf-8", errors="replace")
    return str(document)


def decode_record(text: str, model_cls: type[RecordT]) -> RecordT:
    """Sanitize, parse and validate a model reply into ``model_cls``.

    Raises:
        DecodeError: no JSON object could be parsed.
        ValidationError: the object does not fit the record schema.
    """
    data = decode_json(sanitize_json_text(text))
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"{model_cls.__name__} schema mismatch: {exc.error_count()} error(s)"
        ) from exc


class ResumeExtractor:
    """Runs resume and feedback extraction against one gateway client.

    Holds configuration only; each call builds its own prompt and request, so
    one instance can serve concurrent calls.
    """

    def __init__(
        self,
        gateway: GatewayClient,
        *,
        settings: ExtractionConfig | None = None,
        usage_store: UsageStore | None = None,
        session_id: str = "anonymous",
    ):
        self.gateway = gateway
        self.settings = settings or ExtractionConfig()
        self.usage_store = usage_store
        self.session_id = session_id

    async def extract_resume(self, document_text: str | bytes) -> ResumeRecord:
        """Extract a structured resume; falls back to the placeholder profile."""
        return await self._extract(
            RecordKind.RESUME,
            coerce_text(document_text),
            ResumeRecord,
            fallback_resume,
            max_tokens=self.settings.resume_max_tokens,
        )

    async def extract_feedback(self, feedback_text: str | bytes) -> FeedbackRecord:
        """Extract feedback sentiment; falls back to the neutral-positive default."""
        return await self._extract(
            RecordKind.FEEDBACK,
            coerce_text(feedback_text),
            FeedbackRecord,
            fallback_feedback,
            max_tokens=self.settings.feedback_max_tokens,
        )

    async def generate_candidate_brief(self, record: ResumeRecord) -> str:
        """Summarize an extracted record for recruiters.

        On gateway failure or an empty reply the brief is templated from the
        record itself.
        """
        start = time.monotonic()
        response: LLMResponse | None = None
        error: ExtractionError | None = None
        try:
            response = await self.gateway.generate(
                build_brief_prompt(record),
                temperature=self.settings.brief_temperature,
                max_tokens=self.settings.brief_max_tokens,
            )
        except GatewayError as exc:
            error = exc

        brief = response.text.strip() if response is not None else ""
        if not brief:
            if error is None:
                error = GatewayError("Gateway returned an empty brief")
            logger.warning("Brief generation failed, using template: %s", error)
            brief = templated_brief(record)

        self._record_usage("brief", response, error, time.monotonic() - start)
        return brief

    def extract_resume_sync(self, document_text: str | bytes) -> ResumeRecord:
        """Blocking variant for hosts without a running event loop."""
        return asyncio.run(self.extract_resume(document_text))

    def extract_feedback_sync(self, feedback_text: str | bytes) -> FeedbackRecord:
        """Blocking variant for hosts without a running event loop."""
        return asyncio.run(self.extract_feedback(feedback_text))

    async def _extract(
        self,
        kind: RecordKind,
        text: str,
        model_cls: type[RecordT],
        fallback: Callable[[], RecordT],
        *,
        max_tokens: int,
    ) -> RecordT:
        start = time.monotonic()
        prompt = build_prompt(text, kind)
        response: LLMResponse | None = None
        try:
            response = await self.gateway.generate(
                prompt,
                temperature=self.settings.temperature,
                max_tokens=max_tokens,
            )
            record = decode_record(response.text, model_cls)
        except ExtractionError as exc:
            logger.warning(
                "%s extraction failed (%s), returning fallback: %s",
                kind.value,
                type(exc).__name__,
                exc,
            )
            self._record_usage(kind.value, response, exc, time.monotonic() - start)
            return fallback()

        logger.info("%s extraction decoded (%d chars in)", kind.value, len(text))
        self._record_usage(kind.value, response, None, time.monotonic() - start)
        return record

    def _record_usage(
        self,
        mode: str,
        response: LLMResponse | None,
        error: ExtractionError | None,
        elapsed: float,
    ) -> None:
        if self.usage_store is None:
            return
        input_tokens = response.input_tokens if response else 0
        output_tokens = response.output_tokens if response else 0
        model = response.model if response else self.gateway.model
        try:
            log = UsageLog(
                session_id=self.session_id,
                mode=mode,
                model=model,
                outcome=(ExtractionOutcome.FALLBACK if error else ExtractionOutcome.DECODED).value,
                elapsed_seconds=round(elapsed, 3),
                total_input_tokens=input_tokens,
                total_output_tokens=output_tokens,
                estimated_cost_usd=calculate_cost([(model, input_tokens, output_tokens)]),
                success=error is None,
                error_message=f"{type(error).__name__}: {error}" if error else None,
            )
            self.usage_store.save_log(log)
        except (sqlite3.Error, PydanticValidationError):
            logger.error("Failed to persist usage log", exc_info=True)
