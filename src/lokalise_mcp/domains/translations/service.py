"""
Lokalise translations API service.

Translations use cursor pagination. The bulk update sends one request per
translation, spaced out to stay under the API rate limit, and retries each
request a bounded number of times.
"""

import asyncio
import time
from typing import Any, Dict, List, Optional
import logging

from lokalise_mcp.core.constants import (
    BULK_UPDATE_MAX_RETRY_ATTEMPTS,
    BULK_UPDATE_RATE_LIMIT_DELAY_MS,
    BULK_UPDATE_RETRY_DELAY_MS,
)
from lokalise_mcp.core.retry import RetryConfig, RetryManager, RetryStrategy
from lokalise_mcp.domains.base import LokaliseService
from lokalise_mcp.domains.translations.types import (
    BulkUpdateItemResult,
    BulkUpdateResult,
    TranslationData,
    TranslationUpdate,
)

logger = logging.getLogger(__name__)


class TranslationsService(LokaliseService):
    """Calls the translations endpoints of the Lokalise API."""

    async def list_translations(
        self,
        project_id: str,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> Any:
        params: Dict[str, Any] = {"limit": limit or 100, "pagination": "cursor"}
        if cursor:
            params["cursor"] = cursor
        for name, value in (filters or {}).items():
            if value is not None:
                params[name] = value

        return await self._call(
            f"listing translations for project {project_id}",
            lambda api: api.translations(project_id, params),
        )

    async def get_translation(
        self,
        project_id: str,
        translation_id: int,
        disable_references: Optional[str] = None,
    ) -> Any:
        params = {"disable_references": disable_references} if disable_references is not None else {}
        return await self._call(
            f"getting translation {translation_id}",
            lambda api: api.translation(project_id, translation_id, params),
        )

    async def update_translation(
        self,
        project_id: str,
        translation_id: int,
        data: TranslationData,
    ) -> Any:
        payload = data.model_dump(exclude_none=True)
        return await self._call(
            f"updating translation {translation_id}",
            lambda api: api.update_translation(project_id, translation_id, payload),
        )

    async def bulk_update(
        self,
        project_id: str,
        updates: List[TranslationUpdate],
    ) -> BulkUpdateResult:
        """
        Update translations one after another.

        A failing item never aborts the batch; it is recorded with its last
        error and the number of attempts made.

        Args:
            project_id: Project containing the translations
            updates: Translation updates in processing order

        Returns:
            BulkUpdateResult with one entry per update, in input order
        """
        logger.info(f"Starting bulk translation update of {len(updates)} items in project {project_id}")
        started = time.monotonic()
        results: List[BulkUpdateItemResult] = []

        for index, update in enumerate(updates):
            logger.debug(f"Processing translation {index + 1}/{len(updates)}: {update.translation_id}")
            retry = RetryManager(RetryConfig(
                max_attempts=BULK_UPDATE_MAX_RETRY_ATTEMPTS,
                initial_delay_ms=BULK_UPDATE_RETRY_DELAY_MS,
                strategy=RetryStrategy.FIXED_DELAY,
            ))
            outcome = await retry.run(
                lambda update=update: self.update_translation(
                    project_id, update.translation_id, update.translation_data,
                ),
                label=f"Translation {update.translation_id} update",
            )

            if outcome.success:
                results.append(BulkUpdateItemResult(
                    translation_id=update.translation_id,
                    success=True,
                    translation=outcome.result,
                    attempts=outcome.attempts,
                ))
            else:
                logger.error(
                    f"Translation {update.translation_id} update failed after "
                    f"{outcome.attempts} attempts: {outcome.error}"
                )
                results.append(BulkUpdateItemResult(
                    translation_id=update.translation_id,
                    success=False,
                    error=str(outcome.error),
                    attempts=outcome.attempts,
                ))

            if index < len(updates) - 1:
                await asyncio.sleep(BULK_UPDATE_RATE_LIMIT_DELAY_MS / 1000.0)

        success_count = sum(1 for result in results if result.success)
        summary = BulkUpdateResult(
            total_requested=len(updates),
            success_count=success_count,
            failure_count=len(results) - success_count,
            results=results,
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        logger.info(
            f"Bulk translation update completed: {summary.success_count} succeeded, "
            f"{summary.failure_count} failed in {summary.duration_ms}ms"
        )
        return summary


translations_service = TranslationsService()
