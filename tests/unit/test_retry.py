"""Tests for the retry loop and the bulk translation update."""

from unittest.mock import AsyncMock, call, patch

import pytest

from lokalise_mcp.core.errors import ErrorType, McpError
from lokalise_mcp.core.retry import RetryConfig, RetryManager, RetryStrategy
from lokalise_mcp.domains.translations import controller
from lokalise_mcp.domains.translations.service import TranslationsService
from lokalise_mcp.domains.translations.types import (
    BulkUpdateTranslationsArgs,
    TranslationData,
    TranslationUpdate,
)


def make_update(translation_id: int, text: str = "Hola") -> TranslationUpdate:
    return TranslationUpdate(
        translation_id=translation_id,
        translation_data=TranslationData(translation=text),
    )


class TestRetryManager:
    """Test the RetryManager class."""

    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self):
        """Test that a successful call is not retried."""
        func = AsyncMock(return_value="ok")

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            outcome = await RetryManager().run(func)

        assert outcome.success is True
        assert outcome.result == "ok"
        assert outcome.attempts == 1
        sleep.assert_not_called()

    @pytest.mark.asyncio
    async def test_success_on_third_attempt(self):
        """Test retrying with a fixed delay until success."""
        func = AsyncMock(side_effect=[RuntimeError("one"), RuntimeError("two"), "ok"])

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            outcome = await RetryManager(RetryConfig(max_attempts=3, initial_delay_ms=1000)).run(func)

        assert outcome.success is True
        assert outcome.attempts == 3
        assert sleep.await_args_list == [call(1.0), call(1.0)]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        """Test that the last error is reported without a final sleep."""
        func = AsyncMock(side_effect=RuntimeError("always"))
        manager = RetryManager(RetryConfig(max_attempts=3, initial_delay_ms=1000))

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            outcome = await manager.run(func)

        assert outcome.success is False
        assert outcome.attempts == 3
        assert str(outcome.error) == "always"
        assert sleep.await_count == 2
        assert manager.stats.failed_attempts == 3
        assert manager.stats.error_counts == {"RuntimeError": 3}

    @pytest.mark.asyncio
    async def test_should_retry_func_stops_early(self):
        """Test that non-retryable errors end the loop immediately."""
        func = AsyncMock(side_effect=ValueError("bad input"))
        config = RetryConfig(max_attempts=3, should_retry_func=lambda e: not isinstance(e, ValueError))

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            outcome = await RetryManager(config).run(func)

        assert outcome.attempts == 1
        sleep.assert_not_called()

    @pytest.mark.parametrize(
        "strategy,attempt,expected",
        [
            (RetryStrategy.FIXED_DELAY, 3, 100),
            (RetryStrategy.LINEAR_BACKOFF, 3, 300),
            (RetryStrategy.EXPONENTIAL_BACKOFF, 3, 400),
        ],
    )
    def test_delay_strategies(self, strategy, attempt, expected):
        """Test delay calculation for each strategy."""
        manager = RetryManager(RetryConfig(initial_delay_ms=100, strategy=strategy))
        assert manager._calculate_delay(attempt) == expected

    def test_delay_is_capped(self):
        """Test that delays never exceed max_delay_ms."""
        manager = RetryManager(RetryConfig(
            initial_delay_ms=1000,
            max_delay_ms=1500,
            strategy=RetryStrategy.EXPONENTIAL_BACKOFF,
        ))
        assert manager._calculate_delay(5) == 1500


class TestBulkUpdate:
    """Test the sequential bulk translation update."""

    @pytest.fixture
    def service(self):
        return TranslationsService()

    @pytest.mark.asyncio
    async def test_retries_then_succeeds(self, service):
        """Test an item that succeeds on its third attempt."""
        service.update_translation = AsyncMock(
            side_effect=[RuntimeError("busy"), RuntimeError("busy"), {"translation_id": 1}]
        )

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            result = await service.bulk_update("p1", [make_update(1)])

        assert result.success_count == 1
        assert result.failure_count == 0
        assert result.results[0].attempts == 3
        # Two retry delays, no pacing delay after the last item
        assert sleep.await_args_list == [call(1.0), call(1.0)]

    @pytest.mark.asyncio
    async def test_failure_does_not_abort_batch(self, service):
        """Test that a failing item is recorded and the next item still runs."""
        async def update(project_id, translation_id, data):
            if translation_id == 1:
                raise RuntimeError("locked")
            return {"translation_id": translation_id}

        service.update_translation = AsyncMock(side_effect=update)

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            result = await service.bulk_update("p1", [make_update(1), make_update(2)])

        assert result.total_requested == 2
        assert result.success_count == 1
        assert result.failure_count == 1
        assert [r.translation_id for r in result.results] == [1, 2]
        assert result.results[0].success is False
        assert result.results[0].error == "locked"
        assert result.results[0].attempts == 3
        assert result.results[1].attempts == 1
        assert service.update_translation.await_count == 4
        # Two retry delays for item 1, one pacing delay between items
        assert sleep.await_args_list == [call(1.0), call(1.0), call(0.2)]

    @pytest.mark.asyncio
    async def test_pacing_between_items_only(self, service):
        """Test the rate limit delay between consecutive items."""
        service.update_translation = AsyncMock(return_value={"translation_id": 1})

        with patch("asyncio.sleep", new_callable=AsyncMock) as sleep:
            result = await service.bulk_update("p1", [make_update(i) for i in (1, 2, 3)])

        assert result.success_count == 3
        assert sleep.await_args_list == [call(0.2), call(0.2)]

    @pytest.mark.asyncio
    async def test_controller_rejects_too_many_updates(self):
        """Test the 100 item limit of the bulk update controller."""
        args = BulkUpdateTranslationsArgs.model_construct(
            project_id="p1",
            updates=[make_update(i) for i in range(101)],
        )

        with pytest.raises(McpError) as exc_info:
            await controller.bulk_update_translations(args)

        assert exc_info.value.type == ErrorType.VALIDATION_ERROR
        assert "Maximum 100 translations" in exc_info.value.message
