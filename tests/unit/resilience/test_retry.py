"""Unit tests for RetryPolicy, backoff/jitter strategies and ResilientExecutor."""

from __future__ import annotations

import asyncio
import builtins
import random

import pytest

from llm_resilience.config import InvalidSettingValueError
from llm_resilience.kernel.errors import (
    ExternalServiceError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)
from llm_resilience.observability.logging import RecordingAttemptHook
from llm_resilience.resilience.retry import (
    ExponentialBackoff,
    FatalOperationError,
    NoJitter,
    PositiveJitter,
    ResilientExecutor,
    RetryClass,
    RetryExhaustedError,
    RetryPolicy,
    retry_on,
    with_retry,
)
from llm_resilience.testing.fakes import RecordingSleep, ScriptedOperation


def make_executor(**kwargs) -> tuple[ResilientExecutor, RecordingSleep, RecordingAttemptHook]:
    sleep = RecordingSleep()
    hook = RecordingAttemptHook()
    return ResilientExecutor(on_attempt_failed=hook, sleep=sleep, **kwargs), sleep, hook


def no_jitter_policy(**overrides) -> RetryPolicy:
    params = dict(max_attempts=3, base_delay_ms=100, max_delay_ms=2000, backoff_factor=2, jitter=False)
    params.update(overrides)
    return RetryPolicy(**params)


# ---------------------------------------------------------------------------
# ExponentialBackoff
# ---------------------------------------------------------------------------


class TestExponentialBackoff:
    def test_first_attempt_uses_base_delay(self) -> None:
        assert ExponentialBackoff(100, 2, 2000).compute(1) == 100.0

    def test_sequence_then_cap(self) -> None:
        b = ExponentialBackoff(base_delay_ms=100, factor=2, max_delay_ms=2000)
        assert [b.compute(n) for n in range(1, 9)] == [100, 200, 400, 800, 1600, 2000, 2000, 2000]

    def test_fractional_factor(self) -> None:
        b = ExponentialBackoff(base_delay_ms=100, factor=1.5, max_delay_ms=10_000)
        assert b.compute(3) == pytest.approx(225.0)

    def test_huge_attempt_does_not_overflow(self) -> None:
        b = ExponentialBackoff(base_delay_ms=100, factor=10.0, max_delay_ms=5000)
        assert b.compute(10_000) == 5000.0


# ---------------------------------------------------------------------------
# JitterStrategy
# ---------------------------------------------------------------------------


class TestNoJitter:
    def test_returns_base_unchanged(self) -> None:
        assert NoJitter().apply(3.0) == 3.0


class TestPositiveJitter:
    def test_within_ten_percent_above(self) -> None:
        j = PositiveJitter()
        for _ in range(200):
            v = j.apply(1000.0)
            assert 1000.0 <= v <= 1100.0

    def test_never_below_floor(self) -> None:
        j = PositiveJitter(rng=random.Random(7))
        assert min(j.apply(50.0) for _ in range(100)) >= 50.0

    def test_seeded_rng_is_deterministic(self) -> None:
        a = PositiveJitter(rng=random.Random(42))
        b = PositiveJitter(rng=random.Random(42))
        assert [a.apply(100.0) for _ in range(5)] == [b.apply(100.0) for _ in range(5)]

    def test_negative_spread_rejected(self) -> None:
        with pytest.raises(ValueError):
            PositiveJitter(spread=-0.1)


# ---------------------------------------------------------------------------
# RetryPolicy
# ---------------------------------------------------------------------------


class TestRetryPolicy:
    def test_defaults(self) -> None:
        p = RetryPolicy()
        assert p.max_attempts == 3
        assert p.jitter is True
        assert p.attempt_timeout_ms is None

    def test_documented_delay_sequence(self) -> None:
        p = no_jitter_policy(max_attempts=8)
        assert p.delays() == [100, 200, 400, 800, 1600, 2000, 2000]

    def test_is_frozen(self) -> None:
        p = RetryPolicy()
        with pytest.raises((AttributeError, TypeError)):
            p.max_attempts = 10  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_attempts": 0},
            {"base_delay_ms": 0},
            {"base_delay_ms": 500, "max_delay_ms": 100},
            {"backoff_factor": 1.0},
            {"attempt_timeout_ms": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides: dict) -> None:
        with pytest.raises(InvalidSettingValueError):
            RetryPolicy(**overrides)

    def test_retry_after_raises_floor(self) -> None:
        p = no_jitter_policy()
        assert p.delay_for(1, error=RateLimitError(retry_after_seconds=3)) == 3000

    def test_retry_after_ignored_when_disabled(self) -> None:
        p = no_jitter_policy(respect_retry_after=False)
        assert p.delay_for(1, error=RateLimitError(retry_after_seconds=3)) == 100

    def test_retry_after_never_shortens_backoff(self) -> None:
        p = no_jitter_policy()
        assert p.delay_for(4, error=RateLimitError(retry_after_seconds=0.01)) == 800


# ---------------------------------------------------------------------------
# ResilientExecutor
# ---------------------------------------------------------------------------


class TestResilientExecutor:
    def test_succeeds_on_first_try(self) -> None:
        executor, sleep, hook = make_executor()
        op = ScriptedOperation(["ok"])

        result = asyncio.run(executor.execute(op, no_jitter_policy()))

        assert result == "ok"
        assert op.calls == 1
        assert sleep.delays == []
        assert hook.calls == []

    def test_retries_then_succeeds(self) -> None:
        executor, sleep, _ = make_executor()
        op = ScriptedOperation([builtins.TimeoutError(), builtins.TimeoutError(), "done"])

        result = asyncio.run(executor.execute(op, no_jitter_policy()))

        assert result == "done"
        assert op.calls == 3
        assert sleep.delays_ms == [100, 200]

    @pytest.mark.parametrize("max_attempts", [1, 2, 5])
    def test_permanent_retryable_failure_invokes_exactly_n_times(self, max_attempts: int) -> None:
        executor, _, _ = make_executor()
        op = ScriptedOperation.always_failing(builtins.ConnectionError("down"))

        with pytest.raises(RetryExhaustedError) as info:
            asyncio.run(executor.execute(op, no_jitter_policy(max_attempts=max_attempts)))

        assert op.calls == max_attempts
        assert info.value.attempts == max_attempts
        assert isinstance(info.value.last_error, builtins.ConnectionError)
        assert info.value.elapsed_seconds >= 0

    def test_fatal_failure_short_circuits_on_first_attempt(self) -> None:
        executor, sleep, hook = make_executor()
        op = ScriptedOperation.always_failing(ValidationError("bad prompt"))

        with pytest.raises(FatalOperationError) as info:
            asyncio.run(executor.execute(op, no_jitter_policy(max_attempts=5)))

        assert op.calls == 1
        assert sleep.delays == []
        assert hook.calls == []
        assert info.value.attempts == 1
        assert isinstance(info.value.error, ValidationError)
        assert info.value.__cause__ is info.value.error

    def test_fatal_after_retryable_reports_attempt(self) -> None:
        executor, _, _ = make_executor()
        op = ScriptedOperation([builtins.TimeoutError(), UnauthorizedError("no key")])

        with pytest.raises(FatalOperationError) as info:
            asyncio.run(executor.execute(op, no_jitter_policy()))

        assert info.value.attempts == 2

    def test_max_attempts_one_means_no_retry(self) -> None:
        executor, sleep, _ = make_executor()
        op = ScriptedOperation.always_failing(builtins.TimeoutError())

        with pytest.raises(RetryExhaustedError):
            asyncio.run(executor.execute(op, no_jitter_policy(max_attempts=1)))

        assert op.calls == 1
        assert sleep.delays == []

    def test_hook_sees_attempt_error_and_delay(self) -> None:
        executor, _, hook = make_executor()
        err = ExternalServiceError("llm", status_code=503)
        op = ScriptedOperation([err, err, "ok"])

        asyncio.run(executor.execute(op, no_jitter_policy()))

        assert [(n, e) for n, e, _ in hook.calls] == [(1, err), (2, err)]
        assert hook.delays_ms == [100, 200]

    def test_delays_capped_after_many_attempts(self) -> None:
        executor, sleep, _ = make_executor()
        op = ScriptedOperation.always_failing(builtins.TimeoutError())

        with pytest.raises(RetryExhaustedError):
            asyncio.run(executor.execute(op, no_jitter_policy(max_attempts=8)))

        assert sleep.delays_ms == [100, 200, 400, 800, 1600, 2000, 2000]

    def test_jittered_delays_stay_within_bounds(self) -> None:
        executor, sleep, _ = make_executor()
        op = ScriptedOperation.always_failing(builtins.TimeoutError())

        with pytest.raises(RetryExhaustedError):
            asyncio.run(executor.execute(op, no_jitter_policy(max_attempts=4, jitter=True)))

        for floor, actual in zip([100, 200, 400], sleep.delays_ms):
            assert floor <= actual <= floor * 1.1

    def test_rate_limit_retry_after_used_as_delay(self) -> None:
        executor, sleep, _ = make_executor()
        op = ScriptedOperation([RateLimitError(retry_after_seconds=2), "ok"])

        asyncio.run(executor.execute(op, no_jitter_policy()))

        assert sleep.delays_ms == [2000]

    def test_custom_classifier_per_call(self) -> None:
        executor, _, _ = make_executor()
        op = ScriptedOperation([KeyError("flaky"), "ok"])

        result = asyncio.run(executor.execute(op, no_jitter_policy(), classify=retry_on(KeyError)))

        assert result == "ok"
        assert op.calls == 2

    def test_default_classifier_set_on_executor(self) -> None:
        executor, _, _ = make_executor(classify=lambda _: RetryClass.FATAL)
        op = ScriptedOperation.always_failing(builtins.TimeoutError())

        with pytest.raises(FatalOperationError):
            asyncio.run(executor.execute(op, no_jitter_policy()))

        assert op.calls == 1

    def test_failing_hook_does_not_break_loop(self) -> None:
        def broken_hook(attempt: int, error: BaseException, delay_ms: float) -> None:
            raise RuntimeError("metrics backend down")

        executor = ResilientExecutor(on_attempt_failed=broken_hook, sleep=RecordingSleep())
        op = ScriptedOperation([builtins.TimeoutError(), "ok"])

        assert asyncio.run(executor.execute(op, no_jitter_policy())) == "ok"

    def test_policy_reuse_gives_identical_sequences(self) -> None:
        policy = no_jitter_policy(max_attempts=5)
        snapshot = RetryPolicy(**{f: getattr(policy, f) for f in policy.__dataclass_fields__})
        sequences = []
        for _ in range(2):
            executor, sleep, _ = make_executor()
            with pytest.raises(RetryExhaustedError):
                asyncio.run(executor.execute(ScriptedOperation.always_failing(builtins.TimeoutError()), policy))
            sequences.append(sleep.delays_ms)

        assert sequences[0] == sequences[1] == [100, 200, 400, 800]
        assert policy == snapshot


class TestCancellation:
    def test_cancel_during_backoff_stops_attempts(self) -> None:
        async def run() -> ScriptedOperation:
            sleeping = asyncio.Event()

            async def slow_sleep(seconds: float) -> None:
                sleeping.set()
                await asyncio.sleep(3600)

            executor = ResilientExecutor(sleep=slow_sleep)
            op = ScriptedOperation.always_failing(builtins.TimeoutError())
            task = asyncio.create_task(executor.execute(op, no_jitter_policy(max_attempts=5)))
            await sleeping.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            return op

        op = asyncio.run(run())
        assert op.calls == 1

    def test_cancel_during_attempt_propagates_cancelled(self) -> None:
        async def run() -> None:
            started = asyncio.Event()

            async def hang() -> None:
                started.set()
                await asyncio.sleep(3600)

            executor = ResilientExecutor(sleep=RecordingSleep())
            task = asyncio.create_task(executor.execute(hang, no_jitter_policy()))
            await started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(run())


class TestWithRetry:
    def test_decorated_function_is_retried(self) -> None:
        calls = 0
        executor = ResilientExecutor(sleep=RecordingSleep())

        @with_retry(no_jitter_policy(), executor=executor)
        async def complete(prompt: str) -> str:
            nonlocal calls
            calls += 1
            if calls < 2:
                raise builtins.ConnectionError("reset")
            return prompt.upper()

        assert asyncio.run(complete("hi")) == "HI"
        assert calls == 2
        assert complete.__name__ == "complete"


# ---------------------------------------------------------------------------
# Public surface smoke test
# ---------------------------------------------------------------------------


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("llm_resilience.resilience.retry")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
