"""Unit tests for the testing fakes."""

from __future__ import annotations

import asyncio

import pytest

from llm_resilience.testing.fakes import RecordingSleep, ScriptedOperation


class TestScriptedOperation:
    def test_replays_then_repeats_last(self) -> None:
        op = ScriptedOperation([ValueError("a"), "b"])

        async def run() -> list[str]:
            with pytest.raises(ValueError):
                await op()
            return [await op(), await op()]

        assert asyncio.run(run()) == ["b", "b"]
        assert op.calls == 3

    def test_empty_script_rejected(self) -> None:
        with pytest.raises(ValueError):
            ScriptedOperation([])


class TestRecordingSleep:
    def test_records_delays(self) -> None:
        sleep = RecordingSleep()

        async def run() -> None:
            await sleep(0.1)
            await sleep(0.25)

        asyncio.run(run())
        assert sleep.delays == [0.1, 0.25]
        assert sleep.delays_ms == [100.0, 250.0]
