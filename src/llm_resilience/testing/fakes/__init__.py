"""Testing fakes."""
from llm_resilience.testing.fakes.clock import FakeClock
from llm_resilience.testing.fakes.operation import RecordingSleep, ScriptedOperation

__all__ = ["FakeClock", "RecordingSleep", "ScriptedOperation"]
