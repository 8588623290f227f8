"""Testing – fakes for exercising retry and circuit-breaker behaviour."""
