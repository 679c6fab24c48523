import pytest

SAMPLE_DOCUMENT = """---
title: Weekly report
author: Dana
draft:
tags:
  - status
  - team
---
Intro text that belongs to no section.

# Summary
Everything is on track.

## Notes
First notes.

## Risks
None so far.

## Notes
Second notes.

# Details
```python
print("hi")
```
Closing remark.

# Appendix
"""


class RecordingMetricsHook:
    """Collects metric calls for assertions."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, float]] = []
        self.counters: list[tuple[str, int, dict[str, str] | None]] = []
        self.gauges: list[tuple[str, float]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, value_ms))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value))

    def total(self, name: str) -> int:
        return sum(value for counter, value, _ in self.counters if counter == name)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
