import asyncio

import pytest

from namespace_api.services.batching import partition, run_in_groups


class Recorder:
    def __init__(self, failing: set[int] | None = None) -> None:
        self.failing = failing or set()
        self.events: list[tuple[str, int]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, item: int) -> int:
        self.events.append(("start", item))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Later items finish first to make ordering bugs visible.
            await asyncio.sleep(0.001 * (10 - item % 10))
            if item in self.failing:
                raise RuntimeError(f"item {item} failed")
            return item * 10
        finally:
            self.in_flight -= 1
            self.events.append(("end", item))


class SleepRecorder:
    def __init__(self, recorder: Recorder | None = None) -> None:
        self.recorder = recorder
        self.pauses: list[tuple[float, int]] = []

    async def __call__(self, seconds: float) -> None:
        position = len(self.recorder.events) if self.recorder else 0
        self.pauses.append((seconds, position))


def test_partition_preserves_order() -> None:
    assert partition(list(range(12)), 5) == [
        [0, 1, 2, 3, 4],
        [5, 6, 7, 8, 9],
        [10, 11],
    ]
    assert partition([], 5) == []


def test_partition_rejects_empty_groups() -> None:
    with pytest.raises(ValueError):
        partition([1, 2], 0)


async def test_results_line_up_with_items() -> None:
    worker = Recorder()

    outcomes = await run_in_groups(list(range(7)), worker, group_size=5, pause=0)

    assert outcomes == [0, 10, 20, 30, 40, 50, 60]


async def test_concurrency_never_exceeds_group_size() -> None:
    worker = Recorder()

    await run_in_groups(list(range(13)), worker, group_size=5, pause=0)

    assert worker.max_in_flight == 5


async def test_next_group_starts_after_previous_finishes() -> None:
    worker = Recorder()

    await run_in_groups(list(range(7)), worker, group_size=5, pause=0)

    last_end_of_first = max(
        index
        for index, (kind, item) in enumerate(worker.events)
        if kind == "end" and item < 5
    )
    first_start_of_second = min(
        index
        for index, (kind, item) in enumerate(worker.events)
        if kind == "start" and item >= 5
    )
    assert last_end_of_first < first_start_of_second
    assert [item for kind, item in worker.events if kind == "start"] == list(range(7))


async def test_pauses_only_between_groups() -> None:
    worker = Recorder()
    sleep = SleepRecorder(worker)

    await run_in_groups(list(range(11)), worker, group_size=5, pause=0.1, sleep=sleep)

    assert [seconds for seconds, _ in sleep.pauses] == [0.1, 0.1]
    # Each pause happens after a whole group has finished.
    assert [position for _, position in sleep.pauses] == [10, 20]


@pytest.mark.parametrize(("count", "groups"), [(1, 1), (5, 1), (6, 2), (10, 2), (11, 3)])
async def test_group_count_is_ceiling(count: int, groups: int) -> None:
    sleep = SleepRecorder()

    await run_in_groups(list(range(count)), Recorder(), group_size=5, pause=0.1, sleep=sleep)

    assert len(sleep.pauses) == groups - 1


async def test_no_pause_for_empty_input() -> None:
    sleep = SleepRecorder()

    outcomes = await run_in_groups([], Recorder(), pause=0.1, sleep=sleep)

    assert outcomes == []
    assert sleep.pauses == []


async def test_failures_are_isolated() -> None:
    worker = Recorder(failing={2, 5})

    outcomes = await run_in_groups(list(range(7)), worker, group_size=5, pause=0)

    assert isinstance(outcomes[2], RuntimeError)
    assert isinstance(outcomes[5], RuntimeError)
    assert [outcome for outcome in outcomes if not isinstance(outcome, Exception)] == [
        0,
        10,
        30,
        40,
        60,
    ]
    assert sorted(item for kind, item in worker.events if kind == "end") == list(range(7))
