from threading import Barrier, Thread
from typing import List

from test_doubles import when_calling
from test_doubles.domain.test_double_source import TestDoubleSource
from test_doubles_tests.support.collaborators import RateSource

THREAD_COUNT = 8
CALLS_PER_THREAD = 200


def test_hands_out_each_queued_behaviour_once_when_called_from_many_threads(
        test_double_source: TestDoubleSource) -> None:
    rate_source = test_double_source.double(RateSource)
    when_calling(rate_source.get).then_return_consecutively(list(range(THREAD_COUNT * CALLS_PER_THREAD)))
    start_barrier = Barrier(THREAD_COUNT)
    results_per_thread: List[List[int]] = [[] for _ in range(THREAD_COUNT)]

    def call_repeatedly(results: List[int]) -> None:
        start_barrier.wait()

        for _ in range(CALLS_PER_THREAD):
            results.append(rate_source.get())

    threads = [Thread(target=call_repeatedly, args=(results,)) for results in results_per_thread]

    for thread in threads:
        thread.start()

    for thread in threads:
        thread.join()

    all_results = sorted(result for results in results_per_thread for result in results)
    assert all_results == list(range(THREAD_COUNT * CALLS_PER_THREAD))
    assert rate_source.get.invocation_count == THREAD_COUNT * CALLS_PER_THREAD  # type: ignore[attr-defined]


def test_registers_and_resolves_concurrently_across_doubles(test_double_source: TestDoubleSource) -> None:
    rate_sources = [test_double_source.double(RateSource) for _ in range(THREAD_COUNT)]
    failures: List[BaseException] = []

    def stub_and_call(index: int) -> None:
        rate_source = rate_sources[index]

        try:
            for call_number in range(CALLS_PER_THREAD):
                when_calling(rate_source.get).then_return(index * CALLS_PER_THREAD + call_number)
                assert rate_source.get() == index * CALLS_PER_THREAD + call_number
        except BaseException as e:
            failures.append(e)

    threads = [Thread(target=stub_and_call, args=(index,)) for index in range(THREAD_COUNT)]

    for thread in threads:
        thread.start()

    for thread in threads:
        thread.join()

    assert failures == []
