import logging
import threading

from gemscout.pool import ProgressCounter

from tests.factories import make_athlete


def test_progress_counter_is_safe_under_concurrent_increments():
    counter = ProgressCounter(4000)

    def work():
        for _ in range(500):
            counter.advance()

    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert counter.count == 4000
    assert counter.done


def test_progress_counter_as_observer_logs_steps(caplog):
    counter = ProgressCounter(5, report_every=2, label="Scanned")
    record = make_athlete()

    with caplog.at_level(logging.INFO, logger="gemscout.pool.progress"):
        for _ in range(5):
            counter(record)

    messages = [rec.getMessage() for rec in caplog.records]
    assert messages == ["Scanned: 2/5", "Scanned: 4/5", "Scanned: 5/5"]
    assert counter.done


def test_progress_counter_not_done_until_total_reached():
    counter = ProgressCounter(3)
    counter.advance(2)
    assert counter.count == 2
    assert not counter.done
