import io

import pytest

from cowpuzzles.bucket_list import main, max_buckets


@pytest.mark.parametrize(
    ("buckets", "want"),
    [
        ({4: 1, 10: -1, 8: 3, 13: -3, 2: 2, 6: -2}, 4),
        ({2: 2, 15: -2, 4: 1, 6: -1, 3: 3, 16: -3}, 6),
    ],
    ids=["sample input", "one more"],
)
def test_max_buckets_cases(buckets, want):
    assert max_buckets(buckets) == want


def test_empty_schedule_needs_no_buckets():
    assert max_buckets({}) == 0


def test_peak_is_never_negative():
    assert max_buckets({1: -5, 2: -1}) == 0


def test_single_cow_needs_its_own_buckets():
    assert max_buckets({3: 7, 9: -7}) == 7


def test_insertion_order_does_not_matter():
    forward = {2: 2, 4: 1, 6: -2, 8: 3, 10: -1, 13: -3}
    backward = dict(reversed(list(forward.items())))
    assert max_buckets(forward) == max_buckets(backward)


def test_main_prints_sample_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n4 10 1\n8 13 3\n2 6 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Max required buckets: 4\n"