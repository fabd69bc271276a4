"""Tests for compute_inventory_stats — pure per-status counting, no IO."""

from medstock.core.inventory_stats import compute_inventory_stats
from tests.factories import make_record


def test_empty_records_return_zero_stats():
    assert compute_inventory_stats([]) == {
        "total": 0,
        "expired": 0,
        "near_expiry": 0,
        "out_of_stock": 0,
        "low_stock": 0,
        "in_stock": 0,
    }


def test_counts_each_status_label():
    records = [
        make_record("A", status="EXPIRED"),
        make_record("B", status="EXPIRED"),
        make_record("C", status="NEAR EXPIRY"),
        make_record("D", status="LOW STOCK"),
    ]
    stats = compute_inventory_stats(records)
    assert stats["total"] == 4
    assert stats["expired"] == 2
    assert stats["near_expiry"] == 1
    assert stats["low_stock"] == 1
    assert stats["in_stock"] == 0


def test_unknown_status_folds_into_in_stock():
    stats = compute_inventory_stats([make_record(status="QUARANTINED")])
    assert stats["in_stock"] == 1
    assert stats["total"] == 1


def test_buckets_sum_to_total():
    records = [make_record(str(i), status=s) for i, s in enumerate(
        ["IN STOCK", "OUT OF STOCK", "LOW STOCK", "EXPIRED", "WHATEVER"],
    )]
    stats = compute_inventory_stats(records)
    assert sum(v for k, v in stats.items() if k != "total") == stats["total"]
