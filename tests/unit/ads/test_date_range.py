from datetime import date

import pytest

from socialhub.ads.date_range import relative_window_days, resolve_window, window_for
from socialhub.ads.units import fraction_to_percent, micros_to_units, sum_action_values, to_float, to_int


class TestRelativeWindow:
    @pytest.mark.parametrize(
        "label,days",
        [
            ("LAST_30_DAYS", 30),
            ("last_7_days", 7),
            ("last 14 days", 14),
            ("Last-90-Days", 90),
            ("LAST_1_DAY", 1),
        ],
    )
    def test_relative_labels(self, label, days):
        assert relative_window_days(label) == days

    @pytest.mark.parametrize("label", ["THIS_MONTH", "yesterday", "maximum", "LAST_MONTH"])
    def test_vendor_labels(self, label):
        assert relative_window_days(label) is None

    def test_window_for(self):
        window = window_for(30, date(2024, 3, 31))

        assert window.start_iso == "2024-03-01"
        assert window.end_iso == "2024-03-31"

    def test_resolve_uses_default_for_vendor_label(self):
        window = resolve_window("THIS_MONTH", date(2024, 3, 31))

        assert window.start == date(2024, 3, 24)


class TestUnits:
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_values_are_zero(self, value):
        assert to_float(value) == 0.0
        assert to_int(value) == 0
        assert micros_to_units(value) == 0.0

    def test_micros(self):
        assert micros_to_units("5000000") == 5.0
        assert micros_to_units(1_250_000) == 1.25

    def test_fraction_to_percent(self):
        assert fraction_to_percent(0.024) == pytest.approx(2.4)

    def test_fractional_counts_truncate(self):
        assert to_int("3.7") == 3

    def test_action_values(self):
        actions = [{"action_type": "purchase", "value": "3"}, {"action_type": "lead", "value": "2"}]

        assert sum_action_values(actions) == 5
        assert sum_action_values("4") == 4
        assert sum_action_values(None) == 0
