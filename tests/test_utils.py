"""Tests for meshgaze.utils."""

from meshgaze.utils import format_bytes, truncate


class TestFormatBytes:
    def test_zero(self):
        assert format_bytes(0) == "0 B"

    def test_below_threshold_is_verbatim(self):
        for value in (1, 500, 1023, -1, -1023):
            assert format_bytes(value) == f"{value} B"

    def test_fractional_below_threshold(self):
        assert format_bytes(512.5) == "512.5 B"

    def test_integral_float_below_threshold(self):
        assert format_bytes(1000.0) == "1000 B"

    def test_kib(self):
        assert format_bytes(1024) == "1.0 KiB"

    def test_one_and_a_half_kib(self):
        assert format_bytes(1536) == "1.5 KiB"

    def test_mib(self):
        assert format_bytes(1048576) == "1.0 MiB"

    def test_gib(self):
        assert format_bytes(1073741824) == "1.0 GiB"

    def test_negative(self):
        assert format_bytes(-1024) == "-1.0 KiB"

    def test_rounding_promotes_to_next_unit(self):
        # 1048575 B is 1023.999 KiB, which rounds to 1024.0 at one decimal
        assert format_bytes(1048575) == "1.0 MiB"

    def test_largest_unit_caps(self):
        assert format_bytes(1024**9) == "1024.0 YiB"

    def test_si_kilo(self):
        assert format_bytes(1000, si=True) == "1.0 kB"

    def test_si_below_threshold(self):
        assert format_bytes(999, si=True) == "999 B"

    def test_si_mega(self):
        assert format_bytes(2_500_000, si=True) == "2.5 MB"

    def test_precision(self):
        assert format_bytes(1536, precision=2) == "1.50 KiB"
        assert format_bytes(1234567, si=True, precision=3) == "1.235 MB"


class TestTruncate:
    def test_short(self):
        assert truncate("alpha", 10) == "alpha"

    def test_long(self):
        assert truncate("a-very-long-hostname", 8) == "a-very-…"
