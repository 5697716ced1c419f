"""
Tests for scheduler stats payload parsing.
"""

import pytest

from icejobs.errors import StatsParseError
from icejobs.monitor import parse_host_stats, parse_stats


class TestParseStats:
    """Tests for splitting KEY:VALUE payloads."""

    def test_parses_newline_separated_pairs(self):
        """Each line becomes one key/value pair."""
        stats = parse_stats("IP:10.0.0.1\nMaxJobs:4\nName:worker-1")

        assert stats == {
            "IP": "10.0.0.1",
            "MaxJobs": "4",
            "Name": "worker-1",
        }

    def test_value_keeps_text_after_first_colon(self):
        """Only the first colon on a line separates key from value."""
        stats = parse_stats("Platform:x86_64:linux\nIP:fe80::1")

        assert stats["Platform"] == "x86_64:linux"
        assert stats["IP"] == "fe80::1"

    def test_first_occurrence_of_key_wins(self):
        """A repeated key does not overwrite the earlier value."""
        stats = parse_stats("IP:10.0.0.1\nIP:10.0.0.2")

        assert stats["IP"] == "10.0.0.1"

    def test_trailing_newline_is_ignored(self):
        """A payload ending in a newline parses like one without."""
        assert parse_stats("IP:10.0.0.1\n") == {"IP": "10.0.0.1"}

    def test_empty_value_is_kept(self):
        """A key followed by an empty line maps to an empty string."""
        stats = parse_stats("Load:\nIP:10.0.0.1")

        assert stats == {"Load": "", "IP": "10.0.0.1"}

    def test_key_with_nothing_after_colon_at_end_is_dropped(self):
        """A dangling key at the very end of the payload is discarded."""
        assert parse_stats("IP:10.0.0.1\nMaxJobs:") == {"IP": "10.0.0.1"}

    def test_empty_payload(self):
        """Nothing to parse yields no pairs."""
        assert parse_stats("") == {}

    def test_line_without_colon_runs_into_next_key(self):
        """Text without a colon becomes part of the following key."""
        stats = parse_stats("garbage\nIP:10.0.0.1")

        assert "IP" not in stats
        assert stats["garbage\nIP"] == "10.0.0.1"


class TestParseHostStats:
    """Tests for extracting host identity and capacity."""

    def test_extracts_ip_and_max_jobs(self):
        """IP and MaxJobs are required and decoded."""
        host_stats = parse_host_stats("IP:10.0.0.1\nMaxJobs:8\nLoad:120")

        assert host_stats.ip == "10.0.0.1"
        assert host_stats.max_jobs == 8
        assert host_stats.fields["Load"] == "120"

    def test_max_jobs_allows_surrounding_whitespace(self):
        """Whitespace and carriage returns around the count are tolerated."""
        host_stats = parse_host_stats("IP:10.0.0.1\nMaxJobs: 16\r")

        assert host_stats.max_jobs == 16

    def test_zero_max_jobs(self):
        """A host advertising no capacity is still a valid report."""
        assert parse_host_stats("IP:10.0.0.1\nMaxJobs:0").max_jobs == 0

    def test_missing_ip_raises(self):
        """A report without IP fails."""
        with pytest.raises(StatsParseError) as error:
            parse_host_stats("MaxJobs:4")

        assert error.value.reason == "missing IP"

    def test_missing_max_jobs_raises(self):
        """A report without MaxJobs fails."""
        with pytest.raises(StatsParseError) as error:
            parse_host_stats("IP:10.0.0.1")

        assert error.value.reason == "missing MaxJobs"

    @pytest.mark.parametrize("max_jobs", ["four", "-4", "4.5", "", "4x"])
    def test_non_numeric_max_jobs_raises(self, max_jobs: str):
        """MaxJobs must be an unsigned decimal integer."""
        with pytest.raises(StatsParseError):
            parse_host_stats(f"IP:10.0.0.1\nMaxJobs:{max_jobs}\nLoad:1")
