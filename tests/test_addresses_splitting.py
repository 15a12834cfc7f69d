"""
Tests for splitting address lists into single entries.
"""

import pytest

from RVmail.addresses import splitting
from RVmail.addresses.splitting import (
    extract_email_addresses,
    split_address_list,
    tokenize_address_list,
)
from RVmail.connection.exceptions import InvalidArgumentError


BOTH = pytest.mark.parametrize("strategy", ["heuristic", "scanner"])


class TestCommonBehaviour:
    """Behaviour shared by both split strategies."""

    @BOTH
    def test_simple_list(self, strategy):
        """Test plain addresses separated by a comma."""
        assert split_address_list("a@b.com, c@d.com", strategy) == ["a@b.com", "c@d.com"]

    @BOTH
    def test_named_entries_kept_whole(self, strategy):
        """Test 'Name <addr>' entries survive the split intact."""
        result = split_address_list(
            "Jane Doe <jane@x.com>, John Smith <john@y.com>", strategy
        )
        assert result == ["Jane Doe <jane@x.com>", "John Smith <john@y.com>"]

    @BOTH
    def test_comma_inside_unquoted_name_not_split(self, strategy):
        """Test a comma in a display name is not treated as a separator."""
        assert split_address_list("Doe, Jane <jane@x.com>", strategy) == ["Doe, Jane <jane@x.com>"]

    @BOTH
    def test_comma_inside_quoted_name_not_split(self, strategy):
        """Test quoted names with commas followed by another address."""
        result = split_address_list('"Doe, Jane" <jane@x.com>, bob@y.com', strategy)
        assert result == ['"Doe, Jane" <jane@x.com>', "bob@y.com"]

    @BOTH
    def test_trailing_delimiter_ignored(self, strategy):
        """Test a list ending in a separator."""
        assert split_address_list("a@b.com;", strategy) == ["a@b.com"]
        assert split_address_list("a@b.com ; ", strategy) == ["a@b.com"]

    @BOTH
    def test_mixed_separators(self, strategy):
        """Test commas and semicolons in the same list."""
        result = split_address_list("a@b.com; Carl <c@d.com>, e@f.com", strategy)
        assert result == ["a@b.com", "Carl <c@d.com>", "e@f.com"]

    @BOTH
    def test_single_address_trimmed(self, strategy):
        """Test a lone address comes back trimmed."""
        assert split_address_list("   a@b.com \t", strategy) == ["a@b.com"]

    @BOTH
    def test_consecutive_delimiters_yield_no_empty_entries(self, strategy):
        """Test doubled separators do not create empty entries or leftovers."""
        assert split_address_list("a@b.com,, c@d.com", strategy) == ["a@b.com", "c@d.com"]
        assert split_address_list("a@b.com;;c@d.com;", strategy) == ["a@b.com", "c@d.com"]

    @BOTH
    def test_order_preserved(self, strategy):
        """Test entries come back in input order."""
        addresses = [f"user{i}@example.com" for i in range(10)]
        assert split_address_list(", ".join(addresses), strategy) == addresses

    @BOTH
    @pytest.mark.parametrize("blank", ["", "   ", "\n\t", None])
    def test_blank_input_rejected(self, strategy, blank):
        """Test empty or whitespace-only input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            split_address_list(blank, strategy)

    @BOTH
    def test_entries_never_contain_token(self, strategy):
        """Test the internal separator token never leaks into entries."""
        result = split_address_list("A <a@b.com>; B <b@c.com>, c@d.com;", strategy)
        assert all(splitting.TOKEN not in entry for entry in result)


class TestHeuristic:
    """Tests specific to the tail-anchored splitter."""

    def test_blank_is_value_error(self):
        """Test InvalidArgumentError is also a ValueError."""
        with pytest.raises(ValueError):
            extract_email_addresses("  ")

    def test_quoted_name_ending_like_address_is_split(self):
        """Test the known limitation: a name ending in 'x@y>,' is split."""
        result = extract_email_addresses('"foo@bar.com>, x" <real@x.com>')
        assert len(result) == 2


class TestScanner:
    """Tests specific to the depth-tracking scanner."""

    def test_quoted_name_ending_like_address_is_kept(self):
        """Test a quoted name containing 'x@y>,' stays one entry."""
        entry = '"foo@bar.com>, x" <real@x.com>'
        assert tokenize_address_list(entry) == [entry]

    def test_comment_with_comma(self):
        """Test commas inside (comments) are not separators."""
        result = tokenize_address_list("bob@y.com (Bob, the builder), c@d.com")
        assert result == ["bob@y.com (Bob, the builder)", "c@d.com"]

    def test_escaped_quote_in_name(self):
        """Test an escaped quote does not end the quoted name."""
        entry = r'"Doe \", Jane" <jane@x.com>'
        assert tokenize_address_list(entry + "; bob@y.com") == [entry, "bob@y.com"]

    def test_at_inside_quotes_does_not_arm_separator(self):
        """Test an '@' inside a quoted name alone does not allow a split."""
        entry = '"jane@home", Jane <jane@x.com>'
        assert tokenize_address_list(entry) == [entry]

    def test_leading_delimiters_dropped(self):
        """Test separators before the first address are ignored."""
        assert tokenize_address_list(" ;, a@b.com") == ["a@b.com"]


class TestStrategySelection:
    """Test choosing between strategies."""

    def test_default_is_scanner(self):
        """Test the default strategy keeps tricky quoted names whole."""
        assert splitting.DEFAULT_SPLIT_STRATEGY == "scanner"
        assert len(split_address_list('"foo@bar.com>, x" <real@x.com>')) == 1

    def test_unknown_strategy_rejected(self):
        """Test an unknown strategy name raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Unknown address split strategy"):
            split_address_list("a@b.com", "regex")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
