"""Tests for identifier quoting and qualification."""

import pytest

from pgviews.errors import MalformedIdentifier
from pgviews.identifiers import (
    PostgresIdentifierQuoter,
    is_bare_identifier,
    pg_identifier,
    qualify,
)


class BracketQuoter:
    def quote(self, name: str) -> str:
        return f"[{name}]"


class TestBareIdentifier:
    @pytest.mark.parametrize("name", ["users", "_tmp", "Orders2", "a_b_c", "X"])
    def test_bare(self, name):
        assert is_bare_identifier(name)

    @pytest.mark.parametrize(
        "name", ["Weird-Name", "2fast", "has space", 'q"uote', "café", "a.b", "x\n"]
    )
    def test_not_bare(self, name):
        assert not is_bare_identifier(name)


class TestPgIdentifier:
    """Test quoting of a single name."""

    def test_bare_name_is_unchanged(self):
        assert pg_identifier("active_users") == "active_users"

    def test_mixed_case_bare_name_is_unchanged(self):
        assert pg_identifier("ActiveUsers") == "ActiveUsers"

    def test_non_bare_name_is_double_quoted(self):
        assert pg_identifier("Weird-Name") == '"Weird-Name"'

    def test_embedded_quotes_are_doubled(self):
        assert pg_identifier('say "hi"') == '"say ""hi"""'

    def test_custom_quoter_is_used_only_when_needed(self):
        quoter = BracketQuoter()
        assert pg_identifier("plain", quoter) == "plain"
        assert pg_identifier("not plain", quoter) == "[not plain]"

    def test_empty_name_is_rejected(self):
        with pytest.raises(MalformedIdentifier):
            pg_identifier("")

    def test_nul_byte_is_rejected(self):
        with pytest.raises(MalformedIdentifier) as exc_info:
            pg_identifier("bad\x00name")
        assert exc_info.value.value == "bad\x00name"


class TestQualify:
    """Test schema qualification."""

    def test_public_namespace_is_omitted(self):
        assert qualify("public", "active_users") == "active_users"

    def test_public_namespace_quoted_name_has_no_separator(self):
        result = qualify("public", "Weird-Name")
        assert result == '"Weird-Name"'
        assert "." not in result

    def test_other_namespace_is_prefixed(self):
        assert qualify("reports", "daily") == "reports.daily"

    def test_parts_are_quoted_independently(self):
        assert qualify("reports", "Weird-Name") == 'reports."Weird-Name"'
        assert qualify("My Schema", "daily") == '"My Schema".daily'
        assert qualify("My Schema", "Weird-Name") == '"My Schema"."Weird-Name"'

    def test_public_is_only_special_when_exact(self):
        assert qualify("Public", "v") == "Public.v"

    def test_custom_quoter(self):
        assert qualify("a-b", "c", BracketQuoter()) == "[a-b].c"

    def test_empty_namespace_is_rejected(self):
        with pytest.raises(MalformedIdentifier):
            qualify("", "daily")


class TestPostgresIdentifierQuoter:
    def test_quotes_without_connection(self):
        assert PostgresIdentifierQuoter().quote("Weird-Name") == '"Weird-Name"'
