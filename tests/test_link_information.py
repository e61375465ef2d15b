"""
Unit tests for LinkInformation URL composition.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from builder.exceptions import InvalidArgumentError
from builder.link_information import LinkInformation, flatten_query_pairs


class TestLiteralShape:
    """Test recipes built from a raw relative URL."""

    @pytest.mark.parametrize("raw_relative_url,expected", [
        ("dingle/ball?value1=1&value2=2", "dingle/ball?value1=1&value2=2"),
        ("  dingle  ", "dingle"),
        ("", ""),
        ("\t", ""),
        (None, ""),
    ])
    def test_relative_url_is_trimmed(self, raw_relative_url, expected):
        """Test that the literal URL is used verbatim once trimmed."""
        information = LinkInformation.from_relative_url(raw_relative_url)

        assert information.is_literal
        assert information.get_url() == expected

    def test_literal_is_encoded_on_request(self):
        """Test that encoding applies to literal URLs as well."""
        information = LinkInformation.from_relative_url("dingle ball/x")

        assert information.get_url(encode=True) == "dingle+ball%2Fx"
        assert information.get_url() == "dingle ball/x"


class TestComposedShape:
    """Test recipes built from route segments and query pairs."""

    @pytest.mark.parametrize("route_items,expected", [
        (["a", "b", "c"], "a/b/c"),
        (["relative2", "ball", "dingle", 2], "relative2/ball/dingle/2"),
        (["a", "  ", "", "c"], "a/c"),
        ([" a ", " b "], "a/b"),
    ])
    def test_route_items_join_with_slash(self, route_items, expected):
        """Test that non-blank route segments are joined with '/'."""
        assert LinkInformation.from_items(route_items=route_items).get_url() == expected

    def test_query_items_without_route(self):
        """Test a query-only recipe."""
        information = LinkInformation.from_items(query_items=["k1", "v1", "k2", "v2"])

        assert information.get_url() == "?k1=v1&k2=v2"

    def test_route_and_query(self):
        """Test that the query string follows the route."""
        information = LinkInformation.from_items(route_items=["base"], query_items=["k", 1])

        assert information.get_url() == "base?k=1"

    def test_odd_query_items_pad_last_value(self):
        """Test that a missing final value becomes empty."""
        information = LinkInformation.from_items(route_items=["base"], query_items=["k1", "v1", "k2"])

        assert information.get_url() == "base?k1=v1&k2="

    def test_none_query_value_is_empty(self):
        """Test that a None value is rendered empty."""
        information = LinkInformation.from_items(route_items=["base"], query_items=["k", None])

        assert information.get_url() == "base?k="

    def test_no_trailing_separator_without_query_pairs(self):
        """Test that '?' is never emitted for an empty query."""
        information = LinkInformation.from_items(route_items=["base"], query_items=[])

        assert information.get_url() == "base"

    def test_relative_prefix_joins_route(self):
        """Test that a relative prefix and route segments get one separator."""
        information = LinkInformation.from_items(route_items=["x"], relative_url="api/")

        assert information.get_url() == "api/x"

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_blank_query_name_is_rejected(self, name):
        """Test that query names must not be blank."""
        information = LinkInformation.from_items(route_items=["base"], query_items=[name, "v"])

        with pytest.raises(InvalidArgumentError) as exc_info:
            information.get_url()
        assert exc_info.value.parameter_name == "query_items"

    def test_encoding_composed_url(self):
        """Test that everything but unreserved characters is encoded."""
        information = LinkInformation.from_items(route_items=["a b"], query_items=["q", "x y"])

        assert information.get_url(encode=True) == "a+b%3Fq%3Dx+y"
        assert information.get_url(encode=False) == "a b?q=x y"

    def test_get_url_is_repeatable(self):
        """Test that resolving does not change the recipe."""
        information = LinkInformation.from_items(route_items=["a", "b"], query_items=["k", "v"])

        first = information.get_url()
        second = information.get_url()

        assert first == second == "a/b?k=v"
        assert information.route_items == ["a", "b"]
        assert information.query_items == ["k", "v"]


class TestWithQueryItems:
    """Test folding extra query pairs into a recipe."""

    def test_literal_gains_query_string(self):
        """Test that a literal URL gets '?' before new pairs."""
        information = LinkInformation.from_relative_url("relativeUrl").with_query_items(["name", "value"])

        assert information.get_url() == "relativeUrl?name=value"

    def test_existing_query_string_is_extended(self):
        """Test that '&' is used when the URL already carries a query."""
        information = LinkInformation.from_relative_url("dingle?x=1").with_query_items(["a", "b"])

        assert information.get_url() == "dingle?x=1&a=b"

    def test_source_recipe_is_unchanged(self):
        """Test that folding returns a copy."""
        source = LinkInformation.from_items(route_items=["base"], query_items=["k1", "v1"])
        extended = source.with_query_items(["k2", "v2"])

        assert source.get_url() == "base?k1=v1"
        assert extended.get_url() == "base?k1=v1&k2=v2"

    def test_external_base_is_kept(self):
        """Test that folding keeps the external base URL."""
        information = LinkInformation.from_relative_url("p", external_base_url="http://meyer.com")
        extended = information.with_query_items(["k", "v"])

        assert extended.is_external
        assert extended.external_base_url == "http://meyer.com"


class TestFlattenQueryPairs:
    """Test flattening of name/value sequences."""

    def test_pairs_keep_their_order(self):
        """Test that no implicit sorting happens."""
        assert flatten_query_pairs(["k2", "v2", "k1", "v1"]) == ["k2=v2", "k1=v1"]

    def test_values_are_trimmed(self):
        """Test that names and values are trimmed."""
        assert flatten_query_pairs([" k ", " v "]) == ["k=v"]

    def test_empty_sequence(self):
        """Test that nothing in gives nothing out."""
        assert flatten_query_pairs([]) == []
