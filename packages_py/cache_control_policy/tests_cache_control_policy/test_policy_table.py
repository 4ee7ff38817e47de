"""
Tests for the policy table.
Following logic testing methodologies:
- Decision and Path Coverage
- Boundary Value Analysis
- Error Handling
"""
from datetime import timedelta

import pytest

from cache_control_policy import (
    DEFAULT_CACHE_CONTROL_POLICY_CONFIG,
    DEFAULT_DIRECTIVE,
    DEFAULT_MAX_AGE_SECONDS,
    DEFAULT_STATIC_MIME_TYPES,
    CacheControlPolicyConfig,
    CacheControlPolicyError,
    InvalidDirectiveError,
    InvalidMaxAgeError,
    InvalidMimeTypeError,
    KnownMimeType,
    MimeTypePattern,
    PolicyRule,
    PolicyTable,
    create_policy_table,
    merge_cache_control_policy_config,
    static_asset_rules,
)


class TestPolicyTable:
    """Tests for PolicyTable."""

    class TestConstruction:
        def test_rules_parsed_in_order(self):
            table = PolicyTable([("text/html", "no-cache"), ("image/*", "public")], default="no-store")

            assert [str(r.pattern) for r in table.rules] == ["text/html", "image/*"]
            assert table.default == "no-store"
            assert len(table) == 2

        def test_accepts_policy_rules(self):
            rule = PolicyRule(MimeTypePattern("font", "woff2"), "public, max-age=60")
            table = PolicyTable([rule], default="no-cache")

            assert table.rules == (rule,)

        def test_accepts_known_mime_types(self):
            table = PolicyTable([(KnownMimeType.CSS, "public")])
            assert table.resolve("text/css") == "public"

        def test_default_only(self):
            table = PolicyTable(default="no-store")
            assert table.rules == ()
            assert table.resolve("text/html") == "no-store"

        def test_directives_are_stripped(self):
            table = PolicyTable([("text/html", " no-cache ")], default=" no-store ")
            assert table.rules[0].directive == "no-cache"
            assert table.default == "no-store"

        def test_invalid_pattern_raises(self):
            with pytest.raises(InvalidMimeTypeError):
                PolicyTable([("not a mime", "no-cache")])

        def test_empty_directive_raises(self):
            with pytest.raises(InvalidDirectiveError):
                PolicyTable([("text/html", "")])

        def test_empty_default_raises(self):
            with pytest.raises(InvalidDirectiveError):
                PolicyTable([], default="")

        def test_malformed_rule_raises(self):
            with pytest.raises(CacheControlPolicyError):
                PolicyTable([("text/html",)])

        def test_is_immutable(self):
            table = PolicyTable([("text/html", "no-cache")])

            with pytest.raises(AttributeError):
                table._default = "public"
            with pytest.raises(AttributeError):
                table.rules.append(None)

        def test_repr(self):
            table = PolicyTable([("text/html", "no-cache")], default="no-store")
            assert repr(table) == "PolicyTable([text/html='no-cache'], default='no-store')"

    class TestResolve:
        def test_exact_match(self, scenario_table):
            assert scenario_table.resolve("text/html; charset=utf-8") == "no-cache"

        def test_category_match(self, scenario_table):
            assert scenario_table.resolve("image/jpeg") == "public, max-age=86400"

        def test_no_match_uses_default(self, scenario_table):
            assert scenario_table.resolve("application/json") == "no-store"

        def test_missing_content_type_uses_default(self, scenario_table):
            assert scenario_table.resolve(None) == "no-store"

        @pytest.mark.parametrize("value", ["", "garbage", "text/", "image/*", "text / html"])
        def test_malformed_content_type_uses_default(self, scenario_table, value):
            assert scenario_table.resolve(value) == "no-store"

        def test_case_insensitive(self, scenario_table):
            assert scenario_table.resolve("TEXT/HTML") == "no-cache"
            assert scenario_table.resolve("Image/PNG") == "public, max-age=86400"

        def test_category_does_not_cross_types(self, scenario_table):
            assert scenario_table.resolve("application/png") == "no-store"

        def test_first_matching_rule_wins(self):
            table = PolicyTable(
                [("image/*", "public, max-age=60"), ("image/png", "public, max-age=3600")],
                default="no-store",
            )
            assert table.resolve("image/png") == "public, max-age=60"

        def test_exact_before_wildcard(self):
            table = PolicyTable(
                [("image/png", "public, max-age=3600"), ("image/*", "public, max-age=60")],
                default="no-store",
            )
            assert table.resolve("image/png") == "public, max-age=3600"
            assert table.resolve("image/gif") == "public, max-age=60"

        def test_universal_wildcard_shadows_later_rules(self):
            table = PolicyTable(
                [("*/*", "private"), ("text/html", "no-cache")],
                default="no-store",
            )
            assert table.resolve("text/html") == "private"

        def test_universal_wildcard_does_not_catch_missing_type(self):
            table = PolicyTable([("*/*", "private")], default="no-store")
            assert table.resolve(None) == "no-store"

        def test_find_rule(self, scenario_table):
            rule = scenario_table.find_rule("image/gif")
            assert rule is scenario_table.rules[1]
            assert scenario_table.find_rule("application/json") is None


class TestStaticAssetRules:
    def test_defaults(self):
        rules = static_asset_rules()

        assert [p for p, _ in rules] == [m.value for m in DEFAULT_STATIC_MIME_TYPES]
        assert all(d == "public, max-age=31536000" for _, d in rules)

    def test_custom_mime_types_and_max_age(self):
        rules = static_asset_rules([KnownMimeType.CSS, "font/*"], max_age=timedelta(days=1))
        assert rules == [
            ("text/css", "public, max-age=86400"),
            ("font/*", "public, max-age=86400"),
        ]

    def test_zero_max_age(self):
        assert static_asset_rules(["text/css"], max_age=0) == [("text/css", "public, max-age=0")]

    def test_negative_max_age_raises(self):
        with pytest.raises(InvalidMaxAgeError):
            static_asset_rules(max_age=-1)

    def test_infinite_max_age_raises(self):
        with pytest.raises(InvalidMaxAgeError):
            static_asset_rules(max_age=float("inf"))


class TestMergeConfig:
    def test_none_returns_preset_copy(self):
        merged = merge_cache_control_policy_config(None)

        assert merged.rules == DEFAULT_CACHE_CONTROL_POLICY_CONFIG.rules
        assert merged.rules is not DEFAULT_CACHE_CONTROL_POLICY_CONFIG.rules
        assert merged.default == DEFAULT_DIRECTIVE

    def test_none_fields_take_preset(self):
        merged = merge_cache_control_policy_config(CacheControlPolicyConfig(rules=None, default="no-store"))
        assert merged.rules == DEFAULT_CACHE_CONTROL_POLICY_CONFIG.rules
        assert merged.default == "no-store"

    def test_empty_rules_preserved(self):
        merged = merge_cache_control_policy_config(CacheControlPolicyConfig(rules=[], default=None))
        assert merged.rules == []
        assert merged.default == DEFAULT_DIRECTIVE


class TestCreatePolicyTable:
    def test_default_preset(self):
        table = create_policy_table()

        assert len(table) == len(DEFAULT_STATIC_MIME_TYPES)
        assert table.resolve("text/css") == f"public, max-age={DEFAULT_MAX_AGE_SECONDS}"
        assert table.resolve("font/woff2") == "public, max-age=31536000"
        assert table.resolve("text/html") == "no-cache"

    def test_from_config(self):
        config = CacheControlPolicyConfig(
            rules=[("text/html", "no-cache"), ("image/*", "public, max-age=86400")],
            default="no-store",
        )
        table = create_policy_table(config)

        assert table.resolve("image/jpeg") == "public, max-age=86400"
        assert table.resolve("application/json") == "no-store"

    def test_invalid_config_fails_fast(self):
        with pytest.raises(InvalidMimeTypeError):
            create_policy_table(CacheControlPolicyConfig(rules=[("*/html", "no-cache")]))
