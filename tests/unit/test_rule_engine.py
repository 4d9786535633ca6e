"""
Unit tests for rule engine and rule configuration.
"""

import pytest

from mission_analyzer.core.models import FIELD_NAMES, LogEntry
from mission_analyzer.core.rules import RuleConfigBuilder, RuleEngine, default_mission_rules


def make_entry(line_number=1, **overrides) -> LogEntry:
    fields = dict(zip(FIELD_NAMES, [
        "2045-07-12", "KLM-1234", "Mars", "Completed", "5", "387", "98.7", "TRX-842-YHG",
    ]))
    fields.update(overrides)
    return LogEntry(line_number=line_number, fields=fields)


@pytest.mark.unit
class TestRuleEngine:
    """Tests for RuleEngine with the default mission rules"""

    def test_valid_entry_passes_and_coerces_duration(self):
        engine = RuleEngine(default_mission_rules())

        result = engine.validate_entry(make_entry())

        assert result.passed is True
        assert result.failed_rules == []
        assert result.values["duration_days"] == 387
        assert result.values["crew_size"] == "5"
        assert result.transformations_applied == ["duration_days_str_to_int"]
        assert result.passed_rules == [
            "duration_days_type_check", "duration_days_range", "security_code_regex",
        ]

    def test_negative_duration_fails_range(self):
        engine = RuleEngine(default_mission_rules())

        result = engine.validate_entry(make_entry(duration_days="-5"))

        assert result.passed is False
        assert result.failed_rules == ["duration_days_range"]
        assert "greater than 0" in result.error_messages[0]

    def test_unparsable_duration_fails_type_check(self):
        engine = RuleEngine(default_mission_rules())

        result = engine.validate_entry(make_entry(duration_days="many"))

        assert result.failed_rules == ["duration_days_type_check"]

    def test_lowercase_code_fails_regex(self):
        engine = RuleEngine(default_mission_rules())

        result = engine.validate_entry(make_entry(security_code="xrt-421-zqp"))

        assert result.passed is False
        assert result.failed_rules == ["security_code_regex"]

    def test_fail_fast_reports_duration_before_code(self):
        engine = RuleEngine(default_mission_rules())

        result = engine.validate_entry(make_entry(duration_days="0", security_code="bad"))

        assert result.failed_rules == ["duration_days_range"]
        assert "security_code_regex" not in result.passed_rules

    def test_collect_all_failures_without_fail_fast(self):
        engine = RuleEngine(default_mission_rules(), fail_fast=False)

        result = engine.validate_entry(make_entry(duration_days="0", security_code="bad"))

        assert result.failed_rules == ["duration_days_range", "security_code_regex"]
        assert len(result.error_messages) == 2

    def test_disabled_rules_are_skipped(self):
        rules = default_mission_rules()
        for rule in rules:
            if rule["rule_type"] == "regex":
                rule["enabled"] = False

        engine = RuleEngine(rules)
        result = engine.validate_entry(make_entry(security_code="bad"))

        assert result.passed is True

    def test_unknown_rule_type_rejected(self):
        rules = [{"rule_name": "r", "rule_type": "checksum", "field_name": "security_code"}]

        with pytest.raises(ValueError, match="Unknown rule type"):
            RuleEngine(rules)

    def test_bad_parameters_reported_with_rule_name(self):
        rules = [{"rule_name": "broken_range", "rule_type": "range", "field_name": "duration_days"}]

        with pytest.raises(ValueError, match="broken_range"):
            RuleEngine(rules)

    def test_rule_summary(self):
        engine = RuleEngine(default_mission_rules())

        summary = engine.get_rule_summary()

        assert summary["total_rules"] == 3
        assert summary["rules_by_type"] == {"type_check": 1, "range": 1, "regex": 1}


@pytest.mark.unit
class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_builder_preserves_order(self):
        rules = RuleConfigBuilder() \
            .add_type_check("crew_size") \
            .add_range("crew_size", min_exclusive=0) \
            .build()

        assert [rule["rule_name"] for rule in rules] == ["crew_size_type_check", "crew_size_range"]
        assert rules[0]["parameters"] == {"expected_type": "int"}
        assert rules[1]["parameters"] == {"min_exclusive": 0}

    def test_custom_rules_extend_validation(self):
        rules = RuleConfigBuilder() \
            .add_type_check("crew_size") \
            .add_range("crew_size", min_exclusive=0) \
            .build()
        engine = RuleEngine(rules)

        assert engine.validate_entry(make_entry(crew_size="5")).passed is True
        assert engine.validate_entry(make_entry(crew_size="0")).passed is False

    def test_build_returns_a_copy(self):
        builder = RuleConfigBuilder().add_regex("security_code", "[A-Z]+")
        rules = builder.build()
        rules.clear()
        assert len(builder.build()) == 1
