"""
Validation rule engine and rule configuration.
"""

from .rule_config import RuleConfigBuilder, default_mission_rules
from .rule_engine import RuleEngine

__all__ = [
    "RuleEngine",
    "RuleConfigBuilder",
    "default_mission_rules",
]
