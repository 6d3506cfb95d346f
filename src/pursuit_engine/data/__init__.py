"""Set up the data."""

from pathlib import Path

from pydantic_yaml import parse_yaml_file_as

from .models import RuleSet

__all__ = ["data_path", "default_rules", "load_rules"]

data_path = Path(__file__).parent


def load_rules(path: Path | str) -> RuleSet:
    """Load a rule set from a YAML file."""
    return parse_yaml_file_as(RuleSet, path)


default_rules = load_rules(data_path / "rules.yaml")
