"""
Rewrite configuration.

Everything that ties the pipeline to one schedule source lives here:
- the trusted calendar host
- the CSV header labels (Swedish, as exported by TimeEdit)
- the labels used when composing event descriptions
- the cohort inclusion rules

The defaults reproduce the DVACD16 schedule. A JSON file can override any
of them, e.g.:

    {
      "cohort": "DVACD17",
      "rules": [
        {"course": "FY1420", "text": "DVACD17", "decision": "include"},
        {"course": "FY1420", "decision": "exclude"}
      ]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Tuple

from calrewrite.errors import ConfigError
from calrewrite.model import ROLES, Decision, FilterRule


DEFAULT_HOST = "se.timeedit.net"
DEFAULT_COHORT = "DVACD16"

# CSV header label -> column role
DEFAULT_LABELS: Dict[str, str] = {
    "Startdatum": "startDate",
    "Starttid": "startTime",
    "Slutdatum": "stopDate",
    "Sluttid": "stopTime",
    "Kurs": "course",
    "Person": "person",
    "Lärare": "person",
    "Lokal": "room",
    "Moment": "type",
    "Undervisningstyp": "type",
    "Text": "text",
    "Information till student": "info",
}

# (field, prefix) in the order the lines appear in a description
DEFAULT_DESCRIPTION_LINES: Tuple[Tuple[str, str], ...] = (
    ("person", "Lärare: "),
    ("course", "Kurs: "),
    ("info", "Info: "),
    ("text", "Text:"),
)

DESCRIPTION_FIELDS = ("course", "person", "room", "type", "text", "info")


def default_rules(cohort: str = DEFAULT_COHORT) -> List[FilterRule]:
    """
    Inclusion policy of the DVACD16 schedule.

    Every rule includes the event; the study session rule also renames it.
    Events of FY1420, MA1446 or group sessions without the cohort tag fall
    through to the default and are kept. To drop them instead, add an
    EXCLUDE rule for the same course or type after each cohort rule.
    """
    return [
        FilterRule(Decision.INCLUDE, course="FY1420", text=cohort),
        FilterRule(Decision.INCLUDE, course="MA1446", text=cohort),
        FilterRule(Decision.INCLUDE, type="Gruppövning", text=cohort),
        FilterRule(Decision.REWRITE, text="räknestuga", title="Räknestuga"),
    ]


@dataclass
class RewriteConfig:
    host: str = DEFAULT_HOST
    cohort: str = DEFAULT_COHORT
    labels: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LABELS))
    description_lines: Tuple[Tuple[str, str], ...] = DEFAULT_DESCRIPTION_LINES
    rules: List[FilterRule] = field(default_factory=default_rules)
    timeout: float = 30.0
    skip_rows: int = 0
    strict_timestamps: bool = False


def _parse_rule(raw: Any) -> FilterRule:
    if not isinstance(raw, dict):
        raise ConfigError(f"Rule must be an object, was: {raw!r}")

    unknown = set(raw) - {"decision", "course", "type", "text", "title"}
    if unknown:
        raise ConfigError(f"Unknown rule keys: {sorted(unknown)}")

    try:
        decision = Decision(str(raw.get("decision", "include")).lower())
    except ValueError:
        raise ConfigError(f"Unknown rule decision: {raw.get('decision')!r}")

    if decision is Decision.REWRITE and not raw.get("title"):
        raise ConfigError("A rewrite rule needs a title")

    return FilterRule(
        decision,
        course=raw.get("course"),
        type=raw.get("type"),
        text=raw.get("text"),
        title=raw.get("title"),
    )


def _parse_labels(raw: Any) -> Dict[str, str]:
    if not isinstance(raw, dict):
        raise ConfigError("labels must be an object of label -> role")
    for label, role in raw.items():
        if role not in ROLES:
            raise ConfigError(f"Unknown column role for label {label!r}: {role!r}")
    return {str(k): str(v) for k, v in raw.items()}


def _parse_description_lines(raw: Any) -> Tuple[Tuple[str, str], ...]:
    if not isinstance(raw, list):
        raise ConfigError("description_lines must be a list of [field, prefix] pairs")
    out: List[Tuple[str, str]] = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ConfigError(f"Invalid description line: {item!r}")
        name, prefix = str(item[0]), str(item[1])
        if name not in DESCRIPTION_FIELDS:
            raise ConfigError(f"Unknown description field: {name!r}")
        out.append((name, prefix))
    return tuple(out)


def config_from_dict(data: Dict[str, Any]) -> RewriteConfig:
    """
    Build a RewriteConfig from a decoded JSON object.

    Rules default to the built-in policy for the configured cohort.
    """
    known = {f.name for f in fields(RewriteConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    config = RewriteConfig()

    if "host" in data:
        config.host = str(data["host"]).strip().lower()
    if "cohort" in data:
        config.cohort = str(data["cohort"])
        config.rules = default_rules(config.cohort)
    if "labels" in data:
        config.labels = _parse_labels(data["labels"])
    if "description_lines" in data:
        config.description_lines = _parse_description_lines(data["description_lines"])
    if "rules" in data:
        if not isinstance(data["rules"], list):
            raise ConfigError("rules must be a list")
        config.rules = [_parse_rule(r) for r in data["rules"]]

    try:
        if "timeout" in data:
            config.timeout = float(data["timeout"])
        if "skip_rows" in data:
            config.skip_rows = int(data["skip_rows"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid number in config: {e}")

    if "strict_timestamps" in data:
        config.strict_timestamps = bool(data["strict_timestamps"])

    return config


def load_config(path: str | Path | None = None) -> RewriteConfig:
    """
    Load configuration from a JSON file, or return the defaults.

    Unlike the defaults, an explicitly given file must exist and be valid.
    """
    if path is None:
        return RewriteConfig()

    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}")
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {config_path}")

    return config_from_dict(data)
