"""
Configuration resolution: rules file plus environment overrides.

GRADEBOOK_RULES_PATH  rules file location (default: rules.yaml)
GRADEBOOK_DATA_DIR    overrides storage.data_dir from the rules file
"""

import logging
import os
from pathlib import Path

from gradebook.components.validation import ValidationLimits
from gradebook.rules.loader import load_rules
from gradebook.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "GRADEBOOK_RULES_PATH"
DATA_DIR_ENV = "GRADEBOOK_DATA_DIR"
DEFAULT_RULES_PATH = "rules.yaml"


def resolve_rules(
    rules_path: str | Path | None = None,
    data_dir: str | Path | None = None,
) -> Rules:
    """
    Load rules and apply overrides.

    An explicitly named rules file (argument or environment) must exist;
    a missing default rules.yaml just means built-in defaults.
    """
    explicit = rules_path or os.environ.get(RULES_PATH_ENV)
    path = Path(explicit or DEFAULT_RULES_PATH)

    if path.exists() or explicit:
        rules = load_rules(path)
    else:
        logger.info("No %s found, using default rules", path)
        rules = Rules()

    override = data_dir or os.environ.get(DATA_DIR_ENV)
    if override:
        storage = rules.storage.model_copy(update={"data_dir": str(override)})
        rules = rules.model_copy(update={"storage": storage})

    return rules


def validation_limits(rules: Rules) -> ValidationLimits:
    return ValidationLimits(
        name_min_length=rules.validation.name_min_length,
        score_min=rules.validation.score_min,
        score_max=rules.validation.score_max,
    )
