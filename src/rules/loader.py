import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.core.errors import ConfigurationError
from src.rules.models import Rules

logger = logging.getLogger(__name__)

# An unclosed fence runs to the end of the file
_YAML_FENCE_RE = re.compile(
    r"^[ \t]*```ya?ml[^\n]*\n(?P<body>.*?)(?:^[ \t]*```|\Z)",
    re.MULTILINE | re.DOTALL,
)


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Every failure (missing file, bad YAML, schema violation) is a ConfigurationError.
    """
    if not path.exists():
        raise ConfigurationError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules from %s", path)
    return rules


def _strip_markdown_fences(content: str) -> str:
    """
    Return the body of the first ```yaml block, or the content unchanged.
    """
    match = _YAML_FENCE_RE.search(content)
    return match.group("body") if match else content
