from pathlib import Path
from uuid import UUID, uuid4

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


class RecordingStorage:
    """
    FileUrlPort fake that records every call and returns a CDN-style URL.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[UUID, str, str, str]] = []

    def build_file_url(
        self,
        owner_id: UUID,
        path_separator: str,
        file_name: str,
        query_suffix: str,
    ) -> str:
        self.calls.append((owner_id, path_separator, file_name, query_suffix))
        return f"https://cdn.example.com/{owner_id}{path_separator}{file_name}{query_suffix}"


@pytest.fixture
def rules() -> Rules:
    """
    Loads the REAL rules file from the project root.
    """
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def owner_id() -> UUID:
    return uuid4()
