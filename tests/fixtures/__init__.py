"""Sample wger payloads shared by the test suite."""

import json
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent


def load_bytes(name: str) -> bytes:
    return (FIXTURES_DIR / f"{name}.json").read_bytes()


def load_json(name: str) -> dict:
    return json.loads(load_bytes(name))
