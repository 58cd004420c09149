from collections.abc import Callable

import pytest

from monkey.monkey_ast import Program
from monkey.monkey_parser import parse


@pytest.fixture  # type: ignore[misc]
def parse_ok() -> Callable[[str], Program]:
    """Parses source and fails the test if the parser recorded any errors."""

    def _parse(source: str) -> Program:
        program, errors = parse(source)
        assert errors == [], f"parser had {len(errors)} errors: {errors}"
        return program

    return _parse
