from pathlib import Path

import pytest

from casestats.config import Settings
from casestats.schemas import HEADER


SAMPLE_LINES = [
    HEADER,
    "a1,2020-03-01,30,M,CZ010,CZ0100,1,IT,",
    "a2,2020-03-01,5,Z,CZ020,CZ0201,,,",
    "a3,2020-03-15,105,M,CZ020,CZ0201,1,DE,",
    "a4,2020-04-02,106,Z,CZ064,CZ0642,1,IT,1",
    "a5,2021-01-10,80,,CZ064,,,CZ,",
    "a6,,,,,,,,",
    "",
    "a7,2020-02-29,40,M,CZ010,CZ0100,,,",
    "a8,2020-05-01,-1,Z,CZ010,CZ0100,,,",
]


@pytest.fixture()
def sample_lines() -> list[str]:
    return [f"{line}\n" for line in SAMPLE_LINES]


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(app_name="casestats", log_level="WARNING", input_encoding="utf-8")


@pytest.fixture()
def input_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    path = tmp_path / "records.csv"
    with path.open("w", encoding="utf-8") as outfile:
        outfile.writelines(sample_lines)
    return path
