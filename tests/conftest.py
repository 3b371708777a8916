"""Root test configuration: shared MM sources and a file-writing helper"""

from pathlib import Path

import pytest


SAMPLE_MM = """\
[META: version=1; author=Jo]
# Welcome :star:

Some **bold *and italic* text** with `code`.

## Steps
- open the _app_
- tap [LINK: Start|app://start]
1. first
2. second

> Stay **curious**
---
[IMAGE: pic|A cat]
```
def f():
    return 1
```
"""


@pytest.fixture(name="sample_mm")
def sample_mm_fixture() -> str:
    return SAMPLE_MM


@pytest.fixture(name="write_mm")
def write_mm_fixture(tmp_path):
    """Return a helper that writes text to tmp_path/<name> and returns the path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
