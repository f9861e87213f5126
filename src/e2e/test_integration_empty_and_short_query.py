from pathlib import Path
import pytest
from wordfind.engine import Engine

def _seed(tmp: Path) -> str:
    p = tmp / "short.txt"
    p.write_text("a\nan\nI\nat\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_empty_and_single_char_query(tmp_path: Path):
    eng = Engine(workers=1)
    try:
        eng.load(_seed(tmp_path))
        empty = eng.rank("", 5)
        assert isinstance(empty, list) and empty == []
        single = eng.rank("a", 5)
        assert [r.word for r in single][:1] == ["a"]
        assert eng.rank("a", 0) == []
    finally:
        eng.shutdown()
