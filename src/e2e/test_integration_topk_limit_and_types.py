from pathlib import Path
import pytest
from wordfind.engine import Engine

def _seed(tmp: Path) -> str:
    p = tmp / "t.txt"
    p.write_text("question\nquest\nquestions\nquiet\nquote\nsuggestion\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_topk_limit_and_result_types(tmp_path: Path):
    eng = Engine(workers=1)
    try:
        eng.load(_seed(tmp_path))
        rows = eng.rank("questoin", 2)
        assert isinstance(rows, list)
        assert len(rows) == 2

        r = rows[0]
        assert r.word == "question"
        assert isinstance(r.distance, int) and r.distance == 2
        assert isinstance(r.score, float) and 0.0 < r.score <= 1.0
        # ascending, and the full list extends the truncated one
        assert rows[0].score <= rows[1].score
        assert eng.rank("questoin", 6)[:2] == rows
    finally:
        eng.shutdown()
