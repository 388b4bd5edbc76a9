import json

import pytest

SAMPLE = {
    "nodes": [
        {"id": "A", "text": "Start"},
        {"id": "B", "file": "/x/y/End.md"},
    ],
    "edges": [
        {"fromNode": "A", "toNode": "B", "label": "leads to"},
    ],
}


@pytest.fixture
def sample_bytes() -> bytes:
    return json.dumps(SAMPLE).encode("utf-8")


@pytest.fixture
def canvas_file(tmp_path, sample_bytes):
    path = tmp_path / "graph.canvas"
    path.write_bytes(sample_bytes)
    return path
