import json
import pytest


@pytest.fixture
def make_roll(tmp_path):
    """Creates a directory of numbered raw files and returns its path."""
    def _make(names, dirname="roll"):
        roll = tmp_path / dirname
        roll.mkdir(exist_ok=True)
        for name in names:
            (roll / name).write_bytes(b"raw")
        return roll
    return _make


@pytest.fixture
def make_logbook(tmp_path):
    """Writes a logbook JSON file with `count` frames and returns its path."""
    def _make(count, name="roll_12.json"):
        records = [
            {
                "DateTimeOriginal": f"2023:05:0{1 + i % 9} 10:00:00",
                "Description": f"Frame {i + 1}",
                "ExposureTime": 0.008,
                "FNumber": 5.6,
                "ImageNumber": 100 + i,
                "LensModel": "Summicron 50mm f/2 (v4)",
                "Make": "Leica",
                "Model": "M6 (TTL)",
                "Software": "Logbook 2.1",
                "SourceFile": "",
            }
            for i in range(count)
        ]
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _make


@pytest.fixture
def five_frame_roll(make_roll):
    return make_roll([f"IMG_000{i}.CR2" for i in range(1, 6)])
