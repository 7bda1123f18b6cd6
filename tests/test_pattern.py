import pytest
from pathlib import Path

from logbook_aligner.models import FileNamePattern
from logbook_aligner.exceptions import PatternError
from logbook_aligner.scanning.pattern import (
    PatternInferrer,
    list_candidates,
    common_prefix,
    common_suffix,
    widen_index_field,
)


def test_infer_canon_roll(five_frame_roll):
    pattern, base = PatternInferrer().infer(five_frame_roll / "IMG_0001.CR2")

    assert pattern.prefix == "IMG_"
    assert pattern.index_width == 4
    assert pattern.suffix == ".CR2"
    assert pattern.directory == five_frame_roll
    assert base == 1


@pytest.mark.parametrize("sample", ["IMG_0003.CR2", "IMG_0005.CR2"])
def test_infer_anchors_at_first_file(five_frame_roll, sample):
    # Whichever frame is dropped in, record 0 belongs to the lowest-numbered file
    pattern, base = PatternInferrer().infer(five_frame_roll / sample)
    assert base == 1
    assert pattern.prefix == "IMG_"


def test_infer_base_index_not_one(make_roll):
    roll = make_roll(["DSC00120.NEF", "DSC00121.NEF", "DSC00122.NEF"])
    _, base = PatternInferrer().infer(roll / "DSC00122.NEF")
    assert base == 120


@pytest.mark.parametrize(
    "names,prefix,width,suffix",
    [
        (["DSC00001.NEF", "DSC00002.NEF", "DSC00003.NEF"], "DSC", 5, ".NEF"),
        (["IMG_0010.CR2", "IMG_0020.CR2", "IMG_0030.CR2"], "IMG_", 4, ".CR2"),
        (["_MG_0998.CR2", "_MG_0999.CR2", "_MG_1000.CR2"], "_MG_", 4, ".CR2"),
        (["roll3-001-scan.tif", "roll3-002-scan.tif"], "roll3-", 3, "-scan.tif"),
    ],
)
def test_infer_schemes(make_roll, names, prefix, width, suffix):
    roll = make_roll(names)
    pattern, _ = PatternInferrer().infer(roll / names[0])

    assert (pattern.prefix, pattern.index_width, pattern.suffix) == (prefix, width, suffix)
    # Every file can be rebuilt from its own index
    for name in names:
        assert pattern.format_name(pattern.parse_index(name)) == name


def test_infer_ignores_other_extensions_and_dirs(make_roll):
    roll = make_roll([
        "IMG_0001.CR2", "IMG_0002.CR2",
        "IMG_0001.JPG", "IMG_0001_edit.cr2", "notes.txt",
    ])
    (roll / "backup.CR2").mkdir()

    assert list_candidates(roll, ".CR2") == ["IMG_0001.CR2", "IMG_0002.CR2"]
    pattern, _ = PatternInferrer().infer(roll / "IMG_0002.CR2")
    assert pattern.index_width == 4


def test_infer_rejects_non_uniform_names(make_roll):
    roll = make_roll(["IMG_0001.CR2", "IMG_0002.CR2", "IMG_00003.CR2"])
    with pytest.raises(PatternError, match="Non-uniform"):
        PatternInferrer().infer(roll / "IMG_0001.CR2")


def test_infer_rejects_single_file(make_roll):
    roll = make_roll(["IMG_0001.CR2"])
    with pytest.raises(PatternError):
        PatternInferrer().infer(roll / "IMG_0001.CR2")


@pytest.mark.parametrize(
    "names",
    [
        ["IMG_ABCD.CR2", "IMG_ABCE.CR2"],
        ["IMG_0001.CR2", "IMG_000A.CR2"],
    ],
)
def test_infer_rejects_non_numeric_index(make_roll, names):
    roll = make_roll(names)
    with pytest.raises(PatternError):
        PatternInferrer().infer(roll / names[0])


def test_infer_missing_sample(tmp_path):
    with pytest.raises(PatternError):
        PatternInferrer().infer(tmp_path / "IMG_0001.CR2")


def test_affix_helpers():
    names = ["IMG_0001.CR2", "IMG_0002.CR2", "IMG_0013.CR2"]
    assert common_prefix(names) == "IMG_00"
    assert common_suffix(names) == ".CR2"
    assert widen_index_field("IMG_00", "0.CR2") == ("IMG_", ".CR2")
    assert widen_index_field("IMG_", ".CR2") == ("IMG_", ".CR2")


def test_pattern_format_and_parse():
    pattern = FileNamePattern(directory=Path("/roll"), prefix="IMG_", index_width=4, suffix=".CR2")

    assert pattern.format_name(7) == "IMG_0007.CR2"
    assert pattern.format_name(10000) == "IMG_10000.CR2"
    assert pattern.path_for(7) == Path("/roll/IMG_0007.CR2")
    assert pattern.parse_index("IMG_0042.CR2") == 42

    with pytest.raises(PatternError):
        pattern.parse_index("DSC_0042.CR2")
