# test/test_presets.py
import pytest

from shotprofile.core import InvalidProfile, PresetNotFound, analyze
from shotprofile.io import Preset, PresetLibrary, extract_advanced_shot


def test_extract_advanced_shot_strips_wrapper(tcl_text):
    data = extract_advanced_shot(tcl_text)
    assert data == (
        "{name fill pump flow flow 4 temperature 90 seconds 20} "
        "{name hold pump pressure pressure 8.6 temperature 88 seconds 10}\n"
    )


def test_extract_advanced_shot_skips_empty_entries():
    text = "advanced_shot {}\nadvanced_shot {{seconds 3}}\n"
    assert extract_advanced_shot(text) == "{seconds 3}\n"
    assert extract_advanced_shot("author Decent\nadvanced_shot {}\n") is None
    assert extract_advanced_shot("advanced_shot {{seconds 3}}\r\n") == "{seconds 3}\n"


def test_library_from_texts_dict_api():
    lib = PresetLibrary.from_texts({"b": "{seconds 2}", "a": "{seconds 1}"})

    assert len(lib) == 2
    assert list(lib) == ["a", "b"]
    assert "a" in lib
    assert lib["b"].data == "{seconds 2}"
    assert lib.get("zzz") is None
    assert lib.profile("a")[0].duration() == 1.0


def test_library_missing_raises_presetnotfound():
    lib = PresetLibrary.from_texts({})
    with pytest.raises(PresetNotFound):
        _ = lib["missing"]
    with pytest.raises(KeyError):
        lib.profile("missing")


def test_library_rejects_name_mismatch():
    with pytest.raises(InvalidProfile):
        PresetLibrary({"a": Preset(name="b", data="{}")})
    with pytest.raises(InvalidProfile):
        PresetLibrary({"a": "{}"})  # type: ignore[dict-item]


def test_from_directory(tmp_path, tcl_text):
    (tmp_path / "espresso.tcl").write_text(tcl_text, encoding="utf-8")
    (tmp_path / "empty.tcl").write_text("advanced_shot {}\nauthor x\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("advanced_shot {{seconds 1}}\n", encoding="utf-8")

    lib = PresetLibrary.from_directory(tmp_path)
    assert lib.names() == ["espresso"]
    assert lib["espresso"].source == str(tmp_path / "espresso.tcl")
    assert "espresso.tcl" not in lib
    assert len(lib.profile("espresso")) == 2


def test_from_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        PresetLibrary.from_directory(tmp_path / "nope")


def test_merge():
    a = PresetLibrary.from_texts({"x": "{seconds 1}"})
    b = PresetLibrary.from_texts({"x": "{seconds 2}", "y": "{}"})

    with pytest.raises(InvalidProfile):
        a.merge(b)

    merged = a.merge(b, overwrite=True)
    assert merged.names() == ["x", "y"]
    assert merged["x"].data == "{seconds 2}"
    assert a["x"].data == "{seconds 1}"


def test_bundled_presets_parse_and_analyze():
    lib = PresetLibrary.bundled()
    assert {"default", "blooming", "gentle_and_sweet"} <= set(lib.names())

    for name in lib:
        analysis = analyze(lib.profile(name))
        assert analysis.duration > 0


def test_bundled_default_traces():
    analysis = analyze(PresetLibrary.bundled().profile("default"))

    assert analysis.duration == 60.0
    assert [tuple(s) for s in analysis.flow] == [
        (0.0, 0.0, 0.0, 4.0),
        (0.0, 4.0, 20.0, 4.0),
        (20.0, 4.0, 20.0, 0.0),
    ]
    assert [tuple(s) for s in analysis.pressure] == [
        (20.0, 0.0, 20.0, 8.6),
        (20.0, 8.6, 30.0, 8.6),
        (30.0, 8.6, 60.0, 6.0),
    ]
