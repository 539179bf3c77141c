# test/test_load.py
import pytest

from shotprofile.core import ProfileSyntaxError
from shotprofile.io import load_analysis, load_profile, read_profile_text


def test_load_plain_profile(tmp_path):
    path = tmp_path / "shot.txt"
    path.write_text("{temperature 90 seconds 10}\n{temperature 94 seconds 5}\n", encoding="utf-8")

    profile = load_profile(path)
    assert len(profile) == 2

    analysis = load_analysis(path)
    assert analysis.duration == 15.0


def test_load_tcl_preset(tmp_path, tcl_text):
    path = tmp_path / "preset.tcl"
    path.write_text(tcl_text, encoding="utf-8")

    assert read_profile_text(path).startswith("{name fill")
    assert load_profile(path).names() == ["fill", "hold"]


def test_tcl_without_steps_is_a_syntax_error(tmp_path):
    path = tmp_path / "empty.tcl"
    path.write_text("advanced_shot {}\n", encoding="utf-8")
    with pytest.raises(ProfileSyntaxError):
        load_profile(path)


def test_lenient_load(tmp_path):
    path = tmp_path / "modern.tcl"
    path.write_text("advanced_shot {{weight 0 popup {} seconds 4}}\n", encoding="utf-8")

    with pytest.raises(ProfileSyntaxError):
        load_profile(path)
    assert load_profile(path, lenient=True)[0].duration() == 4.0


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_profile(tmp_path / "missing.txt")
