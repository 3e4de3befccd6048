import pytest

from d2shared.build_info import BuildInfo, get_build_info, set_build_info


@pytest.fixture(autouse=True)
def _restore_build_info():
    saved = get_build_info()
    yield
    set_build_info(saved.branch, saved.commit)


def test_set_then_get():
    returned = set_build_info("Local", "abc123")
    assert get_build_info() == BuildInfo(branch="Local", commit="abc123")
    assert returned == get_build_info()


def test_later_call_replaces_earlier():
    set_build_info("first", "1")
    set_build_info("second", "2")
    info = get_build_info()
    assert (info.branch, info.commit) == ("second", "2")


def test_record_is_immutable():
    info = set_build_info("Local", "")
    with pytest.raises(AttributeError):
        info.branch = "other"
    assert info.branch == "Local"
    assert get_build_info().branch == "Local"