import pytest

from dlms_enums import CATALOG
from dlms_enums.conf import settings


@pytest.fixture()
def flag_separator(monkeypatch):
    def set_separator(separator: str):
        monkeypatch.setattr(settings, "FLAG_SEPARATOR", separator)

    return set_separator


@pytest.fixture()
def settings_module(tmp_path, monkeypatch):
    """
    Writes a settings module to a temporary directory and returns its name so it
    can be given to Settings or set in the environment.
    """

    def write_module(name: str, content: str) -> str:
        (tmp_path / f"{name}.py").write_text(content)
        monkeypatch.syspath_prepend(str(tmp_path))
        return name

    return write_module


def pytest_generate_tests(metafunc):
    if "enum_class" in metafunc.fixturenames:
        metafunc.parametrize(
            "enum_class", list(CATALOG), ids=lambda enum_class: enum_class.__name__
        )
    if "scalar_enum" in metafunc.fixturenames:
        scalars = [e for e in CATALOG if e not in CATALOG.flags()]
        metafunc.parametrize("scalar_enum", scalars, ids=lambda e: e.__name__)
    if "flag_enum" in metafunc.fixturenames:
        metafunc.parametrize("flag_enum", CATALOG.flags(), ids=lambda e: e.__name__)
