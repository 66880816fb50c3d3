import pytest
from pydantic import ValidationError

from customprops import AccessorSettings
from customprops.settings import DEFAULT_FIELD, READ_FIELD_ENV, WRITE_FIELD_ENV


def test_defaults_are_unified():
    settings = AccessorSettings()
    assert settings.read_field == settings.write_field == DEFAULT_FIELD


def test_legacy_split():
    settings = AccessorSettings.legacy()
    assert settings.read_field == "CustomProperties"
    assert settings.write_field == "SomeCustomProperty"


@pytest.mark.parametrize("bad", ["", "   "])
def test_blank_field_rejected(bad):
    with pytest.raises(ValidationError):
        AccessorSettings(read_field=bad)


def test_field_names_are_stripped():
    assert AccessorSettings(write_field="  Props ").write_field == "Props"


def test_from_env(monkeypatch):
    monkeypatch.setenv(READ_FIELD_ENV, "Props")
    monkeypatch.setenv(WRITE_FIELD_ENV, "OtherProps")
    settings = AccessorSettings.from_env(dotenv=False)
    assert settings.read_field == "Props"
    assert settings.write_field == "OtherProps"


def test_from_env_falls_back_to_defaults(monkeypatch):
    monkeypatch.delenv(READ_FIELD_ENV, raising=False)
    monkeypatch.delenv(WRITE_FIELD_ENV, raising=False)
    assert AccessorSettings.from_env(dotenv=False) == AccessorSettings()


def test_from_env_reads_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.delenv(READ_FIELD_ENV, raising=False)
    monkeypatch.delenv(WRITE_FIELD_ENV, raising=False)
    (tmp_path / ".env").write_text(f"{WRITE_FIELD_ENV}=SomeCustomProperty\n")
    monkeypatch.chdir(tmp_path)

    settings = AccessorSettings.from_env()
    assert settings == AccessorSettings.legacy()
    monkeypatch.delenv(WRITE_FIELD_ENV, raising=False)
