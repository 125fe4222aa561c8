import json

import pytest

from dayzlauncher.settings import (
    Settings,
    convert_old_mod_format_to_new_format,
    default_config,
    is_old_mod_format,
)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "conf" / "dayz-unix-launcher.conf"


def test_default_config_is_created(config_path):
    settings = Settings(config_path)
    assert config_path.exists()
    assert json.loads(config_path.read_text()) == default_config()
    assert settings.settings == default_config()


def test_default_config_returns_independent_copies():
    first = default_config()
    first["mods"].append({"path": "x"})
    assert default_config()["mods"] == []
    assert default_config()["settings"]["theme"] == "System"


def test_default_launch_parameters_are_empty(config_path):
    assert Settings(config_path).get_launch_parameters() == ""


def test_launch_parameters_for_each_kind(config_path):
    settings = Settings(config_path)
    params = settings.settings["parameters"]
    params["skipIntro"] = True
    params["name"] = "Survivor"
    params["cpuCount"] = 4
    result = settings.get_launch_parameters()
    assert result == " -cpuCount=4 -name=Survivor -skipIntro"


def test_launch_parameters_skip_dlc_and_proton(config_path):
    settings = Settings(config_path)
    params = settings.settings["parameters"]
    params["dlcContact"] = True
    params["protonDisableEsync"] = True
    assert settings.get_launch_parameters() == ""


def test_custom_parameters_are_appended_verbatim(config_path):
    settings = Settings(config_path)
    settings.settings["parameters"]["customParameters"] = "-foo -bar=1"
    assert settings.get_launch_parameters() == " -foo -bar=1"


def test_minus_one_integers_are_left_out(config_path):
    settings = Settings(config_path)
    settings.settings["parameters"]["exThreads"] = -1
    settings.settings["parameters"]["exThreads"] = 7
    assert settings.get_launch_parameters() == " -exThreads=7"


def test_missing_parameters_give_empty_string(config_path):
    settings = Settings(config_path)
    del settings.settings["parameters"]
    assert settings.get_launch_parameters() == ""


def test_is_old_mod_format():
    assert is_old_mod_format({"workshop": [], "custom": []}) is True
    assert is_old_mod_format([]) is False


def test_convert_old_mod_format():
    old = {
        "workshop": [{"id": "123"}],
        "custom": [{"path": "/mods/@a", "enabled": False}],
    }
    converted = convert_old_mod_format_to_new_format(old)
    assert converted == [
        {"path": "123", "name": "mod_imported_from_old_preset", "enabled": True},
        {"path": "/mods/@a", "name": "mod_imported_from_old_preset", "enabled": False},
    ]


def test_convert_old_mod_format_requires_sections():
    with pytest.raises(KeyError):
        convert_old_mod_format_to_new_format({"workshop": []})


def test_old_config_is_converted_on_load(config_path):
    config_path.parent.mkdir(parents=True)
    config = default_config()
    config["mods"] = {"workshop": [{"id": "42"}], "custom": []}
    config_path.write_text(json.dumps(config))
    settings = Settings(config_path)
    assert settings.settings["mods"] == convert_old_mod_format_to_new_format(
        {"workshop": [{"id": "42"}], "custom": []}
    )


def test_existing_config_is_not_overwritten(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps({"mods": [], "parameters": {"window": True}}))
    settings = Settings(config_path)
    assert settings.get_launch_parameters() == " -window"


def test_malformed_config_is_tolerated(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{not json")
    settings = Settings(config_path)
    assert settings.settings == {}
    assert config_path.read_text() == "{not json"


def test_save_settings_round_trip(config_path):
    settings = Settings(config_path)
    settings.settings["mods"].append({"enabled": True, "name": "m", "path": "7"})
    settings.save_settings_to_disk()
    reloaded = Settings(config_path)
    assert reloaded.settings == settings.settings