from pathlib import Path

import yaml

from hangul_ime.domain.enums import BackspaceUnit
from hangul_ime.services.settings_store import SettingsStore


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    store = SettingsStore(settings_path=str(tmp_path / "settings.yaml"))
    assert store.load() == {}
    assert store.get_backspace_unit() is BackspaceUnit.JAMO
    assert store.get_map_physical_keys() is True
    assert store.get_keyboard_visible() is False


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    settings_path = tmp_path / "nested" / "settings.yaml"
    store = SettingsStore(settings_path=str(settings_path))

    store.set_backspace_unit(BackspaceUnit.CHARACTER)
    store.set_map_physical_keys(False)
    store.set_keyboard_visible(True)

    reloaded = SettingsStore(settings_path=str(settings_path))
    assert reloaded.get_backspace_unit() is BackspaceUnit.CHARACTER
    assert reloaded.get_map_physical_keys() is False
    assert reloaded.get_keyboard_visible() is True

    data = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    assert data == {
        "backspace_unit": "character",
        "keyboard_visible": True,
        "map_physical_keys": False,
    }
    assert not settings_path.with_suffix(".yaml.tmp").exists()


def test_update_preserves_other_keys(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("theme: hanji\n", encoding="utf-8")
    store = SettingsStore(settings_path=str(settings_path))

    store.set_keyboard_visible(True)

    loaded = store.load()
    assert loaded["theme"] == "hanji"
    assert loaded["keyboard_visible"] is True


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        "backspace_unit: word\nmap_physical_keys: 'yes'\nkeyboard_visible: 1\n",
        encoding="utf-8",
    )
    store = SettingsStore(settings_path=str(settings_path))
    assert store.get_backspace_unit() is BackspaceUnit.JAMO
    assert store.get_map_physical_keys() is True
    assert store.get_keyboard_visible() is False


def test_malformed_yaml_reads_as_empty(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("backspace_unit: [unclosed\n", encoding="utf-8")
    store = SettingsStore(settings_path=str(settings_path))
    assert store.load() == {}
    assert store.get_backspace_unit() is BackspaceUnit.JAMO


def test_non_mapping_yaml_reads_as_empty(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("- a\n- b\n", encoding="utf-8")
    assert SettingsStore(settings_path=str(settings_path)).load() == {}
