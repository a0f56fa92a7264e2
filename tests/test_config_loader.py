import pytest

from lineunwrap.common.config_loader import UnwrapConfig, load_config
from lineunwrap.config.unwrapconfig import WRAP_MARKER


def test_defaults_come_from_config_module():
    config = load_config()

    assert config == UnwrapConfig()
    assert config.marker == WRAP_MARKER == "\\"


def test_yaml_file_overrides_defaults(tmp_path):
    path = tmp_path / "unwrap.yaml"
    path.write_text('marker: "&&"\nlog_level: DEBUG\n', encoding="utf-8")

    config = load_config(path)

    assert config.marker == "&&"
    assert config.log_level == "DEBUG"
    assert config.temp_dir is None


def test_cli_overrides_beat_yaml_and_none_is_ignored(tmp_path):
    path = tmp_path / "unwrap.yaml"
    path.write_text("marker: '+'\ntemp_dir: /from/yaml\n", encoding="utf-8")

    config = load_config(path, marker="~", temp_dir=None)

    assert config.marker == "~"
    assert config.temp_dir == "/from/yaml"


def test_empty_yaml_file_keeps_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == UnwrapConfig()


@pytest.mark.parametrize(
    "content, message",
    [
        ("colour: red\n", "Unknown config keys"),
        ("- marker\n", "must contain a mapping"),
        ("marker: ''\n", "non-empty"),
        ("marker: [unclosed\n", "Invalid YAML"),
        ("temp_dir: 5\n", "temp_dir must be a path string"),
        ("log_dir: [a, b]\n", "log_dir must be a path string"),
        ("log_level: LOUD\n", "log_level must be one of"),
    ],
)
def test_bad_yaml_raises_value_error(tmp_path, content, message):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        load_config(path)
