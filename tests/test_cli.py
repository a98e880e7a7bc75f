import hashlib
import json

import pytest
import toml
import yaml
from click.testing import CliRunner

from glassfetch.cli import load_config, main
from glassfetch.exceptions import ConfigParseError


def digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


@pytest.fixture
def workspace(tmp_path):
    source_dir = tmp_path / "glass"
    source_dir.mkdir()
    (source_dir / "SCHOTT.agf").write_bytes(b"schott")
    return tmp_path


def write_config(workspace, sources, name="glass.toml"):
    path = workspace / name
    path.write_text(
        toml.dumps({"source_dir": str(workspace / "glass"), "sources": sources})
    )
    return path


class TestLoadConfig:
    def test_toml(self, tmp_path):
        path = tmp_path / "glass.toml"
        path.write_text('source_dir = "data"\nsources = [["SCHOTT", "aa"]]\n')
        assert load_config(str(path)) == {"source_dir": "data", "sources": [["SCHOTT", "aa"]]}

    def test_json(self, tmp_path):
        path = tmp_path / "glass.json"
        path.write_text(json.dumps({"source_dir": "data"}))
        assert load_config(str(path)) == {"source_dir": "data"}

    def test_yaml(self, tmp_path):
        path = tmp_path / "glass.yml"
        path.write_text(yaml.safe_dump({"source_dir": "data", "sources": [["HOYA", "bb"]]}))
        assert load_config(str(path))["sources"] == [["HOYA", "bb"]]

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "glass.ini"
        path.write_text("[glass]")
        with pytest.raises(ConfigParseError):
            load_config(str(path))

    def test_parse_error(self, tmp_path):
        path = tmp_path / "glass.json"
        path.write_text("{not json")
        with pytest.raises(ConfigParseError):
            load_config(str(path))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "glass.json"
        path.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(ConfigParseError) as excinfo:
            load_config(str(path))
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ConfigParseError) as excinfo:
            load_config(str(tmp_path / "gone.yaml"))
        assert isinstance(excinfo.value.__cause__, OSError)


class TestMain:
    def test_all_verified(self, workspace):
        config = write_config(workspace, [["SCHOTT", digest(b"schott")]])

        result = CliRunner().invoke(main, [str(config), "--strict"])

        assert result.exit_code == 0, result.output

    def test_strict_fails_when_dropped(self, workspace):
        config = write_config(
            workspace, [["SCHOTT", digest(b"schott")], ["HOYA", digest(b"hoya")]]
        )

        result = CliRunner().invoke(main, [str(config), "--strict", "--json"])

        assert result.exit_code == 1
        assert '"dropped": [\n    "HOYA"\n  ]' in result.output

    def test_dropped_without_strict_succeeds(self, workspace):
        config = write_config(workspace, [["HOYA", digest(b"hoya")]])

        result = CliRunner().invoke(main, [str(config)])

        assert result.exit_code == 0

    def test_source_dir_override(self, workspace, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "OHARA.agf").write_bytes(b"ohara")
        config = write_config(workspace, [["OHARA", digest(b"ohara")]])

        result = CliRunner().invoke(
            main, [str(config), "--source-dir", str(other), "--strict"]
        )

        assert result.exit_code == 0, result.output

    def test_dry_run_does_not_touch_files(self, workspace):
        config = write_config(workspace, [["SCHOTT", digest(b"other")]])

        result = CliRunner().invoke(main, [str(config), "--dry-run"])

        assert result.exit_code == 0
        assert (workspace / "glass" / "SCHOTT.agf").exists()

    def test_invalid_config(self, workspace):
        path = workspace / "glass.toml"
        path.write_text('sources = [["SCHOTT", "aa"]]\n')

        result = CliRunner().invoke(main, [str(path)])

        assert result.exit_code == 1
        assert "E102" in result.output

    def test_non_sequence_descriptor(self, workspace):
        path = workspace / "glass.json"
        path.write_text(json.dumps({"source_dir": str(workspace / "glass"), "sources": [1]}))

        result = CliRunner().invoke(main, [str(path)])

        assert result.exit_code == 1
        assert "E102" in result.output

    def test_invalid_utf8_config(self, workspace):
        path = workspace / "glass.toml"
        path.write_bytes(b'source_dir = "\xff\xfe"\n')

        result = CliRunner().invoke(main, [str(path)])

        assert result.exit_code == 1
        assert "E101" in result.output
