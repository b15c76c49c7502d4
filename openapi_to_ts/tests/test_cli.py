import json
import logging
from pathlib import Path
from unittest import mock

import pytest
from click.testing import CliRunner

from openapi_to_ts.openapi_to_ts import openapi_to_ts

SCHEMA_PATH = Path(__file__).parent / "test_data" / "schemas" / "mini_swagger.json"
EXPECTED_DIR = Path(__file__).parent / "test_data" / "expected"


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("openapi_to_ts")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestCli:
    """Test the openapi_to_ts command"""

    def test_generate_from_local_schema(self, tmp_path):
        result = CliRunner().invoke(openapi_to_ts, ["1.16", "--schema", str(SCHEMA_PATH), "--output", str(tmp_path)])
        assert result.exit_code == 0, result.output

        root = tmp_path / "v1.16"
        for expected in EXPECTED_DIR.rglob("*.ts"):
            module_path = expected.relative_to(EXPECTED_DIR)
            assert (root / module_path).read_text() == expected.read_text()
        assert "batch/v1.ts" in result.output

    def test_fetches_release_tag(self, tmp_path):
        with open(SCHEMA_PATH) as f:
            schema = json.load(f)
        with mock.patch("openapi_to_ts.openapi_to_ts.load_schema_from_url", return_value=schema) as load:
            result = CliRunner().invoke(openapi_to_ts, ["1.16", "--output", str(tmp_path)])
        assert result.exit_code == 0, result.output
        load.assert_called_once_with(
            "https://raw.githubusercontent.com/kubernetes/kubernetes/v1.16.0/api/openapi-spec/swagger.json",
            30,
        )
        assert (tmp_path / "v1.16" / "core" / "v1.ts").exists()

    def test_config_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"file_extension": ".d.ts"}))
        out = tmp_path / "out"
        result = CliRunner().invoke(
            openapi_to_ts,
            ["v1.16.2", "-s", str(SCHEMA_PATH), "-o", str(out), "-c", str(config_path)],
        )
        assert result.exit_code == 0, result.output
        assert (out / "v1.16.2" / "batch" / "v1.d.ts").exists()

    def test_no_force_fails_on_existing_file(self, tmp_path):
        args = ["1.16", "-s", str(SCHEMA_PATH), "-o", str(tmp_path)]
        assert CliRunner().invoke(openapi_to_ts, args).exit_code == 0
        result = CliRunner().invoke(openapi_to_ts, [*args, "--no-force"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_generation_error_exits_with_message(self, tmp_path):
        schema = {
            "info": {},
            "definitions": {
                "io.k8s.api.core.v1.Pod": {
                    "type": "object",
                    "properties": {"spec": {"$ref": "#/definitions/io.k8s.api.core.v1.Missing"}},
                }
            },
        }
        schema_path = tmp_path / "swagger.json"
        schema_path.write_text(json.dumps(schema))
        result = CliRunner().invoke(openapi_to_ts, ["1.16", "-s", str(schema_path), "-o", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Failed to resolve io.k8s.api.core.v1.Missing" in result.output
        assert not (tmp_path / "out").exists()
