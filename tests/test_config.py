"""
Tests for transpiler configuration and YAML loading.
"""

import pytest

from csh2sh.config import (
    DEFAULT_CONFIG,
    TranspilerConfig,
    config_from_dict,
    config_to_dict,
    load_config,
)
from csh2sh.errors import InvalidInputError, SourceNotFoundError
from csh2sh.transpiler import ScriptTranspiler


class TestTranspilerConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.source_extension == ".csh"
        assert DEFAULT_CONFIG.target_extension == ".sh"
        assert DEFAULT_CONFIG.interpreter_header == "#!/bin/bash"
        assert DEFAULT_CONFIG.encoding == "utf-8"

    def test_extensions_get_a_dot(self):
        config = TranspilerConfig(source_extension="tcsh", target_extension="bash")
        assert config.source_extension == ".tcsh"
        assert config.target_extension == ".bash"

    def test_dict_roundtrip(self):
        config = TranspilerConfig(interpreter_header="#!/usr/bin/env bash")
        assert config_from_dict(config_to_dict(config)) == config

    def test_empty_dict_is_default(self):
        assert config_from_dict({}) == DEFAULT_CONFIG
        assert config_from_dict(None) == DEFAULT_CONFIG

    def test_unknown_keys_rejected(self):
        with pytest.raises(InvalidInputError, match="shebang"):
            config_from_dict({"shebang": "#!/bin/sh"})

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidInputError):
            config_from_dict(["a", "b"])


class TestLoadConfig:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "csh2sh.yaml"
        path.write_text(
            "source_extension: .tcsh\n"
            "target_extension: .bash\n"
            "interpreter_header: '#!/usr/bin/env bash'\n",
            encoding="utf-8",
        )
        config = load_config(str(path))
        assert config.source_extension == ".tcsh"
        assert config.interpreter_header == "#!/usr/bin/env bash"
        assert config.encoding == "utf-8"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("source_extension: [unclosed\n", encoding="utf-8")
        with pytest.raises(InvalidInputError):
            load_config(str(path))

    def test_config_drives_transpiler(self, tmp_path):
        config = TranspilerConfig(
            source_extension=".tcsh",
            target_extension=".bash",
            interpreter_header="#!/usr/bin/env bash",
        )
        source = tmp_path / "job.tcsh"
        source.write_text("endif\n", encoding="utf-8")
        output = ScriptTranspiler(config).convert(source)
        assert output.name == "job.bash"
        assert output.read_text(encoding="utf-8") == "#!/usr/bin/env bash\nfi\n"

    def test_config_rejects_default_extension(self, tmp_path):
        config = TranspilerConfig(source_extension=".tcsh")
        with pytest.raises(InvalidInputError, match=r"\.tcsh"):
            ScriptTranspiler(config).convert(tmp_path / "job.csh")
