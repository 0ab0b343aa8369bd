"""Tests for structured logging."""

import json

from chembl_mcp.core.config import ChemblMCPConfig, LoggingConfig
from chembl_mcp.core.logging import bind_context, clear_context, configure_logging, get_logger


class TestLogging:
    def teardown_method(self):
        clear_context()
        configure_logging(ChemblMCPConfig())

    def test_json_lines_go_to_stderr(self, capsys):
        configure_logging(ChemblMCPConfig(logging=LoggingConfig(format="json")))
        bind_context(request_id="01J0000000000000000000000", tool="get_compound_info")

        get_logger(__name__).info("tool_executed", execution_time_ms=1.5)

        captured = capsys.readouterr()
        assert captured.out == ""
        line = json.loads(captured.err.strip().splitlines()[-1])
        assert line["event"] == "tool_executed"
        assert line["level"] == "info"
        assert line["tool"] == "get_compound_info"
        assert line["execution_time_ms"] == 1.5

    def test_level_filters(self, capsys):
        configure_logging(ChemblMCPConfig(logging=LoggingConfig(level="WARNING")))

        logger = get_logger(__name__)
        logger.info("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err
