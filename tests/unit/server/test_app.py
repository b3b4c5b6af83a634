import json
import logging
import sys

import pytest
from mcp.server import Server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolRequestParams,
    CallToolResult,
)

from random_org_mcp import __version__
from random_org_mcp.client import RandomOrgClient
from random_org_mcp.exceptions import ConfigurationError
from random_org_mcp.limiter import TokenBucketRateLimiter
from random_org_mcp.server import app
from random_org_mcp.server.dispatcher import ToolDispatcher


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_logs_to_stderr(self, restore_root_logger):
        app.setup_logging("DEBUG")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr


def call_tool_request(name, arguments=None):
    return CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.fixture
def make_server(config, recording_sleep):
    def factory(upstream):
        client = RandomOrgClient(
            config,
            http_client=upstream.http_client(),
            rate_limiter=TokenBucketRateLimiter(rate=1000, capacity=1000),
            sleep=recording_sleep,
        )
        return app.create_server(ToolDispatcher(client))

    return factory


class TestCreateServer:
    def test_server_identity(self, make_server, fake_upstream):
        server = make_server(fake_upstream({}))

        assert isinstance(server, Server)
        assert server.name == app.SERVER_NAME == "random-org-server"
        assert server.version == __version__

    @pytest.mark.asyncio
    async def test_call_tool_returns_json_text(self, make_server, fake_upstream, usage_result):
        server = make_server(fake_upstream(usage_result))
        handler = server.request_handlers[CallToolRequest]

        response = await handler(call_tool_request("getUsage", {}))

        result = response.root
        assert isinstance(result, CallToolResult)
        assert result.isError is False
        assert json.loads(result.content[0].text) == usage_result

    @pytest.mark.asyncio
    async def test_unknown_tool_and_failed_call_keep_distinct_codes(
        self, make_server, fake_upstream, upstream_error
    ):
        upstream = fake_upstream(upstream_error(400, "bad key"))
        handler = make_server(upstream).request_handlers[CallToolRequest]

        with pytest.raises(McpError) as unknown:
            await handler(call_tool_request("generateFoo", {}))
        with pytest.raises(McpError) as failed:
            await handler(call_tool_request("generateUUIDs", {"n": 1}))

        assert unknown.value.error.code == METHOD_NOT_FOUND
        assert failed.value.error.code == INTERNAL_ERROR
        assert "bad key" in failed.value.error.message
        assert upstream.call_count == 4


class TestMain:
    def test_configuration_error_exits_nonzero(self, monkeypatch, capsys):
        def failing_load_config():
            raise ConfigurationError("RANDOM_ORG_API_KEY environment variable is required")

        monkeypatch.setattr(app, "setup_logging", lambda level: None)
        monkeypatch.setattr(app, "load_config", failing_load_config)

        with pytest.raises(SystemExit) as exc_info:
            app.main([])

        assert exc_info.value.code == 1
        assert "Configuration error: RANDOM_ORG_API_KEY" in capsys.readouterr().err

    def test_runs_with_loaded_config(self, monkeypatch, config):
        seen = {}

        async def fake_run(loaded):
            seen["config"] = loaded

        monkeypatch.setattr(app, "setup_logging", lambda level: seen.setdefault("level", level))
        monkeypatch.setattr(app, "load_config", lambda: config)
        monkeypatch.setattr(app, "run", fake_run)

        app.main(["--log-level", "WARNING"])

        assert seen == {"level": "WARNING", "config": config}

    def test_log_level_from_environment(self, monkeypatch, config):
        levels = []

        async def fake_run(loaded):
            pass

        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setattr(app, "setup_logging", levels.append)
        monkeypatch.setattr(app, "load_config", lambda: config)
        monkeypatch.setattr(app, "run", fake_run)

        app.main([])

        assert levels == ["DEBUG"]

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            app.main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
