"""Tests for the MCP server wiring."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from notion_mcp import server
from notion_mcp.server import SERVER_NAME, build_server
from notion_mcp.tools import TOOL_HANDLERS


class TestBuildServer:
    async def test_every_tool_registered(self):
        mcp = build_server(MagicMock())
        tools = await mcp.list_tools()
        assert sorted(t.name for t in tools) == sorted(TOOL_HANDLERS)

    async def test_tools_carry_descriptions_and_schemas(self):
        mcp = build_server(MagicMock())
        tools = {t.name: t for t in await mcp.list_tools()}
        create = tools["create_page"]
        assert create.description
        assert set(create.inputSchema["required"]) == {"parent_id", "parent_type", "title"}
        assert "query" in tools["search"].inputSchema["required"]

    def test_server_name(self):
        assert build_server(MagicMock()).name == SERVER_NAME


class TestMain:
    def test_missing_api_key_exits(self, monkeypatch):
        monkeypatch.delenv("NOTION_API_KEY", raising=False)
        run = MagicMock()
        monkeypatch.setattr(server.asyncio, "run", run)
        with pytest.raises(SystemExit) as exc_info:
            server.main()
        assert exc_info.value.code == 1
        run.assert_not_called()

    def test_runs_server_with_env_config(self, monkeypatch):
        monkeypatch.setenv("NOTION_API_KEY", "secret_abc")
        serve = MagicMock(return_value="coro")
        run = MagicMock()
        monkeypatch.setattr(server, "serve", serve)
        monkeypatch.setattr(server.asyncio, "run", run)
        server.main()
        config = serve.call_args.args[0]
        assert config.token == "secret_abc"
        run.assert_called_once_with("coro")
