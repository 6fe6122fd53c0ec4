"""Tests for the Slack app manifest and the manifest CLI command."""

from __future__ import annotations

import json

from message_relay.commands.manifest import BOT_SCOPES, build_manifest
from message_relay.main import cli


class TestBuildManifest:
    def test_declares_global_shortcut(self):
        manifest = build_manifest()

        shortcuts = manifest["features"]["shortcuts"]
        assert shortcuts == [
            {
                "name": "Send a message",
                "type": "global",
                "callback_id": "send_message_shortcut",
                "description": "Pick a user and send them a message",
            }
        ]

    def test_request_url_points_at_events_path(self):
        settings = build_manifest("https://relay.example.com/")["settings"]

        assert settings["interactivity"] == {
            "is_enabled": True,
            "request_url": "https://relay.example.com/slack/events",
        }
        assert settings["event_subscriptions"]["request_url"] == (
            "https://relay.example.com/slack/events"
        )
        assert settings["socket_mode_enabled"] is False

    def test_without_request_url(self):
        settings = build_manifest()["settings"]

        assert "request_url" not in settings["interactivity"]
        assert "event_subscriptions" not in settings

    def test_scopes_allow_direct_messages(self):
        scopes = build_manifest()["oauth_config"]["scopes"]["bot"]

        assert scopes == BOT_SCOPES
        assert sorted(scopes) == ["chat:write", "commands", "im:write", "users:read"]


class TestManifestCommand:
    def test_prints_json(self, capsys):
        exit_code = cli(["manifest", "--request-url", "https://relay.example.com"])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["settings"]["interactivity"]["request_url"].endswith("/slack/events")

    def test_config_without_subcommand_prints_help(self, capsys):
        assert cli(["config"]) == 1
        assert "slack" in capsys.readouterr().out
