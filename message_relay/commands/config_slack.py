"""Slack configuration command with guided setup flow."""

from __future__ import annotations

import json
import urllib.parse
import webbrowser
from pathlib import Path

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .manifest import BOT_SCOPES, build_manifest
from .utils import mask_secret, update_env_file
from .validators import (
    validate_port,
    validate_request_url,
    validate_signing_secret,
    validate_slack_bot_token,
)

SLACK_APPS_URL = "https://api.slack.com/apps"


def validate_slack_bot_token_api(token: str) -> tuple[bool, str, dict | None]:
    """
    Validate Slack bot token by calling auth.test API.

    Returns:
        (is_valid, error_message, response_data)
    """
    try:
        response = WebClient(token=token, timeout=10).auth_test()
    except SlackApiError as exc:
        return False, str(exc.response.get("error", exc)), None
    except OSError as exc:
        return False, f"API request failed: {exc}", None
    return True, "", dict(response.data)


def prompt_with_validation(
    prompt_text: str,
    validator,
    required: bool = True,
) -> str:
    """Prompt user for input with validation."""
    prompt_text = f"{prompt_text}: "

    while True:
        try:
            user_input = input(prompt_text).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nSetup cancelled.")
            raise SystemExit(0)

        if required and not user_input:
            print("Error: This field is required.\n")
            continue

        if not required and not user_input:
            return user_input

        is_valid, error_msg = validator(user_input)
        if is_valid:
            return user_input
        print(f"Error: {error_msg}\n")


def run_config_slack_command(args) -> int:
    """Guide user through Slack app setup and write the .env file."""

    env_file = Path(getattr(args, "env_file", None) or Path.cwd() / ".env").expanduser()

    print("\n" + "=" * 60)
    print("Slack Configuration")
    print("=" * 60)
    print(f"\nConfiguration will be saved to: {env_file}")

    # Step 1: Public URL + app creation
    print("\n" + "-" * 60)
    print("Step 1: Create Slack App from Manifest")
    print("-" * 60)
    print("\nSlack posts shortcuts and modal submissions to a public https URL.")
    request_url = prompt_with_validation(
        "\nPublic base URL of this service (https://...)",
        validate_request_url,
        required=True,
    )

    print("\nThe app will be created with:")
    print("  • Interactivity enabled")
    print("  • Global shortcut: Send a message")
    print(f"  • Bot scopes: {', '.join(BOT_SCOPES)}")

    manifest = build_manifest(request_url)
    create_app_url = (
        f"{SLACK_APPS_URL}?new_app=1&manifest_json={urllib.parse.quote(json.dumps(manifest))}"
    )
    input("\nPress Enter to open Slack's app creation page...")
    try:
        webbrowser.open(create_app_url)
        print("\n✓ Browser opened to Slack app creation page")
    except webbrowser.Error:
        print("\n⚠ Could not open browser automatically.")
        print(f"Please visit: {SLACK_APPS_URL}")
        print("\nThen create a new app and paste this manifest:")
        print("-" * 40)
        print(json.dumps(manifest, indent=2))
        print("-" * 40)

    input("\nPress Enter after creating the app...")

    # Step 2: Signing secret
    print("\n" + "-" * 60)
    print("Step 2: Signing Secret")
    print("-" * 60)
    print("\nIn your app settings, open 'Basic Information' and copy the Signing Secret.")
    signing_secret = prompt_with_validation(
        "\nPaste your Signing Secret",
        validate_signing_secret,
        required=True,
    )

    # Step 3: Install App & Get Bot Token
    print("\n" + "-" * 60)
    print("Step 3: Install App & Get Bot Token")
    print("-" * 60)
    print("\n  1. Go to 'OAuth & Permissions' in the left sidebar")
    print("  2. Click 'Install to Workspace'")
    print("  3. Copy the 'Bot User OAuth Token' (starts with xoxb-)")
    bot_token = prompt_with_validation(
        "\nPaste your Bot User OAuth Token (xoxb-...)",
        validate_slack_bot_token,
        required=True,
    )

    print("\n→ Validating bot token...")
    is_valid, error, auth_data = validate_slack_bot_token_api(bot_token)
    if is_valid and auth_data:
        print("✓ Bot token valid!")
        print(f"  Team: {auth_data.get('team', 'Unknown')}")
        print(f"  Bot: {auth_data.get('user', 'Unknown')}")
    else:
        print(f"⚠ Warning: Could not validate token - {error}")
        print("  The token may still work. Continuing...")

    port = prompt_with_validation("\nListen port (blank for 3002)", validate_port, required=False)

    # Summary
    print("\n" + "=" * 60)
    print("Configuration Summary")
    print("=" * 60)
    print(f"\nSlack Bot Token: {mask_secret(bot_token)}")
    print(f"Signing Secret:  {mask_secret(signing_secret)}")
    print(f"Port:            {port or 3002}")

    try:
        confirm = input("\nSave this configuration? (Y/n): ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print("\nSetup cancelled.")
        return 0

    if confirm == "n":
        print("Configuration cancelled.")
        return 0

    values = {
        "SLACK_BOT_TOKEN": bot_token,
        "SLACK_SIGNING_SECRET": signing_secret,
    }
    if port:
        values["PORT"] = port
    update_env_file(env_file, values)

    print(f"\n✓ Slack configuration saved to {env_file}")
    print("\nNext steps:")
    print("  1. Run 'message-relay' to start the server")
    print(f"  2. Make sure {request_url} forwards to it")
    return 0
