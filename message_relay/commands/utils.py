"""Shared utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

ENV_SECTION_HEADER = "# Slack Configuration"


def update_env_file(env_file: Path, values: Mapping[str, str]) -> None:
    """Update or create variables in a .env file, keeping unrelated lines."""

    if env_file.exists():
        lines = env_file.read_text(encoding="utf-8").splitlines()
    else:
        lines = [
            "# Message Relay Configuration",
            "# Generated by message-relay config slack",
            "",
            ENV_SECTION_HEADER,
        ]

    for var_name, var_value in values.items():
        updated = False
        for i, line in enumerate(lines):
            stripped = line.strip()
            if stripped.startswith(f"{var_name}=") or stripped.startswith(f"# {var_name}="):
                lines[i] = f"{var_name}={var_value}"
                updated = True
                break

        if not updated:
            # Insert after the Slack section header, or start a new section
            try:
                insert_idx = lines.index(ENV_SECTION_HEADER) + 1
            except ValueError:
                if lines and lines[-1].strip():
                    lines.append("")
                lines.append(ENV_SECTION_HEADER)
                insert_idx = len(lines)
            while insert_idx < len(lines) and lines[insert_idx].strip() and not lines[insert_idx].startswith("#"):
                insert_idx += 1
            lines.insert(insert_idx, f"{var_name}={var_value}")

    env_file.parent.mkdir(parents=True, exist_ok=True)
    env_file.write_text("\n".join(lines) + "\n", encoding="utf-8")
    env_file.chmod(0o600)


def mask_secret(value: str) -> str:
    if len(value) <= 12:
        return "*" * len(value)
    return f"{value[:8]}...{value[-4:]}"
