"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SETTINGS_FILENAME = "cloud-api-manager.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Settings template for cloud-api-manager.
# Replace every <REQUIRED> placeholder before running sync.
# Optional keys are commented out. Uncomment them only when your setup needs them.
# Command line options and CLOUD_APIMGT_* environment variables override these values.

provider:
  # Identifier of the API-management provider. Only "tyk" is supported.
  name: "tyk"
  # Dashboard credential sent in the Authorization header.
  # Prefer the CLOUD_APIMGT_AUTHORISATION environment variable over storing it here.
  authorisation: "<REQUIRED>"
  # Dashboard base url, https://admin.cloud.tyk.io when omitted.
  # base_url: "https://admin.cloud.tyk.io"
  # Per-request timeout in seconds.
  timeout_seconds: 30
"""


def build_placeholder_settings() -> str:
    """Build a YAML settings template with placeholders and inline guidance."""
    return _SETTINGS_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the placeholder settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
