"""Fixed web manifest and browserconfig files written beside each theme's icons."""

from __future__ import annotations

import json
from pathlib import Path

WEBMANIFEST_NAME = "site.webmanifest"
BROWSERCONFIG_NAME = "browserconfig.xml"

WEBMANIFEST = {
    "icons": [
        {"src": "android-chrome-192x192.png", "sizes": "192x192", "type": "image/png"},
        {"src": "android-chrome-512x512.png", "sizes": "512x512", "type": "image/png"},
        {"src": "maskable-512x512.png", "sizes": "512x512", "type": "image/png", "purpose": "maskable"},
    ]
}

BROWSERCONFIG = """<?xml version="1.0" encoding="utf-8"?>
<browserconfig>
  <msapplication>
    <tile>
      <square150x150logo src="mstile-150x150.png"/>
    </tile>
  </msapplication>
</browserconfig>
"""


def write_manifests(directory: Path) -> list[Path]:
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / WEBMANIFEST_NAME
    manifest.write_text(json.dumps(WEBMANIFEST, indent=2) + "\n", encoding="utf-8")
    browserconfig = directory / BROWSERCONFIG_NAME
    browserconfig.write_text(BROWSERCONFIG, encoding="utf-8")
    return [manifest, browserconfig]
