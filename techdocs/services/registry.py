"""Platform Registry — the closed set of documented platforms.

Responsibilities:
  - Load the ordered platform list from registry.yaml once at startup
  - Fall back to the built-in platform list when the file is unusable
  - Answer membership checks before any route touches the filesystem
"""

import logging
from pathlib import Path

import yaml

import config

log = logging.getLogger(__name__)

DEFAULT_PLATFORMS = ("truestate", "acn", "vault", "canvas-homes", "restack")


def display_name(identifier):
    """Turn a dashed identifier into a title: ``canvas-homes`` → ``Canvas Homes``."""
    return " ".join(word[:1].upper() + word[1:] for word in identifier.split("-"))


class PlatformRegistry:
    """Immutable, ordered registry of known platforms."""

    def __init__(self, registry_path=None):
        self._registry_path = Path(registry_path or config.REGISTRY_PATH)
        self._platforms = self._load_registry()
        self._by_id = {p["id"]: p for p in self._platforms}

    # ── Registry Loading ───────────────────────────────────────────────────

    def _load_registry(self):
        """Read registry.yaml into a tuple of ``{"id", "name"}`` dicts."""
        entries = None
        try:
            with open(self._registry_path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            entries = data.get("platforms")
        except FileNotFoundError:
            log.error("Registry not found at %s.", self._registry_path)
        except (OSError, UnicodeDecodeError) as exc:
            log.error("Registry at %s is unreadable: %s", self._registry_path, exc)
        except yaml.YAMLError as exc:
            log.error("Invalid YAML in registry: %s", exc)
        except AttributeError:
            log.error("Registry at %s is not a mapping.", self._registry_path)

        if not entries or not isinstance(entries, list):
            log.warning("Using built-in platform list.")
            entries = list(DEFAULT_PLATFORMS)

        platforms = []
        seen = set()
        for entry in entries:
            if isinstance(entry, dict):
                platform_id = entry.get("id")
                name = entry.get("name")
            else:
                platform_id = entry
                name = None
            # Ids must be declared strings; null or numeric ids are dropped.
            if not isinstance(platform_id, str):
                log.warning("Skipping registry entry without a string id: %r", entry)
                continue
            platform_id = platform_id.strip()
            if not platform_id or platform_id in seen:
                continue
            seen.add(platform_id)
            platforms.append({
                "id": platform_id,
                "name": name or display_name(platform_id),
            })

        log.info("Registry loaded: %d platforms.", len(platforms))
        return tuple(platforms)

    # ── Queries ────────────────────────────────────────────────────────────

    def is_known(self, platform_id):
        """Return True if *platform_id* is a registered platform."""
        return platform_id in self._by_id

    def all(self):
        """Return all platforms in registry order (safe copies)."""
        return [dict(p) for p in self._platforms]

    def get(self, platform_id):
        """Return a single platform dict or None."""
        platform = self._by_id.get(platform_id)
        return dict(platform) if platform else None

    def display_name(self, platform_id):
        platform = self._by_id.get(platform_id)
        return platform["name"] if platform else display_name(platform_id)

    @property
    def ids(self):
        return tuple(p["id"] for p in self._platforms)

    def __len__(self):
        return len(self._platforms)
