import json
import os
from datetime import datetime, timezone

from http_client import Request


class CollectionError(Exception):
    pass


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class CollectionStore:
    """Named request collections, one JSON file per name."""

    EXT = ".json"

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, name: str) -> str:
        return os.path.join(self.directory, name + self.EXT)

    def list_names(self) -> list[str]:
        try:
            entries = os.listdir(self.directory)
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise CollectionError(f"Cannot list {self.directory}: {exc}") from exc
        return sorted(
            entry[: -len(self.EXT)]
            for entry in entries
            if entry.endswith(self.EXT) and len(entry) > len(self.EXT)
        )

    def load(self, name: str) -> Request:
        path = self._path(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as exc:
            raise CollectionError(f"No collection named '{name}'") from exc
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CollectionError(f"Cannot read '{name}': {exc}") from exc

        try:
            saved = data["requests"][0]
            return Request.from_dict(saved["request"])
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise CollectionError(f"Malformed collection '{name}'") from exc

    def save(self, name: str, request: Request) -> None:
        if not name:
            raise CollectionError("Collection name required")
        path = self._path(name)
        created_at = self._existing_created_at(path)
        now = _now()
        payload = {
            "name": name,
            "requests": [
                {
                    "name": name,
                    "description": None,
                    "request": request.to_dict(),
                    "created_at": created_at or now,
                    "updated_at": now,
                }
            ],
        }
        try:
            os.makedirs(self.directory, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.write("\n")
        except OSError as exc:
            raise CollectionError(f"Cannot write '{name}': {exc}") from exc

    def _existing_created_at(self, path: str):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            created = data["requests"][0]["created_at"]
        except (OSError, ValueError, KeyError, IndexError, TypeError):
            return None
        return created if isinstance(created, str) else None
