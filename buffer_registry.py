from enum import Enum


class Region(Enum):
    SIDEBAR = "sidebar"
    URL = "url"
    HEADERS = "headers"
    BODY = "body"
    RESPONSE = "response"


EDITABLE_REGIONS = frozenset({Region.URL, Region.HEADERS, Region.BODY})
MULTILINE_REGIONS = frozenset({Region.HEADERS, Region.BODY})

DEFAULT_URL = "https://api.example.com"
DEFAULT_HEADERS = "Content-Type: application/json"
RESPONSE_PLACEHOLDER = "No response yet. Press Enter to send request."


class ReadOnlyRegionError(Exception):
    pass


class BufferRegistry:
    """Text for every region plus the per-region cursor and scroll maps."""

    def __init__(self, url=DEFAULT_URL, headers=DEFAULT_HEADERS, body=""):
        self._texts: dict[Region, str] = {
            Region.URL: url,
            Region.HEADERS: headers,
            Region.BODY: body,
            Region.RESPONSE: RESPONSE_PLACEHOLDER,
        }
        self.cursors: dict[Region, int] = {region: 0 for region in Region}
        self.scrolls: dict[Region, int] = {region: 0 for region in Region}
        self.command_line = ""

    # ---------- text ----------
    def get(self, region: Region) -> str:
        return self._texts.get(region, "")

    @staticmethod
    def is_editable(region: Region) -> bool:
        return region in EDITABLE_REGIONS

    def edit(self, region: Region, text: str) -> bool:
        """Replace the text of an editable region. Returns False otherwise."""
        if not self.is_editable(region):
            return False
        self._texts[region] = text
        self.set_cursor(region, self.cursor(region))
        return True

    def set_text(self, region: Region, text: str) -> None:
        # the response view is rebuilt through here; the sidebar has no text
        if region not in self._texts:
            raise ReadOnlyRegionError(f"{region.value} holds no text")
        self._texts[region] = text
        self.set_cursor(region, self.cursor(region))

    # ---------- cursors ----------
    def cursor(self, region: Region) -> int:
        return self.cursors.get(region, 0)

    def set_cursor(self, region: Region, offset: int) -> int:
        offset = max(0, min(offset, len(self.get(region))))
        self.cursors[region] = offset
        return offset

    # ---------- scrolling ----------
    def scroll(self, region: Region) -> int:
        return self.scrolls.get(region, 0)

    def update_scroll(self, region: Region, cursor_line: int, visible_rows: int) -> int:
        visible_rows = max(1, visible_rows)
        scroll = self.scroll(region)
        if cursor_line < scroll:
            scroll = cursor_line
        elif cursor_line >= scroll + visible_rows:
            scroll = cursor_line - visible_rows + 1
        self.scrolls[region] = scroll
        return scroll

    def reset_view(self, region: Region) -> None:
        self.cursors[region] = 0
        self.scrolls[region] = 0

    # ---------- command line ----------
    def clear_command_line(self) -> None:
        self.command_line = ""


# ---------- header block ----------
def parse_headers(block: str) -> list[tuple[str, str]]:
    pairs = []
    for line in block.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        pairs.append((key.strip(), value.strip()))
    return pairs


def headers_to_dict(pairs) -> dict[str, str]:
    headers: dict[str, str] = {}
    for key, value in pairs:
        headers[key] = value
    return headers


def format_headers(headers: dict[str, str]) -> str:
    return "\n".join(f"{key}: {value}" for key, value in headers.items())
