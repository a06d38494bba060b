from buffer_registry import Region


FOCUS_CYCLE = (
    Region.SIDEBAR,
    Region.URL,
    Region.HEADERS,
    Region.BODY,
    Region.RESPONSE,
)


class FocusModel:
    def __init__(self, region: Region = Region.URL):
        self.region = region

    def focus(self, region: Region) -> Region:
        self.region = region
        return region

    def next(self) -> Region:
        idx = FOCUS_CYCLE.index(self.region)
        return self.focus(FOCUS_CYCLE[(idx + 1) % len(FOCUS_CYCLE)])

    def prev(self) -> Region:
        idx = FOCUS_CYCLE.index(self.region)
        return self.focus(FOCUS_CYCLE[(idx - 1) % len(FOCUS_CYCLE)])

    def jump(self, number: int) -> Region:
        """Focus the region bound to the 1-based number key, if any."""
        if 1 <= number <= len(FOCUS_CYCLE):
            return self.focus(FOCUS_CYCLE[number - 1])
        return self.region
