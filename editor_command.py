import logging

from buffer_registry import (
    RESPONSE_PLACEHOLDER,
    Region,
    format_headers,
    headers_to_dict,
    parse_headers,
)
from collections_store import CollectionError
from editor_modes import ModeState
from http_client import Method, Request, Response, TransportError, format_response
from keys import Keys, is_printable


logger = logging.getLogger(__name__)


# ---------- request actions ----------
def build_request(ctx) -> Request:
    buffers = ctx.buffers
    return Request(
        method=ctx.method,
        url=buffers.get(Region.URL),
        headers=headers_to_dict(parse_headers(buffers.get(Region.HEADERS))),
        body=buffers.get(Region.BODY),
    )


def send_current_request(ctx) -> Response:
    request = build_request(ctx)
    ctx.current_request = request
    try:
        if ctx.send is None:
            raise TransportError("no transport configured")
        response = ctx.send(request)
    except TransportError as exc:
        logger.warning("Request to %s failed: %s", request.url, exc)
        response = Response.invalid()
        ctx.set_status(f"Request failed: {exc}", 4)

    ctx.last_response = response
    ctx.buffers.set_text(Region.RESPONSE, format_response(response))
    ctx.buffers.reset_view(Region.RESPONSE)
    ctx.focus.focus(Region.RESPONSE)
    return response


def clear_response(ctx) -> None:
    ctx.current_request = None
    ctx.last_response = None
    ctx.buffers.set_text(Region.RESPONSE, RESPONSE_PLACEHOLDER)
    ctx.buffers.reset_view(Region.RESPONSE)


def apply_request(ctx, request: Request) -> None:
    buffers = ctx.buffers
    buffers.edit(Region.URL, request.url)
    buffers.edit(Region.HEADERS, format_headers(request.headers))
    buffers.edit(Region.BODY, request.body)
    ctx.method = request.method


def load_collection(ctx, name: str) -> bool:
    if ctx.store is None:
        ctx.set_status("No collection store", 3)
        return False
    try:
        request = ctx.store.load(name)
    except CollectionError as exc:
        logger.warning("Load of %r failed: %s", name, exc)
        ctx.set_status(f"Load failed: {exc}", 4)
        return False
    apply_request(ctx, request)
    ctx.set_status(f"Loaded {name}", 3)
    return True


def save_collection(ctx, name: str) -> bool:
    if ctx.store is None:
        ctx.set_status("No collection store", 3)
        return False
    request = build_request(ctx)
    try:
        ctx.store.save(name, request)
        names = ctx.store.list_names()
    except CollectionError as exc:
        logger.warning("Save of %r failed: %s", name, exc)
        ctx.set_status(f"Save failed: {exc}", 4)
        return False
    ctx.set_collections(names)
    ctx.set_status(f"Saved {name}", 3)
    return True


def _edit_header(ctx, args: str) -> None:
    action, _, rest = args.partition(" ")
    rest = rest.strip()
    headers = headers_to_dict(parse_headers(ctx.buffers.get(Region.HEADERS)))
    if action == "add" and rest:
        key, _, value = rest.partition(" ")
        headers[key.rstrip(":")] = value.strip()
    elif action == "rm" and rest:
        headers.pop(rest, None)
    else:
        return
    ctx.buffers.edit(Region.HEADERS, format_headers(headers))


# ---------- command line ----------
class EditorCommand:
    """Command-line editing and execution of the ':' grammar."""

    def __init__(self, ctx, history=None):
        self.ctx = ctx
        self.history = history
        self.history_idx = None

    def handle_key(self, ch: int) -> bool:
        buffers = self.ctx.buffers

        if ch == Keys.ESCAPE:
            self._leave()
            return True

        if ch in Keys.ENTER:
            line = buffers.command_line.strip()
            self.execute(line)
            if line and self.history is not None:
                self.history.append(line)
                self.history.persist(line)
            self._leave()
            return True

        if ch in Keys.BACKSPACE:
            buffers.command_line = buffers.command_line[:-1]
            self.history_idx = None
            return True

        if ch in (Keys.UP, 16):  # Up / Ctrl+P
            self._recall(-1)
            return True
        if ch in (Keys.DOWN, 14):  # Down / Ctrl+N
            self._recall(1)
            return True

        if is_printable(ch):
            buffers.command_line += chr(ch)
            self.history_idx = None
            return True
        return False

    def _leave(self):
        self.history_idx = None
        self.ctx.set_mode(ModeState.normal())

    def _recall(self, step: int):
        items = self.history.items if self.history is not None else []
        if not items:
            return
        if self.history_idx is None:
            if step > 0:
                return
            idx = len(items) - 1
        else:
            idx = self.history_idx + step
        if idx >= len(items):
            self.history_idx = None
            self.ctx.buffers.command_line = ""
            return
        self.history_idx = max(0, idx)
        self.ctx.buffers.command_line = items[self.history_idx]

    def execute(self, line: str) -> None:
        ctx = self.ctx
        parts = line.split(None, 1)
        if not parts:
            return
        verb = parts[0]
        args = parts[1].strip() if len(parts) > 1 else ""

        if verb in ("q", "quit") and not args:
            ctx.should_exit = True
        elif verb == "method" and args:
            ctx.method = Method.from_verb(args.split()[0])
        elif verb == "send" and not args:
            send_current_request(ctx)
        elif verb == "clear" and not args:
            clear_response(ctx)
        elif verb == "load" and args:
            load_collection(ctx, args)
        elif verb == "save" and args:
            save_collection(ctx, args)
        elif verb == "header" and args:
            _edit_header(ctx, args)
