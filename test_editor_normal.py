import unittest

from buffer_registry import BufferRegistry, Region
from editor import Editor
from editor_context import EditorContext
from editor_modes import Mode, PendingOperator
from http_client import Method, Request, Response, TransportError
from keys import Keys


class DummyTransport:
    def __init__(self, response=None, error=None):
        self.response = response or Response(200, "OK", {"X-A": "1"}, "pong", 12)
        self.error = error
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


def _editor(text="", region=Region.BODY, cursor=0, **ctx_kwargs):
    ctx = EditorContext(buffers=BufferRegistry(body=""), **ctx_kwargs)
    ctx.focus.focus(region)
    if region in (Region.URL, Region.HEADERS, Region.BODY):
        ctx.buffers.edit(region, text)
    elif region is Region.RESPONSE:
        ctx.buffers.set_text(region, text)
    ctx.set_cursor(cursor)
    return Editor(ctx)


def _keys(editor, keys):
    for key in keys:
        editor.handle_key(ord(key) if isinstance(key, str) else key)


class NormalMotionTests(unittest.TestCase):
    def test_h_and_l_clamp_to_buffer(self):
        editor = _editor("ab", cursor=0)
        _keys(editor, "h")
        self.assertEqual(editor.ctx.cursor(), 0)
        _keys(editor, "lll")
        self.assertEqual(editor.ctx.cursor(), 2)

    def test_j_and_k_preserve_column_where_possible(self):
        editor = _editor("abcdef\nxy\nlonger", cursor=4)
        _keys(editor, "j")
        self.assertEqual(editor.ctx.cursor(), 9)
        _keys(editor, "j")
        self.assertEqual(editor.ctx.cursor(), 12)
        _keys(editor, "kk")
        self.assertEqual(editor.ctx.cursor(), 2)

    def test_word_motions(self):
        editor = _editor("foo.bar baz", cursor=0)
        _keys(editor, "w")
        self.assertEqual(editor.ctx.cursor(), 3)
        _keys(editor, "ww")
        self.assertEqual(editor.ctx.cursor(), 8)
        _keys(editor, "b")
        self.assertEqual(editor.ctx.cursor(), 4)

    def test_zero_dollar_and_capital_g(self):
        editor = _editor("GET\nPOST\nPUT", cursor=5)
        _keys(editor, "$")
        self.assertEqual(editor.ctx.cursor(), 8)
        _keys(editor, "0")
        self.assertEqual(editor.ctx.cursor(), 4)
        _keys(editor, "G")
        self.assertEqual(editor.ctx.cursor(), 9)

    def test_gg_goes_to_top(self):
        editor = _editor("a\nb\nc", cursor=4)
        _keys(editor, "g")
        self.assertIs(editor.ctx.pending, PendingOperator.GOTO)
        _keys(editor, "g")
        self.assertEqual(editor.ctx.cursor(), 0)
        self.assertIsNone(editor.ctx.pending)

    def test_other_keys_are_ignored_while_goto_pending(self):
        editor = _editor("a\nb\nc", cursor=4)
        _keys(editor, "gkd")
        self.assertEqual(editor.ctx.cursor(), 4)
        self.assertIs(editor.ctx.pending, PendingOperator.GOTO)
        editor.handle_key(Keys.ESCAPE)
        self.assertIsNone(editor.ctx.pending)

    def test_motions_on_empty_buffer_are_noops(self):
        editor = _editor("", cursor=0)
        _keys(editor, "hljkwb0$G")
        self.assertEqual(editor.ctx.cursor(), 0)


class NormalOperatorTests(unittest.TestCase):
    def test_dd_removes_current_line(self):
        editor = _editor("abc\ndef", cursor=1)
        _keys(editor, "dd")
        self.assertEqual(editor.ctx.text(), "def")
        self.assertEqual(editor.ctx.cursor(), 0)
        self.assertIsNone(editor.ctx.pending)

    def test_dd_on_last_line_moves_to_new_last_line(self):
        editor = _editor("one\ntwo\nthree", cursor=10)
        _keys(editor, "dd")
        self.assertEqual(editor.ctx.text(), "one\ntwo")
        self.assertEqual(editor.ctx.cursor(), 4)

    def test_dd_on_only_line_empties_buffer(self):
        editor = _editor("lonely", cursor=3)
        _keys(editor, "dd")
        self.assertEqual(editor.ctx.text(), "")
        self.assertEqual(editor.ctx.cursor(), 0)

    def test_d_dollar_truncates_at_cursor(self):
        editor = _editor("Accept: */*\nX: 1", cursor=6)
        _keys(editor, "d$")
        self.assertEqual(editor.ctx.text(), "Accept\nX: 1")
        self.assertEqual(editor.ctx.cursor(), 6)

    def test_yy_copies_line_without_mutating(self):
        editor = _editor("abc\ndef", cursor=5)
        _keys(editor, "yy")
        self.assertEqual(editor.ctx.text(), "abc\ndef")
        self.assertEqual(editor.ctx.yank_register, "def")
        self.assertEqual(editor.ctx.cursor(), 5)

    def test_y_dollar_copies_rest_of_line(self):
        editor = _editor("Authorization: Bearer x", cursor=15)
        _keys(editor, "y$")
        self.assertEqual(editor.ctx.yank_register, "Bearer x")

    def test_other_operator_key_does_not_replace_pending(self):
        editor = _editor("abc\ndef", cursor=0)
        _keys(editor, "dy")
        self.assertIs(editor.ctx.pending, PendingOperator.DELETE)
        _keys(editor, "d")
        self.assertEqual(editor.ctx.text(), "def")

    def test_delete_on_response_is_noop(self):
        editor = _editor("line1\nline2", region=Region.RESPONSE)
        _keys(editor, "dd")
        self.assertEqual(editor.ctx.text(), "line1\nline2")
        self.assertIsNone(editor.ctx.pending)
        _keys(editor, "yy")
        self.assertEqual(editor.ctx.yank_register, "line1")

    def test_paste_inserts_line_below_and_keeps_register(self):
        editor = _editor("a\nb", cursor=0)
        editor.ctx.yank_register = "X-Trace: 1"
        _keys(editor, "p")
        self.assertEqual(editor.ctx.text(), "a\nX-Trace: 1\nb")
        self.assertEqual(editor.ctx.cursor(), 2)
        _keys(editor, "p")
        self.assertEqual(editor.ctx.text(), "a\nX-Trace: 1\nX-Trace: 1\nb")
        self.assertEqual(editor.ctx.yank_register, "X-Trace: 1")

    def test_paste_into_empty_buffer_and_after_last_line(self):
        editor = _editor("", cursor=0)
        editor.ctx.yank_register = "first"
        _keys(editor, "p")
        self.assertEqual(editor.ctx.text(), "first")
        self.assertEqual(editor.ctx.cursor(), 0)
        _keys(editor, "p")
        self.assertEqual(editor.ctx.text(), "first\nfirst")
        self.assertEqual(editor.ctx.cursor(), 6)

    def test_paste_with_empty_register_is_noop(self):
        editor = _editor("abc", cursor=1)
        _keys(editor, "p")
        self.assertEqual(editor.ctx.text(), "abc")
        self.assertEqual(editor.ctx.cursor(), 1)

    def test_yank_then_paste_duplicates_line(self):
        editor = _editor("k: v", region=Region.HEADERS, cursor=0)
        _keys(editor, "yyp")
        self.assertEqual(editor.ctx.text(), "k: v\nk: v")


class NormalModeSwitchTests(unittest.TestCase):
    def test_tab_backtab_and_number_keys(self):
        editor = _editor("", region=Region.URL)
        editor.handle_key(Keys.TAB)
        self.assertIs(editor.ctx.region, Region.HEADERS)
        editor.handle_key(Keys.BACKTAB)
        editor.handle_key(Keys.BACKTAB)
        self.assertIs(editor.ctx.region, Region.SIDEBAR)
        _keys(editor, "5")
        self.assertIs(editor.ctx.region, Region.RESPONSE)

    def test_insert_entry_variants(self):
        editor = _editor("abc\ndef", cursor=5)
        _keys(editor, "A")
        self.assertIs(editor.ctx.mode, Mode.INSERT)
        self.assertEqual(editor.ctx.cursor(), 7)
        editor.handle_key(Keys.ESCAPE)
        _keys(editor, "I")
        self.assertEqual(editor.ctx.cursor(), 4)

    def test_o_opens_line_below_in_body(self):
        editor = _editor("abc\ndef", cursor=1)
        _keys(editor, "o")
        self.assertIs(editor.ctx.mode, Mode.INSERT)
        self.assertEqual(editor.ctx.text(), "abc\n\ndef")
        self.assertEqual(editor.ctx.cursor(), 4)

    def test_insert_refused_on_read_only_region(self):
        editor = _editor("resp", region=Region.RESPONSE)
        _keys(editor, "i")
        self.assertIs(editor.ctx.mode, Mode.NORMAL)
        self.assertEqual(editor.ctx.status_msg, "Read-only region")

    def test_colon_enters_command_mode(self):
        editor = _editor("")
        _keys(editor, ":")
        self.assertIs(editor.ctx.mode, Mode.COMMAND)

    def test_v_focuses_response_and_anchors(self):
        editor = _editor("body", region=Region.BODY)
        editor.ctx.buffers.set_text(Region.RESPONSE, "hello")
        editor.ctx.buffers.set_cursor(Region.RESPONSE, 3)
        _keys(editor, "v")
        self.assertIs(editor.ctx.mode, Mode.VISUAL)
        self.assertIs(editor.ctx.region, Region.RESPONSE)
        self.assertEqual(editor.ctx.visual_anchor, 3)

    def test_q_and_ctrl_c_request_exit(self):
        editor = _editor("")
        self.assertFalse(editor.handle_key(ord("q")))
        self.assertTrue(editor.ctx.should_exit)

        editor = _editor("")
        _keys(editor, "i")
        self.assertFalse(editor.handle_key(Keys.CTRL_C))
        self.assertTrue(editor.ctx.should_exit)

    def test_sidebar_selection_and_open(self):
        class Store:
            def load(self, name):
                return Request(Method.PUT, f"https://x/{name}", {}, "")

        editor = _editor("", region=Region.SIDEBAR, store=Store())
        editor.ctx.set_collections(["alpha", "beta"])
        _keys(editor, "jj")
        self.assertEqual(editor.ctx.selected_collection, 1)
        _keys(editor, "o")
        self.assertEqual(editor.ctx.buffers.get(Region.URL), "https://x/beta")
        self.assertIs(editor.ctx.method, Method.PUT)
        _keys(editor, "k")
        self.assertEqual(editor.ctx.selected_collection_name(), "alpha")


class SendTests(unittest.TestCase):
    def test_enter_sends_and_focuses_response(self):
        transport = DummyTransport()
        editor = _editor("{\"a\": 1}", send=transport)
        editor.ctx.buffers.edit(Region.URL, "https://api.test/ping")
        editor.ctx.buffers.edit(Region.HEADERS, "Accept: */*\nbroken")
        editor.ctx.method = Method.POST
        editor.handle_key(10)

        request = transport.requests[0]
        self.assertIs(request.method, Method.POST)
        self.assertEqual(request.url, "https://api.test/ping")
        self.assertEqual(request.headers, {"Accept": "*/*"})
        self.assertEqual(request.body, "{\"a\": 1}")
        self.assertIs(editor.ctx.region, Region.RESPONSE)
        self.assertEqual(editor.ctx.last_response.status, 200)
        self.assertTrue(editor.ctx.text().startswith("Status: 200 OK (12 ms)"))
        self.assertTrue(editor.ctx.text().endswith("pong"))

    def test_transport_failure_becomes_sentinel(self):
        transport = DummyTransport(error=TransportError("connection refused"))
        editor = _editor("", send=transport)
        editor.handle_key(13)
        response = editor.ctx.last_response
        self.assertEqual(response.status, 65535)
        self.assertEqual(response.status_text, "Invalid Request")
        self.assertEqual(response.body, "")
        self.assertIs(editor.ctx.region, Region.RESPONSE)
        self.assertFalse(editor.ctx.should_exit)


if __name__ == "__main__":
    unittest.main()
