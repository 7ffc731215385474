from discord_embed import escape_html, text_to_html


# --- escape_html ---

def test_escape_all_four():
    assert escape_html('<a href="x">Tom & Jerry</a>') == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;"
    )


def test_escape_ampersand_first():
    assert escape_html("<") == "&lt;"
    assert escape_html("&lt;") == "&amp;lt;"


def test_escape_not_idempotent_on_entities():
    once = escape_html("a & b")
    assert escape_html(once) == "a &amp;amp; b"


def test_escape_leaves_plain_text():
    text = "Nothing to escape here, it's fine."
    assert escape_html(text) == text


def test_escape_empty():
    assert escape_html("") == ""


# --- text_to_html ---

def test_newlines_become_br():
    assert text_to_html("a\nb") == "a<br>b"
    assert text_to_html("a\n\nb\n") == "a<br><br>b<br>"


def test_script_tag_escaped():
    assert text_to_html("<script>") == "&lt;script&gt;"


def test_quotes_left_alone():
    assert text_to_html('say "hi" & wave') == 'say "hi" &amp; wave'
