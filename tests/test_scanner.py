import math

import pytest

from color_core.conversion import oklch_to_hex
from color_core.named_colors import lookup_named
from color_core.scanner import (
    find_all_colors,
    find_color_at_offset,
    find_oklch_at_offset,
    find_oklch_colors,
    find_property_context,
    parse_color_literal,
)


# oklch() ----------------------------------------------------------

def test_oklch_basic_numbers():
    results = find_oklch_colors("color: oklch(0.7 0.15 180);")
    assert len(results) == 1
    m = results[0]
    assert (m.L, m.C, m.H) == pytest.approx((0.7, 0.15, 180))
    assert m.alpha == 1
    assert m.original_format == "oklch"


def test_oklch_offsets():
    text = "color: oklch(0.7 0.15 180);"
    m = find_oklch_colors(text)[0]
    assert (m.start_offset, m.end_offset) == (7, 26)
    assert text[m.start_offset:m.end_offset] == "oklch(0.7 0.15 180)"


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("oklch(70% 0.15 180)", (0.7, 0.15, 180)),
        ("oklch(0.7 37.5% 180)", (0.7, 0.15, 180)),
        ("oklch(0.7 0.15 180deg)", (0.7, 0.15, 180)),
        ("oklch(0.7 0.15 200grad)", (0.7, 0.15, 180)),
        (f"oklch(0.7 0.15 {math.pi}rad)", (0.7, 0.15, 180)),
        ("oklch(0.7 0.15 0.5turn)", (0.7, 0.15, 180)),
        ("oklch(0.7 0.15 0.5TURN)", (0.7, 0.15, 180)),
        ("oklch(7e-1 1.5e-1 1.8e2)", (0.7, 0.15, 180)),
        ("oklch(  0.7   0.15   180  )", (0.7, 0.15, 180)),
        ("oklch(0.7 0.15 -90)", (0.7, 0.15, 270)),
        ("oklch(0.7 0.15 1turn)", (0.7, 0.15, 0)),
    ],
)
def test_oklch_component_units(literal, expected):
    results = find_oklch_colors(literal)
    assert len(results) == 1
    m = results[0]
    assert (m.L, m.C, m.H) == pytest.approx(expected, abs=1e-9)


def test_oklch_alpha():
    assert find_oklch_colors("oklch(0.7 0.15 180 / 0.5)")[0].alpha == pytest.approx(0.5)
    assert find_oklch_colors("oklch(0.7 0.15 180 / 50%)")[0].alpha == pytest.approx(0.5)
    assert find_oklch_colors("oklch(0.7 0.15 180 / none)")[0].alpha == 0


def test_oklch_none_keyword():
    assert find_oklch_colors("oklch(none 0.15 180)")[0].L == 0
    assert find_oklch_colors("oklch(0.7 none 180)")[0].C == 0
    assert find_oklch_colors("oklch(0.7 0.15 none)")[0].H == 0


@pytest.mark.parametrize(
    "text",
    [
        "oklch(from red l c h)",
        "oklch(0.7 0.15)",
        "oklch(0.7 0.15 180 0.5)",
        "oklch(0.7 / 0.15 / 180)",
        "oklch(0.7, 0.15, 180)",
        "oklch(0.7 0.15 abc)",
        "oklch(0.7 0.15 180 / x)",
    ],
)
def test_oklch_rejects(text):
    assert find_oklch_colors(text) == []


def test_oklch_case_insensitive_and_multiple():
    assert len(find_oklch_colors("OKLCH(0.7 0.15 180)")) == 1
    results = find_oklch_colors("color: oklch(0.7 0.15 180); background: oklch(0.9 0.1 90);")
    assert [m.H for m in results] == pytest.approx([180, 90])


def test_oklch_at_offset_boundaries():
    text = "color: oklch(0.7 0.15 180);"
    assert find_oklch_at_offset(text, 15).L == pytest.approx(0.7)
    assert find_oklch_at_offset(text, 7) is not None
    assert find_oklch_at_offset(text, 26) is not None
    assert find_oklch_at_offset(text, 0) is None
    assert find_oklch_at_offset(text, 5) is None
    assert find_oklch_at_offset("", 0) is None


def test_oklch_at_offset_among_multiple():
    text = "color: oklch(0.7 0.15 180); background: oklch(0.9 0.1 90);"
    assert find_oklch_at_offset(text, 50).L == pytest.approx(0.9)


# Point queries ----------------------------------------------------

def test_end_to_end_point_query():
    text = "body { color: oklch(0.7 0.15 180); }"
    offset = text.index("oklch")
    m = find_color_at_offset(text, offset)
    assert m is not None
    assert text[m.start_offset:m.end_offset] == "oklch(0.7 0.15 180)"
    assert (m.L, m.C, m.H, m.alpha) == pytest.approx((0.7, 0.15, 180, 1))
    assert m.original_format == "oklch"


def test_oklch_has_priority():
    m = find_color_at_offset("color: oklch(0.7 0.15 180);", 15)
    assert m.original_format == "oklch"


@pytest.mark.parametrize(
    "text, offset, fmt, alpha",
    [
        ("color: #ff6600;", 9, "hex", 1.0),
        ("color: #f60;", 9, "hex", 1.0),
        ("color: #ff660080;", 9, "hex", 128 / 255),
        ("color: #f608;", 9, "hex", 0x88 / 255),
        ("color: rgb(255, 102, 0);", 12, "rgb", 1.0),
        ("color: rgba(255, 102, 0, 0.5);", 15, "rgb", 0.5),
        ("color: rgb(255 102 0);", 12, "rgb", 1.0),
        ("color: rgb(255 102 0 / 0.5);", 12, "rgb", 0.5),
        ("color: rgb(100%, 40%, 0%);", 12, "rgb", 1.0),
        ("color: hsl(0, 100%, 50%);", 12, "hsl", 1.0),
        ("color: hsla(0, 100%, 50%, 0.5);", 15, "hsl", 0.5),
        ("color: hsl(120 100% 50% / 0.8);", 12, "hsl", 0.8),
        ("color: hsl(0.5turn, 100%, 50%);", 12, "hsl", 1.0),
        ("color: oklab(0.5 0.1 -0.1);", 12, "oklab", 1.0),
        ("color: oklab(0.5 0.1 -0.1 / 0.8);", 12, "oklab", 0.8),
        ("color: oklab(50% 25% -25%);", 12, "oklab", 1.0),
        ("color: oklab(0.5, 0.1, -0.1);", 12, "oklab", 1.0),
        ("color: oklab(0.5, 0.1, -0.1, 0.4);", 12, "oklab", 0.4),
        ("color: red;", 8, "named", 1.0),
        ("color: cornflowerblue;", 10, "named", 1.0),
    ],
)
def test_point_query_formats(text, offset, fmt, alpha):
    m = find_color_at_offset(text, offset)
    assert m is not None
    assert m.original_format == fmt
    assert m.alpha == pytest.approx(alpha, abs=1e-9)


@pytest.mark.parametrize(
    "text, offset",
    [
        ("content: abc#ff6600;", 14),
        ("color: rgb(from red r g b);", 15),
        ("color: hsl(from red h s l);", 12),
        ("color: oklab(from red l a b);", 12),
        ("color: oklch(٠.٧ 0.15 180);", 12),
        ("color: rgb(２５５ 0 0);", 12),
        ("var(--red)", 6),
        ("display: block;", 11),
        ("display: block;", 5),
        ("color: #12345;", 9),
    ],
)
def test_point_query_misses(text, offset):
    assert find_color_at_offset(text, offset) is None


def test_decoded_values_agree_across_syntaxes():
    orange = "#ff6600"
    for literal in ("#ff6600", "#F60", "rgb(255 102 0)", "rgb(100%, 40%, 0%)", "hsl(24 100% 50%)", "hsl(24, 100, 50)"):
        m = find_color_at_offset(literal, 0)
        assert oklch_to_hex(m.L, m.C, m.H) == orange, literal


def test_oklab_percentages():
    m = find_color_at_offset("oklab(50% 25% -25%)", 0)
    a = 0.1
    assert m.L == pytest.approx(0.5)
    assert m.C == pytest.approx(math.hypot(a, a))
    assert m.H == pytest.approx(315)


def test_alpha_is_clamped():
    assert find_color_at_offset("rgba(255, 0, 0, 1.5)", 0).alpha == 1
    assert find_color_at_offset("rgb(255 0 0 / -20%)", 0).alpha == 0


def test_malformed_candidate_does_not_stop_the_scan():
    text = "rgb(1 2) rgb(10 20 30)"
    matches = find_all_colors(text)
    assert len(matches) == 1
    assert matches[0].start_offset == text.index("rgb(10")
    assert find_color_at_offset(text, 14).original_format == "rgb"


# Named colors -----------------------------------------------------

def test_named_prefers_longest_name():
    m = find_color_at_offset("color: darkred;", 10)
    assert m.start_offset == 7
    assert m.end_offset == 14
    assert oklch_to_hex(m.L, m.C, m.H) == "#8b0000"


def test_named_is_case_insensitive():
    m = find_color_at_offset("color: RED;", 8)
    assert m.original_format == "named"
    assert oklch_to_hex(m.L, m.C, m.H) == "#ff0000"


def test_named_rejects_function_calls_and_words():
    assert find_all_colors("red(1)") == []
    assert find_all_colors("bored tanned reddish") == []


def test_named_alpha_is_always_opaque():
    assert all(m.alpha == 1 for m in find_all_colors("red green blue white black"))


# Bulk scan --------------------------------------------------------

@pytest.mark.parametrize(
    "text, fmt",
    [
        ("color: oklch(0.7 0.15 180);", "oklch"),
        ("color: #ff6600;", "hex"),
        ("color: rgb(255, 0, 0);", "rgb"),
        ("color: hsl(0, 100%, 50%);", "hsl"),
        ("color: oklab(0.5 0.1 -0.1);", "oklab"),
        ("color: red;", "named"),
    ],
)
def test_find_all_each_format(text, fmt):
    assert [m.original_format for m in find_all_colors(text)] == [fmt]


def test_find_all_mixed_sorted():
    text = "color: #ff0000; background: oklch(0.7 0.15 180); border: rgb(0, 128, 0);"
    results = find_all_colors(text)
    assert [m.original_format for m in results] == ["hex", "oklch", "rgb"]
    offsets = [m.start_offset for m in results]
    assert offsets == sorted(offsets)


def test_find_all_empty_and_rejections():
    assert find_all_colors("display: block; margin: 10px;") == []
    assert [m for m in find_all_colors("content: abc#ffffff;") if m.original_format == "hex"] == []
    assert [m for m in find_all_colors("color: var(--red);") if m.original_format == "named"] == []


def test_matches_are_fresh_per_scan():
    text = "color: #fff;"
    assert find_all_colors(text) == find_all_colors(text)
    assert find_all_colors(text)[0] is not find_all_colors(text)[0]


# Property context -------------------------------------------------

@pytest.mark.parametrize(
    "text, offset, expected",
    [
        ("--brand-primary: oklch(0.7 0.15 180);", 17, "--brand-primary"),
        ("color: oklch(0.7 0.15 180);", 7, "color"),
        ("border: 1px solid oklch(0.7 0.15 180);", 18, "border"),
        ("--bg: linear-gradient(oklch(0.7 0.15 180), white);", 22, "--bg"),
        ("color: red; --text: oklch(0.7 0.15 180);", 20, "--text"),
        (".foo { --text: oklch(0.7 0.15 180);", 15, "--text"),
        ("--brand  :  oklch(0.7 0.15 180);", 12, "--brand"),
        ("oklch(0.7 0.15 180)", 0, None),
        ("a { } oklch(0.7 0.15 180)", 6, None),
    ],
)
def test_find_property_context(text, offset, expected):
    assert find_property_context(text, offset) == expected


def test_property_context_window_is_bounded():
    text = "color:" + " " * 250 + "red"
    assert find_property_context(text, len(text) - 3) is None


# Single literal ---------------------------------------------------

def test_parse_color_literal():
    assert parse_color_literal("  #fff  ").original_format == "hex"
    assert parse_color_literal("oklch(0.7 0.15 180 / 50%)").alpha == pytest.approx(0.5)
    assert parse_color_literal("red blue") is None
    assert parse_color_literal("") is None
    assert parse_color_literal("not a color") is None


def test_package_short_names():
    import color_core

    text = "a { color: #000; background: white; }"
    fg = color_core.scan_at(text, 12)
    bg = color_core.scan_all(text)[-1]
    assert color_core.property_name_before(text, bg.start_offset) == "background"
    lc = color_core.apca(color_core.oklch_to_srgb(*fg.oklch), color_core.oklch_to_srgb(*bg.oklch))
    assert color_core.apca_label(lc) == "Preferred body text"
    assert color_core.wcag((0, 0, 0), (1, 1, 1)) == pytest.approx(21)


def test_overflowing_literal_is_skipped():
    text = "a { color: #fff; background: rgb(1e200 0 0); }"
    matches = find_all_colors(text)
    assert [m.original_format for m in matches] == ["hex"]

    text = "a { background: hsl(0 100 1e200); color: #fff; }"
    m = find_color_at_offset(text, text.index("#"))
    assert m.original_format == "hex"
    assert find_color_at_offset(text, text.index("hsl")) is None


def test_non_finite_oklch_is_rejected():
    assert find_oklch_colors("oklch(1e400 0.1 90)") == []


def test_lookup_named():
    assert lookup_named("DarkRed") == (139, 0, 0)
