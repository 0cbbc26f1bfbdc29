from wordpilot.highlight import Segment, highlight_segments


def test_marked_word_is_highlighted():
    assert highlight_segments("The widget_id must be unique", ["widget_id"]) == [
        Segment("The ", False),
        Segment("widget_id", True),
        Segment(" must be unique", False),
    ]


def test_identical_word_elsewhere_is_highlighted_too():
    # matching is by text, so the unmarked "Lahore" is highlighted as well
    segments = highlight_segments("Lahore is far from Lahore Cantt", ["Lahore"])
    assert [s.text for s in segments if s.highlighted] == ["Lahore", "Lahore"]


def test_word_boundaries_respected():
    segments = highlight_segments("chai chaiwala", ["chai"])
    assert segments == [Segment("chai", True), Segment(" chaiwala", False)]


def test_regex_characters_are_escaped():
    segments = highlight_segments("call foo.bar() now", ["foo.bar()"])
    assert Segment("foo.bar()", True) in segments
    assert highlight_segments("fooXbar", ["foo.bar"]) == [Segment("fooXbar", False)]


def test_longer_word_wins():
    segments = highlight_segments("New York City", ["New York", "New York City"])
    assert segments == [Segment("New York City", True)]


def test_empty_inputs():
    assert highlight_segments("", ["x"]) == []
    assert highlight_segments("text", []) == [Segment("text", False)]
    assert highlight_segments("text", [""]) == [Segment("text", False)]
