from loguru import logger

from autobar.navigation.front_matter import extract_order, parse_front_matter


def test_extracts_integer_order():
    text = "---\ntitle: Setup\norder: 3\n---\n\n# Setup\n"
    assert extract_order(text) == 3


def test_extracts_float_order():
    assert extract_order("---\norder: 1.5\n---\n") == 1.5


def test_missing_front_matter_is_unordered():
    assert extract_order("# Title\n\norder: 2\n") is None


def test_front_matter_without_order_is_unordered():
    assert extract_order("---\ntitle: Hello\n---\nbody") is None


def test_non_numeric_order_is_ignored_with_warning():
    messages: list[str] = []
    sink_id = logger.add(lambda msg: messages.append(str(msg)), level="WARNING")
    try:
        assert extract_order("---\norder: first\n---\n") is None
        assert extract_order("---\norder: true\n---\n") is None
    finally:
        logger.remove(sink_id)
    assert len(messages) == 2
    assert "non-numeric" in messages[0]


def test_invalid_yaml_degrades_to_empty_mapping():
    assert parse_front_matter("---\norder: [1\n---\n") == {}
    assert extract_order("---\norder: [1\n---\n") is None


def test_non_mapping_front_matter_is_ignored():
    assert parse_front_matter("---\n- a\n- b\n---\n") == {}


def test_handles_bom_and_crlf():
    text = "\ufeff---\r\norder: 2\r\n---\r\n# Title\r\n"
    assert extract_order(text) == 2


def test_front_matter_must_start_the_file():
    assert parse_front_matter("intro\n---\norder: 1\n---\n") == {}
