from rep.flags import Flag
from rep.search import MatchedLine, SearchConfig, search


def test_basic_search():
    result = search("line one\nline two\nline three", "two", SearchConfig())
    assert result.total_count == 1
    assert result.matches[0].line_number == 1
    assert result.matches[0].content == "line two"


def test_case_insensitive_search():
    config = SearchConfig(case_insensitive=True)
    result = search("Line One\nLINE TWO\nline three", "line", config)
    assert result.total_count == 3


def test_case_sensitive_search_misses_other_case():
    result = search("Line One\nLINE TWO\nline three", "line", SearchConfig())
    assert [m.content for m in result.matches] == ["line three"]


def test_inverted_search():
    config = SearchConfig(invert_match=True)
    result = search("line one\nline two\nline three", "two", config)
    assert result.total_count == 2
    assert result.matches[0].content == "line one"
    assert result.matches[1].content == "line three"


def test_no_matches():
    result = search("line one\nline two\nline three", "four", SearchConfig())
    assert result.total_count == 0
    assert result.matches == []


def test_trailing_newline_and_carriage_returns():
    result = search("a\r\nb\r\n", "", SearchConfig())
    assert result.matches == [MatchedLine(0, "a"), MatchedLine(1, "b")]


def test_empty_content_has_no_lines():
    result = search("", "", SearchConfig(invert_match=True))
    assert result.total_count == 0


def test_count_matches_and_inverse_cover_all_lines():
    content = "alpha\nbeta\ngamma\ndelta"
    plain = search(content, "a", SearchConfig())
    inverted = search(content, "ta", SearchConfig(invert_match=True))
    direct = search(content, "ta", SearchConfig())
    assert plain.total_count == 4
    assert inverted.total_count + direct.total_count == 4


def test_config_from_flags():
    config = SearchConfig.from_flags([Flag.CASE_INSENSITIVE, Flag.WORD_MATCH])
    assert config == SearchConfig(case_insensitive=True, invert_match=False, word_match=True)
    assert SearchConfig.from_flags([Flag.INVERT]).invert_match is True