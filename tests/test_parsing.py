import pytest

from todo_server.schemas import TodoOut, encode_todo, encode_todos, parse_description
from todo_server.settings import DEFAULT_PORT, get_settings
from todo_server.utils import InvalidTodoId, id_segment, parse_todo_id


class TestIdParsing:
    @pytest.mark.parametrize("segment,expected", [("0", 0), ("42", 42), ("+7", 7), ("-3", -3), ("007", 7)])
    def test_valid(self, segment, expected):
        assert parse_todo_id(segment) == expected

    @pytest.mark.parametrize("segment", ["", "abc", "1.5", " 1", "1_000", "0x10", "9223372036854775808"])
    def test_invalid(self, segment):
        with pytest.raises(InvalidTodoId):
            parse_todo_id(segment)

    def test_int64_bounds(self):
        assert parse_todo_id("9223372036854775807") == 2**63 - 1
        assert parse_todo_id("-9223372036854775808") == -(2**63)

    def test_id_segment(self):
        assert id_segment("") == ""
        assert id_segment("12") == "12"
        assert id_segment("12/extra/more") == "12"
        assert id_segment("/12") == ""


class TestBodyDecoding:
    def test_exact_key(self):
        assert parse_description(b'{"Description": "x"}') == "x"

    def test_case_variant_key(self):
        assert parse_description(b'{"DESCRIPTION": "y"}') == "y"

    def test_missing_key(self):
        assert parse_description(b'{"Title": "z"}') == ""

    def test_later_non_string_keeps_earlier_string(self):
        assert parse_description(b'{"Description": "a", "description": 5}') == "a"

    def test_later_string_wins(self):
        assert parse_description(b'{"description": "a", "Description": "b"}') == "b"

    def test_null_keeps_earlier_string(self):
        assert parse_description(b'{"Description": "a", "DESCRIPTION": null}') == "a"

    def test_invalid_utf8_is_replaced(self):
        assert parse_description(b'{"Description": "a\xffb"}') == "a\ufffdb"

    @pytest.mark.parametrize("raw", [b"", b"{", b"[]", b"null", b'"text"', b'{"Description": null}'])
    def test_malformed_is_empty(self, raw):
        assert parse_description(raw) == ""


class TestEncoding:
    def test_item_wire_names(self):
        assert encode_todo(TodoOut(id=1, description="d")) == b'{"Id":1,"Description":"d"}'

    def test_list(self):
        assert encode_todos([]) == b"[]"
        assert encode_todos([TodoOut(id=0, description="")]) == b'[{"Id":0,"Description":""}]'


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("TODO_HOST", "TODO_PORT", "CORS_ALLOW_ORIGIN", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.host == "localhost"
        assert settings.port == DEFAULT_PORT == 5318
        assert settings.cors_allow_origin == "*"
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TODO_PORT", "8081")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.port == 8081
        assert settings.log_level == "DEBUG"

    def test_bad_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("TODO_PORT", "not-a-port")
        assert get_settings().port == DEFAULT_PORT
