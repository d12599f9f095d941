"""Unit tests for the search-config command line."""

import orjson
import pytest

from search_config import cli
from search_config.fields import build_field
from search_config.tokenizers import build_tokenizer


pytestmark = [pytest.mark.unit, pytest.mark.usefixtures("restore_root_logger")]


def _run(capsys, argv):
    code = cli.main(argv)
    out = capsys.readouterr().out
    return code, out


def test_tokenizer_command_prints_document(capsys):
    code, out = _run(capsys, ["tokenizer", "ngram", "--min-gram", "3", "--max-gram", "3", "--no-prefix-only"])

    assert code == 0
    assert orjson.loads(out) == build_tokenizer("ngram", min_gram=3, max_gram=3, prefix_only=False)


def test_tokenizer_without_options(capsys):
    code, out = _run(capsys, ["tokenizer", "simple"])

    assert code == 0
    assert out.strip() == '{"type":"simple"}'


def test_field_command_with_boolean_flags(capsys):
    code, out = _run(capsys, ["field", "body", "--indexed", "--no-stored", "--record", "position"])

    assert code == 0
    assert orjson.loads(out) == build_field("body", indexed=True, stored=False, record="position")


def test_field_without_flags_has_empty_body(capsys):
    code, out = _run(capsys, ["field", "f"])

    assert code == 0
    assert orjson.loads(out) == {"f": {}}


def test_field_embeds_tokenizer_document(capsys):
    code, out = _run(capsys, ["field", "code", "--tokenizer", '{"type": "regex", "pattern": "[a-z]+"}'])

    assert code == 0
    assert orjson.loads(out) == {"code": {"tokenizer": {"type": "regex", "pattern": "[a-z]+"}}}


def test_field_accepts_tokenizer_declaration(capsys):
    code, out = _run(capsys, ["field", "body", "--tokenizer", '{"name": "ngram", "min_gram": 2}'])

    assert code == 0
    assert orjson.loads(out) == {"body": {"tokenizer": {"type": "ngram", "min_gram": 2}}}


def test_rejected_declaration_returns_error(capsys):
    code, out = _run(capsys, ["field", "body", "--tokenizer", "[1, 2]"])

    assert code == 1
    assert out.startswith("Error: ")


def test_bad_integer_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["tokenizer", "ngram", "--min-gram", "three"])

    assert excinfo.value.code == 2


def test_indent_flag_and_setting(capsys, monkeypatch):
    code, out = _run(capsys, ["--indent", "field", "f", "--fast"])
    assert code == 0
    assert out == '{\n  "f": {\n    "fast": true\n  }\n}\n'

    monkeypatch.setenv("SEARCH_CONFIG_JSON_INDENT", "true")
    cli.get_settings.cache_clear()
    code, out = _run(capsys, ["field", "f"])
    assert out == '{\n  "f": {}\n}\n'

    code, out = _run(capsys, ["--no-indent", "field", "f"])
    assert out == '{"f":{}}\n'


def test_raw_tokenizer_document_with_unknown_key_is_rejected(capsys):
    code, out = _run(capsys, ["field", "body", "--tokenizer", '{"type": "ngram", "bogus": 1}'])

    assert code == 1
    assert out.startswith("Error: ")
    assert "bogus" in out


def test_raw_tokenizer_document_with_mistyped_value_is_rejected(capsys):
    code, out = _run(capsys, ["field", "body", "--tokenizer", '{"type": "ngram", "min_gram": "3"}'])

    assert code == 1
    assert "min_gram" in out


def test_invalid_settings_return_error(capsys, monkeypatch):
    monkeypatch.setenv("SEARCH_CONFIG_LOG_LEVEL", "chatty")

    code, out = _run(capsys, ["field", "f"])

    assert code == 1
    assert out.startswith("Error: Invalid settings")
    assert "log_level" in out
