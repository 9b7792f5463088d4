"""Tests for the CLI and terminal display."""

from __future__ import annotations

import pytest

from smooshed.display import print_result, render_permutation
from smooshed.main import main, parse_args
from smooshed.solver import SearchResult, SearchStatus


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.smalpha is None
        assert args.chunk == 4
        assert args.timeout == pytest.approx(60.0)
        assert args.max_steps is None

    @pytest.mark.parametrize("flags", [
        ["--timeout", "nan"],
        ["--timeout", "0"],
        ["--max-steps", "0"],
    ])
    def test_rejects_bad_budget(self, flags: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(flags)
        assert exc_info.value.code == 2

    def test_large_chunk_accepted(self) -> None:
        assert parse_args(["--chunk", "26"]).chunk == 26

    def test_rejects_zero_chunk(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--chunk", "0"])
        assert exc_info.value.code == 2


class TestMain:
    def test_encode_words(self, capsys) -> None:
        main(["--encode", "sos", "daily"])
        captured = capsys.readouterr()
        assert "sos: ...---..." in captured.out
        assert "daily: -...-...-..-.--" in captured.out

    def test_encode_invalid_word(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--encode", "s0s"])
        assert exc_info.value.code == 1
        assert "Cannot encode" in capsys.readouterr().out

    def test_wrong_length(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-..-"])
        assert exc_info.value.code == 1
        assert "wrong_length" in capsys.readouterr().out

    def test_invalid_character(self, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["-!.-"])
        assert "invalid_character" in capsys.readouterr().out

    def test_solves_given_input(self, known_smalpha: str, capsys) -> None:
        main([known_smalpha, "--chunk", "1", "--seed", "3", "-q"])
        out = capsys.readouterr().out
        assert "Re-encodes to input: yes" in out
        assert "Trying to find" not in out

    def test_random_puzzle(self, capsys) -> None:
        main(["--chunk", "1", "--seed", "12"])
        out = capsys.readouterr().out
        assert "using random permutation" in out
        assert "Re-encodes to input: yes" in out

    def test_budget_exhausted_exits(self, known_smalpha: str, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([known_smalpha, "--chunk", "1", "--max-steps", "3", "-q"])
        assert exc_info.value.code == 1
        assert "No permutation found (timeout)" in capsys.readouterr().out


class TestDisplay:
    def test_empty(self) -> None:
        assert render_permutation("") == "(no permutation)"

    def test_letters_over_codes(self) -> None:
        lines = render_permutation("sos").splitlines()
        assert lines[0].split() == ["s", "o", "s"]
        assert lines[1].split() == ["...", "---", "..."]

    def test_wraps_alphabet(self) -> None:
        assert len(render_permutation("abcdefghijklmnopqrstuvwxyz").splitlines()) == 4

    def test_print_result_failure(self, capsys) -> None:
        print_result(SearchResult(SearchStatus.EXHAUSTED, steps=10), "-")
        assert "No permutation found (exhausted) after 10 candidates" in capsys.readouterr().out

    def test_print_result_reports_other_witness(self, capsys) -> None:
        result = SearchResult(SearchStatus.FOUND, "etna", steps=4)
        print_result(result, ".--..-", original="anet")
        out = capsys.readouterr().out
        assert "differs from the generated anet" in out
        assert "Re-encodes to input: yes" in out
