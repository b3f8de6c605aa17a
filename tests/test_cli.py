import pytest

from expander.expander_cli import main


@pytest.fixture
def wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\nBanana\nCherry\nDog's\n", encoding="utf-8")
    return str(path)


def test_cli_abcd(wordlist, capsys):
    assert main(["-w", wordlist, "ABCD"]) == 0
    out, err = capsys.readouterr()
    assert out == "Apple Banana Cherry Dog\n"
    assert err == ""


def test_cli_joins_arguments_into_lines(wordlist, capsys):
    assert main(["-w", wordlist, "--seed", "1", "ab", "...", "dc"]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == ["Apple Banana", "Dog Cherry"]


def test_cli_empty_input_is_usage_error(wordlist, capsys):
    assert main(["-w", wordlist]) == 2
    out, err = capsys.readouterr()
    assert out == ""
    assert "usage:" in err


def test_cli_whitespace_input_is_usage_error(wordlist, capsys):
    assert main(["-w", wordlist, "   "]) == 2
    out, _ = capsys.readouterr()
    assert out == ""


def test_cli_no_letters_is_usage_error(wordlist, capsys):
    assert main(["-w", wordlist, "123", "!?"]) == 2
    out, err = capsys.readouterr()
    assert out == ""
    assert "No alphabetic characters found in input." in err


def test_cli_missing_wordlist(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main(["-w", missing, "hello"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert f"Wordlist not readable: {missing}" in err


def test_cli_unreadable_wordlist_checked_before_letters(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main(["-w", missing, "!!!"]) == 1


def test_cli_uses_wordlist_env(wordlist, monkeypatch, capsys):
    monkeypatch.setenv("WORDLIST", wordlist)
    assert main(["d"]) == 0
    out, _ = capsys.readouterr()
    assert out == "Dog\n"


def test_cli_option_overrides_env(wordlist, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("WORDLIST", str(tmp_path / "missing.txt"))
    assert main(["-w", wordlist, "c"]) == 0
    out, _ = capsys.readouterr()
    assert out == "Cherry\n"


def test_cli_no_match_placeholder(wordlist, capsys):
    assert main(["-w", wordlist, "az"]) == 0
    out, _ = capsys.readouterr()
    assert out == "Apple (no-match:z)\n"


def test_cli_same_seed_same_output(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(["ant", "ape", "axe", "awl", "bat", "bee"]) + "\n")
    args = ["-w", str(path), "--seed", "9", "abba", "aaaa"]
    main(args)
    first, _ = capsys.readouterr()
    main(args)
    second, _ = capsys.readouterr()
    assert first == second


def test_cli_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-h"])
    assert exc.value.code == 0
    assert "WORDLIST" in capsys.readouterr().out


def test_cli_unknown_option_exits_two(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-x", "hello"])
    assert exc.value.code == 2


@pytest.fixture
def bigger_wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\nBanana\nNut\nWolf\nRock\n", encoding="utf-8")
    return str(path)


def test_cli_dash_words_after_first_word_are_text(bigger_wordlist, capsys):
    # "-wn" after the first word is input text, not "-w n"
    assert main(["-w", bigger_wordlist, "ab", "-wn"]) == 0
    out, _ = capsys.readouterr()
    assert out == "Apple Banana\nWolf Nut\n"


def test_cli_unknown_dash_word_in_text(bigger_wordlist, capsys):
    assert main(["-w", bigger_wordlist, "r", "-n-", "ab"]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == ["Rock", "Nut", "Apple Banana"]


def test_cli_passes_latin1_wordlist_bytes_through(tmp_path, capsysbinary):
    path = tmp_path / "latin1.txt"
    path.write_bytes("café\n".encode("latin-1"))
    assert main(["-w", str(path), "c"]) == 0
    out, _ = capsysbinary.readouterr()
    assert out == "Café\n".encode("latin-1")
