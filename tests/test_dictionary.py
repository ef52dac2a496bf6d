from pathlib import Path

from word_scramble.services import WordfreqOracle, WordSetOracle, create_oracle


def test_word_set_oracle_is_case_insensitive():
    oracle = WordSetOracle(["Silk", " worm \n", ""])
    assert oracle.is_misspelled("silk", "en") is False
    assert oracle.is_misspelled("WORM", "en") is False
    assert oracle.is_misspelled("klis", "en") is True
    assert oracle.is_misspelled("", "en") is True


def test_word_set_oracle_from_file(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("silk\nworm\n", encoding="utf-8")
    oracle = WordSetOracle.from_file(str(p))
    assert oracle.words == {"silk", "worm"}


def test_create_oracle_selects_backend(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("silk\n", encoding="utf-8")
    assert isinstance(create_oracle(str(p)), WordSetOracle)

    oracle = create_oracle(None, min_zipf=2.5)
    assert isinstance(oracle, WordfreqOracle)
    assert oracle.min_zipf == 2.5


def test_wordfreq_oracle():
    oracle = WordfreqOracle()
    assert oracle.is_misspelled("silk", "en") is False
    assert oracle.is_misspelled("worm", "en") is False
    assert oracle.is_misspelled("xqzvkw", "en") is True
    assert oracle.is_misspelled("", "en") is True


def test_wordfreq_oracle_threshold():
    assert WordfreqOracle(min_zipf=8.0).is_misspelled("silk", "en") is True
