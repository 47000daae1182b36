from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")

from opinionkit.resources import load_lemmas, load_lexicon, load_resources, load_stopwords, wordnet_lemma


def test_load_stopwords(tmp_path: Path) -> None:
    path = tmp_path / "stopwords.txt"
    path.write_text("# english\nThe\nand\n\n  of  \n", encoding="utf-8")
    assert load_stopwords(path) == frozenset({"the", "and", "of"})


def test_load_lexicon_ignores_extra_columns(tmp_path: Path) -> None:
    path = tmp_path / "lexicon.tsv"
    path.write_text('love\t3.2\t0.4\t[3, 3, 4]\n"quoted\t-1\t0.1\t[1]\nnull\t0.5\t0\t[0]\n', encoding="utf-8")
    lexicon = load_lexicon(path)
    assert lexicon["love"] == 3.2
    assert lexicon['"quoted'] == -1.0
    assert lexicon["null"] == 0.5


def test_load_lemmas(tmp_path: Path) -> None:
    path = tmp_path / "lemmas.tsv"
    path.write_text("walking\twalk\nAllies\tally\n", encoding="utf-8")
    lemmatizer = load_lemmas(path)
    assert lemmatizer("walking") == "walk"
    assert lemmatizer("allies") == "ally"
    assert lemmatizer("tree") == "tree"


def test_load_resources_from_files(tmp_path: Path) -> None:
    (tmp_path / "stop.txt").write_text("the\n", encoding="utf-8")
    (tmp_path / "lex.tsv").write_text("good\t1.5\n", encoding="utf-8")
    (tmp_path / "lemmas.tsv").write_text("goods\tgood\n", encoding="utf-8")

    resources = load_resources(tmp_path / "stop.txt", tmp_path / "lex.tsv", tmp_path / "lemmas.tsv")
    assert resources.stopwords == frozenset({"the"})
    assert dict(resources.lexicon) == {"good": 1.5}
    assert resources.lemmatizer("goods") == "good"


def test_missing_resource_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "absent.tsv")
    with pytest.raises(FileNotFoundError):
        load_stopwords(tmp_path / "absent.txt")


def test_wordnet_lemma_passes_through_non_words() -> None:
    assert wordnet_lemma("2024") == "2024"
    assert wordnet_lemma("tax-rate") == "tax-rate"


def test_wordnet_lemma_base_forms() -> None:
    nltk = pytest.importorskip("nltk")
    try:
        nltk.data.find("corpora/wordnet")
    except LookupError:
        pytest.skip("WordNet corpus not installed")
    assert wordnet_lemma("walking") == "walk"
    assert wordnet_lemma("strikes,") == "strike,"
    assert wordnet_lemma("economy") == "economy"


def test_load_lexicon_rejects_rows_without_weight(tmp_path: Path) -> None:
    path = tmp_path / "lexicon.tsv"
    path.write_text("love\t3.2\nbroken\n", encoding="utf-8")
    with pytest.raises(ValueError, match="broken"):
        load_lexicon(path)


def test_load_lexicon_rejects_non_numeric_weight(tmp_path: Path) -> None:
    path = tmp_path / "lexicon.tsv"
    path.write_text("love\tlots\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon(path)
