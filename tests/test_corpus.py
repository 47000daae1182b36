from opinionkit.corpus import Corpus, build_corpus, tokenize

STOPWORDS = frozenset({"i", "the", "and", "a"})


def test_tokenize_strips_digits_punctuation_and_stopwords() -> None:
    tokens = tokenize("I paid 300 dollars, and THE tax-rate went up_ 20%", STOPWORDS)
    assert tokens == ("paid", "dollars", "taxrate", "went", "up")


def test_build_corpus_keeps_document_boundaries() -> None:
    corpus = build_corpus(["Love the economy", "the and", "Allies 2024"], "support", STOPWORDS)
    assert corpus.label == "support"
    assert corpus.documents == (("love", "economy"), (), ("allies",))
    assert list(corpus.tokens()) == ["love", "economy", "allies"]


def test_build_corpus_empty_input() -> None:
    corpus = build_corpus([], "oppose", STOPWORDS)
    assert isinstance(corpus, Corpus)
    assert corpus.is_empty()
    assert len(corpus) == 0
    assert corpus.label == "oppose"


def test_build_corpus_skips_missing_texts() -> None:
    corpus = build_corpus([None, "war"], "1")
    assert corpus.documents == (("war",),)
