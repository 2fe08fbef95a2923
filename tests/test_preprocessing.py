import numpy as np
import pytest

from emotionnlp.preprocessing import ClassicalPreprocessor

VOCAB = [
    "hello", "world", "hello world", "batman", "runn", "jump", "fast",
    "runn jump", "jump fast", "test", "day", "nice",
]
IDF = [1.5, 2.0, 3.25, 1.0, 2.5, 1.75, 1.2, 4.0, 3.5, 0.9, 1.1, 1.3]


@pytest.fixture
def files(tmp_path):
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("\n".join(VOCAB) + "\n", encoding="utf-8")
    idf = tmp_path / "idf.txt"
    idf.write_text("\n".join(str(v) for v in IDF) + "\n", encoding="utf-8")
    return vocab, idf


@pytest.fixture
def prep(files):
    return ClassicalPreprocessor(*files)


def test_full_pipeline(prep):
    assert prep.preprocess_to_string("Hello WORLD, what a nice day!") == "hello world what nice day!"


def test_handles_empty_string(prep):
    assert prep.preprocess_to_string("") == ""


def test_only_whitespace(prep):
    assert prep.preprocess_to_string("     ") == ""


def test_only_punctuation(prep):
    assert prep.preprocess_to_string(",,,...") == ""


def test_case_normalization(prep):
    assert prep.preprocess_to_string("HeLLo WoRLD") == "hello world"


def test_stopwords_removed(prep):
    assert prep.preprocess_to_string("I am the batman") == "batman"


def test_stemming_removes_suffix(prep):
    assert prep.preprocess_to_string("running jumped fastest") == "runn jump fast"


def test_does_not_over_stem_short_words(prep):
    assert prep.preprocess_to_string("is as us") == "as"


def test_short_words_remain_stable(prep):
    assert prep.preprocess_to_string("gas") == "gas"


def test_handles_multiple_spaces(prep):
    assert prep.preprocess_to_string("hello     world") == "hello world"


def test_complex_sentence(prep):
    output = prep.preprocess_to_string("I was running quickly, and I absolutely loved it!")
    assert output == "runn quick absolute lov it!"


def test_vector_empty_input_returns_zero_vector(prep):
    vec = prep.preprocess_to_vector("")
    assert vec.shape == prep.preprocess_to_vector("test").shape
    assert not vec.any()


def test_vector_whitespace_returns_zero_vector(prep):
    assert not prep.preprocess_to_vector("     ").any()


def test_vector_case_normalization_consistent(prep):
    a = prep.preprocess_to_vector("HeLLo WoRLD")
    b = prep.preprocess_to_vector("hello world")
    assert np.allclose(a, b)
    assert a.any()


def test_vector_stopwords_removed_equivalent(prep):
    a = prep.preprocess_to_vector("I am the batman")
    b = prep.preprocess_to_vector("batman")
    assert np.allclose(a, b)
    assert a.any()


def test_vector_stemming_consistent(prep):
    a = prep.preprocess_to_vector("running jumped fastest")
    b = prep.preprocess_to_vector("runn jump fast")
    assert np.allclose(a, b)
    assert a.any()


def test_vector_multiple_spaces_equivalent(prep):
    a = prep.preprocess_to_vector("hello     world")
    b = prep.preprocess_to_vector("hello world")
    assert np.allclose(a, b)


def test_vector_length_matches_vocabulary(prep):
    assert len(prep.preprocess_to_vector("hello")) == len(VOCAB)


def test_vector_nonzero_only_for_present_terms(prep):
    vec = prep.preprocess_to_vector("hello world")
    present = {VOCAB.index(t) for t in ("hello", "world", "hello world")}
    assert {int(i) for i in np.flatnonzero(vec)} == present


def test_vector_weights_follow_idf(prep):
    vec = prep.preprocess_to_vector("hello world")
    hello, world = VOCAB.index("hello"), VOCAB.index("world")
    assert vec[world] / vec[hello] == pytest.approx(IDF[world] / IDF[hello], rel=1e-5)


def test_vector_unknown_words_give_zero(prep):
    assert not prep.preprocess_to_vector("zebra giraffe").any()


def test_mismatched_idf_gives_zero_vector(tmp_path):
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("hello\nworld\n", encoding="utf-8")
    idf = tmp_path / "idf.txt"
    idf.write_text("1.0\n", encoding="utf-8")
    vec = ClassicalPreprocessor(vocab, idf).preprocess_to_vector("hello world")
    assert len(vec) == 2
    assert not vec.any()


def test_blank_vocabulary_lines_are_skipped(tmp_path):
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("hello\n\n\nworld\n", encoding="utf-8")
    idf = tmp_path / "idf.txt"
    idf.write_text("1.0 2.0", encoding="utf-8")
    prep = ClassicalPreprocessor(vocab, idf)
    assert prep.vocab == {"hello": 0, "world": 1}


def test_missing_vocab_file(tmp_path, files):
    _, idf = files
    with pytest.raises(FileNotFoundError):
        ClassicalPreprocessor(tmp_path / "absent.txt", idf)


def test_missing_idf_file(tmp_path, files):
    vocab, _ = files
    with pytest.raises(FileNotFoundError):
        ClassicalPreprocessor(vocab, tmp_path / "absent.txt")