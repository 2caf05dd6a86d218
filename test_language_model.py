from collections import Counter
import random

from corpus import TextCharReader
from language_model import GENERATION_OVERSHOOT, LanguageModel

SAMPLE_TEXT = "the quick brown fox jumps over the lazy dog. the dog sleeps.\n"


def _trained(text: str, window_length: int, seed: int = 20) -> LanguageModel:
    lm = LanguageModel(window_length, seed=seed)
    lm.train_text(text)
    lm.finalize_probabilities()
    return lm


def test_cbabc_example():
    lm = LanguageModel(1, seed=20)
    lm.train(TextCharReader("cbabc"))
    assert sorted(lm.windows()) == ["a", "b", "c"]
    assert [(r.char, r.count) for r in lm.distribution("c")] == [("b", 1)]
    assert [(r.char, r.count) for r in lm.distribution("b")] == [("a", 1), ("c", 1)]
    assert [(r.char, r.count) for r in lm.distribution("a")] == [("b", 1)]

    lm.finalize_probabilities()
    a, c = lm.distribution("b")
    assert (a.p, a.cp) == (0.5, 0.5)
    assert (c.p, c.cp) == (0.5, 1.0)


def test_counts_match_context_occurrences():
    for window_length in (1, 2, 3, 5):
        lm = LanguageModel(window_length)
        lm.train_text(SAMPLE_TEXT)
        expected = Counter(
            SAMPLE_TEXT[i : i + window_length] for i in range(len(SAMPLE_TEXT) - window_length)
        )
        assert set(lm.windows()) == set(expected)
        for window in lm.windows():
            assert len(window) == window_length
            assert lm.distribution(window).total_count == expected[window]


def test_finalized_probabilities_are_normalized():
    lm = _trained(SAMPLE_TEXT, 2)
    for window in lm.windows():
        probs = lm.distribution(window)
        assert abs(sum(r.p for r in probs) - 1.0) < 1e-9
        cps = [r.cp for r in probs]
        assert all(x <= y for x, y in zip(cps, cps[1:]))
        assert abs(cps[-1] - 1.0) < 1e-9


def test_finalize_is_idempotent():
    lm = _trained(SAMPLE_TEXT, 2)
    before = {w: [(r.p, r.cp) for r in lm.distribution(w)] for w in lm.windows()}
    lm.finalize_probabilities()
    after = {w: [(r.p, r.cp) for r in lm.distribution(w)] for w in lm.windows()}
    assert before == after


def test_corpus_shorter_than_window_gives_empty_model():
    lm = _trained("abc", 4)
    assert len(lm) == 0
    assert lm.generate("abcd", 50) == "abcd"
    assert str(lm) == ""


def test_corpus_equal_to_window_gives_empty_model():
    lm = _trained("abc", 3)
    assert len(lm) == 0


def test_short_seed_returned_unchanged():
    lm = _trained(SAMPLE_TEXT, 3)
    for length in (0, 5, 100):
        assert lm.generate("th", length) == "th"


def test_generate_overshoots_by_fixed_bound():
    lm = _trained("abababab", 1)
    out = lm.generate("a", 10)
    assert out == "ab" * 8
    assert len(out) == 10 + GENERATION_OVERSHOOT + 1


def test_generate_keeps_long_seed_when_already_past_length():
    lm = _trained("abababab", 1)
    seed = "a" * 20
    assert lm.generate(seed, 3) == seed


def test_generate_stops_at_unseen_window():
    lm = _trained("abc", 1)
    assert lm.generate("a", 100) == "abc"
    assert lm.generate("z", 100) == "z"


def test_generate_does_not_mutate_counts():
    lm = _trained(SAMPLE_TEXT, 2)
    before = {w: [(r.char, r.count) for r in lm.distribution(w)] for w in lm.windows()}
    lm.generate("th", 200)
    after = {w: [(r.char, r.count) for r in lm.distribution(w)] for w in lm.windows()}
    assert before == after


def test_same_seed_same_text():
    first = _trained(SAMPLE_TEXT, 2, seed=20).generate("th", 120)
    second = _trained(SAMPLE_TEXT, 2, seed=20).generate("th", 120)
    assert first == second
    assert first.startswith("th")


def test_injected_rng_is_used():
    lm = LanguageModel(1, seed=1, rng=random.Random(5))
    lm.train_text(SAMPLE_TEXT)
    lm.finalize_probabilities()
    other = LanguageModel(1, rng=random.Random(5))
    other.train_text(SAMPLE_TEXT)
    other.finalize_probabilities()
    assert lm.generate("t", 80) == other.generate("t", 80)


def test_rejects_non_positive_window_length():
    for window_length in (0, -1):
        try:
            LanguageModel(window_length)
            assert False, "Expected ValueError for non-positive window_length"
        except ValueError:
            pass


def test_train_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("cbabc", encoding="utf-8")
    lm = LanguageModel(1)
    lm.train_file(path)
    assert "b" in lm
    assert [r.char for r in lm.distribution("b")] == ["a", "c"]


def test_str_dumps_every_window():
    lm = _trained("cbabc", 1)
    lines = str(lm).splitlines()
    assert len(lines) == 3
    assert "b : ((a 1 0.5 0.5) (c 1 0.5 1.0))" in lines


def test_negative_length_returns_seed():
    lm = _trained("abababab", 1)
    assert lm.generate("a", -3) == "aba"
    assert lm.generate("abababa", -3) == "abababa"


def test_progress_training_matches_plain_training():
    plain = LanguageModel(2)
    plain.train_text(SAMPLE_TEXT)
    with_bar = LanguageModel(2)
    with_bar.train_text(SAMPLE_TEXT, progress=True)
    assert set(plain.windows()) == set(with_bar.windows())
    for window in plain.windows():
        expected = [(r.char, r.count) for r in plain.distribution(window)]
        assert [(r.char, r.count) for r in with_bar.distribution(window)] == expected
