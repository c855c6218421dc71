from types import SimpleNamespace

from proofline.services import style


def test_style_suggestions_are_position_bound():
    text = "We really need to utilize this, gonna be great in order to ship."
    found = style.style_suggestions(text)
    kinds = {(s.type, s.original) for s in found}
    assert ("clarity", "really need") in kinds
    assert ("formality", "utilize") in kinds
    assert ("formality", "gonna") in kinds
    assert ("conciseness", "in order to") in kinds
    for s in found:
        assert text[s.start:s.end] == s.original
    assert [s.start for s in found] == sorted(s.start for s in found)


def test_style_suggestion_replacements():
    found = {s.original: s.suggestion for s in style.style_weasel_jargon("Leverage a lot of  data")}
    assert found["Leverage"] == "use"
    assert found["a lot of"] == "many"


def test_long_sentence_flagged():
    text = " ".join(["word"] * 30) + ". Short one."
    found = style.long_sentence_suggestions(text)
    assert len(found) == 1
    assert found[0].start == 0
    assert "30 words" in found[0].explanation


def _tok(dep="", tag="", head_children=()):
    return SimpleNamespace(dep_=dep, tag_=tag, head=SimpleNamespace(children=list(head_children)))


def test_is_passive_heuristic():
    assert style.is_passive([_tok(dep="nsubjpass"), _tok(dep="auxpass")]) is True
    aux = _tok(dep="aux")
    assert style.is_passive([_tok(tag="VBN", head_children=[aux])]) is True
    assert style.is_passive([_tok(dep="nsubj", tag="VBZ")]) is False


def test_improvements():
    assert style.improvements("Hello world. This is fine.", 0) == []
    long_run_on = " ".join(["Word"] * 30)
    tips = style.improvements(long_run_on, 0)
    assert "Consider breaking long sentences into shorter ones for better readability" in tips
    assert "Add proper sentence endings with periods" in tips
    assert "Consider using punctuation marks like commas to separate ideas" in tips


def test_readability_metrics_keys():
    metrics = style.readability_metrics("The cat sat on the mat. It was happy.")
    assert set(metrics) == {
        "flesch_reading_ease", "smog_index", "automated_readability_index",
        "difficult_words", "lexicon_count",
    }


def test_advanced_stats_ranges():
    stats = style.advanced_stats("I'm gonna say it's kinda fine. We don't care.")
    for value in (stats.sentence_complexity, stats.formality_score, stats.clarity_score, stats.engagement_score):
        assert 0 <= value <= 100
    assert stats.tone == "Casual"
    assert stats.vocabulary_level in ("Elementary", "Intermediate", "Advanced")
