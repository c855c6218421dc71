import pytest

from proofline.services.statistics import (
    compute_statistics,
    count_syllables,
    create_goal,
    update_goal_progress,
)


@pytest.mark.parametrize("word,expected", [
    ("the", 1),
    ("cat", 1),
    ("Yes!", 1),
    ("hello", 2),
    ("fine.", 1),
    ("table", 1),
    ("beautiful", 3),
    ("rhythm", 1),
    ("queue", 1),
    ("123", 0),
])
def test_count_syllables(word, expected):
    assert count_syllables(word) == expected


def test_simple_text_statistics():
    stats = compute_statistics("Hello world. This is fine.")
    assert stats.word_count == 5
    assert stats.sentence_count == 2
    assert stats.paragraph_count == 1
    assert stats.character_count == 26
    assert stats.character_count_no_spaces == 22
    assert stats.average_words_per_sentence == 2.5
    assert stats.reading_time_minutes == 1
    assert stats.flesch_score == 100
    assert stats.difficulty == "Easy"


def test_empty_text():
    stats = compute_statistics("")
    assert stats.word_count == 0
    assert stats.sentence_count == 0
    assert stats.paragraph_count == 0
    assert stats.reading_time_minutes == 0
    assert 0 <= stats.flesch_score <= 100


def test_paragraphs_split_on_blank_lines():
    assert compute_statistics("One.\n\nTwo.\n  \n\nThree.").paragraph_count == 3
    assert compute_statistics("One.\nStill one.").paragraph_count == 1


def test_sentence_runs_of_terminators_count_once():
    assert compute_statistics("Really?! Yes... ok").sentence_count == 3


def test_reading_time_rounds_up():
    assert compute_statistics("word " * 200).reading_time_minutes == 1
    assert compute_statistics("word " * 201).reading_time_minutes == 2


def test_dense_text_is_hard_and_clamped():
    stats = compute_statistics("Internationalization " * 50)
    assert stats.flesch_score == 0
    assert stats.difficulty == "Hard"


@pytest.mark.parametrize("text", [
    "",
    "a",
    "Hello world. This is fine.",
    "Notwithstanding comprehensive institutionalization considerations, organizational "
    "responsibilities necessitate extraordinary interdisciplinary collaboration.",
    "!!! ??? ...",
    "one\n\n\n\ntwo",
])
def test_flesch_always_in_bounds(text):
    assert 0 <= compute_statistics(text).flesch_score <= 100


def test_statistics_are_deterministic():
    text = "The quick brown fox jumps over the lazy dog. It was not amused!\n\nNew paragraph."
    assert compute_statistics(text) == compute_statistics(text)
    assert compute_statistics(text).model_dump() == compute_statistics(text).model_dump()


# ============================================================================
# Writing goals
# ============================================================================


def test_create_goal():
    goal = create_goal("wordCount", 5)
    assert goal.type == "wordCount"
    assert goal.target == 5
    assert goal.current == 0
    assert goal.completed is False
    assert len(goal.id) == 12
    assert create_goal("wordCount", 5).id != goal.id


@pytest.mark.parametrize("goal_type,target", [("paragraphs", 3), ("wordCount", 0), ("sentences", -1)])
def test_create_goal_rejects_bad_input(goal_type, target):
    with pytest.raises(ValueError):
        create_goal(goal_type, target)


def test_goal_completes_when_metric_reaches_target():
    goal = create_goal("wordCount", 5)
    updated = update_goal_progress(goal, compute_statistics("Hello world. This is fine."))
    assert updated.current == 5
    assert updated.completed is True
    assert updated.id == goal.id
    assert updated.target == goal.target
    # input goal untouched
    assert goal.current == 0


def test_goal_reverts_when_text_shrinks():
    goal = create_goal("sentences", 2)
    done = update_goal_progress(goal, compute_statistics("One. Two."))
    assert done.completed is True
    again = update_goal_progress(done, compute_statistics("One."))
    assert again.current == 1
    assert again.completed is False


def test_reading_time_goal():
    goal = create_goal("readingTime", 2)
    assert update_goal_progress(goal, compute_statistics("word " * 150)).completed is False
    assert update_goal_progress(goal, compute_statistics("word " * 250)).completed is True
