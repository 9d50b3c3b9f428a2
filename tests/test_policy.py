"""Tests for czprompt.questions.policy module."""

from czprompt.config import normalize_config
from czprompt.questions import (
    QuestionKind,
    QuestionName,
    Question,
    apply_policy,
    build,
    move_breaking_first,
    skip_questions,
)

ALL_NAMES = [name.value for name in QuestionName]


def _question(name):
    return Question(name=name, kind=QuestionKind.INPUT, message=name)


def _names(questions):
    return [q.name for q in questions]


class TestSkipQuestions:
    """Tests for skip_questions function."""

    def test_removes_by_name(self):
        """Test that named questions are removed, order kept."""
        questions = [_question(n) for n in ALL_NAMES]
        result = skip_questions(questions, ["body", "footer"])
        assert _names(result) == [n for n in ALL_NAMES if n not in ("body", "footer")]

    def test_unknown_names_ignored(self):
        """Test that unknown names are ignored."""
        questions = [_question(n) for n in ["type", "subject"]]
        assert _names(skip_questions(questions, ["nope"])) == ["type", "subject"]

    def test_empty_skip(self):
        """Test that nothing is removed with an empty skip list."""
        questions = [_question(n) for n in ALL_NAMES]
        assert _names(skip_questions(questions, [])) == ALL_NAMES


class TestMoveBreakingFirst:
    """Tests for move_breaking_first function."""

    def test_moves_breaking(self):
        """Test that breaking goes first and the rest keep order."""
        questions = [_question(n) for n in ALL_NAMES]
        result = _names(move_breaking_first(questions))
        assert result[0] == "breaking"
        assert result[1:] == [n for n in ALL_NAMES if n != "breaking"]

    def test_without_breaking(self):
        """Test that lists without breaking are unchanged."""
        questions = [_question(n) for n in ["type", "subject", "footer"]]
        assert _names(move_breaking_first(questions)) == ["type", "subject", "footer"]

    def test_already_first(self):
        """Test that a leading breaking question stays put."""
        questions = [_question(n) for n in ["breaking", "type"]]
        assert _names(move_breaking_first(questions)) == ["breaking", "type"]


class TestApplyPolicy:
    """Tests for apply_policy function."""

    def test_skip_then_reorder(self):
        """Test skip list and breaking-first together."""
        config = normalize_config({
            "askForBreakingChangeFirst": True,
            "skipQuestions": ["body", "footer"],
        })
        questions = [_question(n) for n in ALL_NAMES]
        result = _names(apply_policy(questions, config))
        assert result[0] == "breaking"
        assert result[1:] == [
            n for n in ALL_NAMES if n not in ("breaking", "body", "footer")
        ]

    def test_skipped_breaking_not_reinserted(self):
        """Test that a skipped breaking question is not brought back."""
        config = normalize_config({
            "askForBreakingChangeFirst": True,
            "skipQuestions": ["breaking"],
        })
        questions = [_question(n) for n in ALL_NAMES]
        result = _names(apply_policy(questions, config))
        assert "breaking" not in result
        assert result == [n for n in ALL_NAMES if n != "breaking"]

    def test_no_reorder_by_default(self):
        """Test that order is unchanged without ask-first."""
        questions = [_question(n) for n in ALL_NAMES]
        assert _names(apply_policy(questions, normalize_config({}))) == ALL_NAMES


class TestBuildAppliesPolicy:
    """Tests that build() applies the policy."""

    def test_build_with_skip_and_breaking_first(self):
        """Test the final list from build()."""
        questions = build(
            {"askForBreakingChangeFirst": True, "skipQuestions": ["ticketNumber"]},
            read_prepared=lambda: None,
        )
        names = _names(questions)
        assert names[0] == "breaking"
        assert "ticketNumber" not in names
        assert names[1:] == [n for n in ALL_NAMES if n not in ("breaking", "ticketNumber")]
