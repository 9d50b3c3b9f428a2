"""Tests for czprompt.questions.session module and Answers."""

from unittest.mock import MagicMock

import pytest

from czprompt.exceptions import AnswerAlreadySetError, UnansweredQuestionError
from czprompt.questions import PREVIEW_SEPARATOR, Answers, build, run_session


def _no_prepared():
    return None


@pytest.fixture
def no_scope_config():
    """Types only, no scopes and no custom-scope allowance."""
    return {"types": ["feat", "fix", "wip"], "skipEmptyScopes": False}


class TestAnswers:
    """Tests for the Answers mapping."""

    def test_missing_answer_raises(self):
        """Test that reading an uncollected answer raises."""
        with pytest.raises(UnansweredQuestionError) as exc_info:
            Answers()["type"]
        assert "type" in str(exc_info.value)

    def test_unanswered_error_is_key_error(self):
        """Test Mapping helpers still work."""
        answers = Answers({"type": "feat"})
        assert answers.get("scope") is None
        assert "scope" not in answers
        assert "type" in answers

    def test_record_once(self):
        """Test that recorded answers cannot be replaced."""
        answers = Answers()
        answers.record("subject", "add x")
        with pytest.raises(AnswerAlreadySetError):
            answers.record("subject", "other")
        assert answers["subject"] == "add x"

    def test_implicit_assignment(self):
        """Test implicit assignment rules."""
        answers = Answers()
        answers.assign_implicit("scope", "custom")
        answers.assign_implicit("scope", "custom")
        assert answers.is_implicit("scope")
        with pytest.raises(AnswerAlreadySetError):
            answers.assign_implicit("scope", "")
        with pytest.raises(AnswerAlreadySetError):
            answers.record("scope", "api")

    def test_lookup(self):
        """Test lookup for skipped, pending and answered questions."""
        answers = Answers({"type": "feat"})
        answers.expect(["scope", "subject"])
        assert answers.lookup("type") == "feat"
        assert answers.lookup("footer") is None
        with pytest.raises(UnansweredQuestionError):
            answers.lookup("scope")
        answers.settle("scope")
        assert answers.lookup("scope") is None

    def test_to_dict(self):
        """Test plain copy."""
        answers = Answers({"type": "feat"})
        data = answers.to_dict()
        data["type"] = "fix"
        assert answers["type"] == "feat"


class TestNoScopeScenario:
    """Sessions with no configured scopes."""

    def test_feat_asks_custom_scope(self, no_scope_config, make_prompter):
        """Test that feat gets the implicit custom scope and asks for it."""
        prompter = make_prompter({
            "type": ["feat"],
            "customScope": ["api"],
            "subject": ["Add x"],
            "body": [""],
            "footer": [""],
            "confirmCommit": ["yes"],
        })
        answers = run_session(build(no_scope_config, read_prepared=_no_prepared), prompter)

        assert prompter.asked == ["type", "customScope", "subject", "body", "footer", "confirmCommit"]
        assert answers["scope"] == "custom"
        assert answers["customScope"] == "api"
        assert answers["subject"] == "add x"
        assert answers["confirmCommit"] == "yes"

    def test_wip_skips_breaking_and_footer(self, no_scope_config, make_prompter):
        """Test that wip still gets custom scope but no footer or breaking."""
        config = dict(no_scope_config, allowBreakingChanges=["feat"])
        prompter = make_prompter({
            "type": ["wip"],
            "customScope": [""],
            "subject": ["half done"],
            "body": [""],
            "confirmCommit": ["yes"],
        })
        answers = run_session(build(config, read_prepared=_no_prepared), prompter)

        assert answers["scope"] == "custom"
        assert "footer" not in prompter.asked
        assert "breaking" not in prompter.asked
        assert "footer" not in answers

    def test_skip_empty_scopes(self, no_scope_config, make_prompter):
        """Test that skipEmptyScopes yields an empty scope and no custom prompt."""
        config = dict(no_scope_config, skipEmptyScopes=True)
        prompter = make_prompter({
            "type": ["fix"],
            "subject": ["fix y"],
            "body": [""],
            "footer": ["#31"],
            "confirmCommit": ["no"],
        })
        answers = run_session(build(config, read_prepared=_no_prepared), prompter)

        assert answers["scope"] == ""
        assert "customScope" not in prompter.asked
        assert answers["confirmCommit"] == "no"


class TestScopedScenario:
    """Sessions with configured scopes."""

    def test_scope_choices_follow_type(self, sample_config_dict, make_prompter):
        """Test that the scope list depends on the selected type."""
        prompter = make_prompter({
            "type": ["fix"],
            "scope": ["merge"],
            "subject": ["resolve conflict"],
            "body": ["line one|line two"],
            "breaking": [""],
            "footer": [""],
            "confirmCommit": ["edit"],
        })
        answers = run_session(build(sample_config_dict, read_prepared=_no_prepared), prompter)

        values = [getattr(c, "value", None) for c in prompter.choices["scope"]]
        assert values[:3] == ["merge", "style", "e2eTest"]
        assert answers["scope"] == "merge"
        assert "customScope" not in prompter.asked
        assert answers["confirmCommit"] == "edit"

    def test_wip_with_scopes(self, sample_config_dict, make_prompter):
        """Test that wip skips scope, customScope, breaking and footer."""
        prompter = make_prompter({
            "type": ["WIP"],
            "subject": ["still going"],
            "body": [""],
            "confirmCommit": ["yes"],
        })
        answers = run_session(build(sample_config_dict, read_prepared=_no_prepared), prompter)

        assert prompter.asked == ["type", "subject", "body", "confirmCommit"]
        assert "scope" not in answers

    def test_ask_breaking_first(self, sample_config_dict, make_prompter):
        """Test that breaking is asked before the type."""
        config = dict(sample_config_dict, askForBreakingChangeFirst=True)
        prompter = make_prompter({
            "breaking": ["drops v1 api"],
            "type": ["WIP"],
            "subject": ["x"],
            "body": [""],
            "confirmCommit": ["yes"],
        })
        answers = run_session(build(config, read_prepared=_no_prepared), prompter)

        assert prompter.asked[0] == "breaking"
        assert answers["breaking"] == "drops v1 api"


class TestValidationLoop:
    """Tests for re-prompting on rejected answers."""

    def test_rejected_subject_is_asked_again(self, make_prompter):
        """Test that a rejected subject is not recorded and asked again."""
        prompter = make_prompter({
            "type": ["feat"],
            "customScope": [""],
            "subject": ["add x and y", "add x"],
            "body": [""],
            "footer": [""],
            "confirmCommit": ["yes"],
        })
        answers = run_session(
            build({"types": ["feat"], "subjectLimit": 5}, read_prepared=_no_prepared),
            prompter,
        )

        assert prompter.asked.count("subject") == 2
        assert prompter.rejections == [("subject", "Exceed limit: 5")]
        assert answers["subject"] == "add x"

    def test_required_ticket(self, make_prompter):
        """Test that a required ticket number is asked until given."""
        prompter = make_prompter({
            "type": ["feat"],
            "customScope": [""],
            "ticketNumber": ["", "ABC", "123"],
            "subject": ["add x"],
            "body": [""],
            "footer": [""],
            "confirmCommit": ["yes"],
        })
        config = {
            "types": ["feat"],
            "allowTicketNumber": True,
            "isTicketNumberRequired": True,
            "ticketNumberRegExp": r"\d{1,5}",
        }
        answers = run_session(build(config, read_prepared=_no_prepared), prompter)

        assert answers["ticketNumber"] == "123"
        assert [name for name, _ in prompter.rejections] == ["ticketNumber", "ticketNumber"]

    def test_prompter_without_reject(self):
        """Test that prompters without reject() still loop."""
        prompter = MagicMock(spec=["ask"])
        prompter.ask.side_effect = ["feat", "", "too long subject", "ok", "", "", "yes"]

        answers = run_session(
            build({"types": ["feat"], "subjectLimit": 5}, read_prepared=_no_prepared),
            prompter,
        )

        assert answers["subject"] == "ok"
        assert prompter.ask.call_count == 7


class TestPreviewEmission:
    """Tests for the confirmation preview."""

    def test_emitted_once_before_confirmation(self, make_prompter):
        """Test that the preview is emitted right before the confirmation."""
        events = []
        prompter = make_prompter({
            "type": ["feat"],
            "customScope": ["api"],
            "subject": ["add x"],
            "body": [""],
            "footer": [""],
            "confirmCommit": ["yes"],
        })
        original_ask = prompter.ask

        def ask(question, choices, answers):
            events.append(("ask", question.name))
            return original_ask(question, choices, answers)

        prompter.ask = ask

        def formatter(answers, config):
            return f"{answers['type']}({answers['customScope']}): {answers['subject']}"

        run_session(
            build({"types": ["feat"]}, formatter=formatter, read_prepared=_no_prepared),
            prompter,
            emit=lambda text: events.append(("emit", text)),
        )

        emits = [e for e in events if e[0] == "emit"]
        assert len(emits) == 1
        assert emits[0][1] == f"\n{PREVIEW_SEPARATOR}\nfeat(api): add x\n{PREVIEW_SEPARATOR}\n"
        assert events.index(emits[0]) == events.index(("ask", "confirmCommit")) - 1

    def test_not_emitted_when_confirmation_skipped(self, make_prompter):
        """Test that a skipped confirmation renders no preview."""
        formatter = MagicMock(return_value="msg")
        emit = MagicMock()
        prompter = make_prompter({
            "type": ["feat"],
            "customScope": [""],
            "subject": ["add x"],
            "body": [""],
            "footer": [""],
        })

        run_session(
            build(
                {"types": ["feat"], "skipQuestions": ["confirmCommit"]},
                formatter=formatter,
                read_prepared=_no_prepared,
            ),
            prompter,
            emit=emit,
        )

        formatter.assert_not_called()
        emit.assert_not_called()


class TestOutOfOrderReads:
    """Tests for predicates that read unanswered questions."""

    def test_skipped_type_fails_loudly(self, sample_config_dict, make_prompter):
        """Test that skipping the type question breaks type-dependent predicates."""
        config = dict(sample_config_dict, skipQuestions=["type"])
        prompter = make_prompter({})

        with pytest.raises(UnansweredQuestionError):
            run_session(build(config, read_prepared=_no_prepared), prompter)

    def test_skipped_scope_question_is_tolerated(self, sample_config_dict, make_prompter):
        """Test that removing the scope question leaves customScope hidden."""
        config = dict(sample_config_dict, skipQuestions=["scope"])
        prompter = make_prompter({
            "type": ["docs"],
            "subject": ["update readme"],
            "body": [""],
            "footer": [""],
            "confirmCommit": ["yes"],
        })
        answers = run_session(build(config, read_prepared=_no_prepared), prompter)

        assert "customScope" not in prompter.asked
        assert answers["subject"] == "update readme"
