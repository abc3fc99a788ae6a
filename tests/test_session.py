"""
Unit tests for session state transitions.
"""

from notes_summarizer.workflow import session
from notes_summarizer.workflow.session import Notification, SessionState
from tests.factories import DocumentTestFactory


class TestUpload:
    def test_txt_sets_transcript_and_file_name(self):
        result = session.upload(SessionState(), "notes.txt", b"hello")

        assert result.state.transcript_text == "hello"
        assert result.state.file_name == "notes.txt"
        assert result.notifications == ()

    def test_docx_sets_transcript(self):
        data = DocumentTestFactory.create_docx(["Agenda", "Budget review"])

        result = session.upload(SessionState(), "minutes.docx", data)

        assert result.state.transcript_text == "Agenda\n\nBudget review"

    def test_unsupported_type_leaves_state_unchanged(self):
        state = SessionState(transcript_text="existing", file_name="old.txt")

        result = session.upload(state, "slides.pdf", b"%PDF-1.7")

        assert result.state == state
        assert result.notifications == (Notification("warning", session.UNSUPPORTED_FILE_MESSAGE),)

    def test_corrupt_docx_leaves_state_unchanged(self):
        state = SessionState(transcript_text="existing")

        result = session.upload(state, "broken.docx", b"garbage")

        assert result.state == state
        assert result.notifications[0].level == "error"

    def test_no_file_selected(self):
        result = session.upload(SessionState(), "", b"")

        assert result.notifications == (Notification("warning", session.NO_FILE_MESSAGE),)


class TestRecipients:
    def test_add_appends_empty_entry(self):
        state = session.add_recipient(SessionState(recipients=("a@b.com",)))

        assert state.recipients == ("a@b.com", "")

    def test_edit_replaces_by_index(self):
        state = SessionState(recipients=("a@b.com", ""))

        assert session.edit_recipient(state, 1, "c@d").recipients == ("a@b.com", "c@d")

    def test_remove_deletes_by_index(self):
        state = SessionState(recipients=("a@b.com", "c@d.org", "e@f.net"))

        assert session.remove_recipient(state, 1).recipients == ("a@b.com", "e@f.net")

    def test_out_of_range_index_is_ignored(self):
        state = SessionState(recipients=("a@b.com",))

        assert session.remove_recipient(state, 5) == state
        assert session.remove_recipient(state, -1) == state
        assert session.edit_recipient(state, 1, "x@y.z") == state

    def test_transitions_do_not_mutate_input(self):
        state = SessionState()
        session.add_recipient(state)

        assert state.recipients == ()


class TestGenerate:
    def test_requires_transcript_and_instruction(self):
        for state in (
            SessionState(transcript_text="t"),
            SessionState(instruction_text="p"),
            SessionState(),
        ):
            result = session.begin_generate(state)

            assert result.state == state
            assert result.notifications == (Notification("error", session.GENERATE_PRECONDITION_MESSAGE),)

    def test_begin_sets_flag_and_clears_prior_summary(self):
        state = SessionState(transcript_text="t", instruction_text="p", summary_text="old")

        result = session.begin_generate(state)

        assert result.state.generating is True
        assert result.state.summary_text == ""

    def test_already_generating_is_a_no_op(self):
        state = SessionState(transcript_text="t", instruction_text="p", generating=True)

        assert session.begin_generate(state).state == state

    def test_outcomes_clear_flag(self):
        in_flight = SessionState(transcript_text="t", instruction_text="p", generating=True)

        ok = session.generate_succeeded(in_flight, "summary")
        failed = session.generate_failed(in_flight, "nope")

        assert (ok.state.generating, ok.state.summary_text) == (False, "summary")
        assert (failed.state.generating, failed.state.summary_text) == (False, "")
        assert failed.notifications == (Notification("error", "nope"),)

    def test_generating_does_not_block_recipient_edits(self):
        state = SessionState(generating=True)

        assert session.add_recipient(state).recipients == ("",)


class TestSend:
    def test_requires_recipients_and_summary(self):
        for state in (
            SessionState(summary_text="s"),
            SessionState(recipients=("a@b.com",)),
        ):
            result = session.begin_send(state)

            assert result.state.sending is False
            assert result.notifications == (Notification("error", session.SEND_PRECONDITION_MESSAGE),)

    def test_invalid_recipients_rejected_locally(self):
        state = SessionState(summary_text="s", recipients=("a@b.com", "bad", ""))

        result = session.begin_send(state)

        assert result.state == state
        assert result.notifications == (Notification("error", "Invalid email(s): bad, "),)

    def test_begin_sets_sending(self):
        state = SessionState(summary_text="s", recipients=("a@b.com",))

        assert session.begin_send(state).state.sending is True

    def test_success_resets_recipients(self):
        in_flight = SessionState(summary_text="s", recipients=("a@b.com",), sending=True)

        result = session.send_succeeded(in_flight, "Email sent successfully!")

        assert result.state.recipients == ()
        assert result.state.sending is False
        assert result.notifications == (Notification("success", "Email sent successfully!"),)

    def test_failure_keeps_recipients(self):
        in_flight = SessionState(summary_text="s", recipients=("a@b.com",), sending=True)

        result = session.send_failed(in_flight, "Failed to send email.")

        assert result.state.recipients == ("a@b.com",)
        assert result.state.sending is False
