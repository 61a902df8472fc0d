# -*- coding: utf-8 -*-
"""
Tests for the Onboarding Wizard.

Tests cover:
- Wizard initialization
- Step navigation along every branch
- Profile accumulation and re-entry pre-population
- Ignored events and unknown-step recovery
- Dashboard hand-off
- Context persistence
"""

import random

import pytest

from models.onboarding_step import OnboardingStep, StepEvent, StepOutcome
from models.profile import (
    AssessmentAnswers,
    BasicInfo,
    DocumentUploadData,
    RoleSelection,
    StartupProfile,
    TeamData,
    UserIdentity,
)
from models.uploaded_file import IntakeFile
from ui.wizards.onboarding import OnboardingContext, OnboardingWizard

EMAIL = "ada@example.com"
PASSWORD = "correct-horse"
MB = 1024 * 1024

S = OnboardingStep


def verifier(email, password):
    if email == EMAIL and password == PASSWORD:
        return UserIdentity(user_id="u-1", email=EMAIL, display_name="Ada")
    return None


@pytest.fixture
def wizard(notifications):
    return OnboardingWizard(
        verifier=verifier,
        notifications=notifications,
        welcome_back_target="basic-info",
    )


def sign_in(wizard):
    return wizard.dispatch(wizard.current_step_component().submit_credentials(EMAIL, PASSWORD))


def fill_basic_info(wizard, name="Ada Lovelace"):
    step = wizard.current_step_component()
    step.set_fields(full_name=name, email=EMAIL)
    return wizard.dispatch(step.next())


def fill_startup_profile(wizard):
    step = wizard.current_step_component()
    step.set_fields(startup_name="Analytical Engines", industry="Computing", stage="seed")
    return wizard.dispatch(step.next())


def upload_documents(wizard):
    step = wizard.current_step_component()
    step.intake.submit_required_file(IntakeFile("deck.pdf", "application/pdf", 2 * MB))
    step.intake.submit_optional_files([IntakeFile("a.png", "image/png", MB)])
    return wizard.dispatch(step.next())


def add_team(wizard):
    step = wizard.current_step_component()
    step.add_member("Charles Babbage", "CTO", "charles@example.com")
    return wizard.dispatch(step.next())


def walk_to(wizard, target):
    """Sign in and complete steps until `target` is active."""
    sign_in(wizard)
    wizard.dispatch(wizard.current_step_component().proceed())
    for action in (fill_basic_info, fill_startup_profile, upload_documents, add_team):
        if wizard.step is target:
            return
        action(wizard)


class TestWizardInitialization:
    """Test wizard initialization and setup."""

    def test_starts_at_login(self, wizard):
        assert wizard.step is S.LOGIN
        assert wizard.current_step == "login"
        assert wizard.current_step_component().is_active

    def test_has_context(self, wizard):
        assert isinstance(wizard.context, OnboardingContext)
        assert wizard.profile == {}

    def test_has_twelve_steps(self, wizard):
        assert len(wizard.steps) == 12
        assert set(wizard.steps) == {s.value for s in OnboardingStep}

    def test_login_allowed_events(self, wizard):
        assert set(wizard.allowed_events()) == {
            "sign_up_chosen", "forgot_password_chosen", "credentials_verified",
        }

    def test_unknown_welcome_back_target_falls_back(self):
        assert OnboardingWizard(welcome_back_target="nowhere").welcome_back_target == "basic-info"


class TestAccountBranch:
    """Sign-up and forgot-password paths."""

    def test_signup_scenario(self, wizard):
        login = wizard.current_step_component()
        assert wizard.dispatch(login.choose_sign_up()) == "signup"

        signup = wizard.current_step_component()
        assert wizard.dispatch(signup.create_account(EMAIL, "longenough", "longenough")) == "role-selection"

        roles = wizard.current_step_component()
        roles.select_role("founder")
        assert wizard.dispatch(roles.confirm()) == "basic-info"

        assert wizard.context.get_record(S.ROLE_SELECTION) == RoleSelection(role="founder")
        assert S.BASIC_INFO not in wizard.profile

    def test_signup_password_mismatch_stays(self, wizard):
        wizard.dispatch(wizard.current_step_component().choose_sign_up())
        signup = wizard.current_step_component()

        assert signup.create_account(EMAIL, "longenough", "different1") is None
        assert "Passwords do not match" in signup.last_validation.errors
        assert wizard.dispatch(None) == "signup"

    def test_role_required(self, wizard):
        wizard.dispatch(wizard.current_step_component().choose_sign_up())
        wizard.dispatch(wizard.current_step_component().create_account(EMAIL, "longenough", "longenough"))

        assert wizard.current_step_component().confirm() is None
        assert wizard.step is S.ROLE_SELECTION

    def test_forgot_password_round_trip(self, wizard):
        wizard.dispatch(wizard.current_step_component().choose_forgot_password())
        assert wizard.step is S.FORGOT_PASSWORD

        wizard.dispatch(wizard.current_step_component().back_to_login())
        assert wizard.step is S.LOGIN

    def test_forgot_password_from_signup(self, wizard):
        wizard.dispatch(wizard.current_step_component().choose_sign_up())
        wizard.dispatch(wizard.current_step_component().choose_forgot_password())

        assert wizard.step is S.FORGOT_PASSWORD


class TestSignIn:
    """Returning user path."""

    def test_valid_credentials_reach_welcome_back(self, wizard):
        assert sign_in(wizard) == "welcome-back"
        assert wizard.context.user.email == EMAIL
        assert wizard.current_step_component().greeting == "Welcome back, Ada!"

    def test_invalid_credentials_stay_on_login(self, wizard):
        login = wizard.current_step_component()

        assert login.submit_credentials(EMAIL, "wrong") is None
        assert login.last_validation.errors == ["Invalid email or password"]
        assert wizard.step is S.LOGIN

    def test_malformed_email_rejected_before_verifier(self, wizard):
        calls = []
        login = wizard.current_step_component()
        login.verifier = lambda email, password: calls.append(email)

        assert login.submit_credentials("nope", PASSWORD) is None
        assert calls == []

    def test_proceed_to_basic_info(self, wizard):
        sign_in(wizard)
        wizard.dispatch(wizard.current_step_component().proceed())

        assert wizard.step is S.BASIC_INFO

    def test_proceed_to_dashboard(self, notifications, qtbot):
        wizard = OnboardingWizard(
            verifier=verifier, notifications=notifications, welcome_back_target="dashboard"
        )
        sign_in(wizard)

        with qtbot.waitSignal(wizard.dashboard_requested, timeout=500) as blocker:
            result = wizard.dispatch(wizard.current_step_component().proceed())

        assert result == "welcome-back"
        assert blocker.args[0]["email"] == EMAIL
        assert wizard.context.is_step_completed("welcome-back")


class TestProfileSteps:
    """Data-carrying steps."""

    def test_next_stores_record(self, wizard):
        walk_to(wizard, S.BASIC_INFO)
        fill_basic_info(wizard)

        assert wizard.step is S.STARTUP_PROFILE
        assert wizard.profile[S.BASIC_INFO] == BasicInfo(full_name="Ada Lovelace", email=EMAIL)
        assert wizard.context.is_step_completed("basic-info")

    def test_invalid_form_does_not_advance(self, wizard):
        walk_to(wizard, S.BASIC_INFO)
        step = wizard.current_step_component()
        step.set_fields(full_name="", email="bad")

        assert wizard.dispatch(step.next()) == "basic-info"
        assert "Full name is required" in step.last_validation.errors

    def test_unknown_field_raises(self, wizard):
        walk_to(wizard, S.BASIC_INFO)

        with pytest.raises(KeyError):
            wizard.current_step_component().set_field("shoe_size", 42)

    def test_unknown_stage_rejected(self, wizard):
        walk_to(wizard, S.STARTUP_PROFILE)
        step = wizard.current_step_component()
        step.set_fields(startup_name="X", industry="Y", stage="unicorn")

        assert step.next() is None

    def test_back_keeps_data_and_prepopulates(self, wizard):
        walk_to(wizard, S.STARTUP_PROFILE)

        wizard.dispatch(wizard.current_step_component().back())

        assert wizard.step is S.BASIC_INFO
        assert wizard.current_step_component().fields["full_name"] == "Ada Lovelace"
        assert S.BASIC_INFO in wizard.profile

    def test_second_next_overwrites(self, wizard):
        walk_to(wizard, S.STARTUP_PROFILE)
        wizard.dispatch(wizard.current_step_component().back())
        fill_basic_info(wizard, name="Augusta Ada King")

        assert wizard.profile[S.BASIC_INFO].full_name == "Augusta Ada King"

    def test_document_upload_requires_deck(self, wizard):
        walk_to(wizard, S.DOCUMENT_UPLOAD)
        step = wizard.current_step_component()

        assert wizard.dispatch(step.next()) == "document-upload"
        assert wizard.notifications.current.message == "Please upload all required documents"
        assert step.last_validation.errors == ["Pitch deck is required"]

    def test_document_upload_payload(self, wizard):
        walk_to(wizard, S.ADD_TEAM)

        data = wizard.profile[S.DOCUMENT_UPLOAD]
        assert isinstance(data, DocumentUploadData)
        assert data.required_file.name == "deck.pdf"
        assert [f.name for f in data.optional_files] == ["a.png"]

    def test_document_upload_restored_on_back(self, wizard):
        walk_to(wizard, S.ADD_TEAM)
        wizard.dispatch(wizard.current_step_component().back())

        step = wizard.current_step_component()
        assert step.intake.required_file.name == "deck.pdf"
        assert step.validate().is_valid

    def test_team_member_validation(self, wizard):
        walk_to(wizard, S.ADD_TEAM)
        step = wizard.current_step_component()

        assert step.add_member("", "CTO") is False
        assert step.add_member("Charles", "CTO", "not-an-email") is False
        assert step.members == []

    def test_remove_member(self, wizard):
        walk_to(wizard, S.ADD_TEAM)
        step = wizard.current_step_component()
        step.add_member("Charles Babbage", "CTO")
        step.add_member("Mary Somerville", "Advisor")

        step.remove_member(0)
        step.remove_member(5)

        assert [m.name for m in step.members] == ["Mary Somerville"]

    def test_team_payload(self, wizard):
        walk_to(wizard, S.ASSESSMENT_INTRO)

        team = wizard.profile[S.ADD_TEAM]
        assert isinstance(team, TeamData)
        assert team.members[0].name == "Charles Babbage"


class TestAssessmentAndCompletion:
    """Assessment branch and the dashboard hand-off."""

    def test_skip_from_intro(self, wizard):
        walk_to(wizard, S.ASSESSMENT_INTRO)
        wizard.dispatch(wizard.current_step_component().skip())

        assert wizard.step is S.COMPLETE

    def test_complete_with_answers(self, wizard):
        walk_to(wizard, S.ASSESSMENT_INTRO)
        wizard.dispatch(wizard.current_step_component().start_assessment())
        assessment = wizard.current_step_component()

        assert assessment.complete() is None

        assessment.answer("q1", 4)
        wizard.dispatch(assessment.complete())

        assert wizard.step is S.COMPLETE
        assert wizard.profile[S.ASSESSMENT] == AssessmentAnswers(answers={"q1": 4})

    def test_skip_from_assessment(self, wizard):
        walk_to(wizard, S.ASSESSMENT_INTRO)
        wizard.dispatch(wizard.current_step_component().start_assessment())
        wizard.dispatch(wizard.current_step_component().skip())

        assert wizard.step is S.COMPLETE
        assert S.ASSESSMENT not in wizard.profile

    def test_go_to_dashboard(self, wizard, qtbot):
        walk_to(wizard, S.ASSESSMENT_INTRO)
        wizard.dispatch(wizard.current_step_component().skip())

        with qtbot.waitSignals([wizard.wizard_completed, wizard.dashboard_requested], timeout=500):
            result = wizard.dispatch(wizard.current_step_component().go_to_dashboard())

        assert result == "complete"
        assert wizard.context.status == "completed"


class TestIgnoredEvents:
    """Events that have no transition."""

    def test_outcome_from_inactive_step(self, wizard, qtbot):
        outcome = StepOutcome.for_step(S.ASSESSMENT_INTRO, StepEvent.SKIP)

        with qtbot.waitSignal(wizard.transition_ignored, timeout=500) as blocker:
            result = wizard.dispatch(outcome)

        assert result == "login"
        assert blocker.args == ["assessment-intro", "skip"]

    def test_event_without_transition(self, wizard, qtbot):
        outcome = StepOutcome.for_step(S.LOGIN, StepEvent.NEXT)

        with qtbot.waitSignal(wizard.transition_ignored, timeout=500):
            assert wizard.dispatch(outcome) == "login"

    def test_none_outcome(self, wizard):
        assert wizard.dispatch(None) == "login"

    def test_random_walk_stays_in_enumeration(self, wizard):
        rng = random.Random(7)
        for _ in range(300):
            outcome = StepOutcome(wizard.step, rng.choice(list(StepEvent)))
            wizard.dispatch(outcome)
            assert wizard.current_step in {s.value for s in OnboardingStep}


class TestUnknownStep:
    """Recovery from an unrecognized current step."""

    def test_unknown_step_reads_as_login(self, wizard):
        wizard.context.current_step = "dashboard"

        assert wizard.step is S.LOGIN
        assert wizard.context.current_step == "login"

    def test_navigation_continues_after_recovery(self, wizard):
        wizard.context.current_step = "bogus"
        login = wizard.step_component(S.LOGIN)

        assert wizard.dispatch(login.choose_sign_up()) == "signup"


class TestErrorBoundary:
    """Failures in step hooks."""

    def test_hook_error_is_reported_not_raised(self, wizard, qtbot):
        def broken_show():
            raise RuntimeError("render failed")

        wizard.step_component(S.SIGNUP).on_show = broken_show

        with qtbot.waitSignal(wizard.step_error, timeout=500) as blocker:
            wizard.dispatch(wizard.current_step_component().choose_sign_up())

        assert wizard.step is S.SIGNUP
        assert blocker.args == ["signup", "RuntimeError", "render failed"]
        assert isinstance(wizard.error_boundary.last_error, RuntimeError)


class TestProgress:
    """Sidebar progress."""

    def test_sidebar_titles(self, wizard):
        assert [entry.title for entry in wizard.progress()] == [
            "Basic Info", "Startup Profile", "Upload Documents",
            "Add your Team", "Psychological Assessment",
        ]

    def test_flags_follow_navigation(self, wizard):
        walk_to(wizard, S.DOCUMENT_UPLOAD)
        entries = {entry.step: entry for entry in wizard.progress()}

        assert entries[S.BASIC_INFO].completed
        assert entries[S.STARTUP_PROFILE].completed
        assert entries[S.DOCUMENT_UPLOAD].active
        assert not entries[S.DOCUMENT_UPLOAD].completed
        assert not entries[S.ADD_TEAM].active

    def test_assessment_entry_active_on_intro(self, wizard):
        walk_to(wizard, S.ASSESSMENT_INTRO)
        assessment = wizard.progress()[-1]

        assert assessment.active
        assert not assessment.completed

    def test_percentage(self, wizard):
        assert wizard.get_progress_percentage() == 0.0
        walk_to(wizard, S.ASSESSMENT_INTRO)
        wizard.dispatch(wizard.current_step_component().skip())
        assert wizard.get_progress_percentage() == 100.0


class TestPersistence:
    """Snapshot, restore and reset."""

    def test_snapshot_round_trip(self, wizard):
        walk_to(wizard, S.DOCUMENT_UPLOAD)
        snapshot = wizard.snapshot()

        restored = OnboardingWizard.restore(snapshot, welcome_back_target="basic-info")

        assert restored.step is S.DOCUMENT_UPLOAD
        assert restored.context.user.email == EMAIL
        assert restored.profile[S.STARTUP_PROFILE] == StartupProfile(
            startup_name="Analytical Engines", industry="Computing", stage="seed"
        )
        assert restored.context.is_step_completed("basic-info")

    def test_restore_prepopulates_current_step(self, wizard):
        walk_to(wizard, S.STARTUP_PROFILE)
        wizard.dispatch(wizard.current_step_component().back())

        restored = OnboardingWizard.restore(wizard.snapshot())

        assert restored.current_step_component().fields["full_name"] == "Ada Lovelace"

    def test_restore_unknown_step_starts_at_login(self):
        restored = OnboardingWizard.restore({"current_step": "dashboard", "profile": {}})

        assert restored.step is S.LOGIN

    def test_documents_serialized_as_metadata(self, wizard):
        walk_to(wizard, S.ADD_TEAM)

        documents = wizard.snapshot()["profile"]["document-upload"]
        assert documents["required_file"] == {
            "name": "deck.pdf", "media_type": "application/pdf", "size": 2 * MB,
        }

    def test_reset(self, wizard, qtbot):
        walk_to(wizard, S.STARTUP_PROFILE)

        with qtbot.waitSignal(wizard.step_changed, timeout=500) as blocker:
            wizard.reset()

        assert blocker.args == ["startup-profile", "login"]
        assert wizard.step is S.LOGIN
        assert wizard.profile == {}
        assert wizard.context.user is None
