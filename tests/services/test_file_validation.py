# -*- coding: utf-8 -*-
"""
Tests for the validation strategies and factories.
"""

import pytest

from models.uploaded_file import IntakeFile, RejectionReason
from services.validation import (
    FileValidationFactory,
    ValidationFactory,
)

MB = 1024 * 1024
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def files():
    return FileValidationFactory()


class TestFileValidationFactory:

    @pytest.mark.parametrize("media_type", [
        "application/pdf", "image/jpeg", "image/png", DOCX, "APPLICATION/PDF",
    ])
    def test_accepted_types(self, files, media_type):
        assert files.check(IntakeFile("doc", media_type, MB)) is None

    def test_wrong_type_distinct_from_too_large(self, files):
        wrong = files.check(IntakeFile("a.exe", "application/x-msdownload", MB))
        large = files.check(IntakeFile("a.pdf", "application/pdf", 10 * MB + 1))

        assert wrong.reason is RejectionReason.FILE_INVALID_TYPE
        assert large.reason is RejectionReason.FILE_TOO_LARGE
        assert wrong.message != large.message

    def test_all_reasons_in_check_order(self, files):
        reasons = files.reasons(IntakeFile("a.gif", "image/gif", 50 * MB))

        assert reasons == [RejectionReason.FILE_INVALID_TYPE, RejectionReason.FILE_TOO_LARGE]

    def test_custom_ceiling(self):
        small = FileValidationFactory(max_bytes=100)

        assert small.check(IntakeFile("a.pdf", "application/pdf", 101)).reason is RejectionReason.FILE_TOO_LARGE
        assert small.check(IntakeFile("a.pdf", "application/pdf", 100)) is None

    def test_negative_size_is_generic_rejection(self, files):
        rejection = files.check(IntakeFile("a.pdf", "application/pdf", -1))

        assert rejection.reason is RejectionReason.FILE_REJECTED


class TestValidationFactory:

    @pytest.fixture
    def factory(self):
        return ValidationFactory()

    def test_required_fields(self, factory):
        errors = factory.validate({"full_name": " ", "email": ""}, "basic_info")

        assert "Full name is required" in errors
        assert "Email is required" in errors

    def test_email_format(self, factory):
        errors = factory.validate({"full_name": "Ada", "email": "not-an-email"}, "basic_info")

        assert errors == ["Email is not a valid email address"]

    def test_signup_password_length(self, factory):
        errors = factory.validate({"email": "a@b.io", "password": "short"}, "signup")

        assert errors == ["Password must be at least 8 characters"]

    def test_unknown_type(self, factory):
        assert factory.validate({}, "nope") == ["No validator registered for record type: nope"]

    def test_registered_types(self, factory):
        assert set(factory.get_registered_types()) >= {
            "credentials", "signup", "role_selection", "basic_info",
            "startup_profile", "team_member",
        }
