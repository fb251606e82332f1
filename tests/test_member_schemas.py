"""Tests for member schema normalization."""

import pytest
from pydantic import ValidationError

from syntax_club.schemas.member import (
    MemberCreate,
    MemberRecord,
    MemberUpdate,
    coerce_social_links,
    coerce_text,
    coerce_text_list,
)


class TestCoercion:
    @pytest.mark.parametrize("value, expected", [
        (None, []),
        ("Web", ["Web"]),
        ("   ", []),
        (["Web", "", "  App "], ["Web", "App"]),
        (("Web",), ["Web"]),
        (["Web", 3, None], ["Web"]),
        (7, []),
        ({"Web": 1}, []),
    ])
    def test_coerce_text_list(self, value, expected):
        assert coerce_text_list(value) == expected

    def test_coerce_text(self):
        assert coerce_text("  hi ") == "hi"
        assert coerce_text(12) == "12"
        assert coerce_text(True) == ""
        assert coerce_text(None) == ""

    def test_coerce_social_links(self):
        links = coerce_social_links([
            {"platform": "github", "url": " https://github.com/a "},
            {"platform": "x", "url": None},
        ])
        assert links == [{"platform": "github", "url": "https://github.com/a"}]


class TestMemberRecord:
    def test_camel_case_keys(self):
        record = MemberRecord.model_validate({
            "fullname": "A",
            "isLeader": True,
            "primaryDepartment": "Web",
            "primaryRole": "Lead",
            "profileImageUrl": "https://img",
        })
        assert record.is_leader is True
        assert record.primary_department == "Web"
        assert record.primary_role == "Lead"
        assert record.profile_image_url == "https://img"

    def test_boolean_id_is_dropped(self):
        assert MemberRecord.model_validate({"id": True}).id is None


class TestMemberCreate:
    def test_bio_is_sanitized(self):
        member = MemberCreate(fullname="A", bio="<p>Hi</p><script>alert(1)</script>")
        assert "<script>" not in member.bio
        assert "<p>Hi</p>" in member.bio

    def test_fullname_is_stripped(self):
        assert MemberCreate(fullname="  Asha  ").fullname == "Asha"

    def test_scalar_lists(self):
        member = MemberCreate(fullname="A", department="Web", skills=None)
        assert member.department == ["Web"]
        assert member.skills == []

    def test_fullname_required(self):
        with pytest.raises(ValidationError):
            MemberCreate(fullname="")

    def test_update_keeps_unset_fields_out(self):
        update = MemberUpdate(department="Design")
        assert update.model_dump(exclude_unset=True) == {"department": ["Design"]}

    def test_update_null_lists_become_empty(self):
        update = MemberUpdate.model_validate({"skills": None, "social_links": None})
        assert update.model_dump(exclude_unset=True) == {"skills": [], "social_links": []}
