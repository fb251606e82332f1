"""Tests for the member search index."""

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from syntax_club.services.member_search import (
    DEFAULT_DEPARTMENT,
    DEFAULT_ROLE,
    LEADERSHIP_SECTION,
    MemberSearchIndex,
    build_haystack,
    enrich,
    enrich_member,
    filter_members,
    group_by_department,
    is_leadership_role,
    normalize_role,
    partition_leadership,
    to_record,
)


@pytest.fixture
def ann_and_bo():
    return enrich([
        {"fullname": "Ann", "designation": ["President"]},
        {"fullname": "Bo", "designation": ["Engineer"], "department": ["Web"]},
    ])


@pytest.fixture
def club():
    return enrich([
        {"id": 1, "fullname": "Asha Rao", "designation": ["Developer"], "department": ["Web", "App"], "skills": ["React"]},
        {"id": 2, "fullname": "Dev Patel", "designation": ["Designer"], "department": ["Design"], "skills": ["Figma"]},
        {"id": 3, "fullname": "Meera Iyer", "designation": ["Treasurer"], "department": ["Events"]},
        {"id": 4, "fullname": "Kabir Singh", "designation": "Engineer", "department": "Web", "skills": ["Go", "SQL"]},
        {"id": 5, "fullname": "Riya Das", "designation": ["Volunteer"], "is_leader": True},
        {"id": 6, "fullname": "Tara Nair"},
    ])


# ============================================
# Enrichment
# ============================================
class TestEnrich:
    def test_preserves_length_and_order(self, club):
        assert [m.id for m in club] == [1, 2, 3, 4, 5, 6]

    def test_empty_and_none_input(self):
        assert enrich([]) == []
        assert enrich(None) == []

    def test_primary_fields_use_first_entries(self, club):
        asha = club[0]
        assert asha.primary_department == "Web"
        assert asha.primary_role == "Developer"

    def test_primary_fields_fall_back_to_sentinels(self, club):
        tara = club[5]
        assert tara.primary_department == DEFAULT_DEPARTMENT == "Other"
        assert tara.primary_role == DEFAULT_ROLE == "Member"

    def test_primary_fields_never_empty(self, club):
        for member in club:
            assert member.primary_department
            assert member.primary_role

    def test_explicit_overrides_win(self):
        member = enrich_member({
            "fullname": "Neel",
            "designation": ["Developer"],
            "department": ["Web"],
            "primaryDepartment": "Open Source",
            "primary_role": "Maintainer",
        })
        assert member.primary_department == "Open Source"
        assert member.primary_role == "Maintainer"

    def test_blank_override_is_ignored(self):
        member = enrich_member({"fullname": "Neel", "department": ["Web"], "primary_department": "   "})
        assert member.primary_department == "Web"

    def test_scalar_fields_become_lists(self, club):
        kabir = club[3]
        assert kabir.designation == ["Engineer"]
        assert kabir.department == ["Web"]

    def test_malformed_optional_fields_are_coerced(self):
        member = enrich_member({
            "fullname": "Ira",
            "designation": None,
            "department": 42,
            "skills": {"not": "a list"},
            "social_links": "https://example.com",
            "bio": None,
        })
        assert member.designation == []
        assert member.department == []
        assert member.skills == []
        assert member.social_links == []
        assert member.bio == ""
        assert member.primary_department == "Other"

    def test_none_record_enriches_to_defaults(self):
        member = enrich_member(None)
        assert member.fullname == ""
        assert member.primary_role == "Member"
        assert member.is_leader is False

    def test_social_links_without_url_are_dropped(self):
        member = enrich_member({
            "fullname": "Ira",
            "socialLinks": [
                {"platform": "github", "url": "https://github.com/ira"},
                {"platform": "twitter", "url": ""},
                {"platform": "linkedin"},
                "garbage",
            ],
        })
        assert [link.platform for link in member.social_links] == ["github"]

    def test_social_links_mapping_is_accepted(self):
        member = enrich_member({"fullname": "Ira", "social_links": {"github": "https://github.com/ira"}})
        assert member.social_links[0].url == "https://github.com/ira"

    def test_duplicate_skills_collapse(self):
        member = enrich_member({"fullname": "Ira", "skills": ["Python", "Python", " ", "Go"]})
        assert member.skills == ["Python", "Go"]

    def test_alternate_keys(self):
        member = enrich_member({"_id": "abc123", "full_name": "Ira Sen"})
        assert member.id == "abc123"
        assert member.fullname == "Ira Sen"

    def test_orm_like_objects(self):
        row = SimpleNamespace(
            id=9, fullname="Row Member", email=None, designation=["Secretary"], department=["Media"],
            skills=[], social_links=[], bio=None, profile_image_url=None,
            is_leader=None, primary_department=None, primary_role=None,
        )
        member = enrich_member(row)
        assert member.id == 9
        assert member.is_leader is True

    def test_enriched_member_is_immutable(self, club):
        with pytest.raises(ValidationError):
            club[0].fullname = "Someone else"

    def test_enrich_does_not_alias_input(self):
        departments = ["Web"]
        member = enrich_member({"fullname": "Ira", "department": departments})
        departments.append("App")
        assert member.department == ["Web"]


# ============================================
# Leadership
# ============================================
class TestLeadership:
    @pytest.mark.parametrize("title", ["President", "vice-president", "Vice_President", "  TREASURER ", "Co-Founder"])
    def test_known_titles(self, title):
        assert is_leadership_role(title)

    @pytest.mark.parametrize("title", ["Engineer", "", None, "Presidential Aide"])
    def test_other_titles(self, title):
        assert not is_leadership_role(title)

    def test_normalize_role(self):
        assert normalize_role("  Technical-Head ") == "technical head"
        assert normalize_role(None) == ""

    def test_ann_is_leader_bo_is_not(self, ann_and_bo):
        ann, bo = ann_and_bo
        assert ann.is_leader is True
        assert bo.is_leader is False

    def test_explicit_flag_or_title(self):
        flagged = enrich_member({"fullname": "A", "designation": ["Volunteer"], "isLeader": True})
        titled = enrich_member({"fullname": "B", "designation": ["President"], "is_leader": False})
        assert flagged.is_leader is True
        assert titled.is_leader is True

    def test_non_boolean_flag_is_ignored(self):
        member = enrich_member({"fullname": "A", "designation": ["Volunteer"], "is_leader": "yes"})
        assert member.is_leader is False

    def test_only_primary_designation_counts(self):
        member = enrich_member({"fullname": "A", "designation": ["Developer", "President"]})
        assert member.is_leader is False

    def test_role_override_counts(self):
        member = enrich_member({"fullname": "A", "designation": ["Developer"], "primary_role": "Secretary"})
        assert member.is_leader is True


# ============================================
# Search
# ============================================
class TestFilter:
    def test_empty_query_is_identity(self, club):
        assert filter_members(club, "") == club
        assert filter_members(club, "   ") == club
        assert filter_members(club, None) == club

    def test_empty_query_returns_new_list(self, club):
        result = filter_members(club, "")
        result.pop()
        assert len(club) == 6

    def test_case_insensitive(self, club):
        assert filter_members(club, "DEV") == filter_members(club, "dev")

    def test_substring_across_fields(self, club):
        # "de" hits Developer, Designer, Design and Dev Patel
        assert [m.id for m in filter_members(club, "de")] == [1, 2]

    def test_query_is_trimmed(self, club):
        assert [m.id for m in filter_members(club, "  figma ")] == [2]

    def test_eng_matches_only_bo(self, ann_and_bo):
        assert [m.fullname for m in filter_members(ann_and_bo, "eng")] == ["Bo"]

    def test_secondary_department_is_searchable(self, club):
        assert [m.id for m in filter_members(club, "app")] == [1]

    def test_no_match(self, club):
        assert filter_members(club, "kubernetes") == []

    def test_haystack_is_deterministic(self):
        record = to_record({"fullname": "Asha", "department": ["Web"], "designation": ["Lead"], "skills": ["Go"]})
        assert build_haystack(record) == build_haystack(record) == "asha web lead go"

    def test_haystack_excludes_sentinels(self, club):
        assert "other" not in club[5].search_haystack
        assert "member" not in club[5].search_haystack

    def test_haystack_includes_overrides(self):
        member = enrich_member({"fullname": "Neel", "primary_department": "Open Source"})
        assert "open source" in member.search_haystack

    def test_haystack_not_serialized(self, club):
        assert "search_haystack" not in club[0].model_dump()


# ============================================
# Partition & grouping
# ============================================
class TestPartitionAndGroup:
    def test_partition_is_complete_and_stable(self, club):
        leaders, others = partition_leadership(club)
        assert [m.id for m in leaders] == [3, 5]
        assert [m.id for m in others] == [1, 2, 4, 6]
        assert len(leaders) + len(others) == len(club)

    def test_group_by_department(self, club):
        _, others = partition_leadership(club)
        groups = group_by_department(others)
        assert list(groups) == ["Web", "Design", "Other"]
        assert [m.id for m in groups["Web"]] == [1, 4]
        assert sum(len(members) for members in groups.values()) == len(others)

    def test_ann_and_bo_groups(self, ann_and_bo):
        _, others = partition_leadership(ann_and_bo)
        groups = group_by_department(others)
        assert list(groups) == ["Web"]
        assert [m.fullname for m in groups["Web"]] == ["Bo"]

    def test_empty_inputs(self):
        assert partition_leadership([]) == ([], [])
        assert group_by_department([]) == {}


# ============================================
# Index
# ============================================
class TestMemberSearchIndex:
    def test_browse_puts_leadership_first(self, club):
        index = MemberSearchIndex(club)
        directory = index.browse()
        names = [section.name for section in directory.sections]
        assert names == [LEADERSHIP_SECTION, "Web", "Design", "Other"]
        assert directory.sections[0].is_leadership is True
        assert directory.total_members == 6
        assert directory.total_matches == 6
        assert directory.leadership_count == 2

    def test_browse_without_leaders_has_no_leadership_section(self, club):
        index = MemberSearchIndex(club)
        directory = index.browse("web")
        assert [section.name for section in directory.sections] == ["Web"]
        assert directory.query == "web"
        assert directory.total_matches == 2

    def test_real_leadership_department_stays_separate(self):
        index = MemberSearchIndex.from_records([
            {"fullname": "A", "designation": ["President"]},
            {"fullname": "B", "designation": ["Coordinator"], "department": ["Leadership"]},
        ])
        sections = index.browse().sections
        assert [(s.name, s.is_leadership) for s in sections] == [("Leadership", True), ("Leadership", False)]

    def test_section_count_is_serialized(self, club):
        payload = MemberSearchIndex(club).browse().model_dump()
        assert payload["sections"][0]["count"] == 2

    def test_members_returns_copy(self, club):
        index = MemberSearchIndex(club)
        index.members.clear()
        assert len(index) == 6

    def test_groups_and_partition(self, club):
        index = MemberSearchIndex(club)
        assert [m.id for m in index.partition("a").leaders] == [3, 5]
        assert list(index.groups("react")) == ["Web"]
