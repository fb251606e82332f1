"""Member search index for the team directory.

Turns raw member records into enriched, searchable members and arranges
them for browsing: a leadership section followed by one section per
primary department. Everything here is pure and synchronous; each call
returns freshly built lists.
"""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence

from syntax_club.schemas.member import (
    DepartmentSection,
    EnrichedMember,
    MemberRecord,
    TeamDirectoryResponse,
)

DEFAULT_DEPARTMENT = "Other"
DEFAULT_ROLE = "Member"
LEADERSHIP_SECTION = "Leadership"

# Normalized titles, see normalize_role()
LEADERSHIP_ROLES = frozenset({
    "president",
    "vice president",
    "general secretary",
    "secretary",
    "joint secretary",
    "treasurer",
    "technical head",
    "technical lead",
    "club lead",
    "faculty coordinator",
    "faculty advisor",
    "founder",
    "co founder",
})


class LeadershipPartition(NamedTuple):
    leaders: List[EnrichedMember]
    others: List[EnrichedMember]


def normalize_role(role: Optional[str]) -> str:
    """Lowercase a title and fold hyphens, underscores and repeated spaces."""
    if not role:
        return ""
    return " ".join(role.lower().replace("-", " ").replace("_", " ").split())


def is_leadership_role(role: Optional[str]) -> bool:
    return normalize_role(role) in LEADERSHIP_ROLES


def build_haystack(record: MemberRecord) -> str:
    """Lowercase, space-joined name, departments, roles and skills."""
    parts = [record.fullname, *record.department, *record.designation, *record.skills]
    if record.primary_department and record.primary_department not in record.department:
        parts.append(record.primary_department)
    if record.primary_role and record.primary_role not in record.designation:
        parts.append(record.primary_role)
    return " ".join(part.lower() for part in parts if part)


def to_record(raw: Any) -> MemberRecord:
    """Validate anything record-shaped (mapping, ORM row, schema) into a MemberRecord."""
    if isinstance(raw, MemberRecord):
        return raw
    if raw is None:
        return MemberRecord()
    return MemberRecord.model_validate(raw, from_attributes=True)


def enrich_member(raw: Any) -> EnrichedMember:
    record = to_record(raw)
    primary_department = record.primary_department or next(iter(record.department), DEFAULT_DEPARTMENT)
    primary_role = record.primary_role or next(iter(record.designation), DEFAULT_ROLE)

    data = record.model_dump(exclude={"is_leader", "primary_department", "primary_role"})
    return EnrichedMember(
        **data,
        primary_department=primary_department,
        primary_role=primary_role,
        # explicit flag and title-derived leadership are OR'd
        is_leader=bool(record.is_leader) or is_leadership_role(primary_role),
        search_haystack=build_haystack(record),
    )


def enrich(records: Iterable[Any]) -> List[EnrichedMember]:
    """Enrich every record, keeping input order and length."""
    return [enrich_member(raw) for raw in records or []]


def normalize_query(query: Optional[str]) -> str:
    return query.strip().lower() if isinstance(query, str) else ""


def filter_members(members: Sequence[EnrichedMember], query: Optional[str]) -> List[EnrichedMember]:
    """Substring match on the haystack; a blank query matches everything."""
    needle = normalize_query(query)
    if not needle:
        return list(members)
    return [member for member in members if needle in member.search_haystack]


def partition_leadership(members: Iterable[EnrichedMember]) -> LeadershipPartition:
    """Stable split into leaders and everyone else."""
    leaders: List[EnrichedMember] = []
    others: List[EnrichedMember] = []
    for member in members:
        (leaders if member.is_leader else others).append(member)
    return LeadershipPartition(leaders=leaders, others=others)


def group_by_department(others: Iterable[EnrichedMember]) -> Dict[str, List[EnrichedMember]]:
    """Group by primary department; keys appear in first-seen order."""
    groups: Dict[str, List[EnrichedMember]] = {}
    for member in others:
        groups.setdefault(member.primary_department, []).append(member)
    return groups


class MemberSearchIndex:
    """Enriched view over one snapshot of the member list."""

    def __init__(self, members: Sequence[EnrichedMember]):
        self._members = list(members)

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "MemberSearchIndex":
        return cls(enrich(records))

    def __len__(self) -> int:
        return len(self._members)

    @property
    def members(self) -> List[EnrichedMember]:
        return list(self._members)

    def search(self, query: Optional[str] = None) -> List[EnrichedMember]:
        return filter_members(self._members, query)

    def partition(self, query: Optional[str] = None) -> LeadershipPartition:
        return partition_leadership(self.search(query))

    def groups(self, query: Optional[str] = None) -> Dict[str, List[EnrichedMember]]:
        return group_by_department(self.partition(query).others)

    def browse(self, query: Optional[str] = None) -> TeamDirectoryResponse:
        """Leadership section first when non-empty, then departments."""
        leaders, others = self.partition(query)

        sections: List[DepartmentSection] = []
        if leaders:
            sections.append(DepartmentSection(name=LEADERSHIP_SECTION, is_leadership=True, members=leaders))
        for department, members in group_by_department(others).items():
            sections.append(DepartmentSection(name=department, members=members))

        return TeamDirectoryResponse(
            query=normalize_query(query),
            total_members=len(self._members),
            total_matches=len(leaders) + len(others),
            leadership_count=len(leaders),
            sections=sections,
        )
