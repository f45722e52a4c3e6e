"""Canonical data model: session identity, school records, search criteria."""

from dataclasses import dataclass, asdict, field, fields


@dataclass
class Identity:
    id: str
    username: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Identity":
        return cls(
            id=str(data.get("id", "")),
            username=str(data.get("username", "")),
            name=str(data.get("name", "")),
        )


@dataclass
class Session:
    identity: Identity
    credential: str


@dataclass
class DocumentRef:
    url: str = "#"


@dataclass
class School:
    id: str = ""
    school_name: str = ""
    city: str = ""
    contract_manager_name: str = ""
    phone_number: str = ""
    email: str = ""
    kindergarten_students: int = 0
    primary_1to4_students: int = 0
    primary_5to6_students: int = 0
    intermediate_1to2_students: int = 0
    intermediate_3_students: int = 0
    secondary_students: int = 0
    has_computer_lab: bool = False
    has_internet: bool = False
    commercial_registration: DocumentRef = field(default_factory=DocumentRef)
    contract_manager_id: DocumentRef = field(default_factory=DocumentRef)
    created_at: str = ""
    updated_at: str = ""

    @property
    def total_students(self) -> int:
        return (
            self.kindergarten_students
            + self.primary_1to4_students
            + self.primary_5to6_students
            + self.intermediate_1to2_students
            + self.intermediate_3_students
            + self.secondary_students
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SearchCriteria:
    """One optional text value per searchable School field."""

    school_name: str = ""
    city: str = ""
    contract_manager_name: str = ""
    phone_number: str = ""
    email: str = ""

    def is_blank(self) -> bool:
        return all(not (value or "").strip() for value in self.values().values())

    def values(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
