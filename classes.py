from dataclasses import dataclass, field


@dataclass(frozen=True)
class InstitutionName:
    name: str
    has_departments: bool = False
    hide_in_list: bool = False

    @staticmethod
    def from_assist(data: dict) -> "InstitutionName":
        return InstitutionName(
            name=data.get("name") or "",
            has_departments=bool(data.get("hasDepartments", False)),
            hide_in_list=bool(data.get("hideInList", False))
        )


@dataclass(frozen=True)
class Institution:
    id: int
    code: str
    is_community_college: bool
    names: tuple[InstitutionName, ...] = ()

    def has_name_containing(self, text: str) -> bool:
        return any(text in n.name for n in self.names)

    @staticmethod
    def from_assist(data: dict) -> "Institution":
        return Institution(
            id=data["id"],
            code=(data.get("code") or "").strip(),
            is_community_college=bool(data.get("isCommunityCollege", False)),
            names=tuple(InstitutionName.from_assist(n) for n in (data.get("names") or []))
        )


@dataclass(frozen=True)
class PartnerAgreement:
    institution_name: str
    source_institution_id: int | None
    is_community_college: bool
    academic_year_id: int | None

    @property
    def is_active(self) -> bool:
        return self.source_institution_id is not None and self.academic_year_id is not None


@dataclass(frozen=True)
class MajorReport:
    label: str
    key: str | None = None

    @staticmethod
    def from_assist(data: dict) -> "MajorReport":
        return MajorReport(label=data.get("label") or "", key=data.get("key"))


@dataclass
class MajorCatalog:
    receiving_institution_id: int
    majors: list[str] = field(default_factory=list)

    @property
    def default_major(self) -> str | None:
        return self.majors[0] if self.majors else None
