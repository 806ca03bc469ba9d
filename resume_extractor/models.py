from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    # Immutable once assembled; serialized in camelCase for downstream consumers
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class PersonalInfo(_Record):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None
    photo_url: Optional[str] = None


class Education(_Record):
    id: str
    institution: str = ""
    degree: str
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None
    location: Optional[str] = None
    achievements: Optional[List[str]] = None


class Skill(_Record):
    category: str = "General"
    items: List[str] = Field(default_factory=list)


class Experience(_Record):
    id: str
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    responsibilities: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)


class Project(_Record):
    id: str
    title: str
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    link: Optional[str] = None
    github: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)


class Certification(_Record):
    id: str
    name: str
    issuer: str = ""
    date: str = ""
    credential_id: Optional[str] = None


class CustomSection(_Record):
    title: str
    items: List[str] = Field(default_factory=list)


class ResumeData(_Record):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    custom_section: Optional[CustomSection] = None

    def to_dict(self) -> dict:
        """camelCase wire shape; unset optional fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
