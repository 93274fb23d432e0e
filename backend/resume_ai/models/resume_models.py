from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ResumeSection(BaseModel):
    """Resume sections use camelCase on the wire (fullName, gitHub, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


# ── Sub-Models ──────────────────────────────────────────────────────────────


class PersonalInformation(_ResumeSection):
    """Candidate contact details."""

    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    location: str = ""
    linkedin: str = ""
    git_hub: str = ""
    portfolio: str = ""


class SkillEntry(_ResumeSection):
    title: str = ""
    level: str = ""


class ExperienceEntry(_ResumeSection):
    """A single work experience entry."""

    job_title: str = ""
    company: str = ""
    location: str = ""
    duration: str = ""
    responsibility: str = ""


class EducationEntry(_ResumeSection):
    """A single education entry."""

    degree: str = ""
    university: str = ""
    location: str = ""
    graduation_year: str = ""


class CertificationEntry(_ResumeSection):
    title: str = ""
    issuing_organization: str = ""
    year: str = ""


class ProjectEntry(_ResumeSection):
    """A single project entry."""

    title: str = ""
    description: str = ""
    technologies_used: list[str] = []
    github_link: str = ""


class NamedEntry(_ResumeSection):
    """Languages and interests only carry a name."""

    name: str = ""


class AchievementEntry(_ResumeSection):
    title: str = ""
    year: str = ""
    extra_information: str = ""


# ── Main Resume Model ──────────────────────────────────────────────────────


class ResumeDocument(_ResumeSection):
    """Target shape of the /analyze response.

    Used for the OpenAPI schema only: the route returns the normalized model
    output as-is, so missing and extra fields reach the caller unchanged.
    """

    personal_information: PersonalInformation = Field(default_factory=PersonalInformation)
    summary: str = ""
    skills: list[SkillEntry] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    certifications: list[CertificationEntry] = []
    projects: list[ProjectEntry] = []
    languages: list[NamedEntry] = []
    interests: list[NamedEntry] = []
    achievements: list[AchievementEntry] = []


# ── Request / Gateway Models ────────────────────────────────────────────────


class ExtractionRequest(BaseModel):
    """Inbound body of POST /analyze."""

    model_config = ConfigDict(populate_by_name=True)

    # Missing field is treated like an empty description
    description: str = Field("", alias="userDescription")


class ChatMessage(BaseModel):
    role: str
    content: str


class GatewayRequest(BaseModel):
    """Chat-completion request sent to the model provider."""

    model: str
    messages: list[ChatMessage]


class GatewayChoice(BaseModel):
    message: ChatMessage


class GatewayResponse(BaseModel):
    """Chat-completion envelope returned by the model provider."""

    choices: list[GatewayChoice]
