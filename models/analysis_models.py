from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

SkillCategory = Literal["technical", "soft"]


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Term(FrozenModel):
    text: str
    importance: float
    frequency: int


class Skill(FrozenModel):
    name: str
    category: SkillCategory
    frequency: int
    confidence: float = Field(ge=0, le=1)


class KeywordDetail(FrozenModel):
    term: str
    found: bool
    frequency: int
    importance: float


class KeywordMatchResult(FrozenModel):
    total_job_terms: int
    matched_count: int
    percentage: int = Field(ge=0, le=100)
    details: List[KeywordDetail]


class MatchedSkill(FrozenModel):
    name: str
    confidence: float
    category: SkillCategory


class MissingSkill(FrozenModel):
    name: str
    importance: float
    category: SkillCategory


class SkillMatchResult(FrozenModel):
    matched: List[MatchedSkill] = Field(max_length=15)
    missing: List[MissingSkill] = Field(max_length=10)


class SectionScore(FrozenModel):
    score: int = Field(ge=0, le=100)
    feedback: str


class FormattingSection(SectionScore):
    issues: List[str]


class KeywordDensitySection(SectionScore):
    matched_count: int
    total_count: int


class ExperienceSection(SectionScore):
    years_found: int
    relevant_experience: bool


class EducationSection(SectionScore):
    degree_found: bool
    relevant_degree: bool


class SkillsSection(SectionScore):
    technical_skills: int
    soft_skills: int


class SectionScores(FrozenModel):
    formatting: FormattingSection
    keywords: KeywordDensitySection
    experience: ExperienceSection
    education: EducationSection
    skills: SkillsSection

    def items(self):
        """(name, section) pairs in the fixed section order."""
        return [
            ("formatting", self.formatting),
            ("keywords", self.keywords),
            ("experience", self.experience),
            ("education", self.education),
            ("skills", self.skills),
        ]


class Suggestion(FrozenModel):
    category: str  # "keyword", "skill" or a section name
    priority: int = Field(ge=1, le=5)
    text: str
    impact_description: str


class AnalysisResult(FrozenModel):
    overall_score: int = Field(ge=0, le=100)
    matched_skills: List[MatchedSkill]
    missing_skills: List[MissingSkill]
    keyword_matches: KeywordMatchResult
    sections: SectionScores
    suggestions: List[Suggestion] = Field(max_length=8)
    readability_score: int = Field(ge=0, le=100)
    ats_compatibility_score: int = Field(ge=0, le=100)
    processing_time_ms: int


class ReportSummary(FrozenModel):
    total_skills: int
    matched_skills_count: int
    missing_skills_count: int
    keyword_match_percentage: int
    average_section_score: float
    high_priority_suggestions: int


class Insight(FrozenModel):
    type: Literal["success", "warning", "error", "info"]
    message: str


class AnalyzeRequest(BaseModel):
    resume_text: str
    job_description: str


class AnalyzeResponse(BaseModel):
    score: int
    analysis: AnalysisResult
    summary: ReportSummary
    insights: List[Insight]
    improvement_potential: int
