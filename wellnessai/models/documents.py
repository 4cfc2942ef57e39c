"""Wellness document (journal) models."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from wellnessai.models.base import CamelModel

DocumentType = Literal[
    "note", "symptom", "medication", "appointment", "test_result", "treatment", "goal"
]
DocumentStatus = Literal["draft", "published", "archived"]
SeverityLevel = Literal["low", "medium", "high"]
SentimentType = Literal["positive", "negative", "neutral"]
EvidenceLevel = Literal["high", "medium", "low"]

DOCUMENT_TYPES: tuple[str, ...] = (
    "note", "symptom", "medication", "appointment", "test_result", "treatment", "goal",
)

MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = 50_000


class MedicalCodes(CamelModel):
    icd10: str | None = None
    cpt: str | None = None
    snomed: str | None = None


class DocumentMetadata(CamelModel):
    severity: SeverityLevel | None = None
    category: str | None = None
    date: str | None = None
    location: str | None = None
    duration: str | None = None
    intensity: int | None = None
    priority: Literal["low", "medium", "high", "urgent"] | None = None
    confidence_score: float | None = None
    source_reliability: EvidenceLevel | None = None
    follow_up_required: bool | None = None
    related_conditions: list[str] | None = None
    medical_codes: MedicalCodes | None = None


class DocumentAttachment(CamelModel):
    id: str | None = None
    filename: str
    url: str
    type: str
    size: int = Field(..., ge=0)
    uploaded_at: datetime | None = None
    checksum: str | None = None
    thumbnail_url: str | None = None


class InsightFlags(CamelModel):
    requires_attention: bool = False
    potential_emergency: bool = False
    medication_interaction: bool = False


class DocumentInsights(CamelModel):
    """AI analysis attached to a document."""

    summary: str | None = None
    recommendations: list[str] = []
    risk_factors: list[str] = []
    keywords: list[str] = []
    sentiment: SentimentType | None = None
    confidence: float | None = None
    processing_time: float | None = None
    model: str | None = None
    last_generated: datetime | None = None
    flags: InsightFlags | None = None


class WellnessDocument(CamelModel):
    id: str
    title: str
    content: str
    type: DocumentType
    metadata: DocumentMetadata | None = None
    tags: list[str] = []
    ai_insights: DocumentInsights | None = None
    attachments: list[DocumentAttachment] = []
    status: DocumentStatus = "draft"
    word_count: int = 0
    character_count: int | None = None
    reading_time: float | None = None
    version: int | None = None
    last_modified_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    user_id: str | None = None
    shared_with: list[str] = []
    is_template: bool = False
    template_id: str | None = None


class CreateDocumentRequest(CamelModel):
    title: str
    content: str
    type: DocumentType = "note"
    metadata: DocumentMetadata | None = None
    tags: list[str] | None = None
    attachments: list[DocumentAttachment] | None = None
    status: DocumentStatus | None = None
    generate_insights: bool | None = None
    is_template: bool | None = None
    template_id: str | None = None


class UpdateDocumentRequest(CamelModel):
    title: str | None = None
    content: str | None = None
    type: DocumentType | None = None
    metadata: DocumentMetadata | None = None
    tags: list[str] | None = None
    status: DocumentStatus | None = None
    ai_insights: DocumentInsights | None = None
    attachments: list[DocumentAttachment] | None = None
    version: int | None = None


class SearchParams(CamelModel):
    q: str | None = None
    type: DocumentType | list[DocumentType] | None = None
    status: DocumentStatus | list[DocumentStatus] | None = None
    tags: str | list[str] | None = None
    severity: SeverityLevel | list[SeverityLevel] | None = None
    date_from: str | None = None
    date_to: str | None = None
    has_attachments: bool | None = None
    has_insights: bool | None = None
    requires_attention: bool | None = None
    category: str | None = None
    sort_by: Literal["createdAt", "updatedAt", "title", "wordCount", "relevance"] | None = None
    sort_order: Literal["asc", "desc"] | None = None
    limit: int | None = Field(default=None, ge=1)
    offset: int | None = Field(default=None, ge=0)
    page: int | None = Field(default=None, ge=1)
    page_size: int | None = Field(default=None, ge=1)


class Lifestyle(CamelModel):
    smoking_status: Literal["never", "former", "current"] | None = None
    alcohol_consumption: Literal["none", "occasional", "moderate", "heavy"] | None = None
    exercise_frequency: Literal["none", "light", "moderate", "intensive"] | None = None
    diet_type: str | None = None


class InsightContext(CamelModel):
    health_conditions: list[str] | None = None
    medications: list[str] | None = None
    allergies: list[str] | None = None
    age: int | None = None
    gender: str | None = None
    medical_history: list[str] | None = None
    current_symptoms: list[str] | None = None
    lifestyle: Lifestyle | None = None


class InsightOptions(CamelModel):
    include_recommendations: bool | None = None
    include_risk_factors: bool | None = None
    include_sentiment: bool | None = None
    generate_keywords: bool | None = None
    detail_level: Literal["basic", "detailed", "comprehensive"] | None = None


class GenerateInsightsRequest(CamelModel):
    content: str
    type: DocumentType | None = None
    context: InsightContext | None = None
    options: InsightOptions | None = None


class Pagination(CamelModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PaginatedDocuments(CamelModel):
    data: list[WellnessDocument]
    pagination: Pagination
    metadata: dict[str, Any] | None = None


class TagCount(CamelModel):
    tag: str
    count: int


class DocumentStats(CamelModel):
    total_documents: int = 0
    total_words: int = 0
    total_characters: int | None = None
    average_words_per_document: float | None = None
    by_type: dict[str, int] = {}
    by_status: dict[str, int] = {}
    by_severity: dict[str, int] | None = None
    by_time_range: dict[str, int] | None = None
    insights: dict[str, Any] | None = None


class FailedOperation(CamelModel):
    id: str
    error: str


class BatchOperationResult(CamelModel):
    successful: list[str] = []
    failed: list[FailedOperation] = []
    total: int = 0


class TemplateBody(CamelModel):
    title: str
    content: str
    metadata: DocumentMetadata | None = None
    tags: list[str] | None = None


class DocumentTemplate(CamelModel):
    id: str
    name: str
    description: str | None = None
    type: DocumentType
    template: TemplateBody
    is_public: bool = False
    created_at: datetime


class DateRange(CamelModel):
    # "from" is a keyword, hence the explicit alias
    start: str = Field(alias="from")
    to: str


class ExportOptions(CamelModel):
    format: Literal["json", "csv", "pdf", "docx"]
    include_attachments: bool | None = None
    include_insights: bool | None = None
    date_range: DateRange | None = None
    filters: SearchParams | None = None


class DocumentVersion(CamelModel):
    version: int
    changed_at: datetime
    changes: Any = None
