"""
FastAPI wrapper for Auto SEO Headings.

This module exposes the suggestion engine and the block transforms as a
REST API. Authentication, nonce checks and sanitization of submitted
markup belong to the host that fronts this service.
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from auto_seo_headings import __version__
from auto_seo_headings.block_parser import BlockParseError, load_blocks
from auto_seo_headings.config import AnalyzerConfig
from auto_seo_headings.engine import SuggestionEngine
from auto_seo_headings.transform import (
    InvalidHeadingLevelError,
    transform_to_heading,
    transform_to_paragraph,
)

app = FastAPI(
    title="Auto SEO Headings API",
    description="Suggests converting short paragraphs into H2/H3 headings without modifying content",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SuggestionsRequest(BaseModel):
    """Request model for content analysis."""
    content: str = Field(..., description="Post content (block markup or HTML)")
    title: str = Field("", description="Post title, source of title keywords")
    focus_keyword: Optional[str] = Field(None, description="Optional focus keyword that biases towards H2")
    include_headings: bool = Field(
        False,
        description="Also analyze existing headings. Indexes then count paragraphs and headings together.",
    )
    enabled: bool = Field(True, description="Per-document switch; false returns no suggestions")


class SuggestionItem(BaseModel):
    """A single heading suggestion."""
    block_index: int
    text_content: str
    html_content: str
    suggested_level: int
    current_level: Optional[int] = None
    length: int
    confidence: int
    reasons: list[str] = Field(default_factory=list)


class SuggestionsResponse(BaseModel):
    """Response model for content analysis."""
    success: bool
    suggestions: list[SuggestionItem] = Field(default_factory=list)


class TransformRequest(BaseModel):
    """Request model for block transformation."""
    block_content: str = Field(..., description="Block markup to transform")
    heading_level: int = Field(..., description="Target heading level (2 or 3)")


class ParagraphRequest(BaseModel):
    """Request model for heading to paragraph conversion."""
    block_content: str = Field(..., description="Heading markup to convert")


class TransformResponse(BaseModel):
    """Response model for transformations."""
    success: bool
    transformed_content: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/suggestions", response_model=SuggestionsResponse)
async def get_suggestions(request: SuggestionsRequest):
    """
    Analyze post content and return heading suggestions.

    Suggestions never change the content; apply them with /api/transform.
    """
    config = AnalyzerConfig.live_editor() if request.include_headings else AnalyzerConfig.persisted()

    try:
        blocks = load_blocks(request.content)
    except BlockParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    suggestions = SuggestionEngine(config).analyze(
        blocks,
        title=request.title,
        user_keyword=request.focus_keyword,
        enabled=request.enabled,
    )

    return SuggestionsResponse(
        success=True,
        suggestions=[SuggestionItem(**s.to_dict()) for s in suggestions],
    )


@app.post("/api/transform", response_model=TransformResponse)
async def transform_block(request: TransformRequest):
    """Transform block markup into an H2 or H3 heading."""
    try:
        transformed = transform_to_heading(request.block_content, request.heading_level)
    except InvalidHeadingLevelError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TransformResponse(success=True, transformed_content=transformed)


@app.post("/api/convert-to-paragraph", response_model=TransformResponse)
async def convert_to_paragraph(request: ParagraphRequest):
    """Convert heading markup back into a paragraph."""
    return TransformResponse(
        success=True,
        transformed_content=transform_to_paragraph(request.block_content),
    )
