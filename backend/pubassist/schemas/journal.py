"""
Publication Assistant Backend - Journal Transfer Objects
=========================================================

What:  Pydantic models for the journal wire shape.
How:   FastAPI validates request bodies against these and serializes
       responses from them; Swagger docs are generated from the fields.

    JournalPostDTO: body of POST /api/Journals (no identifier; the store
                    assigns it)
    JournalDTO:     response body everywhere, and body of PATCH
                    /api/Journals (identifier required there)
"""

from typing import Optional

from pydantic import BaseModel, Field


class JournalPostDTO(BaseModel):
    """Fields a client supplies to create a journal."""
    title: str = Field(min_length=1, max_length=300, description="Full journal title")
    issn: str = Field(min_length=1, max_length=20, description="Print ISSN")
    eissn: Optional[str] = Field(
        default=None,
        max_length=20,
        description="Electronic ISSN (null if the journal has none)",
    )


class JournalDTO(JournalPostDTO):
    """A journal as exposed by the API."""
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")

    model_config = {"from_attributes": True}
