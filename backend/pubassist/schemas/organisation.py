"""
Publication Assistant Backend - Organisation Unit Transfer Objects
===================================================================

What:  Pydantic models for faculties, institutes and divisions.

Relationships are flattened to the parent's identifier (`faculty_id`,
`institute_id`) instead of nesting the parent object. The same DTO is the
POST body (id ignored), the PATCH body (id required) and the response body.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FacultyDTO(BaseModel):
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    name: str = Field(min_length=1, max_length=200, description="Faculty name")

    model_config = {"from_attributes": True}


class InstituteDTO(BaseModel):
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    name: str = Field(min_length=1, max_length=200, description="Institute name")
    faculty_id: int = Field(description="Identifier of the owning faculty")

    model_config = {"from_attributes": True}


class DivisionDTO(BaseModel):
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    name: str = Field(min_length=1, max_length=200, description="Division name")
    institute_id: int = Field(description="Identifier of the owning institute")

    model_config = {"from_attributes": True}
