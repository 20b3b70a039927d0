"""Author schema models."""

from typing import Optional

from pydantic import BaseModel, Field

LocalizedText = dict[str, str]


class AuthorSchema(BaseModel):
    """Schema representing an imported submission author."""

    author_id: Optional[int] = Field(None, description="Identity assigned on insert")
    publication_id: int = Field(..., description="Publication the author is attached to")
    seq: int = Field(0, description="Position in the imported author list")
    primary_contact: bool = False
    include_in_browse: bool = False
    user_group_id: Optional[int] = Field(None, description="Resolved user group, if any")
    given_name: LocalizedText = Field(default_factory=dict, description="locale -> given name")
    family_name: LocalizedText = Field(default_factory=dict, description="locale -> family name")
    affiliation: LocalizedText = Field(default_factory=dict)
    biography: LocalizedText = Field(default_factory=dict)
    country: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    orcid: Optional[str] = None

    model_config = {"from_attributes": True}

    def full_name(self, locale: str) -> str:
        """Return "given family" for a locale, skipping missing parts."""
        parts = [self.given_name.get(locale), self.family_name.get(locale)]
        return " ".join(part for part in parts if part)
