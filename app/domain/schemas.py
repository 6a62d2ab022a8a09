from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Literal, Optional, Union
from datetime import datetime


HEX_COLOR_PATTERN = r'^#(?:[0-9a-fA-F]{3}){1,2}$'
SLUG_PATTERN = r'^[a-z0-9-]+$'


class ApiModel(BaseModel):
    """Base for every wire model: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(ApiModel):
    message: str


# ============================================
# Structured JSON blobs
# ============================================

class CustomTexts(ApiModel):
    model_config = ConfigDict(extra="forbid")

    welcome_message: Optional[str] = None
    description: Optional[str] = None
    footer: Optional[str] = None


class SocialLinks(ApiModel):
    model_config = ConfigDict(extra="forbid")

    instagram: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    website: Optional[str] = None


class ContactInfo(ApiModel):
    model_config = ConfigDict(extra="forbid")

    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class Branding(ApiModel):
    """Gallery theme overrides. Keys beyond the known colours and font are kept."""
    model_config = ConfigDict(extra="allow")

    primary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    secondary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    accent_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    font_family: Optional[str] = None


class MediaItem(ApiModel):
    """A photo or video in a gallery. Unknown client keys are kept as-is."""
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    type: Literal["image", "video"] = "image"
    url: str = Field(..., min_length=1)
    thumbnail_url: Optional[str] = None
    caption: Optional[str] = None
    uploaded_at: Optional[str] = None


# ============================================
# Auth Schemas
# ============================================

class LoginRequest(ApiModel):
    # Presence is checked by the route so a missing field yields the login error message
    username: Optional[str] = None
    password: Optional[str] = None


class AdminSummary(ApiModel):
    id: int
    username: str


class AdminLoginResponse(ApiModel):
    success: bool = True
    admin: AdminSummary
    message: str


class CustomerSummary(ApiModel):
    id: int
    username: str
    email: str


# ============================================
# Customer Schemas
# ============================================

class CustomerCreate(ApiModel):
    username: str = Field(..., min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(..., min_length=1)


class CustomerUpdate(ApiModel):
    username: Optional[str] = Field(default=None, min_length=1, max_length=64)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def reject_null_fields(self):
        for name in ("username", "email", "password", "is_active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class CustomerResponse(ApiModel):
    id: int
    username: str
    email: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CustomerMutationResponse(ApiModel):
    customer: CustomerResponse
    message: str


# ============================================
# Customer Settings Schemas
# ============================================

class CustomerSettingsUpdate(ApiModel):
    site_name: Optional[str] = Field(default=None, min_length=1)
    profile_image_url: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    secondary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    accent_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    custom_texts: Optional[CustomTexts] = None
    social_links: Optional[SocialLinks] = None
    contact_info: Optional[ContactInfo] = None
    theme_id: Optional[str] = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in ("site_name", "primary_color", "secondary_color", "accent_color", "theme_id"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class CustomerSettingsResponse(ApiModel):
    id: int
    customer_id: int
    site_name: str
    profile_image_url: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: str
    secondary_color: str
    accent_color: str
    custom_texts: Optional[CustomTexts] = None
    social_links: Optional[SocialLinks] = None
    contact_info: Optional[ContactInfo] = None
    theme_id: str
    updated_at: Optional[datetime] = None


class SettingsMutationResponse(ApiModel):
    settings: CustomerSettingsResponse
    message: str


class CustomerLoginResponse(ApiModel):
    success: bool = True
    customer: CustomerSummary
    settings: Optional[CustomerSettingsResponse] = None
    message: str


# ============================================
# Usage Stats Schemas
# ============================================

class UsageStatsUpdate(ApiModel):
    total_views: Optional[int] = Field(default=None, ge=0)
    unique_visitors: Optional[int] = Field(default=None, ge=0)
    media_uploads: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def reject_null_counters(self):
        for name in ("total_views", "unique_visitors", "media_uploads"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class UsageStatsResponse(ApiModel):
    # id/customer_id are absent on the zero-valued placeholder used in listings
    id: Optional[int] = None
    customer_id: Optional[int] = None
    total_views: int = 0
    unique_visitors: int = 0
    media_uploads: int = 0
    last_activity: Optional[datetime] = None


class StatsMutationResponse(ApiModel):
    stats: UsageStatsResponse
    message: str


class CustomerWithStats(CustomerResponse):
    stats: UsageStatsResponse = Field(default_factory=UsageStatsResponse)


class CustomerProfileResponse(ApiModel):
    customer: Optional[CustomerResponse] = None
    settings: Optional[CustomerSettingsResponse] = None
    stats: Optional[UsageStatsResponse] = None


class PlatformStatsResponse(ApiModel):
    total_customers: int = 0
    active_customers: int = 0
    total_views: int = 0
    unique_visitors: int = 0
    media_uploads: int = 0


# ============================================
# Wedding Gallery Schemas
# ============================================

class GalleryCreate(ApiModel):
    """Request body for creating a gallery. The owner comes from the URL."""
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN, min_length=1, max_length=100)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    wedding_date: Optional[str] = None
    couple_names: str = Field(..., min_length=1)
    profile_image_url: Optional[str] = None
    welcome_message: Optional[str] = None
    custom_texts: Optional[CustomTexts] = None
    branding: Optional[Branding] = None
    media_items: list[MediaItem] = []
    is_published: bool = False


class GalleryUpdate(ApiModel):
    """Request body for a partial gallery update. All fields optional."""
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN, min_length=1, max_length=100)
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    wedding_date: Optional[str] = None
    couple_names: Optional[str] = Field(default=None, min_length=1)
    profile_image_url: Optional[str] = None
    welcome_message: Optional[str] = None
    custom_texts: Optional[CustomTexts] = None
    branding: Optional[Branding] = None
    media_items: Optional[list[MediaItem]] = None
    is_published: Optional[bool] = None

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in ("slug", "title", "couple_names", "media_items", "is_published"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class GalleryResponse(ApiModel):
    id: int
    customer_id: int
    slug: str
    title: str
    description: Optional[str] = None
    wedding_date: Optional[str] = None
    couple_names: str
    profile_image_url: Optional[str] = None
    welcome_message: Optional[str] = None
    custom_texts: Optional[CustomTexts] = None
    branding: Optional[Branding] = None
    media_items: list[MediaItem] = []
    is_published: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SlugAvailabilityResponse(ApiModel):
    available: bool
    reason: Optional[str] = None


# ============================================
# Legacy User Schemas
# ============================================

class UserCreate(ApiModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class UserResponse(ApiModel):
    id: int
    username: str
