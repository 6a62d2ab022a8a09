"""Wedding gallery routes: owner management under /customer and /galleries, public reads under /gallery."""

import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_customer_repository, get_gallery_repository
from app.core.errors import ConflictError, NotFoundError, ValidationError, conflict_from_violation
from app.domain.schemas import (
    GalleryCreate,
    GalleryResponse,
    GalleryUpdate,
    MessageResponse,
    SlugAvailabilityResponse,
)
from app.repositories.customer import CustomerRepository
from app.repositories.gallery import GalleryRepository
from app.services.slug import slug_format_error, slugify
from database.memory import UniqueViolationError

logger = logging.getLogger(__name__)

router = APIRouter()

# Same body for missing and unpublished galleries so drafts are not discoverable
GALLERY_NOT_FOUND = "Gallery not found or not published"


@router.get("/customer/{customer_id}/galleries", response_model=list[GalleryResponse])
def list_customer_galleries(
    customer_id: int,
    galleries: GalleryRepository = Depends(get_gallery_repository),
):
    """Get all galleries owned by a customer, drafts included. Empty list if none."""
    return [GalleryResponse(**g) for g in galleries.get_by_customer(customer_id)]


@router.post(
    "/customer/{customer_id}/galleries",
    response_model=GalleryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_gallery(
    customer_id: int,
    data: GalleryCreate,
    galleries: GalleryRepository = Depends(get_gallery_repository),
    customers: CustomerRepository = Depends(get_customer_repository),
):
    """Create a gallery for a customer. The slug defaults to one derived from the title."""
    if not customers.get_by_id(customer_id):
        raise NotFoundError("Customer not found")

    slug = data.slug or slugify(data.title)
    if not slug:
        raise ValidationError(
            "Validation error",
            errors=[{
                "field": "slug",
                "message": "A slug could not be derived from the title",
                "type": "value_error",
            }],
        )

    if galleries.get_by_slug(slug):
        raise ConflictError("Slug already exists")

    fields = data.model_dump(exclude={"slug", "title", "couple_names"})
    try:
        gallery = galleries.create(
            customer_id=customer_id,
            slug=slug,
            title=data.title,
            couple_names=data.couple_names,
            **fields,
        )
    except UniqueViolationError as e:
        logger.warning(f"Gallery creation lost a uniqueness race: {e}")
        raise conflict_from_violation(e) from e

    logger.info(f"Created gallery {gallery['id']} '{slug}' for customer {customer_id}")
    return GalleryResponse(**gallery)


@router.get("/gallery/{slug}/available", response_model=SlugAvailabilityResponse, response_model_exclude_none=True)
def check_slug_availability(
    slug: str,
    galleries: GalleryRepository = Depends(get_gallery_repository),
):
    """Check whether a slug can be used for a new gallery."""
    reason = slug_format_error(slug)
    if reason:
        return SlugAvailabilityResponse(available=False, reason=reason)

    if galleries.get_by_slug(slug):
        return SlugAvailabilityResponse(available=False, reason="This URL is already taken")

    return SlugAvailabilityResponse(available=True)


@router.get("/gallery/{slug}", response_model=GalleryResponse)
def get_public_gallery(
    slug: str,
    galleries: GalleryRepository = Depends(get_gallery_repository),
):
    """Get a published gallery by slug (public)."""
    gallery = galleries.get_by_slug(slug)
    if not gallery or not gallery.get("is_published"):
        raise NotFoundError(GALLERY_NOT_FOUND)
    return GalleryResponse(**gallery)


@router.get("/galleries/{gallery_id}", response_model=GalleryResponse)
def get_gallery(
    gallery_id: int,
    galleries: GalleryRepository = Depends(get_gallery_repository),
):
    """Get a gallery by ID for its owner, published or not."""
    gallery = galleries.get_by_id(gallery_id)
    if not gallery:
        raise NotFoundError("Gallery not found")
    return GalleryResponse(**gallery)


@router.put("/galleries/{gallery_id}", response_model=GalleryResponse)
def update_gallery(
    gallery_id: int,
    data: GalleryUpdate,
    galleries: GalleryRepository = Depends(get_gallery_repository),
):
    """Partially update a gallery."""
    existing = galleries.get_by_id(gallery_id)
    if not existing:
        raise NotFoundError("Gallery not found")

    update_data = data.model_dump(exclude_unset=True)

    new_slug = update_data.get("slug")
    if new_slug and new_slug != existing["slug"]:
        holder = galleries.get_by_slug(new_slug)
        if holder and holder["id"] != gallery_id:
            raise ConflictError("Slug already exists")

    try:
        gallery = galleries.update(gallery_id, **update_data)
    except UniqueViolationError as e:
        raise conflict_from_violation(e) from e

    if not gallery:
        raise NotFoundError("Gallery not found")

    logger.info(f"Updated gallery {gallery_id}: {sorted(update_data)}")
    return GalleryResponse(**gallery)


@router.delete("/galleries/{gallery_id}", response_model=MessageResponse)
def delete_gallery(
    gallery_id: int,
    galleries: GalleryRepository = Depends(get_gallery_repository),
):
    """Permanently delete a gallery."""
    if not galleries.delete(gallery_id):
        raise NotFoundError("Gallery not found")

    logger.info(f"Deleted gallery {gallery_id}")
    return MessageResponse(message="Gallery deleted successfully")
