from dataclasses import dataclass, field


@dataclass(frozen=True)
class TableSpec:
    """Declaration of one in-memory table.

    unique:      columns whose values may appear at most once in the table
    defaults:    column values applied when the caller omits them (or passes None)
    created:     columns stamped with the insertion time
    touched:     columns refreshed with the current time on every update
    """
    name: str
    unique: tuple[str, ...] = ()
    defaults: dict = field(default_factory=dict)
    created: tuple[str, ...] = ()
    touched: tuple[str, ...] = ()


DEFAULT_SITE_NAME = "My Wedding Gallery"
DEFAULT_PRIMARY_COLOR = "#8B5CF6"
DEFAULT_SECONDARY_COLOR = "#A855F7"
DEFAULT_ACCENT_COLOR = "#C084FC"
DEFAULT_THEME_ID = "default"


SCHEMA = (
    TableSpec(
        name="users",
        unique=("username",),
    ),
    TableSpec(
        name="admins",
        unique=("username",),
        created=("created_at",),
    ),
    TableSpec(
        name="customers",
        unique=("username", "email"),
        defaults={"is_active": True},
        created=("created_at", "updated_at"),
        touched=("updated_at",),
    ),
    TableSpec(
        name="customer_settings",
        unique=("customer_id",),
        defaults={
            "site_name": DEFAULT_SITE_NAME,
            "profile_image_url": None,
            "logo_url": None,
            "primary_color": DEFAULT_PRIMARY_COLOR,
            "secondary_color": DEFAULT_SECONDARY_COLOR,
            "accent_color": DEFAULT_ACCENT_COLOR,
            "custom_texts": None,
            "social_links": None,
            "contact_info": None,
            "theme_id": DEFAULT_THEME_ID,
        },
        created=("updated_at",),
        touched=("updated_at",),
    ),
    TableSpec(
        name="wedding_galleries",
        unique=("slug",),
        defaults={
            "description": None,
            "wedding_date": None,
            "profile_image_url": None,
            "welcome_message": None,
            "custom_texts": None,
            "branding": None,
            "media_items": [],
            "is_published": False,
        },
        created=("created_at", "updated_at"),
        touched=("updated_at",),
    ),
    TableSpec(
        name="usage_stats",
        unique=("customer_id",),
        defaults={
            "total_views": 0,
            "unique_visitors": 0,
            "media_uploads": 0,
        },
        created=("last_activity",),
        touched=("last_activity",),
    ),
)
