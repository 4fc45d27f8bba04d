from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="COMICVERSE_")

    app_name: str = "ComicVerse Hub"
    debug: bool = False

    database_url: str = "sqlite:///comicverse.db"

    # Namespace for persisted state (one cart + one wishlist per profile)
    profile: str = "default"

    # Catalog fixture; None uses the packaged comics.json
    catalog_path: str | None = None

    cart_storage_key: str = "comicverse_cart"
    wishlist_storage_key: str = "comicverse_wishlist"

    search_debounce_ms: int = 300

    # Example sales tax shown on the cart page
    tax_rate: float = 0.08


settings = Settings()


# =============================================================================
# CART LIMITS
# =============================================================================

MIN_LINE_QUANTITY = 1

MAX_LINE_QUANTITY = 99
