from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUSINESS_NAME: str = "Binge'N Celebration"
    BUSINESS_TIMEZONE: str = "Asia/Kolkata"
    BUSINESS_LOGO: str = "/BINGEN.png"
    SUPPORT_PHONE: str = "+91 99590 59632"
    SUPPORT_EMAIL: str = "bingencelebrations@gmail.com"

    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None
    SECURE_BOOKING_FUNCTION: str = "secure-booking"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    RAZORPAY_KEY_ID: str | None = None
    RAZORPAY_KEY_SECRET: str | None = None
    RAZORPAY_BASE_URL: str = "https://api.razorpay.com/v1"
    PAYMENT_CURRENCY: str = "INR"
    PAYMENT_THEME_COLOR: str = "#DB2777"

    ADVANCE_AMOUNT: int = 700
    DECORATION_FEE: int = 400
    COUPLE_VENUE_NAME: str = "Couple"

    FORM_RATE_LIMIT_MAX_REQUESTS: int = 5
    FORM_RATE_LIMIT_WINDOW_SECONDS: int = 60
    BOOKING_RATE_LIMIT_MAX_REQUESTS: int = 3
    BOOKING_RATE_LIMIT_WINDOW_SECONDS: int = 300


settings = Settings()
