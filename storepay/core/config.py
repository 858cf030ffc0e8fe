from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./storepay.db"

    # Payroll (Korean labour law, 2025 figures)
    PAYROLL_MINIMUM_WAGE: int = 10030
    PAYROLL_HOLIDAY_PAY_ELIGIBILITY_WEEKLY_HOURS: float = 15
    PAYROLL_OVERTIME_WEEKLY_THRESHOLD_HOURS: float = 40
    PAYROLL_OVERTIME_DAILY_THRESHOLD_HOURS: float = 8
    PAYROLL_OVERTIME_MULTIPLIER: float = 1.5
    PAYROLL_NIGHT_DIFFERENTIAL_MULTIPLIER: float = 0.5
    PAYROLL_NIGHT_WINDOW_START: str = "22:00"
    PAYROLL_NIGHT_WINDOW_END: str = "06:00"
    PAYROLL_AVERAGE_WEEKS_PER_MONTH: float = 4.345
    PAYROLL_FLAT_INSURANCE_RATE: float = 0.089
    PAYROLL_FLAT_INCOME_TAX_RATE: float = 0.03
    PAYROLL_OVERTIME_BASIS: str = "WEEKLY"
    PAYROLL_DEDUCT_BREAKS_FROM_NIGHT_HOURS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
