from pydantic import BaseModel, Field, model_validator

DEFAULT_MONTH_ABBREVIATIONS = [
    "Gen", "Feb", "Mar", "Apr", "Mag", "Giu",
    "Lug", "Ago", "Set", "Ott", "Nov", "Dic",
]

DEFAULT_MONTH_NAMES = [
    "Gennaio", "Febbraio", "Marzo", "Aprile", "Maggio", "Giugno",
    "Luglio", "Agosto", "Settembre", "Ottobre", "Novembre", "Dicembre",
]


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class LocaleRules(BaseModel):
    timezone: str = "Europe/Rome"
    month_abbreviations: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MONTH_ABBREVIATIONS)
    )
    month_names: list[str] = Field(default_factory=lambda: list(DEFAULT_MONTH_NAMES))

    @model_validator(mode="after")
    def _twelve_months(self) -> "LocaleRules":
        if len(self.month_abbreviations) != 12 or len(self.month_names) != 12:
            raise ValueError("locale month lists must have exactly 12 entries")
        return self


class SearchRules(BaseModel):
    min_query_length: int = Field(default=2, ge=0)


class ExpiringRules(BaseModel):
    window_days: int = Field(default=30, ge=0)


class TrendRules(BaseModel):
    months: int = Field(default=6, ge=1)


class CommissionRules(BaseModel):
    first_year: int = 2023
    last_year: int = 2050

    @model_validator(mode="after")
    def _ordered_range(self) -> "CommissionRules":
        if self.first_year > self.last_year:
            raise ValueError("commission.first_year must be <= commission.last_year")
        return self


class TrackedProviderRule(BaseModel):
    name: str
    label: str | None = None
    color_key: str | None = None


class ProvidersRules(BaseModel):
    energy: list[TrackedProviderRule]
    telephony: list[TrackedProviderRule]


class DirectoryRules(BaseModel):
    # Expiring alerts and the contract list use different fallbacks.
    unknown_client_label: str = "Sconosciuto"
    missing_client_label: str = "N/D"


class Rules(BaseModel):
    project: ProjectRules
    locale: LocaleRules = Field(default_factory=LocaleRules)
    search: SearchRules = Field(default_factory=SearchRules)
    expiring: ExpiringRules = Field(default_factory=ExpiringRules)
    trend: TrendRules = Field(default_factory=TrendRules)
    commission: CommissionRules = Field(default_factory=CommissionRules)
    providers: ProvidersRules
    directory: DirectoryRules = Field(default_factory=DirectoryRules)
